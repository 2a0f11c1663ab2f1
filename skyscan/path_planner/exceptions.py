# skyscan/path_planner/exceptions.py
"""
Path planning exceptions. These are raised inside the planner and converted
into GenerationResult.error at the SurveyPlanner boundary.
"""

class PathPlanningError(Exception):
    """Base exception for flight path synthesis errors."""
    pass

class InvalidParameterError(PathPlanningError):
    """A scalar input is out of range."""
    def __init__(self, parameter, value, message="Invalid parameter"):
        self.parameter = parameter
        self.value = value
        super().__init__(f"{message}: {parameter}={value}")

class MissingInputError(PathPlanningError):
    """A required input (camera, takeoff point, target) was not supplied."""
    def __init__(self, name, message="Missing required input"):
        self.name = name
        super().__init__(f"{message}: {name}")

class EmptyCoverageError(PathPlanningError):
    """A coverage strategy produced no points."""
    def __init__(self, strategy, message="Coverage generation produced no points"):
        self.strategy = strategy
        super().__init__(f"{message} [strategy: {strategy}]")
