# skyscan/camera/exceptions.py

class CameraModelError(Exception):
    """Base exception for camera and optics model errors."""
    pass

class InvalidCameraSpecsError(CameraModelError):
    """Raised when a sensor or lens value cannot be used."""
    def __init__(self, field_name, value, message="Invalid camera specification"):
        self.field_name = field_name
        self.value = value
        super().__init__(f"{message}: {field_name}={value}")
