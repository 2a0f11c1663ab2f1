# skyscan/path_planner/visualization/plotter.py
"""
Contains the PathVisualizer class for static 3D previews of a planned segment.
"""
import plotly.graph_objects as go
from typing import Optional

from ..data_models import PathSegment, TargetSurface


class PathVisualizer:
    """Builds plotly figures from a PathSegment for quick inspection."""

    def create_path_figure(self, segment: PathSegment, target: Optional[TargetSurface] = None,
                           title: str = '3D Survey Path') -> go.Figure:
        fig = go.Figure()
        xs = [wp.local.x for wp in segment.waypoints]
        ys = [wp.local.y for wp in segment.waypoints]
        zs = [wp.local.z for wp in segment.waypoints]
        labels = [str(wp.path_order) for wp in segment.waypoints]

        if target is not None and target.vertices:
            outline = list(target.vertices) + [target.vertices[0]]
            fig.add_trace(go.Scatter3d(x=[v[0] for v in outline], y=[v[1] for v in outline],
                                       z=[v[2] if len(v) > 2 else 0.0 for v in outline],
                                       mode='lines', line=dict(width=3, color='orange'),
                                       name=target.name or 'Target'))

        if segment.ground_projections:
            fig.add_trace(go.Scatter3d(x=[wp.local.x for wp in segment.ground_projections],
                                       y=[wp.local.y for wp in segment.ground_projections],
                                       z=[wp.local.z for wp in segment.ground_projections],
                                       mode='lines', line=dict(width=2, color='gray', dash='dash'),
                                       name='Ground Projection'))

        fig.add_trace(go.Scatter3d(x=xs, y=ys, z=zs, mode='lines+markers', line=dict(width=4),
                                   marker=dict(size=3), text=labels, name='Flight Path'))
        if xs:
            fig.add_trace(go.Scatter3d(x=[xs[0]], y=[ys[0]], z=[zs[0]], mode='markers',
                                       marker=dict(size=8, color='green', symbol='circle'), name='Takeoff'))
            fig.add_trace(go.Scatter3d(x=[xs[-1]], y=[ys[-1]], z=[zs[-1]], mode='markers',
                                       marker=dict(size=8, color='red', symbol='cross'), name='End'))

        fig.update_layout(title=title, scene=dict(xaxis_title='East (m)', yaxis_title='North (m)',
                                                  zaxis_title='Up (m)', aspectmode='data'),
                          margin=dict(r=20, l=10, b=10, t=40))
        return fig

    def save_path_figure(self, fig: go.Figure, filename: str) -> None:
        fig.write_html(filename)
