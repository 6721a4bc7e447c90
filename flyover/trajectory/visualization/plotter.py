# flyover/trajectory/visualization/plotter.py
"""
Contains the TrajectoryVisualizer class for inspecting a built trajectory
on an interactive 2D map and in a 3D lon/lat/altitude plot.
"""
import logging
from typing import Optional, Sequence

import folium
import plotly.graph_objects as go

from ..data_models import Trajectory, ViewState, Waypoint

logger = logging.getLogger(__name__)

class TrajectoryVisualizer:
    """Debug views of a trajectory; the live map and export renderer never use this."""

    def create_map(self, trajectory: Trajectory, waypoints: Sequence[Waypoint] = (),
                   views: Optional[Sequence[ViewState]] = None) -> folium.Map:
        """Folium map with the flight and orbit overlays, waypoint markers and optional camera track."""
        if not trajectory.flight_path:
            raise ValueError("Cannot plot an empty trajectory")

        origin = trajectory.flight_path[0]
        m = folium.Map(location=[origin.latitude, origin.longitude], zoom_start=12, tiles="CartoDB positron")

        folium.GeoJson(
            trajectory.to_geojson(),
            name="Trajectory",
            style_function=lambda feature: {
                "color": "blue" if feature["properties"]["name"] == "flight-path" else "orange",
                "weight": 3,
                "opacity": 0.8,
            },
        ).add_to(m)

        for wp in waypoints:
            label = wp.label or f"Waypoint {wp.sequence_index}"
            folium.Marker(
                location=[wp.latitude, wp.longitude],
                popup=f"<b>{label}</b><br>Alt: {wp.altitude:.2f}",
                icon=folium.Icon(color='green', icon='camera', prefix='fa')
            ).add_to(m)

        if views:
            folium.PolyLine(
                locations=[(v.latitude, v.longitude) for v in views],
                color='red', weight=1, opacity=0.6, popup="Camera track"
            ).add_to(m)

        folium.LayerControl().add_to(m)
        return m

    def create_3d_plot(self, trajectory: Trajectory) -> go.Figure:
        fig = go.Figure()
        for name, path in (("Flight path", trajectory.flight_path), ("Orbit", trajectory.orbit_path)):
            if not path:
                continue
            lons = [p.longitude for p in path]; lats = [p.latitude for p in path]; alts = [p.altitude for p in path]
            fig.add_trace(go.Scatter3d(x=lons, y=lats, z=alts, mode='lines', line=dict(width=4), name=name))
        fig.update_layout(title='Camera Trajectory', scene=dict(xaxis_title='Longitude', yaxis_title='Latitude', zaxis_title='Altitude (normalized)', aspectratio=dict(x=1, y=1, z=0.5)), margin=dict(r=20, l=10, b=10, t=40))
        return fig

    def save_map(self, m: folium.Map, filename: str) -> None:
        m.save(filename)
        logger.info(f"Interactive 2D map written to '{filename}'.")

    def save_3d_plot(self, fig: go.Figure, filename: str) -> None:
        fig.write_html(filename)
        logger.info(f"Interactive 3D plot written to '{filename}'.")
