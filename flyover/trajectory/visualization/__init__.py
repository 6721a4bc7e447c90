# flyover/trajectory/visualization/__init__.py
from .plotter import TrajectoryVisualizer
