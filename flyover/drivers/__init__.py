# flyover/drivers/__init__.py
"""
Schedulers over the pure trajectory core: a wall-clock driver for live
preview and a frame-indexed driver for export.
"""

from .interactive import InteractiveDriver, DriverStatus, MapSurface, relevel_view
from .frame_exact import FrameExactDriver

__all__ = [
    'InteractiveDriver',
    'DriverStatus',
    'MapSurface',
    'relevel_view',
    'FrameExactDriver'
]
