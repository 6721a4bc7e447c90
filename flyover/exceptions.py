# flyover/exceptions.py
"""
Flyover Exceptions
Standardized error types for trajectory generation and playback
"""

class FlyoverError(Exception):
    """Base class for all flyover errors"""
    pass

class InvalidInputError(FlyoverError):
    """Raised when waypoints or driver arguments cannot produce a flight"""
    pass

class ConfigurationError(FlyoverError):
    """Invalid flight configuration detected"""
    def __init__(self, config_name, message="Configuration error"):
        self.config_name = config_name
        super().__init__(f"{message}: {config_name}")

class RenderingSurfaceError(FlyoverError):
    """The external map surface rejected a view state"""
    def __init__(self, message="Map surface failure", frame=None):
        self.frame = frame
        super().__init__(f"{message} [Frame: {frame}]" if frame is not None else message)
