"""Exceptions raised by the pathfinding domain."""


class PathfinderError(ValueError):
    """Base class for pathfinding errors."""


class MissingEndpointError(PathfinderError):
    """Raised when a search is requested without both start and end placed."""

    def __init__(self, message: str = "Please set both start and end points"):
        super().__init__(message)


class PathNotFoundError(PathfinderError):
    """Raised when the frontier is exhausted without reaching the goal."""

    def __init__(self, message: str = "No path found!"):
        super().__init__(message)
