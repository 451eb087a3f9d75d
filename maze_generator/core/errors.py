class MazeError(Exception):
    """Base class for everything this package raises on purpose."""


class InvalidSizeError(MazeError, ValueError):
    """Width or height is not a positive integer. Raised before any generation work."""


class InvalidSeedError(MazeError, ValueError):
    pass


class InternalGeneratorError(MazeError, RuntimeError):
    """
    A generator's structural invariant broke (e.g. a cell missing from every set).
    This is a bug in the algorithm, not bad input.
    """


class RenderError(MazeError):
    """Text or SVG output could not be produced or written."""
