"""Errors raised while building a diagram. Everything is raised to the caller of the render entry point."""


class DiagramError(Exception):
    """Base class for all diagram rendering errors"""


class ConfigError(DiagramError):
    """Unknown option or out-of-range value. Raised before anything gets drawn."""


class DataError(DiagramError):
    """Annotation data the renderer cannot interpret (off-board square, square without an occupant, ...)"""
