# core/errors.py


class RenderError(Exception):
    """Base class for every error raised by the renderer."""


class DegenerateGeometryError(RenderError, ValueError):
    """
    Raised when a scene or camera cannot be built because its geometry is
    degenerate (zero-length vectors, non-positive radii, collapsed frames).
    """


class ColorRangeError(RenderError, ValueError):
    """
    Raised when a linear color cannot be quantized to 8 bits. This signals
    a logic error upstream (negative or NaN radiance), never bad input.
    """
