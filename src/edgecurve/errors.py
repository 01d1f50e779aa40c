"""Exceptions raised by edgecurve."""


class EdgeCurveError(Exception):
    """Base exception for edgecurve errors."""

    pass


class InvalidBufferError(EdgeCurveError, ValueError):
    """Pixel data does not have a usable (H, W, 3|4) shape."""

    pass


class SingularMatrixError(EdgeCurveError, ArithmeticError):
    """Linear system has a zero pivot or produced non-finite values."""

    pass
