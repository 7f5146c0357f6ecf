# tsprep/core/exceptions.py
from __future__ import annotations


class CoreError(Exception):
    """Base error for all tsprep exceptions."""


# ---- Validation / construction errors ----
class InvalidSeries(CoreError, ValueError):
    """Raised when an input cannot be read as a 1D numeric series."""


class InvalidInput(CoreError, ValueError):
    """Raised when a series is well-formed but unusable for the operation."""


class InvalidConfig(CoreError, ValueError):
    """Raised when a PreprocessConfig is constructed with invalid fields."""


# ---- Fill dispatch errors ----
class UnsupportedFillMethod(CoreError, ValueError):
    """Raised when a fill method name is not recognized."""


class FillNotImplemented(CoreError, NotImplementedError):
    """Raised by fill strategies that are declared but not available."""
