# tsprep/core/__init__.py
"""
Core preprocessing primitives for tsprep.

This module defines the position-indexed series model and its transforms:
- trim: boundary NaN scanning and trimming
- fill: nearest / linear imputation of interior gaps
- autocorr: per-lag Pearson autocorrelation
- model: pass-through to an autoregression fitter
- Series: immutable value type exposing the above as methods

The core layer does no I/O and keeps no state between calls.
"""

from .series import Series
from .config import PreprocessConfig
from .trim import as_values, first_not_nan, last_not_nan, trim_leading, trim_trailing
from .fill import (
    FILL_METHODS,
    fill_ts,
    fill_nearest,
    fill_linear,
    fill_next,
    fill_previous,
)
from .autocorr import autocorr
from .model import ARFitter, ar, fit_autoreg
from .exceptions import (
    CoreError,
    InvalidSeries,
    InvalidInput,
    InvalidConfig,
    UnsupportedFillMethod,
    FillNotImplemented,
)


__all__ = [
    # value types
    "Series",
    "PreprocessConfig",

    # trimming
    "as_values",
    "first_not_nan",
    "last_not_nan",
    "trim_leading",
    "trim_trailing",

    # imputation
    "FILL_METHODS",
    "fill_ts",
    "fill_nearest",
    "fill_linear",
    "fill_next",
    "fill_previous",

    # statistics / models
    "autocorr",
    "ARFitter",
    "ar",
    "fit_autoreg",

    # exceptions
    "CoreError",
    "InvalidSeries",
    "InvalidInput",
    "InvalidConfig",
    "UnsupportedFillMethod",
    "FillNotImplemented",
]
