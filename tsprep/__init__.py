# tsprep/__init__.py
"""
tsprep: preprocessing primitives for univariate numeric series.

Boundary NaN trimming, interior gap filling, lagged autocorrelation and a
thin adapter to an autoregression fitter, plus a small pipeline composing
them. Everything public lives in ``tsprep.core``; it is re-exported here.
"""

from tsprep.core import (
    Series,
    PreprocessConfig,
    first_not_nan,
    last_not_nan,
    trim_leading,
    trim_trailing,
    FILL_METHODS,
    fill_ts,
    fill_nearest,
    fill_linear,
    fill_next,
    fill_previous,
    autocorr,
    ARFitter,
    ar,
    fit_autoreg,
    CoreError,
    InvalidSeries,
    InvalidInput,
    InvalidConfig,
    UnsupportedFillMethod,
    FillNotImplemented,
)
from tsprep.pipeline import PreprocessResult, preprocess


__all__ = [
    "Series",
    "PreprocessConfig",
    "PreprocessResult",
    "preprocess",
    "first_not_nan",
    "last_not_nan",
    "trim_leading",
    "trim_trailing",
    "FILL_METHODS",
    "fill_ts",
    "fill_nearest",
    "fill_linear",
    "fill_next",
    "fill_previous",
    "autocorr",
    "ARFitter",
    "ar",
    "fit_autoreg",
    "CoreError",
    "InvalidSeries",
    "InvalidInput",
    "InvalidConfig",
    "UnsupportedFillMethod",
    "FillNotImplemented",
]
