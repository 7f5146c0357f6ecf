# tsprep/core/model.py
from __future__ import annotations

import logging
from typing import Any, Protocol, runtime_checkable

import numpy as np
from statsmodels.tsa.ar_model import AutoReg

from .trim import as_values

logger = logging.getLogger(__name__)


@runtime_checkable
class ARFitter(Protocol):
    """Callable that fits an autoregressive model to a gap-free series."""

    def __call__(self, values: np.ndarray, max_lag: int) -> Any: ...


def fit_autoreg(values: np.ndarray, max_lag: int) -> Any:
    """Default fitter: AR(max_lag) with a constant term, via statsmodels."""
    return AutoReg(values, lags=max_lag, trend="c").fit()


def ar(values: Any, max_lag: int, *, fitter: ARFitter | None = None) -> Any:
    """
    Hand ``values`` and ``max_lag`` to ``fitter`` and return its result as is.

    ``values`` must not contain NaNs (run it through the fill functions
    first). Nothing is validated here; the fitter owns its preconditions.
    """
    fit = fitter if fitter is not None else fit_autoreg
    logger.debug(
        "Fitting AR model with %s (max_lag=%s)",
        getattr(fit, "__name__", type(fit).__name__),
        max_lag,
    )
    return fit(as_values(values), max_lag)
