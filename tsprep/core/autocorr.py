# tsprep/core/autocorr.py
from __future__ import annotations

from typing import Any

import numpy as np

from .exceptions import InvalidInput
from .trim import as_values


def autocorr(values: Any, num_lags: int) -> np.ndarray:
    """
    Sample autocorrelation at lags ``1..num_lags``.

    Each lag ``k`` is the Pearson correlation between ``x[k:]`` and
    ``x[:n-k]``, each slice centred on its own mean. This is not the textbook
    estimator that uses the full-series mean and variance.

    A constant slice gives NaN for that lag. ``num_lags`` must stay below the
    series length; larger values give degenerate output.
    """
    if num_lags < 0:
        raise InvalidInput(f"num_lags must be >= 0, got {num_lags}")

    x = as_values(values)
    n = x.size
    corrs = np.empty(num_lags, dtype=np.float64)

    for k in range(1, num_lags + 1):
        a = x[k:]
        b = x[: n - k]
        da = a - a.mean()
        db = b - b.mean()
        covariance = np.sum(da * db)
        with np.errstate(divide="ignore", invalid="ignore"):
            corrs[k - 1] = covariance / (
                np.sqrt(np.sum(da * da)) * np.sqrt(np.sum(db * db))
            )

    return corrs
