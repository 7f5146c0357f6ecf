# tsprep/core/trim.py
from __future__ import annotations

from typing import Any

import numpy as np

from .exceptions import InvalidSeries


def as_values(values: Any) -> np.ndarray:
    """Coerce an array-like into a 1D float64 array (no copy if already one)."""
    v = np.asarray(values, dtype=np.float64)
    if v.ndim != 1:
        raise InvalidSeries(f"series must be 1D, got shape {v.shape}")
    return v


def first_not_nan(values: Any) -> int:
    """Index of the first non-NaN value, or ``len(values)`` if there is none."""
    v = as_values(values)
    known = np.flatnonzero(~np.isnan(v))
    return int(known[0]) if known.size else int(v.size)


def last_not_nan(values: Any) -> int:
    """Index of the last non-NaN value, or ``-1`` if there is none."""
    v = as_values(values)
    known = np.flatnonzero(~np.isnan(v))
    return int(known[-1]) if known.size else -1


def trim_leading(values: Any) -> np.ndarray:
    """Drop the leading run of NaNs. All-NaN input gives an empty array."""
    v = as_values(values)
    start = first_not_nan(v)
    if start < v.size:
        return v[start:].copy()
    return np.empty(0, dtype=np.float64)


def trim_trailing(values: Any) -> np.ndarray:
    """
    Keep ``values[0:last_not_nan(values)]``.

    The boundary is exclusive: the last non-NaN element is dropped along with
    the NaNs after it. Callers composing this with :func:`trim_leading` must
    account for that.
    """
    v = as_values(values)
    end = last_not_nan(v)
    if end > 0:
        return v[:end].copy()
    return np.empty(0, dtype=np.float64)
