# tsprep/core/fill.py
"""
Missing-value imputation for position-indexed series.

Only interior gaps are closed: nothing here extrapolates past the first or
last known value, and index 0 is never filled. Trim the series first when
boundary NaNs matter.
"""
from __future__ import annotations

import logging
from typing import Any, Callable

import numpy as np

from .exceptions import FillNotImplemented, InvalidInput, UnsupportedFillMethod
from .trim import as_values

logger = logging.getLogger(__name__)


def fill_nearest(values: Any) -> np.ndarray:
    """
    Replace each NaN (from index 1 on) with the closest known value.

    When the previous and next known values are equally far away, the next
    one wins. If nothing is known after a gap, the previous value is used.

    Raises
    ------
    InvalidInput
        If a gap has no known value on either side (all-NaN input).
    """
    result = as_values(values).copy()
    n = result.size

    # index 0 is a source but never a target
    last_existing = 0 if n and not np.isnan(result[0]) else -1
    next_existing = -1

    for i in range(1, n):
        if not np.isnan(result[i]):
            last_existing = i
            continue

        if next_existing < i:
            next_existing = i + 1
            while next_existing < n and np.isnan(result[next_existing]):
                next_existing += 1

        if last_existing < 0 and next_existing >= n:
            raise InvalidInput("Input is all NaNs.")

        if next_existing >= n or (
            last_existing >= 0 and i - last_existing < next_existing - i
        ):
            result[i] = result[last_existing]
        else:
            result[i] = result[next_existing]

    return result


def fill_linear(values: Any) -> np.ndarray:
    """
    Linearly interpolate interior runs of NaNs.

    A run is filled only if it has a known value right before it and is
    closed by a known value (which may be the last element). Unclosed
    trailing runs are left as NaN, so applying this twice is a no-op.
    """
    result = as_values(values).copy()
    n = result.size

    i = 1
    while i < n - 1:
        start = i
        while i < n - 1 and np.isnan(result[i]):
            i += 1

        before = result[start - 1]
        after = result[i]
        if i != start and not np.isnan(before) and not np.isnan(after):
            increment = (after - before) / (i - (start - 1))
            for j in range(start, i):
                result[j] = result[j - 1] + increment
        i += 1

    return result


def fill_next(values: Any) -> np.ndarray:
    raise FillNotImplemented("fill_next is not implemented.")


def fill_previous(values: Any) -> np.ndarray:
    raise FillNotImplemented("fill_previous is not implemented.")


_FILLERS: dict[str, Callable[[Any], np.ndarray]] = {
    "linear": fill_linear,
    "nearest": fill_nearest,
}

FILL_METHODS: tuple[str, ...] = tuple(_FILLERS)


def fill_ts(values: Any, method: str) -> np.ndarray:
    """Fill NaNs using the strategy named by ``method`` ("linear" or "nearest")."""
    try:
        filler = _FILLERS[method]
    except (KeyError, TypeError) as e:
        raise UnsupportedFillMethod(
            f"Unsupported fill method {method!r}; expected one of {FILL_METHODS}."
        ) from e

    logger.debug("Filling series with method=%s", method)
    return filler(values)
