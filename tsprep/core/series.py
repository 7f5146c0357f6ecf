# tsprep/core/series.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np

from .autocorr import autocorr
from .exceptions import InvalidSeries
from .fill import fill_linear, fill_nearest, fill_ts
from .model import ARFitter, ar
from .trim import first_not_nan, last_not_nan, trim_leading, trim_trailing


@dataclass(frozen=True, slots=True)
class Series:
    """Immutable univariate series: 1D float64 values indexed by position."""

    values: np.ndarray = field(repr=False)
    name: str | None = None
    unit: str | None = None
    attrs: dict[str, Any] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        v = np.array(self.values, dtype=np.float64)
        if v.ndim != 1:
            raise InvalidSeries(f"`values` must be 1D, got shape {v.shape}")
        v.setflags(write=False)

        if self.attrs is None:
            object.__setattr__(self, "attrs", {})
        elif not isinstance(self.attrs, dict):
            raise InvalidSeries("`attrs` must be a dict.")

        object.__setattr__(self, "values", v)

    @property
    def n(self) -> int:
        return int(self.values.size)

    def __len__(self) -> int:
        return self.n

    def has_missing(self) -> bool:
        return bool(np.isnan(self.values).any())

    def first_not_nan(self) -> int:
        return first_not_nan(self.values)

    def last_not_nan(self) -> int:
        return last_not_nan(self.values)

    # Transforms return new Series carrying the same name/unit/attrs
    def trim_leading(self) -> "Series":
        return self._with_values(trim_leading(self.values))

    def trim_trailing(self) -> "Series":
        return self._with_values(trim_trailing(self.values))

    def fill(self, method: str) -> "Series":
        return self._with_values(fill_ts(self.values, method))

    def fill_nearest(self) -> "Series":
        return self._with_values(fill_nearest(self.values))

    def fill_linear(self) -> "Series":
        return self._with_values(fill_linear(self.values))

    def autocorr(self, num_lags: int) -> np.ndarray:
        return autocorr(self.values, num_lags)

    def ar(self, max_lag: int, *, fitter: ARFitter | None = None) -> Any:
        return ar(self.values, max_lag, fitter=fitter)

    def to_numpy(self, *, copy: bool = False) -> np.ndarray:
        if copy:
            return self.values.copy()
        return self.values

    def _with_values(self, values: np.ndarray) -> "Series":
        return Series(
            values=values,
            name=self.name,
            unit=self.unit,
            attrs=self.attrs.copy(),
        )
