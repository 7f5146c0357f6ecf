# tsprep/core/config.py
from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Mapping

from .exceptions import InvalidConfig
from .fill import FILL_METHODS


@dataclass(frozen=True, slots=True)
class PreprocessConfig:
    """
    Settings for :func:`tsprep.pipeline.preprocess`.

    - fill_method: imputation strategy name ("linear" or "nearest")
    - trim: strip boundary NaNs (trailing, then leading) before filling
    - num_lags: if set, compute autocorrelation at lags 1..num_lags
    - max_lag: if set, fit an AR model of that order
    - attrs: arbitrary additional fields
    """
    fill_method: str = "linear"
    trim: bool = True
    num_lags: int | None = None
    max_lag: int | None = None
    attrs: dict[str, Any] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        if self.fill_method not in FILL_METHODS:
            raise InvalidConfig(
                f"fill_method must be one of {FILL_METHODS}, got {self.fill_method!r}."
            )
        if not isinstance(self.trim, bool):
            raise InvalidConfig("trim must be a bool.")

        for name in ("num_lags", "max_lag"):
            value = getattr(self, name)
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise InvalidConfig(f"{name} must be a positive int or None, got {value!r}.")

        if self.attrs is None:
            object.__setattr__(self, "attrs", {})
        elif not isinstance(self.attrs, dict):
            raise InvalidConfig("PreprocessConfig.attrs must be a dict.")

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "PreprocessConfig":
        """Build a config from a plain mapping, rejecting unknown keys."""
        if not isinstance(mapping, Mapping):
            raise InvalidConfig("config must be a mapping (e.g., dict).")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(mapping) - known)
        if unknown:
            raise InvalidConfig(f"Unknown config keys: {', '.join(map(str, unknown))}.")
        return cls(**mapping)
