# tsprep/pipeline.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from tsprep.core import (
    ARFitter,
    PreprocessConfig,
    Series,
    ar,
    as_values,
    autocorr,
    fill_ts,
    trim_leading,
    trim_trailing,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PreprocessResult:
    values: np.ndarray = field(repr=False)
    autocorr: np.ndarray | None = field(default=None, repr=False)
    model: Any = None
    config: PreprocessConfig = field(default_factory=PreprocessConfig)


def preprocess(
    values: Any,
    config: PreprocessConfig | None = None,
    *,
    fitter: ARFitter | None = None,
) -> PreprocessResult:
    """
    Run trim -> fill -> autocorr / ar on a single series.

    Trimming applies ``trim_trailing`` before ``trim_leading``, so the last
    known value is dropped along with the trailing NaNs.
    """
    cfg = config if config is not None else PreprocessConfig()
    v = as_values(values.values if isinstance(values, Series) else values)
    logger.debug("Preprocessing series of length %d with %r", v.size, cfg)

    if cfg.trim:
        v = trim_leading(trim_trailing(v))
        logger.debug("Trimmed series to length %d", v.size)

    v = fill_ts(v, cfg.fill_method)

    corrs = autocorr(v, cfg.num_lags) if cfg.num_lags is not None else None
    model = ar(v, cfg.max_lag, fitter=fitter) if cfg.max_lag is not None else None

    return PreprocessResult(values=v, autocorr=corrs, model=model, config=cfg)
