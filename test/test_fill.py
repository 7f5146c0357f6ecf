# test/test_fill.py
import numpy as np
import pytest

from tsprep.core.fill import (
    FILL_METHODS,
    fill_linear,
    fill_nearest,
    fill_next,
    fill_previous,
    fill_ts,
)
from tsprep.core.trim import trim_leading, trim_trailing
from tsprep.core.exceptions import (
    FillNotImplemented,
    InvalidInput,
    UnsupportedFillMethod,
)

nan = np.nan


def _same(a, b):
    return np.allclose(a, b, equal_nan=True) and a.shape == np.asarray(b).shape


# ---- nearest ----
def test_fill_nearest_two_gap_picks_closest_side():
    out = fill_nearest([1.0, nan, nan, 4.0])
    assert _same(out, [1.0, 1.0, 4.0, 4.0])


def test_fill_nearest_tie_goes_to_next_value():
    out = fill_nearest([1.0, nan, 3.0])
    assert _same(out, [1.0, 3.0, 3.0])


def test_fill_nearest_mixed_gap_and_leading_nan():
    out = fill_nearest([nan, 1.0, nan, nan, nan, 5.0])
    assert _same(out, [nan, 1.0, 1.0, 5.0, 5.0, 5.0])


def test_fill_nearest_never_fills_index_zero():
    out = fill_nearest([nan, nan, 2.0])
    assert np.isnan(out[0])
    assert out[1] == 2.0


def test_fill_nearest_trailing_gap_uses_previous():
    out = fill_nearest([1.0, 2.0, nan, nan])
    assert _same(out, [1.0, 2.0, 2.0, 2.0])


def test_fill_nearest_all_missing_raises():
    with pytest.raises(InvalidInput):
        fill_nearest([nan, nan, nan])


def test_fill_nearest_does_not_mutate_input():
    v = np.array([1.0, nan, 3.0])
    fill_nearest(v)
    assert np.isnan(v[1])


def test_fill_nearest_short_inputs():
    assert fill_nearest([]).size == 0
    assert _same(fill_nearest([7.0]), [7.0])


# ---- linear ----
def test_fill_linear_interior_gap():
    out = fill_linear([2.0, nan, nan, 8.0])
    assert _same(out, [2.0, 4.0, 6.0, 8.0])


def test_fill_linear_multiple_gaps():
    out = fill_linear([1.0, nan, 3.0, nan, nan, 0.0])
    assert _same(out, [1.0, 2.0, 3.0, 2.0, 1.0, 0.0])


def test_fill_linear_leaves_unclosed_trailing_gap():
    v = [1.0, 2.0, nan, nan]
    once = fill_linear(v)
    assert _same(once, v)
    assert _same(fill_linear(once), once)


def test_fill_linear_leaves_leading_gap():
    out = fill_linear([nan, nan, 3.0, nan, 5.0])
    assert _same(out, [nan, nan, 3.0, 4.0, 5.0])


def test_fill_linear_known_values_unchanged():
    v = np.array([1.0, 5.0, -2.0])
    assert _same(fill_linear(v), v)


def test_trim_then_fill_linear_has_no_missing():
    v = [nan, 1.0, nan, 3.0, nan, 7.0, 9.0, nan]
    out = fill_linear(trim_leading(trim_trailing(v)))
    assert _same(out, [1.0, 2.0, 3.0, 5.0, 7.0])
    assert not np.isnan(out).any()


# ---- dispatch ----
def test_fill_ts_dispatches_by_name():
    v = [1.0, nan, nan, 4.0]
    assert _same(fill_ts(v, "linear"), fill_linear(v))
    assert _same(fill_ts(v, "nearest"), fill_nearest(v))
    assert set(FILL_METHODS) == {"linear", "nearest"}


@pytest.mark.parametrize("method", ["spline", "next", "previous", "", None])
def test_fill_ts_rejects_unknown_method(method):
    with pytest.raises(UnsupportedFillMethod):
        fill_ts([1.0, nan, 2.0], method)


def test_fill_next_and_previous_always_fail():
    with pytest.raises(FillNotImplemented):
        fill_next([1.0, nan, 2.0])
    with pytest.raises(FillNotImplemented):
        fill_previous([1.0, nan, 2.0])
    with pytest.raises(NotImplementedError):
        fill_next([])


def test_fill_ts_logs_method(caplog):
    with caplog.at_level("DEBUG", logger="tsprep.core.fill"):
        fill_ts([1.0, nan, 3.0], "nearest")
    assert "method=nearest" in caplog.text
