"""
Unit tests for the per bar volume delta estimation.
"""

import pytest

from candles import BASE_TIMESTAMP, make_candle, make_instrument

from indicator.cumulativevolumedelta.delta import VOLUME_REAL, VOLUME_TICK, candle_delta, estimate_delta

M1 = 60.0
M5 = 300.0


def native_bar(index=0, **kwargs):
    return make_candle(BASE_TIMESTAMP + index * M5, M5, 9.0, 12.0, 8.0, 10.0, 1000.0, **kwargs)


def lower_bar(offset, h, l, c, v, tv=None):
    return make_candle(BASE_TIMESTAMP + offset * M1, M1, l, h, l, c, v, tv)


# ---------------------------------------------------------------------------
# candle_delta
# ---------------------------------------------------------------------------

def test_close_at_high_is_all_buy():
    assert candle_delta(10.0, 8.0, 10.0, 100.0) == 100.0


def test_close_at_low_is_all_sell():
    assert candle_delta(10.0, 8.0, 8.0, 100.0) == -100.0


def test_close_at_quarter():
    assert candle_delta(12.0, 8.0, 9.0, 100.0) == pytest.approx(-50.0)


def test_degenerate_bar_contributes_nothing():
    assert candle_delta(9.0, 9.0, 9.0, 1e9) == 0.0


# ---------------------------------------------------------------------------
# estimate_delta
# ---------------------------------------------------------------------------

def test_closes_at_midpoint_are_neutral():
    lowers = [
        lower_bar(0, 10.0, 8.0, 9.0, 100.0),
        lower_bar(1, 10.0, 9.0, 9.5, 50.0),
        lower_bar(2, 12.0, 10.0, 11.0, 200.0),
        lower_bar(3, 11.0, 10.0, 10.5, 80.0),
    ]
    instrument = make_instrument(lowers, [native_bar(0)])

    assert estimate_delta(instrument, M5, M1, 0, BASE_TIMESTAMP + M5) == 0.0


def test_single_lower_bar_closing_at_high():
    instrument = make_instrument([lower_bar(0, 10.0, 8.0, 10.0, 100.0)], [native_bar(0)])

    assert estimate_delta(instrument, M5, M1, 0, BASE_TIMESTAMP + M5) == 100.0


def test_degenerate_lower_bar_ignored_whatever_its_volume():
    lowers = [
        lower_bar(0, 10.0, 8.0, 10.0, 100.0),
        lower_bar(1, 9.0, 9.0, 9.0, 100000.0),
    ]
    instrument = make_instrument(lowers, [native_bar(0)])

    assert estimate_delta(instrument, M5, M1, 0, BASE_TIMESTAMP + M5) == 100.0


def test_spans_are_half_open():
    # the lower bar at the open time of the next bar belongs to the next bar only
    lowers = [
        lower_bar(4, 10.0, 8.0, 10.0, 10.0),
        lower_bar(5, 10.0, 8.0, 8.0, 30.0),
    ]
    instrument = make_instrument(lowers, [native_bar(0), native_bar(1)])

    assert estimate_delta(instrument, M5, M1, 0, BASE_TIMESTAMP + 2 * M5) == 10.0
    assert estimate_delta(instrument, M5, M1, 1, BASE_TIMESTAMP + 2 * M5) == -30.0


def test_most_recent_bar_stops_at_now():
    lowers = [
        lower_bar(0, 10.0, 8.0, 10.0, 10.0),
        lower_bar(1, 10.0, 8.0, 10.0, 20.0),
        lower_bar(2, 10.0, 8.0, 10.0, 40.0),
    ]
    instrument = make_instrument(lowers, [native_bar(0)])

    assert estimate_delta(instrument, M5, M1, 0, BASE_TIMESTAMP + 2 * M1) == 30.0
    assert estimate_delta(instrument, M5, M1, 0, BASE_TIMESTAMP + M5) == 70.0


def test_no_lower_data_gives_zero():
    instrument = make_instrument([native_bar(0)])

    assert estimate_delta(instrument, M5, M1, 0, BASE_TIMESTAMP + M5) == 0.0


def test_lower_data_older_than_bar_gives_zero():
    lowers = [make_candle(BASE_TIMESTAMP - 2 * M1, M1, 8.0, 10.0, 8.0, 10.0, 100.0)]
    instrument = make_instrument(lowers, [native_bar(0)])

    assert estimate_delta(instrument, M5, M1, 0, BASE_TIMESTAMP + M5) == 0.0


def test_lower_data_starting_inside_the_bar():
    lowers = [lower_bar(3, 10.0, 8.0, 8.0, 25.0)]
    instrument = make_instrument(lowers, [native_bar(0)])

    assert estimate_delta(instrument, M5, M1, 0, BASE_TIMESTAMP + M5) == -25.0


def test_same_timeframe_uses_the_bar_itself():
    bars = [native_bar(0), make_candle(BASE_TIMESTAMP + M5, M5, 10.0, 14.0, 10.0, 13.0, 200.0)]
    instrument = make_instrument(bars)

    assert estimate_delta(instrument, M5, M5, 0, BASE_TIMESTAMP + 2 * M5) == pytest.approx(0.0)
    assert estimate_delta(instrument, M5, M5, 1, BASE_TIMESTAMP + 2 * M5) == pytest.approx(100.0)


def test_volume_source():
    lowers = [lower_bar(0, 10.0, 8.0, 10.0, 100.0, tv=7.0)]
    instrument = make_instrument(lowers, [native_bar(0)])

    assert estimate_delta(instrument, M5, M1, 0, BASE_TIMESTAMP + M5, VOLUME_TICK) == 7.0
    assert estimate_delta(instrument, M5, M1, 0, BASE_TIMESTAMP + M5, VOLUME_REAL) == 100.0
