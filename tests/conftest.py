"""
Shared fixtures : 300 one minute candles and their five minutes aggregation.
"""

import pytest

from candles import aggregate, make_instrument, random_candles


@pytest.fixture()
def lower_candles():
    return random_candles(300, 60.0, seed=7)


@pytest.fixture()
def native_candles(lower_candles):
    return aggregate(lower_candles, 300.0)


@pytest.fixture()
def instrument(lower_candles, native_candles):
    return make_instrument(lower_candles, native_candles)


@pytest.fixture()
def now(native_candles):
    return native_candles[-1].timestamp + 300.0
