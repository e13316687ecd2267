"""
Unit tests for the rolling sum, rolling mean, channels split and series helpers.
"""

import numpy as np
import pytest

from indicator.utils import resize_series, rolling_mean, rolling_sum, split_channels


@pytest.fixture()
def series():
    return np.random.RandomState(3).normal(0.0, 100.0, 64)


def test_rolling_sum_matches_direct_summation(series):
    length = 9
    out = rolling_sum(series, np.zeros(len(series)), length)

    for i in range(len(series)):
        assert out[i] == pytest.approx(series[max(0, i - length + 1):i + 1].sum(), abs=1e-9)


def test_rolling_sum_shrinks_at_oldest_samples(series):
    out = rolling_sum(series, np.zeros(len(series)), 20)

    assert out[0] == series[0]
    assert out[4] == pytest.approx(series[:5].sum())


def test_rolling_sum_period_longer_than_series(series):
    out = rolling_sum(series[:5], np.zeros(5), 50)

    assert out[-1] == pytest.approx(series[:5].sum())


def test_rolling_sum_from_begin_is_bit_identical(series):
    full = rolling_sum(series, np.zeros(len(series)), 7)

    partial = rolling_sum(series[:40], np.zeros(40), 7)
    partial = resize_series(partial, len(series))
    rolling_sum(series, partial, 7, 39)

    assert np.array_equal(full, partial)


def test_rolling_sum_invalid_length(series):
    with pytest.raises(ValueError):
        rolling_sum(series, np.zeros(len(series)), 0)


def test_rolling_mean_counts_available_samples():
    data = np.array([1.0, 2.0, 3.0, 4.0, 5.0])
    sums = rolling_sum(data, np.zeros(5), 3)

    assert list(rolling_mean(sums, np.zeros(5), 3)) == [1.0, 1.5, 2.0, 3.0, 4.0]


def test_split_channels_laws(series):
    data = np.concatenate((series, [0.0, -0.0]))
    positives = np.zeros(len(data))
    negatives = np.zeros(len(data))

    split_channels(data, positives, negatives)

    assert np.array_equal(positives + negatives, data)
    assert (positives >= 0.0).all()
    assert (negatives <= 0.0).all()

    # zero goes to the positive channel
    assert positives[-2] == 0.0 and negatives[-2] == 0.0
    assert positives[-1] == 0.0 and negatives[-1] == 0.0


def test_split_channels_from_begin():
    data = np.array([-1.0, 2.0, -3.0])
    positives = np.full(3, 9.0)
    negatives = np.full(3, 9.0)

    split_channels(data, positives, negatives, 1)

    assert list(positives) == [9.0, 2.0, 0.0]
    assert list(negatives) == [9.0, 0.0, -3.0]


def test_resize_series():
    data = np.array([1.0, 2.0, 3.0])

    assert resize_series(data, 3) is data
    assert list(resize_series(data, 5)) == [1.0, 2.0, 3.0, 0.0, 0.0]
    assert list(resize_series(data, 2)) == [1.0, 2.0]
    assert len(resize_series(np.array([]), 0)) == 0
