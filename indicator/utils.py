# @date 2018-09-02
# @author Frederic Scherma, All rights reserved without prejudices.
# @author Xavier BONNIN
# @license Copyright (c) 2018 Dream Overflow
# Indicator utils

import numpy as np


def resize_series(data, size):
    """
    Return the data array resized to size. New entries are zero, removed entries are the most recent.
    """
    if len(data) == size:
        return data

    if len(data) > size:
        return data[:size].copy()

    return np.concatenate((data, np.zeros(size - len(data))))


def rolling_sum(data, out, length, begin=0):
    """
    Sum on the last length periods, shrinking near the oldest sample (out[0] = data[0]).
    Only out[begin:] is computed, using the running sum of out[begin-1] which must be up to date.

    The running sum adds the entering sample and subtracts the leaving one, so computing from any
    begin results in the same values than computing from 0.
    """
    if length < 1:
        raise ValueError("Length must be greater or equal to 1, %s given" % length)

    for i in range(max(0, begin), len(data)):
        if i == 0:
            out[0] = data[0]
        elif i < length:
            out[i] = out[i-1] + data[i]
        else:
            out[i] = out[i-1] + data[i] - data[i-length]

    return out


def rolling_mean(sums, out, length, begin=0):
    """
    Mean from the rolling sums, dividing by the number of samples really in the window.
    """
    for i in range(max(0, begin), len(sums)):
        out[i] = sums[i] / min(i + 1, length)

    return out


def split_channels(data, positives, negatives, begin=0):
    """
    Split into a positive (or zero) channel and a negative channel. Zero goes to the positive one.
    """
    values = data[begin:]

    positives[begin:] = np.where(values >= 0.0, values, 0.0)
    negatives[begin:] = np.where(values < 0.0, values, 0.0)

    return positives, negatives
