# @date 2024-07-28
# @author Frederic Scherma
# @license Copyright (c) 2024 Dream Overflow
# Smoothing of a cumulative series

from typing import Union

import numpy as np

from indicator.utils import resize_series, rolling_sum, rolling_mean


class Smoother(object):
    """
    Optional smoothing of a series : none, simple moving average or exponential moving average.

    The SMA window shrinks near the oldest sample. The EMA starts with the same shrinking SMA values
    (warm-up) until the first complete window, where it is seeded with the SMA of the period.
    Then each value depends only on the input value and the previous EMA value.

    The seed state is explicit, a previous EMA value of zero is a legit value.
    """

    SMOOTH_NONE = 0
    SMOOTH_SMA = 1
    SMOOTH_EMA = 2

    __slots__ = '_method', '_length', '_alpha', '_sums', '_seeded'

    @staticmethod
    def method_from_str(method: str) -> int:
        if method is None:
            return Smoother.SMOOTH_NONE

        method = method.lower()

        if method in ('none', ''):
            return Smoother.SMOOTH_NONE
        elif method == 'sma':
            return Smoother.SMOOTH_SMA
        elif method == 'ema':
            return Smoother.SMOOTH_EMA

        raise ValueError("Unknown smoothing method %s" % method)

    @staticmethod
    def method_to_str(method: int) -> str:
        if method == Smoother.SMOOTH_SMA:
            return 'sma'
        elif method == Smoother.SMOOTH_EMA:
            return 'ema'

        return 'none'

    def __init__(self, method: int = SMOOTH_NONE, length: int = 1):
        if method not in (Smoother.SMOOTH_NONE, Smoother.SMOOTH_SMA, Smoother.SMOOTH_EMA):
            raise ValueError("Unknown smoothing method %s" % method)

        if method != Smoother.SMOOTH_NONE and length < 1:
            raise ValueError("Smoothing period must be greater or equal to 1, %s given" % length)

        self._method = method
        self._length = length
        self._alpha = 2.0 / (length + 1.0)

        self._sums = np.array([])
        self._seeded = False

    @property
    def method(self) -> int:
        return self._method

    @property
    def length(self) -> int:
        return self._length

    @property
    def alpha(self) -> float:
        return self._alpha

    @property
    def identity(self) -> bool:
        return self._method == Smoother.SMOOTH_NONE or self._length <= 1

    @property
    def seeded(self) -> bool:
        return self._seeded

    @property
    def seed_index(self) -> Union[int, None]:
        """Position of the EMA seed (the first complete window), None if not seeded."""
        return self._length - 1 if self._seeded else None

    def reset(self):
        self._sums = np.array([])
        self._seeded = False

    def compute(self, data, out, begin=0):
        """
        Compute out[begin:] from data. Values before begin must be the ones of the previous pass.
        Must be evaluated from the oldest to the most recent sample.
        """
        begin = max(0, begin)
        size = len(data)

        if self.identity:
            out[begin:size] = data[begin:size]
            return out

        if self._method == Smoother.SMOOTH_EMA:
            seed_index = self._length - 1

            if begin <= seed_index:
                # the seed itself is recomputed
                self._seeded = False
            elif not self._seeded:
                # nothing previously computed to continue from
                begin = 0

        self._sums = resize_series(self._sums, size)
        rolling_sum(data, self._sums, self._length, begin)

        if self._method == Smoother.SMOOTH_SMA:
            rolling_mean(self._sums, out, self._length, begin)

        elif self._method == Smoother.SMOOTH_EMA:
            alpha = self._alpha
            seed_index = self._length - 1

            for i in range(begin, size):
                if i < seed_index:
                    # warm-up
                    out[i] = self._sums[i] / (i + 1)
                elif i == seed_index:
                    out[i] = self._sums[i] / self._length
                    self._seeded = True
                else:
                    out[i] = (data[i] - out[i-1]) * alpha + out[i-1]

        return out
