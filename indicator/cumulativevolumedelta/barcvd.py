# @date 2024-07-28
# @author Frederic Scherma
# @license Copyright (c) 2024 Dream Overflow
# Bar based Cumulative Volume Delta indicator

from __future__ import annotations

from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from instrument.instrument import Instrument

from common.utils import timeframe_to_str

from indicator.indicator import Indicator
from indicator.indicatorexception import IndicatorException
from indicator.utils import resize_series, rolling_sum, split_channels

from .cvdbase import CumulativeVolumeDeltaBase, resolve_timeframe
from .delta import estimate_delta
from .smoother import Smoother

import numpy as np

import logging
logger = logging.getLogger('cvd.indicator.cvd')


class BarCumulativeVolumeDelta(CumulativeVolumeDeltaBase):
    """
    Cumulative volume delta indicator based on temporal (timeframe-bar / Candle) series.

    Each bar is decomposed into the bars of the source timeframe, the delta of each of them being estimated
    from the position of the close into its range. The deltas are summed over the cumulative period,
    then optionally smoothed, and split into a positive and a negative channel for an histogram.

    Series are chronological, -1 being the most recent bar. At each compute only the bars from the
    previous most recent one (it could have been updated) are computed again.
    """

    __slots__ = '_instrument', '_source_timeframe', '_smoother', \
        '_deltas', '_cvds', '_smooths', '_positives', '_negatives', \
        '_prev', '_last', '_count', '_first_timestamp', '_computing'

    @classmethod
    def indicator_base(cls):
        return Indicator.BASE_TIMEFRAME

    def __init__(self, timeframe: float, source_timeframe=None, cumulative_period=20,
                 smooth_method=Smoother.SMOOTH_NONE, smooth_period=1, volume_source=CumulativeVolumeDeltaBase.VOLUME_TICK):
        super().__init__("barcumulativevolumedelta", timeframe, source_timeframe, cumulative_period,
                         smooth_method, smooth_period, volume_source)

        self._instrument = None
        self._source_timeframe = timeframe

        self._smoother = Smoother(self._smooth_method, self._smooth_period)

        self._deltas = np.array([])
        self._cvds = np.array([])
        self._smooths = np.array([])
        self._positives = np.array([])
        self._negatives = np.array([])

        self._prev = 0.0
        self._last = 0.0

        self._count = 0
        self._first_timestamp = None
        self._computing = False

    def setup(self, instrument: Instrument):
        if instrument is None:
            return

        self._instrument = instrument

        # static decision for the lifetime of the indicator
        self._source_timeframe = resolve_timeframe(self._requested_timeframe, self._timeframe)

        logger.debug("%s setup on %s timeframe %s from %s" % (
            self._name, instrument.symbol, timeframe_to_str(self._timeframe), timeframe_to_str(self._source_timeframe)))

    @property
    def instrument(self) -> Union[Instrument, None]:
        return self._instrument

    @property
    def source_timeframe(self) -> float:
        """Effective lower timeframe."""
        return self._source_timeframe

    @property
    def downgraded(self) -> bool:
        """True if the requested source timeframe was greater than the timeframe and has been replaced at setup."""
        if self._instrument is None:
            return False

        return self._requested_timeframe is not None and self._source_timeframe != self._requested_timeframe

    @property
    def smoother(self) -> Smoother:
        return self._smoother

    @property
    def prev(self) -> float:
        return self._prev

    @property
    def last(self) -> float:
        return self._last

    @property
    def deltas(self) -> np.array:
        """Per bar volume delta (not cumulative)."""
        return self._deltas

    @property
    def cvds(self) -> np.array:
        """Rolling sum of the deltas over the cumulative period."""
        return self._cvds

    @property
    def smooths(self) -> np.array:
        """Smoothed rolling sum, same as cvds without smoothing."""
        return self._smooths

    @property
    def positives(self) -> np.array:
        return self._positives

    @property
    def negatives(self) -> np.array:
        return self._negatives

    @property
    def values(self) -> np.array:
        return self._smooths

    def has_values(self, min_samples=1) -> bool:
        if min_samples > 0 and len(self._smooths) >= min_samples:
            return not np.isnan(self._smooths[-min_samples:]).any()

        return False

    def reset(self):
        """
        Forget any computed values, the next compute will be a complete one.
        """
        self._deltas = np.array([])
        self._cvds = np.array([])
        self._smooths = np.array([])
        self._positives = np.array([])
        self._negatives = np.array([])

        self._smoother.reset()

        self._prev = 0.0
        self._last = 0.0
        self._count = 0
        self._first_timestamp = None

    def frontier(self, count: int, from_index: Union[int, None] = None) -> int:
        """
        First index to compute again for count bars.
        Everything when nothing is computed or when the oldest bar changed (history trimmed or extended),
        else from the previous most recent bar, or from from_index if lesser.
        """
        if count <= 0:
            return 0

        first_timestamp = self._instrument.bar(self._timeframe, 0).timestamp

        if not self._count or count < self._count or first_timestamp != self._first_timestamp:
            begin = 0
        else:
            begin = self._count - 1

        if from_index is not None:
            if from_index < 0:
                from_index += count

            begin = min(begin, max(0, from_index))

        return begin

    def compute(self, timestamp: float, from_index: Union[int, None] = None) -> np.array:
        """
        Compute the new or updated bars.

        @param timestamp Current time, it is the end of the span of the most recent bar.
        @param from_index Optional index of the oldest revised bar, to compute again from it.
        @return The smoothed series.
        """
        if self._instrument is None:
            raise IndicatorException(self._name, "Indicator is not setup with an instrument")

        if self._computing:
            raise IndicatorException(self._name, "A compute is already in progress")

        self._computing = True

        try:
            self._prev = self._last

            count = self._instrument.bar_count(self._timeframe)
            begin = self.frontier(count, from_index)

            if begin == 0 and self._count:
                logger.debug("%s complete compute of %i bars on %s" % (self._name, count, self._instrument.symbol))

            self._deltas = resize_series(self._deltas, count)
            self._cvds = resize_series(self._cvds, count)
            self._smooths = resize_series(self._smooths, count)
            self._positives = resize_series(self._positives, count)
            self._negatives = resize_series(self._negatives, count)

            for i in range(begin, count):
                self._deltas[i] = estimate_delta(self._instrument, self._timeframe, self._source_timeframe,
                                                 i, timestamp, self._volume_source)

            rolling_sum(self._deltas, self._cvds, self._cumulative_period, begin)
            self._smoother.compute(self._cvds, self._smooths, begin)
            split_channels(self._smooths, self._positives, self._negatives, begin)

            self._count = count
            self._first_timestamp = self._instrument.bar(self._timeframe, 0).timestamp if count else None

            self._last = self._smooths[-1] if count else 0.0
            self._last_timestamp = timestamp
        finally:
            self._computing = False

        return self._smooths
