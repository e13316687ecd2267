# @date 2018-09-05
# @author Frederic Scherma, All rights reserved without prejudices.
# @license Copyright (c) 2018 Dream Overflow
# OHLC candle generator.

from __future__ import annotations

from typing import List, Union

from datetime import datetime, timedelta
from common.utils import UTC

from instrument.instrument import Candle


class CandleGenerator(object):
    """
    Build candles of a timeframe from the candles of a lesser timeframe, that must be an integral divider.
    Used when the host only get the lower timeframe, to derive the chart (native) timeframe.
    """

    __slots__ = '_from_tf', '_to_tf', '_candle', '_last_timestamp', '_last_consumed'

    def __init__(self, from_tf: float, to_tf: float):
        """
        @param to_tf Generated candle time unit.
        """
        if not from_tf or not to_tf or (int(to_tf) % int(from_tf) != 0):
            raise ValueError("From timeframe %s must be an integral divider of to timeframe %s" % (from_tf, to_tf))

        self._from_tf = float(from_tf)
        self._to_tf = float(to_tf)
        self._candle = None
        self._last_timestamp = 0
        self._last_consumed = 0

    @property
    def current(self) -> Union[Candle, None]:
        """
        If exists returns the current non closed candle.
        """
        return self._candle

    @current.setter
    def current(self, candle: Candle):
        self._candle = candle

    @property
    def last_timestamp(self) -> float:
        return self._last_timestamp

    @property
    def last_consumed(self) -> int:
        return self._last_consumed

    @property
    def from_tf(self) -> float:
        return self._from_tf

    @property
    def to_tf(self) -> float:
        return self._to_tf

    def generate_from_candles(self, from_candles: List[Candle], ignore_non_ended: bool = True) -> List[Candle]:
        """
        Generate as many higher candles as possible from the array of candles given in parameters.
        @note Non ended candles are ignored because it will false the volume.
        """
        to_candles = []
        self._last_consumed = 0

        for from_candle in from_candles:
            to_candle = self.update_from_candle(from_candle, ignore_non_ended)
            if to_candle:
                to_candles.append(to_candle)

            self._last_consumed += 1

        return to_candles

    def basetime(self, timestamp: float) -> float:
        if self._to_tf < 7*24*60*60:
            # simplest
            return int(timestamp / self._to_tf) * self._to_tf
        elif self._to_tf == 7*24*60*60:
            # must find the UTC first day of week
            dt = datetime.fromtimestamp(timestamp, tz=UTC())
            dt = dt.replace(hour=0, minute=0, second=0, microsecond=0) - timedelta(days=dt.weekday())
            return dt.timestamp()
        elif self._to_tf == 30*24*60*60:
            # replace by first day of month at 00h00 UTC
            dt = datetime.fromtimestamp(timestamp, tz=UTC())
            dt = dt.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
            return dt.timestamp()

        return int(timestamp / self._to_tf) * self._to_tf

    def update_from_candle(self, from_candle: Candle, ignore_non_ended: bool = True) -> Union[Candle, None]:
        """
        From a timeframe, create/update candle to another timeframe, that must be greater and a multiple of.
        Example of creating/updating hourly candle for 1 minute candles.

        Must be called each time a new candle of the lesser timeframe is append.
        It only create the last or update the current candle.

        @return The candle just closed or None.
        """
        if from_candle is None:
            return None

        if ignore_non_ended and not from_candle.ended:
            return None

        if self._from_tf != from_candle.timeframe:
            raise ValueError("From candle must be of time unit %s but %s is provided" % (
                self._from_tf, from_candle.timeframe))

        if from_candle.timestamp <= self._last_timestamp:
            # already done
            return None

        ended_candle = None

        if self._candle and from_candle.timestamp >= self._candle.timestamp + self._to_tf:
            # need to close the candle and to open a new one
            self._candle.set_consolidated(True)
            ended_candle = self._candle

            self._candle = None

        if self._candle is None:
            # open a new one
            base_time = self.basetime(from_candle.timestamp)

            self._candle = Candle(base_time, self._to_tf)
            self._candle.set_consolidated(False)

            # all open, close, low high from the initial candle
            self._candle.set_ohlc(from_candle.open, from_candle.high, from_candle.low, from_candle.close)

        # update volumes
        self._candle.add_volume(from_candle.volume)
        self._candle.add_tick_volume(from_candle.tick_volume)

        # update prices
        self._candle._high = max(self._candle._high, from_candle.high)
        self._candle._low = min(self._candle._low, from_candle.low)

        # potential close
        self._candle._close = from_candle.close

        # keep last timestamp
        self._last_timestamp = from_candle.timestamp

        return ended_candle
