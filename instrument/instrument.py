# @date 2018-08-27
# @author Frederic Scherma, All rights reserved without prejudices.
# @license Copyright (c) 2018 Dream Overflow
# Instrument symbol

from __future__ import annotations

from typing import List, Optional, Dict, Union

from common.utils import timeframe_to_str, format_datetime


class Candle(object):
    """
    Candle for an instrument with OHLC, volume, timestamp and timeframe.
    Ended is true only when the candle is closed (consolidated). It means the current is False.

    Two volumes are kept : the traded volume, and the tick volume (number of price changes) that is
    used as a proxy of the traded volume when the market does not publish it. If the tick volume
    is not given it takes the traded volume.

    @note 8 floats + 1 bool
    """

    __slots__ = '_timestamp', '_timeframe', '_open', '_high', '_low', '_close', '_volume', '_tick_volume', '_ended'

    def __init__(self, timestamp: float, timeframe: float):
        self._timestamp = timestamp
        self._timeframe = timeframe

        self._open = 0.000000001
        self._high = 0.000000001
        self._low = 0.000000001
        self._close = 0.000000001

        self._volume = 0.0
        self._tick_volume = 0.0
        self._ended = True

    @property
    def timestamp(self) -> float:
        return self._timestamp

    @property
    def timeframe(self) -> float:
        return self._timeframe

    @property
    def open(self) -> float:
        return self._open

    @property
    def high(self) -> float:
        return self._high

    @property
    def low(self) -> float:
        return self._low

    @property
    def close(self) -> float:
        return self._close

    @property
    def ended(self) -> bool:
        return self._ended

    @property
    def volume(self) -> float:
        return self._volume

    @property
    def tick_volume(self) -> float:
        return self._tick_volume

    @property
    def height(self) -> float:
        return self.high - self.low

    def set_ohlc(self, o: float, h: float, l: float, c: float):
        self._open = o
        self._high = h
        self._low = l
        self._close = c

    def add_volume(self, ltv: float):
        self._volume += ltv

    def add_tick_volume(self, tv: float):
        self._tick_volume += tv

    def set_ohlc_v(self, o: float, h: float, l: float, c: float, v: float, tv: Optional[float] = None):
        self._open = o
        self._high = h
        self._low = l
        self._close = c
        self._volume = v
        self._tick_volume = v if tv is None else tv

    def set_consolidated(self, cons: bool):
        self._ended = cons

    def copy(self, dup: Candle):
        self._open = dup._open
        self._high = dup._high
        self._low = dup._low
        self._close = dup._close
        self._volume = dup._volume
        self._tick_volume = dup._tick_volume

    def __repr__(self) -> str:
        return "%s %s %s/%s/%s/%s %s" % (
            timeframe_to_str(self._timeframe),
            format_datetime(self._timestamp),
            self._open,
            self._high,
            self._low,
            self._close,
            self._volume)


class Instrument(object):
    """
    Instrument is the data side of the market model, and the bar source of the indicators.
    It keeps an ordered list of candles per timeframe.

    Candles are indexed chronologically : 0 is the oldest, -1 (or bar_count - 1) the most recent,
    possibly not consolidated.

    @member symbol str Common usual name (ex: EURUSD, BTCUSD).
    @member market_id str Unique broker identifier.
    @member alias str A secondary or display name.
    """

    TF_TICK = 0
    TF_SEC = 1
    TF_1S = TF_SEC
    TF_10SEC = 10
    TF_10S = TF_10SEC
    TF_15SEC = 15
    TF_15S = TF_15SEC
    TF_30SEC = 30
    TF_30S = TF_30SEC
    TF_MIN = 60
    TF_1M = TF_MIN
    TF_2MIN = 60*2
    TF_2M = TF_2MIN
    TF_3MIN = 60*3
    TF_3M = TF_3MIN
    TF_5MIN = 60*5
    TF_5M = TF_5MIN
    TF_10MIN = 60*10
    TF_10M = TF_10MIN
    TF_15MIN = 60*15
    TF_15M = TF_15MIN
    TF_30MIN = 60*30
    TF_30M = TF_30MIN
    TF_HOUR = 60*60
    TF_1H = TF_HOUR
    TF_2HOUR = 60*60*2
    TF_2H = TF_2HOUR
    TF_4HOUR = 60*60*4
    TF_4H = TF_4HOUR
    TF_DAY = 60*60*24
    TF_1D = TF_DAY
    TF_WEEK = 60*60*24*7
    TF_1W = TF_WEEK
    TF_MONTH = 60*60*24*30

    __slots__ = '_market_id', '_symbol', '_alias', '_candles'

    _candles: Dict[float, List[Candle]]

    def __init__(self, market_id: str, symbol: str, alias: Optional[str] = None):
        self._market_id = market_id
        self._symbol = symbol
        self._alias = alias

        self._candles = {}  # list of Candle per timeframe

    @property
    def symbol(self) -> str:
        return self._symbol

    @property
    def alias(self) -> str:
        return self._alias

    @property
    def market_id(self) -> str:
        return self._market_id

    @property
    def timeframes(self) -> List[float]:
        return sorted(self._candles.keys())

    #
    # candles OHLC
    #

    def add_candles(self, candles_list: List[Candle], max_candles: int = -1):
        """
        Append an array of new candle, of the same timeframe.
        @param candles_list
        @param max_candles Pop candles until num candles > max_candles.
        """
        if not candles_list:
            return

        candles = self._candles.get(candles_list[0].timeframe)

        if candles:
            for c in candles_list:
                # for each candle only add it if more recent or replace a non consolidated
                if c.timestamp > candles[-1].timestamp:
                    if not candles[-1].ended:
                        candles[-1].set_consolidated(True)

                    candles.append(c)

                elif c.timestamp == candles[-1].timestamp and not candles[-1].ended:
                    # replace the last candle if was not consolidated
                    candles[-1] = c
        else:
            candles = list(candles_list)
            self._candles[candles_list[0].timeframe] = candles

        # keep safe size
        if max_candles > 1 and candles:
            while(len(candles)) > max_candles:
                candles.pop(0)

    def add_candle(self, candle: Candle, max_candles: int = -1):
        """
        Append a new candle.
        @param candle
        @param max_candles Pop candles until num candles > max_candles.
        """
        if not candle:
            return

        candles = self._candles.get(candle.timeframe)

        if candles:
            # ignore the candle if older than the latest
            if candle.timestamp > candles[-1].timestamp:
                if not candles[-1].ended:
                    # the previous is implicitly closed
                    candles[-1].set_consolidated(True)

                candles.append(candle)

            elif candle.timestamp == candles[-1].timestamp and not candles[-1].ended:
                # replace the last candle if was not consolidated
                candles[-1] = candle
        else:
            candles = [candle]
            self._candles[candle.timeframe] = candles

        # keep safe size
        if max_candles > 1 and candles:
            while(len(candles)) > max_candles:
                candles.pop(0)

    def candles(self, timeframe: float) -> List[Candle]:
        """Returns candles list for a timeframe (empty if none)."""
        return self._candles.get(timeframe, [])

    def candle(self, timeframe: float) -> Union[Candle, None]:
        """Returns the most recent candle for a timeframe or None."""
        candles = self._candles.get(timeframe)
        return candles[-1] if candles else None

    def clear_candles(self, timeframe: Optional[float] = None):
        """Clear any candles previous received candles, of a timeframe or of every timeframe."""
        if timeframe is None:
            self._candles.clear()
        elif timeframe in self._candles:
            self._candles[timeframe].clear()

    #
    # bar source
    #

    def bar_count(self, timeframe: float) -> int:
        return len(self._candles.get(timeframe, []))

    def bar(self, timeframe: float, index: int) -> Candle:
        """
        Candle at a chronological position (negative index from the most recent).
        @raise IndexError if the index is out of the candles list.
        """
        return self._candles.get(timeframe, [])[index]

    def index_at_or_after(self, timeframe: float, timestamp: float) -> int:
        """
        Position of the first candle having an open time greater or equal to timestamp.
        @return -1 if there is no such candle.
        """
        candles = self._candles.get(timeframe)
        if not candles:
            return -1

        lo = 0
        hi = len(candles)

        while lo < hi:
            mid = (lo + hi) // 2
            if candles[mid].timestamp < timestamp:
                lo = mid + 1
            else:
                hi = mid

        return lo if lo < len(candles) else -1

    def __repr__(self) -> str:
        return "%s (%s) %s" % (self._symbol, self._market_id,
                               ", ".join("%s:%i" % (timeframe_to_str(tf), len(c)) for tf, c in sorted(
                                   self._candles.items())))
