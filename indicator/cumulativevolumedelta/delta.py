# @date 2024-07-28
# @author Frederic Scherma
# @license Copyright (c) 2024 Dream Overflow
# Volume delta estimation of a bar from its lower timeframe bars

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from instrument.instrument import Instrument

VOLUME_TICK = 0   # tick volume as proxy of the traded volume
VOLUME_REAL = 1   # traded volume


def candle_delta(high: float, low: float, close: float, volume: float) -> float:
    """
    Estimated buy volume minus sell volume of a single bar, from the position of the close
    in the high-low range. A bar without range does not give any direction and returns 0.
    """
    height = high - low

    if height > 0.0:
        close_pos = (close - low) / height

        buy_volume = volume * close_pos
        sell_volume = volume * (1.0 - close_pos)

        return buy_volume - sell_volume

    return 0.0


def estimate_delta(source: Instrument, timeframe: float, lower_timeframe: float, index: int, now: float,
                   volume_source: int = VOLUME_TICK) -> float:
    """
    Volume delta of the bar at index of timeframe, accumulated from the lower timeframe bars having an
    open time in [bar open time, next bar open time[, or [bar open time, now[ for the most recent bar.

    @param source Bar source, having bar_count, bar and index_at_or_after methods.
    @param index Chronological index of the bar in timeframe.
    @param now Current timestamp, end of the span of the most recent bar.
    @return Delta, 0 if the lower timeframe has no data for this bar.
    """
    count = source.bar_count(timeframe)

    bar_time = source.bar(timeframe, index).timestamp
    span_end = source.bar(timeframe, index + 1).timestamp if index + 1 < count else now

    start = source.index_at_or_after(lower_timeframe, bar_time)
    if start < 0 or source.bar(lower_timeframe, start).timestamp < bar_time:
        return 0.0

    lower_count = source.bar_count(lower_timeframe)
    total_delta = 0.0

    for i in range(start, lower_count):
        candle = source.bar(lower_timeframe, i)

        # only within the current bar span
        if candle.timestamp >= span_end:
            break

        volume = candle.tick_volume if volume_source == VOLUME_TICK else candle.volume
        total_delta += candle_delta(candle.high, candle.low, candle.close, volume)

    return total_delta
