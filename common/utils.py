# @date 2019-01-06
# @author Frederic Scherma, All rights reserved without prejudices.
# @license Copyright (c) 2019 Dream Overflow
# Utils

from __future__ import annotations

from typing import Union

from datetime import datetime, timedelta, tzinfo


class UTC(tzinfo):
    """UTC"""

    def utcoffset(self, dt):
        return timedelta(0)

    def tzname(self, dt):
        return "UTC"

    def dst(self, dt):
        return timedelta(0)


# timeframe to str map (double: str)
TIMEFRAME_TO_STR_MAP = {
    0: 't',
    1: '1s',
    3: '3s',
    5: '5s',
    10: '10s',
    15: '15s',
    30: '30s',
    45: '45s',
    60: '1m',
    2*60: '2m',
    3*60: '3m',
    5*60: '5m',
    10*60: '10m',
    15*60: '15m',
    30*60: '30m',
    45*60: '45m',
    60*60: '1h',
    2*60*60: '2h',
    3*60*60: '3h',
    4*60*60: '4h',
    6*60*60: '6h',
    8*60*60: '8h',
    12*60*60: '12h',
    24*60*60: '1d',
    2*24*60*60: '2d',
    3*24*60*60: '3d',
    7*24*60*60: '1w',
    30*24*60*60: '1M'
}

# timeframe reverse map (str: double)
TIMEFRAME_FROM_STR_MAP = {v: k for k, v in TIMEFRAME_TO_STR_MAP.items()}

# special name of the chart timeframe (native one)
TIMEFRAME_CURRENT = 'current'


def timeframe_to_str(timeframe: float) -> str:
    return TIMEFRAME_TO_STR_MAP.get(timeframe, "")


def timeframe_from_str(timeframe: str) -> float:
    return TIMEFRAME_FROM_STR_MAP.get(timeframe, 0.0)


def parse_timeframe(timeframe: Union[str, float, int, None]) -> Union[float, None]:
    """
    Accept a timeframe in second or its string form.
    @return None for the current (native) timeframe, or the timeframe in second.
    @raise ValueError if the string form is unknown or the value is negative.
    """
    if timeframe is None:
        return None

    if isinstance(timeframe, str):
        if not timeframe or timeframe.lower() == TIMEFRAME_CURRENT:
            return None

        if timeframe not in TIMEFRAME_FROM_STR_MAP:
            raise ValueError("Unknown timeframe %s" % timeframe)

        timeframe = TIMEFRAME_FROM_STR_MAP[timeframe]

    if timeframe < 0:
        raise ValueError("Timeframe must be positive, %s given" % timeframe)

    # 0 (tick) cannot be sampled as bars, take the current one
    return float(timeframe) if timeframe > 0 else None


def timestamp_to_str(timestamp: float) -> str:
    return datetime.fromtimestamp(timestamp, tz=UTC()).strftime('%Y-%m-%d %H:%M:%S')


def format_datetime(timestamp: float) -> str:
    """
    Format as human readable in UTC.
    """
    return datetime.fromtimestamp(timestamp, tz=UTC()).strftime('%Y-%m-%d %H:%M:%S UTC')
