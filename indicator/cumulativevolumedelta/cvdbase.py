# @date 2024-07-28
# @author Frederic Scherma
# @license Copyright (c) 2024 Dream Overflow
# Cumulative Volume Delta indicator

import math
import numbers

from typing import Union

from common.utils import parse_timeframe, timeframe_to_str

from indicator.indicator import Indicator
from indicator.indicatorexception import IndicatorSetupException

from .delta import VOLUME_TICK, VOLUME_REAL
from .smoother import Smoother

import logging
logger = logging.getLogger('cvd.indicator.cvd')


def resolve_timeframe(requested: Union[float, None], native: float) -> float:
    """
    Timeframe to sample the volume delta from. It must be equal or lower than the native (chart) timeframe,
    else the native one is used.
    @param requested Timeframe in second, None or 0 for the native one.
    """
    if not requested:
        return native

    if requested > native:
        logger.warning("Data timeframe %s should be equal to or lower than the current chart timeframe %s. "
                       "Using current timeframe." % (timeframe_to_str(requested), timeframe_to_str(native)))
        return native

    return requested


def volume_source_from_str(volume_source: str) -> int:
    if volume_source is None:
        return VOLUME_TICK

    volume_source = volume_source.lower()

    if volume_source in ('tick', 'ticks', ''):
        return VOLUME_TICK
    elif volume_source in ('real', 'volume'):
        return VOLUME_REAL

    raise ValueError("Unknown volume source %s" % volume_source)


class CumulativeVolumeDeltaBase(Indicator):
    """
    Base model for cumulative volume delta indicator.
    Validates and keeps the parameters. They are immutable for the lifetime of the indicator.
    """

    SMOOTH_NONE = Smoother.SMOOTH_NONE
    SMOOTH_SMA = Smoother.SMOOTH_SMA
    SMOOTH_EMA = Smoother.SMOOTH_EMA

    VOLUME_TICK = VOLUME_TICK
    VOLUME_REAL = VOLUME_REAL

    __slots__ = '_requested_timeframe', '_cumulative_period', '_smooth_method', '_smooth_period', '_volume_source'

    @classmethod
    def indicator_type(cls):
        return Indicator.TYPE_VOLUME

    @classmethod
    def indicator_class(cls):
        return Indicator.CLS_CUMULATIVE

    @classmethod
    def builder(cls, base_type: int, timeframe: float, *args, **kwargs):
        """
        Default class builder. Base type use to distinct the type of instance (tick, tickbar, timeframe...)
        @param base_type: One of BASE_TIMEFRAME, BASE_TICK, BASE_TICKBAR
        @param timeframe: Timeframe in second or 0 if none.
        @param kwargs: Args given to indicator __init__
        @return: A new instance of the indicator or None if the base type is not supported.
        """
        if base_type == Indicator.BASE_TIMEFRAME:
            from indicator.cumulativevolumedelta.barcvd import BarCumulativeVolumeDelta
            return BarCumulativeVolumeDelta(timeframe, *args, **kwargs)

        return None

    def __init__(self, name: str, timeframe: float, source_timeframe=None, cumulative_period=20,
                 smooth_method=Smoother.SMOOTH_NONE, smooth_period=1, volume_source=VOLUME_TICK):
        super().__init__(name, timeframe)

        if not timeframe or timeframe <= 0:
            raise IndicatorSetupException(name, "Timeframe must be a positive number of seconds")

        try:
            self._requested_timeframe = parse_timeframe(source_timeframe)
        except ValueError as e:
            raise IndicatorSetupException(name, "Invalid source timeframe : %s" % str(e))

        self._cumulative_period = self._check_period(name, "Cumulative period", cumulative_period)

        try:
            if isinstance(smooth_method, str):
                smooth_method = Smoother.method_from_str(smooth_method)
            elif smooth_method is None:
                smooth_method = Smoother.SMOOTH_NONE
            elif smooth_method not in (Smoother.SMOOTH_NONE, Smoother.SMOOTH_SMA, Smoother.SMOOTH_EMA):
                raise ValueError("Unknown smoothing method %s" % smooth_method)
        except ValueError as e:
            raise IndicatorSetupException(name, str(e))

        self._smooth_method = smooth_method

        if smooth_period is None:
            # unset means no smoothing period
            smooth_period = 1

        if smooth_method != Smoother.SMOOTH_NONE:
            self._smooth_period = self._check_period(name, "Smoothing period", smooth_period)
        else:
            self._smooth_period = int(smooth_period) if isinstance(smooth_period, numbers.Integral) and not isinstance(
                smooth_period, bool) and smooth_period >= 1 else 1

        try:
            if isinstance(volume_source, str):
                volume_source = volume_source_from_str(volume_source)
            elif volume_source is None:
                volume_source = VOLUME_TICK
            elif volume_source not in (VOLUME_TICK, VOLUME_REAL):
                raise ValueError("Unknown volume source %s" % volume_source)
        except ValueError as e:
            raise IndicatorSetupException(name, str(e))

        self._volume_source = volume_source

    @staticmethod
    def _check_period(name: str, label: str, period) -> int:
        if isinstance(period, bool) or not isinstance(period, numbers.Real):
            raise IndicatorSetupException(name, "%s must be an integer, %s given" % (label, period))

        if not isinstance(period, numbers.Integral) and (not math.isfinite(period) or int(period) != period):
            raise IndicatorSetupException(name, "%s must be an integer, %s given" % (label, period))

        if period < 1:
            raise IndicatorSetupException(name, "%s must be greater or equal to 1, %s given" % (label, period))

        return int(period)

    @property
    def requested_timeframe(self) -> Union[float, None]:
        return self._requested_timeframe

    @property
    def cumulative_period(self) -> int:
        return self._cumulative_period

    @property
    def smooth_method(self) -> int:
        return self._smooth_method

    @property
    def smooth_period(self) -> int:
        return self._smooth_period

    @property
    def volume_source(self) -> int:
        return self._volume_source
