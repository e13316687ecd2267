# @date 2018-08-24
# @author Frederic Scherma, All rights reserved without prejudices.
# @license Copyright (c) 2018 Dream Overflow
# Indicators loading from configuration

from __future__ import annotations

from typing import Dict

import traceback

from importlib import import_module

from .indicator import Indicator
from .indicatorexception import IndicatorException, IndicatorSetupException

import logging
logger = logging.getLogger('cvd.indicator.loader')
traceback_logger = logging.getLogger('cvd.traceback.indicator.loader')


def load_indicators(indicators_config: dict) -> Dict[str, type]:
    """
    Import the class of each indicator having a status 'load'.
    @param indicators_config dict of name: {'status', 'classpath', 'options'}
    @return dict of name: class
    """
    indicators = {}

    for k, indicator in indicators_config.items():
        if indicator.get("status") is not None and indicator.get("status") == "load":
            # retrieve the class-name
            parts = indicator.get('classpath', "").split('.')

            try:
                module = import_module('.'.join(parts[:-1]))
                Clazz = getattr(module, parts[-1])
            except (ImportError, AttributeError, ValueError):
                traceback_logger.error(traceback.format_exc())
                raise IndicatorException(k, "Cannot load indicator classpath %s" % indicator.get('classpath'))

            if not Clazz:
                raise IndicatorException(k, "Cannot load indicator %s" % k)

            indicators[k] = Clazz

    return indicators


def build_indicator(clazz: type, timeframe: float, options: dict = None, base_type: int = Indicator.BASE_TIMEFRAME):
    """
    Instantiate an indicator for a timeframe, options keys are dashed parameters names (ex: cumulative-period).
    @raise IndicatorSetupException if an option is unknown or invalid.
    """
    kwargs = {k.replace('-', '_'): v for k, v in (options or {}).items()}

    try:
        indicator = clazz.builder(base_type, timeframe, **kwargs)
    except TypeError as e:
        raise IndicatorSetupException(clazz.__name__, "Invalid options : %s" % str(e))

    if indicator is None:
        raise IndicatorSetupException(clazz.__name__, "Base type %s is not supported" % base_type)

    return indicator
