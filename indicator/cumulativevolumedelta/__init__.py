# @date 2024-07-28
# @author Frederic Scherma
# @license Copyright (c) 2024 Dream Overflow
# Cumulative Volume Delta Package

from .cvdbase import CumulativeVolumeDeltaBase, resolve_timeframe
from .barcvd import BarCumulativeVolumeDelta
from .smoother import Smoother
