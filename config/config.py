# @date 2018-08-08
# @author Frederic SCHERMA
# @license Copyright (c) 2018 Dream Overflow
# Default config for : Indicators

# Help
# ----
#
# Considers to make a local config/indicators.json file with what you need to overrides.
# Options keys are the parameters of the indicator, dashed.
#
# cvd options :
#   - source-timeframe: timeframe to sample the delta from ('current' or '1m', '5m'...), it must be lesser
#     or equal to the timeframe of the indicator, else the indicator timeframe is used.
#   - cumulative-period: number of bars summed (>= 1).
#   - smooth-method: 'none', 'sma' or 'ema'.
#   - smooth-period: period of the smoothing (>= 1), 1 means no smoothing.
#   - volume-source: 'tick' (tick volume proxy) or 'real' (traded volume).

INDICATORS = {
    'cvd': {
        'status': 'load',
        'classpath': 'indicator.cumulativevolumedelta.barcvd.BarCumulativeVolumeDelta',
        'options': {
            'source-timeframe': 'current',
            'cumulative-period': 20,
            'smooth-method': 'none',
            'smooth-period': 1,
            'volume-source': 'tick',
        }
    },
}
