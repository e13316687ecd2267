from setuptools import setup

setup(
    name='cvd',
    version='1.0.0',
    description='Cumulative Volume Delta indicator estimated from multi-timeframe OHLCV bars',
    packages=[
        'common',
        'config',
        'instrument',
        'indicator',
        'indicator.cumulativevolumedelta',
    ],
    python_requires='>=3.8',
    install_requires=[
        'numpy',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
