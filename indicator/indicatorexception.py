# @date 2018-09-08
# @author Frederic Scherma, All rights reserved without prejudices.
# @license Copyright (c) 2019 Dream Overflow
# Indicator exceptions classes


class IndicatorException(Exception):

    def __init__(self, indicator_name, message):
        self.indicator_name = indicator_name
        self.message = message

    def __str__(self):
        return 'IndicatorException (%s) : %s' % (self.indicator_name, self.message)


class IndicatorSetupException(IndicatorException):
    """
    Invalid parameters or setup, the indicator cannot be activated.
    """

    def __init__(self, indicator_name, message):
        super().__init__(indicator_name, message)

    def __str__(self):
        return 'IndicatorSetupException (%s) : %s' % (self.indicator_name, self.message)
