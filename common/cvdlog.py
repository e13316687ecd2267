# @date 2018-08-24
# @author Frederic Scherma, All rights reserved without prejudices.
# @license Copyright (c) 2018 Dream Overflow
# CVD logger

import copy
import logging
import pathlib

from logging.handlers import RotatingFileHandler


class ColoredFormatter(logging.Formatter):

    COLORS = {
        'DEFAULT': '\033[0m',
        'ERROR': '\033[31m',
        'WARNING': '\033[33m',
        'NOTICE': '\033[36m',
    }

    def __init__(self, fmt, use_color=True):
        logging.Formatter.__init__(self, fmt, datefmt='%H:%M:%S')
        self.use_color = use_color

    def format(self, record):
        if not self.use_color:
            return logging.Formatter.format(self, record)

        # work on a copy, the record is shared with the file handlers
        record = copy.copy(record)

        if record.levelno in (logging.ERROR, logging.CRITICAL):
            color = self.COLORS['ERROR']
        elif record.levelno == logging.WARNING:
            color = self.COLORS['WARNING']
        elif record.levelno == logging.DEBUG:
            color = self.COLORS['NOTICE']
        else:
            color = self.COLORS['DEFAULT']

        record.name = color + '- ' + record.name + self.COLORS['DEFAULT'] + ' '
        record.msg = color + str(record.msg) + self.COLORS['DEFAULT']

        return logging.Formatter.format(self, record)


class ConsoleHandler(logging.StreamHandler):

    def filter(self, record):
        if record.name.startswith('cvd.traceback.'):
            # this only goes to loggers, not to stdout
            return False

        return True


class CvdLog(object):
    """
    CVD logger initialized based on python logger.

    @param options dict with 'log-path' and 'log-name', optionally 'log-level' and 'log-color'.
    """

    def __init__(self, options):
        log_path = pathlib.Path(options.get('log-path', '.'))
        log_name = options.get('log-name', 'cvd.log')

        log_path.mkdir(parents=True, exist_ok=True)

        # stderr in debug level
        self.console = ConsoleHandler()
        self.console.setLevel(options.get('log-level', logging.DEBUG))

        self.term_formatter = ColoredFormatter('%(asctime)s %(name)-s%(message)s', options.get('log-color', True))
        self.console.setFormatter(self.term_formatter)

        # add the handler to the root logger
        logging.getLogger('').addHandler(self.console)

        # default log file formatter
        self.file_formatter = logging.Formatter('%(asctime)s %(levelname)s %(message)s')

        # a cvd logger with cvd.log
        self.file_logger = RotatingFileHandler(str(log_path / log_name), maxBytes=1024*1024, backupCount=5)
        self.file_logger.setFormatter(self.file_formatter)
        self.file_logger.setLevel(logging.DEBUG)

        self.add_file_logger('cvd', self.file_logger)

        # a cvd logger with error.cvd.log
        self.error_file_logger = RotatingFileHandler(str(log_path / ("error." + log_name)),
                                                     maxBytes=1024*1024, backupCount=5)
        self.error_file_logger.setFormatter(self.file_formatter)
        self.error_file_logger.setLevel(logging.INFO)

        # don't propagate error to cvd logger
        self.add_file_logger('cvd.error', self.error_file_logger, False)

    def add_file_logger(self, name, handler, propagate=True):
        my_logger = logging.getLogger(name)

        my_logger.addHandler(handler)
        my_logger.setLevel(logging.DEBUG)
        my_logger.propagate = propagate

        return my_logger

    def terminate(self):
        for name, handler in (('cvd', self.file_logger), ('cvd.error', self.error_file_logger)):
            logging.getLogger(name).removeHandler(handler)
            handler.close()

        logging.getLogger('').removeHandler(self.console)
