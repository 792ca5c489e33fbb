# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import os
import sys
import logging

from prjtree.constants import PLATFORM, ENV_ON_TTY
from prjtree.utils import envValToBool

LOGGER_NAME = 'prjtree'

colorSettings = { 'USE' : 1 }

_COLORS = {
    'BOLD'  : '\x1b[01;1m',
    'RED'   : '\x1b[01;31m',
    'GREEN' : '\x1b[32m',
    'YELLOW': '\x1b[33m',
    'PINK'  : '\x1b[35m',
    'BLUE'  : '\x1b[01;34m',
    'CYAN'  : '\x1b[36m',
    'GREY'  : '\x1b[37m',
    'NORMAL': '\x1b[0m',
}

class _Colors(object):
    """ Access to color escape codes, empty strings if colors are off """

    def __call__(self, name):
        if not colorSettings['USE']:
            return ''
        return _COLORS.get(name, '')

    def __getattr__(self, name):
        if name not in _COLORS:
            raise AttributeError(name)
        return self(name)

colors = _Colors()

class _StreamHandler(logging.StreamHandler):
    """ Info goes to stdout, everything else to stderr """

    def emit(self, record):
        self.stream = sys.stdout if record.levelno == logging.INFO else sys.stderr
        super(_StreamHandler, self).emit(record)

class _Formatter(logging.Formatter):
    """ Formatter with colors """

    def format(self, record):
        msg = record.getMessage()
        c1 = getattr(record, 'c1', None)
        if c1 is None:
            if record.levelno >= logging.ERROR:
                c1 = colors.RED
            elif record.levelno >= logging.WARNING:
                c1 = colors.YELLOW
            elif record.levelno <= logging.DEBUG:
                c1 = colors.GREY
            else:
                c1 = ''
        c2 = getattr(record, 'c2', colors.NORMAL if c1 else '')
        return '%s%s%s' % (c1, msg, c2)

_state = {
    'verbose' : 0,
    'brief' : False,
    'quiet' : False,
}

def _initLogger():
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        handler = _StreamHandler()
        handler.setFormatter(_Formatter())
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
        logger.propagate = False
    return logger

_logger = _initLogger()

def debug(msg, *args, **kwargs):
    """ Log debug message, it's shown only with verbose > 1 """
    _logger.debug(msg, *args, **kwargs)

def info(msg, *args, **kwargs):
    """ Log info message """
    _logger.info(msg, *args, **kwargs)

def warn(msg, *args, **kwargs):
    """ Log warning """
    _logger.warning(msg, *args, **kwargs)

def error(msg, *args, **kwargs):
    """ Log error """
    _logger.error(msg, *args, **kwargs)

def pprint(color, msg, **kwargs):
    """ Print message with selected color """

    extra = dict(kwargs.pop('extra', {}))
    extra['c1'] = colors(color)
    info(msg, extra = extra, **kwargs)

def printStep(msg, **kwargs):
    """
    Log some step of the command
    """

    extra = dict(kwargs.get('extra', {}))
    if 'c1' not in extra:
        extra.update({ 'c1': colors.CYAN })
        kwargs.update({'extra' : extra})
    info(msg, **kwargs)

def enableColorsByCli(colorArg):
    """
    Set up log colors by arg from CLI
    """

    setting = {'yes' : 2, 'auto' : 1, 'no' : 0}[colorArg]
    if setting == 1:
        onTTY = os.environ.get(ENV_ON_TTY)
        if onTTY:
            onTTY = envValToBool(onTTY)
        else:
            onTTY = sys.stderr.isatty() or sys.stdout.isatty()
        if not onTTY:
            setting = 0

    if setting == 1:
        defaultTerm = '' if PLATFORM == 'windows' else 'dumb'
        if os.environ.get('TERM', defaultTerm) in ('dumb', 'emacs'):
            setting = 0

    colorSettings['USE'] = setting

def colorsEnabled():
    """ Return True if color output is enabled """
    return bool(colorSettings['USE'])

def verbose():
    """ Get current verbose level """
    return _state['verbose']

def setVerbose(value):
    """ Set current verbose level """
    _state['verbose'] = value
    _updateLevel()

def brief():
    """ Return True if brief output mode is on """
    return _state['brief']

def setBrief(value):
    """ Switch brief output mode """
    _state['brief'] = bool(value)

def setQuiet(value):
    """ Show only warnings and errors, stdout is left for the command output """
    _state['quiet'] = bool(value)
    _updateLevel()

def _updateLevel():
    if _state['quiet']:
        level = logging.WARNING
    elif _state['verbose'] > 1:
        level = logging.DEBUG
    else:
        level = logging.INFO
    _logger.setLevel(level)
