# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import os
import re
from enum import Enum

from prjtree.constants import ENV_TOOLSET, ENV_COMPILERS
from prjtree.error import ConfigurationError
from prjtree import log

class ToolsetId(Enum):
    """ Known toolsets. Everything else is OTHER. """

    GCC   = 'gcc'
    CLANG = 'clang'
    MSVC  = 'msvc'
    OTHER = 'other'

# capability flags
FLAG_GNU_CMDLINE  = 'gnu-cmdline'
FLAG_MSVC_CMDLINE = 'msvc-cmdline'
FLAG_RPATH        = 'rpath'
FLAG_CPP_STD      = 'cpp-std'

_TOOLSET_FLAGS = {
    ToolsetId.GCC   : frozenset((FLAG_GNU_CMDLINE, FLAG_RPATH, FLAG_CPP_STD)),
    ToolsetId.CLANG : frozenset((FLAG_GNU_CMDLINE, FLAG_RPATH, FLAG_CPP_STD)),
    ToolsetId.MSVC  : frozenset((FLAG_MSVC_CMDLINE, FLAG_CPP_STD)),
    ToolsetId.OTHER : frozenset(),
}

_ALIASES = {
    'gcc'     : ToolsetId.GCC,
    'g++'     : ToolsetId.GCC,
    'clang'   : ToolsetId.CLANG,
    'clang++' : ToolsetId.CLANG,
    'msvc'    : ToolsetId.MSVC,
    'vc'      : ToolsetId.MSVC,
    'cl'      : ToolsetId.MSVC,
}

_RE_VALID_NAME = re.compile(r"^[\w+.-]+$", re.ASCII)
# 'clang++-15', 'g++-12', 'gcc-12.2'
_RE_COMPILER_VER = re.compile(r"-[\d.]+$")

class Toolset(object):
    """
    Identified toolset of the current build invocation. Immutable.
    """

    __slots__ = ('_id', '_name', '_flags')

    def __init__(self, toolsetId, name = None):
        self._id = toolsetId
        self._name = name if name else toolsetId.value
        self._flags = _TOOLSET_FLAGS[toolsetId]

    def __setattr__(self, name, value):
        if hasattr(self, '_flags'):
            raise AttributeError('Toolset is immutable')
        super(Toolset, self).__setattr__(name, value)

    def __eq__(self, other):
        if not isinstance(other, Toolset):
            return NotImplemented
        return (self._id, self._name) == (other._id, other._name)

    def __hash__(self):
        return hash((self._id, self._name))

    def __repr__(self):
        return 'Toolset(%s, %r)' % (self._id.name, self._name)

    @property
    def id(self):
        """ Get ToolsetId """
        return self._id

    @property
    def name(self):
        """ Get name the toolset was identified by """
        return self._name

    @property
    def flags(self):
        """ Get capability flags """
        return self._flags

    def hasFlag(self, flag):
        """ Check capability flag """
        return flag in self._flags

    def cppStdFlag(self, std):
        """
        Get compiler flag to force selected C++ standard.
        Returns None if the toolset has no known way to do it.
        """

        if FLAG_CPP_STD not in self._flags:
            return None
        if FLAG_GNU_CMDLINE in self._flags:
            return '-std=c++%s' % std
        if FLAG_MSVC_CMDLINE in self._flags:
            return '/std:c++%s' % std
        return None # pragma: no cover

def _toolsetFromName(name):

    key = name.lower()
    toolsetId = _ALIASES.get(key)
    if toolsetId is None:
        toolsetId = _ALIASES.get(_RE_COMPILER_VER.sub('', key))
    if toolsetId is None:
        return Toolset(ToolsetId.OTHER, name)
    return Toolset(toolsetId)

def _nameFromEnvToolset(value):
    # 'gcc_linux' -> 'gcc'
    return value.strip().split('_', 1)[0]

def _nameFromCompiler(value):

    # 'ccache g++' -> 'g++'
    value = value.strip().split()[-1] if value.strip() else ''
    name = os.path.basename(value)
    if name.lower().endswith('.exe'):
        name = name[:-4]

    # 'x86_64-linux-gnu-g++-12' -> 'g++'
    lname = _RE_COMPILER_VER.sub('', name.lower())
    for alias in sorted(_ALIASES, key = len, reverse = True):
        if lname == alias or lname.endswith('-' + alias):
            return alias
    return name

def currentToolset(environ = None):
    """
    Identify toolset of the current build invocation.
    Raises ConfigurationError if the toolset can not be identified.
    """

    if environ is None:
        environ = os.environ

    name = None
    source = None

    value = environ.get(ENV_TOOLSET)
    if value is not None:
        name = _nameFromEnvToolset(value)
        source = ENV_TOOLSET
    else:
        for var in ENV_COMPILERS:
            value = environ.get(var)
            if value:
                name = _nameFromCompiler(value)
                source = var
                break

    if source is None:
        msg = "Toolset can not be identified."
        msg += " Set %s or one of %s." % (ENV_TOOLSET, ', '.join(ENV_COMPILERS))
        raise ConfigurationError(msg)

    if not name or not _RE_VALID_NAME.match(name):
        msg = "Toolset can not be identified from %s=%r." % (source, value)
        raise ConfigurationError(msg)

    toolset = _toolsetFromName(name)
    log.debug('toolset: %r (from %s)', toolset, source)
    return toolset
