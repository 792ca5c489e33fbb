# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import re

from prjtree.constants import NODE_KINDS, NODE_KIND_ALIASES, LIB_TYPES
from prjtree.error import ConfigurationValueError

_RE_CPP_STD = re.compile(r"^\d{2}[a-z]?$")
_RE_TARGET_NAME = re.compile(r"^[\w.+-]+$", re.ASCII)

def _checkCppStd(_, value, fullkey):

    if not _RE_CPP_STD.match(str(value)):
        msg = "Value %r is invalid C++ standard for the param %r." % (value, fullkey)
        msg += " It should be like 14, 17, 20 or 2a."
        raise ConfigurationValueError(msg)

def _checkTargetName(_, value, fullkey):

    if not _RE_TARGET_NAME.match(value):
        msg = "Value %r is invalid target name for the param %r." % (value, fullkey)
        raise ConfigurationValueError(msg)

_STR_OR_LIST = { 'type': ('str', 'list-of-strs') }

confscheme = {
    'target' : {
        'type' : 'str',
        'allowed' : _checkTargetName,
    },
    'kind' : {
        'type' : 'str',
        'allowed' : sorted(NODE_KINDS | set(NODE_KIND_ALIASES)),
    },
    'sources' : _STR_OR_LIST,
    'requires' : _STR_OR_LIST,
    'lib-type' : {
        'type' : 'str',
        'allowed' : LIB_TYPES,
    },
    'cpp-std' : {
        'type' : ('int', 'str'),
        'allowed' : _checkCppStd,
    },
    'include-paths' : _STR_OR_LIST,
    'compiler-options' : _STR_OR_LIST,
    'linker-options' : _STR_OR_LIST,
}
