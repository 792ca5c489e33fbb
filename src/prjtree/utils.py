# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import os
import re
import sys
from types import ModuleType

from prjtree.pyutils import stringtype

_RE_TOLIST = re.compile(r"""((?:[^\s"']|"[^"]*"|'[^']*')+)""", re.ASCII)
_RE_PLATFORM_VER = re.compile(r"\d+$")

def platform():
    """
    Return current system platform. It is always 'windows' for MS Windows.
    """

    result = sys.platform
    if result.startswith('java'):
        result = os.name # pragma: no cover
    if result.startswith('win32'):
        return 'windows' # pragma: no cover
    return _RE_PLATFORM_VER.sub('', result)

def stripQuotes(val):
    """
    Strip quotes ' or " from the begin and the end of a string but only
    if they are the same on both sides.
    """

    if len(val) < 2:
        return val

    first = val[0]
    last = val[-1]
    if first == last and first in ("'", '"'):
        return val[1:-1]

    return val

def toList(val):
    """
    Converts a string argument to a list by splitting it by spaces.
    Quoted substrings with spaces are preserved.
    Returns the object if not a string
    """
    if not isinstance(val, stringtype):
        return val

    if not ('"' in val or "'" in val): # optimization
        return val.split()

    return [stripQuotes(x) for x in _RE_TOLIST.split(val)[1::2]]

def uniqueListWithOrder(lst):
    """
    Return new list with preserved the original order of the list.
    Each element in lst must be hashable.
    """

    # pylint: disable = simplifiable-condition

    used = set()
    return [x for x in lst if x not in used and (used.add(x) or True)]

def envValToBool(rawVal):
    """
    Return env val as native bool value.
    Returns False if not recognized.
    """

    result = False
    if rawVal:
        try:
            # value from os.environ is a string but it may be a digit
            result = bool(int(rawVal))
        except ValueError:
            result = rawVal in ('true', 'True', 'yes')

    return result

def normPrjName(name):
    """
    Make stable registry name from a relative path of a descriptor:
    POSIX separators, no '.' and '..' parts.
    """

    name = name.replace('\\', '/')
    parts = []
    for part in name.split('/'):
        if part in ('', '.'):
            continue
        if part == '..':
            if parts and parts[-1] != '..':
                parts.pop()
                continue
        parts.append(part)
    return '/'.join(parts)

def loadPyFile(filepath, name = None):
    """
    Load python file as a module object without importing it into
    sys.modules. Returns the module object.
    """

    if name is None:
        name = os.path.splitext(os.path.basename(filepath))[0]

    module = ModuleType(name)
    module.__file__ = os.path.abspath(filepath)

    with open(filepath, 'rt', encoding = 'utf-8') as file:
        code = file.read()

    dirpath = os.path.dirname(module.__file__)
    # descriptor may import helpers placed next to it
    sys.path.insert(0, dirpath)
    # Avoid writing .pyc files
    dontWriteBytecode = sys.dont_write_bytecode
    sys.dont_write_bytecode = True
    try:
        # pylint: disable = exec-used
        exec(compile(code, module.__file__, 'exec'), module.__dict__)
    finally:
        sys.dont_write_bytecode = dontWriteBytecode
        sys.path.pop(0)

    return module
