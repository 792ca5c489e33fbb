# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

from prjtree.error import LogicError
from prjtree.pyutils import struct
from prjtree.toolsets import ToolsetId
from prjtree import log

SCOPE_COMPILER = 'compiler'
SCOPE_LINKER   = 'linker'

Option = struct('Option', 'scope, flag')

class OptionSet(object):
    """
    Ordered sequence of compiler/linker options.
    Order is kept as is and duplicates are never collapsed: later entries
    may override earlier ones in the build engine.
    """

    __slots__ = ('_items', '_frozen')

    def __init__(self, items = None):
        self._items = []
        self._frozen = False
        if items:
            for scope, flag in items:
                self.add(scope, flag)

    def _checkNotFrozen(self):
        if self._frozen:
            raise LogicError('OptionSet is frozen and can not be changed')

    def add(self, scope, flag):
        """ Append one option """

        self._checkNotFrozen()
        if scope not in (SCOPE_COMPILER, SCOPE_LINKER):
            raise LogicError('Unknown option scope %r' % scope)
        self._items.append(Option(scope, flag))

    def addCompiler(self, *flags):
        """ Append compiler options """
        for flag in flags:
            self.add(SCOPE_COMPILER, flag)

    def addLinker(self, *flags):
        """ Append linker options """
        for flag in flags:
            self.add(SCOPE_LINKER, flag)

    def extend(self, other):
        """ Append all options from another OptionSet """

        self._checkNotFrozen()
        for opt in other:
            self.add(opt.scope, opt.flag)

    def freeze(self):
        """ Forbid further changes """
        self._frozen = True

    @property
    def frozen(self):
        """ Return True if this set can't be changed anymore """
        return self._frozen

    @property
    def compilerFlags(self):
        """ Get list of compiler flags in order """
        return [x.flag for x in self._items if x.scope == SCOPE_COMPILER]

    @property
    def linkerFlags(self):
        """ Get list of linker flags in order """
        return [x.flag for x in self._items if x.scope == SCOPE_LINKER]

    def asPairs(self):
        """ Get list of (scope, flag) tuples """
        return [(x.scope, x.flag) for x in self._items]

    def __iter__(self):
        return iter(self._items)

    def __len__(self):
        return len(self._items)

    def __bool__(self):
        return bool(self._items)

    def __eq__(self, other):
        if not isinstance(other, OptionSet):
            return NotImplemented
        return self.asPairs() == other.asPairs()

    __hash__ = None

    def __repr__(self):
        return 'OptionSet(%r)' % self.asPairs()

_GNU_LIKE_OPTIONS = tuple((SCOPE_LINKER, x) for x in (
    '-pthread',
    '-static-libstdc++',
    "-Wl,-rpath='$ORIGIN'",
))

# Only these toolsets need special global options. All others get nothing.
_POLICY_TABLE = {
    ToolsetId.GCC   : _GNU_LIKE_OPTIONS,
    ToolsetId.CLANG : _GNU_LIKE_OPTIONS,
}

def optionsFor(toolsetId):
    """
    Get global options for the toolset. Unknown toolsets get an empty
    OptionSet.
    """

    return OptionSet(_POLICY_TABLE.get(toolsetId, ()))

def makeGlobalOptions(toolset, rootParams):
    """
    Make global options of a build invocation: options from the policy
    table for the toolset and then global options declared in the root
    descriptor. Returns tuple (OptionSet, include paths).
    """

    options = OptionSet()
    options.extend(optionsFor(toolset.id))

    std = rootParams.get('cpp-std')
    if std is not None:
        flag = toolset.cppStdFlag(std)
        if flag is None:
            log.warn("Toolset %r has no known option to select C++ standard %r,"
                     " param 'cpp-std' is ignored" % (toolset.name, std))
        else:
            options.addCompiler(flag)

    options.addCompiler(*rootParams.get('compiler-options', []))
    options.addLinker(*rootParams.get('linker-options', []))
    options.freeze()

    includePaths = tuple(rootParams.get('include-paths', []))
    return options, includePaths
