# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.

 Build policy: runtime mode and placement of objects/targets.
 The local override descriptor, if it exists, decides both. Otherwise
 default policy is applied. They are never combined.
"""

import os
import posixpath
from enum import Enum

from prjtree.constants import OVERRIDE_FILENAMES, DEFAULT_PLACEMENT_ROOT
from prjtree.constants import OBJS_DIRNAME
from prjtree.error import PolicyAmbiguityError
from prjtree.descriptor import loader
from prjtree import log

joinpath = os.path.join

class RuntimeMode(Enum):
    """ Build-wide runtime mode """

    RELEASE  = 'release'
    DEBUG    = 'debug'
    OVERRIDE = 'override'

class RuntimeSubdirPlacement(object):
    """
    Objects and targets are grouped by runtime mode subdirectory:
        <root>/<mode>/                  - targets
        <root>/_objs/<mode>/<prjdir>/   - object files
    """

    __slots__ = ('root',)

    kind = 'runtime-subdir'

    def __init__(self, root = DEFAULT_PLACEMENT_ROOT):
        self.root = root

    def targetDir(self, mode, _):
        """ Get directory for targets of a project """
        return posixpath.join(self.root, mode.value)

    def objDir(self, mode, prjdir):
        """ Get directory for object files of a project """
        return posixpath.normpath(posixpath.join(self.root, OBJS_DIRNAME,
                                                 mode.value, prjdir))

    def __eq__(self, other):
        if not isinstance(other, RuntimeSubdirPlacement):
            return NotImplemented
        return self.root == other.root

    __hash__ = None

    def __repr__(self):
        return 'RuntimeSubdirPlacement(%r)' % self.root

class OverridePlacement(object):
    """ Placement is decided by the override descriptor """

    __slots__ = ()

    kind = 'override'

    def targetDir(self, *_):
        """ It's not known here """
        return None

    objDir = targetDir

    def __eq__(self, other):
        if not isinstance(other, OverridePlacement):
            return NotImplemented
        return True

    __hash__ = None

    def __repr__(self):
        return 'OverridePlacement()'

class BuildPolicy(object):
    """
    Policy of one build invocation. It's decided once and isn't changed.
    """

    __slots__ = ('runtimeMode', 'placement', 'showBrief', 'overridePath',
                 'overrideParams')

    def __init__(self, runtimeMode, placement, showBrief = False,
                 overridePath = None, overrideParams = None):
        self.runtimeMode = runtimeMode
        self.placement = placement
        self.showBrief = showBrief
        self.overridePath = overridePath
        self.overrideParams = overrideParams

    @property
    def isOverridden(self):
        """ Return True if the policy comes from the override descriptor """
        return self.overridePath is not None

    def __repr__(self):
        return 'BuildPolicy(%s, %r, override=%r)' % \
                (self.runtimeMode.name, self.placement, self.overridePath)

def findOverride(rootdir):
    """
    Find the local override descriptor in the rootdir.
    Returns path or None.
    """

    filename = loader.findConfFile(rootdir, OVERRIDE_FILENAMES)
    return joinpath(rootdir, filename) if filename else None

def defaultRuntimeMode():
    """ Runtime mode when no override exists """
    return RuntimeMode.RELEASE

def defaultPlacement():
    """ Placement when no override exists """
    return RuntimeSubdirPlacement(DEFAULT_PLACEMENT_ROOT)

def resolvePolicy(rootdir):
    """
    Decide build policy for the project in the rootdir.
    """

    overridePath = findOverride(rootdir)

    runtimeMode = placement = None
    showBrief = False
    overrideParams = None

    if overridePath is not None:
        log.debug('policy: using override %r', overridePath)
        # content of the override is opaque here, it's just passed further
        overrideParams = loader.loadOpaque(overridePath)
        runtimeMode = RuntimeMode.OVERRIDE
        placement = OverridePlacement()
    else:
        log.debug('policy: no override, using defaults')
        runtimeMode = defaultRuntimeMode()
        placement = defaultPlacement()
        showBrief = True

    overridden = runtimeMode == RuntimeMode.OVERRIDE
    if overridden != isinstance(placement, OverridePlacement) or \
                            overridden != (overridePath is not None):
        raise PolicyAmbiguityError("Build policy is mixed from defaults "
                                   "and the override %r" % overridePath)

    return BuildPolicy(runtimeMode, placement, showBrief = showBrief,
                       overridePath = overridePath,
                       overrideParams = overrideParams)
