# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import os
import fnmatch

from prjtree.constants import PRJ_FILE_PATTERNS
from prjtree.error import ConfigurationError
from prjtree.pyutils import maptype
from prjtree.utils import normPrjName
from prjtree.descriptor.target import TargetDescriptor
from prjtree import log

joinpath = os.path.join
relpath  = os.path.relpath

class Registry(object):
    """
    In-memory registry of project descriptors keyed by stable names.
    It's filled before resolution so that resolving of a name is just
    a lookup.
    """

    __slots__ = ('_descriptors',)

    def __init__(self):
        self._descriptors = {}

    def register(self, name, descriptor):
        """
        Register descriptor. Param 'descriptor' can be a TargetDescriptor
        or a dict with params.
        """

        name = normPrjName(name)
        if name in self._descriptors:
            other = self._descriptors[name]
            msg = "Project %r is registered more than once" % name
            if other.path:
                msg += " (first from %r)" % other.path
            raise ConfigurationError(msg + '.')

        if isinstance(descriptor, maptype):
            descriptor = TargetDescriptor(name, descriptor)
        elif descriptor.name != name:
            msg = "Descriptor %r can't be registered as %r." % (descriptor.name, name)
            raise ConfigurationError(msg)

        self._descriptors[name] = descriptor
        return descriptor

    def get(self, name):
        """
        Get descriptor by name. Returns None if not found.
        """
        return self._descriptors.get(normPrjName(name))

    def names(self):
        """ Get sorted names of all registered descriptors """
        return sorted(self._descriptors)

    def __contains__(self, name):
        return normPrjName(name) in self._descriptors

    def __len__(self):
        return len(self._descriptors)

    def __iter__(self):
        return iter(self._descriptors.values())

def _isPrjFile(filename):
    return any(fnmatch.fnmatchcase(filename, x) for x in PRJ_FILE_PATTERNS)

def discover(rootdir, registry = None, skipdirs = None):
    """
    Walk project tree from rootdir and register all found project
    descriptors by their relative paths. Hidden directories and
    directories from skipdirs (relative to rootdir) are not visited.
    Returns registry.
    """

    if registry is None:
        registry = Registry()

    rootdir = os.path.abspath(rootdir)
    skipdirs = set(normPrjName(x) for x in (skipdirs or []))

    for dirpath, dirnames, filenames in os.walk(rootdir):

        reldir = normPrjName(relpath(dirpath, rootdir))
        # don't visit such sub directories, os.walk allows to change dirnames
        dirnames[:] = sorted(x for x in dirnames \
            if not x.startswith('.') and \
                normPrjName(reldir + '/' + x) not in skipdirs)

        for filename in sorted(filenames):
            if not _isPrjFile(filename):
                continue
            name = normPrjName(reldir + '/' + filename)
            filepath = joinpath(dirpath, filename)
            log.debug('discovery: found %r', name)
            registry.register(name, TargetDescriptor.fromFile(name, filepath))

    return registry
