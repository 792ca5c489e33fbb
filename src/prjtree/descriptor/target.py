# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import posixpath

from prjtree.constants import NODE_KIND_ALIASES, KINDS_WITH_SOURCES
from prjtree.constants import ROOT_ONLY_PARAMS, LIB_TYPES
from prjtree.error import ConfigurationError
from prjtree.utils import toList, uniqueListWithOrder, normPrjName
from prjtree.descriptor.validator import Validator
from prjtree.descriptor import loader

class TargetDescriptor(object):
    """
    Leaf declaration of a project: target name, kind, sources and
    names of required projects. It has no behavior beyond validation.
    """

    __slots__ = (
        'name', 'target', 'kind', 'libType', 'sources', 'requires',
        'params', 'path', 'isRoot',
    )

    def __init__(self, name, params, path = None, isRoot = False):
        """
        name   - stable registry name, e.g. 'v1/prj.yaml'
        params - dict with params of the descriptor
        path   - file the descriptor was loaded from, None for in-memory ones
        """

        self.name = name
        self.path = path
        self.isRoot = isRoot
        self.params = dict(params)

        Validator(self.params, confpath = path).run()
        self._setup()

    def _error(self, msg):
        if self.path:
            return ConfigurationError(msg, confpath = self.path)
        return ConfigurationError("Project %r: %s" % (self.name, msg))

    def _setup(self):

        params = self.params

        kind = params.get('kind')
        if kind is None:
            if not self.isRoot:
                raise self._error("Param 'kind' is required.")
            kind = 'composite'
        kind = NODE_KIND_ALIASES.get(kind, kind)
        if self.isRoot and kind != 'composite':
            raise self._error("Root build descriptor must be 'composite',"
                              " not %r." % kind)
        self.kind = kind

        if not self.isRoot:
            rootOnly = sorted(ROOT_ONLY_PARAMS & set(params))
            if rootOnly:
                raise self._error("Params %s are allowed only in the root"
                                  " build descriptor." % str(rootOnly)[1:-1])

        target = params.get('target')
        if target is None:
            if kind != 'composite':
                raise self._error("Param 'target' is required for kind %r." % kind)
            target = self.name
        self.target = target

        sources = list(toList(params.get('sources', [])))
        if kind in KINDS_WITH_SOURCES:
            if not sources:
                raise self._error("Param 'sources' can't be empty for kind %r." % kind)
        elif sources:
            raise self._error("Param 'sources' is not allowed for kind %r." % kind)
        self.sources = tuple(sources)

        libType = params.get('lib-type')
        if libType is not None and kind != 'library':
            raise self._error("Param 'lib-type' is allowed only for libraries.")
        if libType is None and kind == 'library':
            libType = LIB_TYPES[0]
        self.libType = libType

        # the same name twice is the same requirement
        requires = [normPrjName(x) for x in toList(params.get('requires', []))]
        self.requires = tuple(uniqueListWithOrder(requires))

    @property
    def dirname(self):
        """ Directory of the descriptor relative to the root, POSIX style """
        return posixpath.dirname(self.name)

    @property
    def rootParams(self):
        """ Get params that are valid only for the root descriptor """

        result = {}
        for name in ROOT_ONLY_PARAMS:
            value = self.params.get(name)
            if value is None:
                continue
            if name == 'cpp-std':
                result[name] = str(value)
            else:
                result[name] = list(toList(value))
        return result

    def __repr__(self):
        return 'TargetDescriptor(%r, kind=%r, target=%r)' % \
                (self.name, self.kind, self.target)

    @classmethod
    def fromFile(cls, name, filepath, isRoot = False):
        """
        Load descriptor from file
        """

        params = loader.load(filepath)
        return cls(name, params, path = filepath, isRoot = isRoot)
