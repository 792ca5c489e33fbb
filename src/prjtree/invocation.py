# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import os

from prjtree.constants import BUILDROOT_FILENAMES
from prjtree.error import ConfigurationError, LogicError
from prjtree.pyutils import struct
from prjtree.toolsets import currentToolset
from prjtree.options import makeGlobalOptions
from prjtree.policy import resolvePolicy, RuntimeSubdirPlacement
from prjtree.graph import Resolver
from prjtree.descriptor import loader, TargetDescriptor, discover
from prjtree import log

joinpath = os.path.join
abspath  = os.path.abspath

BuildResult = struct('BuildResult',
    'rootdir, toolset, policy, globalOptions, includePaths, graph')

PHASE_NONE     = 0
PHASE_TOOLSET  = 1
PHASE_POLICY   = 2
PHASE_OPTIONS  = 3
PHASE_GRAPH    = 4

_PHASE_NAMES = {
    PHASE_TOOLSET : 'toolset identification',
    PHASE_POLICY  : 'override resolution',
    PHASE_OPTIONS : 'global option injection',
    PHASE_GRAPH   : 'graph materialization',
}

def findRootDescriptor(rootdir):
    """
    Get path of the root build descriptor in rootdir or None
    """

    filename = loader.findConfFile(rootdir, BUILDROOT_FILENAMES)
    return joinpath(rootdir, filename) if filename else None

class BuildInvocation(object):
    """
    One build invocation. Phases go in strict order:
    toolset identification, override resolution, global option
    injection and graph materialization. The state of each phase
    is decided once.
    """

    def __init__(self, rootdir, environ = None, jobs = 1, registry = None):
        """
        rootdir  - directory with the root build descriptor
        environ  - environment to identify toolset, os.environ by default
        jobs     - number of threads to resolve projects
        registry - already filled Registry, discovery is done if it's None
        """

        self.rootdir = abspath(rootdir)
        self._environ = os.environ if environ is None else environ
        self._jobs = jobs
        self._registry = registry
        self._phase = PHASE_NONE

        self._root = None
        self._toolset = None
        self._policy = None
        self._globalOptions = None
        self._includePaths = None
        self._graph = None

    def _enterPhase(self, phase):
        if phase != self._phase + 1:
            msg = "Phase %r can't be run " % _PHASE_NAMES[phase]
            if phase <= self._phase:
                msg += "twice"
            else:
                msg += "before %r" % _PHASE_NAMES[self._phase + 1]
            raise LogicError(msg)
        log.debug('invocation: phase %r', _PHASE_NAMES[phase])
        self._phase = phase

    def _checkPhaseDone(self, phase):
        if self._phase < phase:
            raise LogicError("Phase %r is not done yet" % _PHASE_NAMES[phase])

    @property
    def root(self):
        """ Get root composite descriptor """

        if self._root is None:
            path = findRootDescriptor(self.rootdir)
            if path is None:
                msg = "No root build descriptor (%s) found in %r" % \
                        ('/'.join(BUILDROOT_FILENAMES), self.rootdir)
                raise ConfigurationError(msg)
            name = os.path.basename(path)
            self._root = TargetDescriptor.fromFile(name, path, isRoot = True)
        return self._root

    @property
    def toolset(self):
        """ Get identified toolset """
        self._checkPhaseDone(PHASE_TOOLSET)
        return self._toolset

    @property
    def policy(self):
        """ Get build policy """
        self._checkPhaseDone(PHASE_POLICY)
        return self._policy

    @property
    def globalOptions(self):
        """ Get frozen global OptionSet """
        self._checkPhaseDone(PHASE_OPTIONS)
        return self._globalOptions

    @property
    def graph(self):
        """ Get resolved BuildGraph """
        self._checkPhaseDone(PHASE_GRAPH)
        return self._graph

    def identifyToolset(self):
        """ Phase 1 """
        self._enterPhase(PHASE_TOOLSET)
        self._toolset = currentToolset(self._environ)
        return self._toolset

    def resolvePolicy(self):
        """ Phase 2 """
        self._enterPhase(PHASE_POLICY)
        self._policy = resolvePolicy(self.rootdir)
        log.setBrief(self._policy.showBrief)
        return self._policy

    def injectGlobalOptions(self):
        """ Phase 3 """
        self._enterPhase(PHASE_OPTIONS)
        self._globalOptions, self._includePaths = \
                        makeGlobalOptions(self._toolset, self.root.rootParams)
        return self._globalOptions

    def _skipdirs(self):
        placement = self._policy.placement
        if isinstance(placement, RuntimeSubdirPlacement):
            return [placement.root]
        # output dirs of the override are unknown here
        return []

    def materializeGraph(self):
        """ Phase 4 """
        self._enterPhase(PHASE_GRAPH)

        registry = self._registry
        if registry is None:
            registry = discover(self.rootdir, skipdirs = self._skipdirs())
            log.debug('invocation: %d project(s) discovered', len(registry))

        resolver = Resolver(registry, jobs = self._jobs,
                            onMaterialize = _logMaterialized)
        self._graph = resolver.resolve(self.root)
        return self._graph

    def run(self):
        """
        Run all phases and return BuildResult
        """

        # root descriptor errors are found before any phase
        root = self.root

        self.identifyToolset()
        self.resolvePolicy()
        self.injectGlobalOptions()
        self.materializeGraph()

        log.debug('invocation: %r resolved, %d project(s)',
                  root.name, len(self._graph))

        return BuildResult(
            rootdir = self.rootdir,
            toolset = self._toolset,
            policy = self._policy,
            globalOptions = self._globalOptions,
            includePaths = self._includePaths,
            graph = self._graph,
        )

def _logMaterialized(node):

    if log.brief():
        log.printStep('%s [%s]' % (node.target, node.kind))
        return

    msg = '%s: target %r, kind %r' % (node.name, node.target, node.kind)
    if node.sources:
        msg += ', sources: %s' % ' '.join(node.sources)
    if node.requires:
        msg += ', requires: %s' % ' '.join(node.requires)
    log.info(msg)
