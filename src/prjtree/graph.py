# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import threading
from concurrent.futures import ThreadPoolExecutor

from prjtree.error import ResolutionError, DuplicateNameError, CycleError
from prjtree.utils import normPrjName
from prjtree import log

class ProjectNode(object):
    """
    Materialized project. There is only one object for each name in
    one build invocation.
    """

    __slots__ = ('descriptor', 'deps')

    def __init__(self, descriptor, deps):
        self.descriptor = descriptor
        self.deps = tuple(deps)

    @property
    def name(self):
        """ Unique name of the project """
        return self.descriptor.name

    @property
    def target(self):
        """ Target name """
        return self.descriptor.target

    @property
    def kind(self):
        """ Kind of the project: executable, library or composite """
        return self.descriptor.kind

    @property
    def libType(self):
        """ Library type, None for non libraries """
        return self.descriptor.libType

    @property
    def sources(self):
        """ Source files """
        return self.descriptor.sources

    @property
    def requires(self):
        """ Names of required projects """
        return self.descriptor.requires

    @property
    def dirname(self):
        """ Directory of the project relative to the root """
        return self.descriptor.dirname

    def __repr__(self):
        return 'ProjectNode(%r)' % self.name

class BuildGraph(object):
    """
    Closure of all project nodes reachable from the root.
    The root composite itself is not one of the nodes.
    """

    __slots__ = ('_root', '_nodes')

    def __init__(self, root, nodes):
        self._root = root
        self._nodes = dict((x.name, x) for x in nodes)

    @property
    def root(self):
        """ Get root composite node """
        return self._root

    @property
    def nodes(self):
        """ Get dict name -> node """
        return self._nodes

    def node(self, name):
        """ Get node by name, raises KeyError if not found """
        return self._nodes[normPrjName(name)]

    @property
    def edges(self):
        """ Get set of (from, to) name pairs, without edges of the root """
        return frozenset((node.name, dep.name) \
                    for node in self._nodes.values() for dep in node.deps)

    def incoming(self, name):
        """ Get sorted names of nodes that require the name """
        name = normPrjName(name)
        return sorted(x.name for x in self._nodes.values() \
                    if any(dep.name == name for dep in x.deps))

    def structure(self):
        """ Get (node names, edges) to compare graphs """
        return frozenset(self._nodes), self.edges

    def buildOrder(self):
        """
        Get list of nodes where each node goes after all its dependencies.
        Result doesn't depend on thread scheduling.
        """

        result = []
        seen = set()

        def visit(node):
            for dep in node.deps:
                if dep.name not in seen:
                    seen.add(dep.name)
                    visit(dep)
            result.append(node)

        for node in self._root.deps:
            if node.name not in seen:
                seen.add(node.name)
                visit(node)
        return result

    def linkInputs(self, name):
        """
        Get library nodes the node must be linked with, in link order:
        a library goes before libraries it depends on. Each library is
        in the list only once. Composites are transparent.
        """

        order = []
        seen = set()

        def visit(node):
            for dep in node.deps:
                if dep.name in seen:
                    continue
                seen.add(dep.name)
                visit(dep)
                order.append(dep)

        visit(self.node(name))
        order.reverse()
        return [x for x in order if x.kind == 'library']

    def __len__(self):
        return len(self._nodes)

    def __contains__(self, name):
        return normPrjName(name) in self._nodes

    def __iter__(self):
        return iter(self._nodes.values())

class _Slot(object):
    """ Entry of the memo table """

    __slots__ = ('node', 'error', 'done')

    def __init__(self):
        self.node = None
        self.error = None
        self.done = threading.Event()

def checkRequirements(registry, root):
    """
    Check declared requirements reachable from the root descriptor
    before anything is materialized. Raises CycleError or ResolutionError.
    """

    # 1 - in progress, 2 - done
    state = {}

    def visit(descriptor, chain):
        state[descriptor.name] = 1
        for name in descriptor.requires:
            if state.get(name) == 1:
                raise CycleError(chain[chain.index(name):] + (name,))
            if state.get(name) == 2:
                continue
            dep = registry.get(name)
            if dep is None:
                raise ResolutionError(name, descriptor.name)
            visit(dep, chain + (name,))
        state[descriptor.name] = 2

    visit(root, (root.name,))

class Resolver(object):
    """
    Materializes project nodes by names. Each name is materialized at
    most once even if it is required many times, concurrently included.
    """

    __slots__ = ('_registry', '_jobs', '_memo', '_lock', '_onMaterialize',
                 '_materialized')

    def __init__(self, registry, jobs = 1, onMaterialize = None):
        """
        registry      - Registry with all known descriptors
        jobs          - number of threads to resolve top-level projects
        onMaterialize - optional callable(node) called once for each node
                        after the whole graph is resolved successfully
        """

        self._registry = registry
        self._jobs = max(1, jobs or 1)
        self._onMaterialize = onMaterialize
        self._memo = {}
        self._lock = threading.Lock()
        self._materialized = []

    @property
    def materialized(self):
        """ Number of nodes materialized by the last resolve """
        return len(self._materialized)

    def require(self, name, requiredBy = None, chain = ()):
        """
        Get node by name, materializing it if it's not done yet.
        Param 'chain' is the list of names being resolved by the caller
        and is used to detect cycles.
        """

        name = normPrjName(name)

        with self._lock:
            slot = self._memo.get(name)
            owner = slot is None
            if owner:
                # register before resolving of nested requirements
                slot = self._memo[name] = _Slot()

        if not owner:
            if name in chain:
                raise CycleError(chain[chain.index(name):] + (name,))
            slot.done.wait()
            if slot.error is not None:
                raise slot.error
            return slot.node

        try:
            descriptor = self._registry.get(name)
            if descriptor is None:
                raise ResolutionError(name, requiredBy)
            node = self._materialize(descriptor, chain + (name,))
        except BaseException as ex:
            slot.error = ex
            slot.done.set()
            raise

        slot.node = node
        slot.done.set()
        return node

    def _materialize(self, descriptor, chain, deps = None, isRoot = False):

        if deps is None:
            deps = [self.require(x, descriptor.name, chain) \
                                        for x in descriptor.requires]

        if descriptor.kind == 'composite':
            _checkUniqueTargets(descriptor, deps)

        node = ProjectNode(descriptor, deps)
        if isRoot:
            return node

        with self._lock:
            self._materialized.append(node)
        return node

    def _requireTopLevel(self, root, chain):

        names = root.requires
        if self._jobs == 1 or len(names) < 2:
            return [self.require(x, root.name, chain) for x in names]

        log.debug('resolver: using %d threads', self._jobs)
        with ThreadPoolExecutor(max_workers = self._jobs) as executor:
            futures = [executor.submit(self.require, x, root.name, chain) \
                                                            for x in names]
            return [x.result() for x in futures]

    def resolve(self, root):
        """
        Resolve graph from the root composite descriptor.
        Returns BuildGraph. Nothing is kept or reported if resolving fails.
        """

        self._memo.clear()
        self._materialized = []

        # threads must never wait each other in a cycle
        checkRequirements(self._registry, root)

        rootSlot = self._memo[root.name] = _Slot()
        chain = (root.name,)
        try:
            deps = self._requireTopLevel(root, chain)
            rootNode = self._materialize(root, chain, deps, isRoot = True)
        except BaseException:
            rootSlot.done.set()
            self._memo.clear()
            self._materialized = []
            raise

        rootSlot.node = rootNode
        rootSlot.done.set()

        if self._onMaterialize is not None:
            for node in self._materialized:
                self._onMaterialize(node)

        nodes = [x.node for k, x in self._memo.items() if k != root.name]
        return BuildGraph(rootNode, nodes)

def _checkUniqueTargets(descriptor, deps):

    seen = {}
    for node in deps:
        seen.setdefault(node.target, []).append(node.name)

    for target, names in seen.items():
        if len(names) > 1:
            raise DuplicateNameError(target, descriptor.name, names)
