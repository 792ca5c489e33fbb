# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.

 Build plan is what the external build engine gets: resolved units in
 build order with global options and placement.
"""

import io
import posixpath

import yaml

from prjtree.constants import KINDS_WITH_SOURCES
from prjtree.version import current as currentVersion

PLAN_FORMAT_VERSION = 1

def _makeUnit(graph, node, policy):

    mode = policy.runtimeMode
    placement = policy.placement

    unit = {
        'name' : node.name,
        'target' : node.target,
        'kind' : node.kind,
        'sources' : [posixpath.normpath(posixpath.join(node.dirname, x)) \
                                                    for x in node.sources],
        'link' : [x.target for x in graph.linkInputs(node.name)],
        'target-dir' : placement.targetDir(mode, node.dirname),
        'obj-dir' : placement.objDir(mode, node.dirname),
    }
    if node.libType is not None:
        unit['lib-type'] = node.libType
    return unit

def _plainData(value):

    # content of the override is not known, it must be dumpable anyway
    if isinstance(value, dict):
        return { str(k):_plainData(v) for k, v in value.items() }
    if isinstance(value, (list, tuple)):
        return [_plainData(x) for x in value]
    if isinstance(value, (set, frozenset)):
        return sorted(_plainData(x) for x in value)
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    return repr(value)

def makePlan(result):
    """
    Make build plan as a dict from BuildResult
    """

    policy = result.policy
    graph = result.graph

    placement = { 'kind' : policy.placement.kind }
    if policy.placement.kind == 'runtime-subdir':
        placement['root'] = policy.placement.root

    plan = {
        'format' : PLAN_FORMAT_VERSION,
        'generator' : 'prjtree %s' % currentVersion(),
        'root' : graph.root.name,
        'toolset' : result.toolset.name,
        'runtime-mode' : policy.runtimeMode.value,
        'placement' : placement,
        'global-options' : {
            'compiler' : result.globalOptions.compilerFlags,
            'linker' : result.globalOptions.linkerFlags,
        },
        'include-paths' : list(result.includePaths),
        'units' : [_makeUnit(graph, x, policy) for x in graph.buildOrder() \
                                            if x.kind in KINDS_WITH_SOURCES],
    }

    if policy.isOverridden:
        plan['override'] = {
            'path' : policy.overridePath,
            'params' : _plainData(policy.overrideParams),
        }

    return plan

def dumpPlan(plan, stream = None):
    """
    Dump plan in YAML into stream. Returns string if stream is None.
    """

    output = stream if stream is not None else io.StringIO()
    yaml.safe_dump(plan, output, default_flow_style = False, sort_keys = False)
    if stream is None:
        return output.getvalue()
    return None
