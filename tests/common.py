# coding=utf-8
#

# pylint: skip-file

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import os
import sys
import textwrap
from contextlib import contextmanager
from io import StringIO

from prjtree.descriptor import Registry, TargetDescriptor
from tests import SRC_DIR

joinpath = os.path.join

TESTS_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECTS_DIR = joinpath(TESTS_DIR, 'projects')
DEMOS_DIR = os.path.normpath(joinpath(TESTS_DIR, os.path.pardir, 'demos'))

SAMPLE_TREE = {
    'build.yaml' : """
        cpp-std: 14
        include-paths: .
        requires: [ v1/prj.yaml, v2/prj.yaml, v3/prj.yaml, v4/prj.yaml ]
    """,
    'so_5/prj.yaml' : """
        target: so.5
        kind: shared-dependency
        sources: [ agent.cpp ]
    """,
    'v1/prj.yaml' : """
        target: v1_app
        kind: executable
        requires: so_5/prj.yaml
        sources: main.cpp
    """,
    'v2/prj.yaml' : """
        target: v2_app
        kind: executable
        requires: so_5/prj.yaml
        sources: main.cpp
    """,
    'v3/prj.yaml' : """
        target: v3_app
        kind: executable
        requires: so_5/prj.yaml
        sources: main.cpp
    """,
    'v4/prj.yaml' : """
        target: v4_app
        kind: executable
        requires: so_5/prj.yaml
        sources: main.cpp
    """,
}

@contextmanager
def capturedOutput():
    newout, newerr = StringIO(), StringIO()
    oldout, olderr = sys.stdout, sys.stderr
    try:
        sys.stdout, sys.stderr = newout, newerr
        yield sys.stdout, sys.stderr
    finally:
        sys.stdout, sys.stderr = oldout, olderr

def writeFile(path, content):
    dirpath = os.path.dirname(path)
    if dirpath and not os.path.isdir(dirpath):
        os.makedirs(dirpath)
    with open(path, 'w') as file:
        file.write(textwrap.dedent(content).lstrip())

def makeProject(rootdir, files):
    """ Make files from dict relpath -> content in the rootdir """

    for relpath, content in files.items():
        writeFile(joinpath(rootdir, relpath), content)
    return rootdir

def makeRegistry(descriptors):
    """ Make Registry from dict name -> params """

    registry = Registry()
    for name, params in descriptors.items():
        registry.register(name, params)
    return registry

def makeRoot(requires, name = 'build.yaml', **params):
    params['requires'] = list(requires)
    return TargetDescriptor(name, params, isRoot = True)

def exe(target, requires = (), sources = 'main.cpp'):
    return { 'target' : target, 'kind' : 'executable',
             'sources' : sources, 'requires' : list(requires) }

def lib(target, requires = (), sources = 'lib.cpp', libType = None):
    params = { 'target' : target, 'kind' : 'library',
               'sources' : sources, 'requires' : list(requires) }
    if libType:
        params['lib-type'] = libType
    return params

def composite(requires, target = None):
    params = { 'kind' : 'composite', 'requires' : list(requires) }
    if target:
        params['target'] = target
    return params
