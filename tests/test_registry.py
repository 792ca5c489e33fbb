# coding=utf-8
#

# pylint: disable = missing-docstring, invalid-name

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import os
import pytest
import tests.common as cmn
from prjtree.error import ConfigurationError
from prjtree.descriptor import Registry, TargetDescriptor, discover

joinpath = os.path.join

def testRegister():

    registry = Registry()
    assert len(registry) == 0
    assert registry.get('a/prj.yaml') is None

    desc = registry.register('./a/prj.yaml', cmn.exe('a'))
    assert isinstance(desc, TargetDescriptor)
    assert desc.name == 'a/prj.yaml'
    assert registry.get('a/prj.yaml') is desc
    assert registry.get('a/./prj.yaml') is desc
    assert 'a/prj.yaml' in registry
    assert 'b/prj.yaml' not in registry

    other = TargetDescriptor('b/prj.yaml', cmn.lib('b'))
    assert registry.register('b/prj.yaml', other) is other
    assert registry.names() == ['a/prj.yaml', 'b/prj.yaml']
    assert set(registry) == set([desc, other])
    assert len(registry) == 2

def testRegisterTwice():

    registry = Registry()
    registry.register('a/prj.yaml', cmn.exe('a'))
    with pytest.raises(ConfigurationError):
        registry.register('a/prj.yaml', cmn.exe('a2'))
    with pytest.raises(ConfigurationError):
        registry.register('a/../a/prj.yaml', cmn.exe('a2'))
    assert registry.get('a/prj.yaml').target == 'a'

def testRegisterWrongName():

    registry = Registry()
    desc = TargetDescriptor('a/prj.yaml', cmn.exe('a'))
    with pytest.raises(ConfigurationError):
        registry.register('b/prj.yaml', desc)

def testDiscover(sampleTree):

    cmn.makeProject(sampleTree, {
        'v5/prj_extra.py' : """
            target = 'v5_app'
            kind = 'executable'
            sources = 'main.cpp'
        """,
        'v5/project.yaml' : "not: descriptor\n",
        'v5/notprj.yaml' : "not: descriptor\n",
        '.hidden/prj.yaml' : "broken: [\n",
        'target/release/prj.yaml' : "broken: [\n",
    })

    registry = discover(sampleTree, skipdirs = ['target'])
    assert registry.names() == [
        'so_5/prj.yaml',
        'v1/prj.yaml',
        'v2/prj.yaml',
        'v3/prj.yaml',
        'v4/prj.yaml',
        'v5/prj_extra.py',
    ]

    desc = registry.get('v5/prj_extra.py')
    assert desc.path == joinpath(sampleTree, 'v5', 'prj_extra.py')
    assert desc.target == 'v5_app'

    # root descriptor is not a project
    assert 'build.yaml' not in registry

def testDiscoverIntoRegistry(sampleTree):

    registry = Registry()
    registry.register('extra/prj.yaml', cmn.lib('extra'))
    assert discover(sampleTree, registry) is registry
    assert 'extra/prj.yaml' in registry
    assert 'v1/prj.yaml' in registry

def testDiscoverBrokenDescriptor(sampleTree):

    cmn.makeProject(sampleTree, { 'bad/prj.yaml' : "kind: program\n" })
    with pytest.raises(ConfigurationError) as excinfo:
        discover(sampleTree)
    assert excinfo.value.confpath == joinpath(sampleTree, 'bad', 'prj.yaml')
