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
from prjtree.error import ConfigurationError, PolicyAmbiguityError
from prjtree import policy
from prjtree.policy import RuntimeMode, RuntimeSubdirPlacement, OverridePlacement

joinpath = os.path.join

def testRuntimeSubdirPlacement():

    placement = RuntimeSubdirPlacement()
    assert placement.root == 'target'
    assert placement.kind == 'runtime-subdir'
    assert placement.targetDir(RuntimeMode.RELEASE, 'v1') == 'target/release'
    assert placement.objDir(RuntimeMode.RELEASE, 'v1') == 'target/_objs/release/v1'
    assert placement.objDir(RuntimeMode.DEBUG, '') == 'target/_objs/debug'

    assert placement == RuntimeSubdirPlacement('target')
    assert placement != RuntimeSubdirPlacement('out')
    assert placement != OverridePlacement()

    placement = OverridePlacement()
    assert placement.targetDir(RuntimeMode.OVERRIDE, 'v1') is None
    assert placement.objDir(RuntimeMode.OVERRIDE, 'v1') is None

def testDefaultPolicy(rundir, mocker):

    spyMode = mocker.spy(policy, 'defaultRuntimeMode')
    spyPlacement = mocker.spy(policy, 'defaultPlacement')

    buildPolicy = policy.resolvePolicy(rundir)

    assert spyMode.call_count == 1
    assert spyPlacement.call_count == 1
    assert buildPolicy.runtimeMode == RuntimeMode.RELEASE
    assert buildPolicy.placement == RuntimeSubdirPlacement('target')
    assert buildPolicy.showBrief
    assert not buildPolicy.isOverridden
    assert buildPolicy.overridePath is None
    assert buildPolicy.overrideParams is None

@pytest.mark.parametrize("filename, content", [
    ('local-build.yaml', "runtime-mode: debug\nobj-placement: build/dbg\n"),
    ('local-build.yml', "runtime-mode: debug\nobj-placement: build/dbg\n"),
    ('local-build.py', "runtime_mode = 'debug'\nobj_placement = 'build/dbg'\n"),
])
def testOverridePolicy(rundir, mocker, filename, content):

    cmn.writeFile(joinpath(rundir, filename), content)

    spyMode = mocker.spy(policy, 'defaultRuntimeMode')
    spyPlacement = mocker.spy(policy, 'defaultPlacement')

    buildPolicy = policy.resolvePolicy(rundir)

    # defaults are never touched when the override exists
    assert spyMode.call_count == 0
    assert spyPlacement.call_count == 0

    assert buildPolicy.runtimeMode == RuntimeMode.OVERRIDE
    assert isinstance(buildPolicy.placement, OverridePlacement)
    assert not buildPolicy.showBrief
    assert buildPolicy.isOverridden
    assert buildPolicy.overridePath == joinpath(rundir, filename)
    # content is opaque
    assert buildPolicy.overrideParams == {
        'runtime-mode' : 'debug',
        'obj-placement' : 'build/dbg',
    }

def testOverrideOrder(rundir):

    cmn.writeFile(joinpath(rundir, 'local-build.yaml'), "a: 1\n")
    cmn.writeFile(joinpath(rundir, 'local-build.py'), "b = 2\n")

    buildPolicy = policy.resolvePolicy(rundir)
    assert buildPolicy.overridePath == joinpath(rundir, 'local-build.py')
    assert buildPolicy.overrideParams == { 'b' : 2 }

@pytest.mark.parametrize("filename, content, params", [
    ('local-build.yaml', "", {}),
    ('local-build.yml', "# nothing here\n", {}),
    ('local-build.py', "", {}),
    ('local-build.yaml', "- a\n- b\n", ['a', 'b']),
    ('local-build.yaml', "debug\n", 'debug'),
])
def testOpaqueOverride(rundir, mocker, filename, content, params):

    cmn.writeFile(joinpath(rundir, filename), content)
    spyMode = mocker.spy(policy, 'defaultRuntimeMode')

    # presence of the file is enough
    buildPolicy = policy.resolvePolicy(rundir)
    assert spyMode.call_count == 0
    assert buildPolicy.runtimeMode == RuntimeMode.OVERRIDE
    assert isinstance(buildPolicy.placement, OverridePlacement)
    assert buildPolicy.overrideParams == params

@pytest.mark.parametrize("filename, content", [
    ('local-build.yaml', "runtime-mode: [\n"),
    ('local-build.yaml', b"runtime-mode: debug\xff\xfe\n"),
    ('local-build.py', "runtime_mode = \n"),
])
def testBrokenOverride(rundir, filename, content):

    filepath = joinpath(rundir, filename)
    if isinstance(content, bytes):
        with open(filepath, 'wb') as file:
            file.write(content)
    else:
        cmn.writeFile(filepath, content)

    with pytest.raises(ConfigurationError) as excinfo:
        policy.resolvePolicy(rundir)
    assert excinfo.value.confpath == filepath

def testPolicyAmbiguity(rundir, monkeypatch):

    monkeypatch.setattr(policy, 'defaultPlacement', OverridePlacement)
    with pytest.raises(PolicyAmbiguityError):
        policy.resolvePolicy(rundir)

def testPolicyAmbiguityMode(rundir, monkeypatch):

    monkeypatch.setattr(policy, 'defaultRuntimeMode', lambda: RuntimeMode.OVERRIDE)
    with pytest.raises(PolicyAmbiguityError):
        policy.resolvePolicy(rundir)
