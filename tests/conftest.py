# coding=utf-8
#

# pylint: skip-file

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import os
import platform as _platform
import pytest

from prjtree.constants import ENV_TOOLSET, ENV_COMPILERS, ENV_ON_TTY
from prjtree import log, error
import tests.common as cmn

joinpath = os.path.join

@pytest.hookimpl(hookwrapper = True, tryfirst = True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    rep = outcome.get_result()
    setattr(item, "rep_" + rep.when, rep)

@pytest.fixture(scope = "session", autouse = True)
def beforeAllTests(request):
    # Additional check for pyenv
    if 'PYENV_VERSION' in os.environ:
        realVersion = _platform.python_version()
        envVersion = os.environ['PYENV_VERSION']
        assert envVersion in (realVersion, 'system')

@pytest.fixture(autouse = True)
def resetLogState(monkeypatch):
    # log and error settings are module globals
    monkeypatch.setitem(log.colorSettings, 'USE', 0)
    monkeypatch.setattr(error, 'verbose', 0)
    log.setVerbose(0)
    log.setBrief(False)
    log.setQuiet(False)
    yield
    log.setVerbose(0)
    log.setBrief(False)
    log.setQuiet(False)

@pytest.fixture
def unsetEnviron(monkeypatch):
    for name in (ENV_TOOLSET, ENV_ON_TTY) + ENV_COMPILERS:
        monkeypatch.delenv(name, raising = False)

@pytest.fixture
def rundir(tmpdir):
    return str(tmpdir.realpath())

@pytest.fixture
def sampleTree(rundir):
    """ Root with four top-level projects sharing one library """
    cmn.makeProject(rundir, cmn.SAMPLE_TREE)
    return rundir
