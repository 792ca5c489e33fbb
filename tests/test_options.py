# coding=utf-8
#

# pylint: disable = missing-docstring, invalid-name

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import pytest
from prjtree.error import LogicError
from prjtree.toolsets import ToolsetId, Toolset
from prjtree.options import OptionSet, optionsFor, makeGlobalOptions
from prjtree.options import SCOPE_COMPILER, SCOPE_LINKER

GNU_LINKER_FLAGS = ['-pthread', '-static-libstdc++', "-Wl,-rpath='$ORIGIN'"]

def testOptionSet():

    options = OptionSet()
    assert not options
    assert len(options) == 0

    options.addLinker('-pthread')
    options.addCompiler('-O2', '-g')
    options.add(SCOPE_LINKER, '-pthread')
    assert len(options) == 4
    # order is kept and duplicates are not collapsed
    assert options.asPairs() == [
        (SCOPE_LINKER, '-pthread'),
        (SCOPE_COMPILER, '-O2'),
        (SCOPE_COMPILER, '-g'),
        (SCOPE_LINKER, '-pthread'),
    ]
    assert options.compilerFlags == ['-O2', '-g']
    assert options.linkerFlags == ['-pthread', '-pthread']
    assert [x.flag for x in options] == ['-pthread', '-O2', '-g', '-pthread']

    other = OptionSet(options.asPairs())
    assert other == options
    other.addCompiler('-Wall')
    assert other != options

    with pytest.raises(LogicError):
        options.add('assembler', '-x')

def testOptionSetFreeze():

    options = OptionSet([(SCOPE_COMPILER, '-O2')])
    assert not options.frozen
    options.freeze()
    assert options.frozen

    with pytest.raises(LogicError):
        options.addCompiler('-g')
    with pytest.raises(LogicError):
        options.extend(OptionSet([(SCOPE_LINKER, '-s')]))
    assert options.asPairs() == [(SCOPE_COMPILER, '-O2')]

@pytest.mark.parametrize("toolsetId", [ToolsetId.GCC, ToolsetId.CLANG])
def testOptionsForGnuLike(toolsetId):
    options = optionsFor(toolsetId)
    assert options.linkerFlags == GNU_LINKER_FLAGS
    assert options.compilerFlags == []

@pytest.mark.parametrize("toolsetId", [ToolsetId.MSVC, ToolsetId.OTHER])
def testOptionsForOthers(toolsetId):
    options = optionsFor(toolsetId)
    assert isinstance(options, OptionSet)
    assert len(options) == 0

def testOptionsForIsPure():
    first = optionsFor(ToolsetId.GCC)
    first.addLinker('-s')
    assert optionsFor(ToolsetId.GCC).linkerFlags == GNU_LINKER_FLAGS

def testMakeGlobalOptions():

    rootParams = {
        'cpp-std' : '14',
        'include-paths' : ['.', 'include'],
        'compiler-options' : ['-Wall'],
        'linker-options' : ['-s'],
    }

    options, includePaths = makeGlobalOptions(Toolset(ToolsetId.GCC), rootParams)
    assert options.frozen
    assert options.compilerFlags == ['-std=c++14', '-Wall']
    assert options.linkerFlags == GNU_LINKER_FLAGS + ['-s']
    assert includePaths == ('.', 'include')

    options, _ = makeGlobalOptions(Toolset(ToolsetId.MSVC), rootParams)
    assert options.compilerFlags == ['/std:c++14', '-Wall']
    assert options.linkerFlags == ['-s']

    options, includePaths = makeGlobalOptions(Toolset(ToolsetId.CLANG), {})
    assert options.asPairs() == [(SCOPE_LINKER, x) for x in GNU_LINKER_FLAGS]
    assert includePaths == ()

def testMakeGlobalOptionsUnknownStd(capsys):

    toolset = Toolset(ToolsetId.OTHER, 'icc')
    options, _ = makeGlobalOptions(toolset, { 'cpp-std' : '14' })
    assert len(options) == 0

    captured = capsys.readouterr()
    assert "'cpp-std' is ignored" in captured.err
