# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

__all__ = [
    'findConfFile',
    'load',
    'loadOpaque',
]

import os
import io
import types

import yaml as pyyaml

try:
    YamlLoader = pyyaml.CSafeLoader
except AttributeError:
    YamlLoader = pyyaml.SafeLoader

from prjtree.error import ConfigurationError
from prjtree.pyutils import maptype, stringtype
from prjtree.utils import loadPyFile

isfile = os.path.isfile
joinpath = os.path.join

class StringIO(io.StringIO):
    """
    Customized StringIO
    """

    def __init__(self, data, name = '<file>'):
        super().__init__(data)
        # it's used in pyyaml for error reports
        self.name = name

def findConfFile(dpath, filenames):
    """
    Try to find the first existing file from filenames in the dpath.
    Returns filename if found or None
    """

    for name in filenames:
        if isfile(joinpath(dpath, name)):
            return name
    return None

def _readYaml(filepath):

    try:
        # descriptor file should not be very big so it's loaded completely in memory
        with io.open(filepath, 'rt', encoding = 'utf-8') as fstream:
            stream = StringIO(fstream.read(), fstream.name)
    except (UnicodeDecodeError, EnvironmentError) as ex:
        raise ConfigurationError(ex = ex, confpath = filepath) from ex

    try:
        return pyyaml.load(stream, YamlLoader)
    except pyyaml.YAMLError as ex:
        raise ConfigurationError(ex = ex, confpath = filepath) from ex

def _loadYaml(filepath):

    data = _readYaml(filepath)
    if data is None:
        raise ConfigurationError("File has no data", confpath = filepath)

    if not isinstance(data, maptype):
        raise ConfigurationError("File has invalid structure", confpath = filepath)

    for k in data:
        if not isinstance(k, stringtype):
            msg = "The variable %r is not string" % k
            raise ConfigurationError(msg, confpath = filepath)

    return dict(data)

def _isParamValue(value):
    return not isinstance(value, (types.ModuleType, types.FunctionType,
                                  types.BuiltinFunctionType, type))

def _loadPy(filepath):

    try:
        module = loadPyFile(filepath)
    # descriptor is user code, any exception in it means a broken config
    except Exception as ex: # pylint: disable = broad-except
        raise ConfigurationError(ex = ex, confpath = filepath) from ex

    # python names can't have dashes: lib_type -> lib-type
    return {
        k.replace('_', '-') : v for k, v in vars(module).items() \
            if not k.startswith('_') and _isParamValue(v)
    }

def load(filepath):
    """
    Load descriptor file (.py or .yaml/.yml) and return dict with params.
    """

    if not isfile(filepath):
        raise ConfigurationError("File %r doesn't exist" % filepath)

    if filepath.endswith('.py'):
        return _loadPy(filepath)
    if filepath.endswith(('.yaml', '.yml')):
        return _loadYaml(filepath)

    raise ConfigurationError("Unknown type of descriptor file %r" % filepath)

def loadOpaque(filepath):
    """
    Load descriptor file without any checks of its structure.
    An empty YAML file gives an empty dict, any other YAML value is
    returned as is.
    """

    if filepath.endswith('.py'):
        return _loadPy(filepath)
    if filepath.endswith(('.yaml', '.yml')):
        data = _readYaml(filepath)
        return {} if data is None else data

    raise ConfigurationError("Unknown type of descriptor file %r" % filepath)
