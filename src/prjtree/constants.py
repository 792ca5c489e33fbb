# coding=utf-8
#

"""
 Copyright (c) 2019 Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

from prjtree import utils

APPNAME = 'prjtree'
CAP_APPNAME = 'PrjTree'
AUTHOR = 'Alexander Magola'

DESCRIPTOR_EXTS = ['.py', '.yaml', '.yml']

# root build descriptor
BUILDROOT_NAME = 'build'
BUILDROOT_FILENAMES = ['%s%s' % (BUILDROOT_NAME, x) for x in DESCRIPTOR_EXTS]

# local override descriptor, checked in this order
OVERRIDE_NAME = 'local-build'
OVERRIDE_FILENAMES = ['%s%s' % (OVERRIDE_NAME, x) for x in DESCRIPTOR_EXTS]

# sub-project descriptors found by discovery
PRJ_FILE_PATTERNS = ['prj*%s' % x for x in DESCRIPTOR_EXTS]

DEFAULT_PLACEMENT_ROOT = 'target'
OBJS_DIRNAME = '_objs'

NODE_KINDS = frozenset(('executable', 'library', 'composite'))
NODE_KIND_ALIASES = { 'shared-dependency' : 'library' }
KINDS_WITH_SOURCES = frozenset(('executable', 'library'))
LIB_TYPES = ('shared', 'static')

ROOT_ONLY_PARAMS = frozenset((
    'cpp-std', 'include-paths', 'compiler-options', 'linker-options',
))

ENV_TOOLSET = 'PRJTREE_TOOLSET'
ENV_ON_TTY = 'PRJTREE_ON_TTY'
ENV_COMPILERS = ('CXX', 'CC')

EXITCODE_ERROR = 1
EXITCODE_INTERRUPTED = 68

PLATFORM = utils.platform()
