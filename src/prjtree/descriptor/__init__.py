# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

from prjtree.descriptor.target import TargetDescriptor
from prjtree.descriptor.registry import Registry, discover
