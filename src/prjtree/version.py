# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

VERSION = '0.1.0'

def current():
    """ Get current version """
    return VERSION
