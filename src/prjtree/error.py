# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import traceback

verbose = 0

class PrjTreeError(Exception):
    """Base class for all PrjTree errors"""

    def __init__(self, msg = None, ex = None):
        if msg is None:
            msg = ''
        if ex and not msg:
            msg = str(ex)
        super(PrjTreeError, self).__init__(msg)
        self.msg = msg

        self.stack = []
        if ex and ex.__traceback__ is not None:
            self.stack = traceback.extract_tb(ex.__traceback__)
        self.stack += traceback.extract_stack()[:-1]

    def __str__(self):
        return str(self.msg)

    @property
    def fullmsg(self):
        """ Message with the stack where the error was raised """
        return ''.join(traceback.format_list(self.stack)) + self.msg

class LogicError(PrjTreeError):
    """Some logic/programming error"""

class ConfigurationError(PrjTreeError):
    """Invalid build configuration: descriptor, toolset, environment"""

    def __init__(self, msg = None, ex = None, confpath = None):
        if msg is None:
            msg = ''
        if ex and not msg:
            msg = str(ex)
        if confpath and msg:
            _msg = "Error in the file %r:" % confpath
            for line in msg.splitlines():
                _msg += "\n  %s" % line
            msg = _msg
        self.confpath = confpath
        super(ConfigurationError, self).__init__(msg, ex)

class ConfigurationTypeError(ConfigurationError):
    """Invalid descriptor param type error"""

class ConfigurationValueError(ConfigurationError):
    """Invalid descriptor param value error"""

class PolicyAmbiguityError(ConfigurationError):
    """Default and override build policies both claim authority"""

class ResolutionError(PrjTreeError):
    """ A required project can not be resolved """

    def __init__(self, name, requiredBy = None, msg = None):
        self.name = name
        self.requiredBy = requiredBy
        if not msg:
            msg = "Project %r is not found" % name
            if requiredBy:
                msg += " (required by %r)." % requiredBy
            else:
                msg += "."
        super(ResolutionError, self).__init__(msg)

class DuplicateNameError(ResolutionError):
    """ Two targets with the same name in one composite """

    def __init__(self, name, requiredBy, projects):
        self.projects = tuple(projects)
        msg = "Target name %r is used by more than one project" % name
        msg += " required by %r: %s." % (requiredBy, ', '.join(self.projects))
        super(DuplicateNameError, self).__init__(name, requiredBy, msg)

class CycleError(PrjTreeError):
    """ Some project requires itself directly or transitively """

    def __init__(self, path):
        self.path = tuple(path)
        msg = "Dependency cycle found: %s" % ' -> '.join(self.path)
        super(CycleError, self).__init__(msg)
