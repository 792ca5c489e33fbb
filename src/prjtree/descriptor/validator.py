# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

from prjtree.error import ConfigurationError, ConfigurationTypeError
from prjtree.error import ConfigurationValueError
from prjtree.pyutils import stringtype
from prjtree.utils import toList
from prjtree.descriptor.scheme import confscheme

class Validator(object):
    """
    Validator for structure of descriptor params.
    """

    __slots__ = ('_conf', '_confpath')

    _typeHandlerNames = {
        'int'  : '_handleInt',
        'str'  : '_handleStr',
        'complex' : '_handleComplex',
        'list-of-strs' : '_handleListOfStrs',
    }

    def __init__(self, params, confpath = None):
        self._conf = params
        self._confpath = confpath

    @staticmethod
    def _getHandler(typeName):
        if not isinstance(typeName, stringtype):
            typeName = 'complex' if len(typeName) > 1 else typeName[0]
        return getattr(Validator, Validator._typeHandlerNames[typeName])

    def _checkAllowed(self, value, schemeAttrs, fullkey):

        allowed = schemeAttrs.get('allowed')
        if allowed is None:
            return

        if callable(allowed):
            allowed(self._conf, value, fullkey)
        elif value not in allowed:
            msg = "Value %r is invalid for the param %r." % (value, fullkey)
            msg = '%s Allowed values: %s' %(msg, str(list(allowed))[1:-1])
            raise ConfigurationValueError(msg)

    def _handleComplex(self, value, schemeAttrs, fullkey):

        types = schemeAttrs['type']
        for _type in types:
            try:
                handler = Validator._getHandler(_type)
                handler(self, value, schemeAttrs, fullkey)
            except ConfigurationTypeError:
                continue
            else:
                return

        typeswitch = {
            'str'         : 'string',
            'int'         : 'integer',
            'list-of-strs': 'list of strings',
        }
        typeNames = [ typeswitch.get(_type, _type) for _type in types ]

        msg = "Value `%r` is invalid for the param %r." % (value, fullkey)
        msg += " It should be %s." % " or ".join(typeNames)
        raise ConfigurationTypeError(msg)

    def _handleInt(self, value, schemeAttrs, fullkey):
        if isinstance(value, bool) or not isinstance(value, int):
            msg = "Param %r should be integer" % fullkey
            raise ConfigurationTypeError(msg)
        self._checkAllowed(value, schemeAttrs, fullkey)

    def _handleStr(self, value, schemeAttrs, fullkey):
        if not isinstance(value, stringtype):
            msg = "Param %r should be string" % fullkey
            raise ConfigurationTypeError(msg)
        self._checkAllowed(value, schemeAttrs, fullkey)

    def _handleListOfStrs(self, value, schemeAttrs, fullkey):

        types = schemeAttrs['type']
        if isinstance(types, stringtype):
            types = [types]
        if 'str' in types:
            value = toList(value)

        if not isinstance(value, (list, tuple)):
            msg = "Value `%r` is invalid for the param %r." % (value, fullkey)
            msg += " It should be list of strings"
            raise ConfigurationTypeError(msg)

        for elem in value:
            if not isinstance(elem, stringtype):
                msg = "Value `%r` is invalid for the param %r." % (elem, fullkey)
                msg += " It should be list of strings"
                raise ConfigurationTypeError(msg)
            self._checkAllowed(elem, schemeAttrs, fullkey)

    def _process(self, node, scheme):

        for key in node:
            if key not in scheme:
                msg = "Unknown param %r." % str(key)
                msg += "\nValid params: %s" % str(sorted(scheme.keys()))[1:-1]
                raise ConfigurationError(msg)

        for key, schemeAttrs in scheme.items():
            value = node.get(key)
            if value is None:
                continue
            handler = Validator._getHandler(schemeAttrs['type'])
            handler(self, value, schemeAttrs, key)

    def run(self):
        """
        Entry point for validation
        """

        try:
            self._process(self._conf, confscheme)
        except ConfigurationError as ex:
            if not self._confpath or ex.confpath:
                raise
            raise ex.__class__(ex.msg, confpath = self._confpath) from ex
