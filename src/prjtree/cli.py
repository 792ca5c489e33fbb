# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import os
import argparse

from prjtree.constants import APPNAME, CAP_APPNAME, ENV_TOOLSET
from prjtree.pyutils import struct

ParsedCommand = struct('ParsedCommand', 'name, args, orig')

DEFAULT_COMMAND = 'resolve'

# last selected command
selected = None

Command = struct('Command', 'name, aliases, description, options',
                 defaults = { 'aliases' : (), 'options' : () })

Option = struct('Option', 'names, kwargs')

# options for all commands
_commonOptions = (
    Option(('-v', '--verbose'), dict(
        action = 'count', default = 0,
        help = 'verbosity level -v -vv',
    )),
    Option(('--color',), dict(
        choices = ('yes', 'no', 'auto'), default = 'auto',
        help = 'whether to use colors (yes/no/auto)',
    )),
)

_resolveOptions = (
    Option(('-j', '--jobs'), dict(
        type = int, default = 1, metavar = 'N',
        help = 'number of threads to resolve projects',
    )),
    Option(('-t', '--toolset'), dict(
        default = None, metavar = 'NAME',
        help = 'toolset name, it overrides env var %s' % ENV_TOOLSET,
    )),
)

# Declarative list of commands in CLI
commands = (
    Command(
        name = 'resolve',
        aliases = ('res',),
        description = 'resolve project tree and check it',
        options = _resolveOptions,
    ),
    Command(
        name = 'plan',
        description = 'resolve project tree and print build plan in YAML',
        options = _resolveOptions + (
            Option(('-o', '--output'), dict(
                default = None, metavar = 'FILE',
                help = 'write build plan into the file instead of stdout',
            )),
        ),
    ),
    Command(
        name = 'version',
        aliases = ('ver',),
        description = 'print version of %s' % APPNAME,
    ),
)

def _makeCmdNameMap():
    cmdNameMap = {}
    for cmd in commands:
        cmdNameMap[cmd.name] = cmd
        for alias in cmd.aliases:
            cmdNameMap[alias] = cmd
    return cmdNameMap

_cmdNameMap = _makeCmdNameMap()

class CmdLineParser(object):
    """
    CLI parser
    """

    __slots__ = ('_parser', '_command')

    def __init__(self, progName):

        self._command = None
        self._parser = argparse.ArgumentParser(
            prog = progName,
            description = '%s - hierarchical build-target composition' % CAP_APPNAME,
        )

        subparsers = self._parser.add_subparsers(
            dest = 'command', title = 'commands', metavar = 'command')

        for cmd in commands:
            cmdParser = subparsers.add_parser(cmd.name, aliases = list(cmd.aliases),
                            help = cmd.description, description = cmd.description)
            for opt in _commonOptions + tuple(cmd.options):
                cmdParser.add_argument(*opt.names, **opt.kwargs)

    def parse(self, args):
        """
        Parse command line args without program name.
        Returns ParsedCommand.
        """

        orig = list(args)
        args = list(args)
        if not args or (args[0] not in _cmdNameMap and \
                                        args[0] not in ('-h', '--help')):
            args.insert(0, DEFAULT_COMMAND)

        parsed = self._parser.parse_args(args)
        cmdName = _cmdNameMap[parsed.command].name
        del parsed.command

        self._command = ParsedCommand(name = cmdName, args = parsed, orig = orig)
        return self._command

    @property
    def command(self):
        """ Get last parsed command """
        return self._command

def parseAll(args):
    """
    Parse all command line args with program name in the args[0]
    """

    progName = os.path.basename(args[0]) if args else APPNAME
    return CmdLineParser(progName).parse(args[1:])
