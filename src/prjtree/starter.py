# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import sys
import os
from os import path

from prjtree.constants import APPNAME, ENV_TOOLSET, BUILDROOT_FILENAMES
from prjtree.constants import EXITCODE_ERROR, EXITCODE_INTERRUPTED
from prjtree import log, error, cli

joinpath = path.join

def findTopLevelBuildConfDir(startdir):
    """
    Try to find top level dir with a root build descriptor.
    Return None if file was not found.
    """

    from prjtree.descriptor.loader import findConfFile

    curdir = startdir
    found = None
    while curdir:
        if findConfFile(curdir, BUILDROOT_FILENAMES):
            found = curdir

        nextdir = path.dirname(curdir)
        if nextdir == curdir:
            break
        curdir = nextdir

    return found

def makeEnviron(cmdArgs, environ = None):
    """
    Get environment for the build invocation with applied CLI toolset
    """

    environ = dict(os.environ if environ is None else environ)
    toolset = getattr(cmdArgs, 'toolset', None)
    if toolset:
        environ[ENV_TOOLSET] = toolset
    return environ

def _runVersion(_):
    from prjtree import version
    log.info('%s version %s' % (APPNAME, version.current()))
    return 0

def _invoke(cmdArgs, rootdir):
    from prjtree.invocation import BuildInvocation

    invocation = BuildInvocation(rootdir, environ = makeEnviron(cmdArgs),
                                 jobs = cmdArgs.jobs)
    return invocation.run()

def _runResolve(cmdArgs, rootdir):

    result = _invoke(cmdArgs, rootdir)
    graph = result.graph
    log.info("'%s' is resolved: %d project(s), %d dependency edge(s), "
             "toolset %r, runtime mode %r" % (graph.root.name, len(graph),
                len(graph.edges), result.toolset.name,
                result.policy.runtimeMode.value))
    return 0

def _runPlan(cmdArgs, rootdir):
    from prjtree import plan

    output = cmdArgs.output
    if not output:
        # stdout is for the plan only
        log.setQuiet(True)

    result = _invoke(cmdArgs, rootdir)
    buildPlan = plan.makePlan(result)

    if not output:
        plan.dumpPlan(buildPlan, sys.stdout)
        return 0

    if not path.isabs(output):
        output = joinpath(os.getcwd(), output)
    try:
        with open(output, 'w') as file:
            plan.dumpPlan(buildPlan, file)
    except EnvironmentError as ex:
        raise error.PrjTreeError("Can't write build plan into %r" % output, ex)

    log.info('Build plan is written into %r' % output)
    return 0

_handlers = {
    'resolve' : _runResolve,
    'plan'    : _runPlan,
}

def run(argv = None):
    """
    Parse CLI and run selected command
    """

    argv = sys.argv if argv is None else argv
    cmd = None

    try:
        cmd = cli.parseAll(argv)
        cli.selected = cmd

        error.verbose = cmd.args.verbose
        log.setVerbose(cmd.args.verbose)
        log.enableColorsByCli(cmd.args.color)

        if cmd.name == 'version':
            return _runVersion(cmd.args)

        rootdir = findTopLevelBuildConfDir(os.getcwd())
        if rootdir is None:
            log.error('Root build descriptor %s not found. Check one '
                      'exists in the project directory.' % \
                      '/'.join(BUILDROOT_FILENAMES))
            return EXITCODE_ERROR

        return _handlers[cmd.name](cmd.args, rootdir)

    except error.PrjTreeError as ex:
        verbose = 0
        if cmd:
            verbose = cmd.args.verbose
        if verbose > 1:
            log.error(ex.fullmsg)
        log.error(ex.msg)
        sys.exit(EXITCODE_ERROR)
    except KeyboardInterrupt:
        log.error('Interrupted')
        sys.exit(EXITCODE_INTERRUPTED)

def main():
    """ Entry point for the console script """
    sys.exit(run())
