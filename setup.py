

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import os
import sys
import shutil
import fnmatch
if sys.hexversion < 0x3060000:
    raise ImportError('Python >= 3.6 is required')

from setuptools import setup
from setuptools import Command

here = os.path.dirname(os.path.abspath(__file__))
os.chdir(here)

SRC_DIR = 'src'
DEST_DIR = 'dist'
DIST_DIR = os.path.join(DEST_DIR, 'dist')
DEMOS_DIRPATH = os.path.join(here, 'demos')

sys.path.append(os.path.join(here, SRC_DIR))
from prjtree import version
from prjtree.constants import APPNAME, CAP_APPNAME, AUTHOR
from prjtree.constants import BUILDROOT_FILENAMES, DEFAULT_PLACEMENT_ROOT

DESCRIPTION = '%s - resolver of hierarchical C++ build descriptions' % CAP_APPNAME
with open(os.path.join(here, "README.rst"), "r") as fh:
    LONG_DESCRIPTION = fh.read()

CLASSIFIERS = """\
Development Status :: 3 - Alpha
License :: OSI Approved :: BSD License
Environment :: Console
Intended Audience :: Developers
Programming Language :: Python
Programming Language :: Python :: 3 :: Only
Programming Language :: Python :: Implementation :: CPython
Operating System :: POSIX :: Linux
Operating System :: MacOS
Operating System :: Microsoft :: Windows
Topic :: Software Development :: Build Tools
""".splitlines()

PYTHON_REQUIRES = '>=3.6'
RUNTIME_DEPS = ['PyYAML']
TEST_DEPS = ['pytest', 'pytest-mock']

PKG_DIRS = [APPNAME, '%s.descriptor' % APPNAME]

CMD_OPTS = dict(
    # setuptools/distuils like to litter in several dirs, not one
    sdist = dict( dist_dir = DIST_DIR),
    bdist = dict( dist_dir = DIST_DIR),
    build = dict( build_base = os.path.join(DEST_DIR, 'build')),
)

class clean(Command):

    description = "clean up files from 'setuptools' commands and demo outputs"

    PATTERNS = '*.pyc *.pyo *.egg-info __pycache__ .pytest_cache .coverage'.split()
    TOP_DIRS = 'build dist'.split() + [DEST_DIR]

    # Support the "all" option. Setuptools expects it in some situations.
    user_options = [
        ('all', 'a', "provided for compatibility"),
    ]

    boolean_options = ['all']

    def initialize_options(self):
        self.all = None

    def finalize_options(self):
        pass

    def demo_outputs(self, startdir):
        result = []
        for dirpath, _, filenames in os.walk(startdir):
            if not any(x in BUILDROOT_FILENAMES for x in filenames):
                continue
            outdir = os.path.join(dirpath, DEFAULT_PLACEMENT_ROOT)
            if os.path.isdir(outdir):
                print('Clean up %r ...' % os.path.relpath(outdir, here))
                result.append(outdir)
        return result

    def run(self):

        remove = self.demo_outputs(DEMOS_DIRPATH)
        for root, dirs, files in os.walk(here):
            for pattern in self.PATTERNS:
                for name in fnmatch.filter(dirs, pattern):
                    remove.append(os.path.join(root, name))
                    dirs.remove(name) # don't visit sub directories
                for name in fnmatch.filter(files, pattern):
                    remove.append(os.path.join(root, name))

        for path in self.TOP_DIRS:
            remove.append(os.path.join(here, path))

        for path in remove:
            if os.path.isdir(path):
                shutil.rmtree(path, ignore_errors = True)
            elif os.path.isfile(path):
                os.remove(path)

cmdclass = {
    'clean': clean,
}

kwargs = dict(
    name = APPNAME,
    version = version.current(),
    license = 'BSD',
    description = DESCRIPTION,
    long_description = LONG_DESCRIPTION,
    long_description_content_type = "text/x-rst",
    author = AUTHOR,
    zip_safe = False,
    packages = PKG_DIRS,
    package_dir = {'': SRC_DIR},
    classifiers = CLASSIFIERS,
    python_requires = PYTHON_REQUIRES,
    install_requires = RUNTIME_DEPS,
    extras_require = {
        'test' : TEST_DEPS,
    },
    entry_points = {
        'console_scripts': [
            '%s = %s.starter:main' % (APPNAME, APPNAME),
        ],
    },
    options = CMD_OPTS,
    cmdclass = cmdclass,
)

DEFAULT_SETUP_CMDS = 'clean sdist bdist_wheel'

def main():

    if len(sys.argv) == 1:
        sys.argv.extend(DEFAULT_SETUP_CMDS.split())

    setup(**kwargs)

if __name__ == '__main__':
    main()
