#!/usr/bin/env python3
#
# Copyright (c) 2018-2021 Bahtiar `kalkin-` Gadimov.
#
# This file is part of revspec.
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as
# published by the Free Software Foundation, either version 3 of the
# License, or (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program. If not, see <http://www.gnu.org/licenses/>.
#
"""revspec - pick and massage parameters for git plumbing commands

Usage:
    revspec [-C DIR] [-d | --debug] rev-parse [<args>...]
    revspec --version

Options:
    -C DIR          Run as if started in DIR
    -d --debug      Enable sending debugging output to stderr

Arguments after rev-parse:
    --default NAME  Use NAME if no revision is given
    --revs-only     Only show revision arguments
    --no-revs       Do not show revision arguments
    --flags         Only show options
    --no-flags      Do not show options
    --verify        Expect exactly one revision
    --sq            Quote the output for the shell
    --not           Flip the ^ prefix of the following revisions
    --symbolic      Show names instead of object ids
    --all           Show all references
    --show-prefix   Show the path of the current directory in the work tree
    --              Pass all following arguments through unchanged
"""

import logging
import sys
from typing import List, Optional

from docopt import docopt

from revspec import NoRepository, Repo, VerificationFailure, vcs
from revspec.interpreter import Interpreter
from revspec.mode import ModeConfig

LOG = logging.getLogger('revspec')

VERSION = 'v1.0.0'


def setup_logging(debug: bool) -> None:
    LOG.setLevel(logging.CRITICAL)
    if debug:
        LOG.setLevel(logging.DEBUG)
        handler = logging.StreamHandler(sys.stderr)
        # set a formatter to include the level name
        handler.setFormatter(logging.Formatter('[%(levelname)s] %(message)s'))
        LOG.addHandler(handler)


def main(argv: Optional[List[str]] = None) -> int:
    ''' Run rev-parse and return the exit status '''
    arguments = docopt(__doc__,
                       argv=argv,
                       version=VERSION,
                       options_first=True)
    setup_logging(arguments['--debug'])

    try:
        repo = Repo(arguments['-C'])
    except NoRepository as exc:
        print('fatal: not a git repository: %s' % exc, file=sys.stderr)
        return 128

    interpreter = Interpreter(repo, ModeConfig.from_config(vcs.CONFIG),
                              sys.stdout)
    try:
        interpreter.run(arguments['<args>'])
    except VerificationFailure as exc:
        print(exc, file=sys.stderr)
        return 1
    finally:
        sys.stdout.flush()
    return 0


def cli():
    sys.exit(main())


if __name__ == '__main__':
    cli()
