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
''' Helper functions for doing things vcs(1) does '''
import configparser
import logging
import os
import os.path
import re
from typing import List, Optional, Tuple

import git
from xdg_base_dirs import xdg_config_home

LOG = logging.getLogger('revspec')

OID_PATTERN = re.compile(r'[0-9a-f]{40}|[0-9a-f]{64}')

__all__ = [
    "CONFIG",
    "references",
    "verify",
    "working_prefix",
]


def verify(working_dir: str, name: str) -> Optional[str]:
    ''' Return the object id `name` points to or `None` '''
    git_cmd = git.cmd.Git(working_dir=working_dir)
    try:
        output = git_cmd.rev_parse(name, verify=True, quiet=True).strip()
    except git.GitCommandError:
        LOG.debug('%r does not resolve', name)
        return None
    if not OID_PATTERN.fullmatch(output):
        LOG.debug('%r resolved to unexpected %r', name, output)
        return None
    return output


def references(working_dir: str) -> List[Tuple[str, str]]:
    ''' Return all references in the order git-show-ref(1) lists them '''
    git_cmd = git.cmd.Git(working_dir=working_dir)
    try:
        output = git_cmd.show_ref()
    except git.GitCommandError:
        # show-ref exits with 1 when there is nothing to show
        return []
    result = []
    for line in output.splitlines():
        oid, _, ref = line.partition(' ')
        result.append((ref, oid))
    return result


def working_prefix(path: str, working_dir: str) -> str:
    ''' Return `path` relative to the work tree, like `--show-prefix` '''
    relative = os.path.relpath(os.path.realpath(path),
                               os.path.realpath(working_dir))
    if relative == '.':
        return ''
    return relative.replace(os.sep, '/') + '/'


def _config() -> configparser.ConfigParser:
    path = xdg_config_home().joinpath('revspec', 'config')
    conf = configparser.ConfigParser()
    conf['rev-parse'] = {
        'head': 'HEAD',
        'sq': 'no',
        'symbolic': 'no',
    }
    conf.read(path)
    return conf


CONFIG = _config()
