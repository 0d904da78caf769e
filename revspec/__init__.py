# pylint: disable=missing-docstring,fixme
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
import functools
import logging
import os
from typing import Iterator, Optional, Tuple

import git
from git.util import bin_to_hex, hex_to_bin

import revspec.vcs as vcs

LOG = logging.getLogger('revspec')


class ResolutionFailure(Exception):
    ''' Thrown when a name does not resolve to an object.'''


class UnknownOption(Exception):
    ''' Thrown when an option does not change the mode.'''


class VerificationFailure(Exception):
    ''' Thrown when `--verify` did not see exactly one revision.'''


class NoRepository(Exception):
    ''' Thrown when no git repository can be found.'''


class ObjectStore:
    ''' The things rev-parse needs to know about a repository. '''

    def resolve(self, name: str) -> bytes:
        raise NotImplementedError

    def references(self) -> Iterator[Tuple[str, bytes]]:
        raise NotImplementedError

    def prefix(self) -> str:
        raise NotImplementedError

    @staticmethod
    def format_oid(oid: bytes) -> str:
        return bin_to_hex(oid).decode('ascii')


class Repo(ObjectStore):
    ''' A wrapper around `git.Repo`. '''

    def __init__(self, path: Optional[str] = None) -> None:
        self._path = os.path.abspath(path or os.getcwd())
        try:
            self._nrepo = git.Repo(path=self._path,
                                   odbt=git.GitCmdObjectDB,
                                   search_parent_directories=True)
        except (git.InvalidGitRepositoryError, git.NoSuchPathError) as exc:
            raise NoRepository(self._path) from exc
        self._cmd_dir = self._nrepo.working_tree_dir or self._nrepo.git_dir
        LOG.debug('Using repository %s', self._nrepo.git_dir)

    @property
    def working_dir(self) -> Optional[str]:
        return self._nrepo.working_tree_dir

    @functools.lru_cache()
    def resolve(self, name: str) -> bytes:
        # git answers ^NAME with ^OID, negation is decided by the caller
        if not name or name.startswith(('-', '^')):
            raise ResolutionFailure(name)
        oid = vcs.verify(self._cmd_dir, name)
        if oid is None:
            raise ResolutionFailure(name)
        return hex_to_bin(oid)

    def references(self) -> Iterator[Tuple[str, bytes]]:
        for refname, oid in vcs.references(self._cmd_dir):
            yield refname, hex_to_bin(oid)

    def prefix(self) -> str:
        if self.working_dir is None:
            return ''
        return vcs.working_prefix(self._path, self.working_dir)
