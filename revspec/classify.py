#
# Copyright (c) 2021 Bahtiar `kalkin-` Gadimov.
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
''' Turning single arguments into revisions and literals '''

import enum
import logging
from collections import namedtuple
from typing import Iterator, Union

from revspec import ObjectStore, ResolutionFailure
from revspec.cli import RevisionRange, is_rev_argument
from revspec.mode import DefaultState, ModeConfig, Polarity

LOG = logging.getLogger('revspec')

Revision = namedtuple('Revision', ['oid', 'name', 'polarity'],
                      defaults=[None, Polarity.NORMAL])

Literal = namedtuple('Literal', ['text', 'kind'])

Suppressed = namedtuple('Suppressed', ['text'])

Result = Union[Revision, Literal, Suppressed]


class Kind(enum.Enum):
    ''' What a literal looks like, which decides how it is filtered. '''
    NOREV = 'norev'  # neither a revision nor an option, usually a path
    FLAG = 'flag'
    REV_FLAG = 'rev-flag'  # an option git-rev-list(1) understands
    RAW = 'raw'  # printed on its own line, never quoted


def classify(arg: str, config: ModeConfig,
             store: ObjectStore) -> Iterator[Result]:
    ''' Yield the results for a non option argument.

        A range yields its tip and its excluded bottom. Anything which does
        not resolve, not even as `^NAME`, is a literal and flushes the
        pending default first.
    '''
    rev_range = RevisionRange(arg, config.head)
    if rev_range.is_range:
        try:
            end = store.resolve(rev_range.end)
            start = store.resolve(rev_range.start)
        except ResolutionFailure:
            LOG.debug('%r is not a range', arg)
        else:
            config.clear_default()
            yield Revision(start, rev_range.start, Polarity.NORMAL)
            yield Revision(end, rev_range.end, Polarity.REVERSED)
            return

    try:
        oid = store.resolve(arg)
    except ResolutionFailure:
        pass
    else:
        config.clear_default()
        yield Revision(oid, arg, Polarity.NORMAL)
        return

    if arg.startswith('^'):
        name = arg[1:]
        try:
            oid = store.resolve(name)
        except ResolutionFailure:
            pass
        else:
            config.clear_default()
            yield Revision(oid, name, Polarity.REVERSED)
            return

    LOG.debug('%r is not a revision', arg)
    yield from flush_default(config, store)
    yield Literal(arg, Kind.NOREV)


def classify_option(arg: str, config: ModeConfig) -> Literal:
    ''' Classify an option which does not change the mode '''
    if config.forward_rev_options and is_rev_argument(arg):
        return Literal(arg, Kind.REV_FLAG)
    return Literal(arg, Kind.FLAG)


def flush_default(config: ModeConfig, store: ObjectStore) -> Iterator[Result]:
    ''' Yield the pending default, if there is one, exactly once '''
    if config.default_state is DefaultState.DEFAULT_FLUSHED:
        return
    name = config.take_default()
    LOG.debug('Flushing default %r', name)
    try:
        oid = store.resolve(name)
    except ResolutionFailure:
        yield Literal(name, Kind.NOREV)
    else:
        yield Revision(oid, name, Polarity.NORMAL)
