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
''' The left to right pass over rev-parse arguments '''

import logging
from typing import Iterable, Iterator, Optional, TextIO

from revspec import ObjectStore, UnknownOption, VerificationFailure
from revspec.classify import (Kind, Literal, Revision, Suppressed, classify,
                              classify_option, flush_default)
from revspec.mode import ModeConfig, Polarity, Stage
from revspec.output import Formatter

LOG = logging.getLogger('revspec')


class Interpreter:
    ''' Classifies every argument and hands it to the `Formatter`.

        The `ModeConfig` is owned by the interpreter and changed in place by
        the options it sees.
    '''

    def __init__(self,
                 store: ObjectStore,
                 config: Optional[ModeConfig] = None,
                 out: Optional[TextIO] = None) -> None:
        self.store = store
        self.config = config or ModeConfig()
        self.formatter = Formatter(self.config, store, out)

    @property
    def revisions(self) -> int:
        return self.formatter.revisions

    def run(self, args: Iterable[str]) -> None:
        ''' Interpret all `args`, then flush and verify. '''
        tokens = iter(args)
        for arg in tokens:
            self.feed(arg, tokens)
        self.finish()

    def feed(self,
             arg: str,
             tokens: Optional[Iterator[str]] = None) -> None:
        ''' Interpret one argument. `tokens` supplies `--default NAME`. '''
        stage = self.config.stage
        if stage is Stage.STOPPED:
            self.formatter.emit(Suppressed(arg))
        elif stage is Stage.RAW_PASSTHROUGH:
            self.formatter.emit(Literal(arg, Kind.NOREV))
        elif arg.startswith('-'):
            self._option(arg, tokens or iter(()))
        else:
            for result in classify(arg, self.config, self.store):
                self.formatter.emit(result)

    def finish(self) -> None:
        ''' Flush the default and check `--verify` '''
        self._flush_default()
        if self.config.require_single and self.revisions != 1:
            LOG.debug('Saw %d revisions', self.revisions)
            raise VerificationFailure('Needed a single revision')

    def _flush_default(self) -> None:
        for result in flush_default(self.config, self.store):
            self.formatter.emit(result)

    def _option(self, arg: str, tokens: Iterator[str]) -> None:
        config = self.config
        if arg == '--':
            self._flush_default()
            if config.revisions_only or config.flags_only:
                config.stage = Stage.STOPPED
                return
            config.stage = Stage.RAW_PASSTHROUGH
            self.formatter.emit(Literal(arg, Kind.FLAG))
        elif arg == '--default':
            config.set_default(next(tokens, None))
        elif arg == '--all':
            for refname, oid in self.store.references():
                self.formatter.emit(Revision(oid, refname, Polarity.NORMAL))
        elif arg == '--show-prefix':
            self.formatter.emit(Literal(self.store.prefix(), Kind.RAW))
        else:
            try:
                config.set(arg)
            except UnknownOption:
                self.formatter.emit(classify_option(arg, config))
