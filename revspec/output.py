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
''' Writing classified arguments for shells and scripts '''

import logging
import sys
from typing import Optional, TextIO

from revspec import ObjectStore
from revspec.classify import Kind, Literal, Result, Revision, Suppressed
from revspec.mode import ModeConfig

LOG = logging.getLogger('revspec')


def sq_quote(text: str) -> str:
    ''' Quote `text` for sh(1): `O'Brien` becomes `'O'\\''Brien'` '''
    return "'" + text.replace("'", "'\\''") + "'"


class Formatter:
    ''' Filters results by mode and writes the rest to `out`. '''

    def __init__(self,
                 config: ModeConfig,
                 store: ObjectStore,
                 out: Optional[TextIO] = None) -> None:
        self.config = config
        self.store = store
        self.out = out or sys.stdout
        self.revisions = 0

    def emit(self, result: Result) -> None:
        if isinstance(result, Revision):
            self._show_rev(result)
        elif isinstance(result, Literal):
            self._show_literal(result)
        elif isinstance(result, Suppressed):
            LOG.debug('Ignoring %r', result.text)
        else:
            raise TypeError('Unexpected result %r' % (result, ))

    def show(self, text: str) -> None:
        if self.config.quote_output:
            self.out.write(sq_quote(text) + ' ')
        else:
            self.out.write(text + '\n')

    def _show_rev(self, revision: Revision) -> None:
        if self.config.suppress_revisions:
            return
        self.revisions += 1

        if revision.polarity != self.config.polarity:
            self.out.write('^')
        if self.config.symbolic_names and revision.name:
            self.show(revision.name)
        else:
            self.show(self.store.format_oid(revision.oid))

    def _show_literal(self, literal: Literal) -> None:
        config = self.config
        if literal.kind is Kind.RAW:
            self.out.write(literal.text + '\n')
        elif literal.kind is Kind.NOREV:
            if not (config.flags_only or config.revisions_only):
                self.show(literal.text)
        elif config.flags_only and config.revisions_only:
            LOG.debug('Hiding %r, only revisions wanted', literal.text)
        elif config.suppress_flags:
            LOG.debug('Hiding flag %r', literal.text)
        elif literal.kind is Kind.REV_FLAG:
            if not config.suppress_revisions:
                self.show(literal.text)
        else:
            self.show(literal.text)
