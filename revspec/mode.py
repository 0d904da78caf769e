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
''' Switches which change how arguments are classified and shown '''

import configparser
import enum
import logging
from typing import Optional

from revspec import UnknownOption

LOG = logging.getLogger('revspec')


class Polarity(enum.IntEnum):
    NORMAL = 0
    REVERSED = 1


class Stage(enum.Enum):
    ''' Where the driver loop is. The only transitions are
        INTERPRETING → RAW_PASSTHROUGH and INTERPRETING → STOPPED.
    '''
    INTERPRETING = 'interpreting'
    RAW_PASSTHROUGH = 'raw-passthrough'
    STOPPED = 'stopped'


class DefaultState(enum.Enum):
    AWAITING_DEFAULT = 'awaiting-default'
    DEFAULT_FLUSHED = 'default-flushed'


class ModeConfig:
    ''' The mutable switch set of one rev-parse run. '''

    # pylint: disable=too-many-instance-attributes
    def __init__(self,
                 head: str = 'HEAD',
                 quote_output: bool = False,
                 symbolic_names: bool = False) -> None:
        self.head = head
        self.suppress_revisions = False
        self.revisions_only = False
        self.flags_only = False
        self.suppress_flags = False
        self.forward_rev_options = True
        self.quote_output = quote_output
        self.symbolic_names = symbolic_names
        self.require_single = False
        self.polarity = Polarity.NORMAL
        self.stage = Stage.INTERPRETING
        self._pending_default: Optional[str] = None

    @classmethod
    def from_config(cls, conf: configparser.ConfigParser) -> 'ModeConfig':
        section = conf['rev-parse']
        return cls(head=section.get('head', 'HEAD'),
                   quote_output=section.getboolean('sq', False),
                   symbolic_names=section.getboolean('symbolic', False))

    @property
    def default_state(self) -> DefaultState:
        if self._pending_default is None:
            return DefaultState.DEFAULT_FLUSHED
        return DefaultState.AWAITING_DEFAULT

    @property
    def pending_default(self) -> Optional[str]:
        return self._pending_default

    def set_default(self, name: Optional[str]) -> None:
        LOG.debug('Default revision %r', name)
        self._pending_default = name

    def take_default(self) -> Optional[str]:
        ''' Return the pending default and forget it. '''
        name, self._pending_default = self._pending_default, None
        return name

    def clear_default(self) -> None:
        if self._pending_default is not None:
            LOG.debug('Dropping default %r', self._pending_default)
        self._pending_default = None

    def set(self, option: str) -> None:
        ''' Apply a mode option or raise `UnknownOption`. '''
        # pylint: disable=too-many-branches
        if option.startswith('--default='):
            self.set_default(option.partition('=')[2])
        elif option == '--revs-only':
            self.revisions_only = True
        elif option == '--no-revs':
            self.suppress_revisions = True
        elif option == '--flags':
            self.flags_only = True
        elif option == '--no-flags':
            self.suppress_flags = True
        elif option == '--verify':
            self.revisions_only = True
            self.forward_rev_options = False
            self.require_single = True
        elif option == '--sq':
            self.quote_output = True
        elif option == '--not':
            self.polarity = Polarity(self.polarity ^ Polarity.REVERSED)
        elif option == '--symbolic':
            self.symbolic_names = True
        else:
            raise UnknownOption(option)
