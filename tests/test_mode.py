# pylint: disable=missing-docstring
import configparser

import pytest

from revspec import UnknownOption
from revspec.mode import DefaultState, ModeConfig, Polarity, Stage


def test_defaults():
    config = ModeConfig()
    assert config.forward_rev_options
    assert not config.quote_output
    assert config.polarity is Polarity.NORMAL
    assert config.stage is Stage.INTERPRETING
    assert config.default_state is DefaultState.DEFAULT_FLUSHED


@pytest.mark.parametrize('option, attribute', [
    ('--revs-only', 'revisions_only'),
    ('--no-revs', 'suppress_revisions'),
    ('--flags', 'flags_only'),
    ('--no-flags', 'suppress_flags'),
    ('--sq', 'quote_output'),
    ('--symbolic', 'symbolic_names'),
])
def test_switches(option, attribute):
    config = ModeConfig()
    config.set(option)
    assert getattr(config, attribute)


def test_verify():
    config = ModeConfig()
    config.set('--verify')
    assert config.revisions_only
    assert config.require_single
    assert not config.forward_rev_options


def test_not_toggles():
    config = ModeConfig()
    config.set('--not')
    assert config.polarity is Polarity.REVERSED
    config.set('--not')
    assert config.polarity is Polarity.NORMAL


def test_default_is_taken_once():
    config = ModeConfig()
    config.set('--default=main')
    assert config.default_state is DefaultState.AWAITING_DEFAULT
    assert config.take_default() == 'main'
    assert config.take_default() is None
    assert config.default_state is DefaultState.DEFAULT_FLUSHED


def test_clear_default():
    config = ModeConfig()
    config.set_default('main')
    config.clear_default()
    assert config.pending_default is None


@pytest.mark.parametrize('option', ['--max-count=1', '--foo', '-n', '--all'])
def test_unknown_option(option):
    with pytest.raises(UnknownOption):
        ModeConfig().set(option)


def test_from_config():
    conf = configparser.ConfigParser()
    conf['rev-parse'] = {'head': 'CURRENT', 'sq': 'yes', 'symbolic': 'no'}
    config = ModeConfig.from_config(conf)
    assert config.head == 'CURRENT'
    assert config.quote_output
    assert not config.symbolic_names
