# pylint: disable=missing-docstring,redefined-outer-name
import io
import shutil

import git
import pytest
from git.util import hex_to_bin

from revspec import ObjectStore, ResolutionFailure
from revspec.interpreter import Interpreter
from revspec.mode import ModeConfig

HEAD = '1' * 40
MAIN = '2' * 40
TOPIC = '3' * 40
TAG = '4' * 40


class FakeStore(ObjectStore):
    ''' An in memory object store which counts lookups. '''

    def __init__(self, names: dict, refs: list = None, prefix: str = ''):
        self.names = names
        self.refs = refs or []
        self._prefix = prefix
        self.lookups = []

    def resolve(self, name: str) -> bytes:
        self.lookups.append(name)
        try:
            return hex_to_bin(self.names[name])
        except KeyError as exc:
            raise ResolutionFailure(name) from exc

    def references(self):
        for refname, oid in self.refs:
            yield refname, hex_to_bin(oid)

    def prefix(self) -> str:
        return self._prefix


@pytest.fixture()
def store() -> FakeStore:
    return FakeStore(
        {
            'HEAD': HEAD,
            'main': MAIN,
            'topic': TOPIC,
            'v1.0': TAG,
        },
        refs=[
            ('refs/heads/main', MAIN),
            ('refs/heads/topic', TOPIC),
            ('refs/tags/v1.0', TAG),
        ],
        prefix='src/lib/')


@pytest.fixture()
def rev_parse(store):
    ''' Run the interpreter and return its output and itself. '''

    def _run(*args, config=None):
        out = io.StringIO()
        interpreter = Interpreter(store, config or ModeConfig(), out)
        interpreter.run(args)
        return out.getvalue(), interpreter

    return _run


@pytest.fixture()
def git_repo(tmp_path):
    ''' A repository with two commits on its initial branch and a tag. '''
    if shutil.which('git') is None:
        pytest.skip('git(1) is not installed')
    repo = git.Repo.init(str(tmp_path))
    actor = git.Actor('Rev Parse', 'rev-parse@example.com')
    (tmp_path / 'src').mkdir()
    for i in range(2):
        path = tmp_path / 'src' / ('file%d.txt' % i)
        path.write_text('content %d\n' % i)
        repo.index.add([str(path)])
        repo.index.commit('commit %d' % i, author=actor, committer=actor)
    repo.create_tag('v1.0', ref='HEAD~1')
    yield repo
    repo.close()
