# pylint: disable=missing-docstring
import pytest

from revspec.main import main


def test_rev_parse(git_repo, capsys):
    top = git_repo.working_tree_dir
    head = git_repo.head.commit.hexsha
    assert main(['-C', top, 'rev-parse', 'HEAD', '--', 'src']) == 0
    assert capsys.readouterr().out == '%s\n--\nsrc\n' % head


def test_options_after_command_are_arguments(git_repo, capsys):
    top = git_repo.working_tree_dir
    head = git_repo.head.commit
    assert main(['-C', top, 'rev-parse', '--sq', 'v1.0..', '--version']) == 0
    out = capsys.readouterr().out
    assert out == "'%s' ^'%s' '--version' " % (head.hexsha,
                                                head.parents[0].hexsha)


def test_show_prefix(git_repo, capsys):
    subdir = git_repo.working_tree_dir + '/src'
    assert main(['-C', subdir, 'rev-parse', '--show-prefix']) == 0
    assert capsys.readouterr().out == 'src/\n'


def test_verify(git_repo, capsys):
    top = git_repo.working_tree_dir
    assert main(['-C', top, 'rev-parse', '--verify', 'HEAD']) == 0
    assert capsys.readouterr().out == git_repo.head.commit.hexsha + '\n'


@pytest.mark.parametrize('args', [[], ['nope'], ['HEAD', 'HEAD~1']])
def test_verify_failure(git_repo, capsys, args):
    top = git_repo.working_tree_dir
    assert main(['-C', top, 'rev-parse', '--verify'] + args) == 1
    assert capsys.readouterr().err == 'Needed a single revision\n'


def test_no_repository(tmp_path, capsys):
    missing = str(tmp_path / 'missing')
    assert main(['-C', missing, 'rev-parse', 'HEAD']) == 128
    assert capsys.readouterr().err.startswith('fatal: not a git repository')


def test_version(capsys):
    with pytest.raises(SystemExit):
        main(['--version'])
    assert 'v1.0.0' in capsys.readouterr().out


def test_negation(git_repo, capsys):
    top = git_repo.working_tree_dir
    head = git_repo.head.commit
    assert main(['-C', top, 'rev-parse', '^HEAD', 'v1.0']) == 0
    assert capsys.readouterr().out == '^%s\n%s\n' % (head.hexsha,
                                                     head.parents[0].hexsha)


def test_negated_range_bottom_is_a_literal(git_repo, capsys):
    top = git_repo.working_tree_dir
    assert main(['-C', top, 'rev-parse', '^v1.0..HEAD']) == 0
    assert capsys.readouterr().out == '^v1.0..HEAD\n'


def test_verify_negation(git_repo, capsys):
    top = git_repo.working_tree_dir
    assert main(['-C', top, 'rev-parse', '--verify', '^HEAD']) == 0
    assert capsys.readouterr().out == '^%s\n' % git_repo.head.commit.hexsha
