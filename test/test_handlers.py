#!/usr/bin/env python3

'''
Tests the registry operations against an in-memory filesystem.
'''

import os, sys
import pytest
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))
import utils
from gitfindr import gitf

@pytest.fixture
def fs():
    ans = utils.FakeFilesystem()
    ans.make_repo('/repos/proj')
    ans.make_repo('/repos/other')
    ans.mkdir('/repos/plain')
    ans.touch('/repos/notes.txt')
    return ans

def test_add_then_show(fs):
    registry = gitf.Registry()
    entry = gitf.add_repo(registry, 'proj', '/repos/proj', fs)
    assert gitf.show_repo(registry, 'proj') is entry
    assert (entry.alias, entry.path) == ('proj', '/repos/proj')
    assert entry.added is not None
    assert registry.modified

def test_alias_is_case_sensitive(fs):
    registry = gitf.Registry()
    gitf.add_repo(registry, 'proj', '/repos/proj', fs)
    gitf.add_repo(registry, 'Proj', '/repos/other', fs)
    assert gitf.list_repos(registry) == [('proj', '/repos/proj'), ('Proj', '/repos/other')]

def test_duplicate_alias(fs):
    ''' A taken alias is refused and the registry is left as it was. '''
    registry = gitf.Registry()
    gitf.add_repo(registry, 'proj', '/repos/proj', fs)
    before = gitf.list_repos(registry)
    with pytest.raises(gitf.DuplicateAlias):
        gitf.add_repo(registry, 'proj', '/repos/other', fs)
    assert gitf.list_repos(registry) == before

def test_force_replaces(fs):
    registry = gitf.Registry()
    gitf.add_repo(registry, 'proj', '/repos/proj', fs)
    gitf.add_repo(registry, 'proj', '/repos/other', fs, force=True)
    assert gitf.list_repos(registry) == [('proj', '/repos/other')]

@pytest.mark.parametrize('path', ['/repos/missing', '/repos/plain', '/repos/notes.txt'])
def test_invalid_path(fs, path):
    registry = gitf.Registry()
    with pytest.raises(gitf.InvalidPath):
        gitf.add_repo(registry, 'x', path, fs)
    assert len(registry) == 0
    assert not registry.modified

@pytest.mark.parametrize('alias', ['', '   '])
def test_invalid_alias(fs, alias):
    with pytest.raises(gitf.InvalidAlias):
        gitf.add_repo(gitf.Registry(), alias, '/repos/proj', fs)

def test_inspection_error_is_invalid_path(fs):
    fs.unreadable.add('/repos/proj')
    with pytest.raises(gitf.InvalidPath):
        gitf.add_repo(gitf.Registry(), 'proj', '/repos/proj', fs)

def test_remove(fs):
    registry = gitf.Registry()
    gitf.add_repo(registry, 'proj', '/repos/proj', fs)
    assert gitf.remove_repo(registry, 'proj').path == '/repos/proj'
    with pytest.raises(gitf.AliasNotFound):
        gitf.show_repo(registry, 'proj')
    with pytest.raises(gitf.AliasNotFound):
        gitf.remove_repo(registry, 'proj')

def test_empty_list():
    registry = gitf.Registry()
    assert gitf.list_repos(registry) == []
    assert not registry.modified

def test_bulk_add(fs):
    ''' Two repos and one plain directory: two entries, one skipped, no failures. '''
    registry = gitf.Registry()
    result = gitf.add_repos(registry, '/repos', fs=fs)
    assert [x.alias for x in result.added] == ['other', 'proj']
    assert result.skipped == [('plain', 'not a git repository')]
    assert result.failures == []
    assert gitf.list_repos(registry) == [('other', '/repos/other'), ('proj', '/repos/proj')]

def test_bulk_add_prefix(fs):
    registry = gitf.Registry()
    gitf.add_repos(registry, '/repos', 'work', fs)
    assert list(registry) == ['work-other', 'work-proj']

def test_bulk_add_collisions_are_collected(fs):
    ''' A colliding alias fails on its own without stopping the other candidates. '''
    registry = gitf.Registry()
    gitf.add_repo(registry, 'other', '/repos/proj', fs)
    result = gitf.add_repos(registry, '/repos', fs=fs)
    assert [x.alias for x in result.added] == ['proj']
    assert [x[0] for x in result.failures] == ['other']
    assert isinstance(result.failures[0][1], gitf.DuplicateAlias)
    assert registry['other'].path == '/repos/proj'

def test_bulk_add_invalid_directory(fs):
    with pytest.raises(gitf.InvalidDirectory):
        gitf.add_repos(gitf.Registry(), '/nowhere', fs=fs)

def test_repo_state(fs):
    assert gitf.repo_state(gitf.RepoEntry('a', '/repos/proj'), fs) == gitf.RepoState.OK
    assert gitf.repo_state(gitf.RepoEntry('a', '/repos/plain'), fs) == gitf.RepoState.NOT_A_REPOSITORY
    assert gitf.repo_state(gitf.RepoEntry('a', '/repos/gone'), fs) == gitf.RepoState.MISSING

if __name__ == "__main__":
    import pytest
    import sys
    if len(sys.argv) > 1:
        rc = pytest.main(args=['-s', '-vv', '-k', sys.argv[1], sys.argv[0]])
    else:
        rc = pytest.main(args=['-vv', sys.argv[0]])
    if rc:
        sys.exit(1)
