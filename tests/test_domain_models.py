"""Tests for domain models (dataclasses), errors and config loading."""

from pathlib import Path

from pygit_index import (
    DirectoryNode,
    NoRepositoriesFound,
    ProbeResult,
    RepositoryNotFound,
    RepositoryRecord,
    RootPathUnreadable,
    ScanConfig,
    load_config_file,
    normalize_config,
)


def _record(name: str, description: str | None = None) -> RepositoryRecord:
    return RepositoryRecord(name=name, path=f"/r/{name}", trimmed_path=name, description=description)


class TestRepositoryRecord:
    def test_defaults(self):
        record = RepositoryRecord(name="a", path="/r/a", trimmed_path="a")
        assert record.description is None
        assert record.is_bare is False

    def test_frozen(self):
        record = _record("a")
        try:
            record.name = "other"
            raise AssertionError("Should have raised FrozenInstanceError")
        except AttributeError:
            pass

    def test_equality(self):
        assert _record("a", "x") == _record("a", "x")
        assert _record("a", "x") != _record("a", "y")

    def test_to_dict(self):
        d = RepositoryRecord("group/a", "/r/group/a", "group/a", "Alpha", True).to_dict()
        assert d == {
            'name': 'group/a',
            'path': '/r/group/a',
            'trimmed_path': 'group/a',
            'description': 'Alpha',
            'is_bare': True,
        }


class TestDirectoryNode:
    def test_empty(self):
        node = DirectoryNode(id="r", name="r", path="/r")
        assert node.is_empty() is True

    def test_not_empty_with_repository(self):
        node = DirectoryNode(id="r", name="r", path="/r", repositories={"a": _record("a")})
        assert node.is_empty() is False

    def test_not_empty_with_subdir(self):
        child = DirectoryNode(id="rg", name="g", path="/r/g", repositories={"a": _record("a")})
        node = DirectoryNode(id="r", name="r", path="/r", subdirs={"g": child})
        assert node.is_empty() is False

    def test_iter_repositories(self):
        child = DirectoryNode(id="rg", name="g", path="/r/g", repositories={"b": _record("b")})
        node = DirectoryNode(id="r", name="r", path="/r", repositories={"a": _record("a")}, subdirs={"g": child})
        assert [r.name for r in node.iter_repositories()] == ["a", "b"]

    def test_to_dict_is_recursive(self):
        child = DirectoryNode(id="rg", name="g", path="/r/g", repositories={"b": _record("b")})
        node = DirectoryNode(id="r", name="r", path="/r", subdirs={"g": child})
        d = node.to_dict()
        assert d['id'] == 'r'
        assert d['repositories'] == {}
        assert d['subdirs']['g']['repositories']['b']['name'] == 'b'


class TestProbeResult:
    def test_not_repository(self):
        probe = ProbeResult(False)
        assert probe.is_bare is False
        assert probe.description_path is None


class TestScanConfig:
    def test_defaults(self):
        config = ScanConfig()
        assert config.root_paths == []
        assert config.hidden == []
        assert config.allowed_names is None
        assert config.default_branch == 'master'
        assert config.parallel is False
        assert config.max_workers >= 1
        assert config.follow_symlinks is True
        assert config.verbose is False
        assert config.json_output is False

    def test_with_updates(self):
        config = ScanConfig()
        updated = config.with_updates(allowed_names=[], parallel=True)
        assert updated.allowed_names == []
        assert updated.parallel is True
        # Original unchanged
        assert config.allowed_names is None
        assert config.parallel is False


class TestErrors:
    def test_no_repositories_found(self):
        error = NoRepositoriesFound("/srv/git")
        assert error.path == "/srv/git"
        assert "There are no git repositories in /srv/git" in str(error)
        assert "Hint:" in str(error)

    def test_root_path_unreadable_reason(self):
        error = RootPathUnreadable("/srv/git", "Permission denied")
        assert str(error) == "Cannot read root path /srv/git: Permission denied"

    def test_repository_not_found(self):
        assert str(RepositoryNotFound("/x")) == "There is no git repository at /x"


class TestLoadConfigFile:
    def test_no_config_returns_empty(self, tmp_path: Path, monkeypatch):
        monkeypatch.setattr(Path, 'home', lambda: tmp_path / 'home')
        result = load_config_file(tmp_path)
        assert result == {}

    def test_loads_from_search_dir(self, tmp_path: Path):
        config_file = tmp_path / '.pygitindex.toml'
        config_file.write_text('root_paths = ["/srv/git"]\nhidden = ["/srv/git/secret"]\n')
        result = load_config_file(tmp_path)
        assert result.get('root_paths') == ['/srv/git']
        assert result.get('hidden') == ['/srv/git/secret']

    def test_explicit_path(self, tmp_path: Path):
        config_file = tmp_path / 'custom.toml'
        config_file.write_text('allowed_names = ["a", "team/b"]\n')
        result = load_config_file(tmp_path, config_path=str(config_file))
        assert result.get('allowed_names') == ['a', 'team/b']

    def test_explicit_path_not_found(self, tmp_path: Path, capsys):
        result = load_config_file(tmp_path, config_path='/nonexistent/config.toml')
        assert result == {}
        captured = capsys.readouterr()
        assert "not found" in captured.out

    def test_malformed_toml(self, tmp_path: Path, capsys):
        config_file = tmp_path / '.pygitindex.toml'
        config_file.write_text('this is not valid [[[ toml ===')
        result = load_config_file(tmp_path)
        assert result == {}
        captured = capsys.readouterr()
        assert "Failed to parse" in captured.out

    def test_single_string_becomes_list(self, tmp_path: Path):
        (tmp_path / '.pygitindex.toml').write_text('root_paths = "/srv/git"\n')
        assert load_config_file(tmp_path).get('root_paths') == ['/srv/git']

    def test_non_string_list_value_dropped(self, tmp_path: Path, capsys):
        (tmp_path / '.pygitindex.toml').write_text('hidden = 3\nallowed_names = ["a", 1]\nparallel = true\n')
        result = load_config_file(tmp_path)
        assert 'hidden' not in result
        assert 'allowed_names' not in result
        assert result.get('parallel') is True
        captured = capsys.readouterr()
        assert "'hidden'" in captured.out
        assert "must be a list of strings" in captured.out


class TestNormalizeConfig:
    def test_leaves_other_keys_alone(self):
        values = {'root_paths': ['/a'], 'default_branch': 'main'}
        assert normalize_config(values) == values

    def test_does_not_mutate_input(self):
        values = {'hidden': '/a/x'}
        assert normalize_config(values) == {'hidden': ['/a/x']}
        assert values == {'hidden': '/a/x'}
