"""Shared fixtures: on-disk repository layouts and an in-memory filesystem."""

from __future__ import annotations

import os
from pathlib import Path

import pytest


def make_bare(path: Path, description: str | None = None) -> Path:
    """Lay out a minimal bare repository (HEAD at the top level)."""
    path.mkdir(parents=True, exist_ok=True)
    (path / "HEAD").write_text("ref: refs/heads/master\n")
    if description is not None:
        (path / "description").write_text(description)
    return path


def make_work_tree(path: Path, description: str | None = None) -> Path:
    """Lay out a minimal working-copy repository (.git/HEAD)."""
    git_dir = path / ".git"
    git_dir.mkdir(parents=True, exist_ok=True)
    (git_dir / "HEAD").write_text("ref: refs/heads/master\n")
    if description is not None:
        (git_dir / "description").write_text(description)
    return path


class FakeFileSystem:
    """In-memory FileSystem for tests. Directories are implied by the files under them."""

    def __init__(self, files: dict[str, str] = None, dirs: list[str] = None):
        self.files: dict[str, str] = {}
        self.dirs: set[str] = set()
        self.unreadable: set[str] = set()
        self.unlistable: set[str] = set()
        self.list_calls: list[str] = []
        for path in dirs or []:
            self.add_dir(path)
        for path, content in (files or {}).items():
            self.add_file(path, content)

    def add_dir(self, path: str) -> None:
        while path not in ('/', ''):
            self.dirs.add(path)
            path = os.path.dirname(path)
        self.dirs.add('/')

    def add_file(self, path: str, content: str = "") -> None:
        self.files[path] = content
        self.add_dir(os.path.dirname(path))

    @staticmethod
    def _norm(path: str) -> str:
        return path.rstrip('/') or '/'

    def list_dir(self, path: str) -> list[str]:
        path = self._norm(path)
        self.list_calls.append(path)
        if path in self.unlistable:
            raise PermissionError(13, "Permission denied", path)
        if path not in self.dirs:
            raise FileNotFoundError(2, "No such file or directory", path)
        prefix = path.rstrip('/') + '/'
        names = {p[len(prefix):].split('/', 1)[0]
                 for p in list(self.dirs) + list(self.files)
                 if p.startswith(prefix) and p != prefix}
        return sorted(names, reverse=True)

    def exists(self, path: str) -> bool:
        path = self._norm(path)
        return path in self.files or path in self.dirs

    def is_dir(self, path: str) -> bool:
        path = self._norm(path)
        return path in self.dirs

    def is_symlink(self, path: str) -> bool:
        return False

    def is_readable(self, path: str) -> bool:
        return path not in self.unreadable

    def read_text(self, path: str) -> str:
        if path in self.unreadable:
            raise PermissionError(13, "Permission denied", path)
        return self.files[path]

    def real_path(self, path: str) -> str:
        return path


@pytest.fixture
def sample_fs() -> FakeFileSystem:
    """/r with bare repo a (described "Alpha") and working copy b."""
    return FakeFileSystem(files={
        "/r/a/HEAD": "ref: refs/heads/master\n",
        "/r/a/description": "Alpha",
        "/r/b/.git/HEAD": "ref: refs/heads/master\n",
    })


@pytest.fixture
def sample_root(tmp_path: Path) -> Path:
    """On-disk equivalent of sample_fs."""
    root = tmp_path / "r"
    make_bare(root / "a", description="Alpha")
    make_work_tree(root / "b")
    return root
