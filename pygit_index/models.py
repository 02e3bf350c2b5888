"""Domain models: discovered repositories, tree nodes, and configuration."""

from __future__ import annotations

import os
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ProbeResult:
    """Outcome of checking a single directory for a git repository"""
    is_repository: bool
    is_bare: bool = False
    description_path: str | None = None


@dataclass(frozen=True)
class RepositoryRecord:
    """A repository found during discovery"""
    name: str
    path: str
    trimmed_path: str
    description: str | None = None
    is_bare: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a plain dict for JSON output."""
        return {
            'name': self.name,
            'path': self.path,
            'trimmed_path': self.trimmed_path,
            'description': self.description,
            'is_bare': self.is_bare,
        }


@dataclass
class DirectoryNode:
    """A container directory in the hierarchical view"""
    id: str
    name: str
    path: str
    repositories: dict[str, RepositoryRecord] = field(default_factory=dict)
    subdirs: dict[str, DirectoryNode] = field(default_factory=dict)

    def is_empty(self) -> bool:
        """Return True if the node holds neither repositories nor subdirectories."""
        return not self.repositories and not self.subdirs

    def iter_repositories(self) -> Iterator[RepositoryRecord]:
        """Yield every repository in this node and, depth-first, in its subdirectories."""
        yield from self.repositories.values()
        for subdir in self.subdirs.values():
            yield from subdir.iter_repositories()

    def to_dict(self) -> dict[str, Any]:
        """Serialize recursively to a plain dict for JSON output."""
        return {
            'id': self.id,
            'name': self.name,
            'path': self.path,
            'repositories': {k: r.to_dict() for k, r in self.repositories.items()},
            'subdirs': {k: d.to_dict() for k, d in self.subdirs.items()},
        }


@dataclass(frozen=True)
class ScanConfig:
    """Configuration for repository discovery"""
    root_paths: list[str] = field(default_factory=list)
    hidden: list[str] = field(default_factory=list)
    allowed_names: list[str] | None = None
    default_branch: str = 'master'
    parallel: bool = False
    max_workers: int = field(default_factory=lambda: min(os.cpu_count() or 4, 8))
    follow_symlinks: bool = True
    verbose: bool = False
    json_output: bool = False

    def with_updates(self, **kwargs) -> ScanConfig:
        """Return a new ScanConfig with the given fields replaced."""
        current = {f.name: getattr(self, f.name) for f in self.__dataclass_fields__.values()}
        current.update(kwargs)
        return ScanConfig(**current)
