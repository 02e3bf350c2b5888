"""RepositoryIndex: the discovery engine facade handed to consumers."""

from __future__ import annotations

from typing import Any

from pygit_index.errors import RepositoryNotFound
from pygit_index.filesystem import LocalFileSystem
from pygit_index.models import DirectoryNode, RepositoryRecord, ScanConfig
from pygit_index.protocols import FileSystem, RepositoryFactory
from pygit_index.repository import GitPythonRepositoryFactory
from pygit_index.scanner import RepositoryScanner
from pygit_index.tree import TreeScanner


class RepositoryIndex:
    """Discovers repositories under the configured roots and opens them on request.

    Every call rescans the filesystem; nothing is cached between calls.
    """

    def __init__(
        self,
        config: ScanConfig,
        factory: RepositoryFactory = None,
        fs: FileSystem = None,
    ):
        """Create an index. Defaults to the local filesystem and a GitPython factory."""
        self.config = config
        self.fs = fs or LocalFileSystem()
        self.factory = factory or GitPythonRepositoryFactory(self.fs)
        self.scanner = RepositoryScanner(config, self.fs)
        self.tree_scanner = TreeScanner(config, self.fs)

    @property
    def default_branch(self) -> str:
        """Branch to show when a repository's HEAD is detached."""
        return self.config.default_branch

    def get_repositories(self, paths: list[str] | None = None) -> dict[str, RepositoryRecord]:
        """Return the flat index keyed by trimmed path, sorted descending."""
        return self.scanner.discover(self._roots(paths))

    def get_repositories_tree(
        self,
        paths: list[str] | None = None,
        filter_text: str = "",
    ) -> dict[str, DirectoryNode]:
        """Return one DirectoryNode per non-empty root, narrowed by filter_text."""
        return self.tree_scanner.discover(self._roots(paths), filter_text)

    def get_repository_from_name(self, name: str, paths: list[str] | None = None) -> Any:
        """Open the repository whose flat-index key is name."""
        record = self.get_repositories(paths).get(name)
        if record is None:
            raise RepositoryNotFound(name)
        return self.get_repository(record.path)

    def get_repository(self, path: str) -> Any:
        """Open the repository at path through the factory."""
        return self.factory.open(path)

    def create_repository(self, path: str, bare: bool = False) -> Any:
        """Create a repository at path through the factory."""
        return self.factory.create(path, bare)

    def _roots(self, paths: list[str] | None) -> list[str]:
        return list(self.config.root_paths) if paths is None else list(paths)
