"""Repository scanner: builds the flat index of repositories under root paths."""

from __future__ import annotations

import concurrent.futures
import logging
import os

from pygit_index.detection import RepositoryDetector
from pygit_index.errors import NoRepositoriesFound, RootPathUnreadable
from pygit_index.models import RepositoryRecord, ScanConfig
from pygit_index.paths import display_name, sort_by_key_desc, unique_values
from pygit_index.protocols import FileSystem
from pygit_index.visibility import VisibilityFilter

logger = logging.getLogger(__name__)


def list_entries(fs: FileSystem, path: str, is_root: bool) -> list[str]:
    """List a directory in name order.

    A root that cannot be listed raises RootPathUnreadable; anything deeper is
    treated as empty.
    """
    try:
        return sorted(fs.list_dir(path))
    except OSError as e:
        if is_root:
            raise RootPathUnreadable(path, e.strerror or str(e)) from e
        logger.debug("Cannot list %s: %s", path, e)
        return []


class RepositoryScanner:
    """Responsible for finding git repositories and indexing them by trimmed path"""

    def __init__(self, config: ScanConfig, fs: FileSystem = None):
        """Create a scanner for the given config and filesystem."""
        self.config = config
        self.detector = RepositoryDetector(fs, config.follow_symlinks)
        self.fs = self.detector.fs
        self.visibility = VisibilityFilter(config.hidden, config.allowed_names)

    def discover(self, roots: list[str]) -> dict[str, RepositoryRecord]:
        """Scan every root and return the merged index, sorted by key descending.

        Raises NoRepositoriesFound as soon as one root contributes nothing.
        """
        merged: dict[str, RepositoryRecord] = {}
        for root in roots:
            repositories = self.find_repositories(root)
            if not repositories:
                raise NoRepositoriesFound(root)
            logger.debug("Found %d repositories in %s", len(repositories), root)
            merged.update(repositories)

        return sort_by_key_desc(unique_values(merged))

    def find_repositories(self, root: str) -> dict[str, RepositoryRecord]:
        """Walk one root depth-first and index the visible repositories under it."""
        entries = list_entries(self.fs, root, is_root=True)
        ancestors = frozenset({self.fs.real_path(root)})

        if self.config.parallel and len(entries) > 1:
            with concurrent.futures.ThreadPoolExecutor(max_workers=self.config.max_workers) as executor:
                results = list(executor.map(
                    lambda name: self._visit(os.path.join(root, name), name, root, True, ancestors),
                    entries,
                ))
        else:
            results = [self._visit(os.path.join(root, name), name, root, True, ancestors)
                       for name in entries]

        repositories: dict[str, RepositoryRecord] = {}
        for result in results:
            repositories.update(result)
        return repositories

    def _visit(
        self,
        path: str,
        name: str,
        root: str,
        top_level: bool,
        ancestors: frozenset[str],
    ) -> dict[str, RepositoryRecord]:
        """Index a single entry: record it if it is a repository, recurse if it is a container."""
        if not self.detector.is_candidate(path, name):
            return {}

        probe = self.detector.probe(path)
        if probe.is_repository:
            repo_name = display_name(path, top_level)
            if not self.visibility.admits(path, repo_name):
                logger.debug("Not listing %s", path)
                return {}
            record = self.detector.build_record(path, probe, repo_name, root)
            return {record.trimmed_path: record}

        real = self.fs.real_path(path)
        if real in ancestors:
            logger.debug("Skipping directory loop at %s", path)
            return {}
        ancestors = ancestors | {real}

        repositories: dict[str, RepositoryRecord] = {}
        for child in list_entries(self.fs, path, is_root=False):
            repositories.update(self._visit(os.path.join(path, child), child, root, False, ancestors))
        return repositories
