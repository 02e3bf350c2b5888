"""GitPython-backed factory for opening and creating single repositories."""

from __future__ import annotations

import logging

from git import Repo

from pygit_index.detection import RepositoryDetector
from pygit_index.errors import RepositoryAlreadyExists, RepositoryNotFound
from pygit_index.protocols import FileSystem


class GitPythonRepositoryFactory:
    """Concrete RepositoryFactory using GitPython"""

    def __init__(self, fs: FileSystem = None):
        """Create a factory that checks paths through fs before touching git."""
        self._detector = RepositoryDetector(fs)
        self._logger = logging.getLogger(__name__)

    def open(self, path: str) -> Repo:
        """Open the repository at path. Raises RepositoryNotFound if there is none."""
        if not self._detector.fs.exists(path) or not self._detector.probe(path).is_repository:
            raise RepositoryNotFound(path)
        self._logger.debug("Opening repository %s", path)
        return Repo(path)

    def create(self, path: str, bare: bool = False) -> Repo:
        """Initialize a new repository at path, creating the directory if needed.

        Raises RepositoryAlreadyExists if path already holds a repository.
        """
        if self._detector.probe(path).is_repository:
            raise RepositoryAlreadyExists(path)
        self._logger.debug("Creating %s repository %s", "bare" if bare else "working-copy", path)
        return Repo.init(path, mkdir=True, bare=bare)
