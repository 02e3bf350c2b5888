"""Repository detection: which directories are git repositories, and what they contain."""

from __future__ import annotations

import logging
import os

from pygit_index.filesystem import LocalFileSystem
from pygit_index.models import ProbeResult, RepositoryRecord
from pygit_index.paths import trim_path
from pygit_index.protocols import FileSystem

logger = logging.getLogger(__name__)

HEAD_FILE = 'HEAD'
GIT_DIR = '.git'
DESCRIPTION_FILE = 'description'


class RepositoryDetector:
    """Responsible for classifying directory entries during a scan"""

    def __init__(self, fs: FileSystem = None, follow_symlinks: bool = True):
        """Create a detector over fs (the local filesystem by default)."""
        self.fs = fs or LocalFileSystem()
        self.follow_symlinks = follow_symlinks

    def probe(self, path: str) -> ProbeResult:
        """Check path for a bare (HEAD) or working-copy (.git/HEAD) repository.

        A directory matching both is treated as bare.
        """
        if self.fs.exists(os.path.join(path, HEAD_FILE)):
            return ProbeResult(True, True, os.path.join(path, DESCRIPTION_FILE))
        if self.fs.exists(os.path.join(path, GIT_DIR, HEAD_FILE)):
            return ProbeResult(True, False, os.path.join(path, GIT_DIR, DESCRIPTION_FILE))
        return ProbeResult(False)

    def is_candidate(self, path: str, name: str) -> bool:
        """Return True if a directory entry should be examined at all."""
        if name.startswith('.'):
            return False
        if not self.fs.is_readable(path):
            logger.debug("Skipping unreadable entry %s", path)
            return False
        if not self.fs.is_dir(path):
            return False
        if not self.follow_symlinks and self.fs.is_symlink(path):
            logger.debug("Skipping symlink %s", path)
            return False
        return True

    def read_description(self, probe: ProbeResult) -> str | None:
        """Return the description file content, or None if missing or unreadable."""
        if not probe.description_path or not self.fs.exists(probe.description_path):
            return None
        try:
            return self.fs.read_text(probe.description_path)
        except OSError as e:
            logger.debug("Cannot read %s: %s", probe.description_path, e)
            return None

    def build_record(self, path: str, probe: ProbeResult, name: str, root: str) -> RepositoryRecord:
        """Create the record for a repository found under root."""
        return RepositoryRecord(
            name=name,
            path=path,
            trimmed_path=trim_path(path, root),
            description=self.read_description(probe),
            is_bare=probe.is_bare,
        )
