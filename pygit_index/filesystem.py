"""Local filesystem implementation of the FileSystem protocol."""

from __future__ import annotations

import os


class LocalFileSystem:
    """FileSystem backed by the os module. Paths are used as given."""

    def list_dir(self, path: str) -> list[str]:
        """Return entry names in a directory. Raises OSError if it cannot be listed."""
        with os.scandir(path) as entries:
            return [entry.name for entry in entries]

    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def is_dir(self, path: str) -> bool:
        return os.path.isdir(path)

    def is_symlink(self, path: str) -> bool:
        return os.path.islink(path)

    def is_readable(self, path: str) -> bool:
        return os.access(path, os.R_OK)

    def read_text(self, path: str) -> str:
        with open(path, encoding='utf-8', errors='replace') as f:
            return f.read()

    def real_path(self, path: str) -> str:
        return os.path.realpath(path)
