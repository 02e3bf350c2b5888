"""Protocols for the capabilities injected into the discovery engine."""

from __future__ import annotations

from typing import Any, Protocol


class FileSystem(Protocol):
    """Protocol for the read-only filesystem operations discovery needs"""

    def list_dir(self, path: str) -> list[str]: ...
    def exists(self, path: str) -> bool: ...
    def is_dir(self, path: str) -> bool: ...
    def is_symlink(self, path: str) -> bool: ...
    def is_readable(self, path: str) -> bool: ...
    def read_text(self, path: str) -> str: ...
    def real_path(self, path: str) -> str: ...


class RepositoryFactory(Protocol):
    """Protocol for opening and creating single repositories"""

    def open(self, path: str) -> Any: ...
    def create(self, path: str, bare: bool = False) -> Any: ...


class OutputHandler(Protocol):
    """Protocol for handling output"""

    def info(self, message: str, indent: int = 0) -> None: ...
    def success(self, message: str, indent: int = 0) -> None: ...
    def warning(self, message: str, indent: int = 0) -> None: ...
    def error(self, message: str, indent: int = 0) -> None: ...
    def section(self, title: str) -> None: ...
    def debug(self, message: str) -> None: ...
