"""Error hierarchy raised by discovery and the single-repository seam."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class RepositoryIndexError(Exception):
    message: str
    hint: str = ""

    def __str__(self) -> str:
        if self.hint:
            return f"{self.message} Hint: {self.hint}"
        return self.message


class NoRepositoriesFound(RepositoryIndexError):
    """A root path yielded no repositories during a flat scan."""

    def __init__(self, path: str):
        super().__init__(
            f"There are no git repositories in {path}",
            hint="check root_paths, hidden and allowed_names",
        )
        self.path = path


class RootPathUnreadable(RepositoryIndexError):
    """A configured root could not be listed."""

    def __init__(self, path: str, reason: str = ""):
        message = f"Cannot read root path {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.path = path


class RepositoryNotFound(RepositoryIndexError):
    def __init__(self, path: str):
        super().__init__(f"There is no git repository at {path}")
        self.path = path


class RepositoryAlreadyExists(RepositoryIndexError):
    def __init__(self, path: str):
        super().__init__(f"A git repository already exists at {path}")
        self.path = path
