"""Visibility filter: hidden paths and the optional allow-list of names."""

from __future__ import annotations

import os


class VisibilityFilter:
    """Decides whether a discovered repository is shown"""

    def __init__(self, hidden: list[str] = None, allowed_names: list[str] | None = None):
        """Create a filter. allowed_names=None disables the allow-list; [] admits nothing."""
        self.hidden = {os.path.normpath(p) for p in hidden or []}
        self.allowed_names = None if allowed_names is None else set(allowed_names)

    def is_hidden(self, path: str) -> bool:
        """Return True if path is listed as hidden. Exact match only, never a prefix."""
        return os.path.normpath(path) in self.hidden

    def is_allowed(self, name: str) -> bool:
        """Return True if no allow-list is configured or name is on it."""
        return self.allowed_names is None or name in self.allowed_names

    def admits(self, path: str, name: str, use_allow_list: bool = True) -> bool:
        """Return True if the repository at path, shown as name, should be listed."""
        if self.is_hidden(path):
            return False
        return not use_allow_list or self.is_allowed(name)
