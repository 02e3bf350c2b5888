"""Path normalization and the ordering shared by both discovery views."""

from __future__ import annotations

import os
from typing import TypeVar

V = TypeVar('V')

SEPARATORS = '/' + ('' if os.sep == '/' else os.sep) + (os.altsep or '')


def trim_path(path: str, root: str) -> str:
    """Strip the root prefix from path, then any leading/trailing separators."""
    if root and path.startswith(root):
        path = path[len(root):]
    return path.strip(SEPARATORS)


def display_name(path: str, top_level: bool) -> str:
    """Name shown for a repository in the flat index.

    Repositories directly under a root use their directory name. Anything
    deeper gets ``<parent>/<name>`` built from the immediate parent only, so
    ``root/a/b/repo`` is named ``b/repo``.
    """
    path = path.rstrip(SEPARATORS)
    name = os.path.basename(path)
    if top_level:
        return name
    parent = os.path.basename(os.path.dirname(path))
    return f"{parent}/{name}"


def node_id(path: str) -> str:
    """Best-effort token for a tree node: the path with separators removed."""
    for sep in SEPARATORS:
        path = path.replace(sep, '')
    return path


def node_name(path: str) -> str:
    """Base name of a container directory, tolerating a trailing separator."""
    return node_id(os.path.basename(path.rstrip(SEPARATORS)))


def sort_by_key_desc(mapping: dict[str, V]) -> dict[str, V]:
    """Order a mapping by key, case-insensitively, in descending order.

    Keys equal ignoring case fall back to the raw key, also descending.
    """
    return dict(sorted(mapping.items(), key=lambda item: (item[0].lower(), item[0]), reverse=True))


def unique_values(mapping: dict[str, V]) -> dict[str, V]:
    """Drop entries whose value equals the value of an earlier entry.

    Hashable values (frozen records) are tracked in a set; unhashable ones
    (tree nodes) fall back to comparing against the earlier unhashable values.
    """
    kept: dict[str, V] = {}
    seen: set = set()
    unhashable: list[V] = []
    for key, value in mapping.items():
        try:
            if value in seen:
                continue
            seen.add(value)
        except TypeError:
            if any(value == other for other in unhashable):
                continue
            unhashable.append(value)
        kept[key] = value
    return kept
