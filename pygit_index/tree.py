"""Tree scanner: builds the hierarchical, filterable view of repositories."""

from __future__ import annotations

import logging
import os

from pygit_index.detection import RepositoryDetector
from pygit_index.models import DirectoryNode, RepositoryRecord, ScanConfig
from pygit_index.paths import node_id, node_name, sort_by_key_desc, unique_values
from pygit_index.protocols import FileSystem
from pygit_index.scanner import list_entries
from pygit_index.visibility import VisibilityFilter

logger = logging.getLogger(__name__)


def matches(record: RepositoryRecord, filter_text: str) -> bool:
    """Return True if filter_text is empty or found, ignoring case, in the name or description."""
    if not filter_text:
        return True
    needle = filter_text.lower()
    if needle in record.name.lower():
        return True
    return record.description is not None and needle in record.description.lower()


class TreeScanner:
    """Responsible for building one DirectoryNode per root.

    Hidden paths are excluded here as in the flat index, but the allow-list of
    names is not applied: the tree is narrowed by filter text only.
    """

    def __init__(self, config: ScanConfig, fs: FileSystem = None):
        """Create a tree scanner for the given config and filesystem."""
        self.config = config
        self.detector = RepositoryDetector(fs, config.follow_symlinks)
        self.fs = self.detector.fs
        self.visibility = VisibilityFilter(config.hidden, config.allowed_names)

    def discover(self, roots: list[str], filter_text: str = "") -> dict[str, DirectoryNode]:
        """Build the tree for each root, omitting roots with nothing to show."""
        nodes: dict[str, DirectoryNode] = {}
        for root in roots:
            node = self.build_node(root, root, filter_text)
            if node.is_empty():
                logger.debug("Nothing to show under %s", root)
                continue
            nodes[node.name] = node

        return sort_by_key_desc(unique_values(nodes))

    def build_node(
        self,
        path: str,
        root: str,
        filter_text: str = "",
        ancestors: frozenset[str] = frozenset(),
    ) -> DirectoryNode:
        """Build the node for path from its children, bottom-up.

        Child containers are kept only when they hold something after pruning.
        """
        repositories: dict[str, RepositoryRecord] = {}
        subdirs: dict[str, DirectoryNode] = {}
        ancestors = ancestors | {self.fs.real_path(path)}

        for name in list_entries(self.fs, path, is_root=path == root):
            entry = os.path.join(path, name)
            if not self.detector.is_candidate(entry, name):
                continue

            probe = self.detector.probe(entry)
            if probe.is_repository:
                if not self.visibility.admits(entry, name, use_allow_list=False):
                    logger.debug("Not listing %s", entry)
                    continue
                record = self.detector.build_record(entry, probe, name, root)
                if matches(record, filter_text):
                    repositories[name] = record
                continue

            if self.fs.real_path(entry) in ancestors:
                logger.debug("Skipping directory loop at %s", entry)
                continue
            child = self.build_node(entry, root, filter_text, ancestors)
            if not child.is_empty():
                subdirs[name] = child

        return DirectoryNode(
            id=node_id(path),
            name=node_name(path),
            path=path,
            repositories=sort_by_key_desc(unique_values(repositories)),
            subdirs=sort_by_key_desc(unique_values(subdirs)),
        )
