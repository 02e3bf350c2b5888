"""IndexReporter: renders discovery results for the console."""

from __future__ import annotations

from pygit_index.models import DirectoryNode, RepositoryRecord
from pygit_index.output import SECTION_WIDTH
from pygit_index.protocols import OutputHandler


def _summary_line(description: str | None) -> str:
    """First line of a description, or an empty string."""
    if not description:
        return ""
    lines = description.strip().splitlines()
    return lines[0] if lines else ""


class IndexReporter:
    """Prints flat listings and directory trees"""

    def __init__(self, output: OutputHandler):
        """Create a reporter that writes to the given output handler."""
        self.output = output

    def print_listing(self, repositories: dict[str, RepositoryRecord]) -> None:
        """Print the flat index in its given order, then a count."""
        self.output.section("REPOSITORIES")
        for key, record in repositories.items():
            self._print_record(key, record, indent=0)
        self._print_total(len(repositories))

    def print_tree(self, nodes: dict[str, DirectoryNode]) -> None:
        """Print each root node and its subtree, then a count."""
        self.output.section("REPOSITORY TREE")
        if not nodes:
            self.output.warning("No matching repositories")
        total = 0
        for node in nodes.values():
            total += self._print_node(node, indent=0)
        self._print_total(total)

    def _print_node(self, node: DirectoryNode, indent: int) -> int:
        """Print a node's subdirectories, then its repositories. Returns the repositories printed."""
        self.output.info(f"\U0001f4c1 {node.name}/", indent)
        count = 0
        for subdir in node.subdirs.values():
            count += self._print_node(subdir, indent + 1)
        for name, record in node.repositories.items():
            self._print_record(name, record, indent + 1)
            count += 1
        return count

    def _print_record(self, label: str, record: RepositoryRecord, indent: int) -> None:
        kind = "bare" if record.is_bare else "work tree"
        self.output.success(f"{label} ({kind})", indent)
        summary = _summary_line(record.description)
        if summary:
            self.output.info(f"↳ {summary}", indent + 1)
        self.output.debug(record.path)

    def _print_total(self, count: int) -> None:
        self.output.info("")
        self.output.info(f"Total repositories: {count}")
        self.output.info("=" * SECTION_WIDTH)
