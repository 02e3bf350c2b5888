"""
pygit-index: Git Repository Index

Discovers git repositories (bare and working-copy) under a set of root
directories and presents them as a flat index or a filterable tree.
"""

from colorama import init as colorama_init

colorama_init(autoreset=True)

__version__ = "1.0.0"

# Re-export public API so `from pygit_index import X` keeps working.
from pygit_index.cli import main  # noqa: E402
from pygit_index.config import create_argument_parser, load_config_file, normalize_config  # noqa: E402
from pygit_index.detection import RepositoryDetector  # noqa: E402
from pygit_index.errors import (  # noqa: E402
    NoRepositoriesFound,
    RepositoryAlreadyExists,
    RepositoryIndexError,
    RepositoryNotFound,
    RootPathUnreadable,
)
from pygit_index.filesystem import LocalFileSystem  # noqa: E402
from pygit_index.index import RepositoryIndex  # noqa: E402
from pygit_index.models import (  # noqa: E402
    DirectoryNode,
    ProbeResult,
    RepositoryRecord,
    ScanConfig,
)
from pygit_index.output import (  # noqa: E402
    SECTION_WIDTH,
    ConsoleOutputHandler,
    NullOutputHandler,
)
from pygit_index.paths import (  # noqa: E402
    display_name,
    node_id,
    node_name,
    sort_by_key_desc,
    trim_path,
    unique_values,
)
from pygit_index.protocols import FileSystem, OutputHandler, RepositoryFactory  # noqa: E402
from pygit_index.reporter import IndexReporter  # noqa: E402
from pygit_index.repository import GitPythonRepositoryFactory  # noqa: E402
from pygit_index.scanner import RepositoryScanner  # noqa: E402
from pygit_index.tree import TreeScanner, matches  # noqa: E402
from pygit_index.visibility import VisibilityFilter  # noqa: E402

__all__ = [
    "__version__",
    # Models
    "DirectoryNode",
    "ProbeResult",
    "RepositoryRecord",
    "ScanConfig",
    # Errors
    "NoRepositoriesFound",
    "RepositoryAlreadyExists",
    "RepositoryIndexError",
    "RepositoryNotFound",
    "RootPathUnreadable",
    # Protocols
    "FileSystem",
    "OutputHandler",
    "RepositoryFactory",
    # Implementations
    "ConsoleOutputHandler",
    "GitPythonRepositoryFactory",
    "LocalFileSystem",
    "NullOutputHandler",
    "SECTION_WIDTH",
    # Discovery
    "RepositoryDetector",
    "RepositoryIndex",
    "RepositoryScanner",
    "TreeScanner",
    "VisibilityFilter",
    "matches",
    # Paths
    "display_name",
    "node_id",
    "node_name",
    "sort_by_key_desc",
    "trim_path",
    "unique_values",
    # Reporting / Config / CLI
    "IndexReporter",
    "create_argument_parser",
    "load_config_file",
    "normalize_config",
    "main",
]
