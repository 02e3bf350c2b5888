"""Configuration: argument parser and config file loader."""

from __future__ import annotations

import argparse
import os
from pathlib import Path
from typing import Any

try:
    import tomllib
except ModuleNotFoundError:
    try:
        import tomli as tomllib  # type: ignore[no-redef]
    except ImportError:
        tomllib = None  # type: ignore[assignment]

CONFIG_FILENAME = '.pygitindex.toml'
LIST_KEYS = ('root_paths', 'hidden', 'allowed_names')


def normalize_config(values: dict[str, Any], source: Path | str = 'config') -> dict[str, Any]:
    """Coerce list-valued keys: a single string becomes a one-item list.

    Any other non-list value for those keys is dropped with a warning.
    """
    values = dict(values)
    for key in LIST_KEYS:
        if key not in values:
            continue
        value = values[key]
        if isinstance(value, str):
            values[key] = [value]
        elif not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            print(f"Warning: '{key}' in {source} must be a list of strings. Ignoring.")
            del values[key]
    return values


def create_argument_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser with all pygit-index flags."""
    # Lazy import to avoid circular dependency with __init__.py
    from pygit_index import __version__

    parser = argparse.ArgumentParser(
        description="List git repositories found under one or more directories",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
        epilog="""
Examples:
  %(prog)s ~/src                               # Flat index
  %(prog)s ~/src /srv/git                      # Several roots
  %(prog)s ~/src --tree --filter api           # Tree, filtered by name/description
  %(prog)s ~/src --hide ~/src/old --json       # Hide a repository, JSON output
        """
    )

    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('roots', nargs='*', default=[],
                       help='Directories to search (default: config root_paths, else current)')
    parser.add_argument('--tree', action='store_true',
                       help='Show the directory tree instead of the flat index')
    parser.add_argument('--filter', dest='filter_text', default='',
                       help='Tree mode: only repositories whose name or description contains TEXT')
    parser.add_argument('--hide', dest='hidden', action='append', default=[],
                       help='Absolute repository path to hide (can specify multiple)')
    parser.add_argument('--project', dest='allowed_names', action='append', default=None,
                       help='Only list repositories with this name (can specify multiple)')
    parser.add_argument('--default-branch', default='master',
                       help='Branch used when a repository HEAD is detached (default: master)')
    parser.add_argument('--parallel', action='store_true',
                       help='Scan top-level directories in parallel')
    parser.add_argument('--max-workers', type=int, default=min(os.cpu_count() or 4, 8),
                       help='Max parallel workers (default: min(cpu_count, 8))')
    parser.add_argument('--no-follow-symlinks', dest='follow_symlinks', action='store_false',
                       help='Skip symlinked directories instead of following them')
    parser.add_argument('--json', dest='json_output', action='store_true',
                       help='Output results as JSON (suppresses normal output)')
    parser.add_argument('--verbose', action='store_true',
                       help='Verbose output')
    parser.add_argument('--config', type=str, default=None,
                       help=f'Path to config file (default: {CONFIG_FILENAME} in current dir or home)')

    return parser


def load_config_file(search_dir: Path, config_path: str | None = None) -> dict[str, Any]:
    """Load .pygitindex.toml from explicit path, search dir, or home dir.

    Returns empty dict if not found or tomllib is unavailable.
    """
    candidates = [Path(config_path)] if config_path else [search_dir / CONFIG_FILENAME, Path.home() / CONFIG_FILENAME]
    for path in candidates:
        if path.is_file():
            if tomllib is None:
                print(f"Warning: Found {path} but tomllib/tomli not available (Python 3.11+ or pip install tomli). Ignoring.")
                return {}
            try:
                with open(path, 'rb') as f:
                    return normalize_config(tomllib.load(f), path)
            except (OSError, tomllib.TOMLDecodeError) as e:
                print(f"Warning: Failed to parse {path}: {e}")
                return {}
    if config_path:
        print(f"Warning: Config file '{config_path}' not found. Ignoring.")
    return {}
