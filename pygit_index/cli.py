"""CLI entry point: main() function."""

from __future__ import annotations

import json
import logging
import os
import sys
from dataclasses import fields
from pathlib import Path

from pygit_index.config import create_argument_parser, load_config_file
from pygit_index.errors import RepositoryIndexError
from pygit_index.index import RepositoryIndex
from pygit_index.models import ScanConfig
from pygit_index.output import ConsoleOutputHandler, NullOutputHandler
from pygit_index.reporter import IndexReporter

SCAN_CONFIG_KEYS = {f.name for f in fields(ScanConfig)}


def _absolute(paths) -> list[str]:
    return [os.path.abspath(os.path.expanduser(str(p))) for p in paths]


def main(argv: list[str] | None = None):
    """Main entry point"""
    argv = sys.argv[1:] if argv is None else argv
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    file_config = load_config_file(Path.cwd(), args.config)

    # Determine which args were explicitly set on CLI
    cli_explicit = set()
    for action in parser._actions:
        if action.dest in ('help', 'version'):
            continue
        for opt_string in action.option_strings:
            if any(arg == opt_string or arg.startswith(opt_string + '=') for arg in argv):
                cli_explicit.add(action.dest)
                break

    # Defaults, then the config file, then flags given on the command line
    config = ScanConfig(**{k: v for k, v in file_config.items() if k in SCAN_CONFIG_KEYS})
    config = config.with_updates(**{dest: getattr(args, dest) for dest in cli_explicit & SCAN_CONFIG_KEYS})
    config = config.with_updates(
        root_paths=_absolute(args.roots or config.root_paths or ['.']),
        hidden=_absolute(config.hidden),
    )

    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    output = NullOutputHandler() if config.json_output else ConsoleOutputHandler(
        verbose=config.verbose, color=sys.stdout.isatty())
    index = RepositoryIndex(config)

    try:
        if args.tree:
            nodes = index.get_repositories_tree(filter_text=args.filter_text)
            if config.json_output:
                print(json.dumps({k: n.to_dict() for k, n in nodes.items()}, indent=2))
            else:
                IndexReporter(output).print_tree(nodes)
        else:
            repositories = index.get_repositories()
            if config.json_output:
                print(json.dumps({k: r.to_dict() for k, r in repositories.items()}, indent=2))
            else:
                IndexReporter(output).print_listing(repositories)

        sys.exit(0)

    except KeyboardInterrupt:
        if not config.json_output:
            output.warning("\n\nInterrupted by user")
        sys.exit(130)
    except RepositoryIndexError as e:
        if config.json_output:
            print(json.dumps({'error': str(e)}, indent=2))
        else:
            output.error(f"Error: {e}")
        sys.exit(1)
