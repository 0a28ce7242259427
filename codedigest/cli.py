"""Command-line interface for codedigest."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from codedigest.core.config import AppConfig, config
from codedigest.core.error_handling import ConfigurationError, GrammarIncompatibleError
from codedigest.core.file_processor import process_files
from codedigest.core.file_system import GlobPatternMatcher, get_files
from codedigest.core.file_tree import format_file_tree


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='codedigest',
        description='Print a condensed digest of a source tree: declarations, signatures and imports.',
    )
    parser.add_argument('directory', help='The path to the directory containing the files')
    parser.add_argument('-i', '--ignore', action='append', default=[], help='Additional directory to ignore (repeatable)')
    parser.add_argument(
        '-I', '--include',
        action='append',
        default=[],
        help='Glob pattern for files whose full contents are included, e.g. "*.md" (repeatable)',
    )
    parser.add_argument('-t', '--tree', action='store_true', help='Print a file tree before the digest')
    parser.add_argument(
        '-x', '--extension',
        action='append',
        default=[],
        help='Map an extra file extension to a language, e.g. "py=python" (repeatable)',
    )
    parser.add_argument('-j', '--jobs', type=int, default=1, help='Number of files digested in parallel')
    parser.add_argument('-v', '--verbose', action='store_true', help='Verbose output')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    parser.add_argument('--quiet', action='store_true', help='Reduce logs to errors only')
    return parser


def _log_level(args) -> int:
    if args.debug:
        return logging.DEBUG
    if args.quiet:
        return logging.ERROR
    if args.verbose:
        return logging.INFO
    return logging.getLevelName(config.get('logging', 'level', 'WARNING'))


def run(app_config: AppConfig, console: Console, out=print) -> int:
    if not app_config.directory.is_dir():
        console.print(f'[bold red]Not a directory:[/bold red] {escape(str(app_config.directory))}')
        return 1
    for extension, language in app_config.extensions.items():
        config.register_extension(extension, language)

    entries = list(get_files(app_config.directory, app_config.ignore))
    if app_config.tree:
        out(format_file_tree(entries))
    matcher = GlobPatternMatcher(app_config.include)
    try:
        process_files(entries, matcher, callback=out, console=console, jobs=app_config.jobs)
    except GrammarIncompatibleError as e:
        console.print(f'[bold red]{escape(str(e))}[/bold red]')
        return 1
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``codedigest`` command."""
    console = Console(stderr=True)
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=_log_level(args))
    try:
        app_config = AppConfig.from_args(args)
    except (ConfigurationError, ValidationError) as e:
        console.print(f'[bold red]Invalid arguments:[/bold red] {escape(str(e))}')
        sys.exit(2)
    sys.exit(run(app_config, console))


if __name__ == '__main__':
    main()
