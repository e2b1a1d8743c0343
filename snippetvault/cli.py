"""Command-line entry point for SnippetVault."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from snippetvault import __version__, language_registry
from snippetvault.config_manager import ConfigManager
from snippetvault.errors import SnippetVaultError, UsageError
from snippetvault.logging_utils import level_for_verbosity, setup_logging
from snippetvault.path_manager import PathManager
from snippetvault.snippet_store import SnippetStore
from snippetvault.tool_bridge import ToolBridge

VERSION_TEXT = f"SnippetVault Version: {__version__}"

SEARCH_NOTES = r"""
fzf search syntax:
  'wild     exact match, items that include wild
  ^music    prefix-exact-match, items that start with music
  .mp3$     suffix-exact-match, items that end with .mp3
  !fire     inverse-exact-match, items that do not include fire
  !^music   inverse-prefix-exact-match
  !.mp3$    inverse-suffix-exact-match

A space acts as AND and | as OR, so
  ^music mp3$ | wav$ | flac$
matches entries starting with music and ending in mp3, wav or flac.

Environment:
  SNIPPETVAULT_DIR      snippet directory
  SNIPPETVAULT_EDITOR   editor command
  SNIPPETVAULT_CONFIG   YAML config file (default ~/.config/snippetvault/config.yml)
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snippetvault",
        description="A secure and organized vault for managing your code snippets",
        epilog=SEARCH_NOTES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    actions = parser.add_mutually_exclusive_group(required=True)
    actions.add_argument(
        "--create_snippet",
        nargs=argparse.REMAINDER,
        help="create a new snippet: LANGUAGE followed by zero or more tags; every later token is a tag",
    )
    actions.add_argument("--list_snippets", action="store_true", help="list snippets with a fuzzy finder and preview")
    actions.add_argument("--edit_snippet", action="store_true", help="pick a snippet with the fuzzy finder and edit it")
    actions.add_argument(
        "--find_in_files",
        metavar="TERM",
        help="search snippet contents for TERM and edit the chosen match",
    )
    actions.add_argument("--languages", action="store_true", help="show supported languages")
    actions.add_argument("--version", action="store_true", help="show version information")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="more logging (repeat for debug)")
    parser.add_argument("--config", type=Path, help="path to a YAML config file")
    return parser


def build_store(config_path: Optional[Path] = None) -> SnippetStore:
    config = ConfigManager(config_path=config_path).load()
    return SnippetStore(PathManager(config), ToolBridge(config))


def languages_table() -> Table:
    table = Table(box=None, show_edge=False)
    table.add_column("Language", style="cyan")
    table.add_column("Extension")
    for entry in language_registry.list_supported():
        table.add_row(entry.name, f".{entry.extension}")
    return table


def _report_selection(console: Console, chosen: Optional[Path]) -> None:
    if chosen is None:
        console.print("Nothing selected.")
    else:
        console.print(f"[green]✔[/green] Opened {escape(str(chosen))}")


def _dispatch(args: argparse.Namespace, store: SnippetStore, console: Console) -> None:
    if args.create_snippet is not None:
        if not args.create_snippet:
            raise UsageError("--create_snippet needs a LANGUAGE")
        language, tags = args.create_snippet[0], args.create_snippet[1:]
        path = store.create(language, tags)
        console.print(f"[green]✔[/green] Snippet created: {escape(str(path))}")
        return

    if args.find_in_files is not None:
        if not args.find_in_files.strip():
            raise UsageError("--find_in_files needs a non-empty search term")
        if not store.list_snippets():
            console.print(f"No snippets in {escape(str(store.paths.storage_dir))}")
            return
        _report_selection(console, store.find_in_files(args.find_in_files))
        return

    if not store.list_snippets():
        console.print(f"No snippets in {escape(str(store.paths.storage_dir))}")
        return
    if args.list_snippets:
        _report_selection(console, store.browse())
    else:
        _report_selection(console, store.edit())


def run(
    argv: Optional[List[str]] = None,
    store: Optional[SnippetStore] = None,
    console: Optional[Console] = None,
) -> int:
    """Parse ``argv``, perform the single requested action and return the exit code.

    Usage errors raise ``SystemExit(2)`` from argparse after printing usage.
    """
    args = build_parser().parse_args(argv)
    setup_logging(level_for_verbosity(args.verbose))
    console = console or Console()

    if args.version:
        console.print(f"[green]{VERSION_TEXT}[/green]")
        return 0
    if args.languages:
        console.print(languages_table())
        return 0

    try:
        if store is None:
            store = build_store(args.config)
        _dispatch(args, store, console)
    except SnippetVaultError as exc:
        console.print(f"[red]✘[/red] {escape(str(exc))}")
        return exc.exit_code
    return 0


def main() -> None:
    try:
        code = run()
    except KeyboardInterrupt:
        code = 130
    sys.exit(code)


if __name__ == "__main__":
    main()
