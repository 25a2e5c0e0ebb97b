"""CLI application entry point and session routing for sdcv.

This module is the **sole error boundary** for the entire application.
It catches :class:`~sdcv.exceptions.SdcvError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering a one-line diagnostic on
stderr and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — discovery, selection and the lookup
  loops are delegated to the core layer, file and terminal access to
  the infrastructure layer.
* The environment is read once and passed down as an
  :class:`~sdcv.config.AppConfig`.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import functools
import logging
import os
import sys
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import NoReturn

from sdcv.cli import exit_codes
from sdcv.cli.console import configure_logging, console, escape
from sdcv.config import AppConfig
from sdcv.core.directories import build_directory_set
from sdcv.core.models import LibraryOptions, SelectionPlan, SessionMode
from sdcv.core.protocols import Library, LibraryFactory, LineReader
from sdcv.core.session import select_session_mode
from sdcv.exceptions import ConsistencyError, InvalidArgumentsError, SdcvError
from sdcv.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

class _ArgumentParser(argparse.ArgumentParser):
    """Parser that raises instead of exiting with status 2."""

    def error(self, message: str) -> NoReturn:
        raise InvalidArgumentsError(message)


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``sdcv word ...``        — look the words up and exit
    * ``sdcv``                 — interactive prompt
    * ``sdcv --list-dicts``    — list available dictionaries
    """
    parser = _ArgumentParser(
        prog="sdcv",
        description="Console version of Stardict.",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"Console version of Stardict, version {__version__}",
        help="display version information and exit",
    )
    parser.add_argument(
        "-l",
        "--list-dicts",
        action="store_true",
        help="display list of available dictionaries and exit",
    )
    parser.add_argument(
        "-u",
        "--use-dict",
        action="append",
        default=None,
        metavar="BOOKNAME",
        help="for search use only dictionary with this bookname (repeatable)",
    )
    parser.add_argument(
        "-n",
        "--non-interactive",
        action="store_true",
        help="for use in scripts",
    )
    parser.add_argument(
        "-0",
        "--utf8-output",
        action="store_true",
        help="output must be in utf8",
    )
    parser.add_argument(
        "-1",
        "--utf8-input",
        action="store_true",
        help="input of sdcv in utf8",
    )
    parser.add_argument(
        "-2",
        "--data-dir",
        default=None,
        metavar="PATH",
        help="use this directory as path to stardict data directory",
    )
    parser.add_argument(
        "-c",
        "--color",
        action="store_true",
        help="colorize the output",
    )
    parser.add_argument(
        "words",
        nargs="*",
        help="words or phrases to look up",
    )
    return parser


def _coerce_utf8(*, utf8_input: bool, utf8_output: bool) -> None:
    """Switch the standard streams to UTF-8 when requested."""
    streams = []
    if utf8_output:
        streams.append(sys.stdout)
    if utf8_input:
        streams.append(sys.stdin)
    for stream in streams:
        reconfigure = getattr(stream, "reconfigure", None)
        if reconfigure is not None:
            reconfigure(encoding="utf-8")


# ---------------------------------------------------------------------------
# Session dispatch
# ---------------------------------------------------------------------------

def _handle_list(directories: Sequence[Path]) -> int:
    """Dispatch ``--list-dicts``."""
    from sdcv.cli.listing import list_dictionaries

    return list_dictionaries(directories)


def _resolve_plan(
    config: AppConfig,
    directories: Sequence[Path],
    explicit_names: Sequence[str] | None,
) -> SelectionPlan:
    """Discover dictionaries and compute the activation plan.

    The ordering file is only read when no ``--use-dict`` was given.
    """
    from sdcv.core.discovery import discover
    from sdcv.core.selection import resolve_selection
    from sdcv.infra.ifo import scan_descriptors
    from sdcv.infra.ordering import read_ordering_file

    discovery = discover(directories, scan_descriptors)
    ordering = None if explicit_names else read_ordering_file(config.ordering_file)
    return resolve_selection(
        discovery,
        explicit_names=explicit_names,
        ordering=ordering,
    )


def _load_library(
    library_factory: LibraryFactory,
    options: LibraryOptions,
    directories: Sequence[Path],
    plan: SelectionPlan,
) -> Library:
    """Build the library through the backend factory and load the plan."""
    library = library_factory(options)
    library.load(directories, plan.order, plan.disabled)
    return library


def _handle_lookup(
    mode: SessionMode,
    words: Sequence[str],
    *,
    non_interactive: bool,
    library: Library,
    line_reader: LineReader | None,
) -> int:
    """Run a batch or interactive session, stopping at the first failure.

    Batch mode never prompts, so it always gets a plain stream reader and
    works without questionary even on a terminal.
    """
    from sdcv.core.session import SessionRunner
    from sdcv.infra.line_reader import StreamLineReader, create_line_reader

    if line_reader is not None:
        reader = line_reader
    elif mode is SessionMode.BATCH:
        reader = StreamLineReader()
    else:
        reader = create_line_reader()
    runner = SessionRunner(library, reader)

    if mode is SessionMode.BATCH:
        ok = runner.run_batch(words, non_interactive=non_interactive)
    else:
        ok = runner.run_interactive()
    return exit_codes.SUCCESS if ok else exit_codes.GENERAL_ERROR


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: list[str] | None = None,
    *,
    environ: Mapping[str, str] | None = None,
    library_factory: LibraryFactory | None = None,
    line_reader: LineReader | None = None,
) -> int:
    """Run the sdcv CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    environ:
        Environment mapping; defaults to ``os.environ``.
    library_factory:
        Builds the lookup library.  Defaults to the installed backend
        selected by ``$SDCV_BACKEND``.
    line_reader:
        Input front end; batch mode defaults to a plain stream reader,
        interactive mode to one chosen from the state of stdin.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    ConsistencyError
        When ``--use-dict`` or the ordering file names an undiscovered
        dictionary.  :func:`cli` renders it as an internal error.
    """
    from sdcv.infra.config_dir import ensure_config_dir

    parser = _build_parser()
    try:
        args = parser.parse_intermixed_args(argv)
    except InvalidArgumentsError as exc:
        console.print(f"Invalid command line arguments: {escape(str(exc))}")
        return exit_codes.GENERAL_ERROR

    config = AppConfig.from_environ(
        os.environ if environ is None else environ,
        data_dir_override=args.data_dir,
    )
    directories = build_directory_set(
        config.home,
        data_dir_override=config.data_dir_override,
        env_data_dir=config.env_data_dir,
    )

    mode = select_session_mode(
        list_dicts=args.list_dicts,
        phrases=args.words,
        non_interactive=args.non_interactive,
    )
    if mode is SessionMode.LIST_DICTS:
        return _handle_list(directories)

    _coerce_utf8(utf8_input=args.utf8_input, utf8_output=args.utf8_output)

    plan = _resolve_plan(config, directories, args.use_dict)
    ensure_config_dir(config.config_dir)

    if library_factory is None:
        from sdcv.infra.backend import load_library

        library_factory = functools.partial(load_library, name=config.backend_name)

    library = _load_library(
        library_factory,
        LibraryOptions(
            utf8_input=args.utf8_input,
            utf8_output=args.utf8_output,
            colorize=args.color,
        ),
        directories,
        plan,
    )

    if mode is SessionMode.EMPTY_BATCH:
        # Exits 0 although nothing was looked up.
        console.print("[yellow]There are no words/phrases to translate.[/yellow]")
        return exit_codes.SUCCESS

    return _handle_lookup(
        mode,
        args.words,
        non_interactive=args.non_interactive,
        library=library,
        line_reader=line_reader,
    )


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    configure_logging(AppConfig.from_environ(os.environ).log_level)
    try:
        code = main()
        sys.exit(code)
    except ConsistencyError as exc:
        console.print(f"[bold red]Internal error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            logger.info("%s", exc.hint)
        sys.exit(exit_codes.GENERAL_ERROR)
    except SdcvError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Internal error:[/bold red] "
            f"{type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.GENERAL_ERROR)
