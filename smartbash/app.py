# smartbash/app.py
"""
Interactive SmartBash application entrypoint.

Responsibilities
----------------
- Resolve configuration (defaults, environment, command-line flags).
- Load the command history and wire it into the prompt's completer.
- Render the banner.
- Run the read-eval loop: ``exit``/``quit``/EOF leave, ``cd`` is handled
  in-process, everything else is recorded and run through the shell.

Python 3.9+ compatible.
"""

from __future__ import annotations

from typing import Optional

import click
from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.shortcuts import set_title
from rich.console import Console

from . import __version__
from .banner import print_banner
from .completers import SmartCompleter
from .config import Config, load_config
from .constants import WINDOW_TITLE
from .history import HistoryStore
from .log_manager import get_logger
from .shell import execute, is_exit_command, prompt_message, restore_terminal

__all__ = ["build_session", "run_loop", "main", "cli"]


def build_session(store: HistoryStore) -> PromptSession:
    """Create the prompt session with the history/path completer."""
    return PromptSession(
        completer=SmartCompleter(store),
        complete_while_typing=True,
        history=InMemoryHistory(),
    )


def run_loop(session: PromptSession, store: HistoryStore, config: Config, console: Console) -> None:
    """Read and execute lines until the user leaves.

    Args:
        session: Anything with a ``prompt(message)`` method.
        store: The session's history store.
        config: Resolved settings (shell executable).
        console: Where user-facing messages are printed.
    """
    while True:
        try:
            line = session.prompt(prompt_message)
        except KeyboardInterrupt:
            continue
        except EOFError:
            break

        if is_exit_command(line):
            break

        message = execute(line, store, shell=config.shell)
        if message is not None:
            console.print(message)


def main(config: Optional[Config] = None, console: Optional[Console] = None) -> None:
    """Run one interactive SmartBash session."""
    config = config or load_config()
    console = console or Console()
    logger = get_logger(level=config.log_level, log_to_file=config.log_file)

    store = HistoryStore(config.history_path)
    store.load()
    logger.info("History: %d distinct commands from %s", len(store), config.history_path)

    if config.show_banner:
        print_banner(console)

    try:
        set_title(WINDOW_TITLE)
        run_loop(build_session(store), store, config, console)
    finally:
        restore_terminal()


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--histfile", type=click.Path(dir_okay=False), help="History log to read and append to.")
@click.option("--shell", "shell", help="Shell used to run commands (default: bash).")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    help="Diagnostic log level.",
)
@click.option("--log-file", type=click.Path(dir_okay=False), help="Also write logs to this file.")
@click.option("--no-banner", is_flag=True, default=False, help="Skip the startup banner.")
@click.version_option(__version__, prog_name="smartbash")
def cli(
    histfile: Optional[str],
    shell: Optional[str],
    log_level: Optional[str],
    log_file: Optional[str],
    no_banner: bool,
) -> None:
    """🧠 SmartBash: a shell prompt with fuzzy history and path completion."""
    try:
        config = load_config(
            history_file=histfile,
            shell=shell,
            log_level=log_level,
            log_file=log_file,
            show_banner=False if no_banner else None,
        )
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc
    main(config)


if __name__ == "__main__":  # pragma: no cover
    cli()
