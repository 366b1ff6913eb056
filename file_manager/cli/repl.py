"""
Interactive read-eval-print loop for the file manager.
"""

from __future__ import annotations

import argparse
import locale
import logging
import sys
from typing import Callable, Optional

from file_manager.cli.dispatcher import CommandDispatcher
from file_manager.cli.output import OutputChannel
from file_manager.container import container
from file_manager.entities.session import Session
from file_manager.use_cases.streams.runner import StreamRunner

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="file-manager",
        description="Interactive command-line file manager.",
    )
    parser.add_argument(
        "--username",
        default=None,
        help="Name used in the greeting (default: FM_USERNAME or 'User')",
    )
    return parser


def _location(session: Session) -> str:
    return f"You are currently in {session.current_directory}"


def run_repl(
    session: Session,
    dispatcher: CommandDispatcher,
    output: OutputChannel,
    runner: StreamRunner,
    read_line: Callable[[], str] = input,
) -> int:
    """
    Read commands until `.exit`, end of input or Ctrl+C.

    Args:
        read_line: Returns the next input line; raises EOFError when input ends

    Returns:
        Process exit status
    """
    output.line(f"Welcome to the File Manager, {session.display_name}!")
    output.line(_location(session))

    try:
        while True:
            output.prompt("> ")
            try:
                raw = read_line()
            except EOFError:
                output.line("")
                break
            if not dispatcher.dispatch(raw):
                break
            output.line(_location(session))
    except KeyboardInterrupt:
        output.line("")
    finally:
        # let in-flight copies finish writing before the process goes away
        runner.shutdown(wait=True)

    output.line(f"Thank you for using File Manager, {session.display_name}, goodbye!")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    args, unknown = build_parser().parse_known_args(argv)

    cfg = container.get_settings()
    logging.basicConfig(level=cfg.log_level, format=LOG_FORMAT, stream=sys.stderr)
    if unknown:
        logger.warning(f"Ignoring unknown arguments: {' '.join(unknown)}")

    # ls collates names with the user's locale
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as e:
        logger.warning(f"Could not apply the environment locale: {e}")

    session = container.create_session(args.username)
    return run_repl(
        session,
        container.get_dispatcher(session),
        container.get_output(),
        container.get_stream_runner(),
    )


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
