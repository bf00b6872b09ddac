"""
Entry point for the termgpt command-line interface (exposed as `gpt`).

Usage examples::

    # One-shot prompt
    gpt "Write me a haiku"

    # One-shot prompt with files as context
    gpt -f src/main.py "Explain this code"

    # Interactive session; the files are sent with every message
    gpt --repl -f notes.md

Requires OPENAI_API_KEY in the environment.  During development the CLI
can also be run with `python -m termgpt`.
"""

from __future__ import annotations

import argparse
import functools
import logging
from pathlib import Path
from typing import List, Optional

from . import __version__
from .config import ChatConfig
from .context_builder import build_file_context
from .errors import TermGPTError
from .openai_client import ask
from .render import Renderer
from .session import ChatSession


def build_parser(config: ChatConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gpt", description="ChatGPT in your terminal.")
    parser.add_argument(
        "prompt",
        nargs="?",
        default=None,
        help="One-shot prompt (ignored in --repl mode). Defaults to 'Explain the provided files.'",
    )
    parser.add_argument(
        "--repl",
        action="store_true",
        help="Run in interactive REPL mode.",
    )
    parser.add_argument(
        "-f",
        "--file",
        dest="files",
        type=Path,
        action="append",
        default=[],
        help="File to include in the prompt. May be repeated.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=config.log_level,
        help="Logging verbosity (default from env TERMGPT_LOGLEVEL or WARNING).",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def setup_logging(level_name: str) -> None:
    level = getattr(logging, level_name.upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format="[%(levelname)s] %(asctime)s %(name)s:%(lineno)d - %(message)s",
    )
    logging.getLogger().setLevel(level)
    logging.getLogger("httpx").setLevel(level)
    logging.getLogger("openai").setLevel(level)
    # Wire-level detail only when debugging
    if level <= logging.DEBUG:
        logging.getLogger("httpcore").setLevel(level)


def main(argv: Optional[List[str]] = None, renderer: Optional[Renderer] = None) -> int:
    """Primary CLI entry point.

    Parses arguments, builds the file context and runs the session.
    Returns an exit code.
    """
    config = ChatConfig.load()
    args = build_parser(config).parse_args(argv)
    setup_logging(args.log_level)
    logger = logging.getLogger("termgpt.cli")

    renderer = renderer or Renderer()
    logger.debug(
        "Execution context: repl=%s | files=%s | model=%s",
        args.repl,
        [str(p) for p in args.files],
        config.model,
    )

    try:
        context = build_file_context(args.files)
    except TermGPTError as exc:
        logger.debug("Failed to build file context: %s", exc)
        renderer.error(exc)
        return 1

    session = ChatSession(context, functools.partial(ask, config=config), renderer)
    if args.repl:
        try:
            session.run_interactive()
        except (OSError, UnicodeError) as exc:
            logger.debug("Reading input failed: %s", exc)
            renderer.error(exc)
            return 1
        return 0

    try:
        session.run_once(args.prompt)
    except TermGPTError as exc:
        logger.debug("Request failed: %s", exc)
        renderer.error(exc)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
