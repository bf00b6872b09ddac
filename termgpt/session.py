"""
Session control for termgpt.

A session is built around a file context that is read once and then
reused unchanged for every turn.  One-shot sessions perform a single turn
and let failures propagate; interactive sessions loop until `:q`/`:quit`
or end of input, reporting a failed turn and moving on to the next one.
"""

from __future__ import annotations

import enum
import logging
from typing import Callable, Optional

from .errors import TermGPTError
from .prompt import assemble_prompt, resolve_message
from .render import Renderer

logger = logging.getLogger(__name__)

EXIT_COMMANDS = frozenset({":q", ":quit"})
REPL_PROMPT = "You > "

Invoker = Callable[[str], str]
LineReader = Callable[[str], str]


class SessionState(enum.Enum):
    RUNNING = "running"
    TERMINATED = "terminated"


class ChatSession:
    """Drives one-shot or interactive turns over a fixed file context."""

    def __init__(
        self,
        context: str,
        invoker: Invoker,
        renderer: Optional[Renderer] = None,
        read_line: Optional[LineReader] = None,
    ) -> None:
        self.context = context
        self.invoker = invoker
        self.renderer = renderer or Renderer()
        self.read_line = read_line or self.renderer.read_line
        self.state = SessionState.RUNNING

    def _turn(self, message: str) -> str:
        prompt = assemble_prompt(self.context, message)
        logger.debug("Turn prompt assembled (%d characters)", len(prompt))
        return self.invoker(prompt)

    def run_once(self, message: Optional[str] = None) -> str:
        """Perform a single turn and return the reply.

        Errors from the invoker are not caught here.
        """
        message = resolve_message(message)
        self.renderer.user(message)
        try:
            reply = self._turn(message)
        finally:
            self.state = SessionState.TERMINATED
        self.renderer.assistant(reply)
        return reply

    def run_interactive(self) -> int:
        """Run the read-evaluate-print loop and return the number of turns attempted."""
        self.renderer.notice("Entering REPL mode. Type :q or :quit to exit.")
        if self.context:
            self.renderer.notice("File context loaded and will be included with each message.")

        turns = 0
        while self.state is SessionState.RUNNING:
            try:
                line = self.read_line(REPL_PROMPT)
            except EOFError:
                logger.debug("End of input; leaving REPL.")
                self.state = SessionState.TERMINATED
                break

            message = line.strip()
            if not message:
                continue
            if message in EXIT_COMMANDS:
                self.state = SessionState.TERMINATED
                break

            turns += 1
            try:
                reply = self._turn(message)
            except TermGPTError as exc:
                logger.info("Turn %d failed: %s", turns, exc)
                self.renderer.error(exc)
                continue
            self.renderer.assistant(reply)
        return turns
