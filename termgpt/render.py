"""
Terminal output for termgpt.

Role labels are styled with rich; user and model text is printed as plain
`Text` so brackets in replies are never read as console markup, and with
soft wrapping so long lines reach the terminal (or a pipe) unchanged.
"""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.text import Text


class Renderer:
    """Writes labeled turns to the terminal and reads REPL input."""

    def __init__(self, console: Optional[Console] = None, err_console: Optional[Console] = None) -> None:
        self.console = console or Console(highlight=False)
        self.err_console = err_console or Console(stderr=True, highlight=False)

    def user(self, message: str) -> None:
        self.console.print(Text("You:", style="bold bright_blue"))
        self.console.print(Text(message), soft_wrap=True)

    def assistant(self, reply: str) -> None:
        self.console.print()
        self.console.print(Text("Assistant:", style="bold bright_green"))
        self.console.print(Text(reply, style="bright_green"), soft_wrap=True)

    def notice(self, message: str) -> None:
        self.console.print(Text(message, style="yellow"), soft_wrap=True)

    def error(self, error: BaseException) -> None:
        line = Text("Error:", style="bold red")
        line.append(f" {error}")
        self.err_console.print(line, soft_wrap=True)

    def read_line(self, prompt: str = "You > ") -> str:
        """Prompt for one line of input; raises EOFError at end of input."""
        return self.console.input(Text(prompt, style="bold bright_blue"))
