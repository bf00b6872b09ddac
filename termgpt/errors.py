"""
Exception types raised by the termgpt core.

Every failure a turn can produce derives from `TermGPTError`, so callers
that need per-turn isolation can catch a single type while one-shot runs
let it surface to the process boundary.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union


class TermGPTError(Exception):
    """Base class for termgpt errors."""


class MissingCredentialError(TermGPTError):
    """Raised when the API credential is absent from the environment."""

    def __init__(self, variable: str) -> None:
        self.variable = variable
        super().__init__(f"{variable} env var not set. Export it first.")


class FileReadError(TermGPTError):
    """Raised when a context file cannot be opened or decoded as text."""

    def __init__(self, path: Union[str, Path], cause: BaseException) -> None:
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Cannot read {self.path}: {cause}")


class TransportError(TermGPTError):
    """Network, TLS or timeout failure before a response was received."""

    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        super().__init__(f"Request failed: {cause}")


class ServiceError(TermGPTError):
    """The service answered, but not with a usable success response."""

    def __init__(self, status: int, body: str = "") -> None:
        self.status = status
        self.body = body
        super().__init__(f"API error: {status} - {body}")
