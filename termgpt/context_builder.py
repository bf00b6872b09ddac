"""
Context builder for the termgpt CLI.

Files passed with `-f/--file` are read once, in the order given, and
rendered into a single text blob that is prepended to every user request
of the session.  Each file is labeled by its path and its content is
fenced as a literal text block.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Sequence, Union

from .errors import FileReadError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass(frozen=True)
class FileEntry:
    """Container for an included file."""
    path: Path
    content: str

    def render(self) -> str:
        return f"File: {self.path}\n```text\n{self.content}\n```\n\n"


def read_files(paths: Iterable[PathLike]) -> List[FileEntry]:
    """Read every file in `paths` fully as UTF-8 text.

    The first file that cannot be opened or decoded raises `FileReadError`
    and nothing read so far is returned.
    """
    entries: List[FileEntry] = []
    for raw in paths:
        path = Path(raw)
        try:
            with path.open("r", encoding="utf-8") as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise FileReadError(path, exc) from exc
        logger.debug("Read %s (%d characters)", path, len(content))
        entries.append(FileEntry(path, content))
    return entries


def build_file_context(paths: Sequence[PathLike]) -> str:
    """Return the context string for `paths`, or "" when there are none."""
    if not paths:
        return ""
    return "".join(entry.render() for entry in read_files(paths))
