from __future__ import annotations

import io
from typing import Any, Dict, List, Sequence, Union

import httpx
import pytest
from rich.console import Console

from termgpt.render import Renderer


def reply_document(text: str) -> Dict[str, Any]:
    return {
        "id": "resp_123",
        "status": "completed",
        "output": [
            {
                "type": "message",
                "role": "assistant",
                "content": [{"type": "output_text", "text": text}],
            }
        ],
    }


class FakeResponsesService:
    """Stands in for the Responses endpoint behind an httpx.MockTransport."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.outcomes: List[Union[httpx.Response, Exception]] = []

    def queue(self, outcome: Union[httpx.Response, Exception]) -> None:
        self.outcomes.append(outcome)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        outcome = self.outcomes.pop(0) if self.outcomes else httpx.Response(200, json=reply_document("ok"))
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def http_client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self._handle))


@pytest.fixture
def service() -> FakeResponsesService:
    return FakeResponsesService()


class RecordingRenderer(Renderer):
    """Renderer writing to in-memory consoles, fed from a list of input lines."""

    def __init__(self, lines: Sequence[str] = ()) -> None:
        self.out = io.StringIO()
        self.err = io.StringIO()
        super().__init__(
            console=Console(file=self.out, width=1000, color_system=None),
            err_console=Console(file=self.err, width=1000, color_system=None),
        )
        self.lines = list(lines)
        self.reads = 0

    def read_line(self, prompt: str = "You > ") -> str:
        self.reads += 1
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


@pytest.fixture
def make_renderer():
    return RecordingRenderer


@pytest.fixture
def make_reply():
    return reply_document
