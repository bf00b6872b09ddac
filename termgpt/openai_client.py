"""
OpenAI client wrapper for the termgpt CLI.

This module encapsulates the single interaction termgpt has with OpenAI's
Responses API: one POST of `{model, input, instructions}` per turn, and
extraction of the reply text from the returned document.  It centralizes
error classification so the session only ever sees termgpt's own error
types, never the SDK's.

The response body is read as a plain JSON document rather than the SDK's
typed model, and the reply is located at `output[0].content[0].text`.  A
successful response without text at that path is not an error; the
caller gets `NO_TEXT_PLACEHOLDER` instead.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Sequence, Union

import httpx
import openai
import tiktoken

from .config import DEFAULT_BASE_URL, DEFAULT_MODEL, ChatConfig, load_api_key
from .errors import ServiceError, TransportError
from .prompt import DEFAULT_INSTRUCTIONS

logger = logging.getLogger(__name__)

NO_TEXT_PLACEHOLDER = "<no text in response>"

REPLY_TEXT_PATH: Sequence[Union[str, int]] = ("output", 0, "content", 0, "text")


def lookup_path(document: Any, path: Sequence[Union[str, int]]) -> Optional[Any]:
    """Follow `path` through nested lists and dicts.

    Integer steps index into lists, string steps read dict fields.  Returns
    None as soon as a step is missing or the node has the wrong shape.
    """
    node = document
    for step in path:
        if isinstance(step, int):
            if not isinstance(node, list) or not -len(node) <= step < len(node):
                return None
            node = node[step]
        else:
            if not isinstance(node, dict) or step not in node:
                return None
            node = node[step]
    return node


def extract_output_text(document: Any) -> str:
    """Return the reply text of a Responses API document, or the placeholder."""
    text = lookup_path(document, REPLY_TEXT_PATH)
    if isinstance(text, str):
        return text
    return NO_TEXT_PLACEHOLDER


class OpenAIClient:
    """Wrapper around the OpenAI Responses API for one-request turns."""

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        base_url: str = DEFAULT_BASE_URL,
        instructions: str = DEFAULT_INSTRUCTIONS,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        if not api_key:
            raise ValueError("api_key is required but not provided.")
        self.model = model
        self.instructions = instructions
        # No retries: every turn is attempted exactly once.
        self.client = openai.OpenAI(
            api_key=api_key,
            base_url=base_url,
            max_retries=0,
            http_client=http_client,
        )

    def estimate_tokens(self, text: str) -> int:
        """Estimate the number of tokens used by a text for the configured model."""
        try:
            encoding = tiktoken.encoding_for_model(self.model)
        except KeyError:
            encoding = tiktoken.get_encoding("o200k_base")
        return len(encoding.encode(text))

    def build_request(self, prompt: str) -> Dict[str, str]:
        return {
            "model": self.model,
            "input": prompt,
            "instructions": self.instructions,
        }

    def call_responses_api(self, prompt: str) -> Any:
        """Send `prompt` and return the decoded JSON response document.

        Raises `TransportError` when no response arrives and `ServiceError`
        for a non-success status or a body that is not JSON.
        """
        body = self.build_request(prompt)
        if logger.isEnabledFor(logging.DEBUG):
            try:
                input_tokens = self.estimate_tokens(body["instructions"] + "\n" + prompt)
            except Exception as exc:
                logger.debug("Token estimate unavailable (%s); using heuristic.", exc)
                input_tokens = max(1, (len(body["instructions"]) + len(prompt)) // 4)
            logger.debug("Sending Responses request: model=%s, ~%d input tokens", self.model, input_tokens)

        try:
            raw = self.client.responses.with_raw_response.create(**body)
        except openai.APIStatusError as exc:
            raise ServiceError(exc.status_code, _response_text(exc.response)) from exc
        except openai.APIConnectionError as exc:
            raise TransportError(exc.__cause__ or exc) from exc

        response = raw.http_response
        try:
            document = response.json()
        except ValueError as exc:
            raise ServiceError(response.status_code, _response_text(response)) from exc
        if isinstance(document, dict):
            logger.debug(
                "Response summary: id=%s status=%s",
                document.get("id"),
                document.get("status"),
            )
        return document

    def ask(self, prompt: str) -> str:
        """Perform one turn and return the reply text."""
        text = extract_output_text(self.call_responses_api(prompt))
        if text == NO_TEXT_PLACEHOLDER:
            logger.info("Response contained no text at output[0].content[0].text.")
        return text


def _response_text(response: httpx.Response) -> str:
    try:
        return response.text
    except Exception:
        return ""


def ask(
    prompt: str,
    environ: Optional[Mapping[str, str]] = None,
    config: Optional[ChatConfig] = None,
    http_client: Optional[httpx.Client] = None,
) -> str:
    """Run one turn against the service, looking the credential up first.

    The key is read on every call and never cached, so a missing key fails
    each attempted turn with `MissingCredentialError`.
    """
    config = config or ChatConfig()
    api_key = load_api_key(environ)
    client = OpenAIClient(
        api_key,
        model=config.model,
        base_url=config.base_url,
        http_client=http_client,
    )
    return client.ask(prompt)
