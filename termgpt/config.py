"""
Configuration for the termgpt CLI.

This module centralizes the fixed values the client talks to the service
with and the lookup of the API credential from the environment.  Nothing
here is user-configurable beyond the environment: the model and endpoint
are constants, and the credential is read fresh every time a request is
about to be made so that each call path fails (or succeeds) on its own.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import MissingCredentialError

API_KEY_ENV = "OPENAI_API_KEY"
LOGLEVEL_ENV = "TERMGPT_LOGLEVEL"

# Change this to whatever model you actually have access to.
DEFAULT_MODEL = "gpt-4.1-mini"
DEFAULT_BASE_URL = "https://api.openai.com/v1"


def load_api_key(environ: Optional[Mapping[str, str]] = None) -> str:
    """Return the API key from `environ` (defaults to `os.environ`).

    Raises `MissingCredentialError` if the variable is unset or empty.
    """
    env = os.environ if environ is None else environ
    api_key = env.get(API_KEY_ENV)
    if not api_key:
        raise MissingCredentialError(API_KEY_ENV)
    return api_key


@dataclass(frozen=True)
class ChatConfig:
    """Top-level configuration for the termgpt CLI.

    Attributes
    ----------
    model: str
        Model identifier sent with every request.

    base_url: str
        Root of the OpenAI REST API; requests go to `{base_url}/responses`.

    log_level: str
        Default logging level name, taken from `TERMGPT_LOGLEVEL`.
    """

    model: str = DEFAULT_MODEL
    base_url: str = DEFAULT_BASE_URL
    log_level: str = "WARNING"

    @staticmethod
    def load(environ: Optional[Mapping[str, str]] = None) -> "ChatConfig":
        """Build the configuration from the environment.

        The credential is not part of this object; see
        `load_api_key`.
        """
        env = os.environ if environ is None else environ
        return ChatConfig(log_level=(env.get(LOGLEVEL_ENV) or "WARNING").upper())
