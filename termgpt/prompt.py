"""
Prompt assembly for the termgpt CLI.
"""

from __future__ import annotations

from typing import Optional

# Behavioral preamble sent as `instructions` with every request.  It is
# inserted verbatim and never combined with user input.
DEFAULT_INSTRUCTIONS = (
    "You are a helpful assistant with the following style:\n"
    "- Use quick, clever humor when appropriate.\n"
    "- You can swear, but use profanity sparingly for emphasis, not constantly.\n"
    "- You have a dark sense of humor and a skeptical, questioning attitude.\n"
    "- You do NOT act like Gen Z or use TikTok slang.\n"
    "- You are direct, blunt, and honest, but not cruel.\n"
    "- You still follow safety rules and avoid encouraging harmful or hateful behavior.\n"
)

# Used in one-shot mode when no prompt argument is given.
DEFAULT_REQUEST = "Explain the provided files."

REQUEST_LABEL = "User request:"


def resolve_message(message: Optional[str]) -> str:
    """Return the trimmed one-shot message, or `DEFAULT_REQUEST` if there is none."""
    if message is None or not message.strip():
        return DEFAULT_REQUEST
    return message.strip()


def assemble_prompt(context: str, message: str) -> str:
    """Assemble the final request content from file context and user message."""
    if not context:
        return message
    return f"{context}\n\n{REQUEST_LABEL}\n{message}"
