"""
termgpt package.

A small command-line client for the OpenAI Responses API.  It sends the
user's request, optionally prefixed with the contents of local files and
always accompanied by a fixed behavioral preamble, and prints the reply.
It runs either as a single one-shot turn or as an interactive session
where every line typed is one independent turn.

See `cli.py` for the entry point.
"""

__version__ = "0.1.0"

__all__ = [
    "cli",
]
