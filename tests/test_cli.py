from __future__ import annotations

from pathlib import Path

import pytest

import termgpt.cli as cli
from termgpt.config import ChatConfig, load_api_key
from termgpt.errors import MissingCredentialError


def test_load_api_key():
    assert load_api_key({"OPENAI_API_KEY": "sk-1"}) == "sk-1"
    with pytest.raises(MissingCredentialError):
        load_api_key({})
    with pytest.raises(MissingCredentialError):
        load_api_key({"OPENAI_API_KEY": ""})


def test_config_log_level_from_env():
    assert ChatConfig.load({}).log_level == "WARNING"
    assert ChatConfig.load({"TERMGPT_LOGLEVEL": "debug"}).log_level == "DEBUG"


def test_parser_collects_repeated_files():
    args = cli.build_parser(ChatConfig()).parse_args(["-f", "a.py", "--file", "b.py", "explain"])
    assert args.files == [Path("a.py"), Path("b.py")]
    assert args.prompt == "explain"
    assert args.repl is False


def test_one_shot_success(monkeypatch, make_renderer):
    calls = []

    def _fake_ask(prompt, config=None, **kwargs):
        calls.append(prompt)
        return "a haiku"

    monkeypatch.setattr(cli, "ask", _fake_ask)
    renderer = make_renderer()

    assert cli.main(["Write me a haiku"], renderer=renderer) == 0
    assert calls == ["Write me a haiku"]
    assert "a haiku" in renderer.out.getvalue()


def test_one_shot_missing_file_exits_nonzero(tmp_path, monkeypatch, make_renderer):
    monkeypatch.setattr(cli, "ask", lambda *a, **k: pytest.fail("must not be called"))
    renderer = make_renderer()

    assert cli.main(["-f", str(tmp_path / "nope.txt"), "hi"], renderer=renderer) == 1
    assert "nope.txt" in renderer.err.getvalue()


def test_one_shot_missing_credential_exits_nonzero(monkeypatch, make_renderer):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    renderer = make_renderer()

    assert cli.main(["hi"], renderer=renderer) == 1
    assert "OPENAI_API_KEY" in renderer.err.getvalue()


def test_repl_end_of_input_exits_zero(monkeypatch, make_renderer):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    renderer = make_renderer(["hello"])

    assert cli.main(["--repl"], renderer=renderer) == 0
    assert "OPENAI_API_KEY" in renderer.err.getvalue()
    assert "Entering REPL mode" in renderer.out.getvalue()


def test_repl_missing_file_is_fatal(tmp_path, make_renderer):
    renderer = make_renderer(["hello"])

    assert cli.main(["--repl", "-f", str(tmp_path / "gone.md")], renderer=renderer) == 1
    assert renderer.reads == 0


def test_repl_undecodable_input_exits_nonzero(monkeypatch, make_renderer):
    monkeypatch.setattr(cli, "ask", lambda *a, **k: pytest.fail("must not be called"))
    renderer = make_renderer()

    def _bad_stdin(prompt="You > "):
        raise UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")

    renderer.read_line = _bad_stdin

    assert cli.main(["--repl"], renderer=renderer) == 1
    assert "Error:" in renderer.err.getvalue()
    assert "invalid start byte" in renderer.err.getvalue()
