# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""Tests for the genro-urlencoded command line tool."""

from __future__ import annotations

import io
import sys

import orjson
import pytest

from genro_urlencoded import __version__
from genro_urlencoded.__main__ import main


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GENRO_URLENCODED_MAX_FIELDS", raising=False)
    monkeypatch.delenv("GENRO_URLENCODED_SEPARATOR", raising=False)


def set_stdin(monkeypatch: pytest.MonkeyPatch, data: bytes) -> None:
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(data)))


class TestQueryCommand:
    def test_decode(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["query", "band=arctic+monkeys&band=temper_trap"]) == 0
        out = capsys.readouterr().out
        assert orjson.loads(out) == {"band": ["arctic monkeys", "temper_trap"]}

    def test_malformed(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["query", "%FF"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Error: Malformed query string" in captured.err

    def test_undecodable_argument(self, capsys: pytest.CaptureFixture[str]) -> None:
        """A non UTF-8 argv byte (surrogate-escaped) is reported, not raised."""
        assert main(["query", "a=\udcff"]) == 1
        assert "Error: Malformed query string" in capsys.readouterr().err

    def test_max_fields(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["query", "a=1&b=2", "--max-fields", "1"]) == 1
        assert "Max number of fields exceeded" in capsys.readouterr().err

    def test_separator(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["query", "a=1;a=2", "--separator", ";"]) == 0
        assert orjson.loads(capsys.readouterr().out) == {"a": ["1", "2"]}

    def test_invalid_option_value(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["query", "a=1", "--max-fields", "0"]) == 2
        assert "Error: Invalid max_fields" in capsys.readouterr().err


class TestBodyCommand:
    def test_undecodable_argument(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["body", "\udcff"]) == 1
        assert "Error: Malformed query string" in capsys.readouterr().err

    def test_decode_argument(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["body", "name=john"]) == 0
        assert orjson.loads(capsys.readouterr().out) == {"name": ["john"]}

    def test_decode_stdin(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        set_stdin(monkeypatch, b"city=M%C3%BCnchen&city=Roma")
        assert main(["body"]) == 0
        assert orjson.loads(capsys.readouterr().out) == {"city": ["München", "Roma"]}

    def test_empty_stdin(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        set_stdin(monkeypatch, b"")
        assert main(["body"]) == 1
        assert "Expected query, found empty string." in capsys.readouterr().err


class TestParser:
    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_missing_command(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2

    def test_debug_flag(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["query", "a=1", "--debug"]) == 0
        assert orjson.loads(capsys.readouterr().out) == {"a": ["1"]}
