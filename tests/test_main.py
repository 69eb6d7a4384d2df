#!/usr/bin/env python3

"""Tests for the command line entry point."""

import json
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from nativebindgen.domain.models.abi import OutputDocument, StructInfo
from nativebindgen.exceptions import LibclangUnavailableError, ParseFailure
from nativebindgen.main import main, parse_args

ENV_KEYS = (
    "HEADER_PATH",
    "OUTPUT_FILE",
    "INCLUDE_PATHS",
    "CLANG_ARGS",
    "VERBOSE",
    "ECHO_STDOUT",
    "LIBCLANG_PATH",
)


@pytest.fixture(autouse=True)
def workspace(monkeypatch, tmp_path, reset_logging):
    """Run in an empty directory with no inherited configuration."""
    for key in ENV_KEYS:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def header(workspace):
    path = workspace / "api.h"
    path.write_text("struct Point { int x; int y; };\n", encoding="utf-8")
    return path


@pytest.fixture
def extractor_class():
    """Patch AbiExtractor with a context manager yielding a canned document."""
    document = OutputDocument()
    document.add_struct(StructInfo("Point", 8, [], "api.h"))
    extractor = Mock()
    extractor.diagnostics = ["api.h:1:1: warning: something"]
    extractor.extract.return_value = document

    with patch("nativebindgen.main.AbiExtractor") as mock_class:
        mock_class.return_value.__enter__.return_value = extractor
        yield mock_class


@pytest.mark.unit
class TestParseArgs:
    """Argument parsing."""

    def test_defaults(self):
        args = parse_args([])

        assert args.header is None
        assert args.include_paths == []
        assert args.clang_args == []
        assert args.output is None
        assert args.echo_stdout is None
        assert args.verbose is None

    def test_all_options(self):
        args = parse_args(
            ["api.h", "-I", "inc", "--include", "vendor", "--clang-arg=-xc++", "-o", "out.json", "--no-stdout", "-v"]
        )

        assert args.header == Path("api.h")
        assert args.include_paths == [Path("inc"), Path("vendor")]
        assert args.clang_args == ["-xc++"]
        assert args.output == Path("out.json")
        assert args.echo_stdout is False
        assert args.verbose is True


@pytest.mark.unit
class TestMain:
    """Exit codes and outputs of main()."""

    def test_success_writes_and_echoes(self, header, extractor_class, workspace, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([str(header), "-I", str(workspace)])

        assert exc_info.value.code == 0
        written = json.loads((workspace / "clang-c.json").read_text(encoding="utf-8"))
        assert written["structs"]["Point"]["size"] == 8

        captured = capsys.readouterr()
        assert json.loads(captured.out) == written
        assert "api.h:1:1: warning: something" in captured.err

        args, _ = extractor_class.call_args
        assert args[0] == header
        assert args[1] == [f"-I{workspace}"]

    def test_no_stdout(self, header, extractor_class, workspace, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([str(header), "--no-stdout", "-o", str(workspace / "out" / "abi.json")])

        assert exc_info.value.code == 0
        assert (workspace / "out" / "abi.json").is_file()
        assert capsys.readouterr().out == ""

    def test_missing_header(self, workspace, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([str(workspace / "missing.h")])

        assert exc_info.value.code == 1
        assert "Configuration error" in capsys.readouterr().err
        assert not (workspace / "clang-c.json").exists()

    def test_parse_failure(self, header, extractor_class, workspace, capsys):
        extractor_class.return_value.__enter__.side_effect = ParseFailure(
            str(header), "error diagnostics reported", ["api.h:3:1: error: expected ';'"]
        )

        with pytest.raises(SystemExit) as exc_info:
            main([str(header)])

        assert exc_info.value.code == 1
        captured = capsys.readouterr()
        assert "api.h:3:1: error: expected ';'" in captured.err
        assert captured.out == ""
        assert not (workspace / "clang-c.json").exists()

    def test_libclang_unavailable(self, header, extractor_class, workspace):
        extractor_class.return_value.__enter__.side_effect = LibclangUnavailableError("not found")

        with pytest.raises(SystemExit) as exc_info:
            main([str(header)])

        assert exc_info.value.code == 1
        assert not (workspace / "clang-c.json").exists()

    def test_header_from_env(self, header, extractor_class, monkeypatch):
        monkeypatch.setenv("HEADER_PATH", str(header))

        with pytest.raises(SystemExit) as exc_info:
            main(["--no-stdout"])

        assert exc_info.value.code == 0
        assert extractor_class.call_args.args[0] == header
