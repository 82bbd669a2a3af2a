"""Tests for cli/demo.py."""

import io
import sys
from contextlib import redirect_stdout
from unittest.mock import patch

import pytest

from bstree import TraversalMode
from cli.demo import build_parser, main, run


@pytest.fixture(autouse=True)
def no_logging_setup():
    with patch("cli.demo.configure_logging") as mock_configure:
        yield mock_configure


class TestRun:
    def test_default_report(self):
        out = io.StringIO()
        tree = run([10, 5, 20, 3, 7, 15, 25], [7, 30], out=out)
        assert out.getvalue().splitlines() == [
            "Search for 7: true",
            "Search for 30: false",
            "In-order traversal: [3, 5, 7, 10, 15, 20, 25]",
            "Height of the tree: 3",
        ]
        assert len(tree) == 7

    def test_mode_passed_through(self):
        tree = run([1, 2], [], mode="iterative", out=io.StringIO())
        assert tree.mode is TraversalMode.ITERATIVE


class TestParser:
    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.keys == []
        assert args.search is None
        assert args.mode is None

    def test_rejects_unknown_mode(self):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["--mode", "sideways"])
        assert exc_info.value.code == 2

    def test_rejects_non_integer_key(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["ten"])


class TestMain:
    def test_default_keys(self, capsys, no_logging_setup):
        assert main([]) == 0
        out = capsys.readouterr().out
        assert "Search for 7: true" in out
        assert "Search for 30: false" in out
        assert "In-order traversal: [3, 5, 7, 10, 15, 20, 25]" in out
        assert "Height of the tree: 3" in out
        no_logging_setup.assert_called_once_with("INFO", None)

    def test_custom_keys_and_searches(self, capsys):
        assert main(["4", "2", "6", "2", "--search", "2", "9"]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out == [
            "Search for 2: true",
            "Search for 9: false",
            "In-order traversal: [2, 4, 6]",
            "Height of the tree: 2",
        ]

    def test_recursion_error_exit_code(self, capsys):
        keys = [str(k) for k in range(sys.getrecursionlimit() + 100)]
        assert main(keys + ["--mode", "recursive"]) == 1

    def test_iterative_handles_deep_input(self, capsys):
        n = sys.getrecursionlimit() + 100
        keys = [str(k) for k in range(n)]
        assert main(keys + ["--mode", "iterative", "--search", "0"]) == 0
        assert f"Height of the tree: {n}" in capsys.readouterr().out

    def test_follows_redirected_stdout(self):
        buf = io.StringIO()
        with redirect_stdout(buf):
            assert main([]) == 0
        assert "Height of the tree: 3" in buf.getvalue()

    def test_mode_from_settings(self, monkeypatch, capsys):
        monkeypatch.setenv("BSTREE_TRAVERSAL_MODE", "iterative")
        n = sys.getrecursionlimit() + 100
        assert main([str(k) for k in range(n)]) == 0
        assert f"Height of the tree: {n}" in capsys.readouterr().out

    def test_mode_flag_overrides_settings(self, monkeypatch):
        monkeypatch.setenv("BSTREE_TRAVERSAL_MODE", "iterative")
        with patch("cli.demo.run") as mock_run:
            assert main(["1", "--mode", "recursive"]) == 0
        assert mock_run.call_args.kwargs["mode"] == "recursive"
