"""Tests for the shared entry-point helpers."""

import logging
import sys

import pytest

from agent.cli import query_from_argv, run

DEFAULT = "北京今天天气怎么样？"


class TestQueryFromArgv:
    def test_first_argument_wins(self, monkeypatch):
        monkeypatch.setattr(sys, "argv", ["main.py", "上海明天要带伞吗？", "ignored"])
        assert query_from_argv(DEFAULT) == "上海明天要带伞吗？"

    def test_empty_argument_falls_back(self, monkeypatch):
        monkeypatch.setattr(sys, "argv", ["main.py", ""])
        assert query_from_argv(DEFAULT) == DEFAULT

    def test_missing_argument_falls_back(self, monkeypatch):
        monkeypatch.setattr(sys, "argv", ["main.py"])
        assert query_from_argv(DEFAULT) == DEFAULT


class TestRun:
    def test_success_returns_normally(self):
        seen = []

        async def work():
            seen.append("ran")

        run(work())

        assert seen == ["ran"]

    def test_failure_logged_and_exits_1(self, caplog):
        async def broken():
            raise RuntimeError("DeepSeek unreachable")

        with caplog.at_level(logging.ERROR):
            with pytest.raises(SystemExit) as exc_info:
                run(broken())

        assert exc_info.value.code == 1
        assert "Agent run failed" in caplog.text
        assert "Traceback" in caplog.text
        assert "RuntimeError: DeepSeek unreachable" in caplog.text
