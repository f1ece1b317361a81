"""Tests for CLI Ensure utility class and exit_on_error."""

import pytest

from prbranch.cli.ensure import Ensure, exit_on_error
from prbranch.core.errors import BranchNotFoundError


class TestEnsureNotNone:
    def test_returns_value_when_not_none(self) -> None:
        assert Ensure.not_none("hello", "Value is None") == "hello"

    def test_zero_is_not_none(self) -> None:
        assert Ensure.not_none(0, "Value is None") == 0

    def test_exits_when_none(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            Ensure.not_none(None, "Custom error message")

        assert exc_info.value.code == 1
        captured = capsys.readouterr()
        assert "Error:" in captured.err
        assert "Custom error message" in captured.err


class TestEnsureInvariant:
    def test_passes_when_true(self) -> None:
        Ensure.invariant(True, "never shown")

    def test_exits_when_false(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            Ensure.invariant(False, "Condition failed")

        assert exc_info.value.code == 1
        assert "Condition failed" in capsys.readouterr().err


class TestExitOnError:
    def test_converts_prbranch_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            with exit_on_error():
                raise BranchNotFoundError(7)

        assert exc_info.value.code == 1
        captured = capsys.readouterr()
        assert "Error:" in captured.err
        assert "pull request #7" in captured.err

    def test_other_errors_propagate(self) -> None:
        with pytest.raises(KeyError):
            with exit_on_error():
                raise KeyError("unrelated")
