"""Unit tests for iconweave_cli.output module."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest

from iconweave_cli import output
from iconweave_core.models import AssetOutcome, AssetStatus, GenerationReport


@pytest.fixture
def plain_console() -> Generator[None, None, None]:
    """Swap in a wide, colorless console writing to stdout."""
    original = output.console
    output.console = output.create_console(no_color=True)
    output.console.width = 200
    yield
    output.console = original


def _report() -> GenerationReport:
    return GenerationReport(
        output_path=Path("out/icons.rs"),
        outcomes=[
            AssetOutcome(path=Path("icons/a.svg"), identifier="A", status=AssetStatus.GENERATED),
            AssetOutcome(
                path=Path("icons/b.svg"),
                identifier="B",
                status=AssetStatus.DROPPED,
                reason="No <svg> element found",
            ),
            AssetOutcome(
                path=Path("icons/c.svg"),
                identifier="C",
                status=AssetStatus.SKIPPED,
                reason="feature 'c' not enabled",
            ),
        ],
        duration_ms=12,
    )


class TestCreateConsole:
    """Tests for create_console."""

    def test_no_color(self) -> None:
        """no_color=True disables colors."""
        assert output.create_console(no_color=True).no_color is True


class TestMessages:
    """Tests for the message helpers."""

    @pytest.mark.usefixtures("plain_console")
    def test_success(self, capsys: pytest.CaptureFixture[str]) -> None:
        """success() prefixes a check mark."""
        output.success("Generated 3 icons")

        captured = capsys.readouterr()
        assert "✓" in captured.out
        assert "Generated 3 icons" in captured.out

    @pytest.mark.usefixtures("plain_console")
    def test_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        """error() prefixes a cross."""
        output.error("leptosfmt not found")

        captured = capsys.readouterr()
        assert "✗" in captured.out
        assert "leptosfmt not found" in captured.out

    @pytest.mark.usefixtures("plain_console")
    def test_warning(self, capsys: pytest.CaptureFixture[str]) -> None:
        """warning() prefixes a triangle."""
        output.warning("2 icons dropped")

        assert "⚠" in capsys.readouterr().out


class TestPrintReport:
    """Tests for print_report."""

    @pytest.mark.usefixtures("plain_console")
    def test_summary_and_dropped(self, capsys: pytest.CaptureFixture[str]) -> None:
        """The summary counts icons and lists dropped ones."""
        output.print_report(_report())

        out = capsys.readouterr().out
        assert "Generated 1 icons" in out
        assert "1 icons dropped" in out
        assert "1 icons not enabled by features" in out
        assert "No <svg> element found" in out
        assert "feature 'c' not enabled" not in out

    @pytest.mark.usefixtures("plain_console")
    def test_verbose_lists_skipped(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Verbose mode also lists skipped icons."""
        output.print_report(_report(), verbose=True)

        assert "feature 'c' not enabled" in capsys.readouterr().out

    @pytest.mark.usefixtures("plain_console")
    def test_clean_run_has_no_table(self, capsys: pytest.CaptureFixture[str]) -> None:
        """A run with nothing dropped prints only the summary."""
        report = GenerationReport(output_path=Path("out/icons.rs"), outcomes=[])

        output.print_report(report)

        out = capsys.readouterr().out
        assert "Generated 0 icons" in out
        assert "Reason" not in out


class TestSetNoColor:
    """Tests for set_no_color."""

    def test_replaces_console(self) -> None:
        """The module console is rebuilt without colors."""
        original = output.console
        try:
            output.set_no_color(True)
            assert output.console.no_color is True
        finally:
            output.console = original
