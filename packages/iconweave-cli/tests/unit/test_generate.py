"""Unit tests for the generate command."""

from __future__ import annotations

import shlex
import sys
from pathlib import Path

from click.testing import CliRunner

from iconweave_cli.main import cli

NO_FEATURES = {"OUT_DIR": None, "CARGO_FEATURE_ALL": None}


class TestGenerateBestEffort:
    """Tests for best-effort generation."""

    def test_writes_components(
        self, isolated_runner: CliRunner, icon_project: Path, echo_formatter: str
    ) -> None:
        """Every icon becomes a component in the output file."""
        result = isolated_runner.invoke(
            cli,
            ["generate", "--icons-dir", "icons", "--out-dir", "out", "--formatter", echo_formatter],
            env=NO_FEATURES,
        )

        assert result.exit_code == 0, result.output
        content = Path("out/icons.rs").read_text()
        assert content.startswith("use leptos::prelude::*;\n\n#[component]\n")
        assert content.index("pub fn ArrowDown(") < content.index("pub fn ArrowUp(")
        assert "Generated 2 icons" in result.output

    def test_out_dir_from_environment(
        self, isolated_runner: CliRunner, icon_project: Path
    ) -> None:
        """OUT_DIR is used and created when --out-dir is not given."""
        result = isolated_runner.invoke(
            cli,
            ["generate", "--icons-dir", "icons", "--no-formatter"],
            env={"OUT_DIR": "target/gen"},
        )

        assert result.exit_code == 0, result.output
        assert Path("target/gen/icons.rs").exists()

    def test_output_name(self, isolated_runner: CliRunner, icon_project: Path) -> None:
        """--output-name changes the file name."""
        result = isolated_runner.invoke(
            cli,
            [
                "generate",
                "--icons-dir",
                "icons",
                "-o",
                "out",
                "--output-name",
                "lucide.rs",
                "--no-formatter",
            ],
            env=NO_FEATURES,
        )

        assert result.exit_code == 0, result.output
        assert Path("out/lucide.rs").exists()

    def test_broken_icon_dropped(self, isolated_runner: CliRunner, icon_project: Path) -> None:
        """Broken icons are reported but do not fail the run."""
        (icon_project / "broken.svg").write_text("<html></html>")

        result = isolated_runner.invoke(
            cli,
            ["generate", "--icons-dir", "icons", "-o", "out", "--no-formatter"],
            env=NO_FEATURES,
        )

        assert result.exit_code == 0, result.output
        assert "1 icons dropped" in result.output
        assert "Broken" not in Path("out/icons.rs").read_text()

    def test_missing_formatter(self, isolated_runner: CliRunner, icon_project: Path) -> None:
        """An uninstalled formatter exits with the system error code."""
        result = isolated_runner.invoke(
            cli,
            [
                "generate",
                "--icons-dir",
                "icons",
                "-o",
                "out",
                "--formatter",
                "iconweave-no-such-formatter --stdin",
            ],
            env=NO_FEATURES,
        )

        assert result.exit_code == 2
        assert "not found" in result.output

    def test_failing_formatter(self, isolated_runner: CliRunner, icon_project: Path) -> None:
        """A formatter rejecting every icon leaves only the import line."""
        failing = shlex.join([sys.executable, "-c", "import sys; sys.exit(1)"])

        result = isolated_runner.invoke(
            cli,
            ["generate", "--icons-dir", "icons", "-o", "out", "--formatter", failing],
            env=NO_FEATURES,
        )

        assert result.exit_code == 0, result.output
        assert Path("out/icons.rs").read_text() == "use leptos::prelude::*;\n\n"
        assert "2 icons dropped" in result.output


class TestGenerateStrict:
    """Tests for strict generation."""

    def test_aborts_on_broken_icon(self, isolated_runner: CliRunner, icon_project: Path) -> None:
        """A broken icon fails the run and is named."""
        (icon_project / "broken.svg").write_text("<html></html>")

        result = isolated_runner.invoke(
            cli,
            ["generate", "--strict", "--icons-dir", "icons", "-o", "out"],
            env={"OUT_DIR": None, "CARGO_FEATURE_ALL": "1"},
        )

        assert result.exit_code == 1
        assert "Icon generation aborted" in result.output
        assert "broken.svg" in result.output

    def test_feature_selects_icon(self, isolated_runner: CliRunner, icon_project: Path) -> None:
        """Only icons whose feature is enabled are generated."""
        result = isolated_runner.invoke(
            cli,
            ["generate", "--strict", "--icons-dir", "icons", "-o", "out", "-v"],
            env={"OUT_DIR": None, "CARGO_FEATURE_ALL": None, "CARGO_FEATURE_ARROW_UP": "1"},
        )

        assert result.exit_code == 0, result.output
        content = Path("out/icons.rs").read_text()
        assert "pub fn ArrowUp(" in content
        assert "ArrowDown" not in content
        assert "feature 'arrow-down' not enabled" in result.output

    def test_no_features_prelude_only(
        self, isolated_runner: CliRunner, icon_project: Path
    ) -> None:
        """Without features the file holds only the import line."""
        result = isolated_runner.invoke(
            cli,
            ["generate", "--strict", "--icons-dir", "icons", "-o", "out"],
            env=NO_FEATURES,
        )

        assert result.exit_code == 0, result.output
        assert Path("out/icons.rs").read_text() == "use leptos::prelude::*;\n\n"


class TestGenerateConfig:
    """Tests for configuration handling."""

    def test_missing_out_dir(self, isolated_runner: CliRunner, icon_project: Path) -> None:
        """Without OUT_DIR or --out-dir the command fails."""
        result = isolated_runner.invoke(
            cli, ["generate", "--icons-dir", "icons"], env=NO_FEATURES
        )

        assert result.exit_code == 1
        assert "Output directory not set" in result.output

    def test_unwritable_output(self, isolated_runner: CliRunner, icon_project: Path) -> None:
        """An output path that cannot be opened is a system error."""
        Path("out/icons.rs").mkdir(parents=True)

        result = isolated_runner.invoke(
            cli,
            ["generate", "--icons-dir", "icons", "-o", "out", "--no-formatter"],
            env=NO_FEATURES,
        )

        assert result.exit_code == 2
        assert "Cannot write" in result.output
        assert "Traceback" not in result.output

    def test_missing_icons_dir(self, isolated_runner: CliRunner) -> None:
        """A missing icon directory is reported."""
        result = isolated_runner.invoke(
            cli,
            ["generate", "--icons-dir", "nowhere", "-o", "out", "--no-formatter"],
            env=NO_FEATURES,
        )

        assert result.exit_code == 1
        assert "Icon directory not found" in result.output

    def test_reads_config_file(
        self, isolated_runner: CliRunner, icon_project: Path, echo_formatter: str
    ) -> None:
        """./iconweave.yaml is picked up automatically."""
        Path("iconweave.yaml").write_text(
            "icons_dir: icons\n"
            "out_dir: build\n"
            "output_name: lucide.rs\n"
            f"formatter_command: {echo_formatter!r}\n"
        )

        result = isolated_runner.invoke(cli, ["generate"], env=NO_FEATURES)

        assert result.exit_code == 0, result.output
        assert "pub fn ArrowUp(" in Path("build/lucide.rs").read_text()

    def test_flags_override_config_file(
        self, isolated_runner: CliRunner, icon_project: Path
    ) -> None:
        """Command line options win over the file."""
        Path("custom.yaml").write_text("icons_dir: icons\nout_dir: build\n")

        result = isolated_runner.invoke(
            cli,
            ["generate", "-c", "custom.yaml", "-o", "elsewhere", "--no-formatter"],
            env=NO_FEATURES,
        )

        assert result.exit_code == 0, result.output
        assert Path("elsewhere/icons.rs").exists()
        assert not Path("build").exists()

    def test_missing_config_file(self, isolated_runner: CliRunner) -> None:
        """An explicit config path must exist."""
        result = isolated_runner.invoke(cli, ["generate", "-c", "missing.yaml"])

        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_formatter_flags_exclusive(self, isolated_runner: CliRunner) -> None:
        """--formatter and --no-formatter cannot be combined."""
        result = isolated_runner.invoke(
            cli, ["generate", "--formatter", "leptosfmt --stdin", "--no-formatter"]
        )

        assert result.exit_code == 1
        assert "mutually exclusive" in result.output

    def test_invalid_workers(self, isolated_runner: CliRunner) -> None:
        """Worker counts outside the allowed range are usage errors."""
        result = isolated_runner.invoke(cli, ["generate", "--workers", "0"])

        assert result.exit_code == 2
