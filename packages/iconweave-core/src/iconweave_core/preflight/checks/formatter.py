"""External formatter preflight check.

Verifies the formatter used by the second formatting stage can be
executed, by running it with --version before any icon is processed.
"""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from pathlib import Path

from iconweave_core.formatting.process import ProcessFormatter
from iconweave_core.preflight.checks.base import BaseCheck
from iconweave_core.preflight.models import CheckResult, CheckStatus


class FormatterCheck(BaseCheck):
    """Preflight check for the external formatter.

    Only whether the process can be spawned matters; a non-zero exit
    from the version probe is reported as a warning.

    Attributes:
        formatter: Formatter whose executable is probed.

    Example:
        >>> check = FormatterCheck(["leptosfmt", "--stdin"])
        >>> check.run().passed
        True
    """

    def __init__(self, command: Sequence[str], timeout_seconds: int = 30) -> None:
        """Initialize the formatter check.

        Args:
            command: Formatter command line as used for formatting.
            timeout_seconds: Timeout for the version probe.
        """
        self.formatter = ProcessFormatter(command)
        program = Path(self.formatter.program).name
        super().__init__(name=f"formatter_{program}", timeout_seconds=timeout_seconds)

    def _execute(self) -> CheckResult:
        """Run the formatter's version probe.

        Returns:
            CheckResult indicating whether the formatter is available.
        """
        probe = self.formatter.version_command()
        command = " ".join(probe)

        try:
            completed = subprocess.run(
                probe,
                capture_output=True,
                text=True,
                timeout=self.timeout_seconds,
                check=False,
            )
        except subprocess.TimeoutExpired as e:
            raise TimeoutError(str(e)) from e
        except OSError as e:
            return self._result(
                CheckStatus.FAILED,
                self.formatter.not_found_message(),
                command=command,
                error=str(e),
            )

        version = (completed.stdout or completed.stderr).strip()
        if completed.returncode != 0:
            return self._result(
                CheckStatus.WARNING,
                f"{self.formatter.program} --version exited with status {completed.returncode}",
                command=command,
                output=version,
            )

        return self._result(
            CheckStatus.PASSED,
            version or f"{self.formatter.program} available",
            command=command,
        )
