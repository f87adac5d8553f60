"""Generator configuration.

GeneratorConfig is resolved once at the start of a run, from an optional
iconweave.yaml, the process environment and explicit overrides (CLI flags),
in increasing order of precedence. It is immutable afterwards.

Example iconweave.yaml:

    icons_dir: lucide/icons
    output_name: icons.rs
    policy: best-effort
    formatter_command: [leptosfmt, --stdin]
"""

from __future__ import annotations

import os
import shlex
from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from iconweave_core.errors import ConfigurationError

# Environment variable supplying the output directory (set by Cargo for build scripts)
OUT_DIR_ENV_VAR = "OUT_DIR"

DEFAULT_ICONS_DIR = "lucide/icons"
DEFAULT_OUTPUT_NAME = "icons.rs"
DEFAULT_PRELUDE = "use leptos::prelude::*;"
DEFAULT_FORMATTER_COMMAND = ("leptosfmt", "--stdin")
DEFAULT_FEATURE_PREFIX = "CARGO_FEATURE_"
DEFAULT_ALL_FEATURE = "all"


class FailurePolicy(str, Enum):
    """What to do when a single asset fails.

    Attributes:
        BEST_EFFORT: Drop the asset silently and keep going
        STRICT: Abort the whole run with an error naming the asset
    """

    BEST_EFFORT = "best-effort"
    STRICT = "strict"


def _default_workers() -> int:
    return os.cpu_count() or 1


class GeneratorConfig(BaseModel):
    """Configuration for one generation run.

    Attributes:
        icons_dir: Root directory scanned for assets.
        out_dir: Directory the output file is written to.
        output_name: Output file name inside out_dir.
        extension: Recognized asset extension, without the dot.
        policy: Per-asset failure policy.
        feature_gating: Whether CARGO_FEATURE_* flags select assets.
            Defaults to on for strict runs and off for best-effort runs.
        feature_prefix: Namespace prefix of the feature environment variables.
        all_feature: Feature name that enables every asset.
        formatter_command: External formatter reading stdin, writing stdout.
            None disables the second formatting stage. Defaults to
            leptosfmt for best-effort runs and None for strict runs.
        workers: Worker pool size for best-effort runs.
        prelude: Statement written at the top of the output file.

    Example:
        >>> config = GeneratorConfig(out_dir=Path("target/gen"))
        >>> config.output_path
        PosixPath('target/gen/icons.rs')
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    icons_dir: Path = Field(default=Path(DEFAULT_ICONS_DIR), description="Icon root directory")
    out_dir: Path = Field(..., description="Output directory")
    output_name: str = Field(default=DEFAULT_OUTPUT_NAME, min_length=1)
    extension: str = Field(default="svg", min_length=1, pattern=r"^[A-Za-z0-9]+$")
    policy: FailurePolicy = Field(default=FailurePolicy.BEST_EFFORT)
    feature_gating: bool | None = Field(default=None)
    feature_prefix: str = Field(default=DEFAULT_FEATURE_PREFIX, min_length=1)
    all_feature: str = Field(default=DEFAULT_ALL_FEATURE, min_length=1)
    formatter_command: tuple[str, ...] | None = Field(default=None)
    workers: int = Field(default_factory=_default_workers, ge=1, le=256)
    prelude: str = Field(default=DEFAULT_PRELUDE)

    @model_validator(mode="before")
    @classmethod
    def apply_policy_defaults(cls, data: Any) -> Any:
        """Fill feature_gating and formatter_command from the policy when unset."""
        if not isinstance(data, dict):
            return data
        data = dict(data)
        policy = FailurePolicy(data.get("policy", FailurePolicy.BEST_EFFORT))
        strict = policy == FailurePolicy.STRICT
        if data.get("feature_gating") is None:
            data["feature_gating"] = strict
        if "formatter_command" not in data:
            data["formatter_command"] = None if strict else DEFAULT_FORMATTER_COMMAND
        else:
            command = data["formatter_command"]
            if isinstance(command, str):
                command = shlex.split(command)
            # An empty command disables the external stage
            data["formatter_command"] = tuple(command) if command else None
        return data

    @property
    def output_path(self) -> Path:
        """Full path of the generated file."""
        return self.out_dir / self.output_name

    @property
    def strict(self) -> bool:
        """Whether per-asset failures abort the run."""
        return self.policy == FailurePolicy.STRICT

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        **overrides: Any,
    ) -> GeneratorConfig:
        """Build a config, taking out_dir from OUT_DIR unless overridden.

        Args:
            environ: Environment mapping (defaults to os.environ).
            **overrides: Explicit settings; None values are ignored.

        Returns:
            Validated GeneratorConfig.

        Raises:
            ConfigurationError: If no output directory is available or a
                setting is invalid.
        """
        return cls._build({}, environ, overrides, file_path=None)

    @classmethod
    def from_yaml(
        cls,
        path: Path,
        environ: Mapping[str, str] | None = None,
        **overrides: Any,
    ) -> GeneratorConfig:
        """Build a config from an iconweave.yaml file.

        Relative icons_dir and out_dir values are resolved against the
        directory containing the file.

        Args:
            path: Path to the YAML file.
            environ: Environment mapping (defaults to os.environ).
            **overrides: Explicit settings; None values are ignored.

        Returns:
            Validated GeneratorConfig.

        Raises:
            ConfigurationError: If the file cannot be read or parsed, or the
                resulting configuration is invalid.
        """
        try:
            content = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigurationError(
                "Cannot read configuration file",
                file_path=str(path),
                internal_details=str(e),
            ) from e

        try:
            data = yaml.safe_load(content) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(
                "Invalid YAML",
                file_path=str(path),
                internal_details=str(e),
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationError("Expected a mapping at the top level", file_path=str(path))

        base_dir = path.parent
        for key in ("icons_dir", "out_dir"):
            value = data.get(key)
            if value is not None and not Path(value).is_absolute():
                data[key] = base_dir / value

        return cls._build(data, environ, overrides, file_path=str(path))

    @classmethod
    def _build(
        cls,
        data: dict[str, Any],
        environ: Mapping[str, str] | None,
        overrides: dict[str, Any],
        *,
        file_path: str | None,
    ) -> GeneratorConfig:
        env = os.environ if environ is None else environ
        merged = dict(data)
        merged.update({k: v for k, v in overrides.items() if v is not None})

        if merged.get("out_dir") is None:
            out_dir = env.get(OUT_DIR_ENV_VAR)
            if not out_dir:
                raise ConfigurationError(
                    f"Output directory not set. Export {OUT_DIR_ENV_VAR} or pass --out-dir",
                    file_path=file_path,
                    field_path="out_dir",
                )
            merged["out_dir"] = Path(out_dir)

        try:
            return cls(**merged)
        except ValidationError as e:
            first = e.errors()[0]
            loc = ".".join(str(x) for x in first["loc"]) or None
            raise ConfigurationError(
                f"Invalid configuration: {first['msg']}",
                file_path=file_path,
                field_path=loc,
                internal_details=str(e),
            ) from e
