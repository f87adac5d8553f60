"""Feature gating for generated icons.

Each icon maps to a Cargo feature named after its stem with underscores
replaced by hyphens. Cargo exposes enabled features to build scripts as
CARGO_FEATURE_<NAME> variables (upper-cased, hyphens as underscores):

    arrow-up.svg  -> feature "arrow-up" -> CARGO_FEATURE_ARROW_UP

The "all" feature (CARGO_FEATURE_ALL) enables every icon. The snapshot
is resolved once per run; nothing else in the pipeline reads the
environment for features.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field

from iconweave_core.config import DEFAULT_ALL_FEATURE, DEFAULT_FEATURE_PREFIX


def feature_name(stem: str) -> str:
    """Feature name for an asset stem ("arrow_up" -> "arrow-up")."""
    return stem.replace("_", "-")


def env_var_name(feature: str, prefix: str = DEFAULT_FEATURE_PREFIX) -> str:
    """Environment variable carrying a feature flag ("arrow-up" -> "CARGO_FEATURE_ARROW_UP")."""
    return prefix + feature.upper().replace("-", "_")


class FeatureSet(BaseModel):
    """Immutable snapshot of the enabled features.

    Attributes:
        all_enabled: Whether the all-feature flag is set.
        enabled: Names of the individually enabled features, in the
            environment variable spelling (e.g., "ARROW_UP").
        prefix: Namespace prefix the snapshot was resolved with.

    Example:
        >>> features = FeatureSet.from_environ({"CARGO_FEATURE_ARROW_UP": "1"})
        >>> features.is_enabled("arrow-up")
        True
        >>> features.is_enabled("arrow-down")
        False
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    all_enabled: bool = False
    enabled: frozenset[str] = Field(default_factory=frozenset)
    prefix: str = DEFAULT_FEATURE_PREFIX

    @classmethod
    def from_environ(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        prefix: str = DEFAULT_FEATURE_PREFIX,
        all_feature: str = DEFAULT_ALL_FEATURE,
    ) -> FeatureSet:
        """Resolve the feature snapshot from the environment.

        Any variable starting with the prefix counts as set, whatever its
        value, matching how Cargo sets feature variables.

        Args:
            environ: Environment mapping (defaults to os.environ).
            prefix: Feature variable prefix.
            all_feature: Feature name that enables every asset.

        Returns:
            FeatureSet snapshot.
        """
        env = os.environ if environ is None else environ
        all_var = env_var_name(all_feature, prefix)
        enabled = frozenset(
            key[len(prefix) :] for key in env if key.startswith(prefix) and key != all_var
        )
        return cls(all_enabled=all_var in env, enabled=enabled, prefix=prefix)

    @property
    def any_enabled(self) -> bool:
        """Whether any asset can pass the gate in this run."""
        return self.all_enabled or bool(self.enabled)

    def is_enabled(self, stem: str) -> bool:
        """Whether the asset with this stem is included."""
        if self.all_enabled:
            return True
        var = env_var_name(feature_name(stem), self.prefix)
        return var[len(self.prefix) :] in self.enabled
