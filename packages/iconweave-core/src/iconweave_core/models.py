"""Data models for the icon generation pipeline.

All models are immutable: an asset is discovered, turned into a
definition, formatted and written out without any stage mutating
what an earlier stage produced.
"""

from __future__ import annotations

from datetime import UTC, datetime
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Fixed <svg> attributes shared by every generated component, in render order
SVG_ATTRIBUTES: tuple[tuple[str, str], ...] = (
    ("xmlns", "http://www.w3.org/2000/svg"),
    ("width", "24"),
    ("height", "24"),
    ("viewBox", "0 0 24 24"),
    ("fill", "none"),
    ("stroke", "currentColor"),
    ("stroke-width", "2"),
    ("stroke-linecap", "round"),
    ("stroke-linejoin", "round"),
)

# Name of the component prop bound to the dynamic class attribute
CLASS_PARAM = "class"

# Strict and reserved Rust keywords; none of them can name a function
RUST_KEYWORDS = frozenset(
    {
        "Self", "abstract", "as", "async", "await", "become", "box", "break", "const",
        "continue", "crate", "do", "dyn", "else", "enum", "extern", "false", "final", "fn",
        "for", "gen", "if", "impl", "in", "let", "loop", "macro", "match", "mod", "move",
        "mut", "override", "priv", "pub", "ref", "return", "self", "static", "struct",
        "super", "trait", "true", "try", "type", "typeof", "unsafe", "unsized", "use",
        "virtual", "where", "while", "yield",
    }
)  # fmt: skip


class IconAsset(BaseModel):
    """One SVG file discovered under the icon root.

    Attributes:
        path: Filesystem path of the asset.
        stem: File name without extension (e.g., "arrow-up-right").
        identifier: Component name derived from the stem (e.g., "ArrowUpRight").

    Example:
        >>> asset = IconAsset(
        ...     path=Path("icons/arrow-up.svg"),
        ...     stem="arrow-up",
        ...     identifier="ArrowUp",
        ... )
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    path: Path = Field(..., description="Path to the asset file")
    stem: str = Field(..., min_length=1, description="File name without extension")
    identifier: str = Field(..., description="Generated component name")


class MarkupNode(BaseModel):
    """One element of the markup embedded in a component.

    Attributes:
        tag: Element name (e.g., "path", "circle").
        attributes: Attribute name/value pairs in source order.
        text: Text content before the first child, if any.
        children: Nested elements.
        tail: Text following this element inside its parent, if any.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    tag: str = Field(..., min_length=1)
    attributes: tuple[tuple[str, str], ...] = ()
    text: str | None = None
    children: tuple[MarkupNode, ...] = ()
    tail: str | None = None


class ExtractedMarkup(BaseModel):
    """Inner content of one asset's <svg> element.

    Attributes:
        raw: Text between the opening and closing <svg> tags, verbatim.
        nodes: The same content parsed into element nodes.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    raw: str
    nodes: tuple[MarkupNode, ...] = ()


class ComponentDefinition(BaseModel):
    """A synthesized Leptos component for one icon.

    The attribute set is identical for every definition; only the
    identifier and the embedded children vary.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    identifier: str = Field(..., min_length=1)
    children: tuple[MarkupNode, ...] = ()
    attributes: tuple[tuple[str, str], ...] = SVG_ATTRIBUTES
    class_param: str = CLASS_PARAM

    @field_validator("identifier")
    @classmethod
    def identifier_must_be_valid(cls, v: str) -> str:
        """Reject identifiers that cannot name a Rust function."""
        if not v.isidentifier() or not v[0].isalpha() or v in RUST_KEYWORDS:
            msg = f"'{v}' is not a valid component name"
            raise ValueError(msg)
        return v


class AssetStatus(str, Enum):
    """Terminal state of one asset in a generation run.

    Attributes:
        GENERATED: Definition formatted and written to the output
        DROPPED: Excluded after a per-asset failure (best-effort runs)
        SKIPPED: Excluded by the feature gate
    """

    GENERATED = "generated"
    DROPPED = "dropped"
    SKIPPED = "skipped"


class AssetOutcome(BaseModel):
    """What happened to one asset.

    Attributes:
        path: Asset path.
        identifier: Component name, when one was derived.
        status: Terminal state.
        reason: Why the asset was dropped or skipped.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    path: Path
    identifier: str | None = None
    status: AssetStatus
    reason: str = ""


class GenerationReport(BaseModel):
    """Summary of one generation run.

    Attributes:
        output_path: File the components were written to.
        outcomes: Per-asset outcomes in scan order.
        started_at: When the run started.
        duration_ms: Total duration in milliseconds.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    output_path: Path
    outcomes: list[AssetOutcome] = Field(default_factory=list)
    started_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    duration_ms: int = Field(default=0, ge=0)

    @property
    def generated_count(self) -> int:
        """Count of components written."""
        return sum(1 for o in self.outcomes if o.status == AssetStatus.GENERATED)

    @property
    def dropped_count(self) -> int:
        """Count of assets dropped after a failure."""
        return sum(1 for o in self.outcomes if o.status == AssetStatus.DROPPED)

    @property
    def skipped_count(self) -> int:
        """Count of assets excluded by the feature gate."""
        return sum(1 for o in self.outcomes if o.status == AssetStatus.SKIPPED)

    @property
    def identifiers(self) -> list[str]:
        """Component names written, in output order."""
        return [
            o.identifier
            for o in self.outcomes
            if o.status == AssetStatus.GENERATED and o.identifier is not None
        ]
