"""iconweave-core: SVG icon set to Leptos component generation.

This package provides:
- IconGenerator: The scan -> extract -> synthesize -> format -> write pipeline
- GeneratorConfig: Run configuration (iconweave.yaml, OUT_DIR, overrides)
- FeatureSet: CARGO_FEATURE_* based icon selection
- Preflight checks for the external formatter
"""

from __future__ import annotations

__version__ = "0.1.0"

from iconweave_core.config import FailurePolicy, GeneratorConfig
from iconweave_core.errors import (
    AssetError,
    AssetReadError,
    ConfigurationError,
    ExtractionError,
    FormatterError,
    FormatterNotFoundError,
    GenerationError,
    IconweaveError,
)
from iconweave_core.extractor import extract_markup
from iconweave_core.features import FeatureSet
from iconweave_core.generator import IconGenerator, generate
from iconweave_core.models import (
    SVG_ATTRIBUTES,
    AssetOutcome,
    AssetStatus,
    ComponentDefinition,
    ExtractedMarkup,
    GenerationReport,
    IconAsset,
    MarkupNode,
)
from iconweave_core.naming import to_pascal_case
from iconweave_core.scanner import scan_assets
from iconweave_core.synthesizer import synthesize

__all__ = [
    "__version__",
    # Pipeline
    "IconGenerator",
    "generate",
    "scan_assets",
    "extract_markup",
    "to_pascal_case",
    "synthesize",
    # Configuration
    "GeneratorConfig",
    "FailurePolicy",
    "FeatureSet",
    # Models
    "SVG_ATTRIBUTES",
    "IconAsset",
    "MarkupNode",
    "ExtractedMarkup",
    "ComponentDefinition",
    "AssetStatus",
    "AssetOutcome",
    "GenerationReport",
    # Errors
    "IconweaveError",
    "ConfigurationError",
    "AssetError",
    "AssetReadError",
    "ExtractionError",
    "FormatterError",
    "FormatterNotFoundError",
    "GenerationError",
]
