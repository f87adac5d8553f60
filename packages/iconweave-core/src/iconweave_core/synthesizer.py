"""Component synthesis.

Pairs an identifier with extracted markup to build the
ComponentDefinition of one icon. No I/O happens here.
"""

from __future__ import annotations

from pydantic import ValidationError

from iconweave_core.errors import AssetError
from iconweave_core.models import ComponentDefinition, ExtractedMarkup


def synthesize(identifier: str, markup: ExtractedMarkup) -> ComponentDefinition:
    """Build the component definition for one icon.

    Args:
        identifier: Component name (PascalCase).
        markup: Extracted <svg> body.

    Returns:
        ComponentDefinition with the fixed attribute set and the markup
        nodes as children.

    Raises:
        AssetError: If the identifier cannot name a component.
    """
    try:
        return ComponentDefinition(identifier=identifier, children=markup.nodes)
    except ValidationError as e:
        raise AssetError(
            f"Cannot derive a component name from '{identifier}'",
            internal_details=str(e),
        ) from e
