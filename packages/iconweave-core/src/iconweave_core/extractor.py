"""Markup extraction from SVG assets.

The body of the first <svg> element is captured with a single
non-greedy pattern, then parsed as an XML fragment to make sure it
can be embedded as children of the generated component. Namespace
prefixes declared on the <svg> element stay usable in the body.
"""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from pathlib import Path
from xml.sax.saxutils import quoteattr

from iconweave_core.errors import ExtractionError
from iconweave_core.models import ExtractedMarkup, MarkupNode

SVG_BODY_PATTERN = re.compile(r"<svg([^>]*)>(.*?)</svg>", re.DOTALL)

NAMESPACE_DECLARATION = re.compile(r"""xmlns:([\w.-]+)\s*=\s*(["'])(.*?)\2""", re.DOTALL)

XLINK_NAMESPACE = "http://www.w3.org/1999/xlink"
XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"


def extract_markup(text: str, source: Path | None = None) -> ExtractedMarkup:
    """Extract the inner body of the first <svg> element.

    Args:
        text: Raw asset content.
        source: Asset path, used in error messages.

    Returns:
        ExtractedMarkup with the verbatim body and its parsed nodes.

    Raises:
        ExtractionError: If no <svg> element is found or the body is not
            well-formed markup.

    Example:
        >>> markup = extract_markup('<svg width="24"><path d="M5 12h14" /></svg>')
        >>> markup.nodes[0].tag
        'path'
    """
    match = SVG_BODY_PATTERN.search(text)
    if match is None:
        raise ExtractionError("No <svg> element found", asset_path=source)

    opening, raw = match.groups()
    declared = {"xlink": XLINK_NAMESPACE}
    declared.update(
        (prefix, uri)
        for prefix, _, uri in NAMESPACE_DECLARATION.findall(opening)
        if prefix != "xml"
    )
    xmlns = "".join(f" xmlns:{prefix}={quoteattr(uri)}" for prefix, uri in declared.items())

    parser = ET.XMLPullParser(events=("start-ns", "start"))
    try:
        parser.feed(f"<fragment{xmlns}>{raw}</fragment>")
        parser.close()
    except ET.ParseError as e:
        raise ExtractionError(
            "Malformed <svg> body",
            asset_path=source,
            internal_details=str(e),
        ) from e

    events = list(parser.read_events())
    prefixes = {XML_NAMESPACE: "xml"}
    for event, payload in events:
        if event == "start-ns":
            prefix, uri = payload
            prefixes.setdefault(uri, prefix)
    wrapper = next(payload for event, payload in events if event == "start")

    return ExtractedMarkup(
        raw=raw,
        nodes=tuple(_to_node(child, prefixes) for child in wrapper),
    )


def _to_node(element: ET.Element, prefixes: dict[str, str]) -> MarkupNode:
    return MarkupNode(
        tag=_qualified(element.tag, prefixes),
        attributes=tuple((_qualified(k, prefixes), v) for k, v in element.attrib.items()),
        text=_content(element.text),
        children=tuple(_to_node(child, prefixes) for child in element),
        tail=_content(element.tail),
    )


def _content(value: str | None) -> str | None:
    """Strip surrounding whitespace; whitespace-only text counts as none."""
    stripped = value.strip() if value else ""
    return stripped or None


def _qualified(name: str, prefixes: dict[str, str]) -> str:
    """Turn ElementTree's '{uri}local' names back into 'prefix:local'."""
    if not name.startswith("{"):
        return name
    uri, _, local = name[1:].partition("}")
    prefix = prefixes.get(uri)
    return f"{prefix}:{local}" if prefix else local
