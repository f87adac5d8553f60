"""Asset discovery.

Walks the icon root and yields one IconAsset per SVG file. Nested
directories are traversed but do not contribute to component names.

Usage:
    from iconweave_core.scanner import scan_assets

    for asset in scan_assets(Path("lucide/icons")):
        print(asset.identifier)
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import structlog

from iconweave_core.errors import AssetError, AssetReadError, ConfigurationError
from iconweave_core.models import IconAsset
from iconweave_core.naming import to_pascal_case

logger = structlog.get_logger(__name__)


def scan_assets(
    root: Path,
    extension: str = "svg",
    *,
    strict: bool = False,
) -> Iterator[IconAsset]:
    """Lazily yield the assets under root.

    Directory entries are visited in sorted order so repeated runs over
    the same tree produce the same sequence.

    Args:
        root: Icon root directory.
        extension: Recognized extension, without the dot.
        strict: If True, a file without any extension raises AssetError
            instead of being skipped.

    Yields:
        IconAsset for every regular file whose extension matches.

    Raises:
        ConfigurationError: If root is not a directory.
        AssetError: In strict mode, for files lacking an extension.
        AssetReadError: In strict mode, for unreadable directories.
    """
    if not root.is_dir():
        raise ConfigurationError(f"Icon directory not found: {root}", field_path="icons_dir")

    suffix = f".{extension.lower()}"
    for path in _walk(root, strict):
        if not path.suffix:
            if strict:
                raise AssetError("Asset has no file extension", asset_path=path)
            logger.debug("asset_skipped", path=str(path), reason="no extension")
            continue
        if path.suffix.lower() != suffix:
            continue
        yield IconAsset(path=path, stem=path.stem, identifier=to_pascal_case(path.stem))


def _walk(directory: Path, strict: bool) -> Iterator[Path]:
    """Yield regular files below directory, depth first, in name order.

    Symlinked directories are not followed. An unreadable directory
    raises AssetReadError in strict mode and is skipped otherwise.
    """
    try:
        entries = sorted(directory.iterdir())
    except OSError as e:
        if strict:
            raise AssetReadError(
                "Cannot read directory",
                asset_path=directory,
                internal_details=str(e),
            ) from e
        logger.warning("directory_skipped", path=str(directory), reason=str(e))
        return

    for entry in entries:
        if entry.is_dir():
            if entry.is_symlink():
                logger.debug("directory_skipped", path=str(entry), reason="symlink")
                continue
            yield from _walk(entry, strict)
        elif entry.is_file():
            yield entry
