"""iconweave-cli: Command line interface for iconweave."""

from __future__ import annotations

__version__ = "0.1.0"
