"""Two-stage formatting of component definitions.

Stage 1 renders the definition with RustPrinter. Stage 2, when
configured, pipes that text through an external TextFormatter.
"""

from __future__ import annotations

from iconweave_core.formatting.printer import RustPrinter
from iconweave_core.formatting.process import TextFormatter
from iconweave_core.models import ComponentDefinition


class FormattingPipeline:
    """Render a definition and optionally restyle it externally.

    Attributes:
        printer: Stage 1 renderer.
        formatter: Stage 2 formatter, or None to stop after stage 1.

    Example:
        >>> pipeline = FormattingPipeline(formatter=ProcessFormatter(["leptosfmt", "--stdin"]))
        >>> text = pipeline.format(definition)
    """

    def __init__(
        self,
        formatter: TextFormatter | None = None,
        printer: RustPrinter | None = None,
    ) -> None:
        self.printer = printer or RustPrinter()
        self.formatter = formatter

    def format(self, definition: ComponentDefinition) -> str:
        """Format one definition.

        Args:
            definition: Component to format.

        Returns:
            Final source text of the definition.

        Raises:
            FormatterError: If the external stage fails.
        """
        text = self.printer.render(definition)
        if self.formatter is None:
            return text
        return self.formatter.format(text)
