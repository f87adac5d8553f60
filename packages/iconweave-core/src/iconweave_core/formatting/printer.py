"""Canonical Rust rendering of component definitions.

First formatting stage: walks the definition's tree and prints it with
fixed four-space indentation, one element per line and no blank lines
inside a definition. The result is valid Rust/Leptos source on its own;
the optional second stage only restyles the view! body.
"""

from __future__ import annotations

from iconweave_core.models import ComponentDefinition, MarkupNode

INDENT = "    "


def rust_string(value: str) -> str:
    """Quote a value as a Rust string literal."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class RustPrinter:
    """Render ComponentDefinition trees to Rust source text.

    Example:
        >>> printer = RustPrinter()
        >>> source = printer.render(definition)
        >>> source.splitlines()[0]
        '#[component]'
    """

    def render(self, definition: ComponentDefinition) -> str:
        """Render one definition.

        Args:
            definition: Component to render.

        Returns:
            Source text ending with a single newline.
        """
        param = definition.class_param
        lines = [
            "#[component]",
            f"pub fn {definition.identifier}("
            f"#[prop(into, optional)] {param}: Signal<String>) -> impl IntoView {{",
            f"{INDENT}view! {{",
        ]
        lines.extend(self._svg_lines(definition, depth=2))
        lines.append(f"{INDENT}}}")
        lines.append("}")
        return "\n".join(lines) + "\n"

    def _svg_lines(self, definition: ComponentDefinition, depth: int) -> list[str]:
        pad = INDENT * depth
        attr_pad = INDENT * (depth + 1)
        lines = [f"{pad}<svg"]
        lines.extend(
            f"{attr_pad}{name}={rust_string(value)}" for name, value in definition.attributes
        )
        lines.append(f"{attr_pad}class={definition.class_param}")
        lines.append(f"{pad}>")
        lines.extend(self._children_lines(definition.children, depth + 1))
        lines.append(f"{pad}</svg>")
        return lines

    def _node_lines(self, node: MarkupNode, depth: int) -> list[str]:
        pad = INDENT * depth
        open_tag = node.tag + "".join(
            f" {name}={rust_string(value)}" for name, value in node.attributes
        )
        if node.text is None and not node.children:
            return [f"{pad}<{open_tag} />"]
        if not node.children:
            return [f"{pad}<{open_tag}>{rust_string(node.text or '')}</{node.tag}>"]

        lines = [f"{pad}<{open_tag}>"]
        if node.text is not None:
            lines.append(f"{INDENT * (depth + 1)}{rust_string(node.text)}")
        lines.extend(self._children_lines(node.children, depth + 1))
        lines.append(f"{pad}</{node.tag}>")
        return lines

    def _children_lines(self, children: tuple[MarkupNode, ...], depth: int) -> list[str]:
        """Print children in order, each followed by its trailing text."""
        lines: list[str] = []
        for child in children:
            lines.extend(self._node_lines(child, depth))
            if child.tail is not None:
                lines.append(f"{INDENT * depth}{rust_string(child.tail)}")
        return lines
