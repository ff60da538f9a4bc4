"""Shared renderer for all output grammars.

Each backend supplies a small set of policies (indent unit, attribute
serialization, empty-element convention, document wrapper); the tree walk
and line layout live here.
"""

from abc import ABC, abstractmethod
from typing import Iterable

from ..components import TreeNode
from .options import EmitOptions
from .tables import resolve_tag

Line = tuple[int, str]
"""(depth, text); an empty text is a blank separator line."""


class Renderer(ABC):
    """Base class for output backends."""

    indent_unit = "  "

    def __init__(self, options: EmitOptions) -> None:
        self.options = options

    def render(self, roots: Iterable[TreeNode]) -> str:
        return self.layout(self.document(list(roots)))

    def layout(self, lines: list[Line]) -> str:
        """Indent and join lines, or collapse them into one line when unformatted."""
        if not self.options.format:
            return "".join(text for _, text in lines)
        return "\n".join(self.indent_unit * depth + text if text else "" for depth, text in lines)

    def render_forest(self, roots: list[TreeNode], depth: int) -> list[Line]:
        """Render nodes and their descendants, starting at the given depth."""
        lines: list[Line] = []
        # (node, depth, closing) entries; closing entries emit the end tag
        stack: list[tuple[TreeNode, int, bool]] = [(node, depth, False) for node in reversed(roots)]

        while stack:
            node, level, closing = stack.pop()
            tag = resolve_tag(node.type)

            if closing:
                lines.append((level, f"</{tag}>"))
                continue

            opening = self.open_tag(node, tag)
            text = node.record.text

            if node.children:
                lines.append((level, f"{opening}>"))
                stack.append((node, level, True))
                stack.extend((child, level + 1, False) for child in reversed(node.children))
            elif text is not None:
                lines.append((level, f"{opening}>{text}</{tag}>"))
            else:
                lines.append((level, self.empty_element(opening, tag)))

        return lines

    def open_tag(self, node: TreeNode, tag: str) -> str:
        """``<tag attr="..."`` without the closing bracket."""
        attributes = self.attributes(node)
        if not attributes:
            return f"<{tag}"
        return f"<{tag} " + " ".join(attributes)

    def prop_items(self, node: TreeNode):
        """Props rendered as attributes: everything but ``children`` and nulls."""
        return [
            (key, value)
            for key, value in node.record.props.items()
            if key != "children" and value is not None
        ]

    @abstractmethod
    def attributes(self, node: TreeNode) -> list[str]:
        """Serialized attributes for a node's opening tag."""

    @abstractmethod
    def empty_element(self, opening: str, tag: str) -> str:
        """Markup for a node with neither children nor text."""

    @abstractmethod
    def document(self, roots: list[TreeNode]) -> list[Line]:
        """Wrap the rendered forest in the backend's document template."""
