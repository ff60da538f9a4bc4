"""Component markup (React/JSX) backend."""

from ..components import TreeNode
from ..core import safe_json_dumps
from .base import Line, Renderer
from .styles import inline_style_object, resolve_styles

PLACEHOLDER = "{/* Add components to see generated code */}"


class MarkupRenderer(Renderer):
    """Renders the forest as a default-exported function component."""

    indent_unit = "  "

    def attributes(self, node: TreeNode) -> list[str]:
        attributes = []
        for key, value in self.prop_items(node):
            if isinstance(value, str) and '"' not in value:
                attributes.append(f'{key}="{value}"')
            else:
                attributes.append(f"{key}={{{safe_json_dumps(value)}}}")

        if self.options.include_styles:
            style = inline_style_object(resolve_styles(node.record))
            if style:
                attributes.append(f"style={{{style}}}")
        return attributes

    def empty_element(self, opening: str, tag: str) -> str:
        return f"{opening} />"

    def document(self, roots: list[TreeNode]) -> list[Line]:
        name = self.options.component_name
        lines: list[Line] = [
            (0, "import React from 'react';"),
            (0, ""),
            (0, f"const {name} = () => {{"),
            (1, "return ("),
        ]

        if not roots:
            lines += [(2, "<div>"), (3, PLACEHOLDER), (2, "</div>")]
        elif len(roots) == 1:
            lines += self.render_forest(roots, 2)
        else:
            lines.append((2, "<>"))
            lines += self.render_forest(roots, 3)
            lines.append((2, "</>"))

        lines += [
            (1, ");"),
            (0, "};"),
            (0, ""),
            (0, f"export default {name};"),
        ]
        return lines
