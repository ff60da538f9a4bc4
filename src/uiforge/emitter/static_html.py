"""Static HTML document backend."""

import html

from ..components import TreeNode, format_scalar
from .base import Line, Renderer
from .styles import css_declarations, resolve_styles

PLACEHOLDER = "<!-- Add components to see generated code -->"
BODY_RULE = "body { font-family: Arial, sans-serif; margin: 0; padding: 20px; }"


def class_name(component_id: str) -> str:
    return f"component-{component_id}"


class HTMLRenderer(Renderer):
    """Attribute and element conventions shared by the HTML backends."""

    indent_unit = "    "

    def html_attributes(self, node: TreeNode) -> list[str]:
        return [
            f'{key}="{html.escape(format_scalar(value), quote=True)}"'
            for key, value in self.prop_items(node)
        ]

    def empty_element(self, opening: str, tag: str) -> str:
        # Closed explicitly: not every mapped tag is a void element
        return f"{opening}></{tag}>"


class StaticHTMLRenderer(HTMLRenderer):
    """Full HTML document with one CSS rule per component."""

    def attributes(self, node: TreeNode) -> list[str]:
        attributes = self.html_attributes(node)
        if self.options.include_styles:
            attributes.append(f'class="{html.escape(class_name(node.id), quote=True)}"')
        return attributes

    def stylesheet(self, roots: list[TreeNode]) -> list[Line]:
        """``.component-<id>`` rules in document order, at stylesheet depth."""
        lines: list[Line] = [(2, BODY_RULE)]
        if not self.options.include_styles:
            return lines

        for root in roots:
            for node in root.walk():
                declarations = css_declarations(resolve_styles(node.record))
                if not declarations:
                    continue
                lines.append((2, f".{class_name(node.id)} {{"))
                lines += [(3, declaration) for declaration in declarations]
                lines.append((2, "}"))
        return lines

    def document(self, roots: list[TreeNode]) -> list[Line]:
        lines: list[Line] = [
            (0, "<!DOCTYPE html>"),
            (0, '<html lang="en">'),
            (0, "<head>"),
            (1, '<meta charset="UTF-8">'),
            (1, '<meta name="viewport" content="width=device-width, initial-scale=1.0">'),
            (1, f"<title>{html.escape(self.options.title)}</title>"),
            (1, "<style>"),
        ]
        lines += self.stylesheet(roots)
        lines += [
            (1, "</style>"),
            (0, "</head>"),
            (0, "<body>"),
        ]

        if roots:
            lines += self.render_forest(roots, 1)
        else:
            lines.append((1, PLACEHOLDER))

        lines += [(0, "</body>"), (0, "</html>")]
        return lines
