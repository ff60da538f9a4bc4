"""Utility-class (Tailwind) HTML fragment backend.

Lossy by nature: only the per-type class table and a handful of exact style
matches are translated, every other style is dropped.
"""

import html

from ..components import ComponentRecord, TreeNode, format_scalar
from .base import Line
from .static_html import HTMLRenderer, PLACEHOLDER
from .tables import BACKGROUND_CLASSES, FONT_WEIGHT_CLASSES, UTILITY_CLASSES

HEADER = "<!-- Generated with Tailwind CSS -->"
WRAPPER_CLASSES = "min-h-screen bg-gray-100 p-8"


def style_classes(record: ComponentRecord) -> list[str]:
    """Utility classes derived from specific style values."""
    styles = record.styles
    classes = []

    background = styles.get("backgroundColor")
    if background is not None and format_scalar(background) in BACKGROUND_CLASSES:
        classes.append(BACKGROUND_CLASSES[format_scalar(background)])

    text_align = styles.get("textAlign")
    if text_align is not None and text_align != "":
        classes.append(f"text-{format_scalar(text_align)}")

    font_weight = styles.get("fontWeight")
    if font_weight is not None and format_scalar(font_weight) in FONT_WEIGHT_CLASSES:
        classes.append(FONT_WEIGHT_CLASSES[format_scalar(font_weight)])

    return classes


def utility_classes(record: ComponentRecord, include_styles: bool = True) -> str:
    classes = UTILITY_CLASSES.get(record.type, "").split()
    if include_styles:
        classes += style_classes(record)
    return " ".join(classes)


class UtilityHTMLRenderer(HTMLRenderer):
    """HTML fragment styled with utility classes instead of CSS rules."""

    def attributes(self, node: TreeNode) -> list[str]:
        attributes = self.html_attributes(node)
        classes = utility_classes(node.record, self.options.include_styles)
        if classes:
            attributes.append(f'class="{html.escape(classes, quote=True)}"')
        return attributes

    def document(self, roots: list[TreeNode]) -> list[Line]:
        lines: list[Line] = [
            (0, HEADER),
            (0, f'<div class="{WRAPPER_CLASSES}">'),
        ]
        if roots:
            lines += self.render_forest(roots, 1)
        else:
            lines.append((1, PLACEHOLDER))
        lines.append((0, "</div>"))
        return lines
