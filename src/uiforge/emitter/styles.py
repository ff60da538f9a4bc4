"""Style resolution and serialization."""

import re

from ..components import ComponentRecord, ScalarMap, format_scalar
from ..geometry import Point
from .tables import LAYOUT_DISPLAYS, LAYOUT_TYPES, PINNED_POSITIONS

_KEBAB_RE = re.compile(r"([a-z0-9]|(?=[A-Z]))([A-Z])")

FLOW_STRIPPED_KEYS = ("position", "left", "top")


def kebab_case(name: str) -> str:
    """``backgroundColor`` -> ``background-color``; ``WebkitTransform`` -> ``-webkit-transform``."""
    return _KEBAB_RE.sub(r"\1-\2", name).lower()


def is_layout_container(record: ComponentRecord) -> bool:
    display = record.styles.get("display")
    return record.type in LAYOUT_TYPES or display in LAYOUT_DISPLAYS


def is_pinned(record: ComponentRecord) -> bool:
    """True when the record explicitly asks for absolute or fixed positioning."""
    return record.styles.get("position") in PINNED_POSITIONS


def _px(value: float) -> str:
    return f"{format_scalar(value)}px"


def resolve_styles(record: ComponentRecord) -> ScalarMap:
    """
    Apply the positioning policy to a record's styles.

    Pinned records keep their styles untouched. Layout containers flow, so
    canvas offsets are dropped. Everything else is placed absolutely at its
    canvas position; width and height come from ``size`` when present.
    Returns a new map; the record is not modified.
    """
    styles = dict(record.styles)

    if is_pinned(record):
        return styles

    if is_layout_container(record):
        for key in FLOW_STRIPPED_KEYS:
            styles.pop(key, None)
        return styles

    position = record.position or Point()
    styles["position"] = "absolute"
    styles["left"] = _px(position.x)
    styles["top"] = _px(position.y)
    if record.size is not None:
        if record.size.width is not None:
            styles["width"] = _px(record.size.width)
        if record.size.height is not None:
            styles["height"] = _px(record.size.height)
    return styles


def _quote_js(value: str) -> str:
    return "'" + value.replace("\\", "\\\\").replace("'", "\\'") + "'"


def inline_style_object(styles: ScalarMap) -> str:
    """Serialize styles as a JS object literal: ``{ display: 'flex', gap: '8px' }``."""
    entries = [
        f"{key}: {_quote_js(format_scalar(value))}"
        for key, value in styles.items()
        if value is not None
    ]
    if not entries:
        return ""
    return "{ " + ", ".join(entries) + " }"


def css_declarations(styles: ScalarMap) -> list[str]:
    """Serialize styles as CSS declarations: ``["background-color: #fff;"]``."""
    return [
        f"{kebab_case(key)}: {format_scalar(value)};"
        for key, value in styles.items()
        if value is not None
    ]
