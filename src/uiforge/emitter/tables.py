"""Fixed component-type tables shared by all backends."""

DEFAULT_TAG = "div"

TAGS: dict[str, str] = {
    "text": "span",
    "heading": "h1",
    "button": "button",
    "input": "input",
    "image": "img",
    "container": "div",
    "flex-container": "div",
    "grid-container": "div",
    "card": "div",
    "list": "ul",
}

# Types that keep flow layout instead of canvas coordinates
LAYOUT_TYPES = frozenset({"container", "flex-container", "grid-container"})
LAYOUT_DISPLAYS = frozenset({"flex", "inline-flex", "grid", "inline-grid"})
PINNED_POSITIONS = frozenset({"absolute", "fixed"})

UTILITY_CLASSES: dict[str, str] = {
    "button": "px-4 py-2 bg-blue-500 text-white rounded hover:bg-blue-600 transition-colors",
    "text": "text-gray-800",
    "heading": "text-2xl font-bold text-gray-900 mb-4",
    "input": (
        "px-3 py-2 border border-gray-300 rounded "
        "focus:outline-none focus:ring-2 focus:ring-blue-500"
    ),
    "container": "p-4",
    "flex-container": "flex gap-4",
    "grid-container": "grid grid-cols-2 gap-4",
    "card": "bg-white p-6 rounded-lg shadow-md",
    "image": "rounded",
    "list": "list-disc pl-5 space-y-1",
}

# Exact palette swatches only; other colors have no utility equivalent here
BACKGROUND_CLASSES: dict[str, str] = {
    "#ffffff": "bg-white",
    "#f3f4f6": "bg-gray-100",
}

FONT_WEIGHT_CLASSES: dict[str, str] = {
    "bold": "font-bold",
    "700": "font-bold",
    "600": "font-semibold",
    "500": "font-medium",
}


def resolve_tag(component_type: str) -> str:
    """Map a component type to its output tag (unmapped types render as div)."""
    return TAGS.get(component_type, DEFAULT_TAG)
