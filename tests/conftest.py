"""Pytest configuration and fixtures."""

import os
import pytest

from uiforge.core import configure_logging, get_settings
from uiforge.emitter import EmitOptions, Framework
from uiforge.generator import CodeGenerator


# ============================================================================
# Pytest Hooks
# ============================================================================

def pytest_configure(config):
    """Configure pytest with environment variables."""
    os.environ['UIFORGE_LOG_LEVEL'] = 'DEBUG'
    os.environ['UIFORGE_ENABLE_CACHE'] = 'false'  # Disable cache unless a test opts in
    configure_logging(get_settings())


# ============================================================================
# Core Fixtures
# ============================================================================

@pytest.fixture
def settings():
    """Test settings."""
    return get_settings()


@pytest.fixture
def generator():
    """Generator with caching enabled."""
    return CodeGenerator(enable_cache=True)


# ============================================================================
# Option Fixtures
# ============================================================================

@pytest.fixture
def react_options():
    return EmitOptions(framework=Framework.REACT)


@pytest.fixture
def html_options():
    return EmitOptions(framework=Framework.HTML)


@pytest.fixture
def tailwind_options():
    return EmitOptions(framework=Framework.TAILWIND)


# ============================================================================
# Design Fixtures
# ============================================================================

@pytest.fixture
def flex_design():
    """Flex root with a text and a button child."""
    return [
        {
            "id": "root",
            "type": "div",
            "name": "Root",
            "category": "layout",
            "props": {},
            "styles": {"display": "flex"},
        },
        {
            "id": "c1",
            "parentId": "root",
            "type": "text",
            "name": "Child1",
            "category": "text",
            "props": {"children": "A"},
            "styles": {},
        },
        {
            "id": "c2",
            "parentId": "root",
            "type": "button",
            "name": "Child2",
            "category": "interactive",
            "props": {"children": "Click"},
            "styles": {},
        },
    ]


@pytest.fixture
def card_design():
    """Positioned flex container holding a heading and a button."""
    return [
        {
            "id": "container-1",
            "type": "div",
            "name": "Container",
            "category": "layout",
            "position": {"x": 100, "y": 100},
            "size": {"width": 400, "height": 300},
            "styles": {
                "display": "flex",
                "flexDirection": "column",
                "gap": "16px",
                "padding": "20px",
                "position": "absolute",
                "left": "100px",
                "top": "100px",
                "width": "400px",
                "height": "300px",
            },
            "props": {},
        },
        {
            "id": "text-1",
            "type": "text",
            "name": "Heading",
            "category": "text",
            "parentId": "container-1",
            "position": {"x": 0, "y": 0},
            "size": {"width": 200, "height": 30},
            "styles": {"fontSize": "24px", "fontWeight": "bold"},
            "props": {"children": "Welcome"},
        },
        {
            "id": "button-1",
            "type": "button",
            "name": "Action Button",
            "category": "interactive",
            "parentId": "container-1",
            "position": {"x": 0, "y": 50},
            "size": {"width": 120, "height": 40},
            "styles": {"backgroundColor": "#3b82f6", "color": "white"},
            "props": {"children": "Click Me"},
        },
    ]


@pytest.fixture
def sample_document():
    """Design document as saved by the editor."""
    return """{
  "name": "Landing",
  "components": [
    {"id": "hero", "type": "container", "styles": {"display": "flex"}},
    {"id": "title", "parentId": "hero", "type": "heading", "props": {"children": "Hello"}}
  ],
  "codeOptions": {"framework": "html", "includeStyles": true, "format": true}
}"""
