"""
Coordinate conversion for canvas operations.

Client coordinates are viewport pixels reported by pointer events; canvas
coordinates are logical units independent of zoom and scroll.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """Logical canvas point."""

    x: float = 0
    y: float = 0


@dataclass(frozen=True)
class ClientPoint:
    """Viewport point."""

    client_x: float
    client_y: float


@dataclass(frozen=True)
class Size:
    """Width and height; a missing dimension (None) means auto."""

    width: float | None = None
    height: float | None = None


@dataclass(frozen=True)
class CanvasRect:
    """Bounding rectangle of the canvas element in client coordinates."""

    left: float
    top: float
    width: float = 0
    height: float = 0


MIN_SIZE = Size(width=20, height=20)
ORIGIN = Point(0, 0)


def _check_zoom(zoom: float) -> None:
    if zoom <= 0:
        raise ValueError(f"zoom must be positive, got {zoom}")


def client_to_canvas(
    client_x: float,
    client_y: float,
    canvas_rect: CanvasRect,
    zoom: float,
    scroll_offset: Point = ORIGIN,
) -> Point:
    """
    Convert client (viewport) coordinates to logical canvas coordinates.

    Args:
        client_x: Pointer X relative to the viewport
        client_y: Pointer Y relative to the viewport
        canvas_rect: Canvas bounding rectangle
        zoom: Current zoom level (1 = 100%)
        scroll_offset: Scroll offset within the canvas

    Returns:
        Logical point within the canvas

    Raises:
        ValueError: If zoom is not positive
    """
    _check_zoom(zoom)
    return Point(
        x=(client_x - canvas_rect.left + scroll_offset.x) / zoom,
        y=(client_y - canvas_rect.top + scroll_offset.y) / zoom,
    )


def canvas_to_client(
    x: float,
    y: float,
    canvas_rect: CanvasRect,
    zoom: float,
    scroll_offset: Point = ORIGIN,
) -> ClientPoint:
    """Inverse of ``client_to_canvas``."""
    _check_zoom(zoom)
    return ClientPoint(
        client_x=x * zoom + canvas_rect.left - scroll_offset.x,
        client_y=y * zoom + canvas_rect.top - scroll_offset.y,
    )


def _clamp(value: float, upper: float | None) -> float:
    value = max(0, value)
    return value if upper is None else min(value, upper)


def clamp_to_canvas(point: Point, bounds: Size) -> Point:
    """Clamp a point into [0, width] x [0, height]; an auto bound is unlimited."""
    return Point(x=_clamp(point.x, bounds.width), y=_clamp(point.y, bounds.height))


def clamp_size(size: Size, min_size: Size = MIN_SIZE) -> Size:
    """Clamp each dimension to at least the given minimum; auto dimensions stay auto."""
    return Size(
        width=None if size.width is None else max(min_size.width or 0, size.width),
        height=None if size.height is None else max(min_size.height or 0, size.height),
    )
