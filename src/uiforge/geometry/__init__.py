"""Canvas geometry helpers."""

from .coords import (
    Point,
    ClientPoint,
    Size,
    CanvasRect,
    MIN_SIZE,
    client_to_canvas,
    canvas_to_client,
    clamp_to_canvas,
    clamp_size,
)

__all__ = [
    "Point",
    "ClientPoint",
    "Size",
    "CanvasRect",
    "MIN_SIZE",
    "client_to_canvas",
    "canvas_to_client",
    "clamp_to_canvas",
    "clamp_size",
]
