# geometry.py
from __future__ import annotations
from typing import Protocol


class Rect(Protocol):
    x: float
    y: float
    width: float
    height: float


def is_colliding(a: Rect, b: Rect) -> bool:
    """Axis-aligned overlap test. Edges that only touch do not collide."""
    return (a.x < b.x + b.width and
            a.x + a.width > b.x and
            a.y < b.y + b.height and
            a.y + a.height > b.y)
