"""
Overlap tests for the two shape families.

Every body is described by its centre and a half extent (``radius``). The
circle family treats that as a circle; the rect family treats it as an
axis-aligned square of side ``2 * radius``. A build picks one family and
uses it for every entity kind.
"""

from __future__ import annotations


def circle_collide(x1, y1, r1, x2, y2, r2) -> bool:
    """Check if two circles collide (touching counts)"""
    dx = x1 - x2
    dy = y1 - y2
    rr = r1 + r2
    return (dx * dx + dy * dy) <= (rr * rr)


def rect_collide(ax, ay, aw, ah, bx, by, bw, bh) -> bool:
    """Check if two axis-aligned rects overlap (touching edges do not count)

    Rects are given by their top-left corner and size.
    """
    return ax < bx + bw and ax + aw > bx and ay < by + bh and ay + ah > by


def bodies_overlap(a, b, shape_family: str = "circle") -> bool:
    """Test two bodies exposing ``x``, ``y`` and ``radius``"""
    if shape_family == "circle":
        return circle_collide(a.x, a.y, a.radius, b.x, b.y, b.radius)
    if shape_family == "rect":
        return rect_collide(
            a.x - a.radius, a.y - a.radius, 2 * a.radius, 2 * a.radius,
            b.x - b.radius, b.y - b.radius, 2 * b.radius, 2 * b.radius,
        )
    raise ValueError(f"Unknown shape family: {shape_family}")
