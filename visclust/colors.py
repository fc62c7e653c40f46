"""Mapping from cluster labels to display colours."""

from __future__ import annotations

GRAY = (160, 160, 164)
BLACK = (0, 0, 0)

PALETTE = (
    (255, 0, 0),
    (0, 255, 0),
    (0, 0, 255),
    (220, 220, 70),
    (255, 0, 255),
    (0, 255, 255),
    (255, 128, 0),
    (128, 0, 255),
    (0, 255, 128),
    (255, 0, 128),
    (128, 255, 0),
    (0, 128, 255),
    (255, 128, 128),
    (128, 255, 128),
    (128, 128, 255),
    (192, 192, 192),
    (255, 215, 0),
    (139, 69, 19),
    (75, 0, 130),
    (220, 20, 60),
    (0, 100, 0),
    (0, 0, 139),
    (147, 112, 219),
    (255, 192, 203),
    (165, 42, 42),
    (240, 230, 140),
    (245, 245, 220),
    (34, 225, 128),
    (255, 255, 0),
    (0, 128, 128),
)


def color_for_label(label):
    """Return the RGB colour for a label: -1 is gray, -2 is black, others cycle the palette."""
    if label == -1:
        return GRAY
    if label == -2:
        return BLACK
    return PALETTE[abs(label) % len(PALETTE)]