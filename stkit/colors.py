"""Colour helpers: window opacity adjustment and colour inversion."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 16-bit channels."""

    red: int
    green: int
    blue: int
    alpha: int = 0xFFFF


def clamp(value: float, lower: float, upper: float) -> float:
    """Limit ``value`` to the range ``[lower, upper]``."""
    if value < lower:
        return lower
    if value > upper:
        return upper
    return value


def change_alpha(alpha: float, delta: float) -> float:
    """Return the opacity after stepping ``alpha`` by ``delta`` within 0..1."""
    if (alpha > 0 and delta < 0) or (alpha < 1 and delta > 0):
        alpha += delta
    return clamp(alpha, 0.0, 1.0)


def invert_color(color: Color) -> Color:
    """Invert the colour channels, keeping the alpha."""
    return Color(
        red=~color.red & 0xFFFF,
        green=~color.green & 0xFFFF,
        blue=~color.blue & 0xFFFF,
        alpha=color.alpha,
    )