"""Seismic-like colormap for visualising signed scalar values."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """An RGB color with components in [0, 1]."""

    r: float = 1.0
    g: float = 1.0
    b: float = 1.0


def get_color(value: float, min_value: float, max_value: float) -> Color:
    """Map ``value`` onto a blue-white-red scale over [min_value, max_value].

    A value of exactly zero is treated as unknown and mapped to white.
    """
    if value == 0.0:
        return Color()
    if max_value == min_value:
        raise ValueError("empty value range")
    value = min(max(value, min_value), max_value)
    span = max_value - min_value
    ratio = 2.0 * (value - min_value) / span
    if value < min_value + 0.5 * span:
        return Color(r=ratio, g=ratio, b=1.0)
    return Color(r=1.0, g=2.0 - ratio, b=2.0 - ratio)