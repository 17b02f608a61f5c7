"""
Style Utilities

Small pure helpers shared by the stylesheet and HTML builders: print-safe
color darkening, contrast color selection, page-break snippets and
pixel/point unit conversion.
"""

from __future__ import annotations

import math
import re
from typing import Optional, Tuple

_HEX6_PATTERN = re.compile(r'^#[0-9a-fA-F]{6}$')
_HEX3_PATTERN = re.compile(r'^#[0-9a-fA-F]{3}$')

# Brightness above which a color is too light to survive printing
PRINT_BRIGHTNESS_THRESHOLD = 200
PRINT_DARKEN_FACTOR = 0.7

# Relative luminance at which black and white text have equal contrast
LUMINANCE_CONTRAST_THRESHOLD = 0.179


def _parse_hex(color: str) -> Optional[Tuple[int, int, int]]:
    if _HEX6_PATTERN.match(color):
        return int(color[1:3], 16), int(color[3:5], 16), int(color[5:7], 16)
    if _HEX3_PATTERN.match(color):
        return tuple(int(ch * 2, 16) for ch in color[1:4])  # type: ignore[return-value]
    return None


def to_print_color(color: str) -> str:
    """
    Darken very light hex colors so they remain visible on paper.

    Only 6-digit hex colors are considered. Anything else is returned as is.
    The darkened result always has brightness <= 178.5, so applying the
    function twice gives the same output as applying it once.
    """
    if not _HEX6_PATTERN.match(color):
        return color

    r, g, b = _parse_hex(color)  # type: ignore[misc]
    brightness = (r * 299 + g * 587 + b * 114) / 1000
    if brightness <= PRINT_BRIGHTNESS_THRESHOLD:
        return color

    r, g, b = (math.floor(channel * PRINT_DARKEN_FACTOR) for channel in (r, g, b))
    return f"#{r:02x}{g:02x}{b:02x}"


def get_contrast_color(background: str) -> str:
    """Pick a text color for a background using the legacy substring heuristic"""
    if 'dark' in background or background.startswith(('#2', '#1', '#0')):
        return 'white'
    return '#333333'


def _relative_luminance(rgb: Tuple[int, int, int]) -> float:
    def _linear(channel: int) -> float:
        c = channel / 255
        return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

    r, g, b = (_linear(channel) for channel in rgb)
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def get_luminance_contrast_color(background: str) -> str:
    """
    Pick a text color from the WCAG relative luminance of a hex background.

    Falls back to get_contrast_color when the background is not a 3- or
    6-digit hex color (named colors, gradients, rgba() values).
    """
    rgb = _parse_hex(background.strip())
    if rgb is None:
        return get_contrast_color(background)
    if _relative_luminance(rgb) <= LUMINANCE_CONTRAST_THRESHOLD:
        return 'white'
    return '#333333'


def get_page_break_css(before: bool = False, after: bool = False, avoid: bool = False) -> str:
    """Return page-break declarations with both legacy and modern properties"""
    css = ''
    if before:
        css += 'page-break-before: always; break-before: page;'
    if after:
        css += 'page-break-after: always; break-after: page;'
    if avoid:
        css += 'page-break-inside: avoid; break-inside: avoid;'
    return css


def px_to_pt(px: float) -> float:
    return px * 0.75


def pt_to_px(pt: float) -> float:
    return pt / 0.75


__all__ = [
    "to_print_color",
    "get_contrast_color",
    "get_luminance_contrast_color",
    "get_page_break_css",
    "px_to_pt",
    "pt_to_px",
]
