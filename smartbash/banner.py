# smartbash/banner.py
"""
Startup banner for SmartBash.

Public API
----------
- interpolate_color(stops, t): RGB interpolation across color stops.
- print_banner(console): Render the SMART BASH art with a left-to-right
  green→teal gradient, followed by the subtitle and usage hint.

The render path falls back to plain text on any styling error so a broken
terminal profile never prevents the shell from starting.
"""

from __future__ import annotations

from typing import Iterable, Sequence, Tuple

from rich.console import Console
from rich.text import Text

from .constants import BANNER_HINT, BANNER_SUBTITLE

RGB = Tuple[int, int, int]
RGBStops = Sequence[RGB]

__all__ = ["interpolate_color", "print_banner"]

_COLOR_STOPS: RGBStops = (
    (40, 160, 60),
    (60, 200, 120),
    (0, 200, 200),
    (120, 230, 255),
)

_ASCII_ART: Tuple[str, ...] = (
    "▄▀▀ █▄ ▄█ ▄▀▄ █▀▄ ▀█▀   █▀▄ ▄▀▄ ▄▀▀ █ █",
    " ▀▄ █ ▀ █ █▀█ █▀▄  █    █▀▄ █▀█  ▀▄ █▀█",
    "▀▀  ▀   ▀ ▀ ▀ ▀ ▀  ▀    ▀▀  ▀ ▀ ▀▀  ▀ ▀",
)


def _clamp01(x: float) -> float:
    return min(1.0, max(0.0, x))


def interpolate_color(stops: RGBStops, t: float) -> RGB:
    """Piecewise-linear interpolation between RGB color stops.

    Parameters
    ----------
    stops : Sequence[Tuple[int, int, int]]
        At least two RGB tuples with components in 0..255.
    t : float
        Position in [0, 1]; values outside are clamped.

    Raises
    ------
    ValueError
        If fewer than two stops are given or a component is out of range.
    """
    if stops is None or len(stops) < 2:
        raise ValueError("color stops must contain at least two (R,G,B) tuples.")
    for idx, rgb in enumerate(stops):
        if not all(0 <= c <= 255 for c in rgb):
            raise ValueError(f"color component out of range at index {idx}: {rgb}")

    t = _clamp01(float(t))
    if t >= 1.0:
        return tuple(stops[-1])  # type: ignore[return-value]

    seg = 1.0 / (len(stops) - 1)
    idx = int(t / seg)
    local_t = (t - seg * idx) / seg
    c1, c2 = stops[idx], stops[idx + 1]
    return tuple(int(a + (b - a) * local_t) for a, b in zip(c1, c2))  # type: ignore[return-value]


def _gradient(lines: Iterable[str], stops: RGBStops) -> Text:
    lines = list(lines)
    width = max((len(line) for line in lines), default=1)
    text = Text()
    for line in lines:
        for col, char in enumerate(line):
            if char == " ":
                text.append(char)
                continue
            r, g, b = interpolate_color(stops, col / max(1, width - 1))
            text.append(char, style=f"bold rgb({r},{g},{b})")
        text.append("\n")
    return text


def print_banner(console: Console) -> None:
    """Print the banner, subtitle and hint to `console`."""
    try:
        art = _gradient(_ASCII_ART, _COLOR_STOPS)
    except ValueError:
        art = Text("\n".join(_ASCII_ART) + "\n", style="bold white")
    console.print(art)
    console.print(Text(f"🧠 Smart Bash — {BANNER_SUBTITLE}", style="bold cyan"))
    console.print(Text(BANNER_HINT, style="yellow"))
