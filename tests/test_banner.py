# tests/test_banner.py
from __future__ import annotations

import pytest
from rich.console import Console

from smartbash import banner as sut


def test_interpolate_color_endpoints_and_midpoint():
    stops = ((0, 0, 0), (100, 200, 250))
    assert sut.interpolate_color(stops, 0) == (0, 0, 0)
    assert sut.interpolate_color(stops, 1) == (100, 200, 250)
    assert sut.interpolate_color(stops, 0.5) == (50, 100, 125)


def test_interpolate_color_clamps():
    stops = ((0, 0, 0), (10, 10, 10), (20, 20, 20))
    assert sut.interpolate_color(stops, -3) == (0, 0, 0)
    assert sut.interpolate_color(stops, 7) == (20, 20, 20)


@pytest.mark.parametrize("stops", [(), ((1, 2, 3),), ((0, 0, 0), (0, 0, 256))])
def test_interpolate_color_rejects_bad_stops(stops):
    with pytest.raises(ValueError):
        sut.interpolate_color(stops, 0.5)


def test_print_banner_renders_art_and_hint():
    console = Console(record=True, width=100, color_system=None)
    sut.print_banner(console)
    text = console.export_text()
    assert "Smart Bash" in text
    assert "your history suggestion" in text
    assert "Enter command or 'exit' to leave." in text


def test_print_banner_falls_back_when_gradient_fails(console, monkeypatch):
    monkeypatch.setattr(sut, "_COLOR_STOPS", ())
    sut.print_banner(console)
    assert console.output[0].startswith(sut._ASCII_ART[0])
    assert console.output[-1] == "Enter command or 'exit' to leave."
