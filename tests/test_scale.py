"""Tests for stroke width and darkness scaling."""

import math

import pytest

from trafficmap.render.scale import darkness, grey_hex, segment_width


def test_width_formula():
    assert segment_width(10) == pytest.approx(1.0)
    assert segment_width(100) == pytest.approx(3.0)
    assert segment_width(50) == pytest.approx(2 * math.log10(50) - 1)


def test_width_strictly_increasing():
    counts = [1, 1.5, 2, 7, 10, 11, 50, 999, 1000, 1e6]
    widths = [segment_width(c) for c in counts]
    assert all(a < b for a, b in zip(widths, widths[1:]))


def test_width_clamps_non_positive_counts():
    """Zero and negative counts are treated as a count of 1."""
    assert segment_width(0) == pytest.approx(-1.0)
    assert segment_width(-5) == segment_width(1)
    assert segment_width(0.5) == segment_width(1)


def test_darkness_endpoints():
    assert darkness(0.0, 5.0) == pytest.approx(2 / 3)
    assert darkness(5.0, 5.0) == pytest.approx(0.0)


def test_darkness_decreases_with_width():
    max_w = segment_width(10_000)
    values = [darkness(w, max_w) for w in (0.0, 1.0, 2.0, 4.0, max_w)]
    assert all(a > b for a, b in zip(values, values[1:]))
    assert all(0.0 <= v <= 1.0 for v in values)


def test_darkness_clamped():
    # Wider than the reference width would go negative
    assert darkness(10.0, 5.0) == 0.0
    # Far below zero width would exceed 1
    assert darkness(-20.0, 5.0) == 1.0


def test_darkness_non_positive_max_width():
    assert darkness(0.5, 0.0) == 0.0
    assert darkness(-0.5, -1.0) == 0.0


def test_grey_hex():
    assert grey_hex(1.0) == "#ffffff"
    assert grey_hex(0.0) == "#000000"
    assert grey_hex(0.5) == "#808080"
    assert grey_hex(2.0) == "#ffffff"
