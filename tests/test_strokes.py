"""Tests for stroke planning: cutoff, ordering, projection and scaling."""

import pytest

from trafficmap.dump import Segment
from trafficmap.render import RenderConfig, plan_strokes
from trafficmap.render.scale import segment_width
from trafficmap.windows import MapWindow

WINDOW = MapWindow(name="test", xmin=0, xmax=100, ymin=-50, ymax=50)


def _config(**kwargs):
    kwargs.setdefault("window", WINDOW)
    kwargs.setdefault("meters_per_pixel", 1)
    kwargs.setdefault("cutoff", 10)
    return RenderConfig(**kwargs)


def test_scenario_single_stroke():
    """Only the count=50 segment survives a cutoff of 10."""
    segments = [Segment(0, 0, 100, 0, 50), Segment(0, 0, 100, 0, 5)]
    strokes = plan_strokes(segments, _config())
    assert len(strokes) == 1
    stroke = strokes[0]
    assert stroke.count == 50
    assert stroke.width == pytest.approx(2.39794, abs=1e-5)
    assert (stroke.x1, stroke.y1, stroke.x2, stroke.y2) == (0, 50, 100, 50)
    # The only drawn segment is also the widest one
    assert stroke.darkness == pytest.approx(0.0)


def test_ascending_count_order():
    counts = [500, 11, 90, 3000, 11, 42, 7]
    segments = [Segment(0, 0, 10, 10, c) for c in counts]
    strokes = plan_strokes(segments, _config())
    drawn = [s.count for s in strokes]
    assert drawn == sorted(c for c in counts if c > 10)
    assert all(a <= b for a, b in zip(drawn, drawn[1:]))


def test_input_not_mutated():
    segments = (Segment(0, 0, 1, 1, 300), Segment(0, 0, 1, 1, 20))
    plan_strokes(segments, _config())
    assert [s.count for s in segments] == [300, 20]


def test_cutoff_is_exclusive():
    segments = [Segment(0, 0, 1, 1, 10), Segment(0, 0, 1, 1, 10.5)]
    strokes = plan_strokes(segments, _config())
    assert [s.count for s in strokes] == [10.5]


def test_nothing_above_cutoff():
    segments = [Segment(0, 0, 1, 1, 3), Segment(0, 0, 1, 1, 0)]
    assert plan_strokes(segments, _config()) == []


def test_darker_for_busier_segments():
    segments = [Segment(0, 0, 1, 1, c) for c in (20, 200, 2000)]
    strokes = plan_strokes(segments, _config())
    levels = [s.darkness for s in strokes]
    assert levels[0] > levels[1] > levels[2] == pytest.approx(0.0)


def test_max_width_from_busiest_drawn_segment():
    segments = [Segment(0, 0, 1, 1, 20), Segment(0, 0, 1, 1, 1000)]
    strokes = plan_strokes(segments, _config())
    max_w = segment_width(1000)
    expected = (max_w - segment_width(20)) / (1.5 * max_w)
    assert strokes[0].darkness == pytest.approx(expected)


def test_max_width_from_collection_size():
    """The ``size`` basis scales against the number of loaded segments."""
    segments = [Segment(0, 0, 1, 1, 20)] + [Segment(0, 0, 1, 1, 1)] * 99
    strokes = plan_strokes(segments, _config(max_width_basis="size"))
    max_w = segment_width(100)
    expected = (max_w - segment_width(20)) / (1.5 * max_w)
    assert len(strokes) == 1
    assert strokes[0].darkness == pytest.approx(expected)


def test_non_positive_widths_dropped():
    """With a low cutoff, counts below sqrt(10) would get no visible width."""
    segments = [Segment(0, 0, 1, 1, 2), Segment(0, 0, 1, 1, 0), Segment(0, 0, 1, 1, 40)]
    strokes = plan_strokes(segments, _config(cutoff=-1))
    assert [s.count for s in strokes] == [40]
    assert all(s.width > 0 for s in strokes)


def test_config_defaults():
    config = RenderConfig()
    assert config.window.name == "france"
    assert config.meters_per_pixel == 100
    assert config.cutoff == 10
    assert str(config.input_path) == "edges_dump"
    assert str(config.output_path) == "routes_from_nd.png"
    assert config.canvas_size == (12000, 12000)


@pytest.mark.parametrize("kwargs, message", [
    ({"meters_per_pixel": 0}, "meters_per_pixel"),
    ({"window": MapWindow("flat", 0, 100, 10, 10)}, "Empty map window"),
    ({"max_width_basis": "median"}, "max_width_basis"),
])
def test_config_validation(kwargs, message):
    with pytest.raises(ValueError, match=message):
        _config(**kwargs)
