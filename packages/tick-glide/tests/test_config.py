"""Tests for TweenableOptions."""
import pytest

from tick_glide import TweenableOptions


def test_defaults():
    options = TweenableOptions()
    assert options.fps == 30
    assert options.easing == "linear"
    assert options.duration == 500


def test_interval():
    assert TweenableOptions(fps=20).interval == 50


def test_is_frozen():
    options = TweenableOptions()
    with pytest.raises(AttributeError):
        options.fps = 60


@pytest.mark.parametrize("fps", [0, -10])
def test_non_positive_fps_raises(fps):
    with pytest.raises(ValueError):
        TweenableOptions(fps=fps)


def test_non_positive_duration_raises():
    with pytest.raises(ValueError):
        TweenableOptions(duration=0)


class TestBuild:
    """Test normalisation of the accepted option shapes."""

    def test_none_gives_defaults(self):
        assert TweenableOptions.build() == TweenableOptions()

    def test_mapping_keeps_unspecified_defaults(self):
        options = TweenableOptions.build({"fps": 60})
        assert options == TweenableOptions(fps=60, easing="linear", duration=500)

    def test_none_values_are_unspecified(self):
        options = TweenableOptions.build({"fps": None, "duration": 250})
        assert options.fps == 30
        assert options.duration == 250

    def test_overrides_win_over_options(self):
        base = TweenableOptions(fps=10, easing="ease_in")
        options = TweenableOptions.build(base, easing="ease_out")
        assert options == TweenableOptions(fps=10, easing="ease_out")

    def test_unknown_key_raises(self):
        with pytest.raises(TypeError):
            TweenableOptions.build({"frame_rate": 60})
