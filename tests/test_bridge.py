"""Tests for the shape/color bridge."""

import pytest

from pattern_catalog.structural.bridge import BlueColor, Circle, Color, RedColor, Square, main


class TestBridge:
    @pytest.mark.parametrize(
        "shape_cls,color,expected",
        [
            (Circle, RedColor(), "Drawing Circle with Applying Red Color"),
            (Circle, BlueColor(), "Drawing Circle with Applying Blue Color"),
            (Square, RedColor(), "Drawing Square with Applying Red Color"),
            (Square, BlueColor(), "Drawing Square with Applying Blue Color"),
        ],
    )
    def test_any_shape_with_any_color(self, narrator, shape_cls, color, expected):
        """Every combination works without a dedicated class."""
        shape_cls(color, narrator).draw()

        assert narrator.lines == [expected]

    def test_colors_satisfy_protocol(self):
        assert isinstance(RedColor(), Color)
        assert isinstance(BlueColor(), Color)


class TestDemo:
    def test_main_output(self, narrator):
        main(narrator)

        assert narrator.lines == [
            "Drawing Circle with Applying Red Color",
            "Drawing Square with Applying Blue Color",
        ]
