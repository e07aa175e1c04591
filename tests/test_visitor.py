"""Tests for the shape visitor demo."""

import math

import pytest

from pattern_catalog.behavioral.visitor import AreaVisitor, Circle, PrintVisitor, Rectangle, Triangle, main


class TestAreaVisitor:
    """Tests for area computation."""

    def test_default_areas(self, narrator):
        """Default shapes have the demo dimensions."""
        visitor = AreaVisitor(narrator)

        assert Circle().accept(visitor) == pytest.approx(math.pi * 25)
        assert Rectangle().accept(visitor) == 24.0
        assert Triangle().accept(visitor) == 6.0

    def test_area_lines(self, narrator):
        visitor = AreaVisitor(narrator)
        Rectangle(2, 3).accept(visitor)
        Triangle(base=10, height=2).accept(visitor)

        assert narrator.lines == ["Area of Rectangle: 6", "Area of Triangle: 10.0"]


class TestPrintVisitor:
    def test_describes_each_shape(self, narrator):
        visitor = PrintVisitor(narrator)
        for shape in (Circle(), Rectangle(), Triangle()):
            assert shape.accept(visitor) is None

        assert narrator.lines == ["This is a Circle.", "This is a Rectangle.", "This is a Triangle."]


class TestDemo:
    def test_main_output(self, narrator):
        main(narrator)

        assert narrator.lines == [
            f"Area of Circle: {math.pi * 5.0 * 5.0}",
            "Area of Rectangle: 24.0",
            "Area of Triangle: 6.0",
            "This is a Circle.",
            "This is a Rectangle.",
            "This is a Triangle.",
        ]
