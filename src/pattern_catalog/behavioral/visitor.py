"""
Visitor: operations over a closed set of shapes.

The shape set (Circle, Rectangle, Triangle) is fixed; new operations are
added as visitors without touching the shapes. Each shape's accept()
calls the visitor method for its own type, and returns whatever the
visitor returns.
"""

import math
from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar

from pattern_catalog.narrator import Narrator

R = TypeVar("R", covariant=True)


class ShapeVisitor(Protocol[R]):
    def visit_circle(self, circle: "Circle") -> R:
        ...

    def visit_rectangle(self, rectangle: "Rectangle") -> R:
        ...

    def visit_triangle(self, triangle: "Triangle") -> R:
        ...


@dataclass(frozen=True)
class Circle:
    radius: float = 5.0

    def accept(self, visitor: ShapeVisitor[R]) -> R:
        return visitor.visit_circle(self)


@dataclass(frozen=True)
class Rectangle:
    length: float = 4.0
    width: float = 6.0

    def accept(self, visitor: ShapeVisitor[R]) -> R:
        return visitor.visit_rectangle(self)


@dataclass(frozen=True)
class Triangle:
    base: float = 4.0
    height: float = 3.0

    def accept(self, visitor: ShapeVisitor[R]) -> R:
        return visitor.visit_triangle(self)


Shape = Circle | Rectangle | Triangle


class _NarratingVisitor(Generic[R]):
    def __init__(self, narrator: Narrator | None = None) -> None:
        self.narrator = narrator if narrator is not None else Narrator()


class AreaVisitor(_NarratingVisitor[float]):
    """Prints and returns each shape's area."""

    def visit_circle(self, circle: Circle) -> float:
        area = math.pi * circle.radius * circle.radius
        self.narrator.say(f"Area of Circle: {area}")
        return area

    def visit_rectangle(self, rectangle: Rectangle) -> float:
        area = rectangle.length * rectangle.width
        self.narrator.say(f"Area of Rectangle: {area}")
        return area

    def visit_triangle(self, triangle: Triangle) -> float:
        area = 0.5 * triangle.base * triangle.height
        self.narrator.say(f"Area of Triangle: {area}")
        return area


class PrintVisitor(_NarratingVisitor[None]):
    def visit_circle(self, circle: Circle) -> None:
        self.narrator.say("This is a Circle.")

    def visit_rectangle(self, rectangle: Rectangle) -> None:
        self.narrator.say("This is a Rectangle.")

    def visit_triangle(self, triangle: Triangle) -> None:
        self.narrator.say("This is a Triangle.")


def main(narrator: Narrator | None = None) -> None:
    narrator = narrator if narrator is not None else Narrator()

    shapes: list[Shape] = [Circle(), Rectangle(), Triangle()]

    area_visitor = AreaVisitor(narrator)
    print_visitor = PrintVisitor(narrator)

    for shape in shapes:
        shape.accept(area_visitor)
    for shape in shapes:
        shape.accept(print_visitor)


if __name__ == "__main__":
    main()
