"""
Bridge: shapes and colors vary independently.

A Shape (the abstraction) holds a Color (the implementor). Any shape can be
paired with any color without a class per combination.
"""

from typing import Protocol, runtime_checkable

from pattern_catalog.narrator import Narrator


@runtime_checkable
class Color(Protocol):
    def apply_color(self) -> str:
        ...


class RedColor:
    def apply_color(self) -> str:
        return "Applying Red Color"


class BlueColor:
    def apply_color(self) -> str:
        return "Applying Blue Color"


class Shape:
    kind = "Shape"

    def __init__(self, color: Color, narrator: Narrator | None = None) -> None:
        self.color = color
        self.narrator = narrator if narrator is not None else Narrator()

    def draw(self) -> None:
        self.narrator.say(f"Drawing {self.kind} with {self.color.apply_color()}")


class Circle(Shape):
    kind = "Circle"


class Square(Shape):
    kind = "Square"


def main(narrator: Narrator | None = None) -> None:
    narrator = narrator if narrator is not None else Narrator()

    red_circle = Circle(RedColor(), narrator)
    blue_square = Square(BlueColor(), narrator)

    red_circle.draw()
    blue_square.draw()


if __name__ == "__main__":
    main()
