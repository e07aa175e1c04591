"""Factory Method: create shapes from a type name."""

from typing import Protocol, runtime_checkable

from pattern_catalog.exceptions import InvalidArgumentError
from pattern_catalog.narrator import Narrator


@runtime_checkable
class Shape(Protocol):
    def draw(self) -> None:
        ...


class Circle:
    def __init__(self, narrator: Narrator | None = None) -> None:
        self.narrator = narrator if narrator is not None else Narrator()

    def draw(self) -> None:
        self.narrator.say("Drawing a Circle")


class Rectangle:
    def __init__(self, narrator: Narrator | None = None) -> None:
        self.narrator = narrator if narrator is not None else Narrator()

    def draw(self) -> None:
        self.narrator.say("Drawing a Rectangle")


def get_shape(shape_type: str | None, narrator: Narrator | None = None) -> Shape | None:
    """
    Create a shape by name.

    Args:
        shape_type: "circle" or "rectangle", case-insensitive

    Returns:
        The new shape, or None when shape_type is None

    Raises:
        InvalidArgumentError: For any other shape name
    """
    if shape_type is None:
        return None

    kind = shape_type.lower()
    if kind == "circle":
        return Circle(narrator)
    if kind == "rectangle":
        return Rectangle(narrator)
    raise InvalidArgumentError(f"Unknown shape type: {shape_type}", value=shape_type)


def main(narrator: Narrator | None = None) -> None:
    narrator = narrator if narrator is not None else Narrator()

    for name in ("circle", "rectangle"):
        shape = get_shape(name, narrator)
        if shape is not None:
            shape.draw()

    try:
        get_shape("triangle", narrator)
    except InvalidArgumentError as e:
        narrator.say(str(e))


if __name__ == "__main__":
    main()
