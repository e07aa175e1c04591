"""
Decorator: coffee with stackable condiments.

A CoffeeDecorator wraps another Coffee and adds exactly one Condiment.
Decorators nest to any depth; the description is every layer's text
joined in wrap order and the cost is the base plus every increment.
Wrapping is composition: a decorator owns the coffee it wraps and
forwards to it, it does not subclass it.

Example:
    ```python
    coffee = with_sugar(with_milk(SimpleCoffee()))
    coffee.description  # "Simple Coffee, Milk, Sugar"
    coffee.cost         # 65.0
    ```
"""

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from pattern_catalog.narrator import Narrator


@runtime_checkable
class Coffee(Protocol):
    @property
    def description(self) -> str:
        ...

    @property
    def cost(self) -> float:
        ...


class SimpleCoffee:
    @property
    def description(self) -> str:
        return "Simple Coffee"

    @property
    def cost(self) -> float:
        return 50.0


@dataclass(frozen=True)
class Condiment:
    name: str
    cost: float


MILK = Condiment("Milk", 10.0)
SUGAR = Condiment("Sugar", 5.0)


class CoffeeDecorator:
    """
    A coffee plus one condiment.

    Args:
        coffee: The coffee being wrapped
        condiment: What this layer adds
    """

    def __init__(self, coffee: Coffee, condiment: Condiment) -> None:
        self.coffee = coffee
        self.condiment = condiment

    @property
    def description(self) -> str:
        return f"{self.coffee.description}, {self.condiment.name}"

    @property
    def cost(self) -> float:
        return self.coffee.cost + self.condiment.cost


def with_milk(coffee: Coffee) -> CoffeeDecorator:
    return CoffeeDecorator(coffee, MILK)


def with_sugar(coffee: Coffee) -> CoffeeDecorator:
    return CoffeeDecorator(coffee, SUGAR)


def describe(coffee: Coffee) -> str:
    return f"{coffee.description} -> Rs. {coffee.cost}"


def main(narrator: Narrator | None = None) -> None:
    narrator = narrator if narrator is not None else Narrator()

    coffee: Coffee = SimpleCoffee()
    narrator.say(describe(coffee))

    coffee = with_milk(coffee)
    narrator.say(describe(coffee))

    coffee = with_sugar(coffee)
    narrator.say(describe(coffee))


if __name__ == "__main__":
    main()
