"""Tests for the coffee decorators."""

import itertools

import pytest

from pattern_catalog.structural.decorator import (
    MILK,
    SUGAR,
    Coffee,
    CoffeeDecorator,
    Condiment,
    SimpleCoffee,
    describe,
    main,
    with_milk,
    with_sugar,
)


class TestComposition:
    def test_base_coffee(self):
        coffee = SimpleCoffee()

        assert coffee.description == "Simple Coffee"
        assert coffee.cost == 50.0

    def test_layers_concatenate_and_sum(self):
        """N layers give the concatenated description and summed cost."""
        coffee = with_sugar(with_milk(with_milk(SimpleCoffee())))

        assert coffee.description == "Simple Coffee, Milk, Milk, Sugar"
        assert coffee.cost == 50.0 + 10.0 + 10.0 + 5.0

    @pytest.mark.parametrize(
        "order", list(itertools.permutations([with_milk, with_sugar, with_milk]))
    )
    def test_cost_independent_of_wrap_order(self, order):
        coffee: Coffee = SimpleCoffee()
        for wrap in order:
            coffee = wrap(coffee)

        assert coffee.cost == 75.0
        assert sorted(coffee.description.split(", ")[1:]) == ["Milk", "Milk", "Sugar"]

    def test_decorator_owns_wrapped_coffee(self):
        """A decorator holds the coffee it wraps rather than subclassing it."""
        base = SimpleCoffee()
        decorated = CoffeeDecorator(base, MILK)

        assert decorated.coffee is base
        assert not isinstance(decorated, SimpleCoffee)
        assert isinstance(decorated, Coffee)

    def test_custom_condiment(self):
        coffee = CoffeeDecorator(SimpleCoffee(), Condiment("Caramel", 12.5))

        assert describe(coffee) == "Simple Coffee, Caramel -> Rs. 62.5"

    def test_presets(self):
        assert MILK == Condiment("Milk", 10.0)
        assert SUGAR == Condiment("Sugar", 5.0)


class TestDemo:
    def test_main_output(self, narrator):
        main(narrator)

        assert narrator.lines == [
            "Simple Coffee -> Rs. 50.0",
            "Simple Coffee, Milk -> Rs. 60.0",
            "Simple Coffee, Milk, Sugar -> Rs. 65.0",
        ]
