"""Tests for the beverage recipe demo."""

from unittest.mock import MagicMock, call

from pattern_catalog.behavioral.template_method import Beverage, BrewingSteps, Coffee, Tea, main


class TestBeverage:
    """Tests for the fixed recipe skeleton."""

    def test_tea_recipe_order(self, narrator):
        """Tea follows boil, steep, pour, lemon."""
        Beverage(Tea(), narrator).prepare_recipe()

        assert narrator.lines == ["Boiling water", "Steeping the tea", "Pouring into cup", "Adding lemon"]

    def test_coffee_recipe_order(self, narrator):
        """Coffee follows boil, drip, pour, sugar and milk."""
        Beverage(Coffee(), narrator).prepare_recipe()

        assert narrator.lines == [
            "Boiling water",
            "Dripping coffee through filter",
            "Pouring into cup",
            "Adding sugar and milk",
        ]

    def test_steps_called_once_in_order(self, narrator):
        """brew() runs before add_condiments(), each exactly once."""
        steps = MagicMock()

        Beverage(steps, narrator).prepare_recipe()

        assert steps.method_calls == [call.brew(narrator), call.add_condiments(narrator)]

    def test_steps_satisfy_protocol(self):
        assert isinstance(Tea(), BrewingSteps)
        assert isinstance(Coffee(), BrewingSteps)


class TestDemo:
    def test_main_prepares_both(self, narrator):
        main(narrator)

        lines = narrator.lines
        assert lines[0] == "Preparing tea:"
        assert "" in lines
        assert lines[lines.index("") + 1] == "Preparing coffee:"
        assert len(lines) == 11
