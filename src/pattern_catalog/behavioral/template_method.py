"""
Template Method: a fixed beverage recipe with pluggable steps.

Beverage.prepare_recipe() owns the algorithm skeleton: boil water, brew,
pour, add condiments. The two steps that vary come from a BrewingSteps
object the beverage holds, rather than from a subclass overriding hooks.
"""

from typing import Protocol, runtime_checkable

from pattern_catalog.narrator import Narrator


@runtime_checkable
class BrewingSteps(Protocol):
    """The recipe steps that differ between beverages."""

    def brew(self, narrator: Narrator) -> None:
        ...

    def add_condiments(self, narrator: Narrator) -> None:
        ...


class Tea:
    def brew(self, narrator: Narrator) -> None:
        narrator.say("Steeping the tea")

    def add_condiments(self, narrator: Narrator) -> None:
        narrator.say("Adding lemon")


class Coffee:
    def brew(self, narrator: Narrator) -> None:
        narrator.say("Dripping coffee through filter")

    def add_condiments(self, narrator: Narrator) -> None:
        narrator.say("Adding sugar and milk")


class Beverage:
    """
    A beverage made by the shared recipe.

    Args:
        steps: Supplies the brew and condiment steps
        narrator: Where each step is reported
    """

    def __init__(self, steps: BrewingSteps, narrator: Narrator | None = None) -> None:
        self.steps = steps
        self.narrator = narrator if narrator is not None else Narrator()

    def prepare_recipe(self) -> None:
        """Run the recipe; step order is fixed."""
        self._boil_water()
        self.steps.brew(self.narrator)
        self._pour_in_cup()
        self.steps.add_condiments(self.narrator)

    def _boil_water(self) -> None:
        self.narrator.say("Boiling water")

    def _pour_in_cup(self) -> None:
        self.narrator.say("Pouring into cup")


def main(narrator: Narrator | None = None) -> None:
    narrator = narrator if narrator is not None else Narrator()

    narrator.say("Preparing tea:")
    Beverage(Tea(), narrator).prepare_recipe()

    narrator.blank()
    narrator.say("Preparing coffee:")
    Beverage(Coffee(), narrator).prepare_recipe()


if __name__ == "__main__":
    main()
