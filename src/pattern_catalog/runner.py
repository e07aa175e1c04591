"""
Demo runner for one or many catalog entries.

DemoRunner prints a header rule for each demo and then hands the shared
narrator to the demo's driver. It knows nothing about individual
patterns; everything it runs comes from DemoDefinition objects.
"""

import logging
from typing import Iterable

from pattern_catalog.narrator import Narrator
from pattern_catalog.registry import DemoDefinition

logger = logging.getLogger(__name__)


class DemoRunner:
    """
    Runs demos in order on one narrator.

    Attributes:
        narrator: Destination for headers and demo output
    """

    def __init__(self, narrator: Narrator | None = None) -> None:
        self.narrator = narrator if narrator is not None else Narrator()

    def run(self, definition: DemoDefinition) -> None:
        """Run one demo under a header."""
        logger.debug("Running demo %s", definition.name)
        self.narrator.heading(f"{definition.title} ({definition.category.value})")
        definition.entrypoint(self.narrator)
        self.narrator.console.print()

    def run_all(self, definitions: Iterable[DemoDefinition]) -> int:
        """
        Run demos one after another.

        Returns:
            Number of demos run
        """
        count = 0
        for definition in definitions:
            self.run(definition)
            count += 1
        logger.debug("Ran %d demos", count)
        return count
