"""
Shared types for the demo catalog.

This module defines:
- PatternCategory: Enum of the Gang-of-Four catalog categories
- DemoEntrypoint: Protocol for a demo's main-style driver

Per project patterns:
- Use str enum so categories round-trip through CLI options
"""

from enum import Enum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from pattern_catalog.narrator import Narrator


class PatternCategory(str, Enum):
    """
    Gang-of-Four pattern categories.

    Every demo belongs to exactly one category.
    """

    BEHAVIORAL = "behavioral"
    """How objects communicate and divide responsibility."""

    CREATIONAL = "creational"
    """How objects get constructed."""

    STRUCTURAL = "structural"
    """How objects are composed into larger structures."""


class DemoEntrypoint(Protocol):
    """
    Protocol for a demo driver.

    A driver runs a fixed script of operations and prints through the
    given narrator, or through a default one when called with no arguments.
    """

    def __call__(self, narrator: "Narrator | None" = None) -> None:
        ...
