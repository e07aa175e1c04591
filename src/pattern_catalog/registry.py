"""
Demo registry for runtime discovery of pattern demonstrations.

This module provides:
- DemoDefinition: Name, category and driver of one demo
- DemoRegistry: Ordered lookup of demos by name or category
- default_registry: The full catalog in display order

The CLI and runner only ever talk to the registry; they never import a
pattern module by name.

Example:
    ```python
    registry = default_registry()
    for demo in registry.get_definitions(PatternCategory.STRUCTURAL):
        print(f"{demo.name}: {demo.summary}")
    ```
"""

from typing import Callable

from pydantic import BaseModel, ConfigDict, Field

from pattern_catalog.exceptions import DemoNotFoundError, InvalidArgumentError
from pattern_catalog.types import PatternCategory


class DemoDefinition(BaseModel):
    """
    Complete definition of a runnable demo.

    Attributes:
        name: Unique kebab-case identifier used on the command line
        title: Display title (e.g., "Chain of Responsibility")
        category: Catalog category the pattern belongs to
        summary: One-line description of what the demo shows
        entrypoint: The module's main(narrator=None) driver
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., pattern=r"^[a-z][a-z0-9-]*$", description="Unique demo name")
    title: str = Field(..., description="Display title")
    category: PatternCategory = Field(..., description="Pattern category")
    summary: str = Field(default="", description="One-line description")
    entrypoint: Callable[..., None] = Field(..., description="Demo driver")


class DemoRegistry:
    """
    Registry of demos, kept in registration order.

    Example:
        ```python
        registry = DemoRegistry()
        registry.register(definition)
        registry.get("state")
        registry.list_names()  # ["state"]
        ```
    """

    def __init__(self, definitions: list[DemoDefinition] | None = None) -> None:
        self._definitions: dict[str, DemoDefinition] = {}
        for definition in definitions or []:
            self.register(definition)

    def register(self, definition: DemoDefinition) -> None:
        """
        Add a demo.

        Raises:
            InvalidArgumentError: If a demo with the same name is registered
        """
        if definition.name in self._definitions:
            raise InvalidArgumentError(
                f"Demo '{definition.name}' is already registered", value=definition.name
            )
        self._definitions[definition.name] = definition

    def get(self, name: str) -> DemoDefinition:
        """
        Find a demo by name.

        Raises:
            DemoNotFoundError: If no demo has that name
        """
        try:
            return self._definitions[name]
        except KeyError:
            raise DemoNotFoundError(name, self.list_names()) from None

    def get_definitions(self, category: PatternCategory | None = None) -> list[DemoDefinition]:
        """All demos, or only those in one category, in registration order."""
        return [
            d for d in self._definitions.values() if category is None or d.category == category
        ]

    def list_names(self) -> list[str]:
        return list(self._definitions.keys())

    def __len__(self) -> int:
        return len(self._definitions)

    def __contains__(self, name: object) -> bool:
        return name in self._definitions


def default_registry() -> DemoRegistry:
    """Build the registry holding every demo in the catalog."""
    from pattern_catalog.behavioral import (
        chain_of_responsibility,
        command,
        null_object,
        observer,
        state,
        strategy,
        template_method,
        visitor,
    )
    from pattern_catalog.creational import abstract_factory, builder, factory, prototype, singleton
    from pattern_catalog.structural import adapter, bridge, composite, decorator, facade, proxy

    behavioral = PatternCategory.BEHAVIORAL
    creational = PatternCategory.CREATIONAL
    structural = PatternCategory.STRUCTURAL

    return DemoRegistry(
        [
            DemoDefinition(
                name="chain-of-responsibility",
                title="Chain of Responsibility",
                category=behavioral,
                summary="Log messages routed to the first handler that accepts their level",
                entrypoint=chain_of_responsibility.main,
            ),
            DemoDefinition(
                name="command",
                title="Command",
                category=behavioral,
                summary="Remote control buttons bound to light and fan commands",
                entrypoint=command.main,
            ),
            DemoDefinition(
                name="null-object",
                title="Null Object",
                category=behavioral,
                summary="Customers without an email address that quietly do nothing",
                entrypoint=null_object.main,
            ),
            DemoDefinition(
                name="observer",
                title="Observer",
                category=behavioral,
                summary="Stock ticker pushing price changes to subscribers",
                entrypoint=observer.main,
            ),
            DemoDefinition(
                name="state",
                title="State",
                category=behavioral,
                summary="Vending machine switching between coin and dispensing states",
                entrypoint=state.main,
            ),
            DemoDefinition(
                name="strategy",
                title="Strategy",
                category=behavioral,
                summary="Payment methods swapped at runtime",
                entrypoint=strategy.main,
            ),
            DemoDefinition(
                name="template-method",
                title="Template Method",
                category=behavioral,
                summary="Fixed beverage recipe with pluggable brewing steps",
                entrypoint=template_method.main,
            ),
            DemoDefinition(
                name="visitor",
                title="Visitor",
                category=behavioral,
                summary="Area and description operations over a closed set of shapes",
                entrypoint=visitor.main,
            ),
            DemoDefinition(
                name="abstract-factory",
                title="Abstract Factory",
                category=creational,
                summary="Matching widget families per operating system",
                entrypoint=abstract_factory.main,
            ),
            DemoDefinition(
                name="builder",
                title="Builder",
                category=creational,
                summary="Step-by-step construction of an immutable product",
                entrypoint=builder.main,
            ),
            DemoDefinition(
                name="factory",
                title="Factory",
                category=creational,
                summary="Shapes created from a type name",
                entrypoint=factory.main,
            ),
            DemoDefinition(
                name="prototype",
                title="Prototype",
                category=creational,
                summary="Independent copies of an existing object",
                entrypoint=prototype.main,
            ),
            DemoDefinition(
                name="singleton",
                title="Singleton",
                category=creational,
                summary="One lazily created, thread-safe instance",
                entrypoint=singleton.main,
            ),
            DemoDefinition(
                name="adapter",
                title="Adapter",
                category=structural,
                summary="Legacy service exposed through a new interface",
                entrypoint=adapter.main,
            ),
            DemoDefinition(
                name="bridge",
                title="Bridge",
                category=structural,
                summary="Shapes and colors combined without a class per pairing",
                entrypoint=bridge.main,
            ),
            DemoDefinition(
                name="composite",
                title="Composite",
                category=structural,
                summary="Files and nested folders through one interface",
                entrypoint=composite.main,
            ),
            DemoDefinition(
                name="decorator",
                title="Decorator",
                category=structural,
                summary="Coffee with stackable condiments",
                entrypoint=decorator.main,
            ),
            DemoDefinition(
                name="facade",
                title="Facade",
                category=structural,
                summary="One call to drive a home theater",
                entrypoint=facade.main,
            ),
            DemoDefinition(
                name="proxy",
                title="Proxy",
                category=structural,
                summary="Images loaded on first display",
                entrypoint=proxy.main,
            ),
        ]
    )
