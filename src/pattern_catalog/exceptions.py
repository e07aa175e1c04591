"""
Exception classes shared by the pattern demonstrations.

This module defines the three error kinds the catalog raises:
- InvalidArgumentError: An unrecognized category string or out-of-range value
- IllegalStateError: A construction path invoked when it must not be
- UnsupportedOperationError: An operation the object refuses outright

Each exception also inherits from the closest builtin (ValueError,
RuntimeError, NotImplementedError) so callers that only know the builtin
still catch it. Context data is kept in attributes for error handling.
"""

from typing import Any


class PatternCatalogError(Exception):
    """Base class for every error raised by the catalog."""


class InvalidArgumentError(PatternCatalogError, ValueError):
    """
    Raised when an argument falls outside the accepted closed set.

    Demo drivers are expected to catch this and print the message
    rather than let the process crash.

    Attributes:
        value: The rejected argument value
    """

    def __init__(self, message: str, value: Any = None) -> None:
        self.value = value
        super().__init__(message)


class IllegalStateError(PatternCatalogError, RuntimeError):
    """
    Raised when an object is driven through a path its state forbids.

    Used for the singleton's guarded construction path: reaching it
    outside the accessor, or after the instance exists, is a
    programming error.
    """


class UnsupportedOperationError(PatternCatalogError, NotImplementedError):
    """
    Raised when an operation is rejected by design of the object.

    Attributes:
        operation: Name of the refused operation
    """

    def __init__(self, operation: str, message: str) -> None:
        self.operation = operation
        super().__init__(message)


class DemoNotFoundError(InvalidArgumentError):
    """
    Raised when a demo name is not present in the registry.

    Attributes:
        name: The requested demo name
        available: Names the registry does know about
    """

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = available
        super().__init__(
            f"Unknown demo '{name}'. Available: {', '.join(available)}",
            value=name,
        )
