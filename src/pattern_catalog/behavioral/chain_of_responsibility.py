"""
Chain of Responsibility: log messages routed through a handler chain.

A (message, level) pair enters at the head of a singly linked chain.
Each handler either consumes the message, when its predicate accepts the
level, or forwards it to its successor. The first accepting handler wins:
exactly one handler writes, or none does and the message is dropped at
the end of the chain.

Two families of handlers share the same routing:
- Severity handlers: DebugHandler, InfoHandler, CriticalHandler
- Destination handlers: ConsoleHandler, FileHandler, ErrorHandler

Example:
    ```python
    head = build_chain(DebugHandler(), InfoHandler(), CriticalHandler())
    head.handle("Variable x value is 42.", 1)  # prints "[DEBUG] Variable x value is 42."
    ```
"""

import logging
from abc import ABC, abstractmethod

from pattern_catalog.exceptions import InvalidArgumentError
from pattern_catalog.narrator import Narrator

logger = logging.getLogger(__name__)

DEBUG = 1
INFO = 2
CRITICAL = 3


class LogHandler(ABC):
    """
    One link in a log-handling chain.

    Subclasses decide which level they accept and how the line looks;
    routing lives here so every handler forwards the same way.
    """

    accepts: int

    def __init__(self, narrator: Narrator | None = None) -> None:
        self.narrator = narrator if narrator is not None else Narrator()
        self._next: LogHandler | None = None

    @property
    def successor(self) -> "LogHandler | None":
        return self._next

    def set_next(self, handler: "LogHandler") -> "LogHandler":
        """
        Link a successor.

        Returns:
            The successor, so links can be chained fluently
        """
        self._next = handler
        return handler

    def handle(self, message: str, level: int) -> bool:
        """
        Consume the message or pass it down the chain.

        Args:
            message: Text to log
            level: Severity level, a small positive integer

        Returns:
            True if some handler in the chain wrote the message
        """
        if level < 1:
            raise InvalidArgumentError(f"Log level must be positive, got {level}", value=level)

        if self.can_handle(level):
            logger.debug("%s accepted level %d", type(self).__name__, level)
            self.narrator.say(self.format(message))
            return True
        if self._next is not None:
            return self._next.handle(message, level)

        logger.debug("No handler accepted level %d; message dropped", level)
        return False

    def can_handle(self, level: int) -> bool:
        return level == self.accepts

    @abstractmethod
    def format(self, message: str) -> str:
        """Render the line this handler writes."""


class DebugHandler(LogHandler):
    accepts = DEBUG

    def format(self, message: str) -> str:
        return f"[DEBUG] {message}"


class InfoHandler(LogHandler):
    accepts = INFO

    def format(self, message: str) -> str:
        return f"[INFO] {message}"


class CriticalHandler(LogHandler):
    accepts = CRITICAL

    def format(self, message: str) -> str:
        return f"[CRITICAL] {message}"


class ConsoleHandler(LogHandler):
    accepts = DEBUG

    def format(self, message: str) -> str:
        return f"Console Logger: {message}"


class FileHandler(LogHandler):
    accepts = INFO

    def format(self, message: str) -> str:
        return f"File Logger: {message}"


class ErrorHandler(LogHandler):
    accepts = CRITICAL

    def format(self, message: str) -> str:
        return f"Error Logger: {message}"


def build_chain(*handlers: LogHandler) -> LogHandler:
    """
    Link handlers in the given order.

    Args:
        *handlers: Handlers from head to tail

    Returns:
        The head of the chain

    Raises:
        InvalidArgumentError: If no handlers are given
    """
    if not handlers:
        raise InvalidArgumentError("A handler chain needs at least one handler")

    for current, successor in zip(handlers, handlers[1:]):
        current.set_next(successor)
    return handlers[0]


def main(narrator: Narrator | None = None) -> None:
    narrator = narrator if narrator is not None else Narrator()

    severity = build_chain(
        DebugHandler(narrator),
        InfoHandler(narrator),
        CriticalHandler(narrator),
    )
    severity.handle("System initialized successfully.", INFO)
    severity.handle("Variable x value is 42.", DEBUG)
    severity.handle("Database connection failed!", CRITICAL)

    narrator.blank()

    destinations = build_chain(
        ConsoleHandler(narrator),
        FileHandler(narrator),
        ErrorHandler(narrator),
    )
    destinations.handle("This is a Debug message", DEBUG)
    destinations.handle("This is an Info message", INFO)
    destinations.handle("This is an Error message", CRITICAL)


if __name__ == "__main__":
    main()
