"""
Abstract Factory: families of GUI widgets per operating system.

A GUIFactory produces a matching button and checkbox. Client code picks a
factory once, by OS family name, and never names a concrete widget class.
"""

import logging
from typing import Protocol, runtime_checkable

from pattern_catalog.exceptions import InvalidArgumentError
from pattern_catalog.narrator import Narrator

logger = logging.getLogger(__name__)


@runtime_checkable
class Button(Protocol):
    def click(self) -> None:
        ...


@runtime_checkable
class Checkbox(Protocol):
    def toggle(self) -> None:
        ...


@runtime_checkable
class GUIFactory(Protocol):
    def create_button(self) -> Button:
        ...

    def create_checkbox(self) -> Checkbox:
        ...


class _Widget:
    def __init__(self, narrator: Narrator) -> None:
        self.narrator = narrator


class WindowsButton(_Widget):
    def click(self) -> None:
        self.narrator.say("Windows Button clicked!")


class WindowsCheckbox(_Widget):
    def toggle(self) -> None:
        self.narrator.say("Windows Checkbox toggled!")


class MacButton(_Widget):
    def click(self) -> None:
        self.narrator.say("Mac Button clicked!")


class MacCheckbox(_Widget):
    def toggle(self) -> None:
        self.narrator.say("Mac Checkbox toggled!")


class WindowsFactory:
    def __init__(self, narrator: Narrator | None = None) -> None:
        self.narrator = narrator if narrator is not None else Narrator()

    def create_button(self) -> Button:
        return WindowsButton(self.narrator)

    def create_checkbox(self) -> Checkbox:
        return WindowsCheckbox(self.narrator)


class MacFactory:
    def __init__(self, narrator: Narrator | None = None) -> None:
        self.narrator = narrator if narrator is not None else Narrator()

    def create_button(self) -> Button:
        return MacButton(self.narrator)

    def create_checkbox(self) -> Checkbox:
        return MacCheckbox(self.narrator)


_FACTORIES: dict[str, type[WindowsFactory] | type[MacFactory]] = {
    "windows": WindowsFactory,
    "mac": MacFactory,
}


def get_factory(os_type: str, narrator: Narrator | None = None) -> GUIFactory:
    """
    Pick the widget factory for an OS family.

    Args:
        os_type: "windows" or "mac", case-insensitive

    Raises:
        InvalidArgumentError: For any other OS family name
    """
    factory_cls = _FACTORIES.get(os_type.lower())
    if factory_cls is None:
        raise InvalidArgumentError(f"Unknown OS type: {os_type}", value=os_type)
    logger.debug("Using %s for %r", factory_cls.__name__, os_type)
    return factory_cls(narrator)


def main(narrator: Narrator | None = None) -> None:
    narrator = narrator if narrator is not None else Narrator()

    factory = get_factory("windows", narrator)
    factory.create_button().click()
    factory.create_checkbox().toggle()

    try:
        get_factory("beos", narrator)
    except InvalidArgumentError as e:
        narrator.say(str(e))


if __name__ == "__main__":
    main()
