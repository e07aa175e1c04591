"""
Command: a remote control that triggers appliance actions.

Each button press runs whatever command object is loaded into the remote.
The remote never talks to a Light or Fan directly; the command carries the
receiver and the call to make on it.
"""

import logging
from typing import Protocol, runtime_checkable

from pattern_catalog.narrator import Narrator

logger = logging.getLogger(__name__)


@runtime_checkable
class Command(Protocol):
    def execute(self) -> None:
        ...


class Light:
    def __init__(self, narrator: Narrator | None = None) -> None:
        self.narrator = narrator if narrator is not None else Narrator()
        self.is_on = False

    def turn_on(self) -> None:
        self.is_on = True
        self.narrator.say("Light is ON")

    def turn_off(self) -> None:
        self.is_on = False
        self.narrator.say("Light is OFF")


class Fan:
    def __init__(self, narrator: Narrator | None = None) -> None:
        self.narrator = narrator if narrator is not None else Narrator()
        self.is_running = False

    def start(self) -> None:
        self.is_running = True
        self.narrator.say("Fan is STARTED")

    def stop(self) -> None:
        self.is_running = False
        self.narrator.say("Fan is STOPPED")


class LightOnCommand:
    def __init__(self, light: Light) -> None:
        self.light = light

    def execute(self) -> None:
        self.light.turn_on()


class LightOffCommand:
    def __init__(self, light: Light) -> None:
        self.light = light

    def execute(self) -> None:
        self.light.turn_off()


class FanStartCommand:
    def __init__(self, fan: Fan) -> None:
        self.fan = fan

    def execute(self) -> None:
        self.fan.start()


class FanStopCommand:
    def __init__(self, fan: Fan) -> None:
        self.fan = fan

    def execute(self) -> None:
        self.fan.stop()


class RemoteControl:
    """
    Invoker with a single programmable button.

    Attributes:
        history: Commands executed so far, oldest first
    """

    def __init__(self, narrator: Narrator | None = None) -> None:
        self.narrator = narrator if narrator is not None else Narrator()
        self._command: Command | None = None
        self.history: list[Command] = []

    def set_command(self, command: Command) -> None:
        self._command = command

    def press_button(self) -> None:
        if self._command is None:
            self.narrator.say("No command assigned.")
            return
        logger.debug("Remote executing %s", type(self._command).__name__)
        self._command.execute()
        self.history.append(self._command)


def main(narrator: Narrator | None = None) -> None:
    narrator = narrator if narrator is not None else Narrator()

    # Receivers
    light = Light(narrator)
    fan = Fan(narrator)

    remote = RemoteControl(narrator)

    for command in (
        LightOnCommand(light),
        LightOffCommand(light),
        FanStartCommand(fan),
        FanStopCommand(fan),
    ):
        remote.set_command(command)
        remote.press_button()


if __name__ == "__main__":
    main()
