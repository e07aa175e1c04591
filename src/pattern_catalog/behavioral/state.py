"""
State: a coin-operated vending machine.

The machine holds a single mutable reference to its current state. Each
state is a stateless strategy object shared by every machine; it receives
the machine it acts on and reassigns the machine's state when a transition
applies. Calls that do not fit the current state print a prompt and leave
the state unchanged.

Transitions:
    NoCoinInserted --insert_coin--> CoinInserted
    CoinInserted   --press_button--> Dispensing
    Dispensing     --dispense-->    NoCoinInserted
"""

import logging
from typing import Protocol

from pattern_catalog.narrator import Narrator

logger = logging.getLogger(__name__)


class VendingState(Protocol):
    """Behavior of the machine while in one state."""

    name: str

    def insert_coin(self, machine: "VendingMachine") -> None:
        ...

    def press_button(self, machine: "VendingMachine") -> None:
        ...

    def dispense(self, machine: "VendingMachine") -> None:
        ...


class NoCoinInsertedState:
    name = "NoCoinInserted"

    def insert_coin(self, machine: "VendingMachine") -> None:
        machine.narrator.say("Coin inserted.")
        machine.transition_to(COIN_INSERTED)

    def press_button(self, machine: "VendingMachine") -> None:
        machine.narrator.say("Please insert a coin first.")

    def dispense(self, machine: "VendingMachine") -> None:
        machine.narrator.say("Insert a coin before dispensing.")


class CoinInsertedState:
    name = "CoinInserted"

    def insert_coin(self, machine: "VendingMachine") -> None:
        machine.narrator.say("Coin already inserted.")

    def press_button(self, machine: "VendingMachine") -> None:
        machine.narrator.say("Button pressed. Dispensing item...")
        machine.transition_to(DISPENSING)

    def dispense(self, machine: "VendingMachine") -> None:
        machine.narrator.say("Press the button to dispense.")


class DispensingState:
    name = "Dispensing"

    def insert_coin(self, machine: "VendingMachine") -> None:
        machine.narrator.say("Wait! Currently dispensing an item.")

    def press_button(self, machine: "VendingMachine") -> None:
        machine.narrator.say("Already dispensing an item.")

    def dispense(self, machine: "VendingMachine") -> None:
        machine.narrator.say("Item dispensed.")
        machine.transition_to(NO_COIN_INSERTED)


# Shared state instances; states carry no per-machine data
NO_COIN_INSERTED: VendingState = NoCoinInsertedState()
COIN_INSERTED: VendingState = CoinInsertedState()
DISPENSING: VendingState = DispensingState()


class VendingMachine:
    """
    Context object that delegates every operation to its current state.

    Attributes:
        state: Current state, starts at NO_COIN_INSERTED
        narrator: Where state objects print their messages
    """

    def __init__(self, narrator: Narrator | None = None) -> None:
        self.narrator = narrator if narrator is not None else Narrator()
        self.state: VendingState = NO_COIN_INSERTED

    def insert_coin(self) -> None:
        self.state.insert_coin(self)

    def press_button(self) -> None:
        self.state.press_button(self)

    def dispense(self) -> None:
        self.state.dispense(self)

    def transition_to(self, state: VendingState) -> None:
        logger.debug("Vending machine: %s -> %s", self.state.name, state.name)
        self.state = state


def main(narrator: Narrator | None = None) -> None:
    machine = VendingMachine(narrator)

    machine.press_button()  # no coin yet
    machine.insert_coin()
    machine.press_button()
    machine.insert_coin()  # busy dispensing
    machine.dispense()


if __name__ == "__main__":
    main()
