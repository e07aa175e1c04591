"""Prototype: new objects copied from an existing one."""

import copy
from dataclasses import dataclass

from pattern_catalog.narrator import Narrator


@dataclass
class Prototype:
    name: str
    value: int

    def clone(self) -> "Prototype":
        """Return an independent copy of this object."""
        return copy.deepcopy(self)

    def __str__(self) -> str:
        return f"Prototype [name={self.name}, value={self.value}]"


def main(narrator: Narrator | None = None) -> None:
    narrator = narrator if narrator is not None else Narrator()

    original = Prototype("Original", 42)

    clone = original.clone()
    clone.name = "Clone"
    clone.value = 99

    narrator.say(f"Original Object: {original}")
    narrator.say(f"Cloned Object: {clone}")


if __name__ == "__main__":
    main()
