"""
Proxy: defer loading an image until it is first displayed.

RealImage loads from "disk" as soon as it is constructed. ProxyImage has
the same interface but creates its RealImage only on the first display()
and reuses it afterwards.
"""

import logging
from typing import Protocol, runtime_checkable

from pattern_catalog.narrator import Narrator

logger = logging.getLogger(__name__)


@runtime_checkable
class Image(Protocol):
    def display(self) -> None:
        ...


class RealImage:
    def __init__(self, filename: str, narrator: Narrator | None = None) -> None:
        self.filename = filename
        self.narrator = narrator if narrator is not None else Narrator()
        self._load_from_disk()

    def _load_from_disk(self) -> None:
        self.narrator.say(f"Loading {self.filename}")

    def display(self) -> None:
        self.narrator.say(f"Displaying {self.filename}")


class ProxyImage:
    def __init__(self, filename: str, narrator: Narrator | None = None) -> None:
        self.filename = filename
        self.narrator = narrator if narrator is not None else Narrator()
        self._real_image: RealImage | None = None

    @property
    def is_loaded(self) -> bool:
        return self._real_image is not None

    def display(self) -> None:
        if self._real_image is None:
            logger.debug("First display of %s; loading", self.filename)
            self._real_image = RealImage(self.filename, self.narrator)
        self._real_image.display()


def main(narrator: Narrator | None = None) -> None:
    narrator = narrator if narrator is not None else Narrator()

    first = ProxyImage("Photo1.jpg", narrator)
    second = ProxyImage("Photo2.jpg", narrator)

    # Nothing is loaded until display()
    narrator.say("Displaying first image...")
    first.display()

    narrator.say("Displaying second image...")
    second.display()

    narrator.say("Displaying first image again...")
    first.display()


if __name__ == "__main__":
    main()
