"""
Composite: files and folders treated through one interface.

A Folder holds any mix of files and other folders and answers
show_details() by printing itself and then each child, one level deeper.
"""

from typing import Protocol, runtime_checkable

from pattern_catalog.exceptions import InvalidArgumentError
from pattern_catalog.narrator import Narrator

INDENT = "  "


@runtime_checkable
class FileSystemComponent(Protocol):
    name: str

    def show_details(self, depth: int = 0) -> None:
        ...


class File:
    def __init__(self, name: str, narrator: Narrator | None = None) -> None:
        self.name = name
        self.narrator = narrator if narrator is not None else Narrator()

    def show_details(self, depth: int = 0) -> None:
        self.narrator.say(f"{INDENT * depth}File: {self.name}")


class Folder:
    def __init__(self, name: str, narrator: Narrator | None = None) -> None:
        self.name = name
        self.narrator = narrator if narrator is not None else Narrator()
        self._children: list[FileSystemComponent] = []

    @property
    def children(self) -> list[FileSystemComponent]:
        return list(self._children)

    def add_component(self, component: FileSystemComponent) -> None:
        """
        Add a child.

        Raises:
            InvalidArgumentError: If the component is this folder or contains it
        """
        if component is self or (isinstance(component, Folder) and component.contains(self)):
            raise InvalidArgumentError(
                f"Folder '{self.name}' cannot contain itself or an ancestor", value=component.name
            )
        self._children.append(component)

    def remove_component(self, component: FileSystemComponent) -> None:
        if component in self._children:
            self._children.remove(component)

    def contains(self, component: FileSystemComponent) -> bool:
        """True if component appears anywhere below this folder."""
        for child in self._children:
            if child is component:
                return True
            if isinstance(child, Folder) and child.contains(component):
                return True
        return False

    def show_details(self, depth: int = 0) -> None:
        self.narrator.say(f"{INDENT * depth}Folder: {self.name}")
        for child in self._children:
            child.show_details(depth + 1)


def main(narrator: Narrator | None = None) -> None:
    narrator = narrator if narrator is not None else Narrator()

    documents = Folder("My Documents", narrator)
    documents.add_component(File("Document1.txt", narrator))
    documents.add_component(File("Picture1.png", narrator))

    media = Folder("My Media", narrator)
    media.add_component(File("Video1.mp4", narrator))

    documents.add_component(media)

    documents.show_details()


if __name__ == "__main__":
    main()
