"""
Adapter: expose a legacy service through the interface clients expect.

Clients call TargetService.request(). OldService only knows
old_request(), so AdapterService owns an OldService and translates.
"""

from typing import Protocol, runtime_checkable

from pattern_catalog.narrator import Narrator


@runtime_checkable
class TargetService(Protocol):
    def request(self) -> None:
        ...


class OldService:
    def __init__(self, narrator: Narrator | None = None) -> None:
        self.narrator = narrator if narrator is not None else Narrator()

    def old_request(self) -> None:
        self.narrator.say("OldService: handling legacy request")


class AdapterService:
    def __init__(self, old_service: OldService) -> None:
        self.old_service = old_service

    def request(self) -> None:
        self.old_service.old_request()


def main(narrator: Narrator | None = None) -> None:
    narrator = narrator if narrator is not None else Narrator()

    target: TargetService = AdapterService(OldService(narrator))

    # The caller only sees TargetService
    target.request()


if __name__ == "__main__":
    main()
