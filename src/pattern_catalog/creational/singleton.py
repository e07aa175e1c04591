"""
Singleton: one lazily created, process-wide instance.

Singleton.get_instance() is the only way to obtain the object. The first
call creates it under a lock, with the usual double check so later calls
skip the lock entirely. Concurrent first callers all receive the same
instance and exactly one construction happens.

Guarded paths:
- Calling Singleton() directly raises IllegalStateError
- Re-entering the private construction path once the instance exists
  raises IllegalStateError
- copy.copy() / copy.deepcopy() raise UnsupportedOperationError
- Unpickling resolves to the existing instance instead of a new one
"""

import logging
import threading
from datetime import datetime, timezone

from pattern_catalog.exceptions import IllegalStateError, UnsupportedOperationError
from pattern_catalog.narrator import Narrator

logger = logging.getLogger(__name__)

_CONSTRUCTION_KEY = object()


class Singleton:
    """
    Process-wide single instance.

    Attributes:
        created_at: When the instance was constructed (UTC)
    """

    _instance: "Singleton | None" = None
    _lock = threading.Lock()
    instances_created = 0

    def __init__(self, _key: object = None) -> None:
        if _key is not _CONSTRUCTION_KEY:
            raise IllegalStateError(
                "Singleton cannot be constructed directly; use Singleton.get_instance()"
            )
        if Singleton._instance is not None:
            raise IllegalStateError("Instance already created!")

        Singleton.instances_created += 1
        self.created_at = datetime.now(timezone.utc)
        logger.debug("Singleton constructed at %s", self.created_at.isoformat())

    @classmethod
    def _construct(cls) -> "Singleton":
        return cls(_CONSTRUCTION_KEY)

    @classmethod
    def get_instance(cls) -> "Singleton":
        """Return the single instance, creating it on first use."""
        instance = Singleton._instance
        if instance is None:
            with Singleton._lock:
                instance = Singleton._instance
                if instance is None:
                    instance = cls._construct()
                    Singleton._instance = instance
        return instance

    def __copy__(self) -> "Singleton":
        raise UnsupportedOperationError("copy", "Cloning of Singleton is not allowed!")

    def __deepcopy__(self, memo: dict) -> "Singleton":
        raise UnsupportedOperationError("deepcopy", "Cloning of Singleton is not allowed!")

    def __reduce__(self) -> tuple:
        return (get_singleton, ())


def get_singleton() -> Singleton:
    """Module-level accessor, also used to resolve unpickled references."""
    return Singleton.get_instance()


def main(narrator: Narrator | None = None) -> None:
    narrator = narrator if narrator is not None else Narrator()

    first = Singleton.get_instance()
    second = Singleton.get_instance()

    narrator.say(f"Instance 1 id: {id(first)}")
    narrator.say(f"Instance 2 id: {id(second)}")
    narrator.say(f"Both instances are the same: {first is second}")

    try:
        Singleton()
    except IllegalStateError as e:
        narrator.say(str(e))


if __name__ == "__main__":
    main()
