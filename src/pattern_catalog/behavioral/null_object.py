"""
Null Object: customers that may or may not have an email address.

Callers always get something that answers send_promotional_email(). A
customer without an address gets a NullCustomer whose method does nothing,
so no caller has to check for None.
"""

from typing import Protocol, runtime_checkable

from pattern_catalog.narrator import Narrator


@runtime_checkable
class Customer(Protocol):
    def send_promotional_email(self) -> None:
        ...

    def is_null(self) -> bool:
        ...


class RealCustomer:
    def __init__(self, email: str, narrator: Narrator | None = None) -> None:
        self.email = email
        self.narrator = narrator if narrator is not None else Narrator()

    def send_promotional_email(self) -> None:
        self.narrator.say(f"Sending email to: {self.email}")

    def is_null(self) -> bool:
        return False


class NullCustomer:
    def send_promotional_email(self) -> None:
        pass

    def is_null(self) -> bool:
        return True


def get_customer(email: str | None, narrator: Narrator | None = None) -> Customer:
    """Return a RealCustomer for a usable address, a NullCustomer otherwise."""
    if not email:
        return NullCustomer()
    return RealCustomer(email, narrator)


def main(narrator: Narrator | None = None) -> None:
    narrator = narrator if narrator is not None else Narrator()

    known = get_customer("john@example.com", narrator)
    anonymous = get_customer(None, narrator)

    known.send_promotional_email()
    anonymous.send_promotional_email()  # silently does nothing


if __name__ == "__main__":
    main()
