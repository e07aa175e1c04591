"""Strategy: interchangeable payment methods behind one checkout context."""

from typing import Protocol, runtime_checkable

from pattern_catalog.narrator import Narrator


@runtime_checkable
class PaymentStrategy(Protocol):
    def pay(self, amount: int) -> None:
        ...


class CreditCardPayment:
    def __init__(self, narrator: Narrator | None = None) -> None:
        self.narrator = narrator if narrator is not None else Narrator()

    def pay(self, amount: int) -> None:
        self.narrator.say(f"Paid {amount} using Credit Card.")


class PayPalPayment:
    def __init__(self, narrator: Narrator | None = None) -> None:
        self.narrator = narrator if narrator is not None else Narrator()

    def pay(self, amount: int) -> None:
        self.narrator.say(f"Paid {amount} using PayPal.")


class PaymentContext:
    def __init__(self, strategy: PaymentStrategy) -> None:
        self.strategy = strategy

    def set_payment_strategy(self, strategy: PaymentStrategy) -> None:
        self.strategy = strategy

    def make_payment(self, amount: int) -> None:
        self.strategy.pay(amount)


def main(narrator: Narrator | None = None) -> None:
    narrator = narrator if narrator is not None else Narrator()

    context = PaymentContext(CreditCardPayment(narrator))
    context.make_payment(500)

    # Swap the strategy at runtime
    context.set_payment_strategy(PayPalPayment(narrator))
    context.make_payment(1500)


if __name__ == "__main__":
    main()
