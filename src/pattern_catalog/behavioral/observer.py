"""
Observer: a stock ticker pushing price changes to subscribers.

StockMarket is the subject. Every price change is pushed to each
registered observer, in registration order.
"""

import logging
from typing import Protocol, runtime_checkable

from pattern_catalog.narrator import Narrator

logger = logging.getLogger(__name__)


@runtime_checkable
class StockObserver(Protocol):
    def update(self, stock_name: str, price: float) -> None:
        ...


class StockMarket:
    def __init__(self) -> None:
        self._observers: list[StockObserver] = []
        self.stock_name: str | None = None
        self.price: float | None = None

    @property
    def observers(self) -> list[StockObserver]:
        return list(self._observers)

    def register_observer(self, observer: StockObserver) -> None:
        self._observers.append(observer)

    def remove_observer(self, observer: StockObserver) -> None:
        """Unsubscribe an observer; unknown observers are ignored."""
        if observer in self._observers:
            self._observers.remove(observer)

    def notify_observers(self) -> None:
        if self.stock_name is None or self.price is None:
            return
        logger.debug("Notifying %d observers of %s", len(self._observers), self.stock_name)
        for observer in self._observers:
            observer.update(self.stock_name, self.price)

    def set_stock_price(self, stock_name: str, price: float) -> None:
        self.stock_name = stock_name
        self.price = price
        self.notify_observers()


class _NamedSubscriber:
    def __init__(self, name: str, narrator: Narrator | None = None) -> None:
        self.name = name
        self.narrator = narrator if narrator is not None else Narrator()

    def update(self, stock_name: str, price: float) -> None:
        self.narrator.say(f"{self.name} received an update: Stock {stock_name} is now ${price}")


class MobileApp(_NamedSubscriber):
    pass


class Website(_NamedSubscriber):
    pass


def main(narrator: Narrator | None = None) -> None:
    narrator = narrator if narrator is not None else Narrator()

    market = StockMarket()
    mobile_app = MobileApp("StockApp", narrator)
    website = Website("FinanceWebsite", narrator)

    market.register_observer(mobile_app)
    market.register_observer(website)

    market.set_stock_price("AAPL", 145.67)
    market.set_stock_price("GOOGL", 2732.45)

    market.remove_observer(mobile_app)

    market.set_stock_price("MSFT", 299.89)


if __name__ == "__main__":
    main()
