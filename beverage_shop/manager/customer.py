from beverage_shop.manager.beverage_maker import BeverageObserver
from beverage_shop.manager.logger import Logger
from beverage_shop.menu.beverage import Beverage


class Customer(BeverageObserver):
    def __init__(self, name: str, logger: Logger | None = None) -> None:
        if not name:
            raise ValueError("Customer name must not be empty.")
        self.name = name
        self.received: list[Beverage] = []
        self._logger = logger or Logger.shared()

    def __repr__(self) -> str:
        return f"Customer({self.name!r})"

    def notify(self, beverage: Beverage) -> None:
        self.received.append(beverage)
        print(f"{self.name} received the {beverage.get_description()}")
        self._logger.log_message(f"{self.name} has received the beverage.")
