from abc import ABC, abstractmethod

from beverage_shop.manager.logger import Logger
from beverage_shop.menu.beverage import Beverage


class BeverageObserver(ABC):
    @abstractmethod
    def notify(self, beverage: Beverage) -> None:
        pass


class NotificationError(Exception):
    def __init__(self, failures: list[tuple[BeverageObserver, Exception]]) -> None:
        self.failures = failures
        details = ", ".join(f"{observer!r}: {exc}" for observer, exc in failures)
        super().__init__(f"{len(failures)} observer(s) failed to be notified: {details}")


class BeverageMaker:
    def __init__(self, logger: Logger | None = None, isolate_failures: bool = False) -> None:
        self.observers: list[BeverageObserver] = []
        self.isolate_failures = isolate_failures
        self._logger = logger or Logger.shared()

    def add_observer(self, observer: BeverageObserver) -> None:
        self.observers.append(observer)

    def beverage_is_ready(self, beverage: Beverage) -> None:
        self._logger.log_message(f"Beverage {beverage.get_description()} has been made.")

        # Snapshot: observers added during the broadcast wait for the next one.
        failures = []
        for observer in list(self.observers):
            if not self.isolate_failures:
                observer.notify(beverage)
                continue
            try:
                observer.notify(beverage)
            except Exception as exc:
                failures.append((observer, exc))

        if failures:
            raise NotificationError(failures) from failures[0][1]
