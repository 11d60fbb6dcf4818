from abc import ABC, abstractmethod


class ChainDepthExceeded(ValueError):
    pass


class Beverage(ABC):
    depth = 0

    @abstractmethod
    def get_description(self) -> str:
        pass

    @abstractmethod
    def get_cost(self) -> float:
        pass


def unwrap(beverage: Beverage) -> tuple[Beverage, list["CondimentDecorator"]]:
    condiments = []
    while isinstance(beverage, CondimentDecorator):
        condiments.append(beverage)
        beverage = beverage._beverage
    condiments.reverse()
    return beverage, condiments


def overrides(layer: "CondimentDecorator", method: str) -> bool:
    return getattr(type(layer), method) is not getattr(CondimentDecorator, method)


class CondimentDecorator(Beverage):
    label: str = ""
    extra_cost: float = 0.0
    max_depth = 1000

    def __init__(self, beverage: Beverage) -> None:
        depth = beverage.depth + 1
        if depth > self.max_depth:
            raise ChainDepthExceeded(f"Decorator chain depth {depth} exceeds limit {self.max_depth}.")
        self._beverage = beverage
        self.depth = depth

    # Plain condiments are folded in a loop; the first layer that overrides
    # the method takes over the rest of the chain.
    def get_description(self) -> str:
        labels = [self.label]
        layer = self._beverage
        while isinstance(layer, CondimentDecorator) and not overrides(layer, "get_description"):
            labels.append(layer.label)
            layer = layer._beverage
        labels.reverse()
        return " with ".join([layer.get_description()] + labels)

    def get_cost(self) -> float:
        total = self.extra_cost
        layer = self._beverage
        while isinstance(layer, CondimentDecorator) and not overrides(layer, "get_cost"):
            total += layer.extra_cost
            layer = layer._beverage
        return layer.get_cost() + total


# Beverage Implementations
class Americano(Beverage):
    def __init__(self) -> None:
        self.description = "Americano"
        self.cost = 2.0

    def get_description(self) -> str:
        return self.description

    def get_cost(self) -> float:
        return self.cost


# Condiments
class WhipDecorator(CondimentDecorator):
    label = "Whip"
    extra_cost = 0.5


class MochaDecorator(CondimentDecorator):
    label = "Mocha"
    extra_cost = 1.0


class Condiment(CondimentDecorator):
    def __init__(self, beverage: Beverage, label: str, extra_cost: float = 0.0) -> None:
        if not label:
            raise ValueError("Condiment label must not be empty.")
        if not extra_cost >= 0:
            raise ValueError(f"Extra cost {extra_cost} must not be negative.")
        super().__init__(beverage)
        self.label = label
        self.extra_cost = extra_cost
