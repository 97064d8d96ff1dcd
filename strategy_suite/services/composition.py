from __future__ import annotations

from decimal import Decimal

from strategy_suite.domain.models import Component
from strategy_suite.services.operation_registry import OperationRegistry

TOPPINGS: tuple[Component, ...] = (
    Component(name="Chicken", unit_price=Decimal("4")),
    Component(name="Cheese", unit_price=Decimal("3")),
    Component(name="Beef", unit_price=Decimal("6")),
    Component(name="Ranch", unit_price=Decimal("5")),
)


class CompositionContainer:
    def __init__(self, base_name: str = "Pizza", base_price: Decimal = Decimal("10")) -> None:
        self.base_name = base_name
        self.base_price = base_price
        self._components: list[Component] = []

    @property
    def components(self) -> tuple[Component, ...]:
        return tuple(self._components)

    def add_component(self, component: Component) -> None:
        self._components.append(component)

    def total_price(self) -> Decimal:
        return self.base_price + sum(
            (component.unit_price for component in self._components), Decimal("0")
        )

    def describe(self) -> str:
        lines = [f"{self.base_name}: {self.base_price}", "----Toppings------"]
        lines.extend(f"{component.name}: {component.unit_price}" for component in self._components)
        lines.append("----------")
        lines.append(f"Total Price: {self.total_price()}")
        return "\n".join(lines) + "\n"


def build_topping_registry() -> OperationRegistry[Component]:
    registry: OperationRegistry[Component] = OperationRegistry()
    for component in TOPPINGS:
        registry.register(component.name, component)
    return registry
