from decimal import Decimal

import pytest

from strategy_suite.domain.errors import OperationNotFound
from strategy_suite.services.operation_registry import OperationRegistry
from strategy_suite.services.payment_operations import CashOperation, DebitOperation


@pytest.mark.unit
def test_operation_registry_register_resolve_and_has() -> None:
    registry: OperationRegistry[CashOperation] = OperationRegistry()
    operation = CashOperation()

    registry.register("  Cash ", operation)

    assert registry.has("CASH")
    assert registry.resolve("cash") is operation
    assert registry.keys() == ["cash"]
    assert len(registry) == 1


@pytest.mark.unit
def test_operation_registry_last_write_wins() -> None:
    registry: OperationRegistry[object] = OperationRegistry()
    first = CashOperation()
    second = DebitOperation()

    registry.register("card", first)
    registry.register("CARD", second)

    assert registry.resolve("card") is second
    assert len(registry) == 1
    assert registry.resolve("card").compute(Decimal("100")) == Decimal("98")


@pytest.mark.unit
def test_operation_registry_missing_operation_raises() -> None:
    registry: OperationRegistry[object] = OperationRegistry()
    with pytest.raises(OperationNotFound) as exc_info:
        registry.resolve(" Missing ")
    assert exc_info.value.key == "missing"


@pytest.mark.unit
def test_operation_registry_keys_preserve_registration_order() -> None:
    registry: OperationRegistry[int] = OperationRegistry()
    for index, key in enumerate(["sms", "Email", "mail"]):
        registry.register(key, index)
    assert registry.keys() == ["sms", "email", "mail"]
