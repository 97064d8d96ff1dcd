"""Payment operations bound to payment-method keys.

The cash "discount" raises the amount and the debit "fee" lowers it. The sign
convention is kept as-is; callers depend on 100 -> 105 (cash) and 100 -> 98
(debit).
"""

from __future__ import annotations

from decimal import Decimal
from typing import Protocol

from strategy_suite.services.operation_registry import OperationRegistry

CASH = "cash"
DEBIT = "debit"
# Declared payment method with no operation behind it; dispatching it fails.
CREDIT = "creidt"

CASH_DISCOUNT = Decimal("0.05")
DEBIT_FEE = Decimal("0.02")


class Operation(Protocol):
    def compute(self, amount: Decimal) -> Decimal:
        ...


class CashOperation:
    def compute(self, amount: Decimal) -> Decimal:
        return amount + amount * CASH_DISCOUNT


class DebitOperation:
    def compute(self, amount: Decimal) -> Decimal:
        return amount - amount * DEBIT_FEE


def build_payment_registry() -> OperationRegistry[Operation]:
    registry: OperationRegistry[Operation] = OperationRegistry()
    registry.register(CASH, CashOperation())
    registry.register(DEBIT, DebitOperation())
    return registry
