"""Deposits and withdrawals on an account, reported through a notifier.

Positive amounts deposit, negative amounts withdraw. A withdrawal larger than
the balance is refused as an overdraft and leaves the balance unchanged. A zero
amount changes nothing. Every transaction, refused or not, is reported.
"""

from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal
from typing import Callable

from strategy_suite.domain.models import Account, TransactionKind, TransactionOutcome
from strategy_suite.services.key_utils import format_money, parse_amount
from strategy_suite.services.notification_service import EmailNotifier, TransactionNotifier

logger = logging.getLogger(__name__)


class AccountService:
    def __init__(
        self,
        notifier: TransactionNotifier | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.notifier = notifier if notifier is not None else EmailNotifier()
        self.clock = clock

    def make_transaction(self, account: Account, amount: Decimal | int | str) -> TransactionOutcome:
        parsed = parse_amount(amount)
        if parsed < 0:
            kind, message = self._withdraw(account, -parsed)
        elif parsed > 0:
            kind, message = self._deposit(account, parsed)
        else:
            kind = TransactionKind.NO_CHANGE
            message = (
                "No transaction performed for zero amount. "
                f"Current balance {format_money(account.balance)}"
            )

        logger.info("%s on account %s: %s", kind.value, account.name, message)
        notification = self.notifier.notify(account, message, self.clock())
        return TransactionOutcome(
            kind=kind,
            amount=parsed,
            balance=account.balance,
            message=message,
            notification=notification,
        )

    @staticmethod
    def _withdraw(account: Account, amount: Decimal) -> tuple[TransactionKind, str]:
        if account.balance < amount:
            return (
                TransactionKind.OVERDRAFT,
                f"OVERDRAFT when trying to withdraw {format_money(amount)}, "
                f"current balance {format_money(account.balance)}",
            )
        account.balance -= amount
        return (
            TransactionKind.WITHDRAW,
            f"OK Withdraw {format_money(amount)}, current balance {format_money(account.balance)}",
        )

    @staticmethod
    def _deposit(account: Account, amount: Decimal) -> tuple[TransactionKind, str]:
        account.balance += amount
        return (
            TransactionKind.DEPOSIT,
            f"OK Deposit {format_money(amount)}, current balance {format_money(account.balance)}",
        )
