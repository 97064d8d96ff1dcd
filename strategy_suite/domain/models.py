from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum


class Status(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


def new_result_id(length: int = 8) -> str:
    return uuid.uuid4().hex[:length]


@dataclass(frozen=True)
class Result:
    id: str
    value: Decimal
    discriminator: str

    @classmethod
    def create(cls, value: Decimal, discriminator: str, id_length: int = 8) -> Result:
        return cls(id=new_result_id(id_length), value=value, discriminator=discriminator)


@dataclass(frozen=True)
class Component:
    name: str
    unit_price: Decimal


@dataclass(frozen=True)
class Recipient:
    recipient_id: int
    name: str
    email_address: str
    mobile_no: str
    postal_address: str


@dataclass(frozen=True)
class Notification:
    channel: str
    target: str
    text: str


class TransactionKind(str, Enum):
    DEPOSIT = "deposit"
    WITHDRAW = "withdraw"
    OVERDRAFT = "overdraft"
    NO_CHANGE = "no_change"


@dataclass
class Account:
    name: str
    email_address: str
    balance: Decimal


@dataclass(frozen=True)
class TransactionOutcome:
    kind: TransactionKind
    amount: Decimal
    balance: Decimal
    message: str
    notification: Notification


@dataclass(frozen=True)
class OperationMessage:
    level: str
    text: str


@dataclass(frozen=True)
class BatchItemResult:
    source_name: str
    status: Status
    messages: list[OperationMessage] = field(default_factory=list)
    metrics: dict[str, str] = field(default_factory=dict)
    result: Result | None = None


@dataclass(frozen=True)
class BatchOperationResult:
    items: list[BatchItemResult]

    @property
    def success_count(self) -> int:
        return len([item for item in self.items if item.status == Status.SUCCESS])

    @property
    def error_count(self) -> int:
        return len([item for item in self.items if item.status == Status.ERROR])

    @property
    def total_value(self) -> Decimal:
        return sum(
            (item.result.value for item in self.items if item.result is not None),
            Decimal("0"),
        )
