from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Protocol

from strategy_suite.domain.errors import InvalidOperationKey, OperationNotFound
from strategy_suite.domain.models import Account, Notification, Recipient
from strategy_suite.services.operation_registry import OperationRegistry

logger = logging.getLogger(__name__)

EMAIL = "email"
SMS = "sms"
MAIL = "mail"
WEIRD = "weird"


class Channel(Protocol):
    def send(self) -> Notification:
        ...


def _deliver(channel: str, target: str, text: str) -> Notification:
    logger.info("%s sent to %s", text, target, extra={"channel": channel})
    return Notification(channel=channel, target=target, text=f"{text} sent to {target}")


class EmailChannel:
    def __init__(self, address: str) -> None:
        self.address = address

    def send(self) -> Notification:
        return _deliver(EMAIL, self.address, "e-mail")


class SmsChannel:
    def __init__(self, mobile_no: str) -> None:
        self.mobile_no = mobile_no

    def send(self) -> Notification:
        return _deliver(SMS, self.mobile_no, "SMS")


class MailChannel:
    def __init__(self, address: str) -> None:
        self.address = address

    def send(self) -> Notification:
        return _deliver(MAIL, self.address, "mail")


class WeirdChannel:
    def send(self) -> Notification:
        return _deliver(WEIRD, "nobody in particular", "Weird notification")


class TransactionNotifier(Protocol):
    def notify(self, account: Account, message: str, occurred_at: datetime) -> Notification:
        ...


class EmailNotifier:
    def notify(self, account: Account, message: str, occurred_at: datetime) -> Notification:
        text = (
            f"Dear {account.name}, a recent activity on your account occurred at "
            f"{occurred_at:%Y-%m-%d %H:%M}: {message}"
        )
        logger.info("e-mail sent to %s", account.email_address, extra={"channel": EMAIL})
        return Notification(channel=EMAIL, target=account.email_address, text=text)


ChannelFactory = Callable[[Recipient], Channel]


def build_channel_registry() -> OperationRegistry[ChannelFactory]:
    registry: OperationRegistry[ChannelFactory] = OperationRegistry()
    registry.register(EMAIL, lambda recipient: EmailChannel(recipient.email_address))
    registry.register(SMS, lambda recipient: SmsChannel(recipient.mobile_no))
    registry.register(MAIL, lambda recipient: MailChannel(recipient.postal_address))
    registry.register(WEIRD, lambda recipient: WeirdChannel())
    return registry


def create_channel(
    mode: str,
    recipient: Recipient,
    registry: OperationRegistry[ChannelFactory] | None = None,
) -> Channel:
    channels = registry if registry is not None else build_channel_registry()
    try:
        factory = channels.resolve(mode)
    except OperationNotFound as exc:
        raise InvalidOperationKey(mode) from exc
    return factory(recipient)


class NotificationService:
    def __init__(self, channels: list[Channel]) -> None:
        self.channels = list(channels)

    @classmethod
    def for_recipient(
        cls,
        recipient: Recipient,
        modes: list[str],
        registry: OperationRegistry[ChannelFactory] | None = None,
    ) -> NotificationService:
        channels = registry if registry is not None else build_channel_registry()
        return cls([create_channel(mode, recipient, channels) for mode in modes])

    def notify(self) -> list[Notification]:
        return [channel.send() for channel in self.channels]


SAMPLE_RECIPIENTS: list[Recipient] = [
    Recipient(
        recipient_id=1,
        name="John Doe",
        email_address="john.doe@example.com",
        mobile_no="+1 (606)123-4567",
        postal_address="123 2nd Avenue California, USA",
    ),
    Recipient(
        recipient_id=2,
        name="Sarah Sarah",
        email_address="sarah.sarah@example.com",
        mobile_no="+1 (606)124-4567",
        postal_address="345 4th Avenue Florida, USA",
    ),
    Recipient(
        recipient_id=3,
        name="Steve Pado",
        email_address="steve.pado@example.com",
        mobile_no="+1 (606)125-4567",
        postal_address="678 3rd Avenue Chicago, USA",
    ),
]
