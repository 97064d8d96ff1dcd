import logging

import pytest

from strategy_suite.domain.errors import InvalidOperationKey
from strategy_suite.services.notification_service import (
    SAMPLE_RECIPIENTS,
    EmailChannel,
    MailChannel,
    NotificationService,
    SmsChannel,
    WeirdChannel,
    build_channel_registry,
    create_channel,
)


@pytest.mark.unit
def test_channels_are_created_from_recipient_fields() -> None:
    recipient = SAMPLE_RECIPIENTS[0]

    email = create_channel("EMAIL", recipient)
    sms = create_channel("sms", recipient)
    mail = create_channel(" mail ", recipient)

    assert isinstance(email, EmailChannel)
    assert email.address == recipient.email_address
    assert isinstance(sms, SmsChannel)
    assert sms.mobile_no == recipient.mobile_no
    assert isinstance(mail, MailChannel)
    assert mail.address == recipient.postal_address
    assert isinstance(create_channel("weird", recipient), WeirdChannel)


@pytest.mark.unit
def test_unknown_mode_raises_instead_of_falling_back() -> None:
    with pytest.raises(InvalidOperationKey) as exc_info:
        create_channel("pigeon", SAMPLE_RECIPIENTS[1])
    assert exc_info.value.key == "pigeon"


@pytest.mark.unit
def test_notify_sends_through_channels_in_order(caplog: pytest.LogCaptureFixture) -> None:
    recipient = SAMPLE_RECIPIENTS[2]
    service = NotificationService.for_recipient(recipient, ["sms", "email"])

    with caplog.at_level(logging.INFO, logger="strategy_suite.services.notification_service"):
        notifications = service.notify()

    assert [item.channel for item in notifications] == ["sms", "email"]
    assert notifications[0].target == recipient.mobile_no
    assert notifications[1].text == f"e-mail sent to {recipient.email_address}"
    assert f"SMS sent to {recipient.mobile_no}" in caplog.text


@pytest.mark.unit
def test_notification_service_accepts_injected_channels() -> None:
    service = NotificationService([WeirdChannel(), EmailChannel("a@example.com")])
    channels = [item.channel for item in service.notify()]
    assert channels == ["weird", "email"]


@pytest.mark.unit
def test_channel_registry_modes() -> None:
    assert build_channel_registry().keys() == ["email", "sms", "mail", "weird"]
