from __future__ import annotations

import pytest

from strategy_suite.infrastructure.config import AppConfig
from strategy_suite.services.batch_service import BatchService
from strategy_suite.services.payment_service import PaymentService


@pytest.fixture
def config() -> AppConfig:
    return AppConfig(
        result_id_length=8,
        max_batch_items=10,
        allow_negative_amounts=False,
        log_level="INFO",
        log_format="text",
    )


@pytest.fixture
def payment_service(config: AppConfig) -> PaymentService:
    return PaymentService(config=config)


@pytest.fixture
def batch_service(payment_service: PaymentService, config: AppConfig) -> BatchService:
    return BatchService(payment_service, config)


@pytest.fixture
def sample_batch_text() -> str:
    return "\n".join(
        [
            "# amount,method",
            "100,cash",
            "100, DEBIT ",
            "",
            "40,creidt",
            "abc,cash",
        ]
    )
