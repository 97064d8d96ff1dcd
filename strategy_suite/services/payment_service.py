from __future__ import annotations

import logging
from decimal import Decimal

from strategy_suite.domain.errors import InvalidInput, InvalidOperationKey, OperationNotFound
from strategy_suite.domain.models import Result
from strategy_suite.infrastructure.config import AppConfig
from strategy_suite.services.key_utils import normalize_key, parse_amount
from strategy_suite.services.operation_registry import OperationRegistry
from strategy_suite.services.payment_operations import Operation, build_payment_registry

logger = logging.getLogger(__name__)


class PaymentService:
    def __init__(
        self,
        registry: OperationRegistry[Operation] | None = None,
        config: AppConfig | None = None,
    ) -> None:
        self.registry = registry if registry is not None else build_payment_registry()
        self.config = config if config is not None else AppConfig()

    def supported_methods(self) -> list[str]:
        return self.registry.keys()

    def process(self, amount: Decimal | int | str, key: str) -> Result:
        parsed = self._validate_amount(amount)
        discriminator = normalize_key(key)
        try:
            operation = self.registry.resolve(discriminator)
        except OperationNotFound as exc:
            logger.warning("Rejected payment with unsupported method %r", key)
            raise InvalidOperationKey(key) from exc

        try:
            value = operation.compute(parsed)
        except ArithmeticError as exc:
            raise InvalidInput(f"Amount {parsed} cannot be processed as {discriminator}") from exc
        result = Result.create(value, discriminator, id_length=self.config.result_id_length)
        logger.info(
            "Processed %s payment %s -> %s",
            discriminator,
            parsed,
            value,
            extra={"discriminator": discriminator, "result_id": result.id},
        )
        return result

    def _validate_amount(self, amount: Decimal | int | str) -> Decimal:
        parsed = parse_amount(amount)
        if parsed < 0 and not self.config.allow_negative_amounts:
            raise InvalidInput(f"Amount must not be negative, got {parsed}")
        return parsed
