from __future__ import annotations

import csv
import io
import logging

from strategy_suite.domain.errors import InvalidInput, StrategySuiteError
from strategy_suite.domain.models import (
    BatchItemResult,
    BatchOperationResult,
    OperationMessage,
    Status,
)
from strategy_suite.infrastructure.config import AppConfig
from strategy_suite.services.key_utils import format_money
from strategy_suite.services.payment_service import PaymentService

logger = logging.getLogger(__name__)


class BatchService:
    def __init__(self, payment_service: PaymentService, config: AppConfig) -> None:
        self.payment_service = payment_service
        self.config = config

    @staticmethod
    def parse_payment_lines(text: str) -> list[tuple[str, str]]:
        entries: list[tuple[str, str]] = []
        for line_number, raw_line in enumerate(text.splitlines(), start=1):
            line = raw_line.strip()
            if not line or line.startswith("#"):
                continue
            amount, separator, method = line.partition(",")
            if not separator:
                raise InvalidInput(f"Line {line_number}: expected 'amount,method', got {line!r}")
            entries.append((amount.strip(), method.strip()))
        return entries

    def run_payment_batch(self, entries: list[tuple[str, str]]) -> BatchOperationResult:
        if len(entries) > self.config.max_batch_items:
            raise InvalidInput(
                f"Batch of {len(entries)} payments exceeds limit of {self.config.max_batch_items}"
            )

        logger.info("Running payment batch", extra={"batch_size": len(entries)})
        items: list[BatchItemResult] = []
        for amount, method in entries:
            source_name = f"{amount} via {method}"
            try:
                result = self.payment_service.process(amount, method)
                items.append(
                    BatchItemResult(
                        source_name=source_name,
                        status=Status.SUCCESS,
                        messages=[
                            OperationMessage(
                                level="info", text=f"Receipt {result.id} issued."
                            )
                        ],
                        metrics={
                            "amount": amount,
                            "method": result.discriminator,
                            "value": format_money(result.value),
                            "receipt_id": result.id,
                        },
                        result=result,
                    )
                )
            except StrategySuiteError as exc:
                items.append(
                    BatchItemResult(
                        source_name=source_name,
                        status=Status.ERROR,
                        messages=[OperationMessage(level="error", text=str(exc))],
                        metrics={"amount": amount, "method": method},
                    )
                )
        return BatchOperationResult(items=items)

    @staticmethod
    def build_csv(result: BatchOperationResult) -> tuple[str, bytes]:
        buffer = io.StringIO()
        writer = csv.writer(buffer)
        writer.writerow(["source_name", "status", "method", "value", "receipt_id", "messages"])
        for item in result.items:
            writer.writerow(
                [
                    item.source_name,
                    item.status.value,
                    item.metrics.get("method", ""),
                    item.metrics.get("value", ""),
                    item.metrics.get("receipt_id", ""),
                    " | ".join(message.text for message in item.messages),
                ]
            )
        return "payment_batch_report.csv", buffer.getvalue().encode("utf-8")

    @staticmethod
    def build_text_summary(result: BatchOperationResult) -> tuple[str, str]:
        lines: list[str] = []
        lines.append("Payment Batch Summary")
        lines.append(
            f"success={result.success_count} "
            f"error={result.error_count} "
            f"total={format_money(result.total_value)}"
        )
        lines.append("")
        for item in result.items:
            lines.append(f"[{item.status.value.upper()}] {item.source_name}")
            if item.metrics:
                lines.append("metrics: " + ", ".join(f"{k}={v}" for k, v in item.metrics.items()))
            if item.messages:
                lines.extend(f"- {msg.text}" for msg in item.messages)
            lines.append("")
        return "payment_batch_report.txt", "\n".join(lines).rstrip() + "\n"
