from __future__ import annotations

import os
from dataclasses import dataclass

# Result ids are cut from a uuid4 hex string.
MAX_RESULT_ID_LENGTH = 32


def _get_int_env(name: str, default: int, maximum: int | None = None) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        parsed = int(value)
    except ValueError:
        return default
    if parsed <= 0:
        return default
    if maximum is not None and parsed > maximum:
        return default
    return parsed


def _get_bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    lowered = value.strip().lower()
    if lowered in {"1", "true", "yes", "on"}:
        return True
    if lowered in {"0", "false", "no", "off"}:
        return False
    return default


def _get_choice_env(name: str, default: str, choices: set[str]) -> str:
    value = os.getenv(name)
    if value is None:
        return default
    lowered = value.strip().lower()
    return lowered if lowered in choices else default


@dataclass(frozen=True)
class AppConfig:
    result_id_length: int = _get_int_env(
        "STRATEGY_SUITE_RESULT_ID_LENGTH", 8, maximum=MAX_RESULT_ID_LENGTH
    )
    max_batch_items: int = _get_int_env("STRATEGY_SUITE_MAX_BATCH_ITEMS", 100)
    allow_negative_amounts: bool = _get_bool_env("STRATEGY_SUITE_ALLOW_NEGATIVE", False)
    log_level: str = _get_choice_env(
        "STRATEGY_SUITE_LOG_LEVEL", "info", {"debug", "info", "warning", "error"}
    ).upper()
    log_format: str = _get_choice_env("STRATEGY_SUITE_LOG_FORMAT", "text", {"text", "json"})
    max_session_receipts: int = _get_int_env("STRATEGY_SUITE_MAX_SESSION_RECEIPTS", 20)

    def __post_init__(self) -> None:
        if not 1 <= self.result_id_length <= MAX_RESULT_ID_LENGTH:
            raise ValueError(
                f"result_id_length must be between 1 and {MAX_RESULT_ID_LENGTH}, "
                f"got {self.result_id_length}"
            )
        if self.max_batch_items < 1:
            raise ValueError(f"max_batch_items must be positive, got {self.max_batch_items}")
        if self.max_session_receipts < 1:
            raise ValueError(
                f"max_session_receipts must be positive, got {self.max_session_receipts}"
            )
