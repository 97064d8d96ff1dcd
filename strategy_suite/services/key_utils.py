from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from strategy_suite.domain.errors import InvalidInput

CENTS = Decimal("0.01")
# Amounts stay below this so computed values quantize to cents in the default context.
AMOUNT_LIMIT = Decimal("1E15")


def normalize_key(key: str) -> str:
    return key.strip().lower()


def parse_amount(raw: Decimal | int | str) -> Decimal:
    if isinstance(raw, bool):
        raise InvalidInput(f"Amount must be numeric, got {raw!r}")
    if isinstance(raw, Decimal):
        amount = raw
    elif isinstance(raw, int):
        amount = Decimal(raw)
    elif isinstance(raw, str):
        try:
            amount = Decimal(raw.strip())
        except InvalidOperation as exc:
            raise InvalidInput(f"Amount must be numeric, got {raw!r}") from exc
    else:
        raise InvalidInput(f"Amount must be numeric, got {raw!r}")

    if not amount.is_finite():
        raise InvalidInput(f"Amount must be finite, got {raw!r}")
    if amount.copy_abs() >= AMOUNT_LIMIT:
        raise InvalidInput(f"Amount must be below {AMOUNT_LIMIT:f}, got {raw!r}")
    return amount


def format_money(value: Decimal) -> str:
    return str(value.quantize(CENTS, rounding=ROUND_HALF_UP))
