from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from strategy_suite.domain.errors import OperationNotFound
from strategy_suite.services.key_utils import normalize_key

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class OperationRegistry(Generic[T]):
    _operations: dict[str, T] = field(default_factory=dict)

    def register(self, key: str, operation: T) -> None:
        normalized = normalize_key(key)
        if normalized in self._operations:
            logger.debug("Replacing operation for key %r", normalized)
        self._operations[normalized] = operation

    def has(self, key: str) -> bool:
        return normalize_key(key) in self._operations

    def resolve(self, key: str) -> T:
        normalized = normalize_key(key)
        if normalized not in self._operations:
            raise OperationNotFound(normalized)
        return self._operations[normalized]

    def keys(self) -> list[str]:
        return list(self._operations)

    def __len__(self) -> int:
        return len(self._operations)
