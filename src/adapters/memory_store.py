"""
In-memory option store.

Implements OptionStorePort for tests and single-process development.
Values are deep-copied on the way in and out so callers can never
mutate what is stored.
"""

from __future__ import annotations

import copy
from typing import Any


class InMemoryOptionStore:
    """Dict-backed OptionStorePort."""

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self._options: dict[str, Any] = copy.deepcopy(initial) if initial else {}

    def get(self, key: str, default: Any = None) -> Any:
        if key not in self._options:
            return default
        return copy.deepcopy(self._options[key])

    def set(self, key: str, value: Any) -> None:
        self._options[key] = copy.deepcopy(value)
