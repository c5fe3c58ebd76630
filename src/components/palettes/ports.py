"""
Palettes component port definitions.
"""

from __future__ import annotations

from typing import Any, Protocol


class OptionStorePort(Protocol):
    """Key/value option storage owned by the host application."""

    def get(self, key: str, default: Any = None) -> Any:
        """Get the value stored under key, or default if unset."""
        ...

    def set(self, key: str, value: Any) -> None:
        """Store value under key, replacing any previous value."""
        ...


class SafeKeyPort(Protocol):
    """Normalizes a palette name into a restricted-charset key."""

    def __call__(self, raw: str) -> str: ...
