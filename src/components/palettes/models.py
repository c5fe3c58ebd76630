"""
Palettes component input/output models.

Raw decoded input is wrapped in a small tagged union so the validator
can dispatch on shape explicitly instead of probing arbitrary values.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Literal

from src.domain.entities import PaletteCollection

# --- Raw Input ---


@dataclass(frozen=True)
class RawText:
    """A decoded string value."""

    value: str


@dataclass(frozen=True)
class RawMapping:
    """A decoded mapping; entries keep their input order."""

    entries: tuple[tuple[Any, Any], ...]


@dataclass(frozen=True)
class RawOther:
    """Any other decoded value (number, list, null, ...)."""

    value: Any


RawPaletteInput = RawText | RawMapping | RawOther


def classify_raw(value: Any) -> RawPaletteInput:
    """Wrap a decoded value in its RawPaletteInput variant."""
    if isinstance(value, (RawText, RawMapping, RawOther)):
        return value
    if isinstance(value, str):
        return RawText(value)
    if isinstance(value, Mapping):
        return RawMapping(tuple(value.items()))
    return RawOther(value)


# --- Errors ---

ImportErrorCode = Literal["empty_input", "invalid_format", "no_valid_palettes"]


@dataclass(frozen=True)
class PaletteValidationError:
    """Import error with a user-facing message."""

    code: ImportErrorCode
    message: str
    field: str | None = "json_input"


# --- Input Models ---


@dataclass(frozen=True)
class ImportPalettesInput:
    """Input for importing palettes from submitted JSON text."""

    json_input: str | None


@dataclass(frozen=True)
class GetPalettesInput:
    """Input for reading the stored palettes."""

    pass


# --- Output Models ---


@dataclass(frozen=True)
class ImportPalettesOutput:
    """Output from an import. On failure the store is left untouched."""

    palettes: PaletteCollection = field(default_factory=dict)
    errors: list[PaletteValidationError] = field(default_factory=list)
    success: bool = True
    message: str = ""


@dataclass(frozen=True)
class GetPalettesOutput:
    """Output from reading the stored palettes."""

    palettes: PaletteCollection
