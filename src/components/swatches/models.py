"""
Swatches component fragment models.

Fragments are plain data. They hold unescaped values; escaping is
the job of whichever serializer turns them into markup.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

NoticeKind = Literal["empty", "not_found"]


@dataclass(frozen=True)
class Swatch:
    """One rendered color."""

    hex_code: str
    color_name: str


@dataclass(frozen=True)
class PaletteFragment:
    """All swatches of one palette, in palette order."""

    swatches: tuple[Swatch, ...]


@dataclass(frozen=True)
class PaletteSection:
    """A titled palette, used when every palette is shown."""

    name: str
    title: str
    palette: PaletteFragment


@dataclass(frozen=True)
class SectionList:
    """Every palette of a collection, in stored order."""

    sections: tuple[PaletteSection, ...]


@dataclass(frozen=True)
class Notice:
    """Informational text shown instead of swatches."""

    kind: NoticeKind
    message: str
    selector: str | None = None


Fragment = PaletteFragment | SectionList | Notice
