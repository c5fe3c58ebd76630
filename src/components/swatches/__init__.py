"""
Swatches component - Palette rendering.
"""

from .component import palette_title, render_collection, render_palette
from .html import to_html
from .models import (
    Fragment,
    Notice,
    PaletteFragment,
    PaletteSection,
    SectionList,
    Swatch,
)

__all__ = [
    # Entry points
    "render_palette",
    "render_collection",
    "palette_title",
    # Serialization
    "to_html",
    # Models
    "Fragment",
    "Notice",
    "PaletteFragment",
    "PaletteSection",
    "SectionList",
    "Swatch",
]
