"""
Swatches component - Palette rendering.

Maps a clean PaletteCollection to fragment records. A single
selected palette renders without a title; showing every palette
wraps each one in a titled section.
"""

from __future__ import annotations

from src.domain.entities import Palette, PaletteCollection
from src.domain.sanitize import ucfirst
from src.rules.models import RenderRules

from .models import Fragment, Notice, PaletteFragment, PaletteSection, SectionList, Swatch


def render_palette(palette: Palette) -> PaletteFragment:
    """One swatch per color, in insertion order."""
    return PaletteFragment(
        swatches=tuple(
            Swatch(hex_code=hex_code, color_name=color_name)
            for color_name, hex_code in palette.items()
        )
    )


def palette_title(name: str) -> str:
    """Section title for a palette: the name with its first character uppercased."""
    return ucfirst(name)


def render_collection(
    collection: PaletteCollection,
    selector: str | None = None,
    *,
    rules: RenderRules | None = None,
) -> Fragment:
    """
    Render one palette or all of them.

    Args:
        collection: Clean palette collection.
        selector: Palette key to show; None or "" shows every palette.
        rules: Optional render rules for notice texts.

    Returns:
        Notice when empty or not found, a bare PaletteFragment for a
        selected palette, or a SectionList of titled palettes.
    """
    if rules is None:
        rules = RenderRules()

    if not collection:
        return Notice(kind="empty", message=rules.empty_message)

    if selector:
        palette = collection.get(selector)
        if palette is None:
            return Notice(
                kind="not_found",
                message=rules.not_found_message.format(name=selector),
                selector=selector,
            )
        return render_palette(palette)

    return SectionList(
        sections=tuple(
            PaletteSection(name=name, title=palette_title(name), palette=render_palette(colors))
            for name, colors in collection.items()
        )
    )
