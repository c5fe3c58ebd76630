"""
HTML serializer for swatch fragments.

Every value is escaped for where it lands: attribute escaping for
style and title attributes, text escaping for element content.
"""

from __future__ import annotations

from src.domain.sanitize import escape_attr, escape_html

from .models import Fragment, Notice, PaletteFragment, PaletteSection, SectionList, Swatch


def swatch_to_html(swatch: Swatch) -> str:
    hex_attr = escape_attr(swatch.hex_code)
    return (
        f'<div class="color-swatch" style="background-color: {hex_attr};" '
        f'title="{escape_attr(swatch.color_name)}: {hex_attr}">'
        f'<span class="color-code">{escape_html(swatch.hex_code)}</span>'
        f'<span class="color-name">{escape_html(swatch.color_name)}</span>'
        "</div>"
    )


def palette_to_html(fragment: PaletteFragment) -> str:
    swatches = "".join(swatch_to_html(s) for s in fragment.swatches)
    return f'<div class="color-palette-container">{swatches}</div>'


def section_to_html(section: PaletteSection) -> str:
    return (
        '<div class="palette-container">'
        f'<h4 class="palette-title">{escape_html(section.title)}</h4>'
        f"{palette_to_html(section.palette)}"
        "</div>"
    )


def notice_to_html(notice: Notice) -> str:
    return f"<p>{escape_html(notice.message)}</p>"


def to_html(fragment: Fragment) -> str:
    """Serialize any fragment to an HTML string."""
    if isinstance(fragment, PaletteFragment):
        return palette_to_html(fragment)
    elif isinstance(fragment, SectionList):
        return "".join(section_to_html(s) for s in fragment.sections)
    elif isinstance(fragment, Notice):
        return notice_to_html(fragment)
    else:
        raise ValueError(f"Unknown fragment type: {type(fragment)}")
