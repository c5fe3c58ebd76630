import html
import re

_UNSAFE_KEY_CHARS = re.compile(r"[^a-z0-9_\-]")


def safe_key(raw: str) -> str:
    """
    Normalize an arbitrary string into a restricted-charset map key.

    Lowercases, then drops everything except ASCII letters, digits,
    underscores and dashes. Spaces are removed, not replaced.
    """
    return _UNSAFE_KEY_CHARS.sub("", raw.lower())


def escape_html(text: str) -> str:
    """Escape text for use as visible HTML content."""
    return html.escape(text, quote=False)


def escape_attr(text: str) -> str:
    """Escape text for use inside a double- or single-quoted HTML attribute."""
    return html.escape(text, quote=True)


def ucfirst(text: str) -> str:
    """Uppercase the first character only; the rest is left untouched."""
    if not text:
        return text
    return text[0].upper() + text[1:]
