"""
Palettes component - Palette import, validation and storage.

Turns arbitrary decoded input into a clean PaletteCollection and
classifies submitted JSON text into one of three failure kinds
(empty input, invalid format, no valid palettes) before anything
is persisted.

Invariants:
- Every stored hex code matches ^#[0-9A-F]{6}$
- No stored palette is empty
- Palette keys are safe-key normalized
- validate() never raises
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any

from src.domain.entities import Palette, PaletteCollection
from src.domain.sanitize import safe_key
from src.rules.models import PaletteRules

from .models import (
    GetPalettesInput,
    GetPalettesOutput,
    ImportErrorCode,
    ImportPalettesInput,
    ImportPalettesOutput,
    PaletteValidationError,
    RawMapping,
    RawText,
    classify_raw,
)
from .ports import OptionStorePort, SafeKeyPort

logger = logging.getLogger(__name__)

HEX_PATTERN = re.compile(r"#[a-fA-F0-9]{6}")

EMPTY_INPUT_MESSAGE = "JSON input cannot be empty."
INVALID_FORMAT_MESSAGE = "Invalid JSON format. Please check your syntax."
NO_VALID_PALETTES_MESSAGE = "No valid color palettes found in JSON data."
SAVED_MESSAGE = "Color palettes saved successfully!"


# --- Validation ---


def normalize_hex(candidate: str) -> str | None:
    """
    Normalize a single hex code candidate.

    Trims whitespace and adds a missing leading '#'. Returns the
    uppercased code, or None when it is not exactly six hex digits.
    """
    code = candidate.strip()
    if not code.startswith("#"):
        code = "#" + code
    if HEX_PATTERN.fullmatch(code):
        return code.upper()
    return None


def _validate_colors(palette_name: Any, entries: tuple[tuple[Any, Any], ...]) -> Palette:
    colors: Palette = {}
    for color_name, hex_candidate in entries:
        match classify_raw(hex_candidate):
            case RawText(value=text) if isinstance(color_name, str):
                code = normalize_hex(text)
                if code is None:
                    logger.debug("Dropping %r.%r: invalid hex %r", palette_name, color_name, text)
                    continue
                colors[color_name] = code
            case _:
                logger.debug("Dropping %r.%r: not a string entry", palette_name, color_name)
    return colors


def validate(raw: Any, *, key_fn: SafeKeyPort = safe_key) -> PaletteCollection:
    """
    Filter and normalize raw decoded input into a PaletteCollection.

    Malformed palettes and colors are skipped, never raised. Palettes
    with no surviving colors are dropped. When two names normalize to
    the same key the later palette replaces the earlier one.

    Args:
        raw: Decoded value, ideally a mapping of palette name to colors.
        key_fn: Palette name normalizer.

    Returns:
        New PaletteCollection, possibly empty.
    """
    collection: PaletteCollection = {}

    match classify_raw(raw):
        case RawMapping(entries=palettes):
            pass
        case _:
            return collection

    for palette_name, palette_colors in palettes:
        match classify_raw(palette_colors):
            case RawMapping(entries=entries):
                colors = _validate_colors(palette_name, entries)
            case _:
                logger.debug("Skipping palette %r: colors are not a mapping", palette_name)
                continue

        if not colors:
            logger.debug("Dropping palette %r: no valid colors", palette_name)
            continue

        collection[key_fn(str(palette_name))] = colors

    return collection


# --- Import Boundary ---


def _fail(code: ImportErrorCode, message: str) -> ImportPalettesOutput:
    logger.warning("Palette import rejected: %s", code)
    return ImportPalettesOutput(
        errors=[PaletteValidationError(code=code, message=message)],
        success=False,
    )


def decode_input(text: str | None, rules: PaletteRules) -> tuple[Any, ImportPalettesOutput | None]:
    """
    Decode submitted JSON text.

    Returns (decoded, None) on success or (None, failure) classified as
    empty_input or invalid_format.
    """
    if text is not None and rules.input.strip_backslashes:
        text = text.replace("\\", "")

    if text is None or not text.strip():
        return None, _fail("empty_input", EMPTY_INPUT_MESSAGE)

    if len(text) > rules.input.max_input_chars:
        return None, _fail("invalid_format", INVALID_FORMAT_MESSAGE)

    try:
        decoded = json.loads(text)
    except (ValueError, RecursionError):
        return None, _fail("invalid_format", INVALID_FORMAT_MESSAGE)

    if not isinstance(classify_raw(decoded), RawMapping):
        return None, _fail("invalid_format", INVALID_FORMAT_MESSAGE)

    return decoded, None


def load_collection(store: OptionStorePort, rules: PaletteRules) -> PaletteCollection:
    """Read the stored collection, re-validated so it is always canonical."""
    stored = store.get(rules.storage.option_key, {})
    return validate(stored)


def export_json(collection: PaletteCollection) -> str:
    """Pretty-print a collection as editable JSON text."""
    if not collection:
        return ""
    return json.dumps(collection, indent=4, ensure_ascii=False)


# --- Component Entry Points ---


def run_import(
    inp: ImportPalettesInput,
    *,
    store: OptionStorePort,
    rules: PaletteRules | None = None,
) -> ImportPalettesOutput:
    """
    Validate submitted JSON text and persist the resulting palettes.

    Args:
        inp: Input containing the raw JSON text.
        store: Option store port.
        rules: Optional rules (defaults used when omitted).

    Returns:
        ImportPalettesOutput with saved palettes or a single classified error.
    """
    if rules is None:
        rules = PaletteRules()

    decoded, failure = decode_input(inp.json_input, rules)
    if failure is not None:
        return failure

    palettes = validate(decoded)
    if not palettes:
        return _fail("no_valid_palettes", NO_VALID_PALETTES_MESSAGE)

    store.set(rules.storage.option_key, palettes)
    logger.info(
        "Saved %d palette(s) under %r: %s",
        len(palettes),
        rules.storage.option_key,
        ", ".join(palettes),
    )

    return ImportPalettesOutput(palettes=palettes, errors=[], success=True, message=SAVED_MESSAGE)


def run_get(
    inp: GetPalettesInput,
    *,
    store: OptionStorePort,
    rules: PaletteRules | None = None,
) -> GetPalettesOutput:
    """Get the stored palettes (empty collection when none are saved)."""
    if rules is None:
        rules = PaletteRules()
    return GetPalettesOutput(palettes=load_collection(store, rules))


def run(
    inp: ImportPalettesInput | GetPalettesInput,
    *,
    store: OptionStorePort,
    rules: PaletteRules | None = None,
) -> ImportPalettesOutput | GetPalettesOutput:
    """
    Main entry point for the palettes component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, ImportPalettesInput):
        return run_import(inp, store=store, rules=rules)
    elif isinstance(inp, GetPalettesInput):
        return run_get(inp, store=store, rules=rules)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
