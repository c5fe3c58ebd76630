"""
Palettes component - Palette import, validation and storage.
"""

from .component import (
    export_json,
    load_collection,
    normalize_hex,
    run,
    run_get,
    run_import,
    validate,
)
from .models import (
    GetPalettesInput,
    GetPalettesOutput,
    ImportPalettesInput,
    ImportPalettesOutput,
    PaletteValidationError,
    RawMapping,
    RawOther,
    RawPaletteInput,
    RawText,
    classify_raw,
)
from .ports import OptionStorePort, SafeKeyPort

__all__ = [
    # Component entry points
    "run",
    "run_get",
    "run_import",
    # Functions
    "validate",
    "normalize_hex",
    "load_collection",
    "export_json",
    "classify_raw",
    # Models
    "GetPalettesInput",
    "GetPalettesOutput",
    "ImportPalettesInput",
    "ImportPalettesOutput",
    "PaletteValidationError",
    "RawMapping",
    "RawOther",
    "RawPaletteInput",
    "RawText",
    # Ports
    "OptionStorePort",
    "SafeKeyPort",
]
