import re

# --- Palette value types ---

# Canonical form of every hex code stored or rendered.
CANONICAL_HEX_PATTERN = re.compile(r"^#[0-9A-F]{6}$")

HexCode = str
ColorName = str
PaletteName = str

# Insertion order is render order.
Palette = dict[ColorName, HexCode]
PaletteCollection = dict[PaletteName, Palette]
