from pydantic import BaseModel

# --- Palettes ---


class PaletteImportRequest(BaseModel):
    json_input: str | None = None


class PalettesResponse(BaseModel):
    palettes: dict[str, dict[str, str]]
    json_text: str
    message: str | None = None


class PaletteErrorModel(BaseModel):
    field: str | None
    code: str
    message: str


class PaletteErrorResponse(BaseModel):
    message: str
    errors: list[PaletteErrorModel]
