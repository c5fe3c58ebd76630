"""
Admin Palettes API.

GET returns the stored palettes plus pretty-printed JSON for editing.
PUT validates submitted JSON text and saves it; failures return 400
with one classified error (empty_input, invalid_format or
no_valid_palettes) and leave the stored palettes untouched.
"""

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import HTMLResponse

from src.api.deps import get_option_store, get_rules
from src.api.schemas import (
    PaletteErrorModel,
    PaletteErrorResponse,
    PaletteImportRequest,
    PalettesResponse,
)
from src.components.palettes import (
    GetPalettesInput,
    ImportPalettesInput,
    OptionStorePort,
    export_json,
    run_get,
    run_import,
)
from src.components.swatches import palette_title, render_palette, to_html
from src.domain.entities import PaletteCollection
from src.domain.sanitize import escape_attr, escape_html
from src.rules.models import PaletteRules

router = APIRouter()


# --- Helper Functions ---


def palettes_to_response(
    palettes: PaletteCollection, message: str | None = None
) -> PalettesResponse:
    return PalettesResponse(palettes=palettes, json_text=export_json(palettes), message=message)


def render_preview_html(palettes: PaletteCollection) -> str:
    """Admin preview: every palette with its selector usage hint."""
    if not palettes:
        return ""

    parts = ['<div class="palette-preview">', "<h3>Preview</h3>"]
    for name, colors in palettes.items():
        parts.append(
            '<div class="palette-preview-item">'
            f"<h4>{escape_html(palette_title(name))} Palette</h4>"
            f"{to_html(render_palette(colors))}"
            "<p><strong>Shortcode:</strong> "
            f'<code>[color_palette name="{escape_attr(name)}"]</code></p>'
            "</div>"
        )
    parts.append("<p><strong>Show all palettes:</strong> <code>[color_palette]</code></p>")
    parts.append("</div>")
    return "".join(parts)


# --- Endpoints ---


@router.get(
    "",
    response_model=PalettesResponse,
    summary="Get palettes",
    description="Get stored palettes. Returns an empty collection if none are saved.",
)
def get_palettes(
    store: OptionStorePort = Depends(get_option_store),
    rules: PaletteRules = Depends(get_rules),
) -> PalettesResponse:
    result = run_get(GetPalettesInput(), store=store, rules=rules)
    return palettes_to_response(result.palettes)


@router.put(
    "",
    response_model=PalettesResponse,
    summary="Import palettes",
    description="Validate palette JSON and replace the stored palettes.",
    responses={
        400: {
            "model": PaletteErrorResponse,
            "description": "Empty input, invalid JSON, or no valid palettes",
        },
    },
)
def import_palettes(
    request: PaletteImportRequest,
    store: OptionStorePort = Depends(get_option_store),
    rules: PaletteRules = Depends(get_rules),
) -> Any:
    """
    Import palettes.

    Invalid colors and palettes are silently dropped; the request only
    fails when nothing usable remains.
    """
    result = run_import(ImportPalettesInput(json_input=request.json_input), store=store, rules=rules)

    if not result.success:
        error_body = PaletteErrorResponse(
            message=result.errors[0].message,
            errors=[
                PaletteErrorModel(field=e.field, code=e.code, message=e.message)
                for e in result.errors
            ],
        )
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=error_body.model_dump(),
        )

    return palettes_to_response(result.palettes, message=result.message)


@router.get(
    "/preview",
    response_class=HTMLResponse,
    summary="Preview palettes",
)
def preview_palettes(
    store: OptionStorePort = Depends(get_option_store),
    rules: PaletteRules = Depends(get_rules),
) -> HTMLResponse:
    result = run_get(GetPalettesInput(), store=store, rules=rules)
    return HTMLResponse(content=render_preview_html(result.palettes))
