"""Public palette display, equivalent to the [color_palette name="..."] shortcode."""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import HTMLResponse

from src.api.deps import get_option_store, get_rules
from src.components.palettes import OptionStorePort, load_collection
from src.components.swatches import render_collection, to_html
from src.rules.models import PaletteRules

router = APIRouter()


@router.get("/palettes", response_class=HTMLResponse)
def show_palettes(
    name: str = Query(default="", description="Palette key; empty shows every palette"),
    store: OptionStorePort = Depends(get_option_store),
    rules: PaletteRules = Depends(get_rules),
) -> HTMLResponse:
    """
    Render stored palettes as HTML.

    An unknown name renders a "not found" notice with status 200.
    """
    palettes = load_collection(store, rules)
    fragment = render_collection(palettes, name or None, rules=rules.render)
    return HTMLResponse(content=to_html(fragment))
