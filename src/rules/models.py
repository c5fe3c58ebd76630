from pydantic import BaseModel, ConfigDict, Field, field_validator


class StorageRules(BaseModel):
    option_key: str = "color_palette_data"


class InputRules(BaseModel):
    strip_backslashes: bool = True
    max_input_chars: int = Field(default=65536, gt=0)


class RenderRules(BaseModel):
    empty_message: str = (
        "No color palettes configured. Please set up your palettes in the admin settings."
    )
    not_found_message: str = 'Palette "{name}" not found.'

    @field_validator("not_found_message")
    @classmethod
    def _check_placeholders(cls, value: str) -> str:
        # Only {name} may be substituted at render time
        try:
            value.format(name="")
        except (AttributeError, IndexError, KeyError, TypeError, ValueError) as e:
            raise ValueError(f"only the {{name}} placeholder is allowed: {e!r}") from e
        return value


class PaletteRules(BaseModel):
    storage: StorageRules = Field(default_factory=StorageRules)
    input: InputRules = Field(default_factory=InputRules)
    render: RenderRules = Field(default_factory=RenderRules)

    model_config = ConfigDict(extra="forbid")
