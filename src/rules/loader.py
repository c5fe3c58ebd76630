import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from src.rules.models import PaletteRules

# First ```yaml fenced block, for rules kept inside a markdown document
_FENCED_YAML = re.compile(r"^\s*```yaml\s*$\n(.*?)^\s*```", re.MULTILINE | re.DOTALL)


def _yaml_source(text: str) -> str:
    block = _FENCED_YAML.search(text)
    return block.group(1) if block else text


def load_rules(path: Path) -> PaletteRules:
    """
    Parse the palette rules file at path.

    Missing sections take their defaults. Raises FileNotFoundError when
    the file does not exist and ValueError for bad YAML or a bad schema.
    """
    if not path.is_file():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    try:
        data = yaml.safe_load(_yaml_source(path.read_text()))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    try:
        return PaletteRules.model_validate(data or {})
    except ValidationError as e:
        raise ValueError(f"Rules validation failed:\n{e}") from e


def load_rules_or_default(path: Path) -> PaletteRules:
    """Load rules from path, or fall back to built-in defaults when absent."""
    if not path.exists():
        return PaletteRules()
    return load_rules(path)
