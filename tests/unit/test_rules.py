"""
Rules loading tests.

Verifies that the rules loader validates rules.yaml structure and
falls back to defaults when no file exists.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from src.rules.loader import load_rules, load_rules_or_default
from src.rules.models import PaletteRules


@pytest.fixture
def project_root() -> Path:
    return Path(__file__).parent.parent.parent


class TestRulesLoading:
    """Test rules file loading."""

    def test_load_project_rules_file(self, project_root: Path) -> None:
        rules = load_rules(project_root / "rules.yaml")
        assert rules.storage.option_key == "color_palette_data"
        assert rules.input.strip_backslashes is True

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_rules(tmp_path / "missing.yaml")

    def test_missing_file_falls_back_to_defaults(self, tmp_path: Path) -> None:
        assert load_rules_or_default(tmp_path / "missing.yaml") == PaletteRules()

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text("")
        assert load_rules(path) == PaletteRules()

    def test_partial_file_merges_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text("storage:\n  option_key: brand_palettes\n")
        rules = load_rules(path)
        assert rules.storage.option_key == "brand_palettes"
        assert rules.input.max_input_chars == 65536

    def test_fenced_yaml_block(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.md"
        path.write_text(
            "# Palette rules\n\n```yaml\ninput:\n  strip_backslashes: false\n```\n\nNotes.\n"
        )
        assert load_rules(path).input.strip_backslashes is False

    def test_invalid_yaml_raises_value_error(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text("storage: [unclosed\n")
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_rules(path)

    def test_unknown_section_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text("bogus: 1\n")
        with pytest.raises(ValueError, match="Rules validation failed"):
            load_rules(path)

    def test_non_positive_limit_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text("input:\n  max_input_chars: 0\n")
        with pytest.raises(ValueError):
            load_rules(path)

    @pytest.mark.parametrize(
        "template", ["Missing {0}", "Missing {palette}", "Missing {name.nope}", "Missing {"]
    )
    def test_bad_not_found_template_rejected_at_load(self, tmp_path: Path, template: str) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text(f"render:\n  not_found_message: '{template}'\n")
        with pytest.raises(ValueError, match="Rules validation failed"):
            load_rules(path)

    def test_literal_braces_allowed_in_not_found_template(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text("render:\n  not_found_message: 'No {{palette}} called {name}'\n")
        assert load_rules(path).render.not_found_message == "No {{palette}} called {name}"
