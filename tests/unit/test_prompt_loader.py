"""Tests for bundled prompt and schema loading."""

import json
from pathlib import Path

import pytest

from policy_compare.comparison.exceptions import ComparisonError
from policy_compare.comparison.prompt_loader import (
    load_json_schema,
    load_prompt_template,
    load_system_prompt,
    load_tabular_note,
)


class TestLoadPromptTemplate:
    def test_loads_default_template(self) -> None:
        template = load_prompt_template()
        assert "{unspecified}" in template
        assert "premiumAmount" in template

    def test_loads_custom_template(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom.txt"
        custom.write_text("Merhaba {unspecified}", encoding="utf-8")
        assert load_prompt_template(custom) == "Merhaba {unspecified}"

    def test_missing_file_raises_error(self) -> None:
        with pytest.raises(ComparisonError, match="Failed to load prompt"):
            load_prompt_template(Path("/nonexistent/file.txt"))


class TestLoadJsonSchema:
    def test_default_schema_describes_nine_fields(self) -> None:
        schema = json.loads(load_json_schema())
        policy = schema["properties"]["policies"]["items"]
        assert set(policy["properties"]) == {
            "companyName",
            "policyType",
            "premiumAmount",
            "currency",
            "coverageAmount",
            "deductible",
            "limits",
            "pros",
            "cons",
        }
        assert all("description" in field for field in policy["properties"].values())

    def test_default_schema_required_fields(self) -> None:
        schema = json.loads(load_json_schema())
        policy = schema["properties"]["policies"]["items"]
        assert policy["required"] == [
            "companyName",
            "premiumAmount",
            "currency",
            "coverageAmount",
            "deductible",
            "limits",
        ]
        assert schema["required"] == ["policies", "summary"]

    def test_missing_file_raises_error(self) -> None:
        with pytest.raises(ComparisonError, match="Failed to load JSON schema"):
            load_json_schema(Path("/nonexistent/schema.json"))


class TestSmallPrompts:
    def test_system_prompt_sets_persona_and_language(self) -> None:
        prompt = load_system_prompt()
        assert "sigorta danışmanı" in prompt
        assert "Türkçe" in prompt

    def test_tabular_note_mentions_conversion(self) -> None:
        assert "Excel/CSV" in load_tabular_note()
