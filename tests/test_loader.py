"""
Tests for variables file loading and validation.
"""

import json
from pathlib import Path

import pytest

from curlyparser.exceptions import VarsFileValidationError
from curlyparser.loader import VarsLoader


def write(tmp_path: Path, name: str, content: str) -> Path:
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return path


class TestVarsLoader:
    """Test suite for VarsLoader."""

    def test_load_yaml_mapping(self, tmp_path):
        path = write(tmp_path, "vars.yaml", "name: MyApp\nport: 8080\nratio: 0.5\n")

        assert VarsLoader().load(path) == {"name": "MyApp", "port": "8080", "ratio": "0.5"}

    def test_load_json_mapping(self, tmp_path):
        path = write(tmp_path, "vars.json", json.dumps({"name": "MyApp", "count": 3}))

        assert VarsLoader().load(path) == {"name": "MyApp", "count": "3"}

    def test_boolean_looking_values_are_kept_literal(self, tmp_path):
        path = write(tmp_path, "vars.yaml", "flag: on\nenabled: yes\nother: False\n")

        assert VarsLoader().load(path) == {"flag": "on", "enabled": "yes", "other": "False"}

    def test_dates_are_converted_to_strings(self, tmp_path):
        path = write(tmp_path, "vars.yaml", "released: 2024-01-31\n")

        assert VarsLoader().load(path) == {"released": "2024-01-31"}

    def test_null_values_are_dropped(self, tmp_path):
        path = write(tmp_path, "vars.yaml", "present: x\nmissing:\n")

        assert VarsLoader().load(path) == {"present": "x"}

    def test_empty_file(self, tmp_path):
        path = write(tmp_path, "vars.yaml", "")

        assert VarsLoader().load(path) == {}

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            VarsLoader().load(tmp_path / "nope.yaml")

    def test_top_level_must_be_mapping(self, tmp_path):
        path = write(tmp_path, "vars.yaml", "- a\n- b\n")

        with pytest.raises(VarsFileValidationError) as exc_info:
            VarsLoader().load(path)

        assert "mapping" in exc_info.value.errors[0].message
        assert exc_info.value.exit_code == 2

    def test_all_invalid_entries_are_reported(self, tmp_path):
        path = write(tmp_path, "vars.yaml", "nested:\n  a: 1\nlisted: [1, 2]\n'bad|name': x\nok: fine\n")

        with pytest.raises(VarsFileValidationError) as exc_info:
            VarsLoader().load(path)

        paths = [error.path for error in exc_info.value.errors]
        assert paths == ["nested", "listed", "bad|name"]
        assert "nested" in str(exc_info.value)

    def test_malformed_yaml(self, tmp_path):
        path = write(tmp_path, "vars.yaml", "key: [unclosed\n")

        with pytest.raises(VarsFileValidationError) as exc_info:
            VarsLoader().load(path)

        assert "Failed to load variables file" in exc_info.value.errors[0].message
