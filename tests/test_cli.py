#!/usr/bin/env python3
"""
Tests for the `latlng` command-line interface.

Run with: python -m pytest tests/test_cli.py -v
"""

import json
import os
import sys

import pytest
import yaml
from typer.testing import CliRunner

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from latlng_formatter.cli import app


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


class TestConvertCommands:
    """Tests for `latlng convert ...`."""

    def test_from_decimal_to_dms(self, runner):
        result = runner.invoke(app, ["convert", "from-decimal", "45.5", "--type", "lat"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "degrees=45 minutes=30 seconds=0.0"

    def test_from_decimal_negative_after_separator(self, runner):
        result = runner.invoke(
            app, ["convert", "from-decimal", "--type", "long", "--format", "json", "--", "-45.5"]
        )
        assert result.exit_code == 0
        assert json.loads(result.stdout) == {
            "ordinate_type": "long",
            "dms": {"degrees": -45, "minutes": 30, "seconds": 0.0},
        }

    def test_from_decimal_to_gps_yaml(self, runner):
        result = runner.invoke(
            app, ["convert", "from-decimal", "45.5", "--to", "gps", "--format", "yaml"]
        )
        assert result.exit_code == 0
        assert yaml.safe_load(result.stdout) == {
            "ordinate_type": "lat",
            "gps": {"degrees": 45, "minutes": 30.0},
        }

    def test_from_decimal_out_of_range_exits_with_error(self, runner):
        result = runner.invoke(app, ["convert", "from-decimal", "200", "--type", "lat"])
        assert result.exit_code == 1
        assert "Invalid decimal ordinate for type 'lat'" in result.output

    def test_same_representation_is_usage_error(self, runner):
        result = runner.invoke(app, ["convert", "from-decimal", "45.5", "--to", "decimal"])
        assert result.exit_code == 2

    def test_from_dms_to_decimal(self, runner):
        result = runner.invoke(app, ["convert", "from-dms", "45", "30", "36"])
        assert result.exit_code == 0
        assert float(result.stdout) == pytest.approx(45.51)

    def test_from_dms_strict_compat_rejects_zero_seconds(self, runner):
        result = runner.invoke(app, ["convert", "from-dms", "--strict-compat", "45", "30", "0"])
        assert result.exit_code == 1

    def test_from_gps_to_dms_json(self, runner):
        result = runner.invoke(
            app, ["convert", "from-gps", "45", "30.5", "--to", "dms", "--format", "json"]
        )
        assert result.exit_code == 0
        assert json.loads(result.stdout)["dms"] == {"degrees": 45, "minutes": 30, "seconds": 30.0}

    def test_from_gps_to_decimal(self, runner):
        result = runner.invoke(app, ["convert", "from-gps", "45", "30"])
        assert result.exit_code == 0
        assert float(result.stdout) == 45.5


class TestValidateCommands:
    """Tests for `latlng validate ...`."""

    def test_valid_decimal(self, runner):
        result = runner.invoke(app, ["validate", "decimal", "91", "--type", "long"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "valid"

    def test_invalid_decimal_reports_reason(self, runner):
        result = runner.invoke(app, ["validate", "decimal", "91", "--type", "lat"])
        assert result.exit_code == 1
        assert "outside valid range [-90, 90]" in result.stdout

    def test_dms_zero_seconds_default_and_strict(self, runner):
        assert runner.invoke(app, ["validate", "dms", "45", "30", "0"]).exit_code == 0
        strict = runner.invoke(app, ["validate", "dms", "--strict-compat", "45", "30", "0"])
        assert strict.exit_code == 1
        assert "strict compatibility mode" in strict.stdout

    def test_gps_minutes_above_sixty(self, runner):
        result = runner.invoke(app, ["validate", "gps", "45", "61"])
        assert result.exit_code == 1


class TestConfigCommands:
    """Tests for `latlng config ...` and the --config option."""

    def test_init_then_show(self, runner, tmp_path):
        path = tmp_path / "latlng.yaml"

        init = runner.invoke(app, ["config", "init", str(path)])
        assert init.exit_code == 0
        assert path.exists()

        show = runner.invoke(app, ["config", "show", "--config", str(path)])
        assert show.exit_code == 0
        assert yaml.safe_load(show.stdout)["converter"]["negative_decimal_mode"] == "magnitude"

    def test_init_refuses_to_overwrite(self, runner, tmp_path):
        path = tmp_path / "latlng.yaml"
        path.write_text("converter:\n")
        result = runner.invoke(app, ["config", "init", str(path)])
        assert result.exit_code == 1

    def test_config_file_selects_floor_mode(self, runner, tmp_path):
        path = tmp_path / "latlng.yaml"
        path.write_text("converter:\n  negative_decimal_mode: floor\n")

        result = runner.invoke(
            app,
            ["convert", "from-decimal", "--config", str(path), "--format", "json", "--", "-45.5"],
        )
        assert result.exit_code == 0
        assert json.loads(result.stdout)["dms"]["degrees"] == -46

    def test_missing_config_file(self, runner, tmp_path):
        result = runner.invoke(
            app, ["convert", "from-decimal", "45.5", "--config", str(tmp_path / "nope.yaml")]
        )
        assert result.exit_code == 1
        assert "Configuration file not found" in result.output
