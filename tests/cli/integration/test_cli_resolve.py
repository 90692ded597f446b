"""CLI resolution tests."""

from __future__ import annotations

import json
from pathlib import Path

import yaml
from click.testing import CliRunner
from openapi_entity_schema.cli import cli, main


def _sample_registry() -> Path:
    return Path(__file__).resolve().parents[3] / "samples" / "sample-registry.yaml"


def test_resolve_prints_json_fragment() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["resolve", "?int", "--description", "Count"])

    assert result.exit_code == 0
    assert json.loads(result.output) == {"description": "Count", "nullable": True, "type": "integer"}


def test_resolve_prints_yaml_fragment_with_registry() -> None:
    runner = CliRunner()
    result = runner.invoke(
        cli,
        ["resolve", "Timestamp[]", "--registry", str(_sample_registry()), "--format", "yaml"],
    )

    assert result.exit_code == 0
    assert result.output.startswith("type: array\n")
    assert yaml.safe_load(result.output) == {
        "type": "array",
        "items": {"type": "string", "format": "date-time"},
    }


def test_generate_registry_then_resolve(tmp_path: Path, capsys) -> None:
    destination = tmp_path / "types.yaml"

    assert main(["generate-registry", "--output", str(destination)]) == 0
    assert capsys.readouterr().out.strip() == str(destination.resolve())

    assert main(["resolve", "Owner", "--registry", str(destination)]) == 0
    assert json.loads(capsys.readouterr().out) == {
        "type": "object",
        "properties": {"email": {"type": "string"}},
        "required": ["email"],
    }
