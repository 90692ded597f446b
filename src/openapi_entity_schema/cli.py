"""Command line interface entry point."""

from __future__ import annotations

import json
import logging
import sys

import click
import yaml

from openapi_entity_schema.configuration import (
    DEFAULT_REGISTRY_FILENAME,
    ConfigurationError,
    load_type_registry,
    write_placeholder_registry,
)
from openapi_entity_schema.field_introspection import (
    IntrospectionUnavailableError,
    TypeRegistry,
)
from openapi_entity_schema.schema_resolution import SchemaFragment, SchemaResolver
from openapi_entity_schema.type_normalization import UnsupportedTypeError


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="openapi-entity-schema")
def cli() -> None:
    """Type expression to OpenAPI schema utility."""


@cli.command(name="generate-registry")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_REGISTRY_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML type registry template to write",
)
def generate_registry(output_path: str) -> None:
    """Generate a placeholder YAML type registry with guidance comments."""
    try:
        resolved_output = write_placeholder_registry(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="resolve")
@click.argument("type_expression")
@click.option(
    "--registry",
    "registry_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to the YAML type registry describing class-like types",
)
@click.option(
    "--description",
    required=False,
    help="Description attached to the top-level schema fragment",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml"]),
    default="json",
    show_default=True,
    help="Output format of the schema fragment",
)
@click.option("--verbose", is_flag=True, default=False, help="Log resolution steps to stderr.")
def resolve(
    type_expression: str,
    registry_path: str | None,
    description: str | None,
    output_format: str,
    verbose: bool,
) -> None:
    """Resolve TYPE_EXPRESSION into an OpenAPI schema fragment."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)
    try:
        registry = load_type_registry(registry_path) if registry_path else TypeRegistry()
        fragment = SchemaResolver(registry).resolve(type_expression, description)
    except (
        ConfigurationError,
        UnsupportedTypeError,
        IntrospectionUnavailableError,
        OSError,
    ) as exc:
        raise CliError(str(exc)) from exc
    click.echo(_render_fragment(fragment, output_format))


def _render_fragment(fragment: SchemaFragment, output_format: str) -> str:
    if output_format == "yaml":
        return yaml.safe_dump(fragment, sort_keys=False, default_flow_style=False).rstrip("\n")
    return json.dumps(fragment, indent=2)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
