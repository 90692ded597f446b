"""Type registry scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_REGISTRY_FILENAME = "types.yaml"

_REGISTRY_SCAFFOLD_TEMPLATE = """# Type registry template for openapi-entity-schema.
# Every entry under `types` names a class-like type usable in type expressions,
# e.g. `Pet`, `?Pet`, `Pet[]` or `Pet|Owner`.

types:
  Pet:
    # kind is one of: object (default), datetime, interface.
    kind: object
    fields:
      # Fields are emitted as schema properties in the order listed here.
      - name: id
        type: int
        description: "<OPTIONAL>"
        required: true
      - name: name
        # Omitting `type` resolves the field as a string.
        required: true
      - name: tags
        type: string[]
      - name: owner
        type: ?Owner
      - name: born_at
        type: Timestamp
  Owner:
    fields:
      - name: email
        type: string
        required: true
  Timestamp:
    kind: datetime
  Identifiable:
    kind: interface
"""


def build_placeholder_registry() -> str:
    """Build a YAML type registry template with inline guidance."""
    return _REGISTRY_SCAFFOLD_TEMPLATE


def write_placeholder_registry(output_path: Path | str) -> Path:
    """Write the placeholder type registry to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Type registry file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_registry(), encoding="utf-8")
    return destination.resolve()
