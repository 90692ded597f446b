"""Field introspection over Python classes and dataclasses."""

from __future__ import annotations

import dataclasses
import inspect
import re
import sys
from collections.abc import Iterable, Mapping, Sequence
from datetime import date, datetime, time
from typing import Any, get_origin

from .field_descriptors import (
    FieldDescriptor,
    IntrospectionUnavailableError,
    coerce_required_flag,
)

_NAME_ALIASES = {
    "None": "null",
    "NoneType": "null",
    "str": "string",
    "Any": "mixed",
    "Self": "object",
}
_OPTIONAL_PATTERN = re.compile(r"(?:typing\.)?Optional\[((?:[^\[\]]|\[\])*)\]")
_UNION_PATTERN = re.compile(r"(?:typing\.)?Union\[((?:[^\[\]]|\[\])*)\]")
_SEQUENCE_PATTERN = re.compile(
    r"(?:typing\.|collections\.abc\.)?(?:list|List|Sequence|tuple|Tuple)"
    r"\[((?:[^\[\],]|\[\])*)(?:,\.\.\.)?\]"
)
_NAME_PATTERN = re.compile(r"[A-Za-z_][\w.]*")
_ATTRIBUTE_ENTRY_PATTERN = re.compile(r"^(\w+)(?:\s*\([^)]*\))?\s*:\s*(.+)$")


class DataclassIntrospector:
    """Field introspector that reads public fields from Python classes.

    Dataclasses contribute their declared fields together with the optional
    ``type``, ``description`` and ``required`` entries of ``field(metadata=...)``.
    Plain classes contribute their annotations, inherited ones first. Descriptions missing from
    metadata are looked up in the ``Attributes:`` section of the class docstring.
    """

    def __init__(
        self,
        classes: Iterable[type] | Mapping[str, type],
        *,
        read_docstrings: bool = True,
    ) -> None:
        registered: dict[str, type] = {"datetime": datetime}
        if isinstance(classes, Mapping):
            registered.update(classes)
        else:
            registered.update((cls.__name__, cls) for cls in classes)
        self._classes = registered
        self._read_docstrings = read_docstrings

    def list_public_fields(self, type_name: str) -> Sequence[FieldDescriptor]:
        cls = self._classes.get(type_name)
        if cls is None or self.is_date_time_like(type_name):
            return ()

        attribute_docs: Mapping[str, str] | None = None
        descriptors: list[FieldDescriptor] = []
        for name, annotation, metadata in _iter_public_fields(cls):
            description = metadata.get("description")
            if description is None and self._read_docstrings:
                if attribute_docs is None:
                    attribute_docs = _attribute_docs(cls)
                description = attribute_docs.get(name)
            type_expression = _field_type_expression(metadata.get("type"), annotation)
            descriptors.append(
                FieldDescriptor(
                    name=name,
                    type_expression=type_expression or None,
                    description=description,
                    required=coerce_required_flag(metadata.get("required")),
                )
            )
        return tuple(descriptors)

    def is_known_type(self, type_name: str) -> bool:
        return type_name in self._classes and not self.is_interface_like(type_name)

    def is_date_time_like(self, type_name: str) -> bool:
        cls = self._classes.get(type_name)
        return cls is not None and issubclass(cls, (date, time))

    def is_interface_like(self, type_name: str) -> bool:
        cls = self._classes.get(type_name)
        if cls is None:
            return False
        return bool(getattr(cls, "_is_protocol", False)) or inspect.isabstract(cls)


def annotation_to_type_expression(annotation: Any) -> str:
    """Translate a Python annotation (object or string) into a type expression.

    ``Optional[X]`` becomes ``?X``, ``Union[A, B]`` becomes ``(A|B)``, single-element sequences become ``X[]``,
    ``None`` becomes ``null`` and ``str`` becomes ``string``. Dotted names
    are reduced to their last segment.
    """
    if isinstance(annotation, str):
        text = annotation
    elif isinstance(annotation, type) and get_origin(annotation) is None:
        text = annotation.__name__
    else:
        text = str(annotation)
    text = "".join(text.split())

    previous = None
    while previous != text:
        previous = text
        text = _OPTIONAL_PATTERN.sub(r"?(\1)", text)
        text = _SEQUENCE_PATTERN.sub(r"(\1)[]", text)
        text = _UNION_PATTERN.sub(_union_alternatives, text)

    return _NAME_PATTERN.sub(_translate_name, text)


def _field_type_expression(declared: Any, annotation: Any) -> str | None:
    # metadata strings are already type expressions, anything else is an annotation
    if isinstance(declared, str):
        return declared.strip()
    if declared is not None:
        return annotation_to_type_expression(declared)
    if annotation is not None:
        return annotation_to_type_expression(annotation)
    return None


def _union_alternatives(match: re.Match[str]) -> str:
    return "(" + match.group(1).replace(",", "|") + ")"


def _translate_name(match: re.Match[str]) -> str:
    name = match.group(0).rsplit(".", 1)[-1]
    return _NAME_ALIASES.get(name, name)


def _iter_public_fields(cls: type) -> Iterable[tuple[str, Any, Mapping[str, Any]]]:
    if dataclasses.is_dataclass(cls):
        for field in dataclasses.fields(cls):
            if not field.name.startswith("_"):
                yield field.name, field.type, field.metadata
        return
    annotations: dict[str, Any] = {}
    for base in reversed(cls.__mro__):
        if base is not object:
            annotations.update(inspect.get_annotations(base))
    for name, annotation in annotations.items():
        if not name.startswith("_"):
            yield name, annotation, {}


def _docstrings_available() -> bool:
    return sys.flags.optimize < 2


def _attribute_docs(cls: type) -> Mapping[str, str]:
    """Parse ``name: text`` entries from the ``Attributes:`` docstring section."""
    if not _docstrings_available():
        raise IntrospectionUnavailableError(
            f"Docstrings of {cls.__name__} are stripped (python -OO); "
            "provide field descriptions through dataclass metadata instead."
        )
    docstring = inspect.cleandoc(cls.__doc__ or "")
    entries: dict[str, str] = {}
    in_section = False
    for line in docstring.splitlines():
        stripped = line.strip()
        if stripped == "Attributes:":
            in_section = True
            continue
        if not in_section:
            continue
        if not stripped:
            continue
        if not line.startswith((" ", "\t")):
            break
        entry = _ATTRIBUTE_ENTRY_PATTERN.match(stripped)
        if entry is not None:
            entries.setdefault(entry.group(1), entry.group(2).strip())
    return entries
