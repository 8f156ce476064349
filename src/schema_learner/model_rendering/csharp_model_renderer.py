"""C# model source rendering service."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from schema_learner.configuration.runtime_settings import RenderingSettings
from schema_learner.model_emission import FieldType, FieldTypeKind, TypeDefinition
from schema_learner.schema_management import TypeTag

from .constants import MODEL_FILE_SUFFIX

_CSHARP_PRIMITIVES = {
    TypeTag.STRING: "string",
    TypeTag.INTEGER: "int",
    TypeTag.DOUBLE: "double",
    TypeTag.BOOLEAN: "bool",
    TypeTag.OBJECT: "object",
    TypeTag.NULL: "object",
}


class RenderError(Exception):
    """Raised when model files cannot be written."""


def csharp_type_name(field_type: FieldType) -> str:
    """C# spelling of an emitted field type."""
    if field_type.kind is FieldTypeKind.COLLECTION and field_type.element is not None:
        return f"List<{csharp_type_name(field_type.element)}>"
    if field_type.kind is FieldTypeKind.NAMED and field_type.type_name:
        return field_type.type_name
    if field_type.primitive is not None:
        return _CSHARP_PRIMITIVES[field_type.primitive]
    return "object"


def render_csharp_model(definition: TypeDefinition, settings: RenderingSettings) -> str:
    """Render one type definition as a C# source file."""
    modifier = "required " if settings.required_members else ""
    properties = "".join(
        f"    public {modifier}{csharp_type_name(field.field_type)} {field.name} {{ get; set; }}\n"
        for field in definition.fields
    )
    class_code = f"public class {definition.name} {{\n{properties}}}\n"

    sections: list[str] = []
    if settings.usings:
        sections.append("".join(f"using {using};\n" for using in settings.usings))
    if settings.namespace:
        sections.append(f"namespace {settings.namespace};\n")
    sections.append(class_code)
    return "\n".join(sections)


def write_model_files(
    definitions: Sequence[TypeDefinition],
    directory: Path | str,
    settings: RenderingSettings,
) -> tuple[Path, ...]:
    """Write one ``<TypeName>.cs`` file per definition and return the paths.

    Raises:
      RenderError: If the directory or a model file cannot be written.
    """
    destination = Path(directory)
    written: list[Path] = []
    try:
        destination.mkdir(parents=True, exist_ok=True)
        for definition in definitions:
            path = destination / f"{definition.name}{MODEL_FILE_SUFFIX}"
            path.write_text(render_csharp_model(definition, settings), encoding="utf-8")
            written.append(path)
    except OSError as exc:
        raise RenderError(f"Failed to write model files to {destination}: {exc}") from exc
    return tuple(written)
