"""Mapping from native model types to JSON Schema types."""

from __future__ import annotations

from model_schema_spec.core.exceptions import UnknownTypeError

# Maps from native (ORM) type key to json schema type
TYPE_MAP: dict[str, str] = {
    "INTEGER": "integer",
    "BIGINT": "integer",
    "FLOAT": "number",
    "DOUBLE": "number",
    "REAL": "number",
    "DECIMAL": "number",
    "BOOLEAN": "boolean",
    "STRING": "string",
    "TEXT": "string",
    "CHAR": "string",
    "UUID": "string",
    "JSON": "object",
    "JSONB": "object",
    "ARRAY": "array",
    "ENUM": "string",
    "DATE": "string",
    "DATEONLY": "string",
    "TIME": "string",
}


def native_type_to_schema_type(native_key: str, attribute: str | None = None) -> str:
    """Translate a native type key into a JSON Schema primitive type.

    Args:
        native_key: Native type key such as ``"STRING"``
        attribute: Attribute the type belongs to, used in the error message

    Returns:
        JSON Schema type name

    Raises:
        UnknownTypeError: If the native type has no mapping
    """
    schema_type = TYPE_MAP.get(native_key.upper())
    if schema_type is None:
        raise UnknownTypeError(native_key, attribute)
    return schema_type


def is_uuid_attribute(name: str) -> bool:
    """Identifier-like attributes are always strings, whatever they declare."""
    return name == "uuid" or name.endswith("Uuid")
