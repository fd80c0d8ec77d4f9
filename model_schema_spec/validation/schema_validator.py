"""Schema validation against the JSON Schema Draft 06 meta-schema."""

from __future__ import annotations

from typing import Any

import jsonschema
from jsonschema import Draft6Validator

from model_schema_spec.core.schemas import ValidationResult


class SchemaValidator:
    """Validates generated schemas against JSON Schema standards.

    This validator checks that generated documents conform to the JSON
    Schema Draft 06 meta-schema and carry the fields every model document
    is expected to have. It does not validate payloads.
    """

    def validate_schema(self, schema: dict[str, Any]) -> ValidationResult:
        """Validate a schema against the JSON Schema Draft 06 standard.

        Args:
            schema: Schema to validate

        Returns:
            ValidationResult with validation status and any errors/warnings
        """
        result = ValidationResult(is_valid=True)

        try:
            Draft6Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            result.add_error(f"JSON Schema validation failed: {e.message}")

        self._validate_required_fields(schema, result)
        self._validate_schema_structure(schema, result)

        return result

    def _validate_required_fields(
        self, schema: dict[str, Any], result: ValidationResult
    ) -> None:
        """Object schemas must describe their properties as an object."""
        if schema.get("type") == "object" and "properties" not in schema:
            result.add_error(
                "Missing 'properties' field - object type schemas should have properties"
            )
            return

        if "properties" in schema and not isinstance(schema["properties"], dict):
            result.add_error("'properties' field must be an object")

    def _validate_schema_structure(
        self, schema: dict[str, Any], result: ValidationResult
    ) -> None:
        """Warn about missing recommended top-level fields."""
        if "$schema" not in schema:
            result.add_warning(
                "Missing '$schema' field - recommended for schema validation"
            )

        if "$id" not in schema:
            result.add_warning(
                "Missing '$id' field - recommended for schema identification"
            )

        if "title" not in schema:
            result.add_warning("Missing 'title' field - recommended for documentation")
