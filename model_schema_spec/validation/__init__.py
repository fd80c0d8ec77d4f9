"""Checks for generated schema documents."""

from model_schema_spec.validation.schema_validator import SchemaValidator

__all__ = ["SchemaValidator"]
