"""Schema generation components."""

from model_schema_spec.generation.factory import SchemaFactory
from model_schema_spec.generation.generator import SchemaGenerator
from model_schema_spec.generation.type_map import native_type_to_schema_type

__all__ = ["SchemaFactory", "SchemaGenerator", "native_type_to_schema_type"]
