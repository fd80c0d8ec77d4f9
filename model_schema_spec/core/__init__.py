"""Core data models and shared types."""

from model_schema_spec.core.config import GeneratorOptions, Settings, config
from model_schema_spec.core.exceptions import (
    CyclicInlineAssociationError,
    InvalidModelError,
    MissingConfigError,
    SchemaAssertionError,
    SchemaGenerationError,
    UnknownAttributeError,
    UnknownTypeError,
)
from model_schema_spec.core.schemas import (
    AssociationDescriptor,
    AttributeDescriptor,
    ModelDescriptor,
    TypeDescriptor,
    ValidationResult,
)

__all__ = [
    "AssociationDescriptor",
    "AttributeDescriptor",
    "ModelDescriptor",
    "TypeDescriptor",
    "ValidationResult",
    "GeneratorOptions",
    "Settings",
    "SchemaGenerationError",
    "InvalidModelError",
    "MissingConfigError",
    "UnknownAttributeError",
    "UnknownTypeError",
    "CyclicInlineAssociationError",
    "SchemaAssertionError",
    "config",
]
