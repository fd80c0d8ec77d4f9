"""
Model Schema Spec

A Python package for generating JSON Schema (Draft 06) documents from the
attribute and association metadata of ORM model descriptors.
"""

from model_schema_spec.core.config import GeneratorOptions
from model_schema_spec.core.exceptions import (
    CyclicInlineAssociationError,
    InvalidModelError,
    MissingConfigError,
    SchemaAssertionError,
    SchemaGenerationError,
    UnknownAttributeError,
    UnknownTypeError,
)
from model_schema_spec.core.schemas import ModelDescriptor
from model_schema_spec.generation.factory import SchemaFactory
from model_schema_spec.generation.generator import SchemaGenerator
from model_schema_spec.testing.helper import SchemaTestHelper

__all__ = [
    "SchemaFactory",
    "SchemaGenerator",
    "SchemaTestHelper",
    "ModelDescriptor",
    "GeneratorOptions",
    "SchemaGenerationError",
    "InvalidModelError",
    "MissingConfigError",
    "UnknownAttributeError",
    "UnknownTypeError",
    "CyclicInlineAssociationError",
    "SchemaAssertionError",
]
