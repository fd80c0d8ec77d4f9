"""Assertions for host application test suites."""

from model_schema_spec.testing.helper import SchemaTestHelper

__all__ = ["SchemaTestHelper"]
