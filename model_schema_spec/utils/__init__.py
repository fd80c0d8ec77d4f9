"""Shared helper functions."""

from model_schema_spec.utils.naming import document_title, property_title

__all__ = ["document_title", "property_title"]
