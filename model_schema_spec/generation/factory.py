"""Factory for schema generators sharing one configuration."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from model_schema_spec.core.config import GeneratorOptions
from model_schema_spec.generation.generator import SchemaGenerator

if TYPE_CHECKING:
    from model_schema_spec.testing.helper import SchemaTestHelper


class SchemaFactory:
    """Creates schema generators bound to one set of default options.

    Generators built here can embed associated models inline, because
    they spawn child generators through the factory with the same
    defaults and a nested property root.
    """

    def __init__(
        self,
        options: GeneratorOptions | Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        """Initialize the factory.

        Args:
            options: Default generator options, see GeneratorOptions for
                the available keys
            **kwargs: Additional default options
        """
        if isinstance(options, GeneratorOptions):
            options = options.shared_options()
        self.options: Mapping[str, Any] = MappingProxyType(
            {**dict(options or {}), **kwargs}
        )

    def get_schema_generator(
        self, model: Any, overrides: Mapping[str, Any] | None = None
    ) -> SchemaGenerator:
        """Get a SchemaGenerator instance for the given model.

        Args:
            model: The model descriptor to generate a schema for
            overrides: Merged over the default options

        Returns:
            A generator bound to ``model``
        """
        opts = {"factory": self, **self.options, **(overrides or {})}
        return SchemaGenerator(model, opts)

    def get_test_helper(
        self, model: Any, overrides: Mapping[str, Any] | None = None
    ) -> SchemaTestHelper:
        """Get a SchemaTestHelper for checking documents of the given model."""
        from model_schema_spec.testing.helper import SchemaTestHelper

        opts = {"factory": self, **self.options, **(overrides or {})}
        return SchemaTestHelper(model, opts)
