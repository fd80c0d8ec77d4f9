"""Assertions for checking generated schemas in a host application's tests."""

from __future__ import annotations

import copy
from collections.abc import Iterable, Mapping
from typing import Any

from model_schema_spec.core.config import GeneratorOptions
from model_schema_spec.core.constants import (
    DEFAULT_DESCRIBED_FIELDS,
    ENUM_NATIVE_TYPE,
)
from model_schema_spec.core.exceptions import (
    SchemaAssertionError,
    UnknownAttributeError,
)
from model_schema_spec.core.schemas import ModelDescriptor
from model_schema_spec.generation.generator import SchemaGenerator
from model_schema_spec.utils.naming import property_title
from model_schema_spec.validation.schema_validator import SchemaValidator


class SchemaTestHelper:
    """Helper for verifying that a schema contains what we want.

    Every assertion collects all mismatches before failing, so a single
    test run reports everything that needs fixing. Failures raise
    SchemaAssertionError, which pytest reports like a failed ``assert``.

    The ``schema`` argument of each assertion is a schema document, or a
    response object whose ``body`` attribute or ``json()`` method returns
    one.
    """

    def __init__(
        self,
        model: Any,
        options: GeneratorOptions | Mapping[str, Any] | None = None,
        **overrides: Any,
    ) -> None:
        """Construct a helper for the given model.

        Args:
            model: The model descriptor this helper is for
            options: Same options the generator under test uses

        Raises:
            InvalidModelError: If ``model`` is not a recognizable model
            MissingConfigError: If ``href_base`` is absent or not a string
        """
        self.model = ModelDescriptor.coerce(model)
        self.options = GeneratorOptions.from_options(options, **overrides)
        self.generator = SchemaGenerator(self.model, self.options)

    def get_model_attribute(self, key: str) -> str:
        """Get the model attribute name for a json schema key.

        Virtual properties map to themselves. Otherwise the configured
        ``model_attribute_mapper`` is used when present.

        Raises:
            UnknownAttributeError: If no corresponding model attribute exists
        """
        if self.is_virtual_property(key):
            return key

        model_key = key
        if self.options.model_attribute_mapper is not None:
            model_key = self.options.model_attribute_mapper(self.model, key)

        if model_key not in self.model.attributes:
            raise UnknownAttributeError(self.model.name, model_key)

        return model_key

    def is_virtual_property(self, key: str) -> bool:
        return key in self.options.virtual_properties_for(self.model.name)

    def virtual_property_type(self, key: str) -> str:
        return self.options.virtual_properties_for(self.model.name)[key]["type"]

    def assert_all_example_fields(self, schema: Any, example: Mapping[str, Any]) -> None:
        """Asserts that the schema documents all the fields of an example.

        Args:
            schema: Schema document, or a response carrying one
            example: An example payload whose keys must all be documented
        """
        expected: dict[str, dict[str, Any]] = {}
        problems: list[str] = []

        for key in example:
            try:
                model_key = self.get_model_attribute(key)
            except UnknownAttributeError as e:
                problems.append(str(e))
                continue

            if self.is_virtual_property(key):
                virtual = self.options.virtual_properties_for(self.model.name)[key]
                property_schema = self.generator.generate_property_schema(
                    key, self.virtual_property_type(key)
                )
                property_schema.update(
                    copy.deepcopy({k: v for k, v in virtual.items() if k != "type"})
                )
            else:
                db_type = self.generator.get_db_type(model_key)
                property_schema = self.generator.generate_property_schema(key, db_type)
                property_schema["title"] = property_title(model_key)
                # If it's an enum type, list the allowed values
                if db_type.upper() == ENUM_NATIVE_TYPE:
                    values = self.model.attributes[model_key].type.values or []
                    property_schema["enum"] = list(values)

            self.generator.apply_custom_schema(property_schema, key)
            expected[key] = property_schema

        problems.extend(
            _superset_mismatches(
                self._properties(schema), dict(sorted(expected.items())), "properties"
            )
        )
        if problems:
            raise SchemaAssertionError(problems)

    def assert_associations(self, schema: Any, associations: Iterable[str]) -> None:
        """Asserts that the schema documents the given associations.

        Raises:
            ValueError: If no associations are given
        """
        associations = list(associations or [])
        if not associations:
            raise ValueError(
                "Please specify the associations you want to validate the presence of"
            )

        expected = self.generator.get_properties(associations)
        self._assert_superset(self._properties(schema), expected)

    def assert_properties(self, schema: Any, attributes: Iterable[str]) -> None:
        """Asserts that the attributes are present with the right ``$id``."""
        expected: dict[str, dict[str, Any]] = {}
        for attribute in attributes:
            json_key = self.generator.get_json_attribute(attribute)
            expected[json_key] = {"$id": self.generator.get_attribute_id(json_key)}

        self._assert_superset(self._properties(schema), expected)

    def assert_all_properties_described(
        self, schema: Any, fields: Iterable[str] | None = None
    ) -> None:
        """Asserts that all top level properties are described fully.

        Associations are skipped.

        Args:
            schema: Schema document, or a response carrying one
            fields: Fields every property must have, defaults to
                description, examples, type, title and $id
        """
        required = list(fields) if fields is not None else list(DEFAULT_DESCRIBED_FIELDS)
        association_keys = self._association_json_keys()

        missing: dict[str, list[str]] = {}
        for key, prop in self._properties(schema).items():
            is_association = "$ref" in prop or (
                prop.get("type") in ("object", "array") and key in association_keys
            )
            if is_association:
                continue

            missing_keys = [field for field in required if field not in prop]
            if missing_keys:
                missing[key] = missing_keys

        if missing:
            raise SchemaAssertionError(
                [
                    f"Property '{key}' is not fully described, missing: {', '.join(keys)}"
                    for key, keys in missing.items()
                ]
            )

    def assert_valid_schema(self, schema: Any) -> None:
        """Asserts that the document is a valid Draft 06 JSON Schema."""
        result = SchemaValidator().validate_schema(_document(schema))
        if not result.is_valid:
            raise SchemaAssertionError(result.errors)

    def boiler_plate(self) -> dict[str, Any]:
        return self.generator.boiler_plate()

    def _association_json_keys(self) -> set[str]:
        keys = set(self.model.associations)
        for name in self.model.associations:
            _, json_key = self.generator.get_association_keys(name)
            if json_key:
                keys.add(json_key)
        return keys

    def _properties(self, schema: Any) -> dict[str, Any]:
        document = _document(schema)
        properties = document.get("properties")
        if not isinstance(properties, Mapping):
            raise SchemaAssertionError(["Schema has no 'properties' object"])
        return dict(properties)

    @staticmethod
    def _assert_superset(actual: Any, expected: Any) -> None:
        problems = _superset_mismatches(actual, expected, "properties")
        if problems:
            raise SchemaAssertionError(problems)


def _document(schema: Any) -> Mapping[str, Any]:
    if isinstance(schema, Mapping):
        return schema
    body = getattr(schema, "body", None)
    if isinstance(body, Mapping):
        return body
    json_method = getattr(schema, "json", None)
    if callable(json_method):
        return json_method()
    raise TypeError(f"Expected a schema document or a response, got {schema!r}")


def _superset_mismatches(actual: Any, expected: Any, path: str) -> list[str]:
    """Compare only what ``expected`` specifies, recursively.

    Mappings are compared on the expected keys, lists on the expected
    indexes and everything else by equality.
    """
    if isinstance(expected, Mapping):
        if not isinstance(actual, Mapping):
            return [f"{path}: expected an object, got {actual!r}"]
        problems: list[str] = []
        for key, value in expected.items():
            child_path = f"{path}.{key}"
            if key not in actual:
                problems.append(f"{child_path}: missing")
                continue
            problems.extend(_superset_mismatches(actual[key], value, child_path))
        return problems

    if isinstance(expected, list):
        if not isinstance(actual, list):
            return [f"{path}: expected an array, got {actual!r}"]
        problems = []
        for index, value in enumerate(expected):
            child_path = f"{path}[{index}]"
            if index >= len(actual):
                problems.append(f"{child_path}: missing")
                continue
            problems.extend(_superset_mismatches(actual[index], value, child_path))
        return problems

    if actual != expected:
        return [f"{path}: expected {expected!r}, got {actual!r}"]
    return []
