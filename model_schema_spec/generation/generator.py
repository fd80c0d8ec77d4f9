"""Generates JSON Schema documents from model descriptors."""

from __future__ import annotations

import copy
from collections.abc import Iterable, Mapping
from typing import Any, Literal

from model_schema_spec.core.config import GeneratorOptions
from model_schema_spec.core.constants import (
    DRAFT_06_SCHEMA_URI,
    ENUM_NATIVE_TYPE,
    INLINE,
    UUID_NATIVE_TYPE,
)
from model_schema_spec.core.exceptions import (
    CyclicInlineAssociationError,
    UnknownAttributeError,
)
from model_schema_spec.core.schemas import ModelDescriptor
from model_schema_spec.generation.type_map import (
    is_uuid_attribute,
    native_type_to_schema_type,
)
from model_schema_spec.logger import logger
from model_schema_spec.utils.naming import document_title, property_title

NotAnAssociation = tuple[Literal[False], Literal[False]]


class SchemaGenerator:
    """Builds the JSON Schema document for a single model.

    Properties are recomputed on every call, so the same generator can be
    used repeatedly. Associations configured as inline are embedded by
    asking the owning factory for a generator bound to the target model.
    """

    def __init__(
        self,
        model: Any,
        options: GeneratorOptions | Mapping[str, Any] | None = None,
        **overrides: Any,
    ) -> None:
        """Initialize the generator.

        Args:
            model: Model descriptor, or an object with the same shape
            options: Generator options or a mapping of them; the caller's
                mapping is copied, never modified
            **overrides: Option values that replace those in ``options``

        Raises:
            InvalidModelError: If ``model`` is not a recognizable model
            MissingConfigError: If ``href_base`` is absent or not a string
        """
        self.model = ModelDescriptor.coerce(model)
        self.options = GeneratorOptions.from_options(options, **overrides)

    def get_json_attribute(self, model_attr: str) -> str:
        """Map a model attribute name to its json schema key."""
        mapper = self.options.json_attribute_mapper
        if mapper is not None:
            return mapper(self.model, model_attr)
        return model_attr

    def get_association_keys(self, key: str) -> tuple[str, str] | NotAnAssociation:
        """Resolve a name to ``(association name, json key)``.

        Returns ``(False, False)`` when the name is not an association.
        """
        mapper = self.options.json_association_mapper
        if mapper is not None:
            model_key, json_key = mapper(self.model, key)
            if not model_key:
                return False, False
            return model_key, json_key

        if key in self.model.associations:
            return key, key

        return False, False

    def get_schema(
        self, attribute_names: Iterable[str] | None = None
    ) -> dict[str, Any]:
        """Generate the complete schema document for the model.

        Args:
            attribute_names: Attributes and associations to include; uses
                the configured selection when omitted

        Returns:
            Schema document with boiler plate and sorted properties
        """
        result = self.boiler_plate()
        result["properties"] = self.get_properties(attribute_names)
        logger.debug(
            "Generated schema %s with %d properties",
            result["$id"],
            len(result["properties"]),
        )
        return result

    def get_properties(
        self, attribute_names: Iterable[str] | None = None
    ) -> dict[str, dict[str, Any]]:
        """Generate the property schemas for the model.

        Associations take precedence over attributes with the same name.
        Virtual properties are added after the selected attributes and the
        result is sorted by json key.

        Args:
            attribute_names: Attributes and associations to include

        Returns:
            Mapping of json key to property schema
        """
        model_name = self.model.name
        properties: dict[str, dict[str, Any]] = {}

        for key in self.select_attribute_names(attribute_names):
            json_key, property_schema = self.schema_for_attribute(key)

            property_schema["title"] = property_title(key)
            self.apply_custom_schema(property_schema, json_key)
            properties[json_key] = property_schema

        for key, virtual in self.options.virtual_properties_for(model_name).items():
            property_schema = self.generate_property_schema(key, virtual["type"])
            property_schema.update(
                copy.deepcopy({k: v for k, v in virtual.items() if k != "type"})
            )
            self.apply_custom_schema(property_schema, key)
            properties[key] = property_schema

        # Sort the property keys
        return dict(sorted(properties.items()))

    def select_attribute_names(
        self, attribute_names: Iterable[str] | None = None
    ) -> list[str]:
        """Names to generate properties for, in selection order."""
        if attribute_names is not None:
            return list(attribute_names)

        if self.options.select_attributes is not None:
            return list(self.options.select_attributes(self.model))

        names = list(self.model.attributes)
        for name in self.options.association_modes(self.model.name):
            if name not in names:
                names.append(name)
        return names

    def schema_for_attribute(self, model_attr: str) -> tuple[str, dict[str, Any]]:
        """Generate the property schema for an association or attribute.

        Returns:
            Tuple of json key and property schema
        """
        json_key, property_schema = self.get_association_schema(model_attr)
        if property_schema:
            return json_key, property_schema

        json_key = self.get_json_attribute(model_attr)
        db_type = self.get_db_type(model_attr)

        property_schema = self.generate_property_schema(json_key, db_type)

        if db_type.upper() == ENUM_NATIVE_TYPE:
            values = self.model.attributes[model_attr].type.values or []
            property_schema["enum"] = list(values)

        return json_key, property_schema

    def get_association_schema(
        self, key: str
    ) -> tuple[str, dict[str, Any]] | NotAnAssociation:
        """Generate the property schema for an association.

        Inline associations embed the target model's properties, all
        others refer to the target's schema document. Associations to many
        records are wrapped in an array.

        Returns:
            Tuple of json key and property schema, or ``(False, False)``
            when ``key`` is not an association

        Raises:
            UnknownAttributeError: If the association mapper names an
                association the model does not have
            CyclicInlineAssociationError: If inlining would revisit a model
        """
        model_key, json_key = self.get_association_keys(key)
        if not model_key:
            return False, False

        association = self.model.associations.get(model_key)
        if association is None:
            raise UnknownAttributeError(self.model.name, model_key)

        attribute_id = self.get_attribute_id(json_key)
        target = ModelDescriptor.coerce(association.target)

        property_schema: dict[str, Any]
        if self.options.association_modes(self.model.name).get(json_key) == INLINE:
            property_schema = {
                "$id": attribute_id,
                "type": "object",
                "properties": self._inline_properties(target, attribute_id),
            }
        else:
            property_schema = {
                "$id": attribute_id,
                "$ref": f"{self.options.href_base}{target.name}.json",
            }

        if association.is_many:
            property_schema = {
                "$id": attribute_id,
                "type": "array",
                "items": property_schema,
            }

        return json_key, property_schema

    def get_db_type(self, model_attr: str) -> str:
        """Native type of an attribute, uuid-shaped names are always strings.

        Raises:
            UnknownAttributeError: If the model has no such attribute
        """
        if is_uuid_attribute(model_attr):
            return UUID_NATIVE_TYPE

        attribute = self.model.attributes.get(model_attr)
        if attribute is None:
            raise UnknownAttributeError(self.model.name, model_attr)

        return attribute.type.key

    def get_json_schema_type(self, model_attr: str) -> str:
        return native_type_to_schema_type(self.get_db_type(model_attr), model_attr)

    def get_attribute_id(self, json_key: str) -> str:
        return f"{self.options.property_root}/properties/{json_key}"

    def generate_property_schema(self, key: str, native_type: str) -> dict[str, Any]:
        """Build a leaf property schema.

        Args:
            key: Json key of the property
            native_type: Native type key to translate

        Returns:
            Property schema with type, $id, empty examples and title
        """
        return {
            "type": native_type_to_schema_type(native_type, key),
            "$id": self.get_attribute_id(key),
            "examples": [],
            "title": property_title(key),
        }

    def boiler_plate(self) -> dict[str, Any]:
        """Generates the expected boiler plate for a model schema.

        Returns:
            The boiler plate for a json schema for this model
        """
        return {
            "title": document_title(self.model.name),
            "$id": f"{self.options.href_base}{self.model.name}.json",
            "type": "object",
            "$schema": DRAFT_06_SCHEMA_URI,
        }

    def apply_custom_schema(
        self, property_schema: dict[str, Any], json_key: str
    ) -> None:
        """Merge the configured custom fragment onto a property in place."""
        fragment = self.options.custom_fragment(self.model.name, json_key)
        if fragment:
            property_schema.update(copy.deepcopy(fragment))

        # Enum values always double as examples
        if "enum" in property_schema:
            property_schema["examples"] = _unique(
                list(property_schema.get("examples") or [])
                + list(property_schema["enum"])
            )

    def _inline_properties(
        self, target: ModelDescriptor, attribute_id: str
    ) -> dict[str, dict[str, Any]]:
        inline_path = self.options.inline_path or (self.model.name,)
        if target.name in inline_path:
            raise CyclicInlineAssociationError([*inline_path, target.name])

        logger.debug("Inlining %s at %s", target.name, attribute_id)
        generator = self._get_factory().get_schema_generator(
            target,
            {"property_root": attribute_id, "inline_path": (*inline_path, target.name)},
        )
        return generator.get_properties()

    def _get_factory(self):
        if self.options.factory is not None:
            return self.options.factory

        from model_schema_spec.generation.factory import SchemaFactory

        return SchemaFactory(self.options.shared_options())


def _unique(values: list[Any]) -> list[Any]:
    result: list[Any] = []
    for value in values:
        if value not in result:
            result.append(value)
    return result
