"""Pydantic models for model descriptors and validation results."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    SkipValidation,
    ValidationError,
    model_validator,
)

from .constants import ENUM_NATIVE_TYPE, MANY_ASSOCIATION_TYPES
from .exceptions import InvalidModelError


class TypeDescriptor(BaseModel):
    """Native type of a model attribute.

    Enumerations also carry the ordered list of allowed values.
    """

    model_config = ConfigDict(from_attributes=True)

    key: str = Field(..., min_length=1, description="Native type key, e.g. STRING")
    values: list[Any] | None = Field(
        None, description="Allowed values for enumerations"
    )

    @model_validator(mode="before")
    @classmethod
    def coerce_key(cls, data: Any) -> Any:
        """Accept a bare type key such as ``"STRING"``."""
        if isinstance(data, str):
            return {"key": data}
        return data

    @property
    def is_enum(self) -> bool:
        return self.key.upper() == ENUM_NATIVE_TYPE


class AttributeDescriptor(BaseModel):
    """A single model attribute as exposed by the model layer."""

    model_config = ConfigDict(from_attributes=True)

    type: TypeDescriptor

    @model_validator(mode="before")
    @classmethod
    def coerce_shorthand(cls, data: Any) -> Any:
        """Accept ``"STRING"``, ``{"key": ...}`` or ``{"type": ...}`` shapes."""
        if isinstance(data, (str, TypeDescriptor)):
            return {"type": data}
        if isinstance(data, Mapping) and "type" not in data:
            return {"type": data}
        return data


class AssociationDescriptor(BaseModel):
    """Association from one model to another.

    The target is not revalidated so that models may reference each other.
    """

    model_config = ConfigDict(from_attributes=True)

    association_type: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("association_type", "associationType"),
        description="hasOne, hasMany, belongsTo or belongsToMany",
    )
    target: SkipValidation[ModelDescriptor] = Field(..., repr=False)

    @property
    def is_many(self) -> bool:
        """Whether the association holds many records."""
        return self.association_type.lower() in MANY_ASSOCIATION_TYPES


class ModelDescriptor(BaseModel):
    """Read-only description of an ORM model.

    Provides the name, table identity, attributes and associations the
    schema generator reads.
    """

    model_config = ConfigDict(from_attributes=True)

    name: str = Field(..., min_length=1, description="Singular model name")
    table_name: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("table_name", "tableName"),
        description="Table identity",
    )
    attributes: dict[str, AttributeDescriptor] = Field(default_factory=dict)
    associations: dict[str, AssociationDescriptor] = Field(default_factory=dict)

    @classmethod
    def define(
        cls,
        name: str,
        attributes: Mapping[str, Any] | None = None,
        table_name: str | None = None,
    ) -> ModelDescriptor:
        """Build a model whose table is named after the model by default."""
        return cls(
            name=name,
            table_name=table_name or name,
            attributes=dict(attributes or {}),
        )

    @classmethod
    def coerce(cls, value: Any) -> ModelDescriptor:
        """Validate a model descriptor at the library boundary.

        Args:
            value: A ModelDescriptor, a mapping, or an object exposing
                ``name``, ``table_name`` (or ``tableName``), ``attributes`` and
                ``associations``

        Returns:
            A ModelDescriptor for the value

        Raises:
            InvalidModelError: If the value is not a recognizable model
        """
        if isinstance(value, cls):
            return value
        if value is None:
            raise InvalidModelError(value)
        try:
            if isinstance(value, Mapping):
                return cls.model_validate(dict(value))
            return cls.model_validate(value, from_attributes=True)
        except ValidationError as e:
            fields = sorted({str(error["loc"][0]) for error in e.errors() if error["loc"]})
            reason = f"invalid fields: {', '.join(fields)}" if fields else None
            raise InvalidModelError(value, reason) from e

    def associate(
        self, name: str, association_type: str, target: ModelDescriptor
    ) -> AssociationDescriptor:
        """Register an association to another model.

        Returns:
            The stored association
        """
        association = AssociationDescriptor(
            association_type=association_type, target=target
        )
        self.associations[name] = association
        return association

    def __str__(self) -> str:
        return self.name


AssociationDescriptor.model_rebuild()


class ValidationResult(BaseModel):
    """Result of schema validation with type safety.

    Provides validated results for schema validation operations.
    """

    is_valid: bool = Field(..., description="Whether the schema passed validation")
    errors: list[str] = Field(
        default_factory=list, description="Validation error messages"
    )
    warnings: list[str] = Field(
        default_factory=list, description="Validation warning messages"
    )

    def add_error(self, message: str) -> None:
        """Add an error message to the validation result."""
        self.errors.append(message)
        self.is_valid = False

    def add_warning(self, message: str) -> None:
        """Add a warning message to the validation result."""
        self.warnings.append(message)
