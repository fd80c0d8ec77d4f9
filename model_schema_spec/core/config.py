"""Configuration for the model schema generator."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from dotenv import load_dotenv
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import MissingConfigError
from .schemas import ModelDescriptor

AttributeMapper = Callable[[ModelDescriptor, str], str]
AssociationMapper = Callable[[ModelDescriptor, str], tuple[Any, Any]]
AttributeSelector = Callable[[ModelDescriptor], list[str]]


class Settings(BaseSettings):
    """Process-wide settings read from the environment and ``.env``."""

    href_base: str | None = Field(
        default=None, description="Default base URL for schema $id and $ref values"
    )
    log_level: str = Field(default="INFO", description="Level for the package logger")

    model_config = SettingsConfigDict(
        env_prefix="MODEL_SCHEMA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


class GeneratorOptions(BaseModel):
    """Immutable options shared by a factory and the generators it builds.

    Mappings passed in are copied on validation, so later changes to the
    caller's objects do not leak into an existing generator.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
        extra="forbid",
        protected_namespaces=(),
    )

    href_base: str = Field(..., min_length=1, description="Base URL for $id and $ref")
    custom_schema: dict[str, dict[str, dict[str, Any]]] = Field(
        default_factory=dict,
        description="model name -> json key -> schema fragment merged onto the property",
    )
    virtual_properties: dict[str, dict[str, dict[str, Any]]] = Field(
        default_factory=dict,
        description="model name -> property name -> {type, ...} for computed properties",
    )
    associations: dict[str, dict[str, str]] = Field(
        default_factory=dict,
        description="model name -> association name -> 'inline'",
    )
    json_attribute_mapper: AttributeMapper | None = None
    json_association_mapper: AssociationMapper | None = None
    model_attribute_mapper: AttributeMapper | None = None
    select_attributes: AttributeSelector | None = None

    # Internal, set when a generator builds an inlined association
    property_root: str = ""
    inline_path: tuple[str, ...] = ()
    factory: Any = Field(default=None, exclude=True, repr=False)

    def __init__(self, **data: Any) -> None:
        """Initialize options, reporting a bad href_base as a configuration error."""
        try:
            super().__init__(**data)
        except ValidationError as e:
            for error in e.errors():
                if error["loc"] and error["loc"][0] == "href_base":
                    raise MissingConfigError(variable_name="href_base") from e
            raise

    @model_validator(mode="before")
    @classmethod
    def default_href_base(cls, data: Any) -> Any:
        """Fall back to the MODEL_SCHEMA_HREF_BASE setting."""
        if (
            isinstance(data, dict)
            and data.get("href_base") is None
            and config.href_base
        ):
            return {**data, "href_base": config.href_base}
        return data

    @field_validator("href_base")
    @classmethod
    def normalize_href_base(cls, v: str) -> str:
        """Make sure the base ends with a path separator."""
        if not v.endswith("/"):
            return v + "/"
        return v

    @field_validator("virtual_properties")
    @classmethod
    def check_virtual_property_types(
        cls, v: dict[str, dict[str, dict[str, Any]]]
    ) -> dict[str, dict[str, dict[str, Any]]]:
        """Every virtual property needs a native type key."""
        for model_name, properties in v.items():
            for key, virtual in properties.items():
                native_type = virtual.get("type")
                if not isinstance(native_type, str) or not native_type:
                    raise MissingConfigError(
                        variable_name=f"virtual_properties.{model_name}.{key}.type"
                    )
        return v

    @classmethod
    def from_options(
        cls,
        options: GeneratorOptions | Mapping[str, Any] | None = None,
        **overrides: Any,
    ) -> GeneratorOptions:
        """Build options from a mapping or existing options plus overrides."""
        if isinstance(options, GeneratorOptions):
            if not overrides:
                return options
            return options.merged(**overrides)
        return cls(**{**dict(options or {}), **overrides})

    def as_dict(self) -> dict[str, Any]:
        """Field values as given, without serializing hooks or the factory."""
        return {name: getattr(self, name) for name in type(self).model_fields}

    def shared_options(self) -> dict[str, Any]:
        """Field values a factory passes on to every generator it builds."""
        internal = ("property_root", "inline_path", "factory")
        return {k: v for k, v in self.as_dict().items() if k not in internal}

    def merged(self, **overrides: Any) -> GeneratorOptions:
        """Return new options with the given fields replaced."""
        return type(self)(**{**self.as_dict(), **overrides})

    def custom_fragment(self, model_name: str, key: str) -> dict[str, Any] | None:
        return self.custom_schema.get(model_name, {}).get(key)

    def virtual_properties_for(self, model_name: str) -> dict[str, dict[str, Any]]:
        return self.virtual_properties.get(model_name, {})

    def association_modes(self, model_name: str) -> dict[str, str]:
        return self.associations.get(model_name, {})


# At import time, populate os.environ from .env (if present); no setting is required.
load_dotenv()
config = Settings()
