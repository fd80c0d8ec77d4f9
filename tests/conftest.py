"""Shared test fixtures and configuration."""

# Keep the environment from leaking a default href_base into tests
import os

os.environ.pop("MODEL_SCHEMA_HREF_BASE", None)

from typing import Any  # noqa: E402

import pytest  # noqa: E402

from model_schema_spec.core.config import config  # noqa: E402
from model_schema_spec.core.schemas import ModelDescriptor  # noqa: E402
from model_schema_spec.generation.factory import SchemaFactory  # noqa: E402

CUSTOM_SCHEMA = {
    "user": {"status": {"description": "Was it all just a dream?"}},
}


def select_attributes(model: ModelDescriptor) -> list[str]:
    if model.name == "user":
        return ["full_name", "address", "profile", "status", "name"]

    return list(model.attributes)


def json_attribute_mapper(model: ModelDescriptor, name: str) -> str:
    return "fullName" if name == "full_name" else name


def model_attribute_mapper(model: ModelDescriptor, key: str) -> str:
    return "full_name" if key == "fullName" else key


class MockModels:
    """Builds the small user/address/profile model graph used in tests."""

    @staticmethod
    def define(name: str, attributes: dict[str, Any]) -> ModelDescriptor:
        return ModelDescriptor.define(name, attributes)

    def user(self) -> ModelDescriptor:
        user = self.define(
            "user",
            {
                "name": "STRING",
                "full_name": "STRING",
                "status": {"key": "ENUM", "values": ["REAL", "IMAGINED"]},
                "password": "STRING",
            },
        )
        user.associate("address", "hasMany", self.define("address", {"country": "STRING"}))
        user.associate("profile", "hasOne", self.define("profile", {}))
        return user


@pytest.fixture(autouse=True)
def no_env_href_base(monkeypatch):
    """Ensure options never pick up a base URL from a local .env file."""
    monkeypatch.setattr(config, "href_base", None)
    yield


@pytest.fixture
def mock_models():
    return MockModels()


@pytest.fixture
def user_model(mock_models):
    """User with a hasMany address and a hasOne profile."""
    return mock_models.user()


@pytest.fixture
def factory_options():
    return {
        "custom_schema": CUSTOM_SCHEMA,
        "json_attribute_mapper": json_attribute_mapper,
        "select_attributes": select_attributes,
        "associations": {"user": {"address": "inline"}},
        "href_base": "schema.example",
    }


@pytest.fixture
def factory(factory_options):
    return SchemaFactory(factory_options)


@pytest.fixture
def user_schema(factory, user_model):
    return factory.get_schema_generator(user_model).get_schema()
