"""Custom exception classes for the model schema generator."""

from __future__ import annotations


class SchemaGenerationError(Exception):
    """Base exception for schema generation errors.

    All custom exceptions in the model schema generator inherit from this class.
    """

    pass


class InvalidModelError(SchemaGenerationError):
    """Error when the supplied value is not a recognizable model.

    Raised when a model lacks a table identity or its attribute and
    association metadata has an unexpected shape.

    Args:
        model: The value that was passed in place of a model
        reason: Optional detail about what is wrong with it
    """

    def __init__(self, model: object, reason: str | None = None) -> None:
        self.model = model
        self.reason = reason
        message = f"Are you sure this is a model descriptor? {model!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class MissingConfigError(SchemaGenerationError):
    """Error in generator configuration.

    Raised when a required option is missing or has the wrong type,
    such as an absent or non-string ``href_base``.

    Args:
        variable_name: The name of the option that caused the error
    """

    def __init__(self, variable_name: str) -> None:
        self.variable_name = variable_name
        message = f"Required configuration option '{variable_name}' must be a string"
        super().__init__(message)


class UnknownAttributeError(SchemaGenerationError):
    """Error when an attribute is not present on the model.

    Args:
        model_name: Name of the model that was searched
        attribute: The attribute name that could not be found
    """

    def __init__(self, model_name: str, attribute: str) -> None:
        self.model_name = model_name
        self.attribute = attribute
        super().__init__(f"Unknown model attribute {model_name}.{attribute}")


class UnknownTypeError(SchemaGenerationError):
    """Error when a native type has no JSON Schema equivalent.

    Args:
        native_type: The native type key that has no mapping
        attribute: The attribute that declared the type, if known
    """

    def __init__(self, native_type: str, attribute: str | None = None) -> None:
        self.native_type = native_type
        self.attribute = attribute
        message = f"Don't know how to convert native type {native_type} to a json schema type"
        if attribute:
            message = f"{message} (attribute: {attribute})"
        super().__init__(message)


class CyclicInlineAssociationError(SchemaGenerationError):
    """Error when inline associations form a cycle.

    Raised when embedding an association inline would revisit a model that
    is already being embedded, which would otherwise recurse forever.

    Args:
        association_chain: Model names showing the inlining path
    """

    def __init__(self, association_chain: list[str]) -> None:
        self.association_chain = association_chain
        super().__init__(
            f"Cyclic inline association detected: {' -> '.join(association_chain)}"
        )


class SchemaAssertionError(SchemaGenerationError, AssertionError):
    """Error when a generated schema does not look the way a test expects.

    Collects every problem found so they can be fixed in one pass.

    Args:
        problems: List of mismatch descriptions
    """

    def __init__(self, problems: list[str]) -> None:
        self.problems = problems
        super().__init__("Schema assertion failed: " + "; ".join(problems))
