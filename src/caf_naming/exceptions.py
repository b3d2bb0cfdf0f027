"""Custom exceptions."""

from collections.abc import Iterable


class CafNamingError(Exception):
    """Base class for all custom exceptions.

    Useful to catch all of them.
    """


class ResourceTypeNotFoundError(CafNamingError):
    """One or more resource types are not present in the registry."""

    def __init__(self, resource_types: str | Iterable[str]):
        """Raise the ResourceTypeNotFoundError.

        Args:
            resource_types (str | Iterable[str]): The unknown identifier, or every
                unknown identifier found while validating a selection.
        """
        if isinstance(resource_types, str):
            resource_types = [resource_types]
        self.resource_types = list(resource_types)
        if len(self.resource_types) == 1:
            msg = f"Invalid resource type '{self.resource_types[0]}'."
        else:
            joined = ", ".join(f"'{t}'" for t in self.resource_types)
            msg = f"Invalid resource types: {joined}."
        super().__init__(msg)


class InvalidPatternError(CafNamingError):
    """A clean or validation pattern of a resource definition does not compile."""

    def __init__(self, resource_type: str, pattern: str, reason: str):
        self.resource_type = resource_type
        self.pattern = pattern
        self.reason = reason
        super().__init__(
            f"Invalid regex pattern '{pattern}' for resource type '{resource_type}': {reason}"
        )


class ValidationFailedError(CafNamingError):
    """A generated (or supplied) name does not satisfy its resource type."""

    def __init__(
        self,
        resource_type: str,
        candidate: str,
        pattern: str,
        reason: str | None = None,
    ):
        """Raise the ValidationFailedError.

        Args:
            resource_type (str): Resource type the name was checked against.
            candidate (str): The rejected name.
            pattern (str): Validation pattern of the resource type.
            reason (str | None): Specific reason, when the failure is not a
                plain pattern mismatch.
        """
        self.resource_type = resource_type
        self.candidate = candidate
        self.pattern = pattern
        self.reason = reason
        if reason:
            msg = f"Name '{candidate}' is invalid for resource type '{resource_type}': {reason}"
        else:
            msg = (
                f"Generated name '{candidate}' does not match validation pattern "
                f"'{pattern}' for resource type '{resource_type}'"
            )
        super().__init__(msg)


class EmptyTypeSelectionError(CafNamingError):
    """Neither a single resource type nor a list of resource types was supplied."""

    def __init__(self):
        super().__init__("Either resource_type or resource_types must be specified.")


class EnvironmentVariableNotSetError(CafNamingError):
    """A required environment variable is not set."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Value is not set for environment variable: {name}")


class CatalogError(CafNamingError):
    """The resource definition catalog cannot be read or is malformed."""
