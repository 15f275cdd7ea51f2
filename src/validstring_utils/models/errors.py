"""Package-specific error classes.

These classes provide package-tagged error handling for string validation
and model construction.
"""

from __future__ import annotations

from typing import Any

from pydantic_core import PydanticCustomError

# Package identifier for error context
PACKAGE_NAME = "validstring_utils"


class ValidStringError(PydanticCustomError):
    """Pydantic-compatible error raised when a string fails validation.

    Inherits from PydanticCustomError so it can be raised from inside
    Pydantic validators and still be recognised by Pydantic's error handling.
    The context always carries the package name.
    """

    @classmethod
    def for_field(cls, field: str, message: str, value: Any = None) -> ValidStringError:
        """Build an error for a single failed field.

        Args:
            field: Name of the field or validation kind that failed.
            message: Human readable description of the failure.
            value: The offending value (optional).

        Returns:
            ValidStringError with type "string_validation".
        """
        return cls(
            "string_validation",
            message,
            {"package": PACKAGE_NAME, "field": field, "value": value},
        )


class ValidStringValidationError(Exception):
    """Wraps pydantic.ValidationError with package identification."""

    def __init__(self, validation_error: Exception, context: dict | None = None):
        from pydantic import ValidationError as PydanticValidationError

        self.original_error = validation_error
        self.context = {"package": PACKAGE_NAME, **(context or {})}

        if isinstance(validation_error, PydanticValidationError):
            self.errors_list = validation_error.errors()
            error_messages = "; ".join(e.get("msg", str(e)) for e in self.errors_list)
        else:
            self.errors_list = []
            error_messages = str(validation_error)

        super().__init__(error_messages)

    @classmethod
    def from_validation_error(
        cls, error: Exception, context: dict | None = None
    ) -> ValidStringValidationError:
        """Wrap a pydantic.ValidationError with package context."""
        return cls(error, context)

    def errors(self) -> list:
        """Get the list of wrapped validation errors."""
        return self.errors_list

    def __repr__(self) -> str:
        return f"ValidStringValidationError({self.original_error!r}, context={self.context})"
