"""Pydantic base model with built-in process logging.

ValidationBase records errors and cleaning steps in a ProcessLog that is
excluded from serialization. ValidStringValidationBase raises the package's
own ValidStringError when an error is escalated.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic_core import PydanticCustomError

from validstring_utils.core import ProcessEntry, ProcessLog

__all__ = ["ValidationBase", "ValidStringValidationBase"]


class ValidationBase(BaseModel):
    """Base model with built-in process logging for cleaning and errors.

    All models inheriting from this class get:
    - process_log: ProcessLog field (excluded from serialization)
    - add_error(): Log an error and optionally raise
    - add_cleaning_process(): Log a cleaning/transformation operation
    - audit_log(): Export combined entries for DataFrame analysis

    Example:
        class Login(ValidationBase):
            user: str

        model = Login(user="  alice ")
        model.add_cleaning_process("user", "  alice ", "alice", "Trimmed whitespace")
        model.add_error("user", "User is unknown", "alice")
        print(model.audit_log())
    """

    model_config = ConfigDict(extra="ignore")

    process_log: ProcessLog = Field(default_factory=ProcessLog, exclude=True)

    def _create_error(
        self,
        error_type: str,
        message: str,
        context: dict[str, Any] | None = None,
    ) -> Exception:
        """Create the exception raised by ``add_error(raise_exception=True)``.

        Override in subclasses for custom error types.
        """
        return PydanticCustomError(error_type, message, context or {})

    def add_error(
        self,
        field: str,
        message: str,
        value: Any = None,
        context: dict[str, Any] | None = None,
        raise_exception: bool = False,
    ) -> None:
        """Log an error and optionally raise an exception.

        Args:
            field: Name of the field with the error.
            message: Error message describing the issue.
            value: The problematic value (optional).
            context: Additional context dict (optional).
            raise_exception: If True, raise after logging.

        Raises:
            Exception: If raise_exception is True. The type comes from
                _create_error().
        """
        entry = ProcessEntry(
            entry_type="error",
            field=field,
            message=message,
            original_value=str(value) if value is not None else None,
            context=context or {},
        )
        self.process_log.errors.append(entry)

        if raise_exception:
            raise self._create_error(
                error_type="string_validation",
                message=f"{field}: {message}",
                context={"field": field, "value": value, **(context or {})},
            )

    def add_cleaning_process(
        self,
        field: str,
        original_value: Any,
        new_value: Any,
        reason: str,
        operation_type: str = "cleaning",
    ) -> None:
        """Log a cleaning/transformation operation."""
        entry = ProcessEntry(
            entry_type="cleaning",
            field=field,
            message=reason,
            original_value=str(original_value) if original_value is not None else None,
            new_value=str(new_value) if new_value is not None else None,
            context={"operation_type": operation_type},
        )
        self.process_log.cleaning.append(entry)

    def audit_log(self, source: str | None = None) -> list[dict[str, Any]]:
        """Export cleaning and error entries, sorted by timestamp.

        Args:
            source: Optional source identifier added to each entry.

        Returns:
            List of dicts suitable for pd.DataFrame().
        """
        entries: list[dict[str, Any]] = []
        for entry in [*self.process_log.cleaning, *self.process_log.errors]:
            d = entry.model_dump()
            if source:
                d["source"] = source
            entries.append(d)
        return sorted(entries, key=lambda x: x.get("timestamp", ""))


class ValidStringValidationBase(ValidationBase):
    """ValidationBase that escalates errors as ValidStringError."""

    def _create_error(
        self,
        error_type: str,
        message: str,
        context: dict[str, Any] | None = None,
    ) -> Exception:
        # Late import to avoid circular dependency with models
        from validstring_utils.models.errors import PACKAGE_NAME, ValidStringError

        return ValidStringError(
            error_type,
            message,
            {"package": PACKAGE_NAME, **(context or {})},
        )
