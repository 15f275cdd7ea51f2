from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from validstring_utils.core import ValidationResult
from validstring_utils.models import ValidationKind, ValidStringError
from validstring_utils.protocols import NationalIdCheckerProtocol
from validstring_utils.validation.validators import StringCheckValidator, ValidatorFactory

logger = logging.getLogger(__name__)

_ERROR_MODES = {"raise", "coerce"}


class ValidStringService:
    """Kind-keyed facade over the string validators.

    Example:
        >>> service = ValidStringService()
        >>> service.check("phone", "13800138000")
        True
        >>> result = service.validate("email", "not-an-email")
        >>> [e.message for e in result.errors]
        ['Invalid e-mail address']
        >>> service.check("length", "abc", min_length=1, max_length=5)
        True
    """

    def __init__(self, id_checker: NationalIdCheckerProtocol | None = None) -> None:
        """Initialize the service.

        Args:
            id_checker: Checker used for "id_card". Defaults to the package
                default checker.
        """
        self._id_checker = id_checker

    def _validator(
        self, kind: str | ValidationKind, field: str | None, options: dict[str, Any]
    ) -> StringCheckValidator:
        if not isinstance(kind, str):
            raise ValueError(f"Validation kind must be a string, got {kind!r}")
        kind_name = kind.value if isinstance(kind, ValidationKind) else kind
        if kind_name == ValidationKind.ID_CARD.value and self._id_checker is not None:
            options = {"checker": self._id_checker, **options}
        return ValidatorFactory.create(kind_name, field=field, **options)

    def check(self, kind: str | ValidationKind, value: Any, **options: Any) -> bool:
        """Return True if ``value`` passes the ``kind`` check.

        Args:
            kind: Validation kind name (see ``available_kinds()``).
            value: Candidate string.
            **options: Validator options, e.g. ``min_length``/``max_length``.

        Raises:
            ValueError: If ``kind`` is unknown or not a string.
        """
        return self.validate(kind, value, **options).is_valid

    def validate(
        self,
        kind: str | ValidationKind,
        value: Any,
        *,
        field: str | None = None,
        errors: str = "coerce",
        **options: Any,
    ) -> ValidationResult:
        """Validate ``value`` and return the full ValidationResult.

        Args:
            kind: Validation kind name.
            value: Candidate string.
            field: Field name used in error reports (defaults to the kind).
            errors: "coerce" returns the failing result, "raise" raises.
            **options: Validator options.

        Returns:
            ValidationResult for the value.

        Raises:
            ValueError: If ``kind`` or ``errors`` is unknown.
            ValidStringError: If errors="raise" and the value is invalid.
        """
        if errors not in _ERROR_MODES:
            raise ValueError(f"errors must be one of {sorted(_ERROR_MODES)}, got {errors!r}")

        validator = self._validator(kind, field, options)
        result = validator.validate(value)

        if not result.is_valid:
            logger.debug("Validation %s failed for %r", validator.name, value)
            if errors == "raise":
                first = result.errors[0]
                raise ValidStringError.for_field(first.field, first.message, value)
        return result

    def validate_many(
        self, kind: str | ValidationKind, values: Iterable[Any], **options: Any
    ) -> list[ValidationResult]:
        """Validate several values with a single validator instance."""
        validator = self._validator(kind, options.pop("field", None), options)
        return [validator.validate(v) for v in values]

    def available_kinds(self) -> list[str]:
        """Sorted list of registered validation kinds."""
        return ValidatorFactory.available_types()


_default_service: ValidStringService | None = None


def get_default_service() -> ValidStringService:
    """Get or create the shared ValidStringService."""
    global _default_service
    if _default_service is None:
        _default_service = ValidStringService()
    return _default_service


def check(kind: str | ValidationKind, value: Any, **options: Any) -> bool:
    """Check ``value`` with the default service. See ValidStringService.check."""
    return get_default_service().check(kind, value, **options)


def validate(
    kind: str | ValidationKind,
    value: Any,
    *,
    errors: str = "coerce",
    **options: Any,
) -> ValidationResult:
    """Validate ``value`` with the default service. See ValidStringService.validate."""
    return get_default_service().validate(kind, value, errors=errors, **options)
