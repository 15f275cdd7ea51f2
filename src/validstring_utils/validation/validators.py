from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from typing import Any, ClassVar

from abstract_validation_base import (
    BaseValidator,
    CompositeValidator,
    ValidationResult,
    ValidatorPipelineBuilder,
)

from validstring_utils.core.factory import PluginFactory
from validstring_utils.models.enums import ValidationKind
from validstring_utils.protocols import NationalIdCheckerProtocol
from validstring_utils.validation.functions import (
    valid_chinese,
    valid_email,
    valid_ipv4,
    valid_ipv6,
    valid_length,
    valid_phone,
    valid_qq,
)


class StringCheckValidator(BaseValidator[str], ABC):
    """Wraps a boolean string check as a validator.

    Subclasses set ``kind``, ``message`` and implement ``_check``. The
    resulting ValidationResult carries a single error on failure, reported
    against ``field`` (the kind name unless overridden).
    """

    kind: ClassVar[ValidationKind]
    message: ClassVar[str]

    def __init__(self, field: str | None = None) -> None:
        """Initialize the validator.

        Args:
            field: Field name used in error reports. Defaults to the kind name.
        """
        self._field = field or self.kind.value

    @property
    def name(self) -> str:
        """Name of this validator."""
        return self.kind.value

    @property
    def field(self) -> str:
        return self._field

    @abstractmethod
    def _check(self, value: Any) -> bool:
        """Return True if ``value`` passes this check."""
        ...

    def _describe_failure(self, value: Any) -> str:
        return self.message

    def validate(self, value: str) -> ValidationResult:
        """Validate a single string.

        Args:
            value: Candidate string.

        Returns:
            ValidationResult with one error if the check fails.
        """
        result = ValidationResult(is_valid=True)
        if not self._check(value):
            result.add_error(self._field, self._describe_failure(value), value)
        return result


class FunctionValidator(StringCheckValidator):
    """StringCheckValidator backed by a plain ``check(value) -> bool`` function."""

    check_function: ClassVar[Callable[[Any], bool]]

    def _check(self, value: Any) -> bool:
        return type(self).check_function(value)


class PhoneValidator(FunctionValidator):
    kind = ValidationKind.PHONE
    message = "Phone number must be 11 digits starting with 1"
    check_function = staticmethod(valid_phone)


class QQValidator(FunctionValidator):
    kind = ValidationKind.QQ
    message = "QQ number must be 5 to 13 digits"
    check_function = staticmethod(valid_qq)


class EmailValidator(FunctionValidator):
    kind = ValidationKind.EMAIL
    message = "Invalid e-mail address"
    check_function = staticmethod(valid_email)


class ChineseValidator(FunctionValidator):
    kind = ValidationKind.CHINESE
    message = "Value must consist only of Chinese characters"
    check_function = staticmethod(valid_chinese)


class Ipv4Validator(FunctionValidator):
    kind = ValidationKind.IPV4
    message = "Invalid IPv4 address"
    check_function = staticmethod(valid_ipv4)


class Ipv6Validator(FunctionValidator):
    """Full-form IPv6 only; ``::`` compression is reported as invalid."""

    kind = ValidationKind.IPV6
    message = "Invalid IPv6 address (8 groups of 1-4 hex digits expected)"
    check_function = staticmethod(valid_ipv6)


class LengthValidator(StringCheckValidator):
    """Validates that a string length lies within inclusive bounds."""

    kind = ValidationKind.LENGTH
    message = "Length out of range"

    def __init__(
        self,
        min_length: int = 0,
        max_length: int | None = None,
        field: str | None = None,
    ) -> None:
        """Initialize length validator.

        Args:
            min_length: Smallest accepted length.
            max_length: Largest accepted length. None means unbounded.
            field: Field name used in error reports.

        Raises:
            ValueError: If ``max_length`` is smaller than ``min_length``.
        """
        super().__init__(field)
        if max_length is not None and max_length < min_length:
            raise ValueError(f"max_length ({max_length}) is smaller than min_length ({min_length})")
        self._min_length = min_length
        self._max_length = max_length

    def _check(self, value: Any) -> bool:
        upper = self._max_length if self._max_length is not None else float("inf")
        return valid_length(value, self._min_length, upper)  # type: ignore[arg-type]

    def _describe_failure(self, value: Any) -> str:
        upper = "unbounded" if self._max_length is None else str(self._max_length)
        return f"Length must be between {self._min_length} and {upper}"


class IdCardValidator(StringCheckValidator):
    """Validates national ID numbers through a NationalIdChecker.

    Uses the package default checker unless one is supplied.
    """

    kind = ValidationKind.ID_CARD
    message = "Invalid national ID number"

    def __init__(
        self,
        checker: NationalIdCheckerProtocol | None = None,
        field: str | None = None,
    ) -> None:
        super().__init__(field)
        self._checker = checker

    def _check(self, value: Any) -> bool:
        if not isinstance(value, str):
            return False
        if self._checker is None:
            from validstring_utils.idcard import get_default_id_checker

            return get_default_id_checker().is_valid(value)
        return self._checker.is_valid(value)


class ValidatorFactory(PluginFactory[StringCheckValidator]):
    """Factory for creating string validators by kind name.

    Example:
        >>> ValidatorFactory.create("phone").validate("13800138000").is_valid
        True
        >>> ValidatorFactory.create("length", min_length=1, max_length=5)
    """

    _registry: ClassVar[dict[str, type[StringCheckValidator]]] = {}
    _default_type: ClassVar[str] = ValidationKind.PHONE.value
    _entity_name: ClassVar[str] = "validator"

    @classmethod
    def _ensure_defaults_registered(cls) -> None:
        for impl in (
            PhoneValidator,
            QQValidator,
            EmailValidator,
            ChineseValidator,
            Ipv4Validator,
            Ipv6Validator,
            LengthValidator,
            IdCardValidator,
        ):
            cls._registry.setdefault(impl.kind.value, impl)

    @classmethod
    def create(  # type: ignore[override]
        cls,
        kind: str | ValidationKind | None = None,
        **kwargs: Any,
    ) -> StringCheckValidator:
        """Create a validator for ``kind`` (a name or ValidationKind).

        Raises:
            ValueError: If the kind is not registered.
        """
        if isinstance(kind, ValidationKind):
            kind = kind.value
        return super().create(kind, **kwargs)


def create_validator_pipeline(
    kinds: Iterable[str | ValidationKind | StringCheckValidator],
    name: str = "string_validation",
) -> CompositeValidator[str]:
    """Build a composite validator that runs several checks on one string.

    Args:
        kinds: Kind names, ValidationKind members or ready-made validators.
        name: Name of the pipeline.

    Returns:
        CompositeValidator aggregating every check's errors.
    """
    builder: ValidatorPipelineBuilder[str] = ValidatorPipelineBuilder(name)
    for kind in kinds:
        if isinstance(kind, StringCheckValidator):
            builder.add(kind)
        else:
            builder.add(ValidatorFactory.create(kind))
    return builder.build()
