"""Contact record model validated with the package's string checks."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Self

from pydantic import ConfigDict, Field, ValidationInfo, model_validator

from validstring_utils.validation.base import ValidStringValidationBase
from validstring_utils.validation.functions import (
    valid_chinese,
    valid_email,
    valid_id_card,
    valid_ipv4,
    valid_ipv6,
    valid_phone,
    valid_qq,
)


def _valid_ip(value: str) -> bool:
    return valid_ipv4(value) or valid_ipv6(value)


# field name -> (check, message)
_FIELD_CHECKS: dict[str, tuple[Callable[[Any], bool], str]] = {
    "name": (valid_chinese, "Name must consist only of Chinese characters"),
    "phone": (valid_phone, "Phone number must be 11 digits starting with 1"),
    "qq": (valid_qq, "QQ number must be 5 to 13 digits"),
    "email": (valid_email, "Invalid e-mail address"),
    "ip_address": (_valid_ip, "Invalid IPv4 or IPv6 address"),
    "id_card": (valid_id_card, "Invalid national ID number"),
}


class ContactInfo(ValidStringValidationBase):
    """A person's contact details.

    Every present field is stripped of surrounding whitespace (logged as a
    cleaning step) and then checked. Failures are logged with add_error()
    and the model is still returned; pass
    ``context={"strict": True}`` to ``model_validate`` to raise on the
    first invalid field instead.

    Example:
        >>> info = ContactInfo(phone="13800138000", email="bad")
        >>> info.is_valid
        False
        >>> info.invalid_fields
        ['email']
    """

    model_config = ConfigDict(extra="ignore")

    name: str | None = Field(default=None, description="Name written in Chinese characters")
    phone: str | None = Field(default=None, description="11-digit mobile number")
    qq: str | None = Field(default=None, description="QQ number")
    email: str | None = Field(default=None, description="E-mail address")
    ip_address: str | None = Field(default=None, description="IPv4 or full-form IPv6 address")
    id_card: str | None = Field(default=None, description="18-digit national ID number")

    @model_validator(mode="after")
    def check_fields(self, info: ValidationInfo) -> Self:
        strict = bool(info.context and info.context.get("strict"))
        for field_name, (check, message) in _FIELD_CHECKS.items():
            value = getattr(self, field_name)
            if value is None:
                continue
            stripped = value.strip()
            if stripped != value:
                self.add_cleaning_process(
                    field_name, value, stripped, "Stripped surrounding whitespace"
                )
                setattr(self, field_name, stripped)
                value = stripped
            if not check(value):
                self.add_error(field_name, message, value, raise_exception=strict)
        return self

    @property
    def invalid_fields(self) -> list[str]:
        """Names of fields that failed validation, in check order."""
        seen: list[str] = []
        for entry in self.process_log.errors:
            if entry.field not in seen:
                seen.append(entry.field)
        return seen

    @property
    def is_valid(self) -> bool:
        return not self.process_log.errors
