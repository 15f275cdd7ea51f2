"""Models package: errors, enums, cleaning results and the contact model."""

from __future__ import annotations

from validstring_utils.models.enums import VALIDATION_KINDS, ValidationKind
from validstring_utils.models.errors import (
    PACKAGE_NAME,
    ValidStringError,
    ValidStringValidationError,
)
from validstring_utils.models.results import CleanupEntry, CleanupReport

# Imported last: ContactInfo depends on the validation package
from validstring_utils.models.contact import ContactInfo  # noqa: E402, I001

__all__ = [
    # Errors
    "PACKAGE_NAME",
    "ValidStringError",
    "ValidStringValidationError",
    # Enums
    "ValidationKind",
    "VALIDATION_KINDS",
    # Results
    "CleanupEntry",
    "CleanupReport",
    # Models
    "ContactInfo",
]
