"""validstring-utils: regex string checks and a suffix-based directory cleaner.

This package provides:
- Boolean string checks (phone, QQ, e-mail, Chinese characters, IPv4/IPv6,
  length bounds, national ID numbers) that never raise on bad input
- Composable validators returning ValidationResult objects
- A pluggable national ID checker (default: mainland resident ID)
- A directory cleaner that deletes files by suffix and prunes empty
  directories, reporting every deletion
- Pandas integration and a command line interface

Quick Start:
    >>> from validstring_utils import valid_phone, valid_ipv6
    >>> valid_phone("13800138000")
    True
    >>> valid_ipv6("::1")  # zero compression is not accepted
    False

    # Detailed results
    >>> from validstring_utils import validate
    >>> result = validate("email", "a@b")
    >>> [e.message for e in result.errors]
    ['Invalid e-mail address']

    # Clean failed Maven downloads
    >>> from validstring_utils import clean_directory
    >>> report = clean_directory("~/.m2", ".lastUpdated")
    >>> report.is_successful
    True
"""

from __future__ import annotations  # noqa: I001

# Import order is intentional to avoid circular imports - do not auto-fix
from validstring_utils.core import (
    BaseValidator,
    CompositeValidator,
    PluginFactory,
    ProcessEntry,
    ProcessLog,
    ValidationError,
    ValidationResult,
)
from validstring_utils.patterns import (
    EMAIL_MAX_LENGTH,
    PATTERN_VALID_CHINESE,
    PATTERN_VALID_EMAIL,
    PATTERN_VALID_IPV4,
    PATTERN_VALID_IPV6,
    PATTERN_VALID_PHONE,
    PATTERN_VALID_QQ,
)
from validstring_utils.idcard import (
    BaseNationalIdChecker,
    ChineseResidentIdChecker,
    NationalIdCheckerFactory,
    get_default_id_checker,
    set_default_id_checker,
)
from validstring_utils.validation import (
    ChineseValidator,
    EmailValidator,
    IdCardValidator,
    Ipv4Validator,
    Ipv6Validator,
    LengthValidator,
    PhoneValidator,
    QQValidator,
    StringCheckValidator,
    ValidatorFactory,
    create_validator_pipeline,
    valid_chinese,
    valid_email,
    valid_id_card,
    valid_ipv4,
    valid_ipv6,
    valid_length,
    valid_pattern,
    valid_phone,
    valid_qq,
)
from validstring_utils.validation.base import ValidationBase, ValidStringValidationBase
from validstring_utils.models import (
    PACKAGE_NAME,
    VALIDATION_KINDS,
    CleanupEntry,
    CleanupReport,
    ContactInfo,
    ValidationKind,
    ValidStringError,
    ValidStringValidationError,
)
from validstring_utils.cleaner import DirectoryCleaner, clean_directory
from validstring_utils.config import CleanerConfig, ValidatorConfig
from validstring_utils.protocols import (
    CleanerProtocol,
    NationalIdCheckerProtocol,
    ValidatorProtocol,
)
from validstring_utils.service import (
    ValidStringService,
    check,
    get_default_service,
    validate,
)
from validstring_utils.pandas_ext import check_series, register_accessor, validate_column

__version__ = "0.1.0"
__package_name__ = "validstring-utils"

__all__ = [
    # Version
    "__version__",
    # Boolean checks
    "valid_pattern",
    "valid_phone",
    "valid_qq",
    "valid_email",
    "valid_chinese",
    "valid_length",
    "valid_ipv4",
    "valid_ipv6",
    "valid_id_card",
    # Pattern constants
    "PATTERN_VALID_PHONE",
    "PATTERN_VALID_QQ",
    "PATTERN_VALID_EMAIL",
    "PATTERN_VALID_CHINESE",
    "PATTERN_VALID_IPV4",
    "PATTERN_VALID_IPV6",
    "EMAIL_MAX_LENGTH",
    # Service
    "ValidStringService",
    "get_default_service",
    "check",
    "validate",
    # Validators
    "BaseValidator",
    "CompositeValidator",
    "StringCheckValidator",
    "PhoneValidator",
    "QQValidator",
    "EmailValidator",
    "ChineseValidator",
    "Ipv4Validator",
    "Ipv6Validator",
    "LengthValidator",
    "IdCardValidator",
    "ValidatorFactory",
    "create_validator_pipeline",
    # National ID checkers
    "BaseNationalIdChecker",
    "ChineseResidentIdChecker",
    "NationalIdCheckerFactory",
    "get_default_id_checker",
    "set_default_id_checker",
    # Cleaner
    "DirectoryCleaner",
    "clean_directory",
    "CleanupEntry",
    "CleanupReport",
    # Models and results
    "ContactInfo",
    "ValidationBase",
    "ValidStringValidationBase",
    "ValidationKind",
    "VALIDATION_KINDS",
    "ValidationError",
    "ValidationResult",
    "ProcessEntry",
    "ProcessLog",
    "PluginFactory",
    # Errors
    "PACKAGE_NAME",
    "ValidStringError",
    "ValidStringValidationError",
    # Config
    "CleanerConfig",
    "ValidatorConfig",
    # Protocols
    "CleanerProtocol",
    "NationalIdCheckerProtocol",
    "ValidatorProtocol",
    # Pandas integration
    "register_accessor",
    "check_series",
    "validate_column",
]
