"""String validation: boolean checks, validator objects and pipelines."""

from validstring_utils.core import CompositeValidator, ValidatorPipelineBuilder
from validstring_utils.validation.functions import (
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
from validstring_utils.validation.validators import (
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
)

__all__ = [
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
    # Validators
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
    "CompositeValidator",
    "ValidatorPipelineBuilder",
    "create_validator_pipeline",
]
