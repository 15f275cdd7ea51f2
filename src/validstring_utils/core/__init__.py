"""Shared validation infrastructure.

Re-exports the result, process-log and validator building blocks from
``abstract_validation_base`` together with the package's plugin factory, so
the rest of the package imports them from one place.

Usage:
    from validstring_utils.core import (
        BaseValidator,
        CompositeValidator,
        PluginFactory,
        ProcessEntry,
        ProcessLog,
        ValidationResult,
        ValidatorPipelineBuilder,
    )
"""

from __future__ import annotations

from abstract_validation_base import (
    BaseValidator,
    CompositeValidator,
    ProcessEntry,
    ProcessLog,
    ValidationError,
    ValidationResult,
    ValidatorPipelineBuilder,
    ValidatorProtocol,
)

from validstring_utils.core.factory import PluginFactory

__all__ = [
    # Results
    "ValidationError",
    "ValidationResult",
    # Process logging
    "ProcessEntry",
    "ProcessLog",
    # Validation
    "BaseValidator",
    "CompositeValidator",
    "ValidatorProtocol",
    "ValidatorPipelineBuilder",
    # Factory
    "PluginFactory",
]
