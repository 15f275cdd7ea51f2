"""National ID number checkers.

``valid_id_card`` delegates to the default checker held here. The default is
created lazily from ``VALIDSTRING_ID_CHECKER`` (``"cn"`` unless set) and can
be replaced with :func:`set_default_id_checker`.
"""

from __future__ import annotations

from validstring_utils.config import ValidatorConfig
from validstring_utils.idcard.base import BaseNationalIdChecker
from validstring_utils.idcard.china import (
    ChineseResidentIdChecker,
    compute_check_code,
    parse_birth_date,
)
from validstring_utils.idcard.factory import NationalIdCheckerFactory
from validstring_utils.protocols import NationalIdCheckerProtocol

__all__ = [
    "BaseNationalIdChecker",
    "ChineseResidentIdChecker",
    "NationalIdCheckerFactory",
    "compute_check_code",
    "parse_birth_date",
    "get_default_id_checker",
    "set_default_id_checker",
]

_default_checker: NationalIdCheckerProtocol | None = None


def get_default_id_checker() -> NationalIdCheckerProtocol:
    """Get (creating on first use) the shared national ID checker."""
    global _default_checker
    if _default_checker is None:
        _default_checker = NationalIdCheckerFactory.create(ValidatorConfig().id_checker)
    return _default_checker


def set_default_id_checker(checker: NationalIdCheckerProtocol | None) -> None:
    """Replace the shared checker. Passing None resets to the configured default."""
    global _default_checker
    _default_checker = checker
