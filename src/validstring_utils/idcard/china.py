"""Mainland China 18-digit resident ID number checker."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date

from validstring_utils.idcard.base import BaseNationalIdChecker
from validstring_utils.idcard.regions import (
    CHECKSUM_CODES,
    CHECKSUM_WEIGHTS,
    ID_LENGTH,
    MIN_BIRTH_YEAR,
    PROVINCE_CODES,
)


def compute_check_code(first17: str) -> str:
    """Compute the ISO 7064 MOD 11-2 check character for 17 digits.

    Args:
        first17: The first seventeen digits of the ID number.

    Returns:
        The expected 18th character ("0"-"9" or "X").

    Raises:
        ValueError: If ``first17`` is not exactly 17 ASCII digits.
    """
    if len(first17) != ID_LENGTH - 1 or not (first17.isascii() and first17.isdigit()):
        raise ValueError(f"Expected 17 ASCII digits, got {first17!r}")
    total = sum(int(d) * w for d, w in zip(first17, CHECKSUM_WEIGHTS))
    return CHECKSUM_CODES[total % 11]


def parse_birth_date(id_number: str) -> date | None:
    """Extract the YYYYMMDD birth date at positions 7-14, or None if impossible."""
    raw = id_number[6:14]
    if len(raw) != 8 or not (raw.isascii() and raw.isdigit()):
        return None
    try:
        return date(int(raw[:4]), int(raw[4:6]), int(raw[6:8]))
    except ValueError:
        return None


class ChineseResidentIdChecker(BaseNationalIdChecker):
    """Validates 18-digit resident identity numbers.

    Rules, in order:
    - 17 ASCII digits followed by a digit or ``X`` (``x`` is accepted);
    - the first two digits are a known province-level region code;
    - digits 7-14 are a real date between 1900-01-01 and today;
    - the last character matches the MOD 11-2 checksum.
    """

    def __init__(self, today: Callable[[], date] | None = None) -> None:
        """Initialize the checker.

        Args:
            today: Callable returning the current date, used to reject
                future birth dates. Defaults to ``date.today``.
        """
        super().__init__()
        self._today = today or date.today

    @property
    def name(self) -> str:
        return "cn"

    def _check_impl(self, value: str) -> bool:
        if len(value) != ID_LENGTH:
            return False

        first17 = value[:17]
        last = value[17].upper()
        if not (first17.isascii() and first17.isdigit()):
            return False
        if not (last == "X" or (last.isascii() and last.isdigit())):
            return False

        if value[:2] not in PROVINCE_CODES:
            return False

        birth = parse_birth_date(value)
        if birth is None or birth.year < MIN_BIRTH_YEAR or birth > self._today():
            return False

        return compute_check_code(first17) == last
