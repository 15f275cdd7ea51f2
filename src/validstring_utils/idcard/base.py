from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence

logger = logging.getLogger(__name__)


class BaseNationalIdChecker(ABC):
    """Abstract base class for national ID checkers.

    Provides the never-raise guarantee, logging and statistics.
    Subclasses implement ``_check_impl`` and may raise freely inside it;
    any exception is logged and reported as an invalid number.
    """

    def __init__(self) -> None:
        self._check_count = 0
        self._invalid_count = 0

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of this checker implementation."""
        ...

    @abstractmethod
    def _check_impl(self, value: str) -> bool:
        """Check a candidate that is known to be a ``str``."""
        ...

    def is_valid(self, value: str) -> bool:
        """Check a candidate ID number.

        Args:
            value: Candidate ID number. Non-string input is invalid.

        Returns:
            True if the number passes every rule of this checker.
        """
        self._check_count += 1

        if not isinstance(value, str):
            self._invalid_count += 1
            return False

        try:
            ok = self._check_impl(value)
        except Exception as e:  # noqa: BLE001
            logger.warning("ID checker %s failed on %r - %s", self.name, value[:32], e)
            ok = False

        if not ok:
            self._invalid_count += 1
        logger.debug("ID checker %s: %r -> %s", self.name, value[:32], ok)
        return ok

    def check_batch(self, values: Sequence[str]) -> list[bool]:
        """Check several candidates in order."""
        return [self.is_valid(v) for v in values]

    @property
    def stats(self) -> dict[str, int]:
        """Dict with check_count and invalid_count."""
        return {
            "check_count": self._check_count,
            "invalid_count": self._invalid_count,
        }

    def reset_stats(self) -> None:
        self._check_count = 0
        self._invalid_count = 0
