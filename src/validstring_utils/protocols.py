from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from validstring_utils.core import ValidatorProtocol

if TYPE_CHECKING:
    from validstring_utils.models import CleanupEntry, CleanupReport

__all__ = ["CleanerProtocol", "NationalIdCheckerProtocol", "ValidatorProtocol"]


@runtime_checkable
class NationalIdCheckerProtocol(Protocol):
    """Protocol for national ID number checkers.

    Implementations decide whether a string is a well-formed national ID
    number. They must never raise on malformed input.
    """

    def is_valid(self, value: str) -> bool:
        """Check a candidate ID number.

        Args:
            value: Candidate ID number.

        Returns:
            True if the number is well formed and its checksum matches.
        """
        ...

    @property
    def name(self) -> str:
        """Name of this checker for error reporting."""
        ...


@runtime_checkable
class CleanerProtocol(Protocol):
    """Protocol for suffix-based directory cleaners."""

    def clean(
        self,
        root_path: str | Path,
        suffix: str,
        on_entry: Callable[[CleanupEntry], None] | None = None,
    ) -> CleanupReport:
        """Delete matching files and empty directories under ``root_path``.

        Args:
            root_path: Directory (or file) to start from.
            suffix: Literal file-name suffix to delete.
            on_entry: Optional callback invoked for every attempted deletion.

        Returns:
            CleanupReport describing every attempted deletion.
        """
        ...
