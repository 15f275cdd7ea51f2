from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_CLEAN_SUFFIX = ".lastUpdated"
DEFAULT_ID_CHECKER = "cn"


def _default_clean_root() -> Path:
    value = os.getenv("VALIDSTRING_CLEAN_ROOT")
    if value:
        return Path(value).expanduser()
    return Path.home() / ".m2"


@dataclass
class CleanerConfig:
    """Defaults for the directory cleaner, overridable from the environment."""

    root: Path = field(default_factory=_default_clean_root)
    suffix: str = field(
        default_factory=lambda: os.getenv("VALIDSTRING_CLEAN_SUFFIX", DEFAULT_CLEAN_SUFFIX)
    )


@dataclass
class ValidatorConfig:
    """Defaults for the string validators, overridable from the environment."""

    id_checker: str = field(
        default_factory=lambda: os.getenv("VALIDSTRING_ID_CHECKER", DEFAULT_ID_CHECKER)
    )
