"""Regular expressions behind the string checks.

The ``PATTERN_VALID_*`` strings are part of the public contract and are kept
character for character, including their ``^``/``$`` anchors. Matching is
always done with ``fullmatch`` and ``re.ASCII`` so ``\\d`` only accepts
ASCII digits and a trailing newline never slips through ``$``.
"""

from __future__ import annotations

import re

PATTERN_VALID_PHONE = r"^1\d{10}$"
PATTERN_VALID_QQ = r"^\d{5,13}$"
PATTERN_VALID_EMAIL = r"^[a-zA-Z0-9_-]+@[a-zA-Z0-9_-]+(\.[a-zA-Z0-9_-]+)+$"
PATTERN_VALID_CHINESE = r"^[\u4e00-\u9fa5]+$"
PATTERN_VALID_IPV4 = (
    r"^(1\d{2}|2[0-4]\d|25[0-5]|[1-9]\d|[1-9])\."
    r"(1\d{2}|2[0-4]\d|25[0-5]|[1-9]\d|\d)\."
    r"(1\d{2}|2[0-4]\d|25[0-5]|[1-9]\d|\d)\."
    r"(1\d{2}|2[0-4]\d|25[0-5]|[1-9]\d|\d)$"
)
PATTERN_VALID_IPV6 = r"^([\dA-Fa-f]{1,4}:){7}[\dA-Fa-f]{1,4}$"

EMAIL_MAX_LENGTH = 64

_FLAGS = re.ASCII
_compiled: dict[str, re.Pattern[str]] = {}


def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile (and cache) a pattern with the package's matching flags."""
    compiled = _compiled.get(pattern)
    if compiled is None:
        compiled = re.compile(pattern, _FLAGS)
        _compiled[pattern] = compiled
    return compiled


PHONE_RE = compile_pattern(PATTERN_VALID_PHONE)
QQ_RE = compile_pattern(PATTERN_VALID_QQ)
EMAIL_RE = compile_pattern(PATTERN_VALID_EMAIL)
CHINESE_RE = compile_pattern(PATTERN_VALID_CHINESE)
IPV4_RE = compile_pattern(PATTERN_VALID_IPV4)
IPV6_RE = compile_pattern(PATTERN_VALID_IPV6)
