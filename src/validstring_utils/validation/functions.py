"""Boolean string checks.

Every function here is pure and never raises: malformed, empty or
non-string input simply yields ``False``.

    >>> valid_phone("13800138000")
    True
    >>> valid_ipv4("255.256.255.255")
    False
    >>> valid_chinese("有标点符号。")
    False
"""

from __future__ import annotations

import re
from typing import Any

from validstring_utils.idcard import get_default_id_checker
from validstring_utils.patterns import (
    CHINESE_RE,
    EMAIL_MAX_LENGTH,
    EMAIL_RE,
    IPV4_RE,
    IPV6_RE,
    PHONE_RE,
    QQ_RE,
    compile_pattern,
)


def valid_pattern(content: Any, pattern: str | re.Pattern[str]) -> bool:
    """Check that the whole of ``content`` matches ``pattern``.

    Args:
        content: Candidate string.
        pattern: Pattern string or compiled pattern.

    Returns:
        True on a full-string match; False otherwise, including for
        non-string content or an uncompilable pattern.
    """
    if not isinstance(content, str):
        return False
    if isinstance(pattern, str):
        try:
            pattern = compile_pattern(pattern)
        except re.error:
            return False
    return pattern.fullmatch(content) is not None


def valid_phone(phone: Any) -> bool:
    """Mobile number: 11 digits starting with ``1``."""
    return valid_pattern(phone, PHONE_RE)


def valid_qq(qq: Any) -> bool:
    """QQ number: 5 to 13 digits."""
    return valid_pattern(qq, QQ_RE)


def valid_email(email: Any) -> bool:
    """E-mail address of at most 64 characters.

    Blank strings are rejected before the pattern is tried.
    """
    if not isinstance(email, str) or not email.strip():
        return False
    if len(email) > EMAIL_MAX_LENGTH:
        return False
    return valid_pattern(email, EMAIL_RE)


def valid_chinese(ch: Any) -> bool:
    """Non-empty string made only of CJK Unified Ideographs (U+4E00..U+9FA5).

    Examples:
        valid_chinese("") -> False
        valid_chinese("有标点符号。") -> False
        valid_chinese("这是中文") -> True
        valid_chinese("繁体字龍") -> True
    """
    return valid_pattern(ch, CHINESE_RE)


def valid_length(value: Any, min_length: int, max_length: int) -> bool:
    """Check ``min_length <= len(value) <= max_length``.

    ``None`` counts as length 0. Other non-string values are rejected.
    """
    if value is None:
        length = 0
    elif isinstance(value, str):
        length = len(value)
    else:
        return False
    return min_length <= length <= max_length


def valid_ipv4(ip: Any) -> bool:
    """Dotted IPv4 address, first octet 1-255 and the rest 0-255.

    Examples:
        valid_ipv4("255.255.255.255") -> True
        valid_ipv4("1.2.3.255") -> True
        valid_ipv4("255.256.255.255") -> False
        valid_ipv4("255.235.20.2.2") -> False
    """
    return valid_pattern(ip, IPV4_RE)


def valid_ipv6(ip: Any) -> bool:
    """Full-form IPv6 address: exactly 8 colon-separated groups of 1-4 hex digits.

    ``::`` zero compression is not accepted.

    Examples:
        valid_ipv6("0:0:0:0:0:0:0:1") -> True
        valid_ipv6("FFFF:FFFF:FFFF:FFFF:FFFF:FFFF:FFFF:1") -> True
        valid_ipv6("FFFG:FFFF:FFFF:FFFF:FFFF:FFFF:FFFF:1") -> False
        valid_ipv6("::1") -> False
    """
    return valid_pattern(ip, IPV6_RE)


def valid_id_card(id_card: Any) -> bool:
    """18-digit national ID number, checked by the default ID checker."""
    if not isinstance(id_card, str):
        return False
    return get_default_id_checker().is_valid(id_card)
