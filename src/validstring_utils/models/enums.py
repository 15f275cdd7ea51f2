"""Validation kind enumeration and constants."""

from __future__ import annotations

from enum import Enum


class ValidationKind(str, Enum):
    """Enumeration of the supported string checks."""

    PHONE = "phone"
    QQ = "qq"
    EMAIL = "email"
    CHINESE = "chinese"
    IPV4 = "ipv4"
    IPV6 = "ipv6"
    LENGTH = "length"
    ID_CARD = "id_card"


VALIDATION_KINDS: list[str] = [k.value for k in ValidationKind]
