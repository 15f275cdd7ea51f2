from __future__ import annotations

from typing import ClassVar

from validstring_utils.core.factory import PluginFactory
from validstring_utils.protocols import NationalIdCheckerProtocol


class NationalIdCheckerFactory(PluginFactory[NationalIdCheckerProtocol]):
    """Factory for creating national ID checkers by type name.

    Example:
        >>> checker = NationalIdCheckerFactory.create()  # default "cn"
        >>> checker.is_valid("11010519491231002X")
        True

        # Register a custom checker
        >>> NationalIdCheckerFactory.register("hk", HongKongIdChecker)
        >>> checker = NationalIdCheckerFactory.create("hk")
    """

    _registry: ClassVar[dict[str, type[NationalIdCheckerProtocol]]] = {}
    _default_type: ClassVar[str] = "cn"
    _entity_name: ClassVar[str] = "national ID checker"

    @classmethod
    def _ensure_defaults_registered(cls) -> None:
        if "cn" not in cls._registry:
            from validstring_utils.idcard.china import ChineseResidentIdChecker

            cls._registry["cn"] = ChineseResidentIdChecker
