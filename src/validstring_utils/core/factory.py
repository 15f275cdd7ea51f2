"""Name-keyed plugin factory.

Validators and national ID checkers are created by type name from a
class-level registry. Subclasses pick the registry, the default name and the
label used in error messages, and lazily register their built-in types.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, TypeVar

T = TypeVar("T")


class PluginFactory(ABC, Generic[T]):
    """Generic factory for creating plugin instances from a registry.

    Example subclass:
        class NationalIdCheckerFactory(PluginFactory[NationalIdCheckerProtocol]):
            _registry: ClassVar[dict[str, type[NationalIdCheckerProtocol]]] = {}
            _default_type: ClassVar[str] = "cn"
            _entity_name: ClassVar[str] = "national ID checker"

            @classmethod
            def _ensure_defaults_registered(cls) -> None:
                cls._registry.setdefault("cn", ChineseResidentIdChecker)
    """

    _registry: ClassVar[dict[str, type[Any]]]
    _default_type: ClassVar[str]
    _entity_name: ClassVar[str]

    @classmethod
    @abstractmethod
    def _ensure_defaults_registered(cls) -> None:
        """Register built-in implementations. Called before every registry read."""
        ...

    @classmethod
    def register(cls, name: str, impl_class: type[T]) -> None:
        """Register (or replace) an implementation under ``name``."""
        cls._registry[name] = impl_class

    @classmethod
    def unregister(cls, name: str) -> None:
        """Remove ``name`` from the registry if present."""
        cls._registry.pop(name, None)

    @classmethod
    def get_class(cls, name: str | None = None) -> type[T]:
        """Look up the implementation class registered under ``name``.

        Raises:
            ValueError: If the name is not registered.
        """
        cls._ensure_defaults_registered()

        type_name = name if name is not None else cls._default_type

        if type_name not in cls._registry:
            available = ", ".join(sorted(cls._registry.keys()))
            raise ValueError(
                f"Unknown {cls._entity_name} type: {type_name}. Available types: {available}"
            )
        return cls._registry[type_name]

    @classmethod
    def create(cls, name: str | None = None, **kwargs: Any) -> T:
        """Create an instance of the named type.

        Args:
            name: Registered type name. If None, uses the default type.
            **kwargs: Arguments passed to the constructor.

        Raises:
            ValueError: If the type name is not registered.
        """
        impl_class = cls.get_class(name)
        return impl_class(**kwargs)  # type: ignore[no-any-return]

    @classmethod
    def available_types(cls) -> list[str]:
        """Sorted list of registered type names."""
        cls._ensure_defaults_registered()
        return sorted(cls._registry.keys())

    @classmethod
    def clear_registry(cls) -> None:
        """Clear the registry (mainly for testing)."""
        cls._registry.clear()
