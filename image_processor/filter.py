"""The filter interface and the registry that maps names to filter factories."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from typing import ClassVar

from image_processor.color import Color
from image_processor.matrix import Matrix


class FilterArgumentError(ValueError):
    """Raised when a filter is given parameters it cannot accept."""


class Filter(ABC):
    """An operation that turns one image into another."""

    @abstractmethod
    def apply(self, image: Matrix[Color]) -> Matrix[Color]:
        """Return the filtered image."""


FilterFactory = Callable[[Sequence[str]], Filter]


class Registry:
    """Maps filter names to factories that build filters from parameters."""

    _instance: ClassVar[Registry | None] = None

    def __init__(self) -> None:
        self._factories: dict[str, FilterFactory] = {}

    def register(self, name: str, factory: FilterFactory) -> None:
        """Register ``factory`` under ``name``; an existing entry is kept."""
        self._factories.setdefault(name, factory)

    def get(self, name: str) -> FilterFactory:
        """Return the factory registered under ``name``."""
        try:
            return self._factories[name]
        except KeyError:
            raise KeyError(f"no filter registered under {name!r}") from None

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    @classmethod
    def instance(cls) -> Registry:
        """Return the process-wide registry."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance


def register_filter(name: str) -> Callable[[FilterFactory], FilterFactory]:
    """Decorator that registers a factory in the global registry under ``name``."""

    def decorator(factory: FilterFactory) -> FilterFactory:
        Registry.instance().register(name, factory)
        return factory

    return decorator