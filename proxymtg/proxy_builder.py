"""Builder interfaces for card proxies and the basic land catalogue."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")

_SNOW_PREFIX = "Snow-Covered "


class CoreLand(Enum):
    """The five basic land types."""

    PLAINS = "Plains"
    ISLAND = "Island"
    SWAMP = "Swamp"
    MOUNTAIN = "Mountain"
    FOREST = "Forest"

    def __str__(self) -> str:
        return self.value


class BasicLand(Enum):
    """Every basic land card, valued by its printed name."""

    PLAINS = "Plains"
    ISLAND = "Island"
    SWAMP = "Swamp"
    MOUNTAIN = "Mountain"
    FOREST = "Forest"
    SNOW_PLAINS = "Snow-Covered Plains"
    SNOW_ISLAND = "Snow-Covered Island"
    SNOW_SWAMP = "Snow-Covered Swamp"
    SNOW_MOUNTAIN = "Snow-Covered Mountain"
    SNOW_FOREST = "Snow-Covered Forest"
    WASTES = "Wastes"

    @classmethod
    def all(cls) -> list[BasicLand]:
        """All basic lands in catalogue order."""
        return list(cls)

    @classmethod
    def from_name(cls, name: str) -> BasicLand:
        """Look a basic land up by its printed name."""
        try:
            return cls(name)
        except ValueError:
            raise ValueError(f"{name} is not the name of a basic land") from None

    @property
    def is_snow(self) -> bool:
        return self.value.startswith(_SNOW_PREFIX)

    @property
    def core(self) -> CoreLand | None:
        """The land type this land carries, or None for Wastes."""
        if self is BasicLand.WASTES:
            return None
        return CoreLand(self.value.removeprefix(_SNOW_PREFIX))

    def __str__(self) -> str:
        return self.value


class ProxyBuilder(ABC):
    """Collects the common parts of a card and renders a proxy."""

    @abstractmethod
    def build(self) -> Any:
        """Render the proxy."""

    @abstractmethod
    def name(self, name: str) -> ProxyBuilder: ...

    @abstractmethod
    def type_line(self, type_line: str) -> ProxyBuilder: ...

    @abstractmethod
    def color_indicator(self, colors: list[str]) -> ProxyBuilder: ...

    @abstractmethod
    def color_identity(self, colors: list[str]) -> ProxyBuilder: ...

    @abstractmethod
    def mana_cost(self, mana_cost: str) -> ProxyBuilder: ...

    @abstractmethod
    def art_filename(self, art_filename: Any) -> ProxyBuilder: ...

    @abstractmethod
    def art_credits(self, artist: str) -> ProxyBuilder: ...

    @abstractmethod
    def set_legendary(self, is_legendary: bool) -> ProxyBuilder: ...


class ProxyBuilderNormal(ABC):
    """Parts specific to ordinary cards."""

    @abstractmethod
    def rules_text(self, rules_text: str) -> ProxyBuilderNormal: ...

    @abstractmethod
    def flavor_text(self, flavor_text: str) -> ProxyBuilderNormal: ...

    @abstractmethod
    def corner_bubble(self, corner_bubble: str) -> ProxyBuilderNormal: ...


class ProxyBuilderSaga(ProxyBuilder):
    """Parts specific to saga cards."""

    @abstractmethod
    def step_text(self, steps: list[int], rules_text: str) -> ProxyBuilderSaga: ...

    @abstractmethod
    def include_reminder(self, remind: bool) -> ProxyBuilderSaga: ...

    @abstractmethod
    def flavor_text(self, text: str) -> ProxyBuilderSaga: ...


class DeckBuilder(ABC):
    """Gathers rendered cards and writes them out as a deck."""

    @abstractmethod
    def add_card(self, card: Any) -> DeckBuilder: ...

    @abstractmethod
    def build(self, out: Any) -> Any: ...


class BasicLandProxyBuilder(ABC):
    """Renders basic lands, cycling through registered art."""

    @abstractmethod
    def art(self, land: BasicLand, art_filename: Any, artist: str) -> BasicLandProxyBuilder: ...

    @abstractmethod
    def build(self, land: BasicLand) -> Any: ...


class DefaultBuilder(ProxyBuilder, Generic[T]):
    """A builder that ignores every part and builds a default value."""

    def __init__(self, factory: Callable[[], T]) -> None:
        self._factory = factory

    def build(self) -> T:
        return self._factory()

    def name(self, name: str) -> DefaultBuilder[T]:
        return self

    def type_line(self, type_line: str) -> DefaultBuilder[T]:
        return self

    def color_indicator(self, colors: list[str]) -> DefaultBuilder[T]:
        return self

    def color_identity(self, colors: list[str]) -> DefaultBuilder[T]:
        return self

    def mana_cost(self, mana_cost: str) -> DefaultBuilder[T]:
        return self

    def art_filename(self, art_filename: Any) -> DefaultBuilder[T]:
        return self

    def art_credits(self, artist: str) -> DefaultBuilder[T]:
        return self

    def set_legendary(self, is_legendary: bool) -> DefaultBuilder[T]:
        return self