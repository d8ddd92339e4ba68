"""Deck lists naming the cards to proxy and the art to use."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from proxymtg.proxy_builder import BasicLand


def _require(data: Mapping[str, Any], key: str, owner: str) -> Any:
    if not isinstance(data, Mapping):
        raise ValueError(f"{owner}: expected an object")
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"{owner}: missing field `{key}`") from None


def _load_path(value: Any) -> Path | None:
    return Path(value) if value else None


def _dump_path(value: Path | None) -> str:
    return str(value) if value else ""


@dataclass
class Artoid:
    """A card to proxy, with optional art, credit and flavour text."""

    name: str
    art_file: Path | None = None
    art_credit: str = ""
    flavor_text: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Artoid:
        return cls(
            name=_require(data, "name", cls.__name__),
            art_file=_load_path(data.get("art_file", "")),
            art_credit=data.get("art_credit", ""),
            flavor_text=data.get("flavor_text", ""),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "art_file": _dump_path(self.art_file),
            "art_credit": self.art_credit,
            "flavor_text": self.flavor_text,
        }


@dataclass
class Landoid:
    """A number of copies of one basic land."""

    name: BasicLand = BasicLand.PLAINS
    number: int = 0
    art_file: Path | None = None
    art_credit: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Landoid:
        name = _require(data, "name", cls.__name__)
        if not isinstance(name, str):
            raise ValueError(f"{cls.__name__}: `name` must be the name of a basic land")
        number = _require(data, "number", cls.__name__)
        if isinstance(number, bool) or not isinstance(number, int) or number < 0:
            raise ValueError(f"{cls.__name__}: `number` must be a non-negative integer")
        return cls(
            name=BasicLand.from_name(name),
            number=number,
            art_file=_load_path(data.get("art_file", "")),
            art_credit=data.get("art_credit", ""),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": str(self.name),
            "number": self.number,
            "art_file": _dump_path(self.art_file),
            "art_credit": self.art_credit,
        }


def _load_list(data: Mapping[str, Any], key: str, owner: str, kind: type) -> list[Any]:
    items = _require(data, key, owner)
    if not isinstance(items, list):
        raise ValueError(f"{owner}: `{key}` must be a list")
    return [kind.from_dict(item) for item in items]


@dataclass
class DeckEDH:
    """A commander deck."""

    commanders: list[Artoid] = field(default_factory=list)
    the_99ish: list[Artoid] = field(default_factory=list)
    basics: list[Landoid] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DeckEDH:
        owner = cls.__name__
        return cls(
            commanders=_load_list(data, "commanders", owner, Artoid),
            the_99ish=_load_list(data, "the_99ish", owner, Artoid),
            basics=_load_list(data, "basics", owner, Landoid),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "commanders": [card.to_dict() for card in self.commanders],
            "the_99ish": [card.to_dict() for card in self.the_99ish],
            "basics": [land.to_dict() for land in self.basics],
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)


@dataclass
class Constructed:
    """A constructed-format deck."""

    cards: list[Artoid] = field(default_factory=list)
    basics: list[Landoid] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Constructed:
        owner = cls.__name__
        return cls(
            cards=_load_list(data, "cards", owner, Artoid),
            basics=_load_list(data, "basics", owner, Landoid),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "cards": [card.to_dict() for card in self.cards],
            "basics": [land.to_dict() for land in self.basics],
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)