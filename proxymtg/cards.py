"""The atomic card database and its JSON records."""

from __future__ import annotations

import json
from dataclasses import MISSING, dataclass, field, fields, is_dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Mapping

DEFAULT_PATH = Path("AtomicCards.json")


def _spec(
    key: str | None = None,
    *,
    default: Any = MISSING,
    default_factory: Any = MISSING,
    load: Callable[[Any], Any] | None = None,
    required: bool = False,
) -> Any:
    metadata = {"key": key, "load": load, "required": required}
    return field(default=default, default_factory=default_factory, metadata=metadata)


def _dump(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        return value.to_dict()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, list):
        return [_dump(item) for item in value]
    if isinstance(value, dict):
        return {key: _dump(item) for key, item in value.items()}
    return value


def _from_dict(cls: type, data: Mapping[str, Any]) -> Any:
    """Build a record dataclass from a mapping keyed by its wire names."""
    if not isinstance(data, Mapping):
        raise ValueError(f"{cls.__name__}: expected an object")
    kwargs = {}
    for f in fields(cls):
        key = f.metadata.get("key") or f.name
        if key in data:
            load = f.metadata.get("load")
            value = data[key]
            if load is not None:
                try:
                    value = load(value)
                except (TypeError, ValueError, AttributeError) as exc:
                    raise ValueError(f"{cls.__name__}: invalid `{key}`: {exc}") from exc
            kwargs[f.name] = value
        elif f.metadata.get("required") or (
            f.default is MISSING and f.default_factory is MISSING
        ):
            raise ValueError(f"{cls.__name__}: missing field `{key}`")
    return cls(**kwargs)


def _to_dict(record: Any) -> dict[str, Any]:
    """Render a record dataclass as a mapping keyed by its wire names."""
    return {
        (f.metadata.get("key") or f.name): _dump(getattr(record, f.name))
        for f in fields(record)
    }


def _list_of(load: Callable[[Any], Any]) -> Callable[[Any], list[Any]]:
    return lambda items: [load(item) for item in items]


def _optional_float(value: Any) -> float | None:
    return None if value is None else float(value)


class Layout(Enum):
    ADVENTURE = "adventure"
    AFTERMATH = "aftermath"
    AUGMENT = "augment"
    CLASS = "class"
    FLIP = "flip"
    HOST = "host"
    LEVELER = "leveler"
    MELD = "meld"
    MODAL_DFC = "modal_dfc"
    MUTATE = "mutate"
    NORMAL = "normal"
    PLANAR = "planar"
    PROTOTYPE = "prototype"
    REVERSIBLE_CARD = "reversible_card"
    SAGA = "saga"
    SCHEME = "scheme"
    SPLIT = "split"
    TRANSFORM = "transform"
    VANGUARD = "vanguard"


@dataclass(kw_only=True)
class MetaData:
    date: str = _spec()
    version: str = _spec()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MetaData:
        return _from_dict(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return _to_dict(self)


@dataclass(kw_only=True)
class RelatedCards:
    reverse_related: list[str] = _spec("reverseRelated", default_factory=list)
    spellbook: list[str] = _spec(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RelatedCards:
        return _from_dict(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return _to_dict(self)


@dataclass(kw_only=True)
class PurchaseUrls:
    card_kingdom: str = _spec("cardKingdom", default="")
    card_kingdom_etched: str = _spec("cardKingdomEtched", default="")
    card_kingdom_foil: str = _spec("cardKingdomFoil", default="")
    cardmarket: str = _spec(default="")
    tcgplayer: str = _spec(default="")
    tcgplayer_etched: str = _spec("tcgplayerEtched", default="")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PurchaseUrls:
        return _from_dict(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return _to_dict(self)


@dataclass(kw_only=True)
class LeadershipSkills:
    brawl: bool = _spec(default=False, required=True)
    commander: bool = _spec(default=False, required=True)
    oathbreaker: bool = _spec(default=False, required=True)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LeadershipSkills:
        return _from_dict(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return _to_dict(self)


@dataclass(kw_only=True)
class Ruling:
    date: str = _spec(default="", required=True)
    text: str = _spec(default="", required=True)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Ruling:
        return _from_dict(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return _to_dict(self)


@dataclass(kw_only=True)
class ForeignData:
    face_name: str = _spec("faceName", default="")
    flavor_text: str = _spec("flavorText", default="")
    language: str = _spec()
    multiverse_id: float = _spec("multiverseId", default=0.0, load=float)
    name: str = _spec(default="")
    text: str = _spec(default="")
    type_line: str = _spec("type", default="")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ForeignData:
        return _from_dict(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return _to_dict(self)


@dataclass(kw_only=True)
class Identifiers:
    card_kingdom_etched_id: str = _spec("cardKingdomEtchedId", default="")
    card_kingdom_foil_id: str = _spec("cardKingdomFoilId", default="")
    card_kingdom_id: str = _spec("cardKingdomId", default="")
    cardsphere_id: str = _spec("cardsphereId", default="")
    mcm_id: str = _spec("mcmId", default="")
    mcm_meta_id: str = _spec("mcmMetaId", default="")
    mtg_arena_id: str = _spec("mtgArenaId", default="")
    mtgjson_foil_version_id: str = _spec("mtgjsonFoilVersionId", default="")
    mtgjson_non_foil_version_id: str = _spec("mtgjsonNonFoilVersionId", default="")
    mtgjson_v4_id: str = _spec("mtgjsonV4Id", default="")
    mtgo_foil_id: str = _spec("mtgoFoilId", default="")
    mtgo_id: str = _spec("mtgoId", default="")
    multiverse_id: str = _spec("multiverseId", default="")
    scryfall_id: str = _spec("scryfallId", default="")
    scryfall_oracle_id: str = _spec("scryfallOracleId", default="")
    scryfall_illustration_id: str = _spec("scryfallIllustrationId", default="")
    tcgplayer_product_id: str = _spec("tcgplayerProductId", default="")
    tcgplayer_etched_product_id: str = _spec("tcgplayerEtchedProductId", default="")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Identifiers:
        return _from_dict(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return _to_dict(self)


@dataclass(kw_only=True)
class Legalities:
    alchemy: str = _spec(default="")
    brawl: str = _spec(default="")
    commander: str = _spec(default="")
    duel: str = _spec(default="")
    explorer: str = _spec(default="")
    future: str = _spec(default="")
    gladiator: str = _spec(default="")
    historic: str = _spec(default="")
    historicbrawl: str = _spec(default="")
    legacy: str = _spec(default="")
    modern: str = _spec(default="")
    oldschool: str = _spec(default="")
    pauper: str = _spec(default="")
    penny: str = _spec(default="")
    pioneer: str = _spec(default="")
    predh: str = _spec(default="")
    premodern: str = _spec(default="")
    standard: str = _spec(default="")
    vintage: str = _spec(default="")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Legalities:
        return _from_dict(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return _to_dict(self)


@dataclass(kw_only=True)
class Card:
    """One face of a card as recorded in the atomic database."""

    ascii_name: str = _spec("asciiName", default="")
    attraction_lights: list[str] = _spec("attractionLights", default_factory=list)
    color_identity: list[str] = _spec("colorIdentity")
    color_indicator: list[str] = _spec("colorIndicator", default_factory=list)
    colors: list[str] = _spec()
    converted_mana_cost: float = _spec("convertedManaCost", load=float)
    defense: str = _spec(default="")
    edhrec_rank: float | None = _spec("edhrecRank", default=None, load=_optional_float)
    edhrec_saltiness: float | None = _spec(
        "edhrecSaltiness", default=None, load=_optional_float
    )
    face_converted_mana_cost: float = _spec(
        "faceConvertedManaCost", default=0.0, load=float
    )
    face_mana_value: float = _spec("faceManaValue", default=0.0, load=float)
    face_name: str = _spec("faceName", default="")
    first_printing: str = _spec("firstPrinting", default="")
    foreign_data: list[ForeignData] = _spec(
        "foreignData", default_factory=list, load=_list_of(ForeignData.from_dict)
    )
    hand: str = _spec(default="")
    has_alternative_deck_limit: bool = _spec("hasAlternativeDeckLimit", default=False)
    identifiers: Identifiers = _spec(load=Identifiers.from_dict)
    is_funny: bool = _spec("isFunny", default=False)
    is_reserved: bool = _spec("isReserved", default=False)
    keywords: list[str] = _spec(default_factory=list)
    layout: Layout = _spec(load=Layout)
    leadership_skills: LeadershipSkills = _spec(
        "leadershipSkills", default_factory=LeadershipSkills, load=LeadershipSkills.from_dict
    )
    legalities: Legalities = _spec(load=Legalities.from_dict)
    life: str = _spec(default="")
    loyalty: str = _spec(default="")
    mana_cost: str = _spec("manaCost", default="")
    mana_value: float = _spec("manaValue", load=float)
    name: str = _spec()
    power: str = _spec(default="")
    printings: list[str] = _spec(default_factory=list)
    purchase_urls: PurchaseUrls = _spec("purchaseUrls", load=PurchaseUrls.from_dict)
    related_cards: RelatedCards = _spec(
        "relatedCards", default_factory=RelatedCards, load=RelatedCards.from_dict
    )
    rulings: list[Ruling] = _spec(default_factory=list, load=_list_of(Ruling.from_dict))
    side: str = _spec(default="")
    subsets: list[str] = _spec(default_factory=list)
    subtypes: list[str] = _spec()
    supertypes: list[str] = _spec()
    text: str = _spec(default="")
    toughness: str = _spec(default="")
    type_line: str = _spec("type")
    types: list[str] = _spec()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Card:
        return _from_dict(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return _to_dict(self)


def _load_cards(data: Mapping[str, Any]) -> dict[str, list[Card]]:
    return {name: [Card.from_dict(face) for face in faces] for name, faces in data.items()}


@dataclass(kw_only=True)
class AtomicCards:
    """The whole database: every card name maps to its list of faces."""

    meta: MetaData = _spec(load=MetaData.from_dict)
    data: dict[str, list[Card]] = _spec(load=_load_cards)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AtomicCards:
        return _from_dict(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return _to_dict(self)

    @classmethod
    def loads(cls, text: str) -> AtomicCards:
        """Parse the database from JSON text."""
        return cls.from_dict(json.loads(text))

    @classmethod
    def load(cls, path: str | Path = DEFAULT_PATH) -> AtomicCards:
        """Read the database from a JSON file."""
        with open(path, encoding="utf-8") as handle:
            return cls.loads(handle.read())