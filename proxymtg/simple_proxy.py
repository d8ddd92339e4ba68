"""Plain-text proxy templates."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Any, Iterable

from proxymtg.cards import AtomicCards, Card, Layout

_NUMBER_SYMBOL = re.compile(r"\{(\d+)\}")

_COLOR_EMOJI = (
    ("{W}", ":sunny:"),
    ("{U}", ":droplet:"),
    ("{B}", ":skull:"),
    ("{R}", ":fire:"),
    ("{G}", ":deciduous_tree: "),
    ("{T}", ":arrow_heading_down:"),
)

_DIGIT_EMOJI = {
    "0": ":zero:",
    "1": ":one:",
    "2": ":two:",
    "3": ":three:",
    "4": ":four:",
    "5": ":five:",
    "6": ":six:",
    "7": ":seven:",
    "8": ":eight:",
    "9": ":nine:",
}


def english_flavor_text(card: Card) -> str | None:
    """The flavour text of the card's English foreign-data entry, if any."""
    return next(
        (foreign.flavor_text for foreign in card.foreign_data if foreign.language == "English"),
        None,
    )


class ProxyTemplate(ABC):
    """Renders proxies for the card layouts it supports."""

    @abstractmethod
    def applies_to(self, layout: Layout) -> bool:
        """Whether this template can render cards of this layout."""

    @abstractmethod
    def generate(self, cards: list[Card]) -> Any:
        """Render the faces of one card, or return None."""

    def proxy(self, name: str, atomic: AtomicCards) -> Any:
        """Render the named card, or None if unknown or unsupported."""
        faces = atomic.data.get(name)
        if faces is None:
            return None
        if not all(self.applies_to(face.layout) for face in faces):
            return None
        return self.generate(faces)


class TemplateSet(ProxyTemplate):
    """Several templates, tried in order."""

    def __init__(self, templates: Iterable[ProxyTemplate]) -> None:
        self.templates = list(templates)

    def applies_to(self, layout: Layout) -> bool:
        return any(template.applies_to(layout) for template in self.templates)

    def generate(self, cards: list[Card]) -> Any:
        layout = cards[0].layout
        for template in self.templates:
            if template.applies_to(layout):
                return template.generate(cards)
        return None


class SimpleTemplate(ProxyTemplate):
    """A plain text box between dashed lines."""

    def applies_to(self, layout: Layout) -> bool:
        return layout is Layout.NORMAL

    def generate(self, cards: list[Card]) -> str | None:
        if not cards:
            return None
        card = cards[0]
        return f"----\n{card.name}   {card.mana_cost}\n{card.type_line}\n{card.text}\n----"


class DiscordTemplate(ProxyTemplate):
    """A quoted block with mana symbols drawn as emoji."""

    def applies_to(self, layout: Layout) -> bool:
        return layout is Layout.NORMAL

    def generate(self, cards: list[Card]) -> str | None:
        if not cards:
            return None
        card = cards[0]
        mana_cost = self.replace_symbols(card.mana_cost)
        text = self.replace_symbols(card.text).replace("\n", "\n> ")
        return f"> {card.name} {mana_cost}\n> {card.type_line}\n> {text}"

    @staticmethod
    def replace_symbols(text: str) -> str:
        """Swap mana and tap symbols for emoji codes."""
        for symbol, emoji in _COLOR_EMOJI:
            text = text.replace(symbol, emoji)

        def number(match: re.Match[str]) -> str:
            digits = match.group(1)
            return _DIGIT_EMOJI.get(digits, f"**[{digits}]**")

        return _NUMBER_SYMBOL.sub(number, text)