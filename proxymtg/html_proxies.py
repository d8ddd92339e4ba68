"""HTML rendering of card proxies and printable deck pages."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from typing import Any, TextIO

from proxymtg.proxy_builder import (
    BasicLand,
    BasicLandProxyBuilder,
    DeckBuilder,
    ProxyBuilder,
    ProxyBuilderNormal,
    ProxyBuilderSaga,
)

_MANA_SYMBOL = re.compile(r"\{[WUBRGCP0-9/]+\}")
_REMINDER = re.compile(r"\((.*)\)")
_ROMAN_NUMERAL_ONE = 0x2160
_DENSE_TEXT_LIMIT = 240

_SAGA_REMINDER = (
    '<p class="reminder-text">As this Saga enters and after your draw step, '
    "add a lore counter.\n"
    "                Sacrifice after {}</p>"
)

_PAGE_HEAD = """
        <html><head>
        <link rel="stylesheet" href="../css/page.css" />
        <link rel="stylesheet" href="../css/card.css" />
        <link rel="stylesheet" href="../css/normal-card.css" />
        <link rel="stylesheet" href="../css/saga-card.css" /
        <link rel="stylesheet" href="../css/flip-card.css" />
        <link rel="stylesheet" href="../css/token-card.css" />
        </head><body>
        """

_PAGE_TAIL = "</body></html>"


def replace_pip_symbols(mana_notation: str) -> str:
    """Replace every mana symbol such as ``{W}`` with an image of its pip."""

    def pip(match: re.Match[str]) -> str:
        symbol = match.group(0).replace("/", "|")
        return f'<img class="pip" src="../svg/{symbol}.svg"/> '

    return _MANA_SYMBOL.sub(pip, mana_notation)


def _lines(text: str) -> list[str]:
    """Split text into lines, dropping one trailing empty line and any CR."""
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def _path_text(art_filename: Any) -> str:
    return os.fspath(art_filename) if art_filename else ""


@dataclass
class _Bucket:
    """The parts every card frame shares."""

    name: str = ""
    type_line: str = ""
    mana_cost: str = ""
    art_filename: str = ""
    art_credits: str = ""
    color_indicator: list[str] = field(default_factory=list)
    color_identity: list[str] = field(default_factory=list)
    legendary: bool = False

    def image_tag(self) -> str:
        if self.art_filename:
            return f'<img class="art" src="{self.art_filename}" />'
        return '<div class="art-placeholder"></div>'

    def art_credits_tag(self) -> str:
        if not self.art_credits:
            return ""
        return f'<span class="art-credits">{self.art_credits}</span>'

    def title_bar_tag(self) -> str:
        res = f'<span class="name">{self.name}</span>'
        if self.mana_cost:
            res += f'<span class="mana-cost">{replace_pip_symbols(self.mana_cost)}</span>'
        legendary = " legendary" if self.legendary else ""
        return f'<div class="title-bar{legendary}">{res}</div>'

    def type_bar_tag(self) -> str:
        pips = "".join(f"{{{symbol}}}" for symbol in self.color_indicator)
        indicator = (
            f'<span class="color-indicator">{replace_pip_symbols(pips)}</span>' if pips else ""
        )
        return (
            f'<div class="type-bar">{indicator}'
            f'<span class="type-line">{self.type_line}</span></div>'
        )


class _HtmlCardBuilder(ProxyBuilder):
    """Holds the shared card parts and their setters."""

    def __init__(self) -> None:
        self._bucket = _Bucket()

    def build(self) -> str:
        raise NotImplementedError

    def name(self, name: str) -> _HtmlCardBuilder:
        self._bucket.name = name
        return self

    def type_line(self, type_line: str) -> _HtmlCardBuilder:
        self._bucket.type_line = type_line
        return self

    def color_indicator(self, colors: list[str]) -> _HtmlCardBuilder:
        self._bucket.color_indicator = list(colors)
        return self

    def color_identity(self, colors: list[str]) -> _HtmlCardBuilder:
        self._bucket.color_identity = list(colors)
        return self

    def mana_cost(self, mana_cost: str) -> _HtmlCardBuilder:
        self._bucket.mana_cost = mana_cost
        return self

    def art_filename(self, art_filename: Any) -> _HtmlCardBuilder:
        self._bucket.art_filename = _path_text(art_filename)
        return self

    def art_credits(self, artist: str) -> _HtmlCardBuilder:
        self._bucket.art_credits = artist
        return self

    def set_legendary(self, is_legendary: bool) -> _HtmlCardBuilder:
        self._bucket.legendary = bool(is_legendary)
        return self


class NormalHtmlBuilder(_HtmlCardBuilder, ProxyBuilderNormal):
    """Renders an ordinary card as an HTML fragment."""

    def __init__(self) -> None:
        super().__init__()
        self._rules_text = ""
        self._flavor_text = ""
        self._corner_bubble = ""

    def name(self, name: str) -> NormalHtmlBuilder:
        return super().name(name)  # type: ignore[return-value]

    def type_line(self, type_line: str) -> NormalHtmlBuilder:
        return super().type_line(type_line)  # type: ignore[return-value]

    def color_indicator(self, colors: list[str]) -> NormalHtmlBuilder:
        return super().color_indicator(colors)  # type: ignore[return-value]

    def color_identity(self, colors: list[str]) -> NormalHtmlBuilder:
        return super().color_identity(colors)  # type: ignore[return-value]

    def mana_cost(self, mana_cost: str) -> NormalHtmlBuilder:
        return super().mana_cost(mana_cost)  # type: ignore[return-value]

    def art_filename(self, art_filename: Any) -> NormalHtmlBuilder:
        return super().art_filename(art_filename)  # type: ignore[return-value]

    def art_credits(self, artist: str) -> NormalHtmlBuilder:
        return super().art_credits(artist)  # type: ignore[return-value]

    def set_legendary(self, is_legendary: bool) -> NormalHtmlBuilder:
        return super().set_legendary(is_legendary)  # type: ignore[return-value]

    def rules_text(self, rules_text: str) -> NormalHtmlBuilder:
        self._rules_text = rules_text
        return self

    def flavor_text(self, flavor_text: str) -> NormalHtmlBuilder:
        self._flavor_text = flavor_text
        return self

    def corner_bubble(self, corner_bubble: str) -> NormalHtmlBuilder:
        self._corner_bubble = corner_bubble
        return self

    def _corner_bubble_tag(self) -> str:
        if not self._corner_bubble:
            return ""
        return f'<div class="corner-bubble">{self._corner_bubble}</div>'

    def _text_box_tag(self) -> str:
        size = len(self._rules_text.encode("utf-8")) + len(self._flavor_text.encode("utf-8"))
        res = '<div class="text-box dense">' if size > _DENSE_TEXT_LIMIT else '<div class="text-box">'

        if self._rules_text:
            rules = _REMINDER.sub(
                lambda m: f'<span class="reminder-text">{m.group(1)}</span>', self._rules_text
            )
            res += "".join(
                f'<p class="rules-text">{replace_pip_symbols(line)}</p>' for line in _lines(rules)
            )

        if self._flavor_text:
            res += f'<hr /><p class="flavor-text">{self._flavor_text}</p>'

        return res + "</div>"

    def build(self) -> str:
        bucket = self._bucket
        return (
            "\n"
            '<div class="card normal">\n'
            f"    {bucket.title_bar_tag()}\n"
            f"    {bucket.image_tag()}\n"
            f"    {bucket.type_bar_tag()}\n"
            f"    {self._text_box_tag()}\n"
            f"    {self._corner_bubble_tag()}\n"
            f"    {bucket.art_credits_tag()}\n"
            "</div>\n"
            "        "
        )


class SagaHtmlBuilder(_HtmlCardBuilder, ProxyBuilderSaga):
    """Renders a saga card as an HTML fragment."""

    def __init__(self) -> None:
        super().__init__()
        self._steps: list[tuple[str, list[int]]] = []
        self._include_reminder = False
        self._flavor_text = ""

    def name(self, name: str) -> SagaHtmlBuilder:
        return super().name(name)  # type: ignore[return-value]

    def type_line(self, type_line: str) -> SagaHtmlBuilder:
        return super().type_line(type_line)  # type: ignore[return-value]

    def color_indicator(self, colors: list[str]) -> SagaHtmlBuilder:
        return super().color_indicator(colors)  # type: ignore[return-value]

    def color_identity(self, colors: list[str]) -> SagaHtmlBuilder:
        return super().color_identity(colors)  # type: ignore[return-value]

    def mana_cost(self, mana_cost: str) -> SagaHtmlBuilder:
        return super().mana_cost(mana_cost)  # type: ignore[return-value]

    def art_filename(self, art_filename: Any) -> SagaHtmlBuilder:
        return super().art_filename(art_filename)  # type: ignore[return-value]

    def art_credits(self, artist: str) -> SagaHtmlBuilder:
        return super().art_credits(artist)  # type: ignore[return-value]

    def set_legendary(self, is_legendary: bool) -> SagaHtmlBuilder:
        return super().set_legendary(is_legendary)  # type: ignore[return-value]

    def step_text(self, steps: list[int], rules_text: str) -> SagaHtmlBuilder:
        self._steps.append((rules_text, list(steps)))
        return self

    def include_reminder(self, remind: bool) -> SagaHtmlBuilder:
        self._include_reminder = bool(remind)
        return self

    def flavor_text(self, text: str) -> SagaHtmlBuilder:
        self._flavor_text = text
        return self

    @staticmethod
    def _lore_char(step: int) -> str:
        return chr(_ROMAN_NUMERAL_ONE - 1 + step)

    def _max_lore(self) -> int:
        return max((step for _, lore in self._steps for step in lore), default=0)

    def _text_box_tag(self) -> str:
        parts = []
        if self._include_reminder:
            parts.append(_SAGA_REMINDER.format(self._lore_char(self._max_lore())))
        for step_text, lore in self._steps:
            numerals = "".join(self._lore_char(step) for step in lore)
            parts.append(f'<p class="step"><span class="hex">{numerals}</span> {step_text}</p>')
        if self._flavor_text:
            parts.append(f'<p class="flavor-text">{self._flavor_text}</p>')
        return f'<div class="text-box">{"<hr />".join(parts)}</div>'

    def build(self) -> str:
        bucket = self._bucket
        return (
            "\n"
            '<div class="card saga">\n'
            f"    {bucket.title_bar_tag()}\n"
            '    <div class="text-and-art">\n'
            f"        {self._text_box_tag()}\n"
            f"        {bucket.image_tag()}\n"
            "    </div>\n"
            f"    {bucket.type_bar_tag()}\n"
            f"    {bucket.art_credits_tag()}\n"
            "</div>\n"
            "            "
        )


class BasicLandHtmlBuilder(BasicLandProxyBuilder):
    """Basic lands in HTML, cycling through the art registered for each land."""

    def __init__(self) -> None:
        self._cycle: dict[BasicLand, int] = {land: 0 for land in BasicLand.all()}
        self._arts: dict[BasicLand, list[tuple[str, str]]] = {
            land: [] for land in BasicLand.all()
        }

    def art(self, land: BasicLand, art_filename: Any, artist: str) -> BasicLandHtmlBuilder:
        if land not in self._arts:
            raise ValueError(f"{land!r} is not a basic land")
        self._arts[land].append((_path_text(art_filename), artist))
        return self

    def _next_bucket(self, land: BasicLand) -> _Bucket:
        bucket = _Bucket()
        arts = self._arts[land]
        position = self._cycle[land]
        if position < len(arts):
            bucket.art_filename, bucket.art_credits = arts[position]
            self._cycle[land] = position + 1
        else:
            self._cycle[land] = 0

        bucket.name = str(land)
        core = land.core
        if core is None:
            bucket.type_line = "Basic Land"
        elif land.is_snow:
            bucket.type_line = f"Basic Snow Land &mdash; {core}"
        else:
            bucket.type_line = f"Basic Land &mdash; {core}"
        return bucket

    def build(self, land: BasicLand) -> str:
        self._next_bucket(land)
        return ""


class FirefoxFriendlyHtmlDeckList(DeckBuilder):
    """Lays cards out three to a row and three rows to a page."""

    def __init__(self) -> None:
        self._pages: list[str] = []
        self._page: list[str] = []
        self._row: list[str] = []

    def add_card(self, card: str) -> FirefoxFriendlyHtmlDeckList:
        self._row.append(card)
        if len(self._row) >= 3:
            self._page.append(f'<div class="card-row">{"\n".join(self._row)}</div>'
                              if False else '<div class="card-row">' + "\n".join(self._row) + "</div>")
            self._row.clear()
        if len(self._page) >= 3:
            self._pages.append("<page>" + "\n".join(self._page) + "</page>\n")
            self._page.clear()
        return self

    def build(self, out: TextIO) -> None:
        """Write the finished pages as an HTML document to ``out``."""
        out.write(_PAGE_HEAD)
        for page in self._pages:
            out.write(page)
        out.write(_PAGE_TAIL)