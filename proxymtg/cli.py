"""Command line entry point: prints a sample deck list or renders sample proxies."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence, TextIO

from proxymtg.cards import DEFAULT_PATH, AtomicCards
from proxymtg.decklist import Artoid, DeckEDH, Landoid
from proxymtg.html_proxies import FirefoxFriendlyHtmlDeckList, NormalHtmlBuilder, SagaHtmlBuilder
from proxymtg.proxy_builder import BasicLand

HENZIE = 'Henzie "Toolbox" Torre'


def example_deck() -> DeckEDH:
    """A small commander deck used as an example of the deck list format."""
    return DeckEDH(
        commanders=[
            Artoid(
                name=HENZIE,
                art_file=Path("./art/henzie-toolbox-torre.png"),
                art_credit="Johannes Voss",
                flavor_text="",
            )
        ],
        the_99ish=[Artoid(name="Lightning Bolt")],
        basics=[Landoid(name=BasicLand.MOUNTAIN, number=1)],
    )


def render_sample_deck(atomic: AtomicCards, out: TextIO) -> None:
    """Render a sample sheet of proxies as HTML into ``out``."""
    faces = atomic.data.get(HENZIE)
    if not faces:
        raise KeyError(f"{HENZIE} is not in the card database")
    raw = faces[0]

    deck = FirefoxFriendlyHtmlDeckList()

    henzie = (
        NormalHtmlBuilder()
        .name(raw.name)
        .mana_cost(raw.mana_cost)
        .set_legendary("Legendary" in raw.supertypes)
        .type_line(raw.type_line)
        .rules_text(raw.text)
        .art_credits("Johannes Voss")
        .art_filename(Path("../art/henzie-toolbox-torre.png"))
        .corner_bubble(f"{raw.power}/{raw.toughness}")
    )
    deck.add_card(henzie.build())

    kiora = (
        SagaHtmlBuilder()
        .name("Kiora Bests the Sea God")
        .mana_cost("{5}{U}{U}")
        .art_filename(Path("../art/kiora-bests-the-sea-god.png"))
        .art_credits("Victor Adame Minguez")
        .type_line("Enchantment &mdash; Saga")
        .include_reminder(True)
        .step_text([1], "Create an 8/8 blue Kraken creature\n        token with hexproof.")
        .step_text(
            [2],
            "Tap all nonland permanents target opponent controls. "
            "They don't untap during their controller's next untap step.",
        )
        .step_text([3], "Gain control of target permanent an opponent controls. Untap it.")
    )
    for _ in range(2, 10):
        deck.add_card(kiora.build())

    deck.build(out)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="proxymtg", description="Print a sample deck list or render sample proxies."
    )
    parser.add_argument(
        "--render",
        metavar="OUTPUT",
        help="render sample proxies as HTML into OUTPUT instead of printing the deck list",
    )
    parser.add_argument(
        "--cards",
        default=str(DEFAULT_PATH),
        help="path of the atomic card database (default: %(default)s)",
    )
    args = parser.parse_args(argv)

    if args.render is None:
        print(example_deck().to_json())
        return 0

    try:
        atomic = AtomicCards.load(args.cards)
        with open(args.render, "w", encoding="utf-8") as out:
            render_sample_deck(atomic, out)
    except (OSError, ValueError, KeyError) as exc:
        print(f"proxymtg: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())