import io
import json

import pytest

from proxymtg.cards import AtomicCards
from proxymtg.cli import example_deck, main, render_sample_deck
from proxymtg.decklist import DeckEDH
from proxymtg.proxy_builder import BasicLand

HENZIE = 'Henzie "Toolbox" Torre'


def _database(name=HENZIE):
    return {
        "meta": {"date": "2023-01-01", "version": "5"},
        "data": {
            name: [
                {
                    "colorIdentity": ["B", "G", "R"],
                    "colors": ["B", "G", "R"],
                    "convertedManaCost": 4.0,
                    "identifiers": {},
                    "layout": "normal",
                    "legalities": {},
                    "manaValue": 4.0,
                    "name": name,
                    "manaCost": "{1}{B}{R}{G}",
                    "power": "3",
                    "toughness": "3",
                    "purchaseUrls": {},
                    "subtypes": ["Human"],
                    "supertypes": ["Legendary"],
                    "text": "Blitz",
                    "type": "Legendary Creature",
                    "types": ["Creature"],
                }
            ]
        },
    }


def test_example_deck_contents():
    deck = example_deck()
    assert [card.name for card in deck.commanders] == [HENZIE]
    assert deck.commanders[0].art_credit == "Johannes Voss"
    assert [card.name for card in deck.the_99ish] == ["Lightning Bolt"]
    assert deck.basics[0].name is BasicLand.MOUNTAIN
    assert deck.basics[0].number == 1


def test_main_prints_deck_json(capsys):
    assert main([]) == 0
    printed = capsys.readouterr().out
    assert DeckEDH.from_dict(json.loads(printed)) == example_deck()


def test_render_sample_deck():
    out = io.StringIO()
    render_sample_deck(AtomicCards.from_dict(_database()), out)
    html = out.getvalue()
    assert html.count("<page>") == 1
    assert html.count('class="card normal"') == 1
    assert html.count('class="card saga"') == 8
    assert '<div class="title-bar legendary">' in html
    assert '<div class="corner-bubble">3/3</div>' in html


def test_render_requires_henzie():
    with pytest.raises(KeyError):
        render_sample_deck(AtomicCards.from_dict(_database("Shock")), io.StringIO())


def test_main_renders_to_file(tmp_path):
    cards = tmp_path / "AtomicCards.json"
    cards.write_text(json.dumps(_database()), encoding="utf-8")
    output = tmp_path / "card_test.html"
    assert main(["--cards", str(cards), "--render", str(output)]) == 0
    assert output.read_text(encoding="utf-8").endswith("</body></html>")


def test_main_reports_missing_database(tmp_path, capsys):
    code = main(["--cards", str(tmp_path / "absent.json"), "--render", str(tmp_path / "o.html")])
    assert code == 1
    assert capsys.readouterr().err.startswith("proxymtg:")