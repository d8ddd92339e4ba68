import io
from pathlib import Path

import pytest

from proxymtg.html_proxies import (
    BasicLandHtmlBuilder,
    FirefoxFriendlyHtmlDeckList,
    NormalHtmlBuilder,
    SagaHtmlBuilder,
    replace_pip_symbols,
)
from proxymtg.proxy_builder import BasicLand


def test_replace_single_pip():
    assert replace_pip_symbols("{W}") == '<img class="pip" src="../svg/{W}.svg"/> '


def test_replace_hybrid_pip_uses_bar():
    result = replace_pip_symbols("{W/U}")
    assert 'src="../svg/{W|U}.svg"' in result
    assert "/U" not in result


def test_replace_leaves_other_symbols():
    assert replace_pip_symbols("Tap {T}: add mana.") == "Tap {T}: add mana."


def test_replace_counts_each_symbol():
    result = replace_pip_symbols("{2}{R}{R}")
    assert result.count('<img class="pip"') == 3


def test_setters_chain():
    builder = NormalHtmlBuilder()
    assert builder.name("X").mana_cost("{R}").rules_text("y") is builder


def test_normal_frame_layout():
    html = NormalHtmlBuilder().name("Lightning Bolt").build()
    assert html.startswith('\n<div class="card normal">\n    <div class="title-bar">')
    assert '<span class="name">Lightning Bolt</span>' in html
    assert '<div class="art-placeholder"></div>' in html
    assert html.endswith("</div>\n        ")


def test_legendary_title_and_mana_cost():
    html = NormalHtmlBuilder().name("Henzie").mana_cost("{B}").set_legendary(True).build()
    assert '<div class="title-bar legendary">' in html
    assert '<span class="mana-cost">' + replace_pip_symbols("{B}") + "</span>" in html


def test_art_and_credits():
    html = (
        NormalHtmlBuilder()
        .art_filename(Path("../art/henzie-toolbox-torre.png"))
        .art_credits("Johannes Voss")
        .build()
    )
    assert '<img class="art" src="../art/henzie-toolbox-torre.png" />' in html
    assert '<span class="art-credits">Johannes Voss</span>' in html
    assert "art-placeholder" not in html


def test_color_indicator():
    html = NormalHtmlBuilder().type_line("Creature").color_indicator(["G"]).build()
    expected = '<span class="color-indicator">' + replace_pip_symbols("{G}") + "</span>"
    assert expected + '<span class="type-line">Creature</span>' in html


def test_reminder_text_and_lines():
    html = NormalHtmlBuilder().rules_text("Flying (It can fly.)\nHaste").build()
    assert '<span class="reminder-text">It can fly.</span>' in html
    assert html.count('<p class="rules-text">') == 2


def test_dense_text_box_threshold():
    dense = NormalHtmlBuilder().rules_text("a" * 241).build()
    roomy = NormalHtmlBuilder().rules_text("a" * 240).build()
    assert '<div class="text-box dense">' in dense
    assert '<div class="text-box">' in roomy


def test_flavor_text_follows_rule():
    html = NormalHtmlBuilder().rules_text("Draw.").flavor_text("Words.").build()
    assert '<hr /><p class="flavor-text">Words.</p></div>' in html


def test_corner_bubble():
    html = NormalHtmlBuilder().corner_bubble("3/3").build()
    assert '<div class="corner-bubble">3/3</div>' in html
    assert "corner-bubble" not in NormalHtmlBuilder().build()


def test_saga_steps_and_reminder():
    html = (
        SagaHtmlBuilder()
        .name("Kiora Bests the Sea God")
        .include_reminder(True)
        .step_text([1, 2], "First.")
        .step_text([3], "Last.")
        .build()
    )
    assert html.startswith('\n<div class="card saga">')
    assert '<span class="hex">\u2160\u2161</span> First.' in html
    assert "Sacrifice after \u2162</p>" in html
    assert html.count("<hr />") == 2


def test_saga_without_reminder_or_steps():
    html = SagaHtmlBuilder().flavor_text("Legend.").build()
    assert '<div class="text-box"><p class="flavor-text">Legend.</p></div>' in html
    assert "reminder-text" not in html


def test_basic_land_build_returns_empty():
    builder = BasicLandHtmlBuilder()
    builder.art(BasicLand.MOUNTAIN, "m.png", "Artist")
    assert builder.build(BasicLand.MOUNTAIN) == ""


def test_basic_land_art_cycles():
    builder = BasicLandHtmlBuilder()
    builder.art(BasicLand.FOREST, "a.png", "A").art(BasicLand.FOREST, "b.png", "B")
    names = [builder._next_bucket(BasicLand.FOREST).art_filename for _ in range(4)]
    assert names == ["a.png", "b.png", "", "a.png"]


def test_basic_land_rejects_unknown_land():
    with pytest.raises(ValueError):
        BasicLandHtmlBuilder().art("Not a land", "x.png", "A")


def test_deck_pages_group_nine_cards():
    deck = FirefoxFriendlyHtmlDeckList()
    for card in "abcdefghi":
        deck.add_card(card)
    out = io.StringIO()
    deck.build(out)
    text = out.getvalue()
    assert text.count("<page>") == 1
    assert '<div class="card-row">a\nb\nc</div>' in text
    assert '<link rel="stylesheet" href="../css/page.css" />' in text
    assert text.endswith("</page>\n</body></html>")


def test_deck_drops_unfinished_page():
    deck = FirefoxFriendlyHtmlDeckList()
    for card in "abcd":
        deck.add_card(card)
    out = io.StringIO()
    deck.build(out)
    assert "<page>" not in out.getvalue()
    assert "card-row" not in out.getvalue()