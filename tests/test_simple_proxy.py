from proxymtg.cards import AtomicCards, Card, Layout
from proxymtg.simple_proxy import (
    DiscordTemplate,
    ProxyTemplate,
    SimpleTemplate,
    TemplateSet,
    english_flavor_text,
)


def _card_data(**overrides):
    data = {
        "colorIdentity": ["R"],
        "colors": ["R"],
        "convertedManaCost": 1.0,
        "identifiers": {},
        "layout": "normal",
        "legalities": {},
        "manaValue": 1.0,
        "name": "Lightning Bolt",
        "manaCost": "{R}",
        "purchaseUrls": {},
        "subtypes": [],
        "supertypes": [],
        "text": "Lightning Bolt deals 3 damage to any target.",
        "type": "Instant",
        "types": ["Instant"],
    }
    data.update(overrides)
    return data


def _card(**overrides):
    return Card.from_dict(_card_data(**overrides))


def _atomic(*faces_by_name):
    return AtomicCards.from_dict(
        {
            "meta": {"date": "2023-01-01", "version": "5"},
            "data": dict(faces_by_name),
        }
    )


class _SagaTemplate(ProxyTemplate):
    def applies_to(self, layout):
        return layout is Layout.SAGA

    def generate(self, cards):
        return "saga:" + cards[0].name


def test_english_flavor_text_found():
    card = _card(
        foreignData=[
            {"language": "German", "flavorText": "Blitz"},
            {"language": "English", "flavorText": "Zap"},
        ]
    )
    assert english_flavor_text(card) == "Zap"


def test_english_flavor_text_missing():
    assert english_flavor_text(_card()) is None


def test_simple_template_generate():
    assert SimpleTemplate().generate([_card()]) == (
        "----\nLightning Bolt   {R}\nInstant\n"
        "Lightning Bolt deals 3 damage to any target.\n----"
    )


def test_simple_template_empty_faces():
    assert SimpleTemplate().generate([]) is None


def test_discord_number_symbols():
    assert DiscordTemplate.replace_symbols("{2}{W}{U}") == ":two::sunny::droplet:"
    assert DiscordTemplate.replace_symbols("{10}") == "**[10]**"


def test_discord_colors_and_tap():
    assert DiscordTemplate.replace_symbols("{G}{T}") == ":deciduous_tree: :arrow_heading_down:"
    assert DiscordTemplate.replace_symbols("{B}{R}") == ":skull::fire:"


def test_discord_generate_quotes_every_line():
    card = _card(text="First line.\nSecond line.")
    assert DiscordTemplate().generate([card]) == (
        "> Lightning Bolt :fire:\n> Instant\n> First line.\n> Second line."
    )


def test_proxy_unknown_name():
    atomic = _atomic(("Lightning Bolt", [_card_data()]))
    assert SimpleTemplate().proxy("Shock", atomic) is None


def test_proxy_rejects_other_layouts():
    atomic = _atomic(("Saga Card", [_card_data(name="Saga Card", layout="saga")]))
    assert SimpleTemplate().proxy("Saga Card", atomic) is None


def test_proxy_renders_supported_card():
    atomic = _atomic(("Lightning Bolt", [_card_data()]))
    assert SimpleTemplate().proxy("Lightning Bolt", atomic) == SimpleTemplate().generate(
        atomic.data["Lightning Bolt"]
    )


def test_template_set_picks_by_layout():
    templates = TemplateSet([SimpleTemplate(), _SagaTemplate()])
    assert templates.applies_to(Layout.SAGA)
    assert templates.applies_to(Layout.NORMAL)
    assert not templates.applies_to(Layout.FLIP)
    saga = _card(name="Kiora", layout="saga")
    assert templates.generate([saga]) == "saga:Kiora"
    assert templates.generate([_card()]).startswith("----\nLightning Bolt")


def test_template_set_without_match():
    assert TemplateSet([SimpleTemplate()]).generate([_card(layout="flip")]) is None