# proxymtg

Tools for making proxies of Magic: The Gathering cards. The package covers four areas:

- `proxymtg.cards` reads the MTGJSON `AtomicCards.json` card database into dataclasses. The main ones are `AtomicCards`, `Card` and `Layout`.
- `proxymtg.decklist` describes decklists with custom art and basic lands, and converts them to and from JSON. It provides `DeckEDH`, `Constructed`, `Artoid` and `Landoid`.
- `proxymtg.html_proxies` renders cards to HTML with chained builders and lays the cards out on printable pages.
- `proxymtg.simple_proxy` renders short text proxies: a plain dashed box, or a Discord-formatted quote.

The builder interfaces and the basic land catalogue are in `proxymtg.proxy_builder`. The catalogue consists of `BasicLand` and `CoreLand`.

## Installation

```
pip install .
```

Add the `test` extra to get pytest:

```
pip install .[test]
```

## Command line

```
proxymtg
```

This prints an example Commander decklist as pretty JSON.

```
proxymtg --render cards.html --cards AtomicCards.json
```

This renders a fixed sample sheet of proxies as HTML into `cards.html`. The sheet has one page: a card for Henzie "Toolbox" Torre and eight copies of a saga. The Henzie card reads its text from the card database. The database is found through `--cards`, which defaults to `AtomicCards.json` in the current directory. If the database cannot be read, is malformed, or has no entry for that card, the command prints `proxymtg: <reason>` to stderr and exits with status 1.

## Library use

### Card database

Load the card database and make a Discord-style text proxy:

```python
from proxymtg.cards import AtomicCards
from proxymtg.simple_proxy import DiscordTemplate

atomic = AtomicCards.load("AtomicCards.json")
print(DiscordTemplate().proxy("Lightning Bolt", atomic))
```

You can also build the database in other ways:

- `AtomicCards.loads(text)` parses JSON text.
- `AtomicCards.from_dict(data)` takes an already-decoded mapping.

Every record class has `from_dict` and `to_dict`. These use the camel-case keys of the JSON file. A required key that is missing raises `ValueError`, and so does an unknown layout.

### Text proxies

`proxy` returns `None` in two cases: the card is not in the database, or the template does not handle the layout of every face.

`SimpleTemplate` and `DiscordTemplate` both handle only the `normal` layout.

`TemplateSet([...])` combines several templates. For each card it uses the first template that applies to the card's first face.

`DiscordTemplate.replace_symbols` turns mana symbols into emoji codes. `{W}` becomes `:sunny:`, `{T}` becomes `:arrow_heading_down:`, and `{3}` becomes `:three:`. Numbers of two or more digits become bold text, for example `**[10]**`.

`english_flavor_text(card)` returns the flavour text of the card's English foreign-data entry. It returns `None` if there is no such entry.

### HTML proxies

Build HTML cards and put them on printable pages:

```python
from proxymtg.html_proxies import NormalHtmlBuilder, SagaHtmlBuilder, FirefoxFriendlyHtmlDeckList

deck = FirefoxFriendlyHtmlDeckList()

card = (
    NormalHtmlBuilder()
    .name("Lightning Bolt")
    .mana_cost("{R}")
    .type_line("Instant")
    .rules_text("Lightning Bolt deals 3 damage to any target.")
)
for _ in range(9):
    deck.add_card(card.build())

saga = (
    SagaHtmlBuilder()
    .name("Kiora Bests the Sea God")
    .mana_cost("{5}{U}{U}")
    .type_line("Enchantment &mdash; Saga")
    .include_reminder(True)
    .step_text([1], "Create an 8/8 blue Kraken creature token with hexproof.")
)
deck.add_card(saga.build())

with open("cards.html", "w", encoding="utf-8") as out:
    deck.build(out)
```

How `NormalHtmlBuilder` lays out its text box:

- Reminder text in parentheses is wrapped in a `reminder-text` span.
- Each line of rules text becomes its own paragraph.
- If the rules and flavour text together exceed 240 bytes, the box is marked `dense`.

How `SagaHtmlBuilder` lays out its chapters:

- Chapters are numbered with Roman numeral characters.
- With `include_reminder(True)`, the box opens with the saga reminder text. That text names the highest chapter.

`FirefoxFriendlyHtmlDeckList` lays cards out three to a row and three rows to a page. `build(out)` writes the whole document to a text stream. Only complete pages are written, so cards on an unfinished row or page are left out. In the example above, the saga is the tenth card and does not appear.

Symbols such as `{W}` or `{2/U}` in mana costs and rules text become `<img class="pip">` tags. Each tag points to an SVG under `../svg/`. Use `replace_pip_symbols` to apply the same substitution to your own text. The generated page expects its stylesheets under `../css/`.

No HTML escaping is done. Card text is inserted as given.

### Decklists

Decklists convert to and from JSON:

```python
from proxymtg.cli import example_deck
from proxymtg.decklist import DeckEDH

deck = example_deck()
text = deck.to_json()
same = DeckEDH.from_dict(deck.to_dict())
```

Basic lands are written by name, for example `"Mountain"`, `"Snow-Covered Island"` or `"Wastes"`. Other names are handled as follows:

- `BasicLand.from_name` parses a name and raises `ValueError` for anything else.
- `BasicLand.all()` lists every basic land.

A missing art file is written as an empty string.

### Test builder

`DefaultBuilder(factory)` accepts every builder call, ignores it, and returns `factory()` from `build()`. It is useful as a stand-in.

## What the package does not do

- There is no command that renders your own decklist to proxies. Decklists can be read and written as JSON, but the `--render` command only produces the fixed sample sheet.
- Basic lands are not rendered. `BasicLandHtmlBuilder` records art for each basic land and cycles through it on each `build(land)`, but `build` returns an empty string.
- Only normal cards and sagas have HTML builders. Split, flip, adventure, double-faced and other layouts have none. The text templates handle the `normal` layout only.