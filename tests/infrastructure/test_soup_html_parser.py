"""Tests for the BeautifulSoup HTML tree adapter."""

from src.infrastructure.soup_html_parser import SoupHtmlParser

MARKUP = """
<div id="wrap">
  <h3>Dining Dollars</h3>
  <table class="jsa_transactions main" id="acct-2">
    <tr><td class="jsa_amount neg">-1</td><td class="jsa_desc">Busch
      Dining   Hall</td></tr>
    <tr><td class="jsa_amount pos">47</td><td class="jsa_desc">Current
      Balance</td></tr>
  </table>
</div>
"""


def test_find_all_matches_tag_and_every_class() -> None:
    root = SoupHtmlParser().parse(MARKUP)

    cells = root.find_all("td", classes=("jsa_amount", "neg"))

    assert [cell.text for cell in cells] == ["-1"]
    assert cells[0].has_class("neg")
    assert not cells[0].has_class("pos")


def test_find_all_without_tag_matches_any_element() -> None:
    root = SoupHtmlParser().parse(MARKUP)

    tables = root.find_all(classes=("jsa_transactions",))

    assert len(tables) == 1
    assert tables[0].tag == "table"


def test_text_is_whitespace_collapsed() -> None:
    root = SoupHtmlParser().parse(MARKUP)

    description = root.find("td", classes=("jsa_desc",))

    assert description.text == "Busch Dining Hall"


def test_text_contains_is_case_insensitive() -> None:
    root = SoupHtmlParser().parse(MARKUP)

    row = root.find("tr", text_contains="current balance")

    assert row is not None
    assert row.find("td", classes=("pos",)).text == "47"
    assert root.find("tr", text_contains="overdraft") is None


def test_attribute_and_previous_element() -> None:
    root = SoupHtmlParser().parse(MARKUP)
    table = root.find("table")

    assert table.attribute("id") == "acct-2"
    assert table.attribute("class") == "jsa_transactions main"
    assert table.attribute("missing") is None
    assert table.previous_element().text == "Dining Dollars"
    assert root.find("h3").previous_element() is None


def test_parse_empty_markup_yields_empty_tree() -> None:
    root = SoupHtmlParser().parse("")

    assert root.find_all() == []
    assert root.find("table") is None
