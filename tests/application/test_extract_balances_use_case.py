"""Tests for the ExtractBalancesUseCase."""

from datetime import datetime
from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.extract_balances import ExtractBalancesUseCase
from src.application.use_cases.extraction_options import ExtractionOptions
from src.domain.models import BalanceCategory, RawDocument
from src.infrastructure.soup_html_parser import SoupHtmlParser


def _use_case(fixed_now, options=None, logger=None):
    return ExtractBalancesUseCase(
        SoupHtmlParser(),
        options=options,
        clock=lambda: fixed_now,
        logger=logger or MagicMock(),
    )


def _document(text: str, fixed_now: datetime) -> RawDocument:
    return RawDocument(
        text=text,
        source_url="inline",
        retrieved_at=fixed_now,
    )


def test_statement_layout_reads_summary_block(load_fixture, fixed_now):
    """The trusted summary block should yield exactly one balance."""
    balances = _use_case(fixed_now).execute(
        load_fixture("statement_detail.html")
    )

    assert len(balances) == 1
    balance = balances[0]
    assert balance.account_label == "New Brunswick - 150 Meal Plan"
    assert balance.amount == Decimal("47")
    assert balance.category == BalanceCategory.MEAL_SWIPES
    assert balance.observed_at == fixed_now


def test_summary_block_ignored_for_untrusted_labels(load_fixture, fixed_now):
    options = ExtractionOptions(trusted_summary_markers=("dining",))
    logger = MagicMock()

    balances = _use_case(fixed_now, options, logger).execute(
        load_fixture("statement_detail.html")
    )

    assert balances == []
    logger.info.assert_called_once()


def test_table_layout_reads_one_balance_per_table(load_fixture, fixed_now):
    balances = _use_case(fixed_now).execute(
        load_fixture("main_balances.html")
    )

    assert [
        (balance.account_label, balance.amount, balance.category)
        for balance in balances
    ] == [
        (
            "New Brunswick - 150 Meal Plan",
            Decimal("47"),
            BalanceCategory.MEAL_SWIPES,
        ),
        ("Dining Dollars", Decimal("1047.50"), BalanceCategory.DINING_DOLLARS),
        ("RU Express", Decimal("20.00"), BalanceCategory.STORED_VALUE),
        ("Guest Meals", Decimal("2"), BalanceCategory.MEAL_SWIPES),
    ]


def test_table_balance_uses_printed_timestamp(load_fixture, fixed_now):
    """Unparsable dates should fall back to the extraction time."""
    balances = _use_case(fixed_now).execute(
        load_fixture("main_balances.html")
    )

    assert balances[0].observed_at == datetime(2025, 11, 14, 15, 0)
    assert balances[2].observed_at == fixed_now


def test_table_balance_replaces_summary_duplicate(fixed_now):
    markup = """
    <div class="jsa_summary"><ul>
      <li>Account Name: Meal Plan</li>
      <li>Current Balance: 50</li>
    </ul></div>
    <h3>MEAL  PLAN</h3>
    <table class="jsa_transactions">
      <tr><th class="jsa_month">11/14/2025 03:00PM</th>
          <td class="jsa_desc">Current Balance</td>
          <td class="jsa_amount pos">45</td></tr>
    </table>
    """

    balances = _use_case(fixed_now).execute(_document(markup, fixed_now))

    assert len(balances) == 1
    assert balances[0].amount == Decimal("45")
    assert balances[0].account_label == "MEAL PLAN"


def test_table_label_falls_back_to_table_id(fixed_now):
    markup = """
    <table class="jsa_transactions" id="Dining Dollars">
      <tr><td class="jsa_desc">Current Balance</td>
          <td class="jsa_amount pos">$12.00</td></tr>
    </table>
    """

    balances = _use_case(fixed_now).execute(_document(markup, fixed_now))

    assert balances[0].account_label == "Dining Dollars"
    assert balances[0].category == BalanceCategory.DINING_DOLLARS


def test_tables_without_balance_rows_are_skipped(fixed_now):
    markup = """
    <h3>Dining Dollars</h3>
    <table class="jsa_transactions">
      <tr><td class="jsa_desc">Starbucks</td>
          <td class="jsa_amount neg">-5.00</td></tr>
      <tr><td class="jsa_desc">Current Balance</td>
          <td class="jsa_amount">12.00</td></tr>
    </table>
    """

    balances = _use_case(fixed_now).execute(_document(markup, fixed_now))

    assert balances == []


def test_document_without_markers_yields_nothing(load_fixture, fixed_now):
    assert _use_case(fixed_now).execute(load_fixture("no_markers.html")) == []
    assert _use_case(fixed_now).execute(_document("", fixed_now)) == []


TWO_MEAL_PLAN_TABLES = """
<h3>Meal Plan</h3>
<table class="jsa_transactions">
  <tr><td class="jsa_desc">Current Balance</td>
      <td class="jsa_amount pos">47</td></tr>
</table>
<h3>Meal Plan</h3>
<table class="jsa_transactions">
  <tr><td class="jsa_desc">Current Balance</td>
      <td class="jsa_amount pos">30</td></tr>
</table>
"""


def test_tables_sharing_a_label_keep_separate_balances(fixed_now):
    balances = _use_case(fixed_now).execute(
        _document(TWO_MEAL_PLAN_TABLES, fixed_now)
    )

    assert [(b.account_label, b.amount) for b in balances] == [
        ("Meal Plan", Decimal("47")),
        ("Meal Plan", Decimal("30")),
    ]


def test_unlabelled_tables_keep_separate_balances(fixed_now):
    markup = """
    <table class="jsa_transactions">
      <tr><td class="jsa_desc">Current Balance</td>
          <td class="jsa_amount pos">5</td></tr>
    </table>
    """

    balances = _use_case(fixed_now).execute(
        _document(markup + markup, fixed_now)
    )

    assert [balance.amount for balance in balances] == [
        Decimal("5"),
        Decimal("5"),
    ]
