"""Tests for the ExtractTransactionsUseCase."""

from datetime import datetime
from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.extract_transactions import (
    ExtractTransactionsUseCase,
)
from src.application.use_cases.extraction_options import ExtractionOptions
from src.domain.models import RawDocument
from src.infrastructure.soup_html_parser import SoupHtmlParser


def _use_case(options=None) -> ExtractTransactionsUseCase:
    return ExtractTransactionsUseCase(
        SoupHtmlParser(),
        options=options,
        logger=MagicMock(),
    )


def _document(text: str) -> RawDocument:
    return RawDocument(
        text=text,
        source_url="inline",
        retrieved_at=datetime(2025, 11, 20, 8, 0),
    )


def test_statement_layout_keeps_debits_and_deposits(load_fixture):
    """Unrelated credits and rows without amounts should be dropped."""
    entries = _use_case().execute(load_fixture("statement_detail.html"))

    assert [
        (entry.description, entry.amount, entry.running_balance)
        for entry in entries
    ] == [
        ("Busch Dining Hall", Decimal("-1"), Decimal("47")),
        ("Livingston Dining Commons", Decimal("-1"), Decimal("48")),
        ("Meal Plan Deposit", Decimal("150"), Decimal("150")),
    ]
    assert {entry.account_label for entry in entries} == {
        "New Brunswick - 150 Meal Plan"
    }


def test_statement_layout_parses_dates(load_fixture):
    entries = _use_case().execute(load_fixture("statement_detail.html"))

    first = entries[0]
    assert first.occurred_at_raw == "11/14/2025 02:52PM"
    assert first.occurred_at == datetime(2025, 11, 14, 14, 52)


def test_deposits_can_be_excluded(load_fixture):
    options = ExtractionOptions(include_deposits=False)

    entries = _use_case(options).execute(
        load_fixture("statement_detail.html")
    )

    assert [entry.description for entry in entries] == [
        "Busch Dining Hall",
        "Livingston Dining Commons",
    ]
    assert all(entry.amount < 0 for entry in entries)


def test_statement_layout_skips_current_balance_rows():
    markup = """
    <div class="jsa_summary"><ul>
      <li>Account Name: Meal Plan</li>
    </ul></div>
    <table class="jsa_transactions">
      <tr><th class="jsa_month">11/14/2025</th>
          <td class="jsa_desc">Current Balance</td>
          <td class="jsa_amount neg">-3</td></tr>
      <tr><th class="jsa_month">11/14/2025</th>
          <td class="jsa_desc">Busch Dining Hall</td>
          <td class="jsa_amount neg">1</td>
          <td class="jsa_balance bal">46</td></tr>
    </table>
    """

    entries = _use_case().execute(_document(markup))

    assert len(entries) == 1
    assert entries[0].amount == Decimal("-1")
    assert entries[0].running_balance == Decimal("46")
    assert entries[0].account_label == "Meal Plan"


def test_main_layout_fallback_reads_negative_rows(load_fixture):
    entries = _use_case().execute(load_fixture("main_balances.html"))

    assert [
        (entry.account_label, entry.description, entry.amount)
        for entry in entries
    ] == [
        ("New Brunswick - 150 Meal Plan", "Busch Dining Hall", Decimal("-1")),
        ("Dining Dollars", "Starbucks - College Ave", Decimal("-6.25")),
    ]
    assert entries[0].running_balance == Decimal("47")
    assert entries[1].running_balance == Decimal("0")


def test_negative_marker_with_unsigned_value_is_a_debit():
    markup = """
    <h3>Meal Plan</h3>
    <table class="jsa_transactions">
      <tr><th class="jsa_month">11/14/2025 02:52PM</th>
          <td class="jsa_desc">Busch Dining Hall</td>
          <td class="jsa_amount neg">1</td></tr>
      <tr><th class="jsa_month">11/14/2025 02:55PM</th>
          <td class="jsa_desc">Refund</td>
          <td class="jsa_amount pos">10</td></tr>
    </table>
    """

    entries = _use_case().execute(_document(markup))

    assert len(entries) == 1
    assert entries[0].amount == Decimal("-1")


def test_unparsable_dates_are_kept_raw():
    markup = """
    <h3>Meal Plan</h3>
    <table class="jsa_transactions">
      <tr><th class="jsa_month">yesterday</th>
          <td class="jsa_desc">Busch Dining Hall</td>
          <td class="jsa_amount neg">-1</td></tr>
    </table>
    """

    entries = _use_case().execute(_document(markup))

    assert entries[0].occurred_at_raw == "yesterday"
    assert entries[0].occurred_at is None


def test_document_without_markers_yields_nothing(load_fixture):
    assert _use_case().execute(load_fixture("no_markers.html")) == []


def test_single_ledger_table_without_summary_keeps_deposits():
    markup = """
    <h3>New Brunswick - 150 Meal Plan</h3>
    <table class="jsa_transactions">
      <tr><th class="jsa_table-headers">Date</th>
          <th class="jsa_table-headers">Location</th></tr>
      <tr><th class="jsa_month">11/14/2025 02:52PM</th>
          <td class="jsa_desc">Busch Dining Hall</td>
          <td class="jsa_amount neg">-1</td></tr>
      <tr><th class="jsa_month">11/01/2025 12:00AM</th>
          <td class="jsa_desc">Meal Plan Deposit</td>
          <td class="jsa_amount pos">150</td></tr>
    </table>
    """

    entries = _use_case().execute(_document(markup))

    assert [(entry.description, entry.amount) for entry in entries] == [
        ("Busch Dining Hall", Decimal("-1")),
        ("Meal Plan Deposit", Decimal("150")),
    ]
    assert entries[0].account_label == "New Brunswick - 150 Meal Plan"


def test_several_tables_without_summary_skip_deposits():
    markup = """
    <h3>Meal Plan</h3>
    <table class="jsa_transactions">
      <tr><th class="jsa_month">11/01/2025</th>
          <td class="jsa_desc">Meal Plan Deposit</td>
          <td class="jsa_amount pos">150</td></tr>
    </table>
    <h3>Dining Dollars</h3>
    <table class="jsa_transactions">
      <tr><th class="jsa_month">11/02/2025</th>
          <td class="jsa_desc">Starbucks</td>
          <td class="jsa_amount neg">-4.50</td></tr>
    </table>
    """

    entries = _use_case().execute(_document(markup))

    assert [(entry.account_label, entry.amount) for entry in entries] == [
        ("Dining Dollars", Decimal("-4.50")),
    ]
