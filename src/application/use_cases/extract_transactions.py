"""Use case extracting ledger entries from a statement page."""

import re
from decimal import Decimal

from src.application.ports.html_tree import HtmlNode, HtmlParserPort
from src.application.use_cases.constants import (
    ACCOUNT_NAME_LABEL,
    AMOUNT_CELL_CLASS,
    BALANCE_AFTER_CLASS,
    BALANCE_CELL_CLASSES,
    CURRENT_BALANCE_LABEL,
    DATE_CELL_CLASS,
    DEPOSIT_KEYWORD,
    DESCRIPTION_CELL_CLASS,
    HEADER_CELL_CLASS,
    LEDGER_TABLE_CLASS,
    NEGATIVE_CLASS,
    SUMMARY_CLASS,
)
from src.application.use_cases.extract_balances import table_account_label
from src.application.use_cases.extraction_options import ExtractionOptions
from src.domain.models import LedgerEntry, RawDocument
from src.domain.services.normalization import (
    collapse_whitespace,
    extract_amount,
    parse_amount,
    parse_statement_datetime,
)
from src.infrastructure.logging.logger import get_app_logger

_ACCOUNT_NAME_PREFIX_RE = re.compile(r"^\s*Account Name[:\s]*", re.IGNORECASE)


class ExtractTransactionsUseCase:
    """Extract LedgerEntry records from a raw statement document.

    The statement layout is scanned first. A page counts as a statement when
    it carries the account summary block or exactly one ledger table; pages
    with several account tables are main balance pages. When the statement
    scan yields nothing, every account table is re-scanned with the
    main-page rules, which only know about debits.
    """

    def __init__(
        self,
        parser: HtmlParserPort,
        options: ExtractionOptions | None = None,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            parser: Port turning markup into a queryable tree.
            options: Extraction flags; defaults are used when omitted.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._parser = parser
        self._options = options or ExtractionOptions()
        self._logger = logger or get_app_logger()

    def execute(self, document: RawDocument) -> list[LedgerEntry]:
        """Return ledger entries in document order.

        Args:
            document: Fetched statement page.

        Returns:
            list[LedgerEntry]: Extracted entries, possibly empty.
        """
        root = self._parser.parse(document.text)
        entries = self._from_statement(root)
        if not entries:
            entries = self._from_account_tables(root)
        self._logger.debug(
            f"Extracted {len(entries)} ledger entries "
            f"from {document.source_url}"
        )
        return entries

    def _from_statement(self, root: HtmlNode) -> list[LedgerEntry]:
        """Scan the full ledger table of the statement detail layout.

        Args:
            root: Parsed document root.

        Returns:
            list[LedgerEntry]: Debits, plus deposits when enabled.
        """
        summary = root.find(classes=(SUMMARY_CLASS,))
        tables = root.find_all("table", classes=(LEDGER_TABLE_CLASS,))
        if not tables:
            return []
        if summary is None and len(tables) > 1:
            return []
        table = tables[0]

        account_label = (
            self._summary_account_label(summary) if summary is not None else ""
        )
        if not account_label:
            account_label = table_account_label(table)

        entries = []
        for row in table.find_all("tr"):
            if row.find(classes=(HEADER_CELL_CLASS,)) is not None:
                continue
            date_cell = row.find(classes=(DATE_CELL_CLASS,))
            description_cell = row.find(
                "td",
                classes=(DESCRIPTION_CELL_CLASS,),
            )
            amount_cell = row.find("td", classes=(AMOUNT_CELL_CLASS,))
            if date_cell is None or description_cell is None:
                continue
            if amount_cell is None:
                continue
            description = description_cell.text
            if CURRENT_BALANCE_LABEL.lower() in description.lower():
                continue

            magnitude = extract_amount(amount_cell.text)
            if magnitude is None:
                continue
            amount = (
                -magnitude if amount_cell.has_class(NEGATIVE_CLASS)
                else magnitude
            )
            is_deposit = DEPOSIT_KEYWORD in description.lower()
            if amount >= 0 and not (
                is_deposit and self._options.include_deposits
            ):
                continue

            entries.append(
                _build_entry(
                    date_cell.text,
                    description,
                    amount,
                    _running_balance(amount_cell, row),
                    account_label,
                )
            )
        return entries

    def _from_account_tables(self, root: HtmlNode) -> list[LedgerEntry]:
        """Scan every account table of the main balance layout.

        Args:
            root: Parsed document root.

        Returns:
            list[LedgerEntry]: Debit rows of every account table.
        """
        entries = []
        for table in root.find_all("table", classes=(LEDGER_TABLE_CLASS,)):
            account_label = table_account_label(table)
            for row in table.find_all("tr"):
                amount_cell = row.find(
                    "td",
                    classes=(AMOUNT_CELL_CLASS, NEGATIVE_CLASS),
                )
                if amount_cell is None:
                    continue
                date_cell = row.find(classes=(DATE_CELL_CLASS,))
                description_cell = row.find(
                    "td",
                    classes=(DESCRIPTION_CELL_CLASS,),
                )
                if date_cell is None or description_cell is None:
                    continue
                magnitude = extract_amount(amount_cell.text)
                if magnitude is None:
                    continue
                entries.append(
                    _build_entry(
                        date_cell.text,
                        description_cell.text,
                        -magnitude,
                        _running_balance(amount_cell, None),
                        account_label,
                    )
                )
        return entries

    @staticmethod
    def _summary_account_label(summary: HtmlNode) -> str:
        """Return the account name listed in the summary block."""
        item = summary.find("li", text_contains=ACCOUNT_NAME_LABEL)
        if item is None:
            return ""
        return collapse_whitespace(_ACCOUNT_NAME_PREFIX_RE.sub("", item.text))


def _running_balance(
    amount_cell: HtmlNode,
    row: HtmlNode | None,
) -> Decimal:
    """Return the balance printed after a transaction, or zero."""
    holder = amount_cell.find("p", classes=(BALANCE_AFTER_CLASS,))
    node = holder.find("span") if holder is not None else None
    if node is None and row is not None:
        node = row.find("td", classes=BALANCE_CELL_CLASSES)
    return parse_amount(node.text if node is not None else None)


def _build_entry(
    date_text: str,
    description: str,
    amount: Decimal,
    running_balance: Decimal,
    account_label: str,
) -> LedgerEntry:
    """Build a ledger entry with a best-effort parsed date."""
    return LedgerEntry(
        occurred_at_raw=date_text,
        occurred_at=parse_statement_datetime(date_text),
        description=description,
        amount=amount,
        running_balance=running_balance,
        account_label=account_label,
    )


__all__ = ["ExtractTransactionsUseCase"]
