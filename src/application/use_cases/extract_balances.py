"""Use case extracting account balances from a statement page.

Two page layouts are recognized:

* the statement detail page, whose account summary block lists
  "Account Name" and "Current Balance" items;
* the main balance page, with one ledger table per account preceded by a
  heading holding the account name and a "Current Balance" row.

Both strategies run on every document. The extractor never raises; a page
without the expected markers yields an empty list.
"""

import re
from collections.abc import Callable
from datetime import datetime

from src.application.ports.html_tree import HtmlNode, HtmlParserPort
from src.application.use_cases.constants import (
    ACCOUNT_NAME_LABEL,
    AMOUNT_CELL_CLASS,
    CURRENT_BALANCE_LABEL,
    DATE_CELL_CLASS,
    DESCRIPTION_CELL_CLASS,
    LEDGER_TABLE_CLASS,
    POSITIVE_CLASS,
    SUMMARY_CLASS,
)
from src.application.use_cases.extraction_options import ExtractionOptions
from src.domain.models import AccountBalance, RawDocument
from src.domain.policies import (
    classify_account_label,
    is_trusted_summary_label,
)
from src.domain.services.normalization import (
    collapse_whitespace,
    normalize_label,
    parse_amount,
    parse_statement_datetime_or,
)
from src.infrastructure.logging.logger import get_app_logger

_ACCOUNT_NAME_PREFIX_RE = re.compile(r"^\s*Account Name[:\s]*", re.IGNORECASE)
_CURRENT_BALANCE_PREFIX_RE = re.compile(
    r"^.*?Current Balance[:\s]*",
    re.IGNORECASE,
)


class ExtractBalancesUseCase:
    """Extract AccountBalance records from a raw statement document."""

    def __init__(
        self,
        parser: HtmlParserPort,
        options: ExtractionOptions | None = None,
        clock: Callable[[], datetime] = datetime.now,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            parser: Port turning markup into a queryable tree.
            options: Extraction flags; defaults are used when omitted.
            clock: Source of the fallback observation time.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._parser = parser
        self._options = options or ExtractionOptions()
        self._clock = clock
        self._logger = logger or get_app_logger()

    def execute(self, document: RawDocument) -> list[AccountBalance]:
        """Return the balances found in the document.

        Args:
            document: Fetched statement page.

        Returns:
            list[AccountBalance]: Balances in document order.
        """
        root = self._parser.parse(document.text)
        now = self._clock()

        balances = self._from_summary(root, now)
        # Only summary balances are replaced; every table keeps its own entry.
        summary_index = {
            normalize_label(balance.account_label): index
            for index, balance in enumerate(balances)
        }
        for balance in self._from_tables(root, now):
            index = summary_index.pop(
                normalize_label(balance.account_label),
                None,
            )
            if index is None:
                balances.append(balance)
            else:
                balances[index] = balance

        if not balances:
            self._logger.info(
                f"No balances found in document from {document.source_url}"
            )
        else:
            self._logger.debug(
                f"Extracted {len(balances)} balances "
                f"from {document.source_url}"
            )
        return balances

    def _from_summary(
        self,
        root: HtmlNode,
        now: datetime,
    ) -> list[AccountBalance]:
        """Read the account summary block of the statement layout.

        Args:
            root: Parsed document root.
            now: Observation time used for the summary balance.

        Returns:
            list[AccountBalance]: Zero or one balance.
        """
        summary = root.find(classes=(SUMMARY_CLASS,))
        if summary is None:
            return []

        name_item = summary.find("li", text_contains=ACCOUNT_NAME_LABEL)
        balance_item = summary.find("li", text_contains=CURRENT_BALANCE_LABEL)
        if name_item is None or balance_item is None:
            return []

        account_label = collapse_whitespace(
            _ACCOUNT_NAME_PREFIX_RE.sub("", name_item.text)
        )
        if not is_trusted_summary_label(
            account_label,
            self._options.trusted_summary_markers,
        ):
            self._logger.debug(
                f"Ignoring summary balance for untrusted account "
                f"'{account_label}'"
            )
            return []

        amount = parse_amount(
            _CURRENT_BALANCE_PREFIX_RE.sub("", balance_item.text)
        )
        return [
            AccountBalance(
                account_label=account_label,
                amount=amount,
                category=classify_account_label(account_label),
                observed_at=now,
            )
        ]

    def _from_tables(
        self,
        root: HtmlNode,
        now: datetime,
    ) -> list[AccountBalance]:
        """Read the "Current Balance" row of every account table.

        Args:
            root: Parsed document root.
            now: Fallback observation time.

        Returns:
            list[AccountBalance]: One balance per table with a balance row.
        """
        balances = []
        for table in root.find_all("table", classes=(LEDGER_TABLE_CLASS,)):
            account_label = table_account_label(table)
            balance_row = next(
                (
                    row
                    for row in table.find_all("tr")
                    if _is_current_balance_row(row)
                ),
                None,
            )
            if balance_row is None:
                continue
            amount_cell = balance_row.find(
                "td",
                classes=(AMOUNT_CELL_CLASS, POSITIVE_CLASS),
            )
            if amount_cell is None:
                continue
            date_cell = balance_row.find(classes=(DATE_CELL_CLASS,))
            observed_at = parse_statement_datetime_or(
                date_cell.text if date_cell is not None else None,
                now,
            )
            balances.append(
                AccountBalance(
                    account_label=account_label,
                    amount=parse_amount(amount_cell.text),
                    category=classify_account_label(account_label),
                    observed_at=observed_at,
                )
            )
        return balances


def table_account_label(table: HtmlNode) -> str:
    """Return the account label of a ledger table.

    The label is the text of the element right before the table, falling
    back to the table id.
    """
    heading = table.previous_element()
    label = heading.text if heading is not None else ""
    return label or collapse_whitespace(table.attribute("id"))


def _is_current_balance_row(row: HtmlNode) -> bool:
    """Return True when the row's description is a balance summary."""
    description = row.find("td", classes=(DESCRIPTION_CELL_CLASS,))
    if description is None:
        return False
    return CURRENT_BALANCE_LABEL.lower() in description.text.lower()


__all__ = ["ExtractBalancesUseCase", "table_account_label"]
