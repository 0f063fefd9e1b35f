#!/usr/bin/env python3
"""
Transaction Line Parser

Turns ``amountOwed,amountPaid`` lines into ``Transaction`` values.

Two forms are provided:
- ``parse_transaction`` is the per-line form used by the engine; bad lines
  yield None and are skipped.
- ``validate_transaction_lines`` is the batch pre-check used at the upload and
  CLI boundaries; the first bad line rejects the whole batch.
"""

from collections.abc import Iterable

from ..core.currency import parse_amount
from ..core.models import Transaction

SEPARATOR = ","
BYTE_ORDER_MARK = "\ufeff"


class TransactionFormatError(ValueError):
    """Raised when a batch contains a malformed transaction line"""

    def __init__(self, line_number: int, line: str):
        self.line_number = line_number
        self.line = line
        super().__init__(
            f"Line {line_number}: invalid transaction format {line!r}. Expected 'amountOwed,amountPaid'"
        )


def parse_transaction(line: str, separator: str = SEPARATOR) -> Transaction | None:
    """
    Parse one transaction line.

    Args:
        line: Raw line like "2.12,3.00"
        separator: Field separator (exactly one must be present)

    Returns:
        Transaction, or None when the separator count is wrong or either
        amount is not a non-negative decimal

    Examples:
        parse_transaction("2.12,3.00") -> Transaction(Decimal("2.12"), Decimal("3.00"))
        parse_transaction("2.12") -> None
        parse_transaction("1,2,3") -> None
    """
    parts = line.split(separator)
    if len(parts) != 2:
        return None

    amount_owed = parse_amount(parts[0])
    amount_paid = parse_amount(parts[1])
    if amount_owed is None or amount_paid is None:
        return None

    return Transaction(amount_owed=amount_owed, amount_paid=amount_paid)


def split_lines(text: str) -> list[str]:
    """
    Split uploaded text into lines, tolerating CRLF and a trailing newline.

    A leading byte order mark (as written by Windows editors) is dropped so
    the first transaction still parses.
    """
    return text.removeprefix(BYTE_ORDER_MARK).splitlines()


def validate_transaction_lines(lines: Iterable[str], separator: str = SEPARATOR) -> list[str]:
    """
    Check every line of a batch before any change is calculated.

    Blank lines are dropped. Line numbers in errors are 1-based and count
    blank lines, so they match what the user sees in their file.

    Returns:
        The non-blank lines, stripped

    Raises:
        TransactionFormatError: On the first malformed line
    """
    cleaned: list[str] = []
    for line_number, line in enumerate(lines, start=1):
        stripped = line.strip()
        if not stripped:
            continue
        if parse_transaction(stripped, separator) is None:
            raise TransactionFormatError(line_number, stripped)
        cleaned.append(stripped)
    return cleaned
