"""Reading order book entries from CSV text."""

import re
import sys

from merkeldecks.exchange.orderbookentry import (
    OrderBookEntry,
    OrderBookType,
    string_to_order_book_type,
)
from merkeldecks.exchange.textutils import delete_line, is_number, print_break

_TIMESTAMP = re.compile(r"\d{4}/\d{2}/\d{2} \d{2}:\d{2}:\d{2}.\d{0,6}")
_PRODUCT = re.compile(r"\w+/\w+")
_NUMBER_PREFIX = re.compile(
    r"\s*[+-]?(?:\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


class CSVError(ValueError):
    """Raised when a line or value cannot become an order book entry."""


def _leading_float(text):
    """Parse the number at the start of text, ignoring anything after it."""
    match = _NUMBER_PREFIX.match(text)
    if match is None:
        raise ValueError(f"no number in {text!r}")
    return float(match.group().strip())


def tokenise(line, separator):
    """Split line on separator.

    Leading separators are skipped; splitting stops at the first empty
    token, so trailing or doubled separators end the list.
    """
    start = next((i for i, ch in enumerate(line) if ch != separator), None)
    if start is None:
        return []
    tokens = []
    while True:
        end = line.find(separator, start)
        if start == len(line) or start == end:
            break
        if end == -1:
            tokens.append(line[start:])
            break
        tokens.append(line[start:end])
        start = end + 1
    return tokens


def tokens_to_entry(tokens):
    """Build an entry from the five fields of a CSV line."""
    if not tokens:
        raise CSVError("Empty Line")
    if len(tokens) != 5:
        raise CSVError("Line is not in the correct format")
    timestamp, product, kind, price, amount = tokens
    if kind not in ("bid", "ask"):
        raise CSVError("Incorrect order book type")
    if not is_number(price) or not is_number(amount):
        raise CSVError("Price or amount is not a number")
    try:
        numbers = float(price), float(amount)
    except ValueError as exc:
        raise CSVError("Price or amount is not a number") from exc
    return OrderBookEntry(
        timestamp, product, string_to_order_book_type(kind), numbers[0], numbers[1]
    )


def strings_to_entry(timestamp, product, order_type, price, amount):
    """Validate user-supplied fields and build an entry from them."""
    if _TIMESTAMP.fullmatch(timestamp) is None:
        raise CSVError("Incorrect timestamp")
    if _PRODUCT.fullmatch(product) is None:
        raise CSVError("Incorrect product")
    if order_type not in (OrderBookType.BID, OrderBookType.ASK):
        raise CSVError("Incorrect order book type")
    try:
        num_price = _leading_float(price)
        num_amount = _leading_float(amount)
    except ValueError as exc:
        raise CSVError("Price or amount is not a number") from exc
    if num_amount <= 0:
        raise CSVError("Amount is less than or equal to zero")
    if num_price <= 0:
        raise CSVError("Price is less than or equal to zero")
    return OrderBookEntry(timestamp, product, order_type, num_price, num_amount)


def read_file(filename, out=None):
    """Read every valid entry from a CSV file, reporting progress to out.

    Lines that fail to parse are reported and skipped. A file that cannot
    be opened yields an empty list.
    """
    out = sys.stdout if out is None else out
    entries = []

    print("Opening file", file=out)
    print_break(out)
    try:
        handle = open(filename, encoding="utf-8", errors="replace")
    except OSError:
        print("Unable to open file. Check the file path and try again.", file=out)
        return entries

    errors = []
    line_count = 0
    with handle:
        print("Reading file and checking for errors, please wait...", file=out)
        print(file=out)
        print("Lines read: 1", file=out)
        for line_count, line in enumerate(handle, start=1):
            try:
                entries.append(tokens_to_entry(tokenise(line.rstrip("\n"), ",")))
            except CSVError as exc:
                errors.append(f"Line: {line_count} - {exc}")
            if (line_count + 1) % 1000 == 0:
                delete_line(out)
                print(f"Lines read: {line_count + 1}", file=out)

        delete_line(out)
        print(f"Lines read: {line_count}", file=out)

        if errors:
            print(f"Errors found: {len(errors)}", file=out)
            print("Error report:", file=out)
            for error in errors:
                print(error, file=out)
        else:
            print("No errors found.", file=out)
        print(file=out)

        print("Reading complete", file=out)
        print_break(out)
        print("Output Report", file=out)
        print(
            f"Total lines read and converted: {line_count - len(errors)} of {line_count}",
            file=out,
        )
        print_break(out)
        print("Closing file", file=out)
    print(file=out)
    return entries