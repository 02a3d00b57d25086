"""Order book entries and their types."""

from dataclasses import dataclass
from enum import Enum


class OrderBookType(Enum):
    """Kind of an order book entry."""

    BID = "bid"
    ASK = "ask"
    ASKSALE = "asksale"
    BIDSALE = "bidsale"
    UNKNOWN = "unknown"


def string_to_order_book_type(text):
    """Map 'ask' or 'bid' to its type; anything else is UNKNOWN."""
    if text == "ask":
        return OrderBookType.ASK
    if text == "bid":
        return OrderBookType.BID
    return OrderBookType.UNKNOWN


def _fmt(value):
    return f"{value:g}"


@dataclass
class OrderBookEntry:
    """One order in the book.

    For an ask, amount of the first currency is offered at price.
    For a bid, amount of the first currency is wanted, paying price each.
    """

    timestamp: str = ""
    product: str = ""
    order_type: OrderBookType = OrderBookType.UNKNOWN
    price: float = 0.0
    amount: float = 0.0
    username: str = "dataset"

    def describe_price(self):
        """Return a one-line description of the price."""
        return f"The price is {_fmt(self.price)}"

    def describe(self):
        """Return a multi-line description of the entry."""
        kind = "bid" if self.order_type is OrderBookType.BID else "ask"
        return "\n".join(
            [
                "Order Book Entry",
                f"Timestamp: {self.timestamp}",
                f"Product: {self.product}",
                f"Order Type: {kind}",
                f"Price: {_fmt(self.price)}",
                f"Amount: {_fmt(self.amount)}",
            ]
        )