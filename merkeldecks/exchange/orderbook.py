"""An in-memory order book with simple ask/bid matching."""

import sys
from dataclasses import replace

from merkeldecks.exchange.csvparser import read_file
from merkeldecks.exchange.orderbookentry import OrderBookEntry, OrderBookType

SIM_USER = "simuser"


class OrderBook:
    """A collection of order book entries."""

    def __init__(self, entries=()):
        self._orders = list(entries)

    @classmethod
    def from_file(cls, filename, out=None):
        """Load an order book from a CSV file, reporting to out."""
        out = sys.stdout if out is None else out
        book = cls(read_file(filename, out))
        if book._orders:
            print("Orderbook loaded successfully.", file=out)
        else:
            print("Failed to load orderbook.", file=out)
        return book

    def __len__(self):
        return len(self._orders)

    def __iter__(self):
        return iter(self._orders)

    def known_products(self):
        """Return the distinct products in the book, sorted."""
        return sorted({order.product for order in self._orders})

    def get_orders(self, order_type, product="", timestamp=""):
        """Return orders of a type, filtered by product and timestamp when given."""
        return [
            order
            for order in self._orders
            if order.order_type is order_type
            and (not product or order.product == product)
            and (not timestamp or order.timestamp == timestamp)
        ]

    def earliest_time(self):
        """Return the earliest timestamp in the book."""
        if not self._orders:
            raise ValueError("order book is empty")
        return min(order.timestamp for order in self._orders)

    def next_time(self, timestamp):
        """Return the first timestamp after the given one, wrapping to the earliest."""
        for order in self._orders:
            if order.timestamp > timestamp:
                return order.timestamp
        return self.earliest_time()

    def insert_order(self, order):
        """Add an order, keeping the book sorted by timestamp."""
        self._orders.append(order)
        self._orders.sort(key=lambda entry: entry.timestamp)

    def match_asks_to_bids(self, product, timestamp):
        """Match asks against bids for a product and time, returning the sales.

        The book itself is left unchanged.
        """
        asks = sorted(
            (replace(o) for o in self.get_orders(OrderBookType.ASK, product, timestamp)),
            key=lambda entry: entry.price,
        )
        bids = sorted(
            (replace(o) for o in self.get_orders(OrderBookType.BID, product, timestamp)),
            key=lambda entry: entry.price,
            reverse=True,
        )
        sales = []

        for ask in asks:
            if ask.amount == 0:
                continue
            for bid in bids:
                if not (bid.price >= ask.price and bid.amount != 0):
                    # Remaining bids are cheaper (or used up): nothing more matches.
                    break

                sale = OrderBookEntry(
                    timestamp, product, OrderBookType.ASKSALE, ask.price, 0.0
                )
                if bid.username == SIM_USER:
                    sale.order_type = OrderBookType.BIDSALE
                    sale.username = SIM_USER
                if ask.username == SIM_USER:
                    sale.order_type = OrderBookType.ASKSALE
                    sale.username = SIM_USER

                if bid.amount == ask.amount:
                    sale.amount = ask.amount
                    sales.append(sale)
                    bid.amount = 0
                    break
                if bid.amount > ask.amount:
                    sale.amount = ask.amount
                    sales.append(sale)
                    bid.amount -= ask.amount
                    break
                sale.amount = bid.amount
                sales.append(sale)
                ask.amount -= bid.amount
                bid.amount = 0

        return sales


def average_price(orders):
    """Return the mean price of the orders, or 0 when there are none."""
    orders = list(orders)
    if not orders:
        return 0
    return sum(order.price for order in orders) / len(orders)


def low_price(orders):
    """Return the lowest price of the orders, or 0 when there are none."""
    lowest = 0
    for order in orders:
        if lowest == 0 or lowest > order.price:
            lowest = order.price
    return lowest


def high_price(orders):
    """Return the highest price of the orders, or 0 when there are none."""
    highest = 0
    for order in orders:
        if highest == 0 or highest < order.price:
            highest = order.price
    return highest


def price_spread(orders):
    """Return the difference between the highest and lowest prices."""
    orders = list(orders)
    return high_price(orders) - low_price(orders)