"""A multi-currency wallet for the simulated trader."""

import sys

from merkeldecks.exchange.csvparser import tokenise
from merkeldecks.exchange.orderbookentry import OrderBookType


class Wallet:
    """Balances held per currency."""

    def __init__(self, out=None):
        self._currencies = {}
        self._out = out

    def insert_currency(self, currency, amount):
        """Add amount of currency; negative amounts raise ValueError."""
        if amount < 0:
            raise ValueError("Amount cannot be negative")
        self._currencies[currency] = self._currencies.get(currency, 0.0) + amount

    def remove_currency(self, currency, amount):
        """Take amount of currency out; return False if there is not enough."""
        if amount < 0:
            raise ValueError("Amount cannot be negative")
        if not self.contains_currency(currency, amount):
            return False
        self._currencies[currency] -= amount
        out = sys.stdout if self._out is None else self._out
        print(f"Removing {amount:g} {currency} from the wallet", file=out)
        return True

    def contains_currency(self, currency, amount):
        """Return True if the wallet holds at least amount of currency."""
        return currency in self._currencies and self._currencies[currency] >= amount

    def balance(self, currency):
        """Return the balance held of currency, 0 if none."""
        return self._currencies.get(currency, 0.0)

    def can_fulfill_order(self, order):
        """Return True if the wallet can pay for an ask or a bid."""
        currencies = tokenise(order.product, "/")
        if order.order_type is OrderBookType.ASK:
            return self.contains_currency(currencies[0], order.amount)
        if order.order_type is OrderBookType.BID:
            return self.contains_currency(currencies[1], order.price * order.amount)
        return False

    def process_sale(self, sale):
        """Apply a sale made by the wallet's owner to the balances."""
        currencies = tokenise(sale.product, "/")
        if sale.order_type is OrderBookType.ASKSALE:
            self.remove_currency(currencies[0], sale.amount)
            self.insert_currency(currencies[1], sale.price * sale.amount)
        elif sale.order_type is OrderBookType.BIDSALE:
            self.remove_currency(currencies[1], sale.price * sale.amount)
            self.insert_currency(currencies[0], sale.amount)

    def __str__(self):
        if not self._currencies:
            return "The wallet is empty\nMoths just flew out!\n"
        return "".join(
            f"{currency} : {amount:f}\n"
            for currency, amount in sorted(self._currencies.items())
        )