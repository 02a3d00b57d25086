"""Interactive menu for the exchange simulator."""

import argparse
import re
import sys

from merkeldecks.exchange.csvparser import CSVError, strings_to_entry, tokenise
from merkeldecks.exchange.orderbook import SIM_USER, OrderBook
from merkeldecks.exchange.orderbookentry import OrderBookType
from merkeldecks.exchange.textutils import clear_console, print_break
from merkeldecks.exchange.wallet import Wallet

_LEADING_INT = re.compile(r"\s*[+-]?\d+")
_FORMAT_HINT = (
    "All inputs should be in the format product, price, amount e.g. ETH/BTC, 200, 0.5"
)
EXIT_OPTION = 9


class MerkelMain:
    """The simulator: a menu loop over an order book and a wallet."""

    def __init__(self, order_book, wallet=None, input_func=None, out=None):
        self.order_book = order_book
        self._out = sys.stdout if out is None else out
        if wallet is None:
            wallet = Wallet(self._out)
            wallet.insert_currency("BTC", 10)
            wallet.insert_currency("ETH", 5)
        self.wallet = wallet
        self._input = input if input_func is None else input_func
        self.current_time = order_book.earliest_time() if len(order_book) else ""

    def _say(self, *parts):
        print(*parts, file=self._out)

    def _read_line(self):
        return self._input()

    def run(self):
        """Show the menu and handle choices until the user exits."""
        keep_going = True
        while keep_going:
            self._print_menu()
            option = self._get_user_option()
            clear_console()
            keep_going = self.process_user_option(option)

    def _print_menu(self):
        self._say("1: Print help")
        self._say("2: Print exchange stats")
        self._say("3: Make an offer")
        self._say("4: Make a bid")
        self._say("5: Print wallet")
        self._say("6: Continue")
        self._say("9. Exit")
        print_break(self._out)
        self._say(f"Current time: {self.current_time}")

    def _get_user_option(self):
        while True:
            print_break(self._out)
            self._say("Type in 1-6 or 9 to exit")
            try:
                text = self._read_line()
            except EOFError:
                return EXIT_OPTION
            match = _LEADING_INT.match(text)
            if match is not None:
                return int(match.group())
            self._say("Invalid input")

    def process_user_option(self, option):
        """Carry out a menu choice; return False when the user chose to exit."""
        print_break(self._out)
        self._say(f"You chose: {option}")
        print_break(self._out)

        actions = {
            1: self._print_help,
            2: self.print_market_stats,
            3: self.enter_ask,
            4: self.enter_bid,
            5: self.print_wallet,
            6: self.goto_next_timeframe,
        }
        if option == EXIT_OPTION:
            self._say("Exiting")
            print_break(self._out)
            return False
        action = actions.get(option)
        if action is None:
            self._say("Invalid choice. Choose 1-6 or 9 to exit.")
        else:
            action()
        print_break(self._out)
        return True

    def _print_help(self):
        self._say(
            "Help - your aim is to make money. "
            "Analyse the market and make bids and offers."
        )

    def print_market_stats(self):
        """Report the size of the book and its numbers of bids and asks."""
        self._say(f"orderbook contains: {len(self.order_book)} entries")
        self._say()
        bids = self.order_book.get_orders(OrderBookType.BID)
        asks = self.order_book.get_orders(OrderBookType.ASK)
        self._say(f"bids: {len(bids)}")
        self._say(f"asks: {len(asks)}")

    def _enter_order(self, order_type, heading, placed_label):
        self._say(heading)
        self._say(
            "Please enter the product in the format product, price, amount "
            "e.g. ETH/BTC, 200, 0.5"
        )
        text = self._read_line()
        print_break(self._out)

        tokens = tokenise(text, ",")
        if len(tokens) != 3:
            self._say(f"Invalid input: {text}")
            return
        try:
            order = strings_to_entry(
                self.current_time, tokens[0], order_type, tokens[1], tokens[2]
            )
        except CSVError as exc:
            self._say("Invalid input: ")
            self._say(str(exc))
            self._say("")
            self._say(_FORMAT_HINT)
            self._say("Please choose an option to try again")
            return
        order.username = SIM_USER
        if not self.wallet.can_fulfill_order(order):
            self._say("Wallet has insufficient funds.")
            return
        self.order_book.insert_order(order)
        self._say(f"{placed_label} placed: {text}")

    def enter_ask(self):
        """Read an offer from the user and place it if the wallet allows."""
        self._enter_order(OrderBookType.ASK, "Make an offer - enter the amount", "Ask")

    def enter_bid(self):
        """Read a bid from the user and place it if the wallet allows."""
        self._enter_order(OrderBookType.BID, "Make a bid - enter the amount", "Bid")

    def print_wallet(self):
        """Show the wallet's contents."""
        self._say("Your Wallet\n")
        self._say(str(self.wallet))

    def goto_next_timeframe(self):
        """Match orders for every product at the current time, then move on."""
        self._say("Going to next time frame. ")
        for product in self.order_book.known_products():
            self._say(f"Matching {product}")
            sales = self.order_book.match_asks_to_bids(product, self.current_time)
            self._say(f"Sales: {len(sales)}")
            for sale in sales:
                self._say(f"Sale price: {sale.price:g} amount {sale.amount:g}")
                if sale.username == SIM_USER:
                    self.wallet.process_sale(sale)
        self.current_time = self.order_book.next_time(self.current_time)


def main(argv=None):
    """Load an order book from a CSV file and start the simulator."""
    parser = argparse.ArgumentParser(description="Simulated currency exchange.")
    parser.add_argument("csvfile", help="order book data in CSV form")
    args = parser.parse_args(argv)

    book = OrderBook.from_file(args.csvfile)
    if not len(book):
        return 1
    MerkelMain(book).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())