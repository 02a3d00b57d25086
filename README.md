# merkeldecks

The package holds two small, self-contained models:

- **`merkeldecks.exchange`** is a simulated currency exchange. It loads an
  order book from a CSV file and matches asks to bids for each product at
  the current timestamp. It also keeps a wallet for a simulated user.
- **`merkeldecks.decks`** is the track-mixing logic of a DJ application. It
  covers track metadata, a deck player model, a playlist, a track map with
  per-track settings, and a mixer. The mixer starts and stops tracks
  against a running clock.

## Installation

```
pip install .
```

The package needs Python 3.10 or later and has no runtime dependencies.
To run the tests, install the `test` extra and run `pytest`.

## The exchange simulator

Run the simulator with an order book CSV file:

```
merkelrex path/to/orderbook.csv
```

Each line of the CSV holds five fields:

```
2020/03/17 17:01:24.884492,ETH/BTC,bid,0.02187308,7.44564869
```

The fields are, in order:

1. the timestamp
2. the product
3. the order type, `bid` or `ask`
4. the price
5. the amount

While the file loads, each line that does not parse is reported with its
line number and the reason, and then skipped. If no entries load, the
command prints "Failed to load orderbook." and exits with status 1.

The menu offers these options:

1. Print help
2. Print exchange stats, which shows the number of entries, bids and asks
3. Make an offer (an ask), entered as `product, price, amount`, for example `ETH/BTC, 200, 0.5`
4. Make a bid, entered in the same format
5. Print wallet
6. Continue: match orders for every product at the current time, settle the simulated user's sales in the wallet, and move to the next timestamp
9. Exit

Orders that you place are stamped with the current time and belong to the
user `simuser`. An order is placed only if the wallet can cover it:

- an ask needs the amount in the first currency;
- a bid needs price × amount in the second currency.

The wallet starts with 10 BTC and 5 ETH. The menu stops when input runs
out.

### As a library

```python
from merkeldecks.exchange.orderbook import OrderBook, average_price, price_spread
from merkeldecks.exchange.orderbookentry import OrderBookType
from merkeldecks.exchange.wallet import Wallet

book = OrderBook.from_file("orderbook.csv")
now = book.earliest_time()
bids = book.get_orders(OrderBookType.BID, "ETH/BTC", now)
print(average_price(bids), price_spread(bids))

sales = book.match_asks_to_bids("ETH/BTC", now)
later = book.next_time(now)

wallet = Wallet()
wallet.insert_currency("BTC", 10)
print(wallet.balance("BTC"))
print(wallet)
```

The main pieces are:

- **`csvparser`**
  - `tokenise(line, separator)` splits a line into fields.
  - `tokens_to_entry(tokens)` and `strings_to_entry(...)` build an
    `OrderBookEntry` and raise `CSVError`, a subclass of `ValueError`,
    on invalid input.
  - `read_file(filename, out)` reads a whole file and writes a progress
    and error report to `out`, which defaults to standard output.
- **`orderbook`**
  - `OrderBook` holds the entries. `match_asks_to_bids` works on copies
    and leaves the book unchanged.
  - `average_price`, `low_price`, `high_price` and `price_spread` each
    return 0 for an empty list.
- **`wallet`**
  - `Wallet` holds per-currency balances.
  - `insert_currency` and `remove_currency` raise `ValueError` for a
    negative amount. `remove_currency` returns `False` when the balance is
    too low.
  - `can_fulfill_order` and `process_sale` apply the rules described above.
- **`merkelmain`**
  - `MerkelMain(order_book, wallet, input_func, out)` is the menu loop.
    Pass `input_func` and `out` to script it.
  - `main(argv)` is the `merkelrex` command.
- **`textutils`** provides console helpers: `print_break`, `is_number`,
  `is_date`, `to_rounded_string`, `trim`, `clear_console` and
  `delete_line`.

## The deck model

```python
from merkeldecks.decks.mixer import TrackMixer
from merkeldecks.decks.player import DJAudioPlayer
from merkeldecks.decks.playlist import Playlist

mixer = TrackMixer([DJAudioPlayer() for _ in range(8)])
playlist = Playlist([], mixer.active_tracks, DJAudioPlayer(), DJAudioPlayer())

playlist.add_files(["drums.wav", "bass.wav"])
playlist.to_main_track(0)
playlist.to_main_track(1)

mixer.track_map.select_row(2)          # row 0 is the time-scale header
mixer.settings.set_start_time(4.0)

mixer.toggle_play()
for _ in range(1000):
    mixer.tick()                        # 0.01 s per tick by default
```

The main pieces are:

- **`trackinfo`**
  - `TrackInfo.from_path` takes the title from the last part of the path.
    For WAV files it reads the duration with the `wave` module. Any other
    file gets a duration of 0.
  - `TrackInfo.header()` is the placeholder for the time-scale row.
- **`player`**
  - `DJAudioPlayer` models a deck's transport: `load`, `play`, `stop`,
    gain (0 to 1), speed (0 to 100) and position. Values outside these
    ranges are ignored.
  - `advance(seconds)` moves the play head at the current speed and stops
    at the end of the track.
- **`tracksettings`**: `TrackSettings` binds volume, speed and start-time
  controls to the selected track. The controls are snapped to 0.01 steps
  and clamped to their ranges.
- **`trackmap`**
  - `TrackMap` handles row selection, removal of the selected track (the
    header row stays) and the play head position.
  - `scale_ticks` and `track_bar` compute the layout of the time scale and
    of each track's bar.
- **`playlist`**: `Playlist` handles all loaded tracks. It sends a track to
  preview deck 1 or 2, or adds a copy to the mixer's active tracks.
- **`mixer`**: `TrackMixer` plays up to one track per player. Each track
  starts once the clock passes its start time and stops at
  start + duration / speed.

## What it does not do

The deck model produces no sound and has no window. `DJAudioPlayer` only
tracks position, gain and speed; it does not decode or play audio, and it
reads track lengths from WAV files only. There is no command for the
decks: they are meant to be driven from Python code.