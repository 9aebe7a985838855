# subasta

A small auction house for the terminal. You register lots, people bid on
them, and the highest offer for each lot is kept. All messages are in
Spanish.

## Installation

```
pip install .
```

## Running an auction

```
subasta
```

The command reads whitespace-separated words from standard input and shows
this menu:

```
1-Ingresar un lote
2-Ofertar por un lote
3-Mostrar estado de la subasta
0-Concluir la subasta
```

- **1** asks for a lot number and a name (one word) and registers the lot.
  A number that is already in use is refused with a message.
- **2** asks for a lot number, a bidder name (one word) and an amount. The
  first offer on a lot is always accepted; later offers replace it only if
  they are strictly higher. An unknown lot number is reported.
- **3** prints every lot with its current best offer.
- **0** (or any negative number) closes the auction; any other number is
  answered with "Opcion incorrecta.".

When the menu ends, or the input runs out or holds something that is not a
number where one is expected, the final state of the auction is printed.

Amounts of 100000 or more are shown truncated to whole numbers; smaller
amounts are shown with up to six significant digits. Amounts are kept in
single precision.

## Using it from Python

```python
import sys
from subasta.auction import Auction

auction = Auction(sys.stdout)
auction.insert_lot(1, "Auto")
auction.bid(1, "Alberto", 2000000)   # OfferResult.FIRST
auction.bid(1, "Juan", 1500000)      # OfferResult.REJECTED
print(auction)
```

`Auction` writes a report of every step to the stream it is given
(standard output if none). In `subasta.auction`:

- `Auction.insert_lot(lot_id, name)` adds and returns a `Lot`; it raises
  `DuplicateLotError` if the number is taken.
- `Auction.bid(lot_id, bidder, amount)` returns an `OfferResult`
  (`FIRST`, `REPLACED` or `REJECTED`); it raises `LotNotFoundError` if there
  is no such lot. Both errors derive from `AuctionError`.
- `Auction.find_lot(lot_id)` returns the `Lot` with that number, or `None`.
- `len(auction)` gives the number of lots, and iterating the auction yields
  them in the order they were added.
- `Lot.place_offer(offer)` applies the same rule to an `Offer(amount,
  Person(name))` directly; `Lot.best_offer` holds the current best one.
- `format_amount(amount)` renders an amount the way the reports do.

`subasta.cli.run(lines, out)` runs the menu over any iterable of input
lines and returns the finished `Auction`.

## Extra examples

Two small demonstration commands print fixed records:

```
subasta-peliculas
subasta-grabaciones
```

The first describes a film and its director (`subasta.movies.Movie`,
`subasta.movies.Director`), the second a recording and its author
(`subasta.recordings.Recording`, `subasta.recordings.Author`).

## What it does not do

An auction lives only in memory: nothing is saved, and closing the program
discards all lots and offers.

## Tests

```
pip install .[test]
pytest
```