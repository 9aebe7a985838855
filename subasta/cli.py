"""Interactive menu that runs an auction from whitespace-separated input."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Iterator, TextIO

from subasta.auction import Auction, DuplicateLotError, LotNotFoundError

_MENU = (
    "1-Ingresar un lote\n"
    "2-Ofertar por un lote\n"
    "3-Mostrar estado de la subasta\n"
    "0-Concluir la subasta\n"
)
_RULE = "_____________________________________________________________"


class _EndOfInput(Exception):
    """Raised when the input runs out or holds something unreadable."""


class _Tokens:
    """Reads words and numbers from lines of text, one word at a time."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._words: Iterator[str] = (word for line in lines for word in line.split())

    def word(self) -> str:
        try:
            return next(self._words)
        except StopIteration:
            raise _EndOfInput from None

    def integer(self) -> int:
        try:
            return int(self.word())
        except ValueError:
            raise _EndOfInput from None

    def number(self) -> float:
        try:
            return float(self.word())
        except ValueError:
            raise _EndOfInput from None


def _insert(auction: Auction, tokens: _Tokens, out: TextIO) -> None:
    out.write("Ingrese numero del lote: ")
    lot_id = tokens.integer()
    out.write("Ingrese nombre del lote: ")
    name = tokens.word()
    try:
        auction.insert_lot(lot_id, name)
    except DuplicateLotError as err:
        out.write(f"{err}\n")
    out.write("\n")


def _bid(auction: Auction, tokens: _Tokens, out: TextIO) -> None:
    out.write("Ingrese numero del lote: ")
    lot_id = tokens.integer()
    out.write("Ingrese nombre del ofertante: ")
    bidder = tokens.word()
    out.write("Ingrese monto de la oferta: ")
    amount = tokens.number()
    try:
        auction.bid(lot_id, bidder, amount)
    except LotNotFoundError as err:
        out.write(f"\n{err}\n")
    out.write("\n")


def run(lines: Iterable[str], out: TextIO | None = None) -> Auction:
    """Run the menu over the given input lines and return the finished auction."""
    out = out if out is not None else sys.stdout
    tokens = _Tokens(lines)
    auction = Auction(out)
    try:
        while True:
            out.write(_MENU)
            option = tokens.integer()
            if option == 1:
                _insert(auction, tokens, out)
            elif option == 2:
                _bid(auction, tokens, out)
            elif option == 3:
                out.write(f"Subasta: \n{auction}")
            elif option != 0:
                out.write("Opcion incorrecta.\n\n")
            if option <= 0:
                break
    except _EndOfInput:
        pass
    out.write(f"{_RULE}\nSe da por terminada la subasta: \n{auction}")
    return auction


def main(argv: list[str] | None = None) -> int:
    """Run the interactive auction on standard input and output."""
    parser = argparse.ArgumentParser(description="Subasta interactiva de lotes.")
    parser.parse_args(argv)
    run(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())