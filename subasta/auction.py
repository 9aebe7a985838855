"""Auction of numbered lots, each keeping only its highest offer."""

from __future__ import annotations

import struct
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, TextIO

_WHOLE_NUMBER_THRESHOLD = 100000


def _to_float32(value: float) -> float:
    """Round a number to single precision, the precision amounts are kept in."""
    return struct.unpack("f", struct.pack("f", float(value)))[0]


def format_amount(amount: float) -> str:
    """Render an amount: truncated to an integer from 100000 up, else 6 significant digits."""
    value = _to_float32(amount)
    if value >= _WHOLE_NUMBER_THRESHOLD:
        return str(int(value))
    return f"{value:g}"


class AuctionError(Exception):
    """Base class for auction errors."""


class DuplicateLotError(AuctionError):
    """Raised when a lot number is already taken."""

    def __init__(self, lot_id: int) -> None:
        super().__init__(f"Numero de lote {lot_id} ya existe.")
        self.lot_id = lot_id


class LotNotFoundError(AuctionError, LookupError):
    """Raised when an offer names a lot that does not exist."""

    def __init__(self, lot_id: int) -> None:
        super().__init__("ID de lote no encontrado.")
        self.lot_id = lot_id


class OfferResult(Enum):
    """What happened to an offer placed on a lot."""

    FIRST = "first"
    REPLACED = "replaced"
    REJECTED = "rejected"


@dataclass(frozen=True)
class Person:
    """Someone taking part in the auction."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass
class Offer:
    """An amount offered by a person."""

    amount: float
    bidder: Person

    def __post_init__(self) -> None:
        self.amount = _to_float32(self.amount)

    def __str__(self) -> str:
        return f"${format_amount(self.amount)} de {self.bidder}"


@dataclass
class Lot:
    """A numbered item for sale, holding its best offer so far."""

    id: int
    name: str
    best_offer: Offer | None = field(default=None)

    def place_offer(self, offer: Offer) -> OfferResult:
        """Keep the offer if it is the first or strictly higher than the current one."""
        if self.best_offer is None:
            self.best_offer = offer
            return OfferResult.FIRST
        if offer.amount > self.best_offer.amount:
            self.best_offer = offer
            return OfferResult.REPLACED
        return OfferResult.REJECTED

    def __str__(self) -> str:
        offer = self.best_offer if self.best_offer is not None else "sin oferta aun"
        return f"ID: {self.id}, Nombre: {self.name}, Oferta: {offer}"


_RESULT_MESSAGES = {
    OfferResult.FIRST: 'Es la primera oferta para "{name}".',
    OfferResult.REPLACED: "La oferta reemplaza a la anterior.",
    OfferResult.REJECTED: "La oferta es menor a la actual, no se registra.",
}


class Auction:
    """A set of lots, reporting each step to a text stream."""

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out if out is not None else sys.stdout
        self._lots: dict[int, Lot] = {}
        self._write(f"Se crea la subasta: {self}\n")

    def _write(self, text: str) -> None:
        self._out.write(text)

    def __len__(self) -> int:
        return len(self._lots)

    def __iter__(self) -> Iterator[Lot]:
        return iter(self._lots.values())

    def find_lot(self, lot_id: int) -> Lot | None:
        """Return the lot with this number, or None."""
        return self._lots.get(lot_id)

    def insert_lot(self, lot_id: int, name: str) -> Lot:
        """Add a new lot; raise DuplicateLotError if the number is taken."""
        if lot_id in self._lots:
            raise DuplicateLotError(lot_id)
        lot = Lot(lot_id, name)
        self._lots[lot_id] = lot
        self._write(f"  -Lote ingresado: {lot}.\n")
        return lot

    def bid(self, lot_id: int, bidder: str, amount: float) -> OfferResult:
        """Offer an amount on a lot; raise LotNotFoundError if there is no such lot."""
        self._write(f"\nOferta en lote {lot_id}: {bidder} oferta ${format_amount(amount)}.\n")
        lot = self.find_lot(lot_id)
        if lot is None:
            raise LotNotFoundError(lot_id)
        self._write(f"Lote encontrado: {lot}.\n")
        result = lot.place_offer(Offer(amount, Person(bidder)))
        self._write(_RESULT_MESSAGES[result].format(name=lot.name) + "\n")
        self._write(f'Oferta actual para "{lot.name}": {lot.best_offer}.\n')
        return result

    def __str__(self) -> str:
        if not self._lots:
            return "sin lotes.\n"
        listing = "".join(f"  -{lot}.\n" for lot in self)
        return f"Cantidad de lotes: {len(self)}\nLotes: \n{listing}\n"