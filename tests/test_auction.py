import io

import pytest

from subasta.auction import (
    Auction,
    AuctionError,
    DuplicateLotError,
    Lot,
    LotNotFoundError,
    Offer,
    OfferResult,
    Person,
    format_amount,
)


@pytest.fixture
def out():
    return io.StringIO()


@pytest.fixture
def auction(out):
    a = Auction(out)
    out.seek(0)
    out.truncate()
    return a


@pytest.mark.parametrize(
    "amount, expected",
    [(2000000, "2000000"), (12000, "12000"), (12.5, "12.5"), (100000, "100000")],
)
def test_format_amount(amount, expected):
    assert format_amount(amount) == expected


def test_format_amount_truncates_large_values():
    assert format_amount(150000.75) == "150000"


def test_person_and_offer_str():
    p = Person("Francisco")
    assert str(p) == "Francisco"
    assert str(Offer(12000, p)) == "$12000 de Francisco"


def test_lot_without_offer():
    lot = Lot(1, "Cuadro de Van Gogh")
    assert str(lot) == "ID: 1, Nombre: Cuadro de Van Gogh, Oferta: sin oferta aun"
    assert lot.best_offer is None


def test_lot_keeps_highest_offer():
    lot = Lot(1, "Cuadro")
    o1 = Offer(12000, Person("Francisco"))
    o2 = Offer(11000, Person("Juan"))
    o3 = Offer(15000, Person("Pablo"))
    assert lot.place_offer(o1) is OfferResult.FIRST
    assert lot.place_offer(o2) is OfferResult.REJECTED
    assert lot.best_offer is o1
    assert lot.place_offer(o3) is OfferResult.REPLACED
    assert lot.best_offer is o3
    assert str(lot) == "ID: 1, Nombre: Cuadro, Oferta: $15000 de Pablo"


def test_equal_offer_is_rejected():
    lot = Lot(2, "Camiseta")
    first = Offer(100000, Person("Maria"))
    lot.place_offer(first)
    assert lot.place_offer(Offer(100000, Person("Pedro"))) is OfferResult.REJECTED
    assert lot.best_offer is first


def test_creation_message():
    out = io.StringIO()
    Auction(out)
    assert out.getvalue() == "Se crea la subasta: sin lotes.\n\n"


def test_empty_auction_str(auction):
    assert str(auction) == "sin lotes.\n"
    assert len(auction) == 0
    assert list(auction) == []


def test_insert_lot(auction, out):
    lot = auction.insert_lot(1, "Auto")
    assert out.getvalue() == "  -Lote ingresado: ID: 1, Nombre: Auto, Oferta: sin oferta aun.\n"
    assert auction.find_lot(1) is lot
    assert len(auction) == 1


def test_insert_duplicate_raises(auction):
    auction.insert_lot(1, "Auto")
    with pytest.raises(DuplicateLotError) as info:
        auction.insert_lot(1, "Otro")
    assert str(info.value) == "Numero de lote 1 ya existe."
    assert auction.find_lot(1).name == "Auto"
    assert len(auction) == 1


def test_find_missing_lot(auction):
    assert auction.find_lot(7) is None


def test_iteration_keeps_insertion_order(auction):
    auction.insert_lot(3, "c")
    auction.insert_lot(1, "a")
    auction.insert_lot(2, "b")
    assert [lot.id for lot in auction] == [3, 1, 2]


def test_auction_str_with_lots(auction):
    auction.insert_lot(1, "Auto")
    auction.insert_lot(2, "Camiseta")
    auction.bid(2, "Maria", 300000)
    assert str(auction) == (
        "Cantidad de lotes: 2\n"
        "Lotes: \n"
        "  -ID: 1, Nombre: Auto, Oferta: sin oferta aun.\n"
        "  -ID: 2, Nombre: Camiseta, Oferta: $300000 de Maria.\n"
        "\n"
    )


def test_bid_first_offer_output(auction, out):
    auction.insert_lot(1, "Auto")
    out.seek(0)
    out.truncate()
    result = auction.bid(1, "Alberto", 2000000)
    assert result is OfferResult.FIRST
    assert out.getvalue() == (
        "\nOferta en lote 1: Alberto oferta $2000000.\n"
        "Lote encontrado: ID: 1, Nombre: Auto, Oferta: sin oferta aun.\n"
        'Es la primera oferta para "Auto".\n'
        'Oferta actual para "Auto": $2000000 de Alberto.\n'
    )


def test_bid_sequence(auction, out):
    auction.insert_lot(1, "Auto")
    assert auction.bid(1, "Alberto", 2000000) is OfferResult.FIRST
    out.seek(0)
    out.truncate()
    assert auction.bid(1, "Juan", 1500000) is OfferResult.REJECTED
    assert "La oferta es menor a la actual, no se registra.\n" in out.getvalue()
    assert auction.bid(1, "Pablo", 3000000) is OfferResult.REPLACED
    assert "La oferta reemplaza a la anterior.\n" in out.getvalue()
    best = auction.find_lot(1).best_offer
    assert best.bidder == Person("Pablo")
    assert best.amount == 3000000


def test_bid_unknown_lot(auction, out):
    with pytest.raises(LotNotFoundError) as info:
        auction.bid(9, "Ana", 400000)
    assert str(info.value) == "ID de lote no encontrado."
    assert isinstance(info.value, AuctionError)
    assert out.getvalue() == "\nOferta en lote 9: Ana oferta $400000.\n"
    assert len(auction) == 0