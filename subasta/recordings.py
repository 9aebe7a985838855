"""Recordings and their authors."""

from __future__ import annotations

import argparse
from dataclasses import dataclass


@dataclass(frozen=True)
class Author:
    """The person who made a recording."""

    first_name: str
    last_name: str

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass
class Recording:
    """A recording with its title, author, year and an optional comment."""

    title: str
    author: Author
    year: int
    comment: str = ""

    def __str__(self) -> str:
        return (
            "La grabacion es:\n"
            f"{self.title}\n"
            f"creada por {self.author}\n"
            f"Fecha: {self.year}\n"
        )


def main(argv: list[str] | None = None) -> int:
    """Print a sample recording."""
    argparse.ArgumentParser(description="Muestra una grabacion.").parse_args(argv)
    author = Author("Paul", "McCartney")
    record = Recording("Band on the run", author, 1974)
    print(record, end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())