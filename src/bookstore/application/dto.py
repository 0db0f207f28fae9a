"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing Book instances (and their mutable stock) to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from bookstore.domain.model.book import Book, PaperBook


@dataclass(frozen=True)
class BookSpec:
    """Input: everything needed to build any kind of book."""

    kind: str  # "paper", "ebook", "showcase" or "audio"
    isbn: str
    title: str
    author: str
    year_published: int
    price: str
    stock: int = 0
    file_type: str = "PDF"
    narrator: str = ""
    duration_minutes: int = 0


@dataclass(frozen=True)
class BookDTO:
    """Output: a single catalog entry as displayed to the user."""

    isbn: str
    title: str
    author: str
    year_published: int
    price: str  # formatted, e.g. "$45.99"
    kind: str
    stock: int | None  # None for books without stock
    description: str


@dataclass(frozen=True)
class PurchaseReceiptDTO:
    """Output: the outcome of a successful purchase."""

    isbn: str
    title: str
    kind: str
    quantity: int
    unit_price: str
    total: str


def book_to_dto(book: Book) -> BookDTO:
    return BookDTO(
        isbn=book.isbn,
        title=book.title,
        author=book.author,
        year_published=book.year_published,
        price=str(book.price),
        kind=book.kind,
        stock=book.stock if isinstance(book, PaperBook) else None,
        description=str(book),
    )
