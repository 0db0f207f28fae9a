"""Catalog aggregate — the bookstore's inventory.

The Catalog owns every Book, keyed by ISBN.  Books hold no reference
back to it.  All mutations happen under a single lock, so a purchase
(check, reduce, fulfill) is atomic with respect to other callers.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass

from bookstore.domain.exceptions import (
    EntityNotFoundError,
    ItemUnavailableError,
)
from bookstore.domain.model.book import Book
from bookstore.domain.model.value_objects import Money, Quantity
from bookstore.domain.service.fulfillment import FulfillmentServices

logger = logging.getLogger("bookstore.catalog")


@dataclass(frozen=True)
class Sale:
    """A completed purchase and the amount charged for it."""

    book: Book
    quantity: int
    total: Money


class Catalog:

    def __init__(self, services: FulfillmentServices) -> None:
        self._services = services
        self._books: dict[str, Book] = {}
        self._lock = threading.RLock()

    # --- Inventory management -------------------------------------------------

    def add(self, book: Book) -> None:
        """Register a book, replacing any entry with the same ISBN."""
        with self._lock:
            replaced = book.isbn in self._books
            self._books[book.isbn] = book
        if replaced:
            logger.info("Replaced book - %s", book.title)
        else:
            logger.info("Added book - %s", book.title)

    def get(self, isbn: str) -> Book | None:
        return self._books.get(isbn)

    def list_all(self) -> list[Book]:
        with self._lock:
            return list(self._books.values())

    def remove_outdated(self, current_year: int, max_age: int) -> list[Book]:
        """Remove and return every book older than ``max_age`` years.

        A book published exactly ``max_age`` years ago is kept.
        """
        with self._lock:
            removed = [
                book
                for book in self._books.values()
                if book.is_outdated(current_year, max_age)
            ]
            for book in removed:
                del self._books[book.isbn]
                logger.info("Removed outdated book - %s", book.title)
        return removed

    # --- Purchase -------------------------------------------------------------

    def purchase(self, isbn: str, quantity: int, email: str, address: str) -> Money:
        """Sell ``quantity`` copies and return the amount paid."""
        return self.sell(isbn, quantity, email, address).total

    def sell(self, isbn: str, quantity: int, email: str, address: str) -> Sale:
        """Run the purchase transaction and return the completed sale.

        Steps, all under the catalog lock:
        1. Look the book up (EntityNotFoundError if absent).
        2. Reject a quantity that is not an int (ValidationError).
        3. Ask the book whether it can be sold (ItemUnavailableError).
        4. Reject zero or negative quantities (ValidationError).
        5. Reduce inventory, then hand off to fulfillment.

        Inventory is not restored if fulfillment raises.
        """
        with self._lock:
            book = self._books.get(isbn)
            if book is None:
                logger.warning("Purchase rejected: ISBN %s not found", isbn)
                raise EntityNotFoundError(f"Book with ISBN {isbn} not found")

            Quantity.require_int(quantity)
            if not book.is_available(quantity):
                logger.warning(
                    "Purchase rejected: '%s' not available in quantity %s",
                    book.title, quantity,
                )
                raise ItemUnavailableError(
                    f"Insufficient stock or book not available for purchase: "
                    f"'{book.title}'"
                )

            qty = Quantity(quantity)
            total = book.price * qty.value

            book.reduce_inventory(qty.value)
            book.fulfill(qty.value, email, address, self._services)

        logger.info("Purchase successful - Total: %s", total)
        return Sale(book=book, quantity=qty.value, total=total)

    # --- Container protocol ---------------------------------------------------

    def __len__(self) -> int:
        return len(self._books)

    def __contains__(self, isbn: object) -> bool:
        return isbn in self._books
