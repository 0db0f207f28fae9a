"""Application service: Purchase Book use case.

Thin wrapper around ``Catalog.sell`` that turns the completed sale into
a receipt for the presentation layer.  All business rules (availability,
stock, quantity validation) are enforced by the domain.
"""

from __future__ import annotations

from bookstore.application.dto import PurchaseReceiptDTO
from bookstore.domain.model.catalog import Catalog


class PurchaseBookHandler:

    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog

    def handle(
        self,
        isbn: str,
        quantity: int,
        email: str,
        address: str,
    ) -> PurchaseReceiptDTO:
        sale = self._catalog.sell(isbn, quantity, email, address)
        return PurchaseReceiptDTO(
            isbn=sale.book.isbn,
            title=sale.book.title,
            kind=sale.book.kind,
            quantity=sale.quantity,
            unit_price=str(sale.book.price),
            total=str(sale.total),
        )
