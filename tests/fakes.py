"""Recording fakes for the fulfillment collaborators.

They implement the same abstract interfaces as the logging services
but only remember what they were asked to do.
"""

from __future__ import annotations

from bookstore.domain.model.book import Book
from bookstore.domain.model.catalog import Catalog
from bookstore.domain.service.fulfillment import (
    DeliveryService,
    FulfillmentServices,
    ShippingService,
)


class RecordingShippingService(ShippingService):

    def __init__(self) -> None:
        self.shipments: list[tuple[str, int, str]] = []

    def ship(self, book: Book, quantity: int, address: str) -> None:
        self.shipments.append((book.isbn, quantity, address))


class RecordingDeliveryService(DeliveryService):

    def __init__(self) -> None:
        self.deliveries: list[tuple[str, str]] = []

    def deliver(self, book: Book, email: str) -> None:
        self.deliveries.append((book.isbn, email))


class FailingShippingService(ShippingService):

    def ship(self, book: Book, quantity: int, address: str) -> None:
        raise RuntimeError("courier unreachable")


def make_services(
    shipping: ShippingService | None = None,
) -> FulfillmentServices:
    return FulfillmentServices(
        shipping=shipping or RecordingShippingService(),
        delivery=RecordingDeliveryService(),
    )


def make_catalog(*books: Book, services: FulfillmentServices | None = None) -> Catalog:
    catalog = Catalog(services or make_services())
    for book in books:
        catalog.add(book)
    return catalog
