"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
"""

from __future__ import annotations

from bookstore.application.add_book import AddBookHandler
from bookstore.application.dto import BookSpec
from bookstore.domain.model.catalog import Catalog
from bookstore.domain.service.fulfillment import FulfillmentServices
from bookstore.infrastructure.notifications.logging_services import (
    LoggingDeliveryService,
    LoggingShippingService,
)

SAMPLE_BOOKS = [
    BookSpec(
        kind="paper",
        isbn="978-0134685991",
        title="Programming for Engineers",
        author="John Smith",
        year_published=2020,
        price="45.99",
        stock=10,
    ),
    BookSpec(
        kind="ebook",
        isbn="978-0135166307",
        title="The Seven Habits of Highly Effective People",
        author="Stephen Covey",
        year_published=1989,
        price="29.99",
        file_type="PDF",
    ),
    BookSpec(
        kind="showcase",
        isbn="978-0596009205",
        title="A Tale of Two Cities",
        author="Charles Dickens",
        year_published=1859,
        price="39.95",
    ),
]


def fulfillment_services() -> FulfillmentServices:
    return FulfillmentServices(
        shipping=LoggingShippingService(),
        delivery=LoggingDeliveryService(),
    )


def catalog() -> Catalog:
    return Catalog(fulfillment_services())


def sample_catalog() -> Catalog:
    """An in-memory catalog pre-loaded with one book of each sellable kind."""
    result = catalog()
    handler = AddBookHandler(result)
    for spec in SAMPLE_BOOKS:
        handler.handle(spec)
    return result
