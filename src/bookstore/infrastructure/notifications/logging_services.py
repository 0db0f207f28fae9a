"""Fulfillment collaborators that only announce the dispatch.

Stand-ins for a courier integration and a mail gateway: each call is
recorded as a log event and nothing leaves the process.
"""

from __future__ import annotations

import logging

from bookstore.domain.model.book import Book
from bookstore.domain.service.fulfillment import DeliveryService, ShippingService

logger = logging.getLogger("bookstore.fulfillment")


class LoggingShippingService(ShippingService):

    def ship(self, book: Book, quantity: int, address: str) -> None:
        logger.info(
            "Shipping service called for %s (%d copies to %s)",
            book.title, quantity, address,
        )


class LoggingDeliveryService(DeliveryService):

    def deliver(self, book: Book, email: str) -> None:
        logger.info("Mail service called for %s (to %s)", book.title, email)
