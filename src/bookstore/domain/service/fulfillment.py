"""Fulfillment collaborators.

Defined in the domain layer so books can dispatch a purchase without
knowing how shipping or e-mail delivery is actually carried out.
Concrete implementations live in the infrastructure layer; tests use
recording fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bookstore.domain.model.book import Book


class ShippingService(ABC):

    @abstractmethod
    def ship(self, book: Book, quantity: int, address: str) -> None:
        """Send ``quantity`` physical copies of ``book`` to ``address``."""


class DeliveryService(ABC):

    @abstractmethod
    def deliver(self, book: Book, email: str) -> None:
        """Send a digital copy (or download link) of ``book`` to ``email``."""


@dataclass(frozen=True)
class FulfillmentServices:
    """The collaborators a catalog hands to a book when fulfilling a sale."""

    shipping: ShippingService
    delivery: DeliveryService
