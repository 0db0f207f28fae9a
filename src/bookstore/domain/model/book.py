"""Book entities — one catalog entry each.

``Book`` carries the attributes every entry shares; each subclass
decides for itself whether it can be sold, whether a sale consumes
stock, and how a sale reaches the buyer.  New kinds of book are added
by subclassing, without touching the Catalog.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

from bookstore.domain.exceptions import ValidationError
from bookstore.domain.model.value_objects import Money
from bookstore.domain.service.fulfillment import FulfillmentServices

logger = logging.getLogger("bookstore.fulfillment")


def _require_int(value: object, field_name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(
            f"{field_name} must be an integer, got {type(value).__name__}"
        )


@dataclass
class Book(ABC):
    """Base class for catalog entries.

    ``isbn`` is the identity and never changes.  The only state that
    mutates after construction is a paper book's stock.
    """

    isbn: str
    title: str
    author: str
    year_published: int
    price: Money

    kind = "book"

    def __post_init__(self) -> None:
        if not isinstance(self.isbn, str):
            raise ValidationError(
                f"ISBN must be a string, got {type(self.isbn).__name__}"
            )
        if not self.isbn.strip():
            raise ValidationError("ISBN is required")
        if not isinstance(self.price, Money):
            raise ValidationError(
                f"Price must be Money, got {type(self.price).__name__}"
            )
        _require_int(self.year_published, "Year published")

    # --- Variant behavior -----------------------------------------------------

    @abstractmethod
    def is_available(self, quantity: int) -> bool:
        """Whether ``quantity`` copies can be sold right now."""

    @abstractmethod
    def reduce_inventory(self, quantity: int) -> None:
        """Consume stock for a sale that already passed ``is_available``."""

    @abstractmethod
    def fulfill(
        self,
        quantity: int,
        email: str,
        address: str,
        services: FulfillmentServices,
    ) -> None:
        """Hand the sale to the collaborator that delivers this kind of book."""

    # --- Age ------------------------------------------------------------------

    def age(self, current_year: int) -> int:
        return current_year - self.year_published

    def is_outdated(self, current_year: int, max_age: int) -> bool:
        return self.age(current_year) > max_age

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return (
            f"ISBN: {self.isbn}, Title: {self.title}, Author: {self.author}, "
            f"Year: {self.year_published}, Price: {self.price}"
        )


@dataclass
class PaperBook(Book):
    """A printed book shipped from a finite stock."""

    stock: int = 0

    kind = "paper"

    def __post_init__(self) -> None:
        super().__post_init__()
        _require_int(self.stock, "Stock")
        if self.stock < 0:
            raise ValidationError(f"Stock cannot be negative, got {self.stock}")

    def is_available(self, quantity: int) -> bool:
        return self.stock >= quantity

    def reduce_inventory(self, quantity: int) -> None:
        if quantity <= 0:
            raise ValidationError("Quantity to remove must be positive")
        if quantity > self.stock:
            raise ValidationError(
                f"Cannot remove {quantity} copies of '{self.title}' "
                f"— only {self.stock} in stock"
            )
        self.stock -= quantity

    def fulfill(
        self, quantity: int, email: str, address: str, services: FulfillmentServices
    ) -> None:
        services.shipping.ship(self, quantity, address)
        logger.info("Paper book '%s' shipped to %s", self.title, address)

    def __str__(self) -> str:
        return f"{super().__str__()}, Stock: {self.stock}"


@dataclass
class EBook(Book):
    """A downloadable book; never runs out."""

    file_type: str = "PDF"

    kind = "ebook"

    def is_available(self, quantity: int) -> bool:
        return True

    def reduce_inventory(self, quantity: int) -> None:
        pass

    def fulfill(
        self, quantity: int, email: str, address: str, services: FulfillmentServices
    ) -> None:
        services.delivery.deliver(self, email)
        logger.info("EBook '%s' sent to %s", self.title, email)

    def __str__(self) -> str:
        return f"{super().__str__()}, File Type: {self.file_type}"


@dataclass
class ShowcaseBook(Book):
    """A display copy.  Listed in the catalog but never sold."""

    kind = "showcase"

    def is_available(self, quantity: int) -> bool:
        return False

    def reduce_inventory(self, quantity: int) -> None:
        pass

    def fulfill(
        self, quantity: int, email: str, address: str, services: FulfillmentServices
    ) -> None:
        # Unreachable through Catalog.purchase: is_available is always False.
        pass

    def __str__(self) -> str:
        return f"{super().__str__()} (Showcase - Not for Sale)"


@dataclass
class AudioBook(Book):
    """A narrated recording delivered as a download link."""

    narrator: str = ""
    duration_minutes: int = 0

    kind = "audio"

    def __post_init__(self) -> None:
        super().__post_init__()
        _require_int(self.duration_minutes, "Duration")
        if self.duration_minutes < 0:
            raise ValidationError(
                f"Duration cannot be negative, got {self.duration_minutes}"
            )

    def is_available(self, quantity: int) -> bool:
        return True

    def reduce_inventory(self, quantity: int) -> None:
        pass

    def fulfill(
        self, quantity: int, email: str, address: str, services: FulfillmentServices
    ) -> None:
        services.delivery.deliver(self, email)
        logger.info("Audio book download link for '%s' sent to %s", self.title, email)

    def __str__(self) -> str:
        return (
            f"{super().__str__()}, Narrator: {self.narrator}, "
            f"Duration: {self.duration_minutes} min"
        )
