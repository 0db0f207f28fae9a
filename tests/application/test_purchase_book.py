"""Integration tests for the PurchaseBook use case."""

import pytest

from bookstore.application.add_book import AddBookHandler
from bookstore.application.dto import BookSpec
from bookstore.application.purchase_book import PurchaseBookHandler
from bookstore.domain.exceptions import EntityNotFoundError, ItemUnavailableError
from tests.fakes import make_catalog, make_services

EMAIL = "customer@email.com"
ADDRESS = "123 Main St, City, State"


def _setup():
    services = make_services()
    catalog = make_catalog(services=services)
    add = AddBookHandler(catalog)
    add.handle(BookSpec("paper", "A", "Programming", "John Smith", 2020, "45.99", stock=10))
    add.handle(BookSpec("ebook", "B", "Seven Habits", "Stephen Covey", 1989, "29.99"))
    add.handle(BookSpec("showcase", "C", "Two Cities", "Charles Dickens", 1859, "39.95"))
    return catalog, services


class TestPurchaseBookHappyPath:

    def test_paper_receipt(self):
        catalog, services = _setup()

        receipt = PurchaseBookHandler(catalog).handle("A", 2, EMAIL, ADDRESS)

        assert receipt.total == "$91.98"
        assert receipt.unit_price == "$45.99"
        assert receipt.quantity == 2
        assert receipt.title == "Programming"
        assert receipt.kind == "paper"
        assert catalog.get("A").stock == 8
        assert services.shipping.shipments == [("A", 2, ADDRESS)]

    def test_ebook_receipt(self):
        catalog, services = _setup()

        receipt = PurchaseBookHandler(catalog).handle("B", 1, EMAIL, ADDRESS)

        assert receipt.total == "$29.99"
        assert services.delivery.deliveries == [("B", EMAIL)]


class TestPurchaseBookFailures:

    def test_showcase_rejected(self):
        catalog, services = _setup()
        with pytest.raises(ItemUnavailableError):
            PurchaseBookHandler(catalog).handle("C", 1, EMAIL, ADDRESS)
        assert services.shipping.shipments == []
        assert services.delivery.deliveries == []

    def test_over_stock_rejected(self):
        catalog, _ = _setup()
        handler = PurchaseBookHandler(catalog)
        handler.handle("A", 2, EMAIL, ADDRESS)

        with pytest.raises(ItemUnavailableError):
            handler.handle("A", 15, EMAIL, ADDRESS)

        assert catalog.get("A").stock == 8

    def test_unknown_rejected(self):
        catalog, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="978-INVALID"):
            PurchaseBookHandler(catalog).handle("978-INVALID", 1, EMAIL, ADDRESS)
