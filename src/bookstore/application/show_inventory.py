"""Application service: Show Inventory use case (query)."""

from __future__ import annotations

from bookstore.application.dto import BookDTO, book_to_dto
from bookstore.domain.model.catalog import Catalog


class ShowInventoryHandler:

    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog

    def handle(self) -> list[BookDTO]:
        return [book_to_dto(book) for book in self._catalog.list_all()]
