"""Application service: Remove Outdated Books use case."""

from __future__ import annotations

from bookstore.application.dto import BookDTO, book_to_dto
from bookstore.domain.exceptions import ValidationError
from bookstore.domain.model.catalog import Catalog


class RemoveOutdatedBooksHandler:

    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog

    def handle(self, current_year: int, max_age: int) -> list[BookDTO]:
        """Prune books older than ``max_age`` years and report what went."""
        if max_age < 0:
            raise ValidationError("Maximum age cannot be negative")
        removed = self._catalog.remove_outdated(current_year, max_age)
        return [book_to_dto(book) for book in removed]
