"""Application service: Add Book use case."""

from __future__ import annotations

from bookstore.application.dto import BookDTO, BookSpec, book_to_dto
from bookstore.domain.exceptions import ValidationError
from bookstore.domain.model.book import AudioBook, Book, EBook, PaperBook, ShowcaseBook
from bookstore.domain.model.catalog import Catalog
from bookstore.domain.model.value_objects import Money


class AddBookHandler:

    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog

    def handle(self, spec: BookSpec) -> BookDTO:
        """Build the book described by ``spec`` and add it to the catalog.

        An existing book with the same ISBN is replaced.
        """
        book = self._build(spec)
        self._catalog.add(book)
        return book_to_dto(book)

    @staticmethod
    def _build(spec: BookSpec) -> Book:
        common = dict(
            isbn=spec.isbn.strip(),
            title=spec.title.strip(),
            author=spec.author.strip(),
            year_published=spec.year_published,
            price=Money.of(spec.price),
        )
        if spec.kind == "paper":
            return PaperBook(**common, stock=spec.stock)
        if spec.kind == "ebook":
            return EBook(**common, file_type=spec.file_type)
        if spec.kind == "showcase":
            return ShowcaseBook(**common)
        if spec.kind == "audio":
            return AudioBook(
                **common,
                narrator=spec.narrator,
                duration_minutes=spec.duration_minutes,
            )
        raise ValidationError(f"Unknown book kind: '{spec.kind}'")
