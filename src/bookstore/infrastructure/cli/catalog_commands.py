"""CLI commands that exercise an in-memory sample catalog."""

from __future__ import annotations

from datetime import date

import click

from bookstore.application.dto import BookDTO
from bookstore.application.purchase_book import PurchaseBookHandler
from bookstore.application.remove_outdated_books import RemoveOutdatedBooksHandler
from bookstore.application.show_inventory import ShowInventoryHandler
from bookstore.domain.exceptions import DomainException
from bookstore.infrastructure.bootstrap import sample_catalog
from bookstore.infrastructure.config import DEFAULT_MAX_AGE

DEMO_EMAIL = "customer@email.com"
DEMO_ADDRESS = "123 Main St, City, State"

# (label, isbn, quantity)
PURCHASE_STEPS = [
    ("Buying Paper Book", "978-0134685991", 2),
    ("Buying EBook", "978-0135166307", 1),
    ("Trying to Buy Showcase Book", "978-0596009205", 1),
    ("Insufficient Stock Test", "978-0134685991", 15),
    ("Non-existent Book Test", "978-INVALID", 1),
]


def _display_inventory(lines: list[BookDTO]) -> None:
    if not lines:
        click.echo("No books in the catalog.")
        return

    click.echo(f"{'ISBN':<16} {'Kind':<9} {'Year':>5} {'Price':>9} {'Stock':>6}  Title")
    click.echo("-" * 70)
    for line in lines:
        stock = "-" if line.stock is None else str(line.stock)
        click.echo(
            f"{line.isbn:<16} {line.kind:<9} {line.year_published:>5} "
            f"{line.price:>9} {stock:>6}  {line.title}"
        )
    click.echo(f"{len(lines)} book(s)")


@click.command("demo")
@click.option(
    "--current-year",
    envvar="BOOKSTORE_CURRENT_YEAR",
    type=int,
    default=lambda: date.today().year,
    show_default="current year",
    help="Year used for pruning.",
)
@click.option(
    "--max-age",
    envvar="BOOKSTORE_MAX_AGE",
    type=int,
    default=DEFAULT_MAX_AGE,
    show_default=True,
    help="Maximum age in years.",
)
def demo(current_year: int, max_age: int) -> None:
    """Run the scripted purchase and pruning scenario."""
    catalog = sample_catalog()

    click.echo("== Inventory ==")
    _display_inventory(ShowInventoryHandler(catalog).handle())

    purchase = PurchaseBookHandler(catalog)
    for label, isbn, quantity in PURCHASE_STEPS:
        click.echo()
        click.echo(f"== {label} ==")
        try:
            receipt = purchase.handle(isbn, quantity, DEMO_EMAIL, DEMO_ADDRESS)
        except DomainException as exc:
            click.echo(f"Error - {exc}")
            continue
        click.echo(f"Paid amount: {receipt.total} for {receipt.quantity} x {receipt.title}")

    click.echo()
    click.echo(f"== Removing Outdated Books (year={current_year}, max age={max_age}) ==")
    try:
        removed = RemoveOutdatedBooksHandler(catalog).handle(current_year, max_age)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    click.echo(f"Removed {len(removed)} outdated book(s)")
    for line in removed:
        click.echo(f"  {line.title} ({line.year_published})")

    click.echo()
    click.echo("== Inventory ==")
    _display_inventory(ShowInventoryHandler(catalog).handle())


@click.command("sample")
def sample() -> None:
    """Show the sample catalog."""
    _display_inventory(ShowInventoryHandler(sample_catalog()).handle())
