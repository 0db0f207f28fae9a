"""Runtime configuration.

``Settings`` is filled in by the CLI, which reads each value from its
command-line option or the matching ``BOOKSTORE_*`` environment variable.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

DEFAULT_STORE_NAME = "Quantum book store"
DEFAULT_MAX_AGE = 15
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass(frozen=True)
class Settings:

    store_name: str = DEFAULT_STORE_NAME
    log_level: str = "INFO"


def configure_logging(settings: Settings) -> None:
    """Install one stderr handler on the ``bookstore`` logger."""
    root = logging.getLogger("bookstore")
    for handler in list(root.handlers):
        root.removeHandler(handler)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(f"{settings.store_name}: %(message)s"))
    root.addHandler(handler)
    root.setLevel(settings.log_level)
