"""Infrastructure layer: phone formatting and configuration."""

from contact_book.infrastructure.config import (
    Settings,
    configure_logging,
    load_settings,
)
from contact_book.infrastructure.phone import format_phone

__all__ = [
    "Settings",
    "configure_logging",
    "format_phone",
    "load_settings",
]
