"""Application layer: the ContactService use cases and DTOs. Depends only on domain."""

from contact_book.application.contact_service import ContactService
from contact_book.application.dto import (
    ContactAdded,
    ContactCardData,
    ContactRemoved,
    ContactSummary,
    ContactUpdated,
    Favorited,
    Invalid,
    NotFavorite,
    NotFound,
    Unfavorited,
)

__all__ = [
    "ContactAdded",
    "ContactCardData",
    "ContactRemoved",
    "ContactService",
    "ContactSummary",
    "ContactUpdated",
    "Favorited",
    "Invalid",
    "NotFavorite",
    "NotFound",
    "Unfavorited",
]
