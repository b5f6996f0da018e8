"""Domain layer: entities, the ContactBook aggregate, and errors. No dependencies on outer layers."""

from contact_book.domain.book import ContactBook
from contact_book.domain.entities import Contact, SocialMediaWebsite, SocialProfile
from contact_book.domain.errors import (
    CannotFavoriteMissingContact,
    CannotRemoveMissingContact,
    ContactBookError,
    ContactError,
    InvalidAttribute,
    InvalidName,
    NoSuchContact,
    NotAFavorite,
)
from contact_book.domain.ids import ContactId

__all__ = [
    "CannotFavoriteMissingContact",
    "CannotRemoveMissingContact",
    "Contact",
    "ContactBook",
    "ContactBookError",
    "ContactError",
    "ContactId",
    "InvalidAttribute",
    "InvalidName",
    "NoSuchContact",
    "NotAFavorite",
    "SocialMediaWebsite",
    "SocialProfile",
]
