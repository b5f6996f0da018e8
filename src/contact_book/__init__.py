"""
Contact book core: clean-architecture layout.

- domain: Contact value model, ContactBook aggregate, ContactId, errors. No outer dependencies.
- application: use cases (ContactService) and DTOs.
- infrastructure: phone formatting (phonenumbers) and settings (.env / environment).
"""

from contact_book.application import (
    ContactAdded,
    ContactCardData,
    ContactRemoved,
    ContactService,
    ContactSummary,
    ContactUpdated,
    Favorited,
    Invalid,
    NotFavorite,
    NotFound,
    Unfavorited,
)
from contact_book.bootstrap import create_service
from contact_book.domain import (
    CannotFavoriteMissingContact,
    CannotRemoveMissingContact,
    Contact,
    ContactBook,
    ContactBookError,
    ContactError,
    ContactId,
    InvalidAttribute,
    InvalidName,
    NoSuchContact,
    NotAFavorite,
    SocialMediaWebsite,
    SocialProfile,
)

__all__ = [
    "CannotFavoriteMissingContact",
    "CannotRemoveMissingContact",
    "Contact",
    "ContactAdded",
    "ContactBook",
    "ContactBookError",
    "ContactCardData",
    "ContactError",
    "ContactId",
    "ContactRemoved",
    "ContactService",
    "ContactSummary",
    "ContactUpdated",
    "Favorited",
    "Invalid",
    "InvalidAttribute",
    "InvalidName",
    "NoSuchContact",
    "NotAFavorite",
    "NotFavorite",
    "NotFound",
    "SocialMediaWebsite",
    "SocialProfile",
    "Unfavorited",
    "create_service",
]
