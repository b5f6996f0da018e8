"""ContactBook aggregate: contacts by id plus the set of favorite ids.

Every operation returns a new ContactBook and leaves the receiver untouched.
Favorites are always a subset of the contact ids.
"""

from collections.abc import Iterable, Mapping

from contact_book.domain.entities import Contact
from contact_book.domain.errors import (
    CannotFavoriteMissingContact,
    CannotRemoveMissingContact,
    NoSuchContact,
    NotAFavorite,
)
from contact_book.domain.ids import ContactId


class ContactBook:
    """Owns the contacts and the favorites set."""

    __slots__ = ("_contacts", "_favorites")

    def __init__(self) -> None:
        self._contacts: dict[ContactId, Contact] = {}
        self._favorites: frozenset[ContactId] = frozenset()

    @classmethod
    def new(cls) -> "ContactBook":
        return cls()

    @classmethod
    def _from_parts(
        cls,
        contacts: Mapping[ContactId, Contact],
        favorites: Iterable[ContactId],
    ) -> "ContactBook":
        book = cls()
        book._contacts = dict(contacts)
        book._favorites = frozenset(favorites)
        return book

    def __len__(self) -> int:
        return len(self._contacts)

    def __contains__(self, contact_id: object) -> bool:
        return contact_id in self._contacts

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ContactBook):
            return NotImplemented
        return self._contacts == other._contacts and self._favorites == other._favorites

    __hash__ = None

    def __repr__(self) -> str:
        return f"ContactBook(contacts={len(self._contacts)}, favorites={len(self._favorites)})"

    # Contacts

    def add_contact(self, contact: Contact) -> tuple[ContactId, "ContactBook"]:
        """Store a contact under a fresh id. Returns (id, new book)."""
        contact_id = ContactId.new()
        contacts = dict(self._contacts)
        contacts[contact_id] = contact
        return contact_id, self._from_parts(contacts, self._favorites)

    def list_contacts(self) -> list[tuple[ContactId, Contact]]:
        """Return every (id, contact) pair. Callers must not rely on the order."""
        return list(self._contacts.items())

    def get_contact(self, contact_id: ContactId) -> Contact:
        try:
            return self._contacts[contact_id]
        except KeyError:
            raise NoSuchContact(contact_id) from None

    def replace_contact(self, contact_id: ContactId, contact: Contact) -> "ContactBook":
        """Bind a new Contact value to an existing id. Favorite status is kept."""
        if contact_id not in self._contacts:
            raise NoSuchContact(contact_id)
        contacts = dict(self._contacts)
        contacts[contact_id] = contact
        return self._from_parts(contacts, self._favorites)

    def remove_contact(self, contact_id: ContactId) -> "ContactBook":
        """Remove a contact and drop it from the favorites."""
        if contact_id not in self._contacts:
            raise CannotRemoveMissingContact(contact_id)
        contacts = {cid: c for cid, c in self._contacts.items() if cid != contact_id}
        return self._from_parts(contacts, self._favorites - {contact_id})

    # Favorites

    def add_favorite(self, contact_id: ContactId) -> "ContactBook":
        if contact_id not in self._contacts:
            raise CannotFavoriteMissingContact(contact_id)
        return self._from_parts(self._contacts, self._favorites | {contact_id})

    def remove_favorite(self, contact_id: ContactId) -> "ContactBook":
        if contact_id not in self._contacts:
            raise NoSuchContact(contact_id)
        if contact_id not in self._favorites:
            raise NotAFavorite(contact_id)
        return self._from_parts(self._contacts, self._favorites - {contact_id})

    def list_favorite_ids(self) -> list[ContactId]:
        """Return the favorite ids. Callers must not rely on the order."""
        return list(self._favorites)

    def is_favorite(self, contact_id: ContactId) -> bool:
        return contact_id in self._favorites
