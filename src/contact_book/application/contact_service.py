"""Contact directory use cases over one explicitly owned ContactBook."""

import logging
from collections.abc import Callable

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
from contact_book.domain import (
    Contact,
    ContactBook,
    ContactBookError,
    ContactError,
    ContactId,
    NotAFavorite,
    SocialMediaWebsite,
)

logger = logging.getLogger(__name__)

# Marks an update_contact field the caller did not pass.
_UNSET = object()


class ContactService:
    """Holds the current ContactBook and replaces it after every successful mutation.

    The domain raises; this layer turns those errors into result dataclasses
    for the presentation layer.
    """

    def __init__(
        self,
        book: ContactBook | None = None,
        *,
        phone_formatter: Callable[[str], str] | None = None,
    ) -> None:
        self._book = book if book is not None else ContactBook()
        self._format_phone = phone_formatter

    @property
    def book(self) -> ContactBook:
        """The current book value. Mutations through the service never alter it in place."""
        return self._book

    def _resolve_id(self, contact_id: ContactId | str) -> ContactId | None:
        if isinstance(contact_id, ContactId):
            return contact_id
        try:
            return ContactId.parse(contact_id)
        except ValueError:
            return None

    def _phone(self, raw: str) -> str:
        if self._format_phone is None or not isinstance(raw, str) or not raw.strip():
            return raw
        return self._format_phone(raw)

    def _summary(self, contact_id: ContactId, contact: Contact) -> ContactSummary:
        return ContactSummary(
            contact_id=contact_id,
            name=contact.name,
            address=contact.address,
            email=contact.email,
            phone_number=contact.phone_number,
            social_profiles=contact.social_profiles,
            favorite=self._book.is_favorite(contact_id),
        )

    def add_contact(self, card: ContactCardData) -> ContactAdded | Invalid:
        """Create a contact from a card. All fields are applied or none are."""
        try:
            contact = Contact.create(card.name)
            if card.address is not None:
                contact = contact.with_address(card.address)
            if card.email is not None:
                contact = contact.with_email(card.email)
            if card.phone_number is not None:
                contact = contact.with_phone(self._phone(card.phone_number))
            for site, link in card.social_profiles:
                contact = contact.add_social_profile(SocialMediaWebsite.parse(site), link)
        except ContactError as e:
            logger.debug("Rejected contact card: %s", e)
            return Invalid(reason=str(e))

        contact_id, self._book = self._book.add_contact(contact)
        logger.info("Contact added: %s", contact_id)
        return ContactAdded(contact_id=contact_id, name=contact.name)

    def list_contacts(self) -> list[ContactSummary]:
        """Return all contacts. Order is not meaningful."""
        return [self._summary(cid, c) for cid, c in self._book.list_contacts()]

    def get_contact(self, contact_id: ContactId | str) -> ContactSummary | NotFound:
        cid = self._resolve_id(contact_id)
        if cid is None:
            return NotFound(contact_id=contact_id)
        try:
            contact = self._book.get_contact(cid)
        except ContactBookError:
            return NotFound(contact_id=contact_id)
        return self._summary(cid, contact)

    def update_contact(
        self,
        contact_id: ContactId | str,
        *,
        address: str | None | object = _UNSET,
        email: str | None | object = _UNSET,
        phone_number: str | None | object = _UNSET,
    ) -> ContactUpdated | NotFound | Invalid:
        """Set (str) or clear (None) address, email and phone. Omitted fields are left as they are."""

        def edit(contact: Contact) -> Contact:
            if address is None:
                contact = contact.without_address()
            elif address is not _UNSET:
                contact = contact.with_address(address)
            if email is None:
                contact = contact.without_email()
            elif email is not _UNSET:
                contact = contact.with_email(email)
            if phone_number is None:
                contact = contact.without_phone()
            elif phone_number is not _UNSET:
                contact = contact.with_phone(self._phone(phone_number))
            return contact

        return self._edit(contact_id, edit)

    def add_social_profile(
        self,
        contact_id: ContactId | str,
        site: SocialMediaWebsite | str,
        link: str,
    ) -> ContactUpdated | NotFound | Invalid:
        return self._edit(
            contact_id,
            lambda c: c.add_social_profile(SocialMediaWebsite.parse(site), link),
        )

    def remove_social_profile(
        self, contact_id: ContactId | str, link: str
    ) -> ContactUpdated | NotFound | Invalid:
        return self._edit(contact_id, lambda c: c.remove_social_profile(link))

    def _edit(
        self,
        contact_id: ContactId | str,
        edit: Callable[[Contact], Contact],
    ) -> ContactUpdated | NotFound | Invalid:
        cid = self._resolve_id(contact_id)
        if cid is None or cid not in self._book:
            return NotFound(contact_id=contact_id)
        try:
            updated = edit(self._book.get_contact(cid))
        except ContactError as e:
            logger.debug("Rejected update for %s: %s", cid, e)
            return Invalid(reason=str(e))
        self._book = self._book.replace_contact(cid, updated)
        logger.info("Contact updated: %s", cid)
        return ContactUpdated(contact_id=cid)

    def favorite(self, contact_id: ContactId | str) -> Favorited | NotFound:
        cid = self._resolve_id(contact_id)
        if cid is None:
            return NotFound(contact_id=contact_id)
        try:
            self._book = self._book.add_favorite(cid)
        except ContactBookError:
            logger.debug("Cannot favorite missing contact %s", cid)
            return NotFound(contact_id=contact_id)
        logger.info("Contact favorited: %s", cid)
        return Favorited(contact_id=cid)

    def unfavorite(
        self, contact_id: ContactId | str
    ) -> Unfavorited | NotFound | NotFavorite:
        cid = self._resolve_id(contact_id)
        if cid is None:
            return NotFound(contact_id=contact_id)
        try:
            self._book = self._book.remove_favorite(cid)
        except NotAFavorite:
            return NotFavorite(contact_id=cid)
        except ContactBookError:
            return NotFound(contact_id=contact_id)
        logger.info("Contact unfavorited: %s", cid)
        return Unfavorited(contact_id=cid)

    def list_favorites(self) -> list[ContactSummary]:
        return [
            self._summary(cid, self._book.get_contact(cid))
            for cid in self._book.list_favorite_ids()
        ]

    def remove_contact(self, contact_id: ContactId | str) -> ContactRemoved | NotFound:
        cid = self._resolve_id(contact_id)
        if cid is None:
            return NotFound(contact_id=contact_id)
        try:
            self._book = self._book.remove_contact(cid)
        except ContactBookError:
            return NotFound(contact_id=contact_id)
        logger.info("Contact removed: %s", cid)
        return ContactRemoved(contact_id=cid)
