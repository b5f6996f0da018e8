"""Error taxonomy for contacts and the contact book.

Contact errors are ValueErrors (bad input). Book errors are LookupErrors
(the addressed contact is missing or not in the expected state).
"""


class ContactError(ValueError):
    """Base class for invalid contact data."""


class InvalidName(ContactError):
    """Contact name failed validation (e.g. blank)."""


class InvalidAttribute(ContactError):
    """Address, email, phone or social profile link failed validation."""


class ContactBookError(LookupError):
    """Base class for contact book errors. Carries the offending contact id."""

    message = "Contact book error."

    def __init__(self, contact_id) -> None:
        self.contact_id = contact_id
        super().__init__(f"{self.message} (id={contact_id})")


class NoSuchContact(ContactBookError):
    message = "There is no such contact in the contact book."


class CannotFavoriteMissingContact(ContactBookError):
    message = "Cannot favorite a contact that is not in the book."


class NotAFavorite(ContactBookError):
    message = "The given contact is not a favorite."


class CannotRemoveMissingContact(ContactBookError):
    message = "Cannot remove a contact that is not in the book."
