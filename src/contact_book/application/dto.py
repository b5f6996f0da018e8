"""Input DTO and result types for the contact service."""

from dataclasses import dataclass, field

from contact_book.domain import ContactId, SocialMediaWebsite, SocialProfile


@dataclass(frozen=True)
class ContactCardData:
    """Contact data as entered in the presentation layer. Site tags may be raw strings."""

    name: str
    address: str | None = None
    email: str | None = None
    phone_number: str | None = None
    social_profiles: tuple[tuple[SocialMediaWebsite | str, str], ...] = field(default=())


@dataclass(frozen=True)
class ContactSummary:
    """One contact as returned by list_contacts, list_favorites and get_contact."""

    contact_id: ContactId
    name: str
    address: str | None = None
    email: str | None = None
    phone_number: str | None = None
    social_profiles: tuple[SocialProfile, ...] = ()
    favorite: bool = False


# --- add / update results ---


@dataclass(frozen=True)
class ContactAdded:
    contact_id: ContactId
    name: str


@dataclass(frozen=True)
class ContactUpdated:
    contact_id: ContactId


@dataclass(frozen=True)
class Invalid:
    """Input was rejected (e.g. blank name or attribute)."""

    reason: str


# --- lookup / favorite / remove results ---


@dataclass(frozen=True)
class NotFound:
    """No contact with this id. The id is kept as given by the caller."""

    contact_id: ContactId | str


@dataclass(frozen=True)
class Favorited:
    contact_id: ContactId


@dataclass(frozen=True)
class Unfavorited:
    contact_id: ContactId


@dataclass(frozen=True)
class NotFavorite:
    """The contact exists but is not a favorite."""

    contact_id: ContactId


@dataclass(frozen=True)
class ContactRemoved:
    contact_id: ContactId
