"""Unit tests for ContactService. In-memory book and ContactCardData only."""

from functools import partial

import pytest

from contact_book.application import (
    ContactAdded,
    ContactCardData,
    ContactRemoved,
    ContactService,
    ContactUpdated,
    Favorited,
    Invalid,
    NotFavorite,
    NotFound,
    Unfavorited,
)
from contact_book.domain import Contact, ContactBook, ContactId, SocialMediaWebsite
from contact_book.infrastructure import format_phone


@pytest.fixture
def service() -> ContactService:
    return ContactService(phone_formatter=partial(format_phone, default_region="US"))


def _add(service: ContactService, name: str = "Alice", **fields) -> ContactId:
    result = service.add_contact(ContactCardData(name=name, **fields))
    assert isinstance(result, ContactAdded)
    return result.contact_id


def test_add_contact_then_list(service: ContactService) -> None:
    result = service.add_contact(
        ContactCardData(
            name="Alice",
            email="alice@example.test",
            social_profiles=(("github", "https://github.com/alice"),),
        )
    )
    assert isinstance(result, ContactAdded)
    assert result.name == "Alice"

    listed = service.list_contacts()
    assert len(listed) == 1
    summary = listed[0]
    assert summary.contact_id == result.contact_id
    assert summary.email == "alice@example.test"
    assert summary.address is None
    assert summary.favorite is False
    assert summary.social_profiles[0].site is SocialMediaWebsite.GITHUB


def test_add_contact_formats_known_phone_numbers(service: ContactService) -> None:
    cid = _add(service, phone_number="202 555 1234")
    assert service.get_contact(cid).phone_number == "+12025551234"


def test_add_contact_keeps_unrecognised_phone_as_entered(service: ContactService) -> None:
    cid = _add(service, phone_number=" ext. 42 ")
    assert service.get_contact(cid).phone_number == "ext. 42"


def test_without_formatter_phone_is_stored_as_entered() -> None:
    service = ContactService()
    cid = _add(service, phone_number="202 555 1234")
    assert service.get_contact(cid).phone_number == "202 555 1234"


def test_invalid_card_is_not_stored(service: ContactService) -> None:
    r = service.add_contact(ContactCardData(name="  "))
    assert isinstance(r, Invalid)
    assert "name" in r.reason.lower()

    r2 = service.add_contact(ContactCardData(name="Bob", email=""))
    assert isinstance(r2, Invalid)
    assert service.list_contacts() == []


def test_get_contact_unknown_or_malformed_id(service: ContactService) -> None:
    unknown = ContactId.new()
    assert service.get_contact(unknown) == NotFound(contact_id=unknown)
    assert service.get_contact("garbage") == NotFound(contact_id="garbage")


def test_get_contact_accepts_string_id(service: ContactService) -> None:
    cid = _add(service)
    assert service.get_contact(str(cid)).contact_id == cid


def test_update_contact_sets_and_clears_fields(service: ContactService) -> None:
    cid = _add(service, address="1 Old Rd", email="a@example.test")
    r = service.update_contact(cid, address="2 New Rd", email=None)
    assert r == ContactUpdated(contact_id=cid)

    summary = service.get_contact(cid)
    assert summary.address == "2 New Rd"
    assert summary.email is None
    assert summary.phone_number is None


def test_update_contact_leaves_omitted_fields(service: ContactService) -> None:
    cid = _add(service, address="1 Old Rd")
    service.update_contact(cid, email="a@example.test")
    assert service.get_contact(cid).address == "1 Old Rd"


def test_update_contact_invalid_value_keeps_previous_state(service: ContactService) -> None:
    cid = _add(service, address="1 Old Rd")
    before = service.book
    r = service.update_contact(cid, address="   ", email="a@example.test")
    assert isinstance(r, Invalid)
    assert service.book is before
    assert service.get_contact(cid).email is None


def test_update_missing_contact(service: ContactService) -> None:
    assert isinstance(service.update_contact(ContactId.new(), address="x"), NotFound)


def test_social_profiles_through_service(service: ContactService) -> None:
    cid = _add(service)
    assert isinstance(
        service.add_social_profile(cid, "linkedin", "https://linkedin.com/in/alice"),
        ContactUpdated,
    )
    assert service.get_contact(cid).social_profiles[0].site is SocialMediaWebsite.LINKEDIN

    assert isinstance(service.remove_social_profile(cid, "https://nowhere.test"), ContactUpdated)
    assert isinstance(service.remove_social_profile(cid, "https://linkedin.com/in/alice"), ContactUpdated)
    assert service.get_contact(cid).social_profiles == ()

    assert isinstance(service.add_social_profile(cid, "github", ""), Invalid)


def test_favorite_and_unfavorite(service: ContactService) -> None:
    cid = _add(service)
    _add(service, name="Bob")

    assert service.favorite(cid) == Favorited(contact_id=cid)
    assert service.favorite(cid) == Favorited(contact_id=cid)
    favorites = service.list_favorites()
    assert [s.contact_id for s in favorites] == [cid]
    assert favorites[0].favorite is True

    assert service.unfavorite(cid) == Unfavorited(contact_id=cid)
    assert service.unfavorite(cid) == NotFavorite(contact_id=cid)
    assert service.list_favorites() == []


def test_favorite_unknown_contact(service: ContactService) -> None:
    unknown = ContactId.new()
    assert service.favorite(unknown) == NotFound(contact_id=unknown)
    assert service.unfavorite(unknown) == NotFound(contact_id=unknown)
    assert service.favorite("nope") == NotFound(contact_id="nope")


def test_remove_contact_cascades_to_favorites(service: ContactService) -> None:
    cid = _add(service)
    service.favorite(cid)

    assert service.remove_contact(cid) == ContactRemoved(contact_id=cid)
    assert service.list_favorites() == []
    assert service.get_contact(cid) == NotFound(contact_id=cid)
    assert service.remove_contact(cid) == NotFound(contact_id=cid)


def test_service_replaces_book_value_instead_of_mutating() -> None:
    initial = ContactBook()
    service = ContactService(initial)
    _add(service)
    assert len(initial) == 0
    assert len(service.book) == 1


def test_service_can_start_from_existing_book() -> None:
    cid, book = ContactBook().add_contact(Contact.create("Carol"))
    service = ContactService(book)
    assert service.get_contact(cid).name == "Carol"


def test_unrecognised_site_tag_is_classified_unknown(service: ContactService) -> None:
    cid = _add(service)
    assert service.add_social_profile(cid, 42, "https://x.example/alice") == ContactUpdated(contact_id=cid)
    assert service.get_contact(cid).social_profiles[0].site is SocialMediaWebsite.UNKNOWN
