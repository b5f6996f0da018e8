"""Domain entities: Contact, SocialProfile, and SocialMediaWebsite."""

from dataclasses import dataclass, field, replace
from enum import Enum

from contact_book.domain.errors import InvalidAttribute, InvalidName


class SocialMediaWebsite(str, Enum):
    """Where a social profile link lives. Unrecognised sites map to UNKNOWN."""

    GITHUB = "github"
    TWITTER = "twitter"
    MYSPACE = "myspace"
    LINKEDIN = "linkedin"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: "str | SocialMediaWebsite | None") -> "SocialMediaWebsite":
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return cls.UNKNOWN
        tag = value.strip().lower()
        try:
            return cls(tag)
        except ValueError:
            return cls.UNKNOWN


def _clean_attribute(value: str, label: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidAttribute(f"Contact {label} must be a non-empty string.")
    return value.strip()


_OPTIONAL_FIELDS = (
    ("address", "address"),
    ("email", "email"),
    ("phone_number", "phone number"),
)


@dataclass(frozen=True)
class SocialProfile:
    """One social media profile: the site it belongs to and its link."""

    site: SocialMediaWebsite
    link: str

    def __post_init__(self):
        if not isinstance(self.site, SocialMediaWebsite):
            raise InvalidAttribute(f"Unsupported social media site: {self.site!r}.")
        object.__setattr__(self, "link", _clean_attribute(self.link, "social profile link"))


@dataclass(frozen=True)
class Contact:
    """
    One directory entry. Only the name is required.
    A Contact is immutable: every with_/without_ method returns a new Contact.
    """

    name: str
    address: str | None = None
    email: str | None = None
    phone_number: str | None = None
    social_profiles: tuple[SocialProfile, ...] = field(default=())

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidName("Contact name must be non-empty.")
        object.__setattr__(self, "name", self.name.strip())
        for attr, label in _OPTIONAL_FIELDS:
            value = getattr(self, attr)
            if value is not None:
                object.__setattr__(self, attr, _clean_attribute(value, label))

        for profile in self.social_profiles:
            if not isinstance(profile, SocialProfile):
                raise InvalidAttribute(f"Not a social profile: {profile!r}.")

        # One entry per link (last wins), kept sorted so equality ignores insertion order.
        by_link = {profile.link: profile for profile in self.social_profiles}
        object.__setattr__(
            self,
            "social_profiles",
            tuple(by_link[link] for link in sorted(by_link)),
        )

    @classmethod
    def create(cls, name: str) -> "Contact":
        """Return a Contact with the given name and no other attributes."""
        return cls(name=name)

    # Address

    def with_address(self, address: str) -> "Contact":
        return replace(self, address=_clean_attribute(address, "address"))

    def without_address(self) -> "Contact":
        return replace(self, address=None)

    # Email

    def with_email(self, email: str) -> "Contact":
        return replace(self, email=_clean_attribute(email, "email"))

    def without_email(self) -> "Contact":
        return replace(self, email=None)

    # Phone number

    def with_phone(self, phone_number: str) -> "Contact":
        return replace(self, phone_number=_clean_attribute(phone_number, "phone number"))

    def without_phone(self) -> "Contact":
        return replace(self, phone_number=None)

    # Social profiles

    def add_social_profile(self, site: SocialMediaWebsite, link: str) -> "Contact":
        """Add a profile, or reclassify it if the link is already present."""
        if not isinstance(site, SocialMediaWebsite):
            raise InvalidAttribute(f"Unsupported social media site: {site!r}.")
        link = _clean_attribute(link, "social profile link")
        kept = tuple(p for p in self.social_profiles if p.link != link)
        return replace(self, social_profiles=kept + (SocialProfile(site=site, link=link),))

    def remove_social_profile(self, link: str) -> "Contact":
        """Remove the profile with this link. Removing an absent link is a no-op."""
        link = _clean_attribute(link, "social profile link")
        kept = tuple(p for p in self.social_profiles if p.link != link)
        return replace(self, social_profiles=kept)

    def social_profile_site(self, link: str) -> SocialMediaWebsite | None:
        link = link.strip() if isinstance(link, str) else link
        for profile in self.social_profiles:
            if profile.link == link:
                return profile.site
        return None
