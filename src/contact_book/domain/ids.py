"""Contact identifiers: opaque random 128-bit tokens."""

import uuid
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ContactId:
    """
    Identifies one contact within a contact book.
    Generated fresh on every insertion and never reused.
    """

    value: uuid.UUID = field(default_factory=uuid.uuid4)

    def __post_init__(self):
        if not isinstance(self.value, uuid.UUID):
            raise TypeError(f"ContactId value must be a UUID, got {type(self.value).__name__}.")

    @classmethod
    def new(cls) -> "ContactId":
        return cls()

    @classmethod
    def parse(cls, text: str) -> "ContactId":
        """Parse the string form produced by str(). Raises ValueError if malformed."""
        return cls(uuid.UUID(str(text).strip()))

    def __str__(self) -> str:
        return str(self.value)
