"""Identity registry: the in-memory table of stored Git identities."""

import re
from dataclasses import dataclass
from typing import Any, Optional

from .exceptions import IncompleteIdentityError, InvalidSelectionError

_WHITESPACE = re.compile(r"\s")


def derive_key(name: str) -> str:
    """Derive the configuration key for a display name.

    Every whitespace character is replaced by a single underscore, so
    ``"Jane Q Doe"`` becomes ``"Jane_Q_Doe"``.
    """
    return _WHITESPACE.sub("_", name)


@dataclass(frozen=True)
class Identity:
    """A Git author identity."""
    name: str
    email: str

    def to_dict(self) -> dict[str, str]:
        """Convert identity to a configuration record."""
        return {"name": self.name, "email": self.email}

    @classmethod
    def from_dict(cls, data: Any, key: str | None = None) -> "Identity":
        """Create identity from a configuration record.

        Raises:
            IncompleteIdentityError: If the record is not a table or lacks
                a string name or email.
        """
        name = data.get("name") if isinstance(data, dict) else None
        email = data.get("email") if isinstance(data, dict) else None
        if not isinstance(name, str) or not isinstance(email, str):
            raise IncompleteIdentityError(
                f"Identity '{key}' is missing a name or email",
                key=key,
            )
        return cls(name=name, email=email)


class IdentityRegistry:
    """Keyed view over the ``identities`` table of a configuration.

    The registry wraps the live table, so inserts are visible to the
    configuration that owns it.
    """

    def __init__(self, identities: dict[str, Any]) -> None:
        self.identities = identities

    def __len__(self) -> int:
        return len(self.identities)

    def __contains__(self, key: object) -> bool:
        return key in self.identities

    def sorted_keys(self) -> list[str]:
        """Get all keys in ascending order."""
        return sorted(self.identities)

    def list_sorted(self) -> list[tuple[str, Any]]:
        """Get all ``(key, record)`` pairs sorted by key."""
        return [(key, self.identities[key]) for key in self.sorted_keys()]

    def get_by_index(
        self,
        index: int,
        ordered_keys: Optional[list[str]] = None,
    ) -> Identity:
        """Look up an identity by its 1-based position in the sorted listing.

        Args:
            index: Position as shown in the menu
            ordered_keys: Keys as displayed; defaults to the current sorted keys

        Returns:
            The identity at that position

        Raises:
            InvalidSelectionError: If the index is outside ``[1, count]``
        """
        if ordered_keys is None:
            ordered_keys = self.sorted_keys()

        if index < 1 or index > len(ordered_keys):
            raise InvalidSelectionError(
                f"Invalid selection: {index}",
                details=f"Choose a number between 1 and {len(ordered_keys)}"
                if ordered_keys
                else "No identities stored yet",
            )

        key = ordered_keys[index - 1]
        return Identity.from_dict(self.identities.get(key), key=key)

    def insert(self, key: str, identity: Identity) -> None:
        """Store an identity, replacing any entry with the same key."""
        self.identities[key] = identity.to_dict()
