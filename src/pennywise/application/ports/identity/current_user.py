"""CurrentUser - pennywise's view of the authenticated user.

This is a port that defines what the application needs from the identity
provider. The presentation layer builds it from a verified access token.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class CurrentUser:
    """Immutable representation of the current authenticated user."""

    user_id: UUID
    email: str

    def __str__(self) -> str:
        return f"CurrentUser({self.email})"

    def __repr__(self) -> str:
        return f"CurrentUser(user_id={self.user_id}, email={self.email!r})"
