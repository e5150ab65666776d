"""Auth schemas and data structures.

These are simple data classes used for transferring identity
data between components.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

ANONYMOUS_ROLE = "anon"


@dataclass(frozen=True)
class TokenPayload:
    """Decoded JWT token payload.

    This represents the data extracted from a verified JWT token.

    Attributes
    ----------
    user_id
        The unique identifier of the user (``sub`` claim)
    email
        The user's email address
    exp
        Token expiration timestamp
    role
        Role claim set by the identity provider (e.g. "authenticated")
    """

    user_id: UUID
    email: str
    exp: datetime
    role: str = "authenticated"

    def is_expired(self) -> bool:
        """Check if the token has expired."""
        return datetime.now(tz=self.exp.tzinfo) > self.exp

    def is_anonymous(self) -> bool:
        """Check if this token belongs to an anonymous (signed-out) session."""
        return self.role == ANONYMOUS_ROLE
