"""Profile of an identity-provider user inside this application."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID

from pennywise.domain.shared.time import utc_now


@dataclass
class Profile:
    """Local record of an authenticated user.

    The id is the identity provider's user id; no credentials are stored.
    """

    id: UUID
    email: Optional[str] = None
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    def change_email(self, email: Optional[str]) -> None:
        self.email = email.strip().lower() if email else None
        self.updated_at = utc_now()
