"""Profile domain: local records of identity-provider users."""

from pennywise.domain.profile.profile import Profile
from pennywise.domain.profile.profile_repository import ProfileRepository

__all__ = ["Profile", "ProfileRepository"]
