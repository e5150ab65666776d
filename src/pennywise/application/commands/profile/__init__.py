"""Profile commands."""

from pennywise.application.commands.profile.update_profile_command import (
    UpdateProfileCommand,
)

__all__ = ["UpdateProfileCommand"]
