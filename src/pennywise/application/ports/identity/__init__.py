from pennywise.application.ports.identity.current_user import CurrentUser

__all__ = ["CurrentUser"]
