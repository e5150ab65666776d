"""SQLAlchemy persistence: models, user-scoped repositories and read adapters."""
