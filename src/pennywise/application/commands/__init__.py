"""Application commands - write operations.

Each command is built from a RepositoryFactory via ``from_factory`` and run
with ``execute``. Committing the unit of work is left to the caller.
"""
