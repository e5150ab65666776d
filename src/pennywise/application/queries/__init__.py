"""Application queries - read operations."""
