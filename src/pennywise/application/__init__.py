"""Application layer: commands, queries, ports and DTOs."""
