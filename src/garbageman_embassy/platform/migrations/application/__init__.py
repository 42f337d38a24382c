"""Migration application layer."""
