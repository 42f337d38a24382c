"""Migration value objects."""
