"""Migration entities."""
