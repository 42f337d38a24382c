"""Option entities."""
