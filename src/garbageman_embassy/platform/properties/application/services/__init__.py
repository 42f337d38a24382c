"""Properties services."""
