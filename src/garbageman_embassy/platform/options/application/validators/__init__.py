"""Option validators."""
