"""Health application layer."""
