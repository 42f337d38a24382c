"""Health value objects."""
