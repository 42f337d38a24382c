"""Health core domain layer."""
