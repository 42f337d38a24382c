"""Configuration schema core domain layer."""
