"""Configuration schema application layer."""
