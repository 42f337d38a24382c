"""Configuration schema services."""
