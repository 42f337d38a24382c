"""Configuration schema entities."""
