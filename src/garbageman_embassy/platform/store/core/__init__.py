"""Configuration store core domain layer."""
