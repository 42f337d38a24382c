"""Configuration store application layer."""
