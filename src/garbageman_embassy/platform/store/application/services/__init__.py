"""Configuration store services."""
