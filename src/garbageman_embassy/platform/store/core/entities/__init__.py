"""Configuration store entities."""
