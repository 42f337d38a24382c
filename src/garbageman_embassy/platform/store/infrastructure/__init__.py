"""Configuration store infrastructure adapters."""
