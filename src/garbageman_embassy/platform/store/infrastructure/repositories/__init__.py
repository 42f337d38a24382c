"""Configuration repositories."""
