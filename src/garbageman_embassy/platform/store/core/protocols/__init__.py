"""Configuration store protocols."""
