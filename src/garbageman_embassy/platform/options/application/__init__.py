"""Option application layer."""
