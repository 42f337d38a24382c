"""Option value objects."""
