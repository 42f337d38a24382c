"""Properties application layer."""
