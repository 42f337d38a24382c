"""Health check entities."""
