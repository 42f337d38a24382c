"""Health infrastructure adapters."""
