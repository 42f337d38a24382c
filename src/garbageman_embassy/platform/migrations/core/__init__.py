"""Migration core domain layer."""
