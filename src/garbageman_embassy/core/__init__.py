"""Core building blocks shared by every platform feature."""
