"""Derived properties view."""

from .application.services.properties_view import PropertiesView

__all__ = ["PropertiesView"]
