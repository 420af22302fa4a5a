"""Route group exports."""

from . import cities, contact, crimes, health, search, seo

__all__ = ["crimes", "search", "contact", "cities", "health", "seo"]
