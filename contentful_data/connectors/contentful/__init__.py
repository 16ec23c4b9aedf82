"""Content Delivery API endpoint definitions."""

from . import entries

__all__ = ["entries"]
