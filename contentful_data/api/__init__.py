"""Public client API."""

from .client import ContentfulClient
from .parameters import SearchParameters, parameters

__all__ = ["ContentfulClient", "SearchParameters", "parameters"]
