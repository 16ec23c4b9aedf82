"""Contentful Data - Content Delivery API client with reference flattening."""

from .api import ContentfulClient, SearchParameters, parameters
from .core import (
    ContentfulConfig,
    ContentfulError,
    CyclicReferenceError,
    DanglingReferenceError,
    ErrorKind,
    FlattenError,
    InvalidLinkKindError,
    LinkType,
    MoreThanOneEntryError,
    NoEntriesError,
    ProviderError,
    RateLimitError,
    ReferenceDepthError,
    ResultCountError,
    StructuralMismatchError,
)
from .flatten import (
    IncludeTable,
    append_includes,
    flatten_field,
    flatten_item,
    flatten_items,
    flatten_search_results,
    materialize,
)
from .models import Asset, AssetFile, Includes, Information, Item, ItemInfo, SearchResults

__version__ = "0.1.0"

__all__ = [
    # Client
    "ContentfulClient",
    "ContentfulConfig",
    "SearchParameters",
    "parameters",
    # Enums
    "LinkType",
    "ErrorKind",
    # Models
    "Asset",
    "AssetFile",
    "Information",
    "Includes",
    "Item",
    "ItemInfo",
    "SearchResults",
    # Flattening
    "IncludeTable",
    "append_includes",
    "flatten_field",
    "flatten_item",
    "flatten_items",
    "flatten_search_results",
    "materialize",
    # Exceptions
    "ContentfulError",
    "ProviderError",
    "RateLimitError",
    "ResultCountError",
    "NoEntriesError",
    "MoreThanOneEntryError",
    "FlattenError",
    "InvalidLinkKindError",
    "DanglingReferenceError",
    "CyclicReferenceError",
    "ReferenceDepthError",
    "StructuralMismatchError",
]
