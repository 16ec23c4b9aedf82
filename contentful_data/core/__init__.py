"""Core types: enums, exceptions and configuration."""

from .config import (
    CDN_URL,
    DEFAULT_INCLUDE_DEPTH,
    DEFAULT_RETRY_SECONDS,
    PREVIEW_URL,
    RATE_LIMIT_RESET_HEADER,
    ContentfulConfig,
    get_base_url,
)
from .enums import LINK_MARKER, ErrorKind, LinkType
from .exceptions import (
    ContentfulError,
    CyclicReferenceError,
    DanglingReferenceError,
    FlattenError,
    InvalidLinkKindError,
    MoreThanOneEntryError,
    NoEntriesError,
    ProviderError,
    RateLimitError,
    ReferenceDepthError,
    ResultCountError,
    StructuralMismatchError,
)

__all__ = [
    # Enums
    "ErrorKind",
    "LinkType",
    "LINK_MARKER",
    # Configuration
    "CDN_URL",
    "PREVIEW_URL",
    "DEFAULT_INCLUDE_DEPTH",
    "DEFAULT_RETRY_SECONDS",
    "RATE_LIMIT_RESET_HEADER",
    "ContentfulConfig",
    "get_base_url",
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
