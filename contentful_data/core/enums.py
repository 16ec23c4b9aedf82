"""Core enumerations shared by the flattening engine and the client.

Architecture:
    String enums mirror the literal values used in the Content Delivery API
    JSON contract, so they compare equal to the raw strings found in ``sys``
    blocks and serialize without conversion.

Key Types:
    - LinkType: Kinds of items a link descriptor can point to
    - ErrorKind: Closed set of failure categories carried by exceptions
"""

from enum import Enum

# Discriminator value of ``sys.type`` on a link descriptor
LINK_MARKER = "Link"


class LinkType(str, Enum):
    """Kinds of items that can be referenced and included."""

    ENTRY = "Entry"
    ASSET = "Asset"

    @classmethod
    def parse(cls, value: object) -> "LinkType | None":
        """Return the matching member, or None for any other value."""
        for member in cls:
            if member.value == value:
                return member
        return None


class ErrorKind(str, Enum):
    """Closed set of failure categories.

    Every exception raised by the library carries one of these as its
    ``kind`` attribute, so callers can branch on the category without
    matching message strings.
    """

    PROVIDER = "provider"
    RATE_LIMITED = "rate_limited"
    EMPTY_RESULT = "empty_result"
    TOO_MANY_RESULTS = "too_many_results"
    INVALID_LINK_KIND = "invalid_link_kind"
    DANGLING_REFERENCE = "dangling_reference"
    CYCLIC_REFERENCE = "cyclic_reference"
    REFERENCE_DEPTH = "reference_depth"
    STRUCTURAL_MISMATCH = "structural_mismatch"
