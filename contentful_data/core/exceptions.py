"""Custom exception hierarchy."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .enums import ErrorKind

if TYPE_CHECKING:
    from ..models import Item


class ContentfulError(Exception):
    """Base exception for all library errors."""

    kind: ErrorKind = ErrorKind.PROVIDER


class ProviderError(ContentfulError):
    """Error from the Content Delivery API."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code


class RateLimitError(ProviderError):
    """Rate limit hit and the request could not be retried before its deadline."""

    kind = ErrorKind.RATE_LIMITED

    def __init__(self, message: str = "contentful: too many requests", retry_after: int = 2) -> None:
        super().__init__(message, status_code=429)
        self.retry_after = retry_after


class ResultCountError(ContentfulError):
    """Search returned a different number of entries than the caller expected."""

    def __init__(self, message: str, total: int, count: int) -> None:
        super().__init__(message)
        self.total = total
        self.count = count


class NoEntriesError(ResultCountError):
    """Search returned zero entries."""

    kind = ErrorKind.EMPTY_RESULT

    def __init__(self, total: int = 0, count: int = 0) -> None:
        super().__init__("contentful: no entries returned", total, count)


class MoreThanOneEntryError(ResultCountError):
    """Exactly one entry was expected but more were returned."""

    kind = ErrorKind.TOO_MANY_RESULTS

    def __init__(self, total: int, count: int) -> None:
        super().__init__("contentful: more than one entry was returned", total, count)


class FlattenError(ContentfulError):
    """Base class for failures while inlining references."""


class InvalidLinkKindError(FlattenError):
    """A link declares a kind other than Entry or Asset."""

    kind = ErrorKind.INVALID_LINK_KIND

    def __init__(self, link_type: str, link_id: str) -> None:
        super().__init__(f"unsupported link kind {link_type!r} for id {link_id!r}")
        self.link_type = link_type
        self.link_id = link_id


class DanglingReferenceError(FlattenError):
    """A well-formed link points to an item absent from the includes.

    ``searched`` holds the items of the sequence that was searched, which
    usually reveals an ``include`` depth that was too shallow.
    """

    kind = ErrorKind.DANGLING_REFERENCE

    def __init__(self, link_type: str, link_id: str, searched: list[Item]) -> None:
        searched_ids = [item.sys.id for item in searched]
        super().__init__(
            f"could not find {link_type} with id {link_id!r} from includes, "
            f"searched ids: {searched_ids}"
        )
        self.link_type = link_type
        self.link_id = link_id
        self.searched = searched


class CyclicReferenceError(FlattenError):
    """Resolving a link re-entered an item that is still being flattened."""

    kind = ErrorKind.CYCLIC_REFERENCE

    def __init__(self, chain: list[tuple[str, str]]) -> None:
        path = " -> ".join(f"{link_type}:{link_id}" for link_type, link_id in chain)
        super().__init__(f"cyclic reference: {path}")
        self.chain = chain


class ReferenceDepthError(FlattenError):
    """Reference nesting exceeded the configured maximum depth."""

    kind = ErrorKind.REFERENCE_DEPTH

    def __init__(self, max_depth: int) -> None:
        super().__init__(f"references nested deeper than {max_depth} levels")
        self.max_depth = max_depth


class StructuralMismatchError(ContentfulError):
    """Flattened value does not fit the destination type."""

    kind = ErrorKind.STRUCTURAL_MISMATCH

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []
