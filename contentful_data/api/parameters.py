"""Search parameter builder for entries queries.

Architecture:
    ``SearchParameters`` is a fluent, chainable builder over the query string
    of the entries endpoint. Every method mutates the builder and returns it,
    so calls can be chained:

        >>> params = (SearchParameters()
        ...     .by_content_type("page")
        ...     .by_field_value("title", "Main page")
        ...     .limit(10))

    Any parameter documented for the Content Delivery API can be passed with
    ``set``/``add``; the named helpers cover the common ones.

Design Decisions:
    - Fixed include depth: ``to_query`` always sends ``include=10`` and
      overrides any value set by the caller, since flattening needs every
      referenced item in ``includes``
    - Multi-valued: ``add`` keeps repeated keys, like a URL query string
    - Stable encoding: keys are emitted in sorted order
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from ..core.config import DEFAULT_INCLUDE_DEPTH


class SearchParameters:
    """Query parameters for the entries search."""

    def __init__(self, values: Mapping[str, str | Sequence[str]] | None = None) -> None:
        self._values: dict[str, list[str]] = {}
        for key, value in (values or {}).items():
            if isinstance(value, str):
                self._values[key] = [value]
            else:
                self._values[key] = [str(v) for v in value]

    def set(self, key: str, value: str | int) -> SearchParameters:
        """Set a parameter, replacing any existing values."""
        self._values[key] = [str(value)]
        return self

    def add(self, key: str, value: str | int) -> SearchParameters:
        """Add a value to a parameter, keeping existing values."""
        self._values.setdefault(key, []).append(str(value))
        return self

    def get(self, key: str) -> str | None:
        """First value of a parameter, or None."""
        values = self._values.get(key)
        return values[0] if values else None

    def by_content_type(self, content_type: str) -> SearchParameters:
        """Search entries of the given content type."""
        return self.set("content_type", content_type)

    def by_field_value(self, field_name: str, field_value: str) -> SearchParameters:
        """Search entries whose field equals the value.

        Requires ``by_content_type`` as well, the API only filters on fields
        within one content type.
        """
        return self.add(f"fields.{field_name}", field_value)

    def limit(self, limit: int) -> SearchParameters:
        """Limit the number of returned entries."""
        return self.set("limit", limit)

    def skip(self, skip: int) -> SearchParameters:
        """Skip the first n entries."""
        return self.set("skip", skip)

    def order(self, *fields: str) -> SearchParameters:
        """Order by one or more attributes, prefix with ``-`` for descending."""
        return self.set("order", ",".join(fields))

    def by_id(self, entry_id: str) -> SearchParameters:
        """Search the entry with the given ID."""
        return self.set("sys.id", entry_id)

    def by_locale(self, locale: str) -> SearchParameters:
        """Return fields in the given locale."""
        return self.locale(locale)

    def locale(self, locale: str) -> SearchParameters:
        return self.set("locale", locale)

    def to_query(self) -> list[tuple[str, str]]:
        """Encode as ``(key, value)`` pairs, sorted by key.

        ``include`` is always the full depth, whatever was set before.
        """
        values = dict(self._values)
        values["include"] = [str(DEFAULT_INCLUDE_DEPTH)]
        return [(key, value) for key in sorted(values) for value in values[key]]

    def copy(self) -> SearchParameters:
        return SearchParameters(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SearchParameters):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        return f"SearchParameters({self._values!r})"


def parameters() -> SearchParameters:
    """Return an empty SearchParameters builder."""
    return SearchParameters()
