"""Unit tests for field, item and batch flattening.

Tests focus on link resolution, failure propagation and self-injection.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime

import pytest

from contentful_data.core import (
    CyclicReferenceError,
    DanglingReferenceError,
    ReferenceDepthError,
)
from contentful_data.flatten import (
    Flattener,
    append_includes,
    flatten_field,
    flatten_item,
    flatten_items,
    flatten_search_results,
)
from contentful_data.models import METADATA_KEYS, Includes, Item, SearchResults


def link(link_type: str, link_id: str) -> dict:
    return {"sys": {"type": "Link", "linkType": link_type, "id": link_id}}


def make_item(item_id: str, fields: dict, item_type: str = "Entry") -> Item:
    return Item.model_validate({"sys": {"type": item_type, "id": item_id}, "fields": fields})


class TestFlattenField:
    """Test flattening a single field value."""

    def test_resolves_link_and_merges_metadata(self):
        includes = Includes(entries=[make_item("e1", {"x": 1})])

        result = flatten_field(includes, link("Entry", "e1"))

        assert result == {
            "x": 1,
            "contentful_id": "e1",
            "contentful_contentType": "",
            "contentful_revision": 0,
            "contentful_createdAt": None,
            "contentful_updatedAt": None,
            "contentful_locale": "",
        }

    @pytest.mark.parametrize("value", ["text", 42, 4.2, False, None])
    def test_scalars_unchanged(self, value):
        assert flatten_field(Includes(), value) == value

    def test_list_of_links_keeps_order(self):
        includes = Includes(
            entries=[make_item("a", {"name": "A"}), make_item("b", {"name": "B"})]
        )

        result = flatten_field(includes, [link("Entry", "b"), link("Entry", "a")])

        assert [element["name"] for element in result] == ["B", "A"]

    def test_list_with_dangling_link_fails_whole_list(self):
        includes = Includes(entries=[make_item("a", {"name": "A"})])

        with pytest.raises(DanglingReferenceError) as exc_info:
            flatten_field(includes, [link("Entry", "a"), link("Entry", "b")])

        assert exc_info.value.link_id == "b"

    def test_dangling_asset(self):
        includes = Includes(assets=[make_item("other", {}, item_type="Asset")])

        with pytest.raises(DanglingReferenceError) as exc_info:
            flatten_field(includes, link("Asset", "missing"))

        assert exc_info.value.link_type == "Asset"
        assert exc_info.value.link_id == "missing"

    def test_inline_object_flattened_without_metadata(self):
        includes = Includes(assets=[make_item("img", {"title": "Image"}, item_type="Asset")])
        value = {"caption": "Hello", "image": link("Asset", "img")}

        result = flatten_field(includes, value)

        assert result["caption"] == "Hello"
        assert result["image"]["title"] == "Image"
        assert result["image"]["contentful_id"] == "img"
        assert "contentful_id" not in result

    def test_near_link_object_is_not_resolved(self):
        """An object failing the link rule is never reported as dangling."""
        value = {"sys": {"type": "Link", "linkType": "Entry", "id": ""}}

        assert flatten_field(Includes(), value) == value

    def test_nested_lists(self):
        includes = Includes(entries=[make_item("a", {"n": 1})])

        result = flatten_field(includes, [[link("Entry", "a")], []])

        assert result[0][0]["n"] == 1
        assert result[1] == []

    def test_resolves_references_recursively(self):
        includes = Includes(
            entries=[
                make_item("parent", {"child": link("Entry", "child")}),
                make_item("child", {"image": link("Asset", "img")}),
            ],
            assets=[make_item("img", {"title": "Leaf"}, item_type="Asset")],
        )

        result = flatten_field(includes, link("Entry", "parent"))

        assert result["child"]["image"]["title"] == "Leaf"

    def test_does_not_mutate_includes(self):
        child = make_item("c", {"tags": ["x"]})
        includes = Includes(entries=[child])

        result = flatten_field(includes, link("Entry", "c"))
        result["tags"].append("y")

        assert child.fields == {"tags": ["x"]}
        assert "contentful_id" not in child.fields


class TestFlattenItem:
    """Test flattening a whole item."""

    def test_link_free_item_returns_fields_plus_metadata(self):
        item = Item.model_validate(
            {
                "sys": {
                    "type": "Entry",
                    "id": "page-1",
                    "contentType": {"sys": {"type": "Link", "linkType": "ContentType", "id": "page"}},
                    "revision": 4,
                    "createdAt": "2018-02-20T18:15:09.146Z",
                    "updatedAt": "2018-02-21T10:00:00Z",
                    "locale": "en-US",
                },
                "fields": {"title": "Page", "tags": ["a", "b"], "meta": {"draft": False}},
            }
        )

        result = flatten_item(Includes(), item)

        assert set(result) == {"title", "tags", "meta", *METADATA_KEYS}
        assert result["title"] == "Page"
        assert result["tags"] == ["a", "b"]
        assert result["meta"] == {"draft": False}
        assert result["contentful_id"] == "page-1"
        assert result["contentful_contentType"] == "page"
        assert result["contentful_revision"] == 4
        assert result["contentful_createdAt"] == datetime(2018, 2, 20, 18, 15, 9, 146000, tzinfo=UTC)
        assert result["contentful_locale"] == "en-US"

    def test_metadata_key_names(self):
        result = flatten_item(Includes(), make_item("e1", {"x": 1}))

        assert METADATA_KEYS == (
            "contentful_id",
            "contentful_contentType",
            "contentful_revision",
            "contentful_createdAt",
            "contentful_updatedAt",
            "contentful_locale",
        )
        assert sorted(result) == sorted(["x", *METADATA_KEYS])

    def test_asset_has_empty_content_type(self):
        item = make_item("img", {"title": "Image"}, item_type="Asset")

        result = flatten_item(Includes(), item)

        assert result["contentful_contentType"] == ""

    def test_first_failing_field_aborts_item(self):
        item = make_item("page", {"ok": "value", "broken": link("Entry", "missing")})

        with pytest.raises(DanglingReferenceError):
            flatten_item(Includes(), item)

    def test_metadata_overwrites_colliding_field(self, caplog):
        item = make_item("page", {"contentful_id": "authored", "title": "Page"})

        with caplog.at_level(logging.WARNING, logger="contentful_data.flatten.flattener"):
            result = flatten_item(Includes(), item)

        assert result["contentful_id"] == "page"
        assert any(record.message == "metadata_key_collision" for record in caplog.records)

    def test_same_reference_twice_is_not_a_cycle(self):
        includes = Includes(assets=[make_item("img", {"title": "Image"}, item_type="Asset")])
        item = make_item("page", {"hero": link("Asset", "img"), "thumb": link("Asset", "img")})

        result = flatten_item(includes, item)

        assert result["hero"] == result["thumb"]


class TestReferenceGuards:
    """Test cycle detection and the optional depth limit."""

    def test_cycle_between_entries_raises(self):
        includes = Includes(
            entries=[
                make_item("a", {"next": link("Entry", "b")}),
                make_item("b", {"next": link("Entry", "a")}),
            ]
        )

        with pytest.raises(CyclicReferenceError) as exc_info:
            flatten_item(includes, includes.entries[0])

        assert exc_info.value.chain == [("Entry", "a"), ("Entry", "b"), ("Entry", "a")]

    def test_self_reference_raises(self):
        includes = Includes(entries=[make_item("a", {"self": link("Entry", "a")})])

        with pytest.raises(CyclicReferenceError):
            flatten_field(includes, link("Entry", "a"))

    def test_max_depth_limits_nesting(self):
        includes = Includes(
            entries=[
                make_item("a", {"next": link("Entry", "b")}),
                make_item("b", {"next": link("Entry", "c")}),
                make_item("c", {"name": "end"}),
            ]
        )
        item = make_item("root", {"next": link("Entry", "a")})

        assert flatten_item(includes, item, max_depth=3)["next"]["next"]["next"]["name"] == "end"
        with pytest.raises(ReferenceDepthError) as exc_info:
            flatten_item(includes, item, max_depth=2)
        assert exc_info.value.max_depth == 2

    def test_max_depth_zero_forbids_links(self):
        includes = Includes(entries=[make_item("a", {})])

        with pytest.raises(ReferenceDepthError):
            flatten_field(includes, link("Entry", "a"), max_depth=0)
        assert flatten_field(includes, "plain", max_depth=0) == "plain"

    def test_negative_max_depth_rejected(self):
        with pytest.raises(ValueError):
            Flattener(Includes(), max_depth=-1)

    def test_flattener_state_resets_after_error(self):
        includes = Includes(entries=[make_item("a", {"name": "A"})])
        flattener = Flattener(includes)

        with pytest.raises(DanglingReferenceError):
            flattener.flatten_field(link("Entry", "missing"))

        assert flattener.flatten_field(link("Entry", "a"))["name"] == "A"


class TestAppendIncludes:
    """Test self-injection of top-level entries."""

    def test_appends_only_new_entries(self):
        response = SearchResults(includes=Includes(entries=[make_item("1", {})]))

        append_includes(response)
        assert len(response.includes.entries) == 1

        response.items = [make_item("asset", {}, item_type="Asset")]
        append_includes(response)
        assert len(response.includes.entries) == 1
        assert response.includes.assets == []

        response.items.append(make_item("2", {}))
        append_includes(response)
        assert [entry.sys.id for entry in response.includes.entries] == ["1", "2"]

    def test_does_not_duplicate_on_repeat(self):
        response = SearchResults(items=[make_item("1", {}), make_item("2", {})])

        append_includes(response)
        append_includes(response)

        assert [entry.sys.id for entry in response.includes.entries] == ["1", "2"]

    def test_already_included_entry_keeps_original(self):
        included = make_item("1", {"source": "includes"})
        response = SearchResults(
            items=[make_item("1", {"source": "items"})],
            includes=Includes(entries=[included]),
        )

        append_includes(response)

        assert response.includes.entries == [included]


class TestFlattenBatch:
    """Test batch flattening of search responses."""

    def test_sibling_reference_resolved_via_self_injection(self):
        response = SearchResults(
            total=2,
            items=[
                make_item("A", {"related": link("Entry", "B")}),
                make_item("B", {"name": "sibling"}),
            ],
        )

        result = flatten_search_results(response)

        assert [item["contentful_id"] for item in result] == ["A", "B"]
        assert result[0]["related"]["name"] == "sibling"

    def test_sibling_reference_fails_without_self_injection(self):
        items = [make_item("A", {"related": link("Entry", "B")}), make_item("B", {})]

        with pytest.raises(DanglingReferenceError):
            flatten_items(Includes(), items)

    def test_empty_result_set(self):
        assert flatten_search_results(SearchResults(total=0, items=[])) == []

    def test_accepts_decoded_response(self, all_pages_response):
        result = flatten_search_results(all_pages_response)

        assert [item["title"] for item in result] == ["Sub page", "Not published page", "Main page"]
        main = result[2]
        assert [page["title"] for page in main["subPages"]] == ["Sub page", "Not published page"]
        assert main["banner"]["file"]["fileName"] == "orange.png"
        assert main["banner"]["contentful_contentType"] == ""
        assert main["subPages"][0]["banner"]["title"] == "Orange"

    def test_failure_in_any_item_fails_batch(self, all_pages_response):
        all_pages_response["includes"]["Asset"] = []

        with pytest.raises(DanglingReferenceError) as exc_info:
            flatten_search_results(all_pages_response)

        assert exc_info.value.link_id == "3ReVDbQQfmKY60Y6CCwAg6"
