"""
Tests for the GraphQL document builders.
"""

from datetime import datetime, timedelta, timezone
from enum import Enum

import pytest

from wws_api.exceptions import BuilderError
from wws_api.graphql.builder import (
    InputDataSenderBuilder,
    ObjectDataSenderBuilder,
    format_datetime,
    format_value,
)
from wws_api.models import (
    MessagesAttributes,
    PageInfo,
    PeopleAttributes,
    Person,
    PersonAttributes,
    PersonFields,
    SpaceFields,
    SpacesAttributes,
)

PAGE_INFO = "pageInfo {startCursor endCursor hasNextPage hasPreviousPage}"


class TestObjectDataSenderBuilder:
    """Test compact rendering of object builders."""

    def test_fields_only(self):
        """Test object with scalar fields."""
        builder = ObjectDataSenderBuilder("me", fields=[PersonFields.ID, PersonFields.DISPLAY_NAME])

        assert builder.build() == "me {id displayName}"

    def test_empty_object(self):
        """Test object with nothing selected."""
        assert ObjectDataSenderBuilder("me").build() == "me {}"

    def test_fields_from_enum_class(self):
        """Test adding every member of a field enum."""
        builder = ObjectDataSenderBuilder("space", fields=SpaceFields)

        assert builder.build() == "space {id title description created updated membersUpdated}"

    def test_attribute(self):
        """Test object with one attribute."""
        builder = (ObjectDataSenderBuilder("person")
                   .add_attribute(PersonAttributes.ID, "abc")
                   .add_field("id"))

        assert builder.build() == 'person (id: "abc") {id}'

    def test_attributes_keep_insertion_order(self):
        """Test attributes render in the order they were added."""
        builder = (ObjectDataSenderBuilder("spaces")
                   .add_attribute(SpacesAttributes.FIRST, 10)
                   .add_attribute(SpacesAttributes.AFTER, "cursor")
                   .add_field(SpaceFields.ID))

        assert builder.build() == 'spaces (first: 10 after: "cursor") {id}'

    def test_items_and_page_info(self):
        """Test paginated collection rendering."""
        builder = (ObjectDataSenderBuilder("spaces", has_items=True)
                   .add_attribute(SpacesAttributes.FIRST, 10)
                   .add_page_info()
                   .add_fields(SpaceFields.ID, SpaceFields.TITLE))

        assert builder.build() == f"spaces (first: 10) {{{PAGE_INFO} items {{id title}}}}"

    def test_page_info_without_items(self):
        """Test pageInfo followed by plain fields."""
        builder = ObjectDataSenderBuilder("members").add_page_info().add_field("id")

        assert builder.build() == f"members {{{PAGE_INFO} id}}"

    def test_custom_page_info(self):
        """Test a caller-supplied pageInfo selection."""
        custom = ObjectDataSenderBuilder("pageInfo", fields=["endCursor"])
        builder = ObjectDataSenderBuilder("spaces", has_items=True).add_page_info(custom).add_field("id")

        assert builder.build() == "spaces {pageInfo {endCursor} items {id}}"

    def test_nested_children(self):
        """Test children render after fields, recursively."""
        creator = ObjectDataSenderBuilder("createdBy", fields=[PersonFields.ID, PersonFields.DISPLAY_NAME])
        builder = ObjectDataSenderBuilder("space", fields=[SpaceFields.ID]).add_child(creator)

        assert builder.build() == "space {id createdBy {id displayName}}"

    def test_children_inside_items(self):
        """Test children are wrapped in items together with fields."""
        creator = ObjectDataSenderBuilder("createdBy", fields=["id"])
        builder = ObjectDataSenderBuilder("spaces", has_items=True).add_field("id").add_child(creator)

        assert builder.build() == "spaces {items {id createdBy {id}}}"

    def test_alias(self):
        """Test aliased object."""
        builder = ObjectDataSenderBuilder("space", fields=["id"], alias="space1")
        builder.add_attribute("id", "s1")

        assert builder.build() == 'space1: space (id: "s1") {id}'

    def test_remove_operations(self):
        """Test removing fields, attributes, children and pageInfo."""
        child = ObjectDataSenderBuilder("createdBy", fields=["id"])
        builder = (ObjectDataSenderBuilder("space", fields=["id", "title"])
                   .add_attribute("id", "s1")
                   .add_child(child)
                   .add_page_info())

        builder.remove_field("title").remove_attribute("id").remove_child(child).remove_page_info()

        assert builder.build() == "space {id}"

    def test_remove_missing_field_is_noop(self):
        """Test removing a field that was never added."""
        builder = ObjectDataSenderBuilder("me", fields=["id"]).remove_field(PersonFields.EMAIL)

        assert builder.fields == ["id"]

    def test_build_is_repeatable(self):
        """Test rendering has no side effects."""
        builder = ObjectDataSenderBuilder("spaces", has_items=True).add_page_info().add_field("id")

        assert builder.build() == builder.build()
        assert str(builder) == builder.build()

    def test_set_has_items_and_name(self):
        """Test setters used after construction."""
        builder = ObjectDataSenderBuilder().set_object_name("people").set_has_items(True).add_field("id")

        assert builder.build() == "people {items {id}}"


class TestAttributeTypeChecks:
    """Test enum-keyed attribute validation."""

    def test_wrong_type_rejected(self):
        """Test string given for an int attribute."""
        builder = ObjectDataSenderBuilder("spaces")

        with pytest.raises(BuilderError) as exc_info:
            builder.add_attribute(SpacesAttributes.FIRST, "10")

        assert "expects a int" in str(exc_info.value)
        assert "Object supplied is str" in str(exc_info.value)
        assert builder.attributes == {}

    def test_bool_rejected_for_int(self):
        """Test bool is not accepted where an int is expected."""
        with pytest.raises(BuilderError):
            ObjectDataSenderBuilder("spaces").add_attribute(SpacesAttributes.FIRST, True)

    def test_list_attribute(self):
        """Test list-typed attribute."""
        builder = ObjectDataSenderBuilder("people").add_attribute(PeopleAttributes.ID, ["a", "b"])

        assert builder.build() == 'people (id: ["a", "b"]) {}'

    def test_string_key_not_checked(self):
        """Test plain string keys accept any value."""
        builder = ObjectDataSenderBuilder("spaces").add_attribute("first", "10")

        assert builder.attributes == {"first": "10"}

    def test_datetime_attribute(self):
        """Test datetime-typed attribute."""
        when = datetime(2016, 9, 1, 12, 0, 0, 123000, tzinfo=timezone.utc)
        builder = ObjectDataSenderBuilder("messages").add_attribute(MessagesAttributes.OLDEST_TIMESTAMP, when)

        assert builder.build() == 'messages (oldestTimestamp: "2016-09-01T12:00:00.123+0000") {}'


class TestPrettyRendering:
    """Test indented rendering."""

    def test_pretty_nested(self):
        """Test one entry per line with two-space indentation."""
        creator = ObjectDataSenderBuilder("createdBy", fields=["id"])
        builder = ObjectDataSenderBuilder("spaces", has_items=True).add_field("id").add_child(creator)

        expected = "\n".join([
            "spaces {",
            "  items {",
            "    id",
            "    createdBy {",
            "      id",
            "    }",
            "  }",
            "}",
        ])
        assert builder.build(pretty=True) == expected

    def test_pretty_with_attributes_and_page_info(self):
        """Test header and pageInfo placement."""
        page_info = ObjectDataSenderBuilder("pageInfo", fields=["endCursor"])
        builder = (ObjectDataSenderBuilder("spaces", has_items=True)
                   .add_attribute("first", 5)
                   .add_page_info(page_info)
                   .add_field("id"))

        expected = "\n".join([
            "spaces (first: 5) {",
            "  pageInfo {",
            "    endCursor",
            "  }",
            "  items {",
            "    id",
            "  }",
            "}",
        ])
        assert builder.build(pretty=True) == expected


class TestFromModel:
    """Test building selections from pydantic models."""

    def test_page_info_fields(self):
        """Test aliases are used as GraphQL names."""
        builder = ObjectDataSenderBuilder.from_model("pageInfo", PageInfo)

        assert builder.fields == ["startCursor", "endCursor", "hasNextPage", "hasPreviousPage"]

    def test_nested_models_skipped(self):
        """Test fields holding models are not selected."""
        builder = ObjectDataSenderBuilder.from_model("person", Person, has_items=True)

        assert "displayName" in builder.fields
        assert "ibmUniqueID" in builder.fields
        assert "emailAddresses" in builder.fields
        assert "createdBy" not in builder.fields
        assert "updatedBy" not in builder.fields
        assert builder.has_items is True


class TestFormatValue:
    """Test GraphQL literal formatting."""

    def test_scalars(self):
        """Test scalar literals."""
        assert format_value("abc") == '"abc"'
        assert format_value(True) == "true"
        assert format_value(False) == "false"
        assert format_value(42) == "42"
        assert format_value(1.5) == "1.5"
        assert format_value(None) == "null"

    def test_string_escaping(self):
        """Test quotes and backslashes are escaped."""
        assert format_value('say "hi"\\') == '"say \\"hi\\"\\\\"'

    def test_control_characters_escaped(self):
        """Test line breaks and tabs stay inside one string literal."""
        assert format_value("a\nb\r\tc") == '"a\\nb\\r\\tc"'

        payload = InputDataSenderBuilder({"title": "Line one\nLine two"})
        assert payload.build() == '{title: "Line one\\nLine two"}'

    def test_enum_is_bare(self):
        """Test enums render as GraphQL enum literals."""

        class Operation(str, Enum):
            ADD = "ADD"

        assert format_value(Operation.ADD) == "ADD"
        assert format_value(PersonFields.DISPLAY_NAME) == "displayName"

    def test_collections(self):
        """Test list and input object literals."""
        assert format_value(["a", 1]) == '["a", 1]'
        assert format_value({"title": "T", "members": ["a"]}) == '{title: "T", members: ["a"]}'

    def test_datetime_offset(self):
        """Test non-UTC offsets are kept."""
        when = datetime(2017, 1, 2, 3, 4, 5, 6000, tzinfo=timezone(timedelta(hours=2)))

        assert format_datetime(when) == "2017-01-02T03:04:05.006+0200"

    def test_naive_datetime_gets_local_offset(self):
        """Test naive datetimes are rendered with an offset."""
        rendered = format_datetime(datetime(2017, 1, 2, 3, 4, 5))

        assert rendered.startswith("2017-01-02T03:04:05.000")
        assert rendered[-5] in "+-"


class TestInputDataSenderBuilder:
    """Test input object literals."""

    def test_input_object(self):
        """Test input object built incrementally."""
        payload = InputDataSenderBuilder({"id": "s1"}).add("title", "New")

        assert payload.build() == '{id: "s1", title: "New"}'

    def test_input_as_attribute(self):
        """Test input object used as an attribute value."""
        payload = InputDataSenderBuilder({"id": "s1"})
        builder = ObjectDataSenderBuilder("deleteSpace", fields=["successful"]).add_attribute("input", payload)

        assert builder.build() == 'deleteSpace (input: {id: "s1"}) {successful}'

    def test_remove(self):
        """Test removing a key."""
        payload = InputDataSenderBuilder({"id": "s1", "title": "T"}).remove("title")

        assert payload.build() == '{id: "s1"}'
