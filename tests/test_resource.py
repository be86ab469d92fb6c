"""Tests for the Resource envelope."""

from typing import List, Optional

import pytest
from pydantic import BaseModel, TypeAdapter

from hal_resources.exceptions import DeserializationError, InvalidArgumentError
from hal_resources.models.link import REL_FIRST, REL_LAST, REL_NEXT, REL_PREVIOUS, REL_SELF, Link
from hal_resources.models.resource import Resource
from tests.samples import SampleBean, SampleRecord


# -----------------------------------------------------------------------------
# Serialization
# -----------------------------------------------------------------------------
def test_serialize_string() -> None:
    """Test a scalar value is written under "value"."""
    assert Resource("foo").to_dict() == {"value": "foo"}


def test_serialize_integer() -> None:
    """Test an integer value is written under "value"."""
    assert Resource(123).to_dict() == {"value": 123}


def test_serialize_bean_is_flattened() -> None:
    """Test model fields are merged into the top-level object."""
    resource = Resource(SampleBean(foo="aaa", bar="bbb"))
    assert resource.to_dict() == {"foo": "aaa", "bar": "bbb"}


def test_serialize_dataclass_is_flattened() -> None:
    """Test dataclass fields are merged into the top-level object."""
    assert Resource(SampleRecord(id=1, name="one")).to_dict() == {"id": 1, "name": "one"}


def test_serialize_none_value() -> None:
    """Test a None value contributes no fields."""
    assert Resource(None).to_dict() == {}


def test_serialize_rejects_reserved_keys() -> None:
    """Test a flattened value may not carry _links or _embedded fields."""
    with pytest.raises(InvalidArgumentError):
        Resource({"_links": "x"}).to_dict()
    with pytest.raises(InvalidArgumentError):
        Resource({"name": "a", "_embedded": {}}).to_json()


def test_serialize_with_links() -> None:
    """Test links are rendered under _links with href only."""
    resource = (
        Resource("foo")
        .add_link(REL_FIRST, Link("http://example.com/0000"))
        .add_link(REL_PREVIOUS, Link("http://example.com/0009"))
        .add_link(REL_SELF, Link("http://example.com/0010"))
        .add_link(REL_NEXT, Link("http://example.com/0011"))
        .add_link(REL_LAST, Link("http://example.com/{page}", templated=True))
    )

    data = resource.to_dict()
    assert data["value"] == "foo"
    assert data["_links"] == {
        "first": {"href": "http://example.com/0000"},
        "prev": {"href": "http://example.com/0009"},
        "self": {"href": "http://example.com/0010"},
        "next": {"href": "http://example.com/0011"},
        "last": {"href": "http://example.com/{page}"},
    }
    assert "_embedded" not in data


def test_serialize_with_embedded() -> None:
    """Test embedded objects are rendered under _embedded."""
    resource = Resource("foo").embed_resource("sample", SampleBean(foo="aaa", bar="bbb"))

    data = resource.to_dict()
    assert data == {"value": "foo", "_embedded": {"sample": {"foo": "aaa", "bar": "bbb"}}}
    assert "_links" not in data


def test_serialize_nested_resource() -> None:
    """Test an embedded resource is rendered in its own HAL shape."""
    child = Resource(SampleBean(foo="aaa", bar="bbb")).add_link(REL_SELF, Link("http://example.com/beans/1"))
    resource = Resource(SampleRecord(id=1, name="one")).embed_resource("beans", [child])

    assert resource.to_dict()["_embedded"] == {
        "beans": [
            {"foo": "aaa", "bar": "bbb", "_links": {"self": {"href": "http://example.com/beans/1"}}},
        ]
    }


def test_cleared_links_are_omitted() -> None:
    """Test _links disappears again once links are cleared."""
    resource = Resource("foo").add_link(REL_SELF, Link("http://example.com"))
    resource.clear_links()
    assert resource.to_dict() == {"value": "foo"}


def test_to_json() -> None:
    """Test compact JSON text output."""
    assert Resource("foo").to_json() == '{"value":"foo"}'


# -----------------------------------------------------------------------------
# Links
# -----------------------------------------------------------------------------
def test_add_link_then_get_link() -> None:
    """Test a link added under a rel can be looked up."""
    resource = Resource("foo").add_link(REL_SELF, Link("http://example.com/self"))
    assert resource.get_link(REL_SELF) == Link("http://example.com/self")
    assert resource.has_link(REL_SELF)
    assert not resource.has_link(REL_NEXT)
    assert resource.get_link(REL_NEXT) is None


def test_add_link_rejects_none() -> None:
    """Test adding a None link fails."""
    resource = Resource("foo")
    with pytest.raises(InvalidArgumentError):
        resource.add_link(REL_SELF, None)
    assert not resource.has_links()


def test_add_link_overwrites() -> None:
    """Test a rel holds at most one link."""
    resource = Resource("foo")
    resource.add_link(REL_SELF, Link("http://example.com/a"))
    resource.add_link(REL_SELF, Link("http://example.com/b"))
    assert resource.links == {REL_SELF: Link("http://example.com/b")}


def test_has_links_lifecycle() -> None:
    """Test has_links tracks additions and clear_links."""
    resource = Resource("foo")
    assert not resource.has_links()
    resource.add_link(REL_SELF, Link("http://example.com"))
    assert resource.has_links()
    resource.clear_links()
    assert not resource.has_links()


def test_links_and_embedded_are_separate_namespaces() -> None:
    """Test the same rel can hold a link and an embedded object."""
    resource = Resource("foo").add_link("item", Link("http://example.com/item")).embed_resource("item", 1)
    assert resource.get_link("item") == Link("http://example.com/item")
    assert resource.embedded_resources == {"item": 1}


def test_embed_resource_overwrites() -> None:
    """Test embedding under an existing rel replaces the object."""
    resource = Resource("foo").embed_resource("rel", 1).embed_resource("rel", 2)
    assert resource.embedded_resources == {"rel": 2}


# -----------------------------------------------------------------------------
# Deserialization
# -----------------------------------------------------------------------------
def test_deserialize_bean() -> None:
    """Test links and embedded are extracted and the rest becomes the value."""
    expected = (
        Resource(SampleBean(foo="aaa", bar="bbb"))
        .embed_resource("rel", "embedded-value")
        .add_link("self", Link("http://example.com/self"))
    )
    json = """{
      "foo": "aaa",
      "bar": "bbb",
      "_embedded": {"rel": "embedded-value"},
      "_links": {"self": {"href": "http://example.com/self"}}
    }"""

    actual = Resource.from_json(json, SampleBean)

    assert actual == expected
    assert actual.value.foo == "aaa"


def test_deserialize_ignores_templated() -> None:
    """Test templated is not read back from JSON."""
    resource = Resource.from_dict({"value": "foo", "_links": {"self": {"href": "http://x/{id}", "templated": True}}})
    assert resource.get_link("self") == Link("http://x/{id}")


def test_deserialize_scalar() -> None:
    """Test a lone "value" field is unwrapped for scalar types."""
    assert Resource.from_dict({"value": "foo"}, str) == Resource("foo")
    assert Resource.from_dict({"value": 123}) == Resource(123)


def test_deserialize_without_value_type() -> None:
    """Test remaining fields stay a plain dict when no type is given."""
    resource = Resource.from_dict({"foo": "aaa", "bar": "bbb"})
    assert resource.value == {"foo": "aaa", "bar": "bbb"}
    assert Resource.from_dict({}).value is None


def test_deserialize_value_only_dict_is_ambiguous() -> None:
    """Test a dict holding only "value" unwraps unless dict is requested."""
    data = Resource({"value": 1}).to_dict()
    assert data == {"value": 1}
    assert Resource.from_dict(data) == Resource(1)
    assert Resource.from_dict(data, dict) == Resource({"value": 1})


def test_deserialize_embedded_types() -> None:
    """Test embedded objects are decoded when a type is given for their rel."""
    data = {
        "value": "foo",
        "_embedded": {
            "beans": [{"foo": "aaa", "bar": "bbb", "_links": {"self": {"href": "http://example.com/1"}}}],
            "other": {"x": 1},
        },
    }

    resource = Resource.from_dict(data, str, embedded_types={"beans": List[Resource[SampleBean]]})

    bean = resource.embedded_resources["beans"][0]
    assert isinstance(bean, Resource)
    assert bean.value == SampleBean(foo="aaa", bar="bbb")
    assert bean.get_link("self") == Link("http://example.com/1")
    assert resource.embedded_resources["other"] == {"x": 1}


@pytest.mark.parametrize(
    "value",
    [
        SampleBean(foo="aaa", bar="bbb"),
        SampleRecord(id=7, name="seven"),
    ],
)
def test_round_trip(value: object) -> None:
    """Test deserialize(serialize(r)) == r for resources with links and embedded content."""
    resource = (
        Resource(value)
        .add_link(REL_SELF, Link("http://example.com/self"))
        .embed_resource("tags", ["a", "b"])
        .embed_resource("owner", {"name": "someone"})
    )

    assert Resource.from_json(resource.to_json(), type(value)) == resource


def test_round_trip_none_value_with_links() -> None:
    """Test a None value with links reads back as None for an optional type."""
    resource = Resource(None).add_link(REL_SELF, Link("http://example.com/self"))

    actual = Resource.from_json(resource.to_json(), Optional[SampleBean])

    assert actual == resource
    assert actual.value is None


def test_deserialize_missing_field_reports_path() -> None:
    """Test a missing value field is reported with its name."""
    with pytest.raises(DeserializationError) as exc_info:
        Resource.from_dict({"foo": "aaa"}, SampleBean)
    assert exc_info.value.path == ("bar",)


def test_deserialize_bad_link_reports_path() -> None:
    """Test a link without href is reported with its location."""
    with pytest.raises(DeserializationError) as exc_info:
        Resource.from_dict({"value": "foo", "_links": {"self": {"url": "http://example.com"}}})
    assert exc_info.value.path == ("_links", "self", "href")


def test_deserialize_links_must_be_object() -> None:
    """Test _links must be a JSON object."""
    with pytest.raises(DeserializationError) as exc_info:
        Resource.from_dict({"value": "foo", "_links": []})
    assert exc_info.value.path == ("_links",)


def test_deserialize_rejects_non_object() -> None:
    """Test the document itself must be a JSON object."""
    with pytest.raises(DeserializationError):
        Resource.from_dict(["foo"])


def test_from_json_rejects_invalid_json() -> None:
    """Test syntax errors surface as DeserializationError."""
    with pytest.raises(DeserializationError):
        Resource.from_json("{not json")


# -----------------------------------------------------------------------------
# pydantic integration
# -----------------------------------------------------------------------------
def test_type_adapter_round_trip() -> None:
    """Test Resource[T] can be validated and dumped through a TypeAdapter."""
    adapter = TypeAdapter(Resource[SampleBean])
    data = {"foo": "aaa", "bar": "bbb", "_links": {"self": {"href": "http://example.com/self"}}}

    resource = adapter.validate_python(data)

    assert resource.value == SampleBean(foo="aaa", bar="bbb")
    assert adapter.dump_python(resource, mode="json") == data


def test_nested_error_path() -> None:
    """Test errors inside nested resources keep their full location."""
    adapter_data = [{"foo": "aaa", "bar": "bbb"}, {"foo": "ccc"}]
    with pytest.raises(DeserializationError) as exc_info:
        Resource.from_dict({"_embedded": {"beans": adapter_data}}, embedded_types={"beans": List[Resource[SampleBean]]})
    assert exc_info.value.path == ("_embedded", "beans", 1, "bar")


def test_resource_as_model_field() -> None:
    """Test resources can be used as fields of pydantic models."""

    class Envelope(BaseModel):
        item: Resource[SampleBean]

    envelope = Envelope.model_validate({"item": {"foo": "aaa", "bar": "bbb"}})

    assert envelope.item == Resource(SampleBean(foo="aaa", bar="bbb"))
    assert envelope.model_dump(mode="json") == {"item": {"foo": "aaa", "bar": "bbb"}}


def test_equality_is_structural() -> None:
    """Test equality compares value, links and embedded objects."""
    assert Resource("foo") == Resource("foo")
    assert Resource("foo") != Resource("bar")
    assert Resource("foo") != Resource("foo").add_link(REL_SELF, Link("http://example.com"))
    assert Resource("foo") != Resource("foo").embed_resource("rel", 1)
