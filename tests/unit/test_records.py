"""Tests for component records and boundary normalization."""

import pytest

from uiforge.components import ComponentRecord, coerce_records, flatten_records, format_scalar
from uiforge.core import ValidationError
from uiforge.geometry import Point, Size


@pytest.mark.unit
def test_record_defaults():
    record = ComponentRecord(id="a")

    assert record.type == "div"
    assert record.parent_id is None
    assert record.props == {}
    assert record.styles == {}
    assert record.position is None
    assert record.children == []


@pytest.mark.unit
def test_record_accepts_camel_case_parent():
    record = ComponentRecord.model_validate({"id": "a", "parentId": "b"})
    assert record.parent_id == "b"


@pytest.mark.unit
def test_empty_parent_means_root():
    record = ComponentRecord.model_validate({"id": "a", "parentId": ""})
    assert record.parent_id is None


@pytest.mark.unit
def test_numeric_ids_become_strings():
    record = ComponentRecord.model_validate({"id": 7, "parentId": 3})
    assert record.id == "7"
    assert record.parent_id == "3"


@pytest.mark.unit
def test_malformed_maps_become_empty():
    record = ComponentRecord.model_validate({"id": "a", "props": "oops", "styles": None})

    assert record.props == {}
    assert record.styles == {}


@pytest.mark.unit
def test_scalar_values_kept_and_nested_values_serialized():
    record = ComponentRecord.model_validate({
        "id": "a",
        "props": {"label": "Go", "count": 2, "ratio": 0.5, "on": True, "gone": None, "items": [1, 2]},
    })

    assert record.props["label"] == "Go"
    assert record.props["count"] == 2
    assert record.props["on"] is True
    assert record.props["gone"] is None
    assert record.props["items"] == "[1,2]"


@pytest.mark.unit
def test_geometry_parsing():
    record = ComponentRecord.model_validate({
        "id": "a",
        "position": {"x": 10, "y": 20},
        "size": {"width": 100, "height": 50},
    })

    assert record.position == Point(10, 20)
    assert record.size == Size(100, 50)


@pytest.mark.unit
def test_non_numeric_size_is_ignored():
    record = ComponentRecord.model_validate({"id": "a", "size": {"width": "auto", "height": "auto"}})
    assert record.size is None


@pytest.mark.unit
def test_partial_size_keeps_numeric_dimension():
    record = ComponentRecord.model_validate({"id": "a", "size": {"width": 200, "height": "auto"}})

    assert record.size == Size(width=200, height=None)


@pytest.mark.unit
def test_partial_position_defaults_member():
    record = ComponentRecord.model_validate({"id": "a", "position": {"x": "left", "y": 40}})

    assert record.position == Point(0, 40)


@pytest.mark.unit
@pytest.mark.parametrize("field,expected", [
    ("type", "div"),
    ("name", ""),
    ("category", ""),
])
@pytest.mark.parametrize("value", [None, ["x"], {"a": 1}, True])
def test_malformed_labels_fall_back_to_default(field, expected, value):
    record = ComponentRecord.model_validate({"id": "a", field: value})

    assert getattr(record, field) == expected


@pytest.mark.unit
def test_numeric_type_is_stringified():
    assert ComponentRecord.model_validate({"id": "a", "type": 3}).type == "3"


@pytest.mark.unit
def test_record_is_immutable():
    record = ComponentRecord(id="a")
    with pytest.raises(Exception):
        record.type = "text"


@pytest.mark.unit
@pytest.mark.parametrize("value,expected", [
    ("Hi", "Hi"),
    (3, "3"),
    (3.0, "3"),
    (2.5, "2.5"),
    (True, "true"),
    (False, "false"),
    (None, "null"),
])
def test_format_scalar(value, expected):
    assert format_scalar(value) == expected


@pytest.mark.unit
@pytest.mark.parametrize("children,expected", [
    ("Hello", "Hello"),
    (0, "0"),
    ("", None),
    (None, None),
    (False, None),
])
def test_record_text(children, expected):
    assert ComponentRecord(id="a", props={"children": children}).text == expected


@pytest.mark.unit
def test_coerce_records_passes_models_through():
    model = ComponentRecord(id="a")
    records = coerce_records([model, {"id": "b"}])

    assert records[0] is model
    assert records[1].id == "b"


@pytest.mark.unit
def test_coerce_records_rejects_non_objects():
    with pytest.raises(ValidationError, match="index 1"):
        coerce_records([{"id": "a"}, "button"])


@pytest.mark.unit
def test_coerce_records_rejects_missing_id():
    with pytest.raises(ValidationError):
        coerce_records([{"type": "text"}])


@pytest.mark.unit
def test_flatten_nested_children():
    nested = coerce_records([
        {
            "id": "page",
            "children": [
                {"id": "header", "children": [{"id": "logo", "type": "image"}]},
                {"id": "footer"},
            ],
        },
        {"id": "dialog"},
    ])

    flat = flatten_records(nested)

    assert [(r.id, r.parent_id) for r in flat] == [
        ("page", None),
        ("header", "page"),
        ("logo", "header"),
        ("footer", "page"),
        ("dialog", None),
    ]
    assert all(r.children == [] for r in flat)
    # Input is untouched
    assert len(nested[0].children) == 2


@pytest.mark.unit
def test_flatten_keeps_declared_parent():
    nested = coerce_records([
        {"id": "a"},
        {"id": "b", "children": [{"id": "c", "parentId": "a"}]},
    ])

    flat = flatten_records(nested)

    assert [(r.id, r.parent_id) for r in flat] == [("a", None), ("b", None), ("c", "a")]


@pytest.mark.unit
def test_flatten_flat_input_is_identity():
    records = coerce_records([{"id": "a"}, {"id": "b", "parentId": "a"}])

    flat = flatten_records(records)

    assert flat[0] is records[0]
    assert flat[1] is records[1]
