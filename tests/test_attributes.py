"""Tests for attribute sets: validation, ordering and quoting."""

import logging

import pytest

from dotgraph.attributes import AttributeSet, format_value, must_be_quoted
from dotgraph.catalog import ATTRIBUTES, UsageContext
from dotgraph.errors import InvalidAttributeError


def test_every_catalog_attribute_is_quoted_by_its_value_type():
    for info in ATTRIBUTES:
        context = sorted(info.contexts, key=lambda c: c.value)[0]
        attributes = AttributeSet(context)

        result = attributes.set({info.name: "x"})

        assert result.warnings == []
        expected = '"x"' if info.quoted else "x"
        assert attributes.to_dot() == f" [{info.name}={expected}]"


def test_empty_set_serializes_to_empty_string():
    attributes = AttributeSet(UsageContext.NODE)

    assert attributes.to_dot() == ""
    assert attributes.count() == 0
    assert len(attributes) == 0


def test_pairs_are_comma_separated_in_insertion_order():
    attributes = AttributeSet(UsageContext.NODE)
    attributes.set({"shape": "box", "color": "red", "width": 1.5})

    assert attributes.to_dot() == ' [shape=box, color="red", width=1.5]'
    assert attributes.count() == 3


def test_overwrite_keeps_first_write_position():
    attributes = AttributeSet(UsageContext.NODE)
    attributes.set({"color": "red", "shape": "box"})
    attributes.set({"color": "blue"})

    assert attributes.to_dot() == ' [color="blue", shape=box]'
    assert attributes.count() == 2


def test_booleans_render_lowercase():
    attributes = AttributeSet(UsageContext.EDGE)
    attributes.set({"constraint": False, "headclip": True})

    assert attributes.to_dot() == " [constraint=false, headclip=true]"


def test_values_are_quoted_verbatim():
    attributes = AttributeSet(UsageContext.NODE)
    attributes.set({"label": 'say "hi"'})

    assert attributes.to_dot() == ' [label="say "hi""]'


def test_invalid_attribute_warns_but_is_stored(caplog):
    attributes = AttributeSet(UsageContext.EDGE)

    with caplog.at_level(logging.WARNING, logger="dotgraph.attributes"):
        result = attributes.set({"shape": "box", "color": "red"})

    assert result.ok
    assert result.warnings == ["Invalid attribute 'shape' for edge"]
    assert "Invalid attribute 'shape' for edge" in caplog.text
    assert dict(attributes.get()) == {"shape": "box", "color": "red"}


def test_unknown_attribute_is_stored_and_quoted():
    attributes = AttributeSet(UsageContext.NODE)

    result = attributes.set({"brand_new": "1"})

    assert result.warnings == ["Invalid attribute 'brand_new' for node"]
    assert attributes.to_dot() == ' [brand_new="1"]'


def test_graph_context_accepts_cluster_attributes():
    attributes = AttributeSet(UsageContext.GRAPH)

    result = attributes.set({"pencolor": "red", "rankdir": "LR"})

    assert result.warnings == []


def test_cluster_context_rejects_graph_only_attributes():
    attributes = AttributeSet(UsageContext.CLUSTER)

    result = attributes.set({"rankdir": "LR"})

    assert result.warnings == ["Invalid attribute 'rankdir' for cluster"]


def test_get_returns_read_only_view():
    attributes = AttributeSet(UsageContext.NODE)
    attributes.set({"shape": "box"})
    view = attributes.get()

    with pytest.raises(TypeError):
        view["shape"] = "circle"

    attributes.set({"shape": "circle"})
    assert view["shape"] == "circle"


def test_set_with_none_is_a_no_op():
    attributes = AttributeSet(UsageContext.NODE)

    result = attributes.set(None)

    assert result.ok
    assert result.warnings == []
    assert attributes.count() == 0


def test_strict_set_raises_and_stores_nothing():
    attributes = AttributeSet(UsageContext.EDGE, strict=True)

    with pytest.raises(InvalidAttributeError) as excinfo:
        attributes.set({"color": "red", "shape": "box"})

    assert excinfo.value.name == "shape"
    assert excinfo.value.context is UsageContext.EDGE
    assert attributes.count() == 0


def test_html_label_is_not_quoted():
    attributes = AttributeSet(UsageContext.NODE, html=True)
    attributes.set({"label": "<<b>bold</b>>", "color": "red"})

    assert attributes.to_dot() == ' [label=<<b>bold</b>>, color="red"]'


def test_extra_entries_render_without_being_stored():
    attributes = AttributeSet(UsageContext.NODE)
    attributes.set({"shape": "box"})

    assert attributes.to_dot(extra={"width": 2}) == " [shape=box, width=2]"
    assert dict(attributes.get()) == {"shape": "box"}


def test_helpers():
    assert must_be_quoted("color") is True
    assert must_be_quoted("weight") is False
    assert must_be_quoted("unknown") is True
    assert format_value(True) == "true"
    assert format_value(0) == "0"


def test_none_values_are_not_emitted():
    attributes = AttributeSet(UsageContext.NODE)
    attributes.set({"color": None, "shape": "box"})

    assert attributes.to_dot() == " [shape=box]"
    assert attributes.to_dot(extra={"shape": None}) == ""
    assert attributes.count() == 2
