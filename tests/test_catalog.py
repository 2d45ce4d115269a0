"""Tests for the attribute catalog."""

from dotgraph.catalog import (
    ATTRIBUTES,
    QUOTED_TYPES,
    UsageContext,
    ValueType,
    get_attribute_info,
    list_attributes,
)


class TestCatalog:
    def test_known_attribute(self):
        info = get_attribute_info("color")
        assert info is not None
        assert info.allows(UsageContext.NODE)
        assert info.allows(UsageContext.EDGE)
        assert info.allows(UsageContext.CLUSTER)
        assert not info.allows(UsageContext.GRAPH)
        assert info.quoted is True

    def test_unknown_attribute(self):
        assert get_attribute_info("nonexistent-attribute") is None

    def test_lookup_is_case_sensitive(self):
        assert get_attribute_info("Damping") is not None
        assert get_attribute_info("damping") is None

    def test_unquoted_types(self):
        assert get_attribute_info("constraint").quoted is False
        assert get_attribute_info("shape").quoted is False
        assert get_attribute_info("fontsize").quoted is False
        assert get_attribute_info("rankdir").quoted is False

    def test_names_are_unique(self):
        names = [a.name for a in ATTRIBUTES]
        assert len(names) == len(set(names))

    def test_covers_the_vocabulary(self):
        assert len(ATTRIBUTES) > 170
        contexts = set().union(*(a.contexts for a in ATTRIBUTES))
        assert contexts == set(UsageContext)

    def test_quoted_types(self):
        assert ValueType.LBL_STRING in QUOTED_TYPES
        assert ValueType.VIEWPORT in QUOTED_TYPES
        assert ValueType.DOUBLE not in QUOTED_TYPES
        assert ValueType.BOOL not in QUOTED_TYPES

    def test_rank_is_a_cluster_attribute(self):
        info = get_attribute_info("rank")
        assert info.contexts == frozenset({UsageContext.CLUSTER})


class TestListAttributes:
    def test_list_all(self):
        assert list_attributes() == list(ATTRIBUTES)

    def test_returned_list_is_a_copy(self):
        listed = list_attributes()
        listed.clear()

        assert len(ATTRIBUTES) > 170
        assert len(list_attributes()) == len(ATTRIBUTES)
        assert isinstance(ATTRIBUTES, tuple)

    def test_list_by_context(self):
        edge_attributes = list_attributes(context=UsageContext.EDGE)
        assert all(a.allows(UsageContext.EDGE) for a in edge_attributes)
        names = {a.name for a in edge_attributes}
        assert "arrowhead" in names
        assert "shape" not in names

    def test_list_by_value_type(self):
        bools = list_attributes(value_type=ValueType.BOOL)
        assert all(a.value_type is ValueType.BOOL for a in bools)
        assert "constraint" in {a.name for a in bools}

    def test_list_by_context_and_type(self):
        result = list_attributes(context=UsageContext.NODE, value_type=ValueType.SHAPE)
        assert [a.name for a in result] == ["shape"]
