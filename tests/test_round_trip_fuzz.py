"""Property-based round-trip tests for edge mappings.

Uses hypothesis to generate random valid mappings and verify that the
canonical notation and the dictionary form both parse back to an equal
mapping.

Requires: pip install hypothesis
"""

import pytest

# Skip entire module if hypothesis is not installed
pytest.importorskip("hypothesis")

from graph_mappings.models.edge import EdgeMapping  # noqa: E402
from hypothesis import given, settings  # noqa: E402
from hypothesis import strategies as st  # noqa: E402

names = st.text(min_size=1, max_size=20)
name_lists = st.lists(st.text(max_size=10), max_size=5)


@st.composite
def edge_mappings(draw):
    """Generate a valid edge mapping."""
    return EdgeMapping.create(
        draw(names),
        draw(names),
        draw(names),
        draw(st.one_of(st.none(), st.text(max_size=20))),
        draw(name_lists),
        draw(name_lists),
        draw(st.booleans()),
    )


@given(edge_mappings())
@settings(max_examples=200)
def test_notation_round_trip(mapping):
    """Serializing then parsing yields an equal mapping."""
    assert EdgeMapping.from_string(str(mapping)) == mapping


@given(edge_mappings())
@settings(max_examples=200)
def test_dict_round_trip(mapping):
    """Converting to a dict then parsing yields an equal mapping."""
    assert EdgeMapping.from_object(mapping.to_dict()) == mapping


@given(edge_mappings())
def test_notation_is_stable(mapping):
    """The canonical notation is a fixed point."""
    text = str(mapping)
    assert str(EdgeMapping.from_string(text)) == text


@given(st.lists(st.sampled_from(["dob", "city", "name"]), min_size=1, max_size=6))
def test_property_order_preserved(properties):
    """Property order and duplicates survive a round trip."""
    mapping = EdgeMapping.create("a", "b", "knows", properties=properties)
    parsed = EdgeMapping.from_string(str(mapping))
    assert list(parsed.iter_properties()) == properties
