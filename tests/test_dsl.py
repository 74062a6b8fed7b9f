"""Tests for the fluent path builder."""

import pytest

from docquery import ROOT, extract, from_python
from docquery.path import (
    ANY_INDEX,
    ANY_KEY,
    DOUBLE_WILDCARD,
    IndexLeg,
    KeyLeg,
    PathFlag,
)


def test_attribute_and_item_access_build_the_same_legs() -> None:
    by_attr = ROOT.config.deps[0].name
    by_method = ROOT.key("config").key("deps").index(0).key("name")

    assert by_attr == by_method
    assert by_attr.legs == (
        KeyLeg(key="config"),
        KeyLeg(key="deps"),
        IndexLeg(index=0),
        KeyLeg(key="name"),
    )
    assert str(by_attr) == "$.config.deps[0].name"


def test_item_access_accepts_arbitrary_keys() -> None:
    assert ROOT["weird key"].legs == (KeyLeg(key="weird key"),)
    assert ROOT["index"].legs == (KeyLeg(key="index"),)


def test_wildcards_set_flags() -> None:
    expression = ROOT.any_key().any_index().to_expression()
    assert expression.legs == (ANY_KEY, ANY_INDEX)
    assert expression.flags == PathFlag.CONTAINS_ASTERISK

    recursive = ROOT.descendants().c.to_expression()
    assert recursive.legs == (DOUBLE_WILDCARD, KeyLeg(key="c"))
    assert recursive.flags == PathFlag.CONTAINS_DOUBLE_ASTERISK


def test_builder_is_immutable() -> None:
    base = ROOT.config
    base.any_key()

    assert base.legs == (KeyLeg(key="config"),)
    assert ROOT.legs == ()


def test_builder_rejects_bad_segments() -> None:
    with pytest.raises(ValueError, match="negative indices"):
        ROOT.items[-1]
    with pytest.raises(ValueError, match="cannot be empty"):
        ROOT[""]
    with pytest.raises(TypeError):
        ROOT[True]
    with pytest.raises(AttributeError):
        ROOT._private


def test_built_expressions_extract() -> None:
    doc = from_python({"g": {"a": "a1", "b": 20.08, "c": False}})

    assert extract(doc, [ROOT.descendants().c.to_expression()]) == from_python(False)
    assert extract(doc, [ROOT.g.any_key().to_expression()]) == from_python(
        ["a1", 20.08, False]
    )
