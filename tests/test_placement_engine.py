# -*- coding: utf-8 -*-
"""Tests for family type lookup and wall-hosted placement."""
import os
import sys

import pytest

from mocks.revit_api import (
    DB,
    MockDocument,
    MockElementId,
    MockFamilySymbol,
    MockLevel,
    MockWall,
    mock_opening_symbol,
    mock_xyz,
)

ROOT = os.path.dirname(os.path.dirname(__file__))
LIB = os.path.join(ROOT, "OpeningsTools.extension", "lib")
if LIB not in sys.path:
    sys.path.insert(0, LIB)

import placement_engine  # noqa: E402


GM = DB.BuiltInCategory.OST_GenericModel


@pytest.mark.parametrize("fullname,expected", [
    ("Family : Type", ("Family", "Type")),
    ("Type", (None, "Type")),
    ("Fam : A : B", ("Fam", "A : B")),
    ("", (None, None)),
])
def test_parse_family_type(fullname, expected):
    assert placement_engine._parse_family_type(fullname) == expected


def test_find_by_type_name_case_insensitive():
    sym = mock_opening_symbol()
    doc = MockDocument(elements=[sym])
    assert placement_engine.find_family_symbol(doc, "z7_createopenings_opening", GM) is sym


def test_find_by_family_and_type():
    wrong_family = MockFamilySymbol(name="Opening", family_name="Other", category=GM)
    right = MockFamilySymbol(name="Opening", family_name="Holes", category=GM)
    doc = MockDocument(elements=[wrong_family, right])
    assert placement_engine.find_family_symbol(doc, "Holes : Opening", GM) is right


def test_find_type_name_with_colon():
    plain = MockFamilySymbol(name="A", family_name="Fam", category=GM)
    spaced = MockFamilySymbol(name="A : B", family_name="Fam", category=GM)
    doc = MockDocument(elements=[plain, spaced])
    assert placement_engine.find_family_symbol(doc, "Fam : A : B", GM) is spaced


def test_find_respects_category():
    sym = MockFamilySymbol(name="Z7_CreateOpenings_Opening", family_name="X", category=-1)
    doc = MockDocument(elements=[sym])
    assert placement_engine.find_family_symbol(doc, "Z7_CreateOpenings_Opening", GM) is None


def test_iter_family_symbols_limit():
    doc = MockDocument(elements=[mock_opening_symbol(name=str(i)) for i in range(5)])
    assert len(list(placement_engine.iter_family_symbols(doc, GM, limit=2))) == 2


def test_place_on_wall_level():
    lvl = MockLevel(elevation=0.0)
    wall = MockWall(level_id=lvl.Id)
    sym = mock_opening_symbol()
    doc = MockDocument(elements=[lvl, wall, sym])
    inst = placement_engine.place_wall_hosted_instance(doc, sym, mock_xyz(1, 0, 1), wall)
    assert inst.Host is wall
    assert inst.LevelId == lvl.Id
    assert inst.Location.Point == mock_xyz(1, 0, 1)


def test_place_falls_back_to_nearest_level():
    low = MockLevel(elevation=0.0)
    high = MockLevel(elevation=10.0)
    wall = MockWall(level_id=MockElementId.InvalidElementId)
    sym = mock_opening_symbol()
    doc = MockDocument(elements=[low, high, wall, sym])
    inst = placement_engine.place_wall_hosted_instance(doc, sym, mock_xyz(0, 0, 9), wall)
    assert inst.LevelId == high.Id


def test_place_without_levels_raises():
    wall = MockWall()
    sym = mock_opening_symbol()
    doc = MockDocument(elements=[wall, sym])
    with pytest.raises(Exception):
        placement_engine.place_wall_hosted_instance(doc, sym, mock_xyz(0, 0, 0), wall)


def test_place_without_wall_returns_none():
    doc = MockDocument()
    assert placement_engine.place_wall_hosted_instance(doc, mock_opening_symbol(), mock_xyz(), None) is None
