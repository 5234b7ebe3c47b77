"""
Edge Case Test Suite

This module tests input validation, empty and unparsable input, equality,
dictionary output and the module-level helpers.
"""

import sys
from pathlib import Path

import pytest

# Add the parent directory to path to import humanname
sys.path.insert(0, str(Path(__file__).parent.parent))

from humanname import HumanName, HumanNameParser, parse_name

# Inputs that leave no name pieces at all
EMPTY_INPUTS = ["", "   ", ",", " , , "]


def test_none_is_rejected(parser):
    with pytest.raises(ValueError):
        parser.parse(None)


@pytest.mark.parametrize("value", [123, 1.5, b"John Smith", ["John", "Smith"]])
def test_non_strings_are_rejected(parser, value):
    with pytest.raises(TypeError):
        parser.parse(value)


@pytest.mark.parametrize("value", EMPTY_INPUTS)
def test_empty_input_is_unparsable(parser, value):
    name = parser.parse(value)

    assert name.is_unparsable
    assert name.as_dict(include_empty=False) == {}
    assert str(name) == ""


def test_nickname_only_input_is_parsable(parser):
    name = parser.parse("(John Smith)")

    assert not name.is_unparsable
    assert name.nickname == "John Smith"
    assert name.first == ""
    assert name.full_name == ""
    assert str(name) == "(John Smith)"


def test_regular_name_is_parsable(parser):
    assert not parser.parse("Cher").is_unparsable
    assert not parser.parse("Dr.").is_unparsable


def test_title_and_lone_last_name_are_swapped(parser):
    # a title with a single name always moves that name to the other slot
    name = parser.parse("Smith, Mr.")

    assert name.title == "Mr."
    assert name.first == "Smith"
    assert name.last == ""


def test_equality_treats_empty_nickname_as_wildcard(parser):
    assert parser.parse("John 'Jack' Smith") == parser.parse("John Smith")
    assert parser.parse("John Smith") == parser.parse("John 'Jack' Smith")
    assert parser.parse("John 'Jack' Smith") != parser.parse("John 'Johnny' Smith")
    assert parser.parse("John Smith") != parser.parse("John Smith Jr.")


def test_equality_with_other_types(parser):
    name = parser.parse("John Smith")

    assert name != "John Smith"
    assert name is not None
    with pytest.raises(TypeError):
        hash(name)


def test_as_dict(parser):
    name = parser.parse("John Smith")

    assert name.as_dict(include_empty=False) == {"first": "John", "last": "Smith", "lastbase": "Smith"}
    assert name.as_dict() == {
        "title": "",
        "first": "John",
        "middle": "",
        "last": "Smith",
        "lastbase": "Smith",
        "lastprefixes": "",
        "suffix": "",
        "nickname": "",
    }


def test_prefix_and_base_cover_the_last_name(parser):
    for input_name in ["Juan de la Vega", "van der Waals, Johannes", "John Smith", "Mr. Del Richards", "Cher"]:
        name = parser.parse(input_name)
        words = [word for piece in name.last_list for word in piece.split()]

        assert name.last_prefix_list + name.last_base_list == words


def test_parse_name_helper():
    name = parse_name("Dr. Juan Q. Xavier de la Vega III")

    assert isinstance(name, HumanName)
    assert name.last == "de la Vega"


def test_parse_batch_is_independent(parser):
    names = parser.parse_batch(["Mr. and Mrs. John Smith", "Doe, Jane", "John Smith"])

    assert [name.first for name in names] == ["John", "Jane", "John"]
    assert [name.last for name in names] == ["Smith", "Doe", "Smith"]
    assert all(name.additional_name is None for name in names)


def test_normalize_without_parser():
    name = HumanName(original="john smith", full_name="john smith", first_list=["john"], last_list=["smith"])
    name.normalize()

    assert str(name) == "John Smith"


def test_parser_is_reusable_across_threads():
    from concurrent.futures import ThreadPoolExecutor

    parser = HumanNameParser()
    inputs = ["Mr. and Mrs. John Smith", "Doe, John A. Kenneth III", "johannes van der waals"] * 20

    with ThreadPoolExecutor(max_workers=4) as pool:
        results = list(pool.map(parser.parse, inputs))

    assert results == [parser.parse(value) for value in inputs]


if __name__ == "__main__":
    test_nickname_only_input_is_parsable(HumanNameParser())
