"""
Basic Name Parsing Test Suite

This module contains tests for names without commas:
- Title, first, middle, last and suffix ordering
- Titles that imply a first name vs. a last name
- Words that look like titles or suffixes but are last names
- Conjunction and prefix joining seen through the parser
"""

import sys
from pathlib import Path

# Add the parent directory to path to import humanname
sys.path.insert(0, str(Path(__file__).parent.parent))

from humanname import HumanNameParser

# (input, (title, first, middle, last, suffix, nickname))
BASIC_NAME_TEST_CASES = [
    ("john smith", ("", "john", "", "smith", "", "")),
    ("john x smith", ("", "john", "x", "smith", "", "")),
    ("president john 'jack' fitzgerald kennedy", ("president", "john", "fitzgerald", "kennedy", "", "jack")),
    ("mr president richard (dick) nixon", ("mr president", "richard", "", "nixon", "", "dick")),
    ('"TREY" ROBERT HENRY BUSH III', ("", "ROBERT", "HENRY", "BUSH", "III", "TREY")),
    ("'TREY' ROBERT HENRY BUSH III", ("", "ROBERT", "HENRY", "BUSH", "III", "TREY")),
    ("John Smith Jr.", ("", "John", "", "Smith", "Jr.", "")),
    ("John Smith Esq", ("", "John", "", "Smith", "Esq", "")),
    ("Dr. Juan Q. Xavier de la Vega III", ("Dr.", "Juan", "Q. Xavier", "de la Vega", "III", "")),
    ("Juan de la Vega", ("", "Juan", "", "de la Vega", "", "")),
    ("johannes van der waals", ("", "johannes", "", "van der waals", "", "")),
    # Title followed by a single name
    ("Mr. Jones", ("Mr.", "", "", "Jones", "", "")),
    ("Uncle Adam", ("Uncle", "Adam", "", "", "", "")),
    ("Sir Elton", ("Sir", "Elton", "", "", "", "")),
    ("Dr.", ("Dr.", "", "", "", "", "")),
    # Title-looking words after real name words are last names
    ("John Bishop Smith", ("", "John", "", "Bishop Smith", "", "")),
    ("John Bishop Jr", ("", "John", "", "Bishop", "Jr", "")),
    # Conjunctions
    ("Mr. and Mrs. John Smith", ("Mr. and Mrs.", "John", "", "Smith", "", "")),
    # a single-letter conjunction is read as an initial
    ("Juan Q. Xavier Velasquez y Garcia", ("", "Juan", "Q. Xavier Velasquez y", "Garcia", "", "")),
    ("John Lord of the Universe", ("", "John", "", "Lord of the Universe", "", "")),
    ("John & Jane Smith", ("", "John & Jane", "", "Smith", "", "")),
    ("John D. and Catherine T. MacArthur", ("", "John", "D. and Catherine T.", "MacArthur", "", "")),
    # Single names
    ("Cher", ("", "Cher", "", "", "", "")),
    ("Jr", ("", "Jr", "", "", "", "")),
    ("John Jr", ("", "John", "", "Jr", "", "")),
]


def test_basic_names():
    """Test names without commas."""
    parser = HumanNameParser()

    passed = 0
    failed = 0

    for input_name, expected in BASIC_NAME_TEST_CASES:
        name = parser.parse(input_name)
        result = (name.title, name.first, name.middle, name.last, name.suffix, name.nickname)

        if result == expected:
            passed += 1
        else:
            failed += 1
            print(f"FAILED: '{input_name}': expected {expected}, got {result}")

    assert failed == 0, f"Basic name tests: {failed} failures out of {len(BASIC_NAME_TEST_CASES)} tests"
    print(f"Basic name tests: {passed} passed, {failed} failed")


def test_jfk_full_name_and_normalization():
    jfk = HumanNameParser().parse("president john 'jack' fitzgerald kennedy")

    assert jfk.full_name == "president john fitzgerald kennedy"
    assert jfk.original == "president john 'jack' fitzgerald kennedy"

    jfk.normalize()

    assert jfk.title == "President"
    assert jfk.first == "John"
    assert jfk.middle == "Fitzgerald"
    assert jfk.last == "Kennedy"
    assert jfk.suffix == ""
    assert jfk.nickname == "Jack"
    assert jfk.full_name == "President John Fitzgerald Kennedy"


def test_nixon_full_name_and_normalization(parser):
    nixon = parser.parse("mr president richard (dick) nixon")
    assert nixon.full_name == "mr president richard nixon"

    nixon.normalize()

    assert nixon.title == "Mr President"
    assert nixon.first == "Richard"
    assert nixon.middle == ""
    assert nixon.last == "Nixon"
    assert nixon.nickname == "Dick"
    assert nixon.full_name == "Mr President Richard Nixon"


def test_last_name_prefixes_and_base(parser):
    name = parser.parse("johannes van der waals")

    assert name.first == "johannes"
    assert name.last_prefixes == "van der"
    assert name.last_base == "waals"
    assert name.last == "van der waals"

    name.normalize()

    assert name.last == "van der Waals"
    assert name.last_prefixes == "van der"
    assert name.last_base == "Waals"


def test_prefix_at_start_is_a_first_name(parser):
    name = parser.parse("Van Morrison")

    assert name.first == "Van"
    assert name.last == "Morrison"
    assert name.last_prefixes == ""
    assert name.last_base == "Morrison"


def test_learned_title_compounds_do_not_leak_between_parses(parser):
    first = parser.parse("Mr. and Mrs. John Smith")
    assert first.title == "Mr. and Mrs."

    assert "mr and mrs" not in parser.config.tables.titles
    assert "mr and mrs" not in parser.config.tables.conjunctions

    again = parser.parse("Mr. and Mrs. John Smith")
    assert again == first


def test_str_renders_components_in_display_order(parser):
    name = parser.parse("Dr. Juan Q. (Johnny) Xavier de la Vega III")

    assert str(name) == "Dr. Juan Q. Xavier de la Vega III (Johnny)"
    assert str(parser.parse("")) == ""


if __name__ == "__main__":
    test_basic_names()
