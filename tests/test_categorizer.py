import pytest

from app.services.categorizer import UNCATEGORIZED, categorize


@pytest.mark.parametrize("description", ["", "   ", "\t\n", None])
def test_blank_is_uncategorized(description):
    assert categorize(description) == UNCATEGORIZED == "Uncategorized"


def test_trims_and_capitalizes_first_letter_only():
    assert categorize("  groceries store ") == "Groceries store"


def test_rest_of_string_untouched():
    assert categorize("eBay ORDER") == "EBay ORDER"
    assert categorize("RENT") == "RENT"


def test_leading_whitespace_and_first_letter_case_collapse():
    assert categorize(" groceries") == categorize("Groceries") == "Groceries"


def test_differences_elsewhere_stay_distinct():
    assert categorize("groceries Store") != categorize("groceries store")


def test_non_letter_first_character():
    assert categorize("7-eleven") == "7-eleven"
