"""Tests for return-value wording."""

from __future__ import annotations

import pytest

from handoff.synthesis.returns import describe_return


@pytest.mark.parametrize(
    ("flavor", "expected"),
    [
        ("javascript", "{boolean} True if validation passes, false otherwise"),
        ("python", "bool: True if validation passes, False otherwise"),
        ("java", "boolean True if validation passes, false otherwise"),
    ],
)
def test_predicates_describe_boolean_results(flavor: str, expected: str) -> None:
    assert describe_return("isActive", flavor) == expected
    assert describe_return("validateInput", flavor) == expected


def test_curated_names_use_specific_wording() -> None:
    assert describe_return("validateEmail") == "{boolean} True if email format is valid, false otherwise"
    assert describe_return("validate_email", "python") == "bool: True if email format is valid, False otherwise"


def test_getters_distinguish_collections() -> None:
    assert describe_return("getAllUsers") == "{Array} Array of retrieved items"
    assert describe_return("fetchUser") == "{Object|null} Retrieved item or null if not found"
    assert describe_return("listUsers") == "{*} Function return value"
    assert describe_return("findUserList", "python") == "list: List of retrieved items"


def test_substring_rules_match_anywhere_in_name() -> None:
    assert describe_return("authMiddleware") == "{void} Middleware function with side effects"
    assert describe_return("passwordHasher", "java") == "String Hashed/encrypted string"


def test_unknown_names_use_default() -> None:
    assert describe_return("doThing") == "{*} Function return value"
    assert describe_return("doThing", "python") == "Return value of the function"


def test_unknown_flavor_falls_back_to_javascript_wording() -> None:
    assert describe_return("deleteUser", "ruby") == "{boolean} True if deletion successful"
