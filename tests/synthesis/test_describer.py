"""Tests for description extraction and structural fallbacks."""

from __future__ import annotations

from handoff.models import CodeElement
from handoff.synthesis.describer import (
    clean_context,
    code_preview,
    describe_from_context,
    describe_from_name,
    is_relevant,
)


def _function(name: str, line: int = 1) -> CodeElement:
    return CodeElement(type="function", name=name, line=line)


def test_clean_context_strips_markdown() -> None:
    assert clean_context("## Title\n- item *bold* [link]") == "Title item bold link"
    assert clean_context("1.   Numbered   entry") == "Numbered entry"


def test_is_relevant_applies_domain_rules() -> None:
    assert is_relevant("validateEmail", "Email validation: check the format") is True
    assert is_relevant("validateEmail", "Login requires email, password and a captcha") is False
    assert is_relevant("hashPassword", "Passwords are stored with bcrypt") is True
    assert is_relevant("hashPassword", "Passwords must be at least 8 characters") is False


def test_is_relevant_rejects_architecture_boilerplate() -> None:
    assert is_relevant("loadUser", "loadUser follows separation of concerns") is False


def test_is_relevant_matches_name_or_split_name() -> None:
    assert is_relevant("loadUser", "The loadUser helper caches profiles") is True
    assert is_relevant("loadUser", "Call load user before rendering") is True
    assert is_relevant("loadUser", "Unrelated sentence about billing") is False


def test_describe_from_context_prefers_curated_extraction() -> None:
    description = describe_from_context(
        _function("validateEmail"),
        "Email validation: use a regex pattern to check email format",
    )

    assert description == "Email validation: use a regex pattern"


def test_describe_from_context_picks_relevant_fragment() -> None:
    description = describe_from_context(
        _function("loadUser"),
        "- The loadUser helper fetches a profile from the cache. It retries twice.",
    )

    assert description == "The loadUser helper fetches a profile from the cache"


def test_describe_from_context_rejects_generic_context() -> None:
    assert describe_from_context(_function("loadUser"), "Error handling is centralised") is None


def test_describe_from_context_rejects_short_or_unrelated_text() -> None:
    assert describe_from_context(_function("loadUser"), "load user") is None
    assert describe_from_context(_function("loadUser"), "Payments settle nightly") is None


def test_code_preview_returns_declaration_and_following_lines() -> None:
    content = "\n".join(f"line {index}" for index in range(1, 11))

    preview = code_preview(_function("x", line=3), content)

    assert preview.split("\n") == ["line 3", "line 4", "line 5", "line 6", "line 7"]


def test_describe_from_name_uses_curated_table() -> None:
    assert (
        describe_from_name(_function("validate_email"))
        == "Validates email addresses using regex pattern"
    )


def test_describe_from_name_uses_name_rules() -> None:
    assert describe_from_name(_function("getAllOrders")) == "Retrieves all items with optional filtering"
    assert describe_from_name(_function("getOrderById")) == "Retrieves specific item by ID"
    assert describe_from_name(_function("removeOrder")) == "Deletes specified resource"
    assert describe_from_name(_function("startWorker")) == "Starts specified service or process"


def test_describe_from_name_uses_code_keywords() -> None:
    content = "function processEmail(addr) {\n  return addr.includes('@');\n}\n"

    assert describe_from_name(_function("processEmail"), content) == "Handles email operations"


def test_describe_from_name_falls_back_to_type() -> None:
    element = CodeElement(type="class", name="Sprocket", line=1)

    assert describe_from_name(element) == "Sprocket - class implementation"
