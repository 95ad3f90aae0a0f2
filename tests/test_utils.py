"""Tests for input list, flag and path helpers."""

import pytest

from verbump.utils import join_list, normalize_repo_path, parse_bool, raw_file_url, split_list, unique


def test_split_list_discards_empty_entries() -> None:
    """Empty entries from stray commas are dropped, names are stripped."""
    assert split_list("alice, bob,,carol,") == ("alice", "bob", "carol")


def test_split_list_empty_input() -> None:
    assert split_list("") == ()
    assert split_list(None) == ()
    assert split_list(" , ") == ()


def test_split_list_keeps_order_and_drops_repeats() -> None:
    assert split_list("b,a,b") == ("b", "a")


def test_unique_keeps_first_seen_order() -> None:
    assert unique(["x", "", "y", "x"]) == ("x", "y")


def test_join_list() -> None:
    assert join_list(("a", "b")) == "a,b"
    assert join_list(()) == ""


@pytest.mark.parametrize(
    "value, expected",
    [("true", True), ("TRUE", True), (" true ", True), ("false", False), ("", False), ("yes", False), (None, False)],
)
def test_parse_bool_only_true_is_true(value: str | None, expected: bool) -> None:
    assert parse_bool(value) is expected


def test_normalize_repo_path_collapses_separators() -> None:
    """Repeated separators and "." segments are removed, as is the leading separator."""
    assert normalize_repo_path("//.github/./workflows//templates/pr.yml") == ".github/workflows/templates/pr.yml"
    assert normalize_repo_path("/package.json") == "package.json"
    assert normalize_repo_path("package.json") == "package.json"


def test_raw_file_url_never_doubles_separator() -> None:
    """With or without a leading separator the URL has a single one."""
    base = "https://raw.githubusercontent.com/"
    expected = "https://raw.githubusercontent.com/owner/repo/main/.github/pr.yml"
    assert raw_file_url(base, "owner/repo", "main", "/.github/pr.yml") == expected
    assert raw_file_url(base, "owner/repo", "main", ".github/pr.yml") == expected
