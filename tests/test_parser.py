# ruff: noqa: S101
"""Tests for search-path parsing."""

from __future__ import annotations

from sdkcheck.parser import PathEntry, locate, parse_search_path

P64 = "C:\\Program Files\\dotnet\\"
P32 = "C:\\Program Files (x86)\\dotnet\\"


def test_parse_drops_empty_entries() -> None:
    entries = parse_search_path(f"C:\\Windows;; {P64} ;;{P32};")
    assert entries == [
        PathEntry(index=0, value="C:\\Windows"),
        PathEntry(index=1, value=P64),
        PathEntry(index=2, value=P32),
    ]


def test_parse_empty() -> None:
    assert parse_search_path(None) == []
    assert parse_search_path("") == []


def test_parse_custom_separator() -> None:
    assert [e.value for e in parse_search_path("/usr/bin:/bin", separator=":")] == ["/usr/bin", "/bin"]


def test_locate_finds_first_containing_entry() -> None:
    entries = parse_search_path(f"{P32};{P64}tools;{P64}")
    assert locate(entries, P64).index == 1
    assert locate(entries, P32).index == 0


def test_locate_is_case_sensitive() -> None:
    entries = parse_search_path(P64.lower())
    assert locate(entries, P64) is None


def test_locate_empty_fragment() -> None:
    assert locate(parse_search_path(P64), "") is None
