"""
SDK Checker Search-Path Parser — Split PATH into ordered entries.

The auditor works on the raw string (substring matches and positions), so
this module is only used for reporting: which entry holds each SDK and
where it sits in the lookup order.

This module is purely a parser — it does NOT decide pass or fail.
"""

from dataclasses import dataclass
from typing import Optional

WINDOWS_SEPARATOR = ";"


@dataclass
class PathEntry:
    """One directory on the search path."""
    index: int      # position in lookup order, 0-based, after dropping empties
    value: str      # the directory as written, surrounding whitespace removed


def parse_search_path(search_path: Optional[str], separator: str = WINDOWS_SEPARATOR) -> list[PathEntry]:
    """Split a search path into entries, dropping empty ones.

    Args:
        search_path: Raw PATH value
        separator: Entry delimiter (";" on Windows)

    Returns:
        Entries in lookup order.
    """
    entries = []
    for raw in (search_path or "").split(separator):
        value = raw.strip()
        if value:
            entries.append(PathEntry(index=len(entries), value=value))
    return entries


def locate(entries: list[PathEntry], fragment: str) -> Optional[PathEntry]:
    """First entry containing fragment, or None. Case-sensitive, like the audit."""
    if not fragment:
        return None
    for entry in entries:
        if fragment in entry.value:
            return entry
    return None
