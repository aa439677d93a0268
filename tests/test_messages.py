# ruff: noqa: S101
"""Tests for the message catalogs."""

from __future__ import annotations

import pytest

from sdkcheck import __version__
from sdkcheck.messages import (
    CATALOGS,
    MessageCatalog,
    MessageId,
    available_languages,
    get_catalog,
    normalize_language,
    register_catalog,
)


def test_bundled_languages() -> None:
    assert available_languages() == ["en", "fr"]


@pytest.mark.parametrize(
    ("tag", "expected"),
    [
        ("fr", "fr"),
        ("fr_CA.UTF-8", "fr"),
        ("fr-FR", "fr"),
        ("EN_us", "en"),
        ("French_Canada", "fr"),
        ("English_United States", "en"),
        ("fra", "fr"),
        ("Frisian_Netherlands", None),
        ("C", None),
        ("", None),
        (None, None),
    ],
)
def test_normalize_language(tag, expected) -> None:
    assert normalize_language(tag) == expected


def test_unknown_language_falls_back_to_english() -> None:
    assert get_catalog("de").language == "en"
    assert get_catalog(None).language == "en"


def test_explanation_mentions_version() -> None:
    for language in available_languages():
        assert __version__ in get_catalog(language)[MessageId.EXPLANATION]


def test_system_path_is_formatted() -> None:
    assert get_catalog("en").system_path("C:\\X").endswith(": C:\\X")


def test_catalog_requires_every_message() -> None:
    with pytest.raises(ValueError, match="missing messages"):
        MessageCatalog(language="xx", templates={MessageId.EXPLANATION: "x"})


def test_catalog_is_read_only() -> None:
    catalog = get_catalog("en")
    with pytest.raises(TypeError):
        catalog.templates[MessageId.NOT_FOUND] = "changed"


def test_register_catalog(monkeypatch) -> None:
    monkeypatch.setitem(CATALOGS, "es", None)
    register_catalog(MessageCatalog(language="es", templates={m: m.value for m in MessageId}))
    assert get_catalog("es_ES")[MessageId.NOT_FOUND] == "notFound"


def test_unknown_windows_locale_name_falls_back_to_english() -> None:
    assert get_catalog("Frisian_Netherlands").language == "en"
