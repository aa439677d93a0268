# ruff: noqa: S101
"""Tests for the search-path auditor."""

from __future__ import annotations

import itertools

import pytest

from sdkcheck.auditor import (
    Outcome,
    SDKPathAuditor,
    candidate_paths,
    classify,
    compose_message,
    detect,
)
from sdkcheck.config import AuditorConfig
from sdkcheck.messages import MessageId, get_catalog
from sdkcheck.state import AuditResult, JsonStateStore, MemoryStateStore, StateStoreError

P64 = "C:\\Program Files\\dotnet\\"
P32 = "C:\\Program Files (x86)\\dotnet\\"
D64 = "D:\\Program Files\\dotnet\\"
SYSTEM = "C:\\Windows\\system32;C:\\Windows"
ROOTS = ["C:\\"]


class FailingStore:
    def load(self):
        raise StateStoreError("unreadable")

    def save(self, result):
        raise StateStoreError("read-only")

    def clear(self):
        pass


def _auditor(show_positive: bool = False, store=None, language=None):
    shown: list[str] = []
    auditor = SDKPathAuditor(
        config=AuditorConfig(show_positive_messages=show_positive, language=language),
        store=store if store is not None else MemoryStateStore(),
        emit=shown.append,
    )
    return auditor, shown


def test_candidate_paths_use_windows_joins() -> None:
    assert candidate_paths("C:\\", "dotnet\\") == (P32, P64)


def test_sdk64_only_scenario_is_suppressed_by_default() -> None:
    auditor, shown = _auditor()
    outcome = auditor.audit(f"{SYSTEM};{P64}", ROOTS)

    assert outcome.outcome is Outcome.SDK64_ONLY
    assert outcome.result == AuditResult(has64=True, has64_first=True, path64=P64)
    assert not outcome.displayed
    assert shown == []
    assert auditor.store.load() == outcome.result


def test_not_found_is_always_displayed() -> None:
    auditor, shown = _auditor(show_positive=False)
    outcome = auditor.audit(SYSTEM, ROOTS)

    assert outcome.outcome is Outcome.NOT_FOUND
    assert outcome.displayed
    assert shown == [outcome.message]
    catalog = get_catalog("en")
    assert outcome.message.startswith(catalog[MessageId.NOT_FOUND] + catalog[MessageId.EXPLANATION])
    assert outcome.message.endswith(catalog.system_path(SYSTEM))


def test_second_identical_call_is_unchanged() -> None:
    store = MemoryStateStore()
    auditor, shown = _auditor(store=store)

    first = auditor.audit(SYSTEM, ROOTS)
    second = auditor.audit(SYSTEM, ROOTS)

    assert first.outcome is Outcome.NOT_FOUND
    assert second.outcome is Outcome.UNCHANGED
    assert second.message is None
    assert len(shown) == 1
    assert store.writes == 1


def test_change_between_calls_is_reported() -> None:
    auditor, shown = _auditor()
    first = auditor.audit(f"{SYSTEM};{P32}", ROOTS)
    second = auditor.audit(f"{SYSTEM};{P32};{P64}", ROOTS)

    assert first.outcome is Outcome.SDK32_ONLY
    assert second.outcome is Outcome.BOTH_WRONG_ORDER
    assert len(shown) == 2


def test_order_sensitivity() -> None:
    correct, _ = _auditor(show_positive=True)
    wrong, _ = _auditor(show_positive=True)

    assert correct.audit(f"{P64};{SYSTEM};{P32}", ROOTS).outcome is Outcome.BOTH_CORRECT_ORDER
    assert wrong.audit(f"{P32};{SYSTEM};{P64}", ROOTS).outcome is Outcome.BOTH_WRONG_ORDER


def test_wrong_order_message_names_the_32bit_path() -> None:
    auditor, _ = _auditor()
    outcome = auditor.audit(f"{P32};{P64}", ROOTS)

    catalog = get_catalog("en")
    assert outcome.message.startswith(catalog[MessageId.BOTH_WRONG_ORDER] + P32)


def test_show_positive_messages_displays_passes() -> None:
    auditor, shown = _auditor(show_positive=True)
    outcome = auditor.audit(f"{P64};{P32}", ROOTS)

    assert outcome.outcome is Outcome.BOTH_CORRECT_ORDER
    assert outcome.displayed
    assert outcome.message.startswith(get_catalog("en")[MessageId.BOTH_CORRECT] + P64)
    assert shown == [outcome.message]


@pytest.mark.parametrize(
    ("search_path", "roots"),
    [
        (None, ROOTS),
        ("", ROOTS),
        (f"{P64};{P32}", []),
        (f"{P64};{P32}", None),
        (";;;", ["C:\\", "D:\\"]),
    ],
)
def test_empty_inputs_degrade_to_not_found(search_path, roots) -> None:
    auditor, _ = _auditor()
    assert auditor.audit(search_path, roots).outcome is Outcome.NOT_FOUND


def test_detect_checks_every_volume_until_both_found() -> None:
    result = detect(f"{D64};{SYSTEM};{P32}", ["C:\\", "D:\\", "E:\\"], "dotnet\\")

    assert result.has32 and result.has64
    assert result.path32 == P32
    assert result.path64 == D64
    # string position decides, not volume order
    assert result.has64_first


def test_detect_first_matching_volume_wins() -> None:
    result = detect(f"{D64};{P64}", ["C:\\", "D:\\"], "dotnet\\")
    assert result.path64 == P64


def test_detect_leaves_unmatched_paths_empty() -> None:
    result = detect(f"{SYSTEM};{P64}", ["C:\\", "D:\\"], "dotnet\\")
    assert result.path32 == ""
    assert result.has64_first


def test_custom_marker() -> None:
    auditor = SDKPathAuditor(config=AuditorConfig(sdk_folder_marker="dotnet-preview\\"))
    outcome = auditor.audit(f"{P32};C:\\Program Files\\dotnet-preview\\", ROOTS)
    assert outcome.outcome is Outcome.SDK64_ONLY


@pytest.mark.parametrize(
    ("has32", "has64", "has64_first"),
    list(itertools.product([False, True], repeat=3)),
)
def test_classify_is_total_and_ignores_sentinel(has32, has64, has64_first) -> None:
    outcome = classify(AuditResult(has32=has32, has64=has64, has64_first=has64_first))

    assert outcome is not Outcome.UNCHANGED
    if has64 and not has32:
        assert outcome is Outcome.SDK64_ONLY
    elif has32 and not has64:
        assert outcome is Outcome.SDK32_ONLY
    elif has32 and has64:
        expected = Outcome.BOTH_CORRECT_ORDER if has64_first else Outcome.BOTH_WRONG_ORDER
        assert outcome is expected
    else:
        assert outcome is Outcome.NOT_FOUND


def test_force_language_applies_to_one_call_only() -> None:
    store = MemoryStateStore()
    auditor, _ = _auditor(store=store)

    forced = auditor.audit(SYSTEM, ROOTS, force_language="fr")
    store.clear()
    default = auditor.audit(SYSTEM, ROOTS)

    assert "TEST ÉCHOUÉ" in forced.message
    assert "TEST FAILED" in default.message


def test_configured_language_is_used() -> None:
    auditor, _ = _auditor(language="fr_CA")
    assert "n'est pas trouvé" in auditor.audit(SYSTEM, ROOTS).message


def test_store_failures_still_show_message() -> None:
    auditor, shown = _auditor(store=FailingStore())

    first = auditor.audit(SYSTEM, ROOTS)
    second = auditor.audit(SYSTEM, ROOTS)

    assert first.outcome is Outcome.NOT_FOUND
    assert second.outcome is Outcome.NOT_FOUND
    assert len(shown) == 2


def test_compose_message_for_not_found_has_no_path() -> None:
    catalog = get_catalog("en")
    result = AuditResult(has64_first=True)
    message = compose_message(Outcome.NOT_FOUND, result, "X", catalog)
    assert message == (
        catalog[MessageId.NOT_FOUND] + catalog[MessageId.EXPLANATION] + catalog.system_path("X")
    )


def test_outcome_status() -> None:
    assert Outcome.SDK64_ONLY.status == "pass"
    assert Outcome.BOTH_CORRECT_ORDER.status == "pass"
    assert Outcome.BOTH_WRONG_ORDER.status == "partial"
    assert Outcome.SDK32_ONLY.status == "fail"
    assert Outcome.NOT_FOUND.status == "fail"
    assert Outcome.UNCHANGED.status == "unchanged"


def test_unusable_json_store_degrades_to_empty_default(tmp_path) -> None:
    store = JsonStateStore(session_id="x" * 300, directory=tmp_path)
    auditor, shown = _auditor(store=store)

    outcome = auditor.audit(SYSTEM, ROOTS)

    assert outcome.outcome is Outcome.NOT_FOUND
    assert shown == [outcome.message]
