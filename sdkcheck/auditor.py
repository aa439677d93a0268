"""
SDK Checker Auditor — Core diagnostic engine.

Ties together the message catalogs and the session state store to decide
whether the .NET SDK is correctly placed on the executable search path.

The auditor is platform-agnostic: it takes the search path and volume roots
as plain inputs and joins Windows paths with ntpath, so it can be exercised
anywhere. Host gating lives in sdkcheck.cli / sdkcheck.host.

Usage:
    from sdkcheck.auditor import SDKPathAuditor

    auditor = SDKPathAuditor()
    outcome = auditor.audit(os.environ["PATH"], ["C:\\\\", "D:\\\\"])
    print(outcome.outcome, outcome.message)
"""

import logging
import ntpath
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Sequence

from sdkcheck.config import AuditorConfig
from sdkcheck.messages import MessageCatalog, MessageId, get_catalog
from sdkcheck.state import (
    EMPTY_RESULT,
    AuditResult,
    MemoryStateStore,
    StateStore,
    StateStoreError,
)

LOGGER = logging.getLogger(__name__)

PROGRAM_FILES_32 = "Program Files (x86)"
PROGRAM_FILES_64 = "Program Files"


class Outcome(Enum):
    """Classification of one audit pass."""
    UNCHANGED = "unchanged"
    SDK64_ONLY = "sdk64_only"
    SDK32_ONLY = "sdk32_only"
    BOTH_CORRECT_ORDER = "both_correct_order"
    BOTH_WRONG_ORDER = "both_wrong_order"
    NOT_FOUND = "not_found"

    @property
    def is_positive(self) -> bool:
        return self in (Outcome.SDK64_ONLY, Outcome.BOTH_CORRECT_ORDER)

    @property
    def status(self) -> str:
        """pass / partial / fail, or unchanged."""
        if self is Outcome.UNCHANGED:
            return "unchanged"
        if self.is_positive:
            return "pass"
        if self is Outcome.BOTH_WRONG_ORDER:
            return "partial"
        return "fail"


# Template and which recorded path follows it
_MESSAGE_PARTS: dict[Outcome, tuple[MessageId, Optional[str]]] = {
    Outcome.SDK64_ONLY: (MessageId.SDK64_ONLY, "path64"),
    Outcome.SDK32_ONLY: (MessageId.SDK32_ONLY, "path32"),
    Outcome.BOTH_CORRECT_ORDER: (MessageId.BOTH_CORRECT, "path64"),
    Outcome.BOTH_WRONG_ORDER: (MessageId.BOTH_WRONG_ORDER, "path32"),
    Outcome.NOT_FOUND: (MessageId.NOT_FOUND, None),
}


@dataclass
class AuditOutcome:
    """What a single audit call produced."""
    outcome: Outcome
    result: AuditResult
    message: Optional[str] = None   # None when unchanged or suppressed

    @property
    def displayed(self) -> bool:
        return self.message is not None

    def __str__(self) -> str:
        if self.message is not None:
            return self.message
        return f"[{self.outcome.status.upper()}] {self.outcome.value} (not displayed)"


def candidate_paths(root: str, marker: str) -> tuple[str, str]:
    """Return (path32, path64) install fragments for one volume root."""
    return (
        ntpath.join(root, PROGRAM_FILES_32, marker),
        ntpath.join(root, PROGRAM_FILES_64, marker),
    )


def detect(search_path: str, volume_roots: Sequence[str], marker: str) -> AuditResult:
    """Look for the 32-bit and 64-bit install fragments in the search path.

    The first matching root wins for each bitness. The two bitnesses may
    match on different volumes. Ordering compares string positions in the
    search path, not the order volumes were searched.
    """
    has32 = False
    has64 = False
    path32 = ""
    path64 = ""

    for root in volume_roots:
        candidate32, candidate64 = candidate_paths(root, marker)
        if not has32 and candidate32 in search_path:
            has32, path32 = True, candidate32
        if not has64 and candidate64 in search_path:
            has64, path64 = True, candidate64
        if has32 and has64:
            break

    has64_first = True
    if has32 and has64:
        has64_first = search_path.index(path64) < search_path.index(path32)

    return AuditResult(
        has32=has32,
        has64=has64,
        has64_first=has64_first,
        path32=path32,
        path64=path64,
    )


def classify(result: AuditResult) -> Outcome:
    """Map a result to exactly one of the five reportable outcomes."""
    if result.has64 and not result.has32:
        return Outcome.SDK64_ONLY
    if result.has32 and not result.has64:
        return Outcome.SDK32_ONLY
    if result.has_both and result.has64_first:
        return Outcome.BOTH_CORRECT_ORDER
    if result.has_both:
        return Outcome.BOTH_WRONG_ORDER
    return Outcome.NOT_FOUND


def compose_message(
    outcome: Outcome,
    result: AuditResult,
    search_path: str,
    catalog: MessageCatalog,
) -> str:
    """Build the diagnostic line: template, path, explanation, search path."""
    message_id, path_field = _MESSAGE_PARTS[outcome]
    path = getattr(result, path_field) if path_field else ""
    return (
        catalog[message_id]
        + path
        + catalog[MessageId.EXPLANATION]
        + catalog.system_path(search_path)
    )


class SDKPathAuditor:
    """Checks the search path and reports only when the result changed.

    Args:
        config: Behaviour flags (positive messages, marker, language)
        store: Where the previous result lives; in-memory by default
        emit: Receives each displayed message; logs at INFO by default
    """

    def __init__(
        self,
        config: Optional[AuditorConfig] = None,
        store: Optional[StateStore] = None,
        emit: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.config = config or AuditorConfig()
        self.store = store if store is not None else MemoryStateStore()
        self.emit = emit or LOGGER.info

    def audit(
        self,
        search_path: Optional[str],
        volume_roots: Optional[Sequence[str]],
        force_language: Optional[str] = None,
    ) -> AuditOutcome:
        """Run one audit pass.

        Args:
            search_path: Raw executable search path (entries in OS order)
            volume_roots: Volume roots to search, in order; may be empty
            force_language: Catalog language for this call only

        Returns:
            AuditOutcome. Never raises for bad input or store failures.
        """
        search_path = search_path or ""
        result = detect(search_path, list(volume_roots or ()), self.config.sdk_folder_marker)

        previous = self._load_previous()
        if result == previous:
            LOGGER.debug("Audit result unchanged: %s", result)
            return AuditOutcome(outcome=Outcome.UNCHANGED, result=result)

        self._save(result)
        outcome = classify(result)

        if outcome.is_positive and not self.config.show_positive_messages:
            LOGGER.debug("Suppressed positive outcome %s", outcome.value)
            return AuditOutcome(outcome=outcome, result=result)

        catalog = get_catalog(force_language or self.config.language)
        message = compose_message(outcome, result, search_path, catalog)
        self.emit(message)
        return AuditOutcome(outcome=outcome, result=result, message=message)

    def _load_previous(self) -> AuditResult:
        try:
            previous = self.store.load()
        except StateStoreError as e:
            LOGGER.warning("Ignoring unreadable audit state: %s", e)
            return EMPTY_RESULT
        return previous if previous is not None else EMPTY_RESULT

    def _save(self, result: AuditResult) -> None:
        try:
            self.store.save(result)
        except StateStoreError as e:
            LOGGER.warning("Could not persist audit state: %s", e)
