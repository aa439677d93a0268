"""
SDK Checker State — Session-scoped storage of the last AuditResult.

The auditor only needs to know what it reported last time within the same
session, so stores are deliberately small:

  - MemoryStateStore: lives as long as the object (tests, scenario runner)
  - JsonStateStore: one JSON file per session in the temp directory, so
    repeated CLI runs from the same shell share state

Both read and write the five AuditResult fields as one record.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Optional, Protocol

LOGGER = logging.getLogger(__name__)

DEFAULT_NAMESPACE = "DotNetSDKChecker"
SESSION_ENV_VAR = "SDKCHECK_SESSION"


class StateStoreError(Exception):
    """Raised when the persisted result cannot be read or written."""


@dataclass(frozen=True)
class AuditResult:
    """The outcome of one audit pass.

    has64_first only means something when both has32 and has64 are true.
    """
    has32: bool = False
    has64: bool = False
    has64_first: bool = False
    path32: str = ""
    path64: str = ""

    @property
    def has_both(self) -> bool:
        return self.has32 and self.has64

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "AuditResult":
        """Build a result from a stored record, rejecting wrong field types."""
        if not isinstance(data, dict):
            raise StateStoreError(f"Expected an object, got {type(data).__name__}")
        values = {}
        for f in fields(cls):
            value = data.get(f.name, f.default)
            expected = bool if f.type in (bool, "bool") else str
            if not isinstance(value, expected):
                raise StateStoreError(f"Field '{f.name}' has invalid value {value!r}")
            values[f.name] = value
        return cls(**values)


EMPTY_RESULT = AuditResult()


class StateStore(Protocol):
    def load(self) -> Optional[AuditResult]: ...

    def save(self, result: AuditResult) -> None: ...

    def clear(self) -> None: ...


class MemoryStateStore:
    """Keeps the last result in memory."""

    def __init__(self, initial: Optional[AuditResult] = None) -> None:
        self._result = initial
        self.writes = 0

    def load(self) -> Optional[AuditResult]:
        return self._result

    def save(self, result: AuditResult) -> None:
        self._result = result
        self.writes += 1

    def clear(self) -> None:
        self._result = None


def default_session_id() -> str:
    """Session key: $SDKCHECK_SESSION, else the parent process id."""
    return os.getenv(SESSION_ENV_VAR) or str(os.getppid())


class JsonStateStore:
    """Stores the last result as a JSON file under the temp directory.

    Args:
        namespace: Fixed key prefix shared by all sessions
        session_id: Session key; defaults to default_session_id()
        directory: Where state files live; defaults to the system temp dir
    """

    def __init__(
        self,
        namespace: str = DEFAULT_NAMESPACE,
        session_id: Optional[str] = None,
        directory: str | Path | None = None,
    ) -> None:
        self.namespace = namespace
        self.session_id = session_id or default_session_id()
        self.directory = Path(directory) if directory else Path(tempfile.gettempdir())

    @property
    def path(self) -> Path:
        return self.directory / f"{self.namespace}-{self.session_id}.json"

    def load(self) -> Optional[AuditResult]:
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise StateStoreError(f"Could not read {self.path}: {e}") from e
        return AuditResult.from_dict(payload)

    def save(self, result: AuditResult) -> None:
        tmp = self.path.with_suffix(".tmp")
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(result.to_dict(), indent=2, sort_keys=True) + "\n", encoding="utf-8")
            os.replace(tmp, self.path)
        except OSError as e:
            raise StateStoreError(f"Could not write {self.path}: {e}") from e
        LOGGER.debug("Saved audit result to %s", self.path)

    def clear(self) -> None:
        try:
            self.path.unlink(missing_ok=True)
        except OSError as e:
            raise StateStoreError(f"Could not remove {self.path}: {e}") from e
