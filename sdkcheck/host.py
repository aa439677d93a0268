"""
SDK Checker Host — Everything that asks the operating system something.

  1. Platform gate (the check only makes sense on Windows)
  2. Reading the executable search path (process, user or machine scope)
  3. Enumerating volume roots
  4. Detecting the UI language

Failures here degrade to empty values so the audit can still run and report.
"""

import locale
import logging
import os
import string
import sys
from enum import Enum
from typing import Callable, Optional

from sdkcheck.messages import normalize_language

LOGGER = logging.getLogger(__name__)

TARGET_PLATFORM = "win32"

_MACHINE_ENV_KEY = r"SYSTEM\CurrentControlSet\Control\Session Manager\Environment"
_USER_ENV_KEY = "Environment"


class PathScope(Enum):
    """Where the search path is read from."""
    PROCESS = "process"   # the PATH this process inherited
    USER = "user"         # HKCU\Environment
    MACHINE = "machine"   # HKLM\...\Session Manager\Environment


def is_supported_platform(platform: Optional[str] = None) -> bool:
    """True only when running on Windows."""
    return (platform or sys.platform) == TARGET_PLATFORM


def _read_registry_path(hive_name: str, key: str) -> str:
    import winreg

    hive = getattr(winreg, hive_name)
    try:
        with winreg.OpenKey(hive, key, access=winreg.KEY_READ) as k:
            value, _ = winreg.QueryValueEx(k, "Path")
            return value or ""
    except OSError as e:
        LOGGER.warning("Could not read PATH from %s\\%s: %s", hive_name, key, e)
        return ""


def read_search_path(scope: PathScope = PathScope.PROCESS) -> str:
    """Read the raw search path for the given scope.

    Registry scopes are only available on Windows; elsewhere they return "".
    """
    if scope is PathScope.PROCESS:
        return os.environ.get("PATH", "")
    if not is_supported_platform():
        LOGGER.debug("Registry scope %s unavailable on %s", scope.value, sys.platform)
        return ""
    if scope is PathScope.MACHINE:
        return _read_registry_path("HKEY_LOCAL_MACHINE", _MACHINE_ENV_KEY)
    return _read_registry_path("HKEY_CURRENT_USER", _USER_ENV_KEY)


def list_volume_roots(exists: Callable[[str], bool] = os.path.exists) -> list[str]:
    """Drive roots that currently exist, e.g. ["C:\\\\", "D:\\\\"]."""
    roots = []
    for letter in string.ascii_uppercase:
        root = f"{letter}:\\"
        if exists(root):
            roots.append(root)
    return roots


def detect_language() -> str:
    """Two-letter UI language tag; "en" when nothing usable is set."""
    tag = None
    try:
        tag = locale.getlocale()[0]
    except ValueError as e:
        LOGGER.debug("Locale lookup failed: %s", e)
    if not tag:
        tag = os.getenv("LC_ALL") or os.getenv("LC_MESSAGES") or os.getenv("LANG")
    if not tag or tag.split(".")[0] in ("C", "POSIX"):
        return "en"
    return normalize_language(tag) or "en"
