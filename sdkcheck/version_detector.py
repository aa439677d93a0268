"""
SDK Checker Version Detector — Read installed SDK versions from an install root.

Given a .NET install directory (e.g. C:\\Program Files\\dotnet\\), this module can:
  1. List the SDK versions installed under its sdk/ folder
  2. Pick the newest one
  3. Compare versions against a minimum

Folder names that are not valid versions are skipped.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from packaging.version import InvalidVersion, Version

LOGGER = logging.getLogger(__name__)

SDK_SUBFOLDER = "sdk"


@dataclass
class SdkVersionReport:
    """Newest SDK under an install root and whether it is recent enough."""
    install_dir: str
    versions: list[Version]
    minimum: str

    @property
    def newest(self) -> Optional[Version]:
        return newest_version(self.versions)

    @property
    def sufficient(self) -> bool:
        return self.newest is not None and is_version_sufficient(str(self.newest), self.minimum)

    def __str__(self) -> str:
        if self.newest is None:
            return f"No SDK versions found under {self.install_dir}"
        verdict = "OK" if self.sufficient else f"older than {self.minimum}"
        return f"Newest SDK under {self.install_dir}: {self.newest} ({verdict})"


def list_sdk_versions(install_dir: str | Path) -> list[Version]:
    """List SDK versions installed under install_dir/sdk, oldest first.

    Args:
        install_dir: .NET install root

    Returns:
        Sorted versions; empty if the folder is missing or unreadable.
    """
    sdk_dir = Path(install_dir) / SDK_SUBFOLDER
    try:
        children = [p for p in sdk_dir.iterdir() if p.is_dir()]
    except OSError as e:
        LOGGER.debug("Cannot list %s: %s", sdk_dir, e)
        return []

    versions = []
    for child in children:
        try:
            versions.append(Version(child.name))
        except InvalidVersion:
            LOGGER.debug("Skipping non-version folder %s", child.name)
    return sorted(versions)


def newest_version(versions: list[Version]) -> Optional[Version]:
    return max(versions) if versions else None


def compare_versions(installed: str | Version, boundary: str | Version) -> int:
    """Order two SDK versions: -1, 0 or 1 as installed is below, at or above boundary.

    Raises:
        InvalidVersion: either value is not a PEP 440 version
    """
    v_installed = Version(str(installed))
    v_boundary = Version(str(boundary))
    return (v_installed > v_boundary) - (v_installed < v_boundary)


def is_version_sufficient(installed_version: str, minimum: str) -> bool:
    """True when installed_version >= minimum."""
    return compare_versions(installed_version, minimum) >= 0


def report_sdk_versions(install_dir: str, minimum: str) -> SdkVersionReport:
    """Inspect one install root found on the search path."""
    # Recorded paths use Windows separators
    local_dir = install_dir.replace("\\", os.sep)
    return SdkVersionReport(
        install_dir=install_dir,
        versions=list_sdk_versions(local_dir),
        minimum=minimum,
    )
