"""
SDK Checker Config — Auditor settings and their environment overrides.
"""

import os
from dataclasses import dataclass, replace
from typing import Optional

from packaging.version import InvalidVersion, Version

from sdkcheck.state import DEFAULT_NAMESPACE

# Installation subfolder under "Program Files" / "Program Files (x86)"
SDK_FOLDER_MARKER = "dotnet\\"
MINIMUM_SDK_VERSION = "7.0.0"

ENV_SHOW_POSITIVE = "SDKCHECK_SHOW_POSITIVE"
ENV_LANGUAGE = "SDKCHECK_LANG"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class AuditorConfig:
    """Settings for one auditor.

    Attributes:
        show_positive_messages: Also display passing results
        sdk_folder_marker: Fixed install subfolder name (with trailing backslash)
        language: Catalog language; None means English
        minimum_sdk_version: Lowest SDK version reported as sufficient
        state_namespace: Key prefix for persisted results
    """
    show_positive_messages: bool = False
    sdk_folder_marker: str = SDK_FOLDER_MARKER
    language: Optional[str] = None
    minimum_sdk_version: str = MINIMUM_SDK_VERSION
    state_namespace: str = DEFAULT_NAMESPACE

    def __post_init__(self) -> None:
        try:
            Version(self.minimum_sdk_version)
        except InvalidVersion as e:
            raise ValueError(f"Invalid minimum_sdk_version: {self.minimum_sdk_version!r}") from e

    def with_overrides(self, **changes) -> "AuditorConfig":
        """Copy with the given non-None fields replaced."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


def config_from_env(base: Optional[AuditorConfig] = None) -> AuditorConfig:
    """Apply SDKCHECK_SHOW_POSITIVE and SDKCHECK_LANG on top of base."""
    base = base or AuditorConfig()
    show = os.getenv(ENV_SHOW_POSITIVE)
    return base.with_overrides(
        show_positive_messages=(show.strip().lower() in _TRUTHY) if show is not None else None,
        language=os.getenv(ENV_LANGUAGE) or None,
    )
