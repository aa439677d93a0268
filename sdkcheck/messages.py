"""
SDK Checker Messages — Registry of localized diagnostic catalogs.

Each catalog maps a MessageId to a template string for one language. The
auditor picks a catalog per call from the registry, so there is no
process-wide "current language" table.

The registry is designed to be extensible: add a language by building a
MessageCatalog and calling register_catalog().

Templates use lightweight `<color=...>` spans that a console may render or
ignore (see sdkcheck.render).
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

from sdkcheck import __version__

PROJECT_URL = "https://github.com/JonathanTremblay/UnityDotNetSDKChecker"
DEFAULT_LANGUAGE = "en"


class MessageId(Enum):
    """Keys every catalog must provide."""
    EXPLANATION = "explanation"
    SYSTEM_PATH = "systemPath"          # formatted with the search path
    SDK64_ONLY = "sdk64Only"
    SDK32_ONLY = "sdk32Only"
    BOTH_CORRECT = "bothCorrect"
    BOTH_WRONG_ORDER = "bothWrongOrder"
    NOT_FOUND = "notFound"


@dataclass(frozen=True)
class MessageCatalog:
    """An immutable set of templates for one language.

    Attributes:
        language: Two-letter language tag (e.g., "en", "fr")
        templates: One template per MessageId
    """
    language: str
    templates: Mapping[MessageId, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        missing = [m.value for m in MessageId if m not in self.templates]
        if missing:
            raise ValueError(
                f"Catalog '{self.language}' is missing messages: {', '.join(missing)}"
            )
        object.__setattr__(self, "templates", MappingProxyType(dict(self.templates)))

    def __getitem__(self, message_id: MessageId) -> str:
        return self.templates[message_id]

    def system_path(self, search_path: str) -> str:
        return self.templates[MessageId.SYSTEM_PATH].format(search_path)


# =============================================================================
# REGISTRY — All known catalogs, keyed by language tag
# =============================================================================

CATALOGS: dict[str, MessageCatalog] = {}


def register_catalog(catalog: MessageCatalog) -> None:
    """Register (or replace) the catalog for a language."""
    CATALOGS[catalog.language.lower()] = catalog


# Windows locale names ("French_Canada") and three-letter codes
LANGUAGE_ALIASES: dict[str, str] = {
    "english": "en",
    "eng": "en",
    "french": "fr",
    "fra": "fr",
    "fre": "fr",
}


def normalize_language(tag: Optional[str]) -> Optional[str]:
    """Reduce a locale tag like "fr_CA.UTF-8", "fr-CA" or "French_France" to "fr".

    Returns None for anything that is not a two-letter tag or a known alias.
    """
    if not tag:
        return None
    tag = tag.strip().lower()
    for sep in (".", "@", "_", "-"):
        tag = tag.split(sep)[0]
    if len(tag) == 2 and tag.isalpha():
        return tag
    return LANGUAGE_ALIASES.get(tag)


def get_catalog(language: Optional[str] = None) -> MessageCatalog:
    """Resolve a language tag to a catalog, falling back to English."""
    tag = normalize_language(language)
    if tag and tag in CATALOGS:
        return CATALOGS[tag]
    return CATALOGS[DEFAULT_LANGUAGE]


def available_languages() -> list[str]:
    return sorted(CATALOGS)


_VERSION_LINE = f"Version {__version__}"

# =============================================================================
# English
# =============================================================================
register_catalog(MessageCatalog(
    language="en",
    templates={
        MessageId.EXPLANATION: (
            "\nThe SDK checker verifies that the .NET SDK required by VSCode is correctly installed."
            f"\n** The SDK checker is free and open source. For updates and feedback, visit {PROJECT_URL}. **"
            f"\n** {_VERSION_LINE} **"
        ),
        MessageId.SYSTEM_PATH: "\nCurrent system PATH where executables are searched for: {0}",
        MessageId.SDK64_ONLY: (
            "<color=#90ee90>TEST PASSED</color> → .NET SDK (64-bit) is in the PATH. "
            "64-bit SDK path: "
        ),
        MessageId.SDK32_ONLY: (
            "<color=red>TEST FAILED</color> → .NET SDK (32-bit) is in the PATH, "
            "but not .NET SDK (64-bit). 32-bit SDK path: "
        ),
        MessageId.BOTH_CORRECT: (
            "<color=#90ee90>TEST PASSED</color> → .NET SDK (64-bit) is in the PATH "
            "before the 32-bit version. 64-bit SDK path: "
        ),
        MessageId.BOTH_WRONG_ORDER: (
            "<color=yellow>TEST PARTIALLY FAILED</color> → .NET SDK (64-bit) is in the PATH, "
            "BUT it comes after the 32-bit version (pre-2024 releases of the C# Dev Kit "
            "extension for VSCode pick the first one). 32-bit SDK path: "
        ),
        MessageId.NOT_FOUND: "<color=red>TEST FAILED</color> → .NET SDK is not found in the PATH. ",
    },
))

# =============================================================================
# French
# =============================================================================
register_catalog(MessageCatalog(
    language="fr",
    templates={
        MessageId.EXPLANATION: (
            "\nLe vérificateur de SDK contrôle que le .NET SDK requis par VSCode est installé correctement."
            "\n** Le vérificateur de SDK est gratuit et open source. Pour les mises à jour et les "
            f"commentaires, visitez {PROJECT_URL}. **"
            f"\n** {_VERSION_LINE} **"
        ),
        MessageId.SYSTEM_PATH: "\nChemin d'accès système actuel où les exécutables sont recherchés : {0}",
        MessageId.SDK64_ONLY: (
            "<color=#90ee90>TEST RÉUSSI</color> → .NET SDK (64-bit) est dans le PATH. "
            "Chemin du SDK 64-bit : "
        ),
        MessageId.SDK32_ONLY: (
            "<color=red>TEST ÉCHOUÉ</color> → .NET SDK (32-bit) est dans le PATH, "
            "mais pas .NET SDK (64-bit). Chemin du SDK 32-bit : "
        ),
        MessageId.BOTH_CORRECT: (
            "<color=#90ee90>TEST RÉUSSI</color> → .NET SDK (64-bit) est dans le PATH "
            "avant la version 32-bit. Chemin du SDK 64-bit : "
        ),
        MessageId.BOTH_WRONG_ORDER: (
            "<color=yellow>TEST PARTIELLEMENT ÉCHOUÉ</color> → .NET SDK (64-bit) est dans le PATH, "
            "MAIS il est après la version 32-bit (les versions pré-2024 de l'extension C# Dev Kit "
            "pour VSCode prennent la première). Chemin du SDK 32-bit : "
        ),
        MessageId.NOT_FOUND: "<color=red>TEST ÉCHOUÉ</color> → .NET SDK n'est pas trouvé dans le PATH. ",
    },
))
