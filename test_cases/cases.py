"""
SDK Checker Scenarios — Canned search paths with known outcomes.

Each case is a PATH a student machine might plausibly have, together with
the drives that exist and the outcome the checker must report.

Structure per case:
    - id: Unique identifier
    - description: What the machine looks like
    - search_path: Raw PATH value (";"-separated)
    - volume_roots: Drive roots to search, in order
    - expected: Expected outcome value (see sdkcheck.auditor.Outcome)
    - expected_path32 / expected_path64: Paths the checker must record
"""

from dataclasses import dataclass, field

SYSTEM_DIRS = r"C:\Windows\system32;C:\Windows;C:\Windows\System32\Wbem"
X64 = "Program Files\\dotnet\\"
X86 = "Program Files (x86)\\dotnet\\"


@dataclass
class ScenarioCase:
    """One PATH scenario for the checker."""
    id: str
    description: str
    search_path: str
    expected: str
    volume_roots: list[str] = field(default_factory=lambda: ["C:\\"])
    expected_path32: str = ""
    expected_path64: str = ""


# =============================================================================
# CASE 1: Fresh 64-bit install
# =============================================================================
CASE_64_ONLY = ScenarioCase(
    id="sdk64_only",
    description="Only the 64-bit SDK installer was run.",
    search_path=f"{SYSTEM_DIRS};C:\\{X64};C:\\Users\\student\\AppData\\Local\\Microsoft\\WindowsApps",
    expected="sdk64_only",
    expected_path64=f"C:\\{X64}",
)

# =============================================================================
# CASE 2: Only the 32-bit SDK
# =============================================================================
CASE_32_ONLY = ScenarioCase(
    id="sdk32_only",
    description="The x86 installer was picked by mistake.",
    search_path=f"{SYSTEM_DIRS};C:\\{X86}",
    expected="sdk32_only",
    expected_path32=f"C:\\{X86}",
)

# =============================================================================
# CASE 3: Both, 64-bit first
# =============================================================================
CASE_BOTH_CORRECT = ScenarioCase(
    id="both_correct",
    description="Both SDKs installed; the 64-bit entry comes first.",
    search_path=f"{SYSTEM_DIRS};C:\\{X64};C:\\{X86}",
    expected="both_correct_order",
    expected_path32=f"C:\\{X86}",
    expected_path64=f"C:\\{X64}",
)

# =============================================================================
# CASE 4: Both, 32-bit first
# =============================================================================
CASE_BOTH_WRONG = ScenarioCase(
    id="both_wrong_order",
    description="The 32-bit SDK was installed later and prepended itself.",
    search_path=f"C:\\{X86};{SYSTEM_DIRS};C:\\{X64}",
    expected="both_wrong_order",
    expected_path32=f"C:\\{X86}",
    expected_path64=f"C:\\{X64}",
)

# =============================================================================
# CASE 5: Nothing on PATH
# =============================================================================
CASE_NOT_FOUND = ScenarioCase(
    id="not_found",
    description="No SDK on PATH at all.",
    search_path=SYSTEM_DIRS,
    expected="not_found",
)

# =============================================================================
# CASE 6: Each SDK on a different drive
# =============================================================================
CASE_SPLIT_DRIVES = ScenarioCase(
    id="split_drives",
    description="64-bit SDK on D:, 32-bit SDK on C:, 64-bit listed first.",
    search_path=f"D:\\{X64};{SYSTEM_DIRS};C:\\{X86}",
    volume_roots=["C:\\", "D:\\"],
    expected="both_correct_order",
    expected_path32=f"C:\\{X86}",
    expected_path64=f"D:\\{X64}",
)

# =============================================================================
# CASE 7: Install on a drive that is not searched
# =============================================================================
CASE_UNSEARCHED_DRIVE = ScenarioCase(
    id="unsearched_drive",
    description="The SDK lives on E:, which is not among the searched drives.",
    search_path=f"{SYSTEM_DIRS};E:\\{X64}",
    volume_roots=["C:\\", "D:\\"],
    expected="not_found",
)

# =============================================================================
# CASE 8: No trailing backslash on the PATH entry
# =============================================================================
CASE_NO_TRAILING_SLASH = ScenarioCase(
    id="no_trailing_backslash",
    description="The entry is written without a trailing backslash, so it does not match.",
    search_path=f"{SYSTEM_DIRS};C:\\Program Files\\dotnet",
    expected="not_found",
)


# =============================================================================
# ALL CASES REGISTRY
# =============================================================================
ALL_CASES: list[ScenarioCase] = [
    CASE_64_ONLY,
    CASE_32_ONLY,
    CASE_BOTH_CORRECT,
    CASE_BOTH_WRONG,
    CASE_NOT_FOUND,
    CASE_SPLIT_DRIVES,
    CASE_UNSEARCHED_DRIVE,
    CASE_NO_TRAILING_SLASH,
]


def print_case_summary():
    """Print a summary table of all scenarios."""
    print(f"{'ID':<24} {'Expected':<20} {'Drives':<10} {'Description'}")
    print("-" * 90)
    for case in ALL_CASES:
        drives = ",".join(r.rstrip("\\") for r in case.volume_roots)
        print(f"{case.id:<24} {case.expected:<20} {drives:<10} {case.description}")


if __name__ == "__main__":
    print_case_summary()
