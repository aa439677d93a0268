"""
SDK Checker Scenario Runner

Runs the canned PATH scenarios through the auditor, the way the checker
behaves inside a session:
  1. Show the PATH and the drives being searched
  2. First audit → classify and (maybe) display the diagnostic
  3. Second audit with the same inputs → must stay quiet

Usage:
    python main.py                  # Run all scenarios
    python main.py both_wrong_order # Run a specific scenario
    python main.py --list           # List all available scenarios
    python main.py --eval           # Check every scenario against its expected outcome
    python main.py --lang fr        # French messages
"""

import argparse
import sys
import textwrap

from test_cases.cases import ALL_CASES, ScenarioCase
from sdkcheck.auditor import Outcome, SDKPathAuditor
from sdkcheck.config import AuditorConfig
from sdkcheck.parser import parse_search_path
from sdkcheck.render import MarkupMode, render
from sdkcheck.state import MemoryStateStore


def banner(text: str, char: str = "="):
    """Print a formatted banner."""
    width = 70
    print(f"\n{char * width}")
    print(f"  {text}")
    print(f"{char * width}")


def step(num: int, text: str):
    """Print a step indicator."""
    print(f"\n  [{num}] {text}")
    print(f"  {'-' * 60}")


def run_case(case: ScenarioCase, config: AuditorConfig, mode: MarkupMode = MarkupMode.AUTO) -> bool:
    """Execute the two-audit flow for a single scenario. Returns True on match."""
    banner(f"CASE: {case.id}", "=")
    print(f"\n  {case.description}")

    step(1, "Search path and searched drives")
    for entry in parse_search_path(case.search_path):
        print(f"    {entry.index:3d} | {entry.value}")
    print(f"    Drives: {', '.join(case.volume_roots)}")

    shown = []
    auditor = SDKPathAuditor(config=config, store=MemoryStateStore(), emit=shown.append)

    step(2, "First audit")
    first = auditor.audit(case.search_path, case.volume_roots)
    print(f"    Outcome: {first.outcome.value} ({first.outcome.status})")
    if first.displayed:
        print(textwrap.indent(render(first.message, mode), "      "))
    else:
        print("    (positive result, not displayed)")

    step(3, "Second audit, same inputs")
    second = auditor.audit(case.search_path, case.volume_roots)
    print(f"    Outcome: {second.outcome.value}")

    ok = first.outcome.value == case.expected and second.outcome is Outcome.UNCHANGED
    print(f"\n    {'✅ as expected' if ok else f'❌ expected {case.expected}'}")
    return ok


def run_evaluation(cases_to_run: list[ScenarioCase], config: AuditorConfig) -> list[dict]:
    """Audit every scenario once and compare with its expectations.

    For each case:
      - Outcome matches the expected classification
      - Recorded 32-bit and 64-bit paths match
      - A second identical audit is UNCHANGED
      - The message is displayed exactly when the outcome is not suppressed
    """
    banner("SDK Checker Evaluation", "▓")
    header = f"  {'Case ID':<24} {'Expected':<20} {'Actual':<20} {'Status':<8}"
    print(header)
    print(f"  {'-' * 75}")

    case_results = []
    for case in cases_to_run:
        auditor = SDKPathAuditor(config=config, store=MemoryStateStore(), emit=lambda _m: None)
        first = auditor.audit(case.search_path, case.volume_roots)
        second = auditor.audit(case.search_path, case.volume_roots)

        should_display = config.show_positive_messages or not first.outcome.is_positive
        passed = (
            first.outcome.value == case.expected
            and first.result.path32 == case.expected_path32
            and first.result.path64 == case.expected_path64
            and second.outcome is Outcome.UNCHANGED
            and first.displayed == should_display
        )
        status = "✅ PASS" if passed else "❌ FAIL"
        print(f"  {case.id:<24} {case.expected:<20} {first.outcome.value:<20} {status:<8}")
        case_results.append({
            "id": case.id,
            "expected": case.expected,
            "actual": first.outcome.value,
            "pass": passed,
        })

    print(f"  {'-' * 75}")
    pass_count = sum(1 for r in case_results if r["pass"])
    print(f"\n  Cases passed: {pass_count}/{len(case_results)}")
    return case_results


def main(argv=None):
    parser = argparse.ArgumentParser(description="SDK Checker Scenario Runner")
    parser.add_argument("case_id", nargs="?", help="Run a specific case by ID")
    parser.add_argument("--list", action="store_true", help="List all available cases")
    parser.add_argument("--eval", action="store_true", help="Check all cases against expectations")
    parser.add_argument("--show-positive", action="store_true", help="Also display passing results")
    parser.add_argument("--lang", help="Message language (e.g. en, fr)")
    parser.add_argument("--markup", choices=[m.value for m in MarkupMode], default=MarkupMode.AUTO.value)
    args = parser.parse_args(argv)

    if args.list:
        from test_cases.cases import print_case_summary
        print_case_summary()
        return 0

    cases_to_run = ALL_CASES
    if args.case_id:
        cases_to_run = [c for c in ALL_CASES if c.id == args.case_id]
        if not cases_to_run:
            print(f"Unknown case: {args.case_id}")
            print(f"Available: {', '.join(c.id for c in ALL_CASES)}")
            return 1

    config = AuditorConfig(show_positive_messages=args.show_positive, language=args.lang)

    if args.eval:
        results = run_evaluation(cases_to_run, config)
        return 0 if all(r["pass"] for r in results) else 1

    banner("SDK Checker Scenarios", "▓")
    print(f"  Running {len(cases_to_run)} scenario(s)...\n")
    matched = sum(run_case(case, config, MarkupMode(args.markup)) for case in cases_to_run)

    banner("Summary")
    print(f"  Scenarios run: {len(cases_to_run)}")
    print(f"  As expected:   {matched}")
    return 0 if matched == len(cases_to_run) else 1


if __name__ == "__main__":
    sys.exit(main())
