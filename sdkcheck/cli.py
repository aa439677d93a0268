"""
SDK Checker CLI — Check this machine's PATH for the .NET SDK.

Usage:
    sdkcheck                        # Check the process PATH
    sdkcheck --scope machine        # Check the machine-wide PATH (registry)
    sdkcheck --show-positive        # Also report passing results
    sdkcheck --lang fr              # French messages for this run
    sdkcheck --json                 # Machine-readable output
    sdkcheck --reset                # Forget the previous result first

Repeated runs from the same shell stay quiet while the result is unchanged.
The check only runs on Windows; elsewhere it exits 0 without doing anything.
"""

import argparse
import json
import logging
import sys
from typing import Optional, Sequence

from sdkcheck import __version__
from sdkcheck.auditor import AuditOutcome, Outcome, SDKPathAuditor
from sdkcheck.config import AuditorConfig, config_from_env
from sdkcheck.host import (
    PathScope,
    detect_language,
    is_supported_platform,
    list_volume_roots,
    read_search_path,
)
from sdkcheck.parser import locate, parse_search_path
from sdkcheck.render import MarkupMode, render
from sdkcheck.state import JsonStateStore, StateStore, StateStoreError
from sdkcheck.version_detector import report_sdk_versions

LOGGER = logging.getLogger(__name__)

EXIT_CODES = {
    "unchanged": 0,
    "pass": 0,
    "partial": 1,
    "fail": 2,
}


def exit_code(outcome: Optional[AuditOutcome]) -> int:
    if outcome is None:
        return 0
    return EXIT_CODES[outcome.outcome.status]


def _relevant_path(outcome: AuditOutcome) -> str:
    if outcome.outcome in (Outcome.SDK64_ONLY, Outcome.BOTH_CORRECT_ORDER):
        return outcome.result.path64
    if outcome.outcome is Outcome.UNCHANGED:
        return outcome.result.path64 or outcome.result.path32
    return outcome.result.path32


def outcome_payload(outcome: AuditOutcome, search_path: str, minimum: Optional[str] = None) -> dict:
    """JSON-ready view of one audit, including where each SDK sits on PATH."""
    entries = parse_search_path(search_path)
    entry32 = locate(entries, outcome.result.path32)
    entry64 = locate(entries, outcome.result.path64)
    payload = {
        "outcome": outcome.outcome.value,
        "status": outcome.outcome.status,
        "displayed": outcome.displayed,
        "result": outcome.result.to_dict(),
        "entry32": entry32.index if entry32 else None,
        "entry64": entry64.index if entry64 else None,
        "message": outcome.message,
    }
    if minimum is not None:
        path = _relevant_path(outcome)
        if path:
            report = report_sdk_versions(path, minimum)
            payload["newest_sdk"] = str(report.newest) if report.newest else None
            payload["sdk_sufficient"] = report.sufficient
    return payload


def run_check(
    config: AuditorConfig,
    store: StateStore,
    scope: PathScope = PathScope.PROCESS,
    search_path: Optional[str] = None,
    volume_roots: Optional[Sequence[str]] = None,
    force_language: Optional[str] = None,
    emit=None,
    platform: Optional[str] = None,
) -> tuple[Optional[AuditOutcome], str]:
    """Run one host-gated audit.

    Returns:
        (outcome, search_path); outcome is None when the platform is unsupported.
    """
    if not is_supported_platform(platform):
        LOGGER.info("Skipping SDK check: unsupported platform %s", platform or sys.platform)
        return None, ""

    if search_path is None:
        search_path = read_search_path(scope)
    if volume_roots is None:
        volume_roots = list_volume_roots()
    LOGGER.debug("Probing %d volume root(s): %s", len(volume_roots), ", ".join(volume_roots))

    auditor = SDKPathAuditor(config=config, store=store, emit=emit)
    return auditor.audit(search_path, volume_roots, force_language=force_language), search_path


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="sdkcheck", description="Check the PATH for the .NET SDK")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("--scope", choices=[s.value for s in PathScope], default=PathScope.PROCESS.value,
                   help="Which PATH to read (default: process)")
    p.add_argument("--path", dest="search_path", help="Audit this search path instead of reading one")
    p.add_argument("--volume", action="append", dest="volumes", metavar="ROOT",
                   help="Volume root to search (repeatable; default: all drives)")
    p.add_argument("--show-positive", action="store_true", default=None,
                   help="Also report passing results")
    p.add_argument("--lang", help="Message language for this run (e.g. en, fr)")
    p.add_argument("--reset", action="store_true", help="Forget the previous result before checking")
    p.add_argument("--json", action="store_true", help="Print a JSON report")
    p.add_argument("--entries", action="store_true", help="List PATH entries with SDK markers")
    p.add_argument("--versions", action="store_true", help="Report the newest installed SDK version")
    p.add_argument("--markup", choices=[m.value for m in MarkupMode], default=MarkupMode.AUTO.value,
                   help="How to render color spans (default: auto)")
    p.add_argument("--state-dir", help="Directory for the session state file")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return p


def _print_entries(outcome: AuditOutcome, search_path: str) -> None:
    for entry in parse_search_path(search_path):
        mark = "   "
        if outcome.result.path64 and outcome.result.path64 in entry.value:
            mark = "x64"
        elif outcome.result.path32 and outcome.result.path32 in entry.value:
            mark = "x86"
        print(f"  {entry.index:3d} {mark} {entry.value}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = config_from_env(AuditorConfig(language=detect_language())).with_overrides(
        show_positive_messages=args.show_positive,
    )
    store = JsonStateStore(namespace=config.state_namespace, directory=args.state_dir)
    if args.reset:
        try:
            store.clear()
        except StateStoreError as e:
            LOGGER.warning("%s", e)

    mode = MarkupMode(args.markup)
    emit = None if args.json else (lambda message: print(render(message, mode)))

    outcome, search_path = run_check(
        config,
        store,
        scope=PathScope(args.scope),
        search_path=args.search_path,
        volume_roots=args.volumes,
        force_language=args.lang,
        emit=emit,
    )
    if outcome is None:
        return 0

    minimum = config.minimum_sdk_version if args.versions else None
    if args.json:
        print(json.dumps(outcome_payload(outcome, search_path, minimum), indent=2))
        return exit_code(outcome)

    if args.entries:
        _print_entries(outcome, search_path)
    if minimum is not None:
        path = _relevant_path(outcome)
        if path:
            print(report_sdk_versions(path, minimum))
    return exit_code(outcome)


if __name__ == "__main__":
    sys.exit(main())
