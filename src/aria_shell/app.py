# src/aria_shell/app.py
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from tqdm.auto import tqdm

from aria_auditor.controllers.audit_controller import AuditController
from aria_auditor.controllers.report_controller import ReportController
from aria_auditor.dom.registry import RuleRegistry
from aria_auditor.managers.rule_selection_manager import RuleSelectionManager, UnknownRuleError
from aria_shell.core.discovery import discover_source_units
from aria_shell.core.managers.config_manager import config_manager
from aria_shell.core.managers.report_manager import FORMATS, ReportManager
from aria_shell.core.utils.configure_logging import configure_logger
from markup_parser.controllers.extract_controller import ExtractController
from markup_parser.model import ExtractorSettings

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aria-audit",
        description="Lint ARIA and accessibility attributes in HTML and HTML-like templates.",
    )
    parser.add_argument("path", nargs="?", default=".", help="File or directory to lint (default: .)")
    parser.add_argument("--format", choices=FORMATS, default=None, help="Output format (default: pretty)")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only show errors (hide warnings and info).")
    parser.add_argument("--list-rules", action="store_true", help="List all available lint rules and exit.")
    parser.add_argument("--only", type=str, default=None, help="Comma separated rule ids to enable.")
    parser.add_argument("--skip", type=str, default=None, help="Comma separated rule ids to disable.")
    parser.add_argument("--out-file", type=str, default=None, help="Write diagnostics to a file instead of stdout.")
    parser.add_argument("--export", type=str, default=None, help="Also save all diagnostics to a CSV file.")
    parser.add_argument("--workers", type=int, default=None, help="Worker processes (default from settings).")
    parser.add_argument("--elements", type=str, default=None,
                        help="Lint a JSON element record file instead of markup files.")
    parser.add_argument("--log-level", type=str, default=None, help="Log level, e.g. DEBUG or INFO.")
    return parser


def _print_rules() -> None:
    print("Available lint rules:")
    print()
    for rule in RuleRegistry.get_all_rules():
        print(f"  {rule.id:<48} {rule.severity.value:<8} {rule.description}")


def _apply_overrides(args: argparse.Namespace) -> None:
    """CLI flags win over settings.json."""
    config_manager.apply_overrides({
        "output.format": args.format,
        "linter.workers": args.workers,
        "linter.only": args.only,
        "linter.skip": args.skip,
    })


def _extractor_settings() -> ExtractorSettings:
    settings = ExtractorSettings(include_head=config_manager.get_nested("linter.include_head", True))
    template_extensions = config_manager.get_nested("linter.template_extensions")
    if template_extensions is not None:
        settings = settings.model_copy(update={"template_extensions": template_extensions})
    return settings


def _collect_units(args: argparse.Namespace) -> Optional[List[str]]:
    """Returns the unit paths to lint, or None when the path argument is unusable."""
    if args.elements:
        if not Path(args.elements).is_file():
            print(f"Error: element file '{args.elements}' does not exist.", file=sys.stderr)
            return None
        return [args.elements]

    path = Path(args.path)
    if not path.exists():
        print(f"Error: path '{path}' does not exist.", file=sys.stderr)
        return None

    resolved = path.resolve()
    if resolved.parent == resolved:
        print(f"Error: '{path}' resolves to filesystem root '{resolved}'. Did you mean '.'?", file=sys.stderr)
        return None

    units = discover_source_units(
        path,
        config_manager.get_nested("linter.extensions", [".html"]),
        config_manager.get_nested("linter.exclude_dirs", []),
    )
    return [str(u) for u in units]


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    configure_logger(
        args.log_level or config_manager.get_nested("debug.level", "WARNING"),
        config_manager.get_nested("debug.module_levels"),
        config_manager.get_nested("debug.silenced_loggers"),
    )

    if args.list_rules:
        _print_rules()
        return EXIT_OK

    _apply_overrides(args)
    fmt = config_manager.get_nested("output.format", "pretty")

    try:
        selection = RuleSelectionManager.from_strings(
            config_manager.get_nested("linter.only"),
            config_manager.get_nested("linter.skip"),
            errors_only=args.quiet,
        )
    except UnknownRuleError as e:
        print(f"Error: {e}. Use --list-rules to see the available rules.", file=sys.stderr)
        return EXIT_USAGE

    units = _collect_units(args)
    if units is None:
        return EXIT_FAILED
    if not units:
        if fmt == "pretty":
            print(f"No markup files found in '{args.path}'.", file=sys.stderr)
        return EXIT_OK

    if fmt == "pretty":
        print(f"Scanning {len(units)} file(s)...", file=sys.stderr)

    extractor = ExtractController(_extractor_settings())
    extract = extractor.extract_records if args.elements else extractor.extract_file
    controller = AuditController(
        selection=selection,
        workers=int(config_manager.get_nested("linter.workers", 1)),
    )

    pbar = tqdm(total=len(units), desc="Linting", unit="file", disable=fmt != "pretty" or len(units) < 2)

    def progress_update(current, total):
        pbar.n = current
        pbar.refresh()

    try:
        summary = controller.run_audit(units, extract, progress_callback=progress_update)
    finally:
        pbar.close()

    report_manager = ReportManager(ReportController())
    if args.out_file:
        try:
            with open(args.out_file, "w", encoding="utf-8") as f:
                report_manager.write(summary, fmt, f)
        except OSError as e:
            print(f"Error: could not create '{args.out_file}': {e}", file=sys.stderr)
            return EXIT_FAILED
    else:
        report_manager.write(summary, fmt, sys.stdout)

    if fmt == "pretty":
        for line in report_manager.format_extraction_errors(summary):
            print(line, file=sys.stderr)

    if args.export:
        try:
            report_manager.report_controller.export(summary, args.export)
        except OSError as e:
            print(f"Error: could not export to '{args.export}': {e}", file=sys.stderr)
            return EXIT_FAILED

    return EXIT_FAILED if summary.failed else EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
