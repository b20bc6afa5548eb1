"""
CLI - Command-line interface for linting PRD documents.

Main entry point for the application. Orchestrates:
1. Configuration loading (YAML file, .env, command-line overrides)
2. Rule selection
3. Analysis of the input document
4. Optional auto-fix into a new file
5. Report output as coloured text or JSON
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from .core.config import AppConfig, OutputFormat, load_config
from .fixes import AutoFixer
from .report import (
    Linter,
    LintReport,
    category_feedback,
    category_scores,
    estimate_time_to_fix,
    grade,
    is_production_ready,
    score_message,
)
from .rules import Category, RuleConfigurationError, Severity, default_rules
from .utils.logger import LogContext, get_logger, log_exception, log_json, setup_logging

logger = get_logger(__name__)

# Exit codes
EXIT_OK = 0
EXIT_QUALITY_GATE = 1
EXIT_USAGE = 2


# ANSI color codes
class Colors:
    RESET = "\033[0m"
    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    BOLD = "\033[1m"
    DIM = "\033[2m"


SEVERITY_STYLE = {
    Severity.ERROR: ("x", Colors.RED),
    Severity.WARNING: ("!", Colors.YELLOW),
    Severity.INFO: ("i", Colors.BLUE),
    Severity.SUGGESTION: ("~", Colors.DIM),
}


class Printer:
    """Writes the text report, with or without ANSI colors."""

    def __init__(self, use_color: bool = True, stream=None):
        self.use_color = use_color
        self.stream = stream or sys.stdout

    def color(self, text: str, color_code: str) -> str:
        """Apply color to text."""
        if not self.use_color:
            return text
        return f"{color_code}{text}{Colors.RESET}"

    def line(self, text: str = "") -> None:
        print(text, file=self.stream)

    def header(self, title: str) -> None:
        """Print a styled header."""
        self.line()
        self.line(self.color(f"{'=' * 60}", Colors.CYAN))
        self.line(self.color(f"  {title}", Colors.BOLD + Colors.CYAN))
        self.line(self.color(f"{'=' * 60}", Colors.CYAN))


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="prdlint",
        description="Lint product requirement documents and score their quality",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s prd.md
  %(prog)s prd.md --format json -o report.json
  %(prog)s prd.md --category completeness --category ux --min-score 70
  %(prog)s prd.md --fix
  %(prog)s --list-rules
        """,
    )

    parser.add_argument(
        "input",
        type=Path,
        nargs="?",
        help="Input PRD file (markdown or text)",
    )

    parser.add_argument(
        "-o", "--output",
        type=Path,
        help="Write the report to a file (default: stdout)",
    )

    parser.add_argument(
        "-c", "--config",
        type=Path,
        help="Configuration file (YAML)",
    )

    parser.add_argument(
        "--format",
        choices=[f.value for f in OutputFormat],
        help="Report format (default: from config, text)",
    )

    parser.add_argument(
        "--category",
        action="append",
        default=[],
        metavar="CATEGORY",
        help="Only run rules of this category (repeatable)",
    )

    parser.add_argument(
        "--exclude-category",
        action="append",
        default=[],
        metavar="CATEGORY",
        help="Skip rules of this category (repeatable)",
    )

    parser.add_argument(
        "--disable",
        action="append",
        default=[],
        metavar="RULE_ID",
        help="Skip a rule by id (repeatable)",
    )

    parser.add_argument(
        "--min-score",
        type=int,
        help="Exit with status 1 when the score is below this value",
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 when any error-level issue remains",
    )

    parser.add_argument(
        "--fix",
        action="store_true",
        help="Write a copy of the document with missing sections appended (<name>.fixed<ext>)",
    )

    parser.add_argument(
        "--list-rules",
        action="store_true",
        help="List the available rules and exit",
    )

    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args(argv)
    if args.input is None and not args.list_rules:
        parser.error("the following arguments are required: input")
    return args


def build_config(args: argparse.Namespace) -> AppConfig:
    """
    Load configuration and apply command-line overrides.

    Raises:
        FileNotFoundError: Explicit config file is missing
        ValueError: Invalid configuration (including RuleConfigurationError)
    """
    config = load_config(args.config)

    if args.category:
        config.rules.categories = list(args.category)
    if args.exclude_category:
        config.rules.exclude_categories = [*config.rules.exclude_categories, *args.exclude_category]
    if args.disable:
        config.rules.disabled_rules = [*config.rules.disabled_rules, *args.disable]
    for name in [*config.rules.categories, *config.rules.exclude_categories]:
        Category.from_string(name)

    if args.min_score is not None:
        config.scoring.min_score = args.min_score
    if args.format:
        config.output.format = OutputFormat(args.format)
    if args.no_color:
        config.output.color = False
    if args.verbose:
        config.logging.level = "DEBUG"

    return config


def print_rules(printer: Printer) -> None:
    """Print the built-in rule catalog grouped by category."""
    rules = default_rules()
    printer.header("prdlint rules")
    for category in Category:
        printer.line()
        printer.line(printer.color(f"{category.value}:", Colors.BOLD))
        for rule in rules.by_category(category):
            symbol, code = SEVERITY_STYLE[rule.severity]
            printer.line(f"  {printer.color(symbol, code)} {rule.id:<28} {rule.description}")


def print_report(printer: Printer, report: LintReport, source: str) -> None:
    """
    Print a formatted lint report.

    Args:
        printer: Output printer
        report: LintReport to print
        source: Display name of the linted document
    """
    printer.header(f"PRD Lint: {source}")

    for issue in report.issues:
        symbol, code = SEVERITY_STYLE[issue.severity]
        where = f"{issue.span.line}:{issue.span.column}" if issue.span else "-"
        printer.line(
            f"  {printer.color(symbol, code)} {printer.color(where.ljust(8), Colors.DIM)}"
            f"{issue.message} {printer.color(f'[{issue.rule_id}]', Colors.DIM)}"
        )
        if issue.suggestion:
            printer.line(f"             {printer.color('-> ' + issue.suggestion, Colors.DIM)}")

    stats = report.stats
    printer.line()
    printer.line(printer.color("Categories:", Colors.BOLD))
    for name, value in category_scores(report.issues).items():
        feedback = category_feedback(Category(name), value)
        printer.line(f"  {name:<13} {value:>3}  {printer.color(feedback, Colors.DIM)}")

    printer.line()
    score_color = Colors.GREEN if is_production_ready(report) else Colors.RED if stats.errors else Colors.YELLOW
    printer.line(printer.color(f"Score: {report.score}/100 (grade {grade(report.score)})", Colors.BOLD + score_color))
    printer.line(score_message(report.score))
    printer.line(
        f"{stats.errors} error(s), {stats.warnings} warning(s), "
        f"{stats.info} info, {stats.suggestions} suggestion(s)"
    )
    printer.line(
        f"Rules: {len(report.passed_rule_ids)} passed, {len(report.failed_rule_ids)} failed"
    )
    if report.issues:
        printer.line(f"Estimated time to fix: {estimate_time_to_fix(report.issues)}")


def write_fixed(input_path: Path, content: str, report: LintReport, linter: Linter) -> Optional[Path]:
    """Write the auto-fixed copy of the document, if anything was fixable."""
    result = AutoFixer().fix(
        content,
        report,
        linter.rules,
        weights=linter.weights,
        max_workers=linter.max_workers,
    )
    for skipped in result.fixes_skipped:
        logger.debug(f"Not fixed: {skipped}")
    if not result.changed:
        logger.info("Nothing to auto-fix")
        return None

    fixed_path = input_path.with_name(f"{input_path.stem}.fixed{input_path.suffix}")
    fixed_path.write_text(result.fixed_content, encoding="utf-8")
    logger.info(f"Applied {len(result.fixes_applied)} fixes, wrote {fixed_path}")
    return fixed_path


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point.

    Returns:
        Exit code (0 for success, 1 when the quality gate fails,
        2 for usage and configuration errors)
    """
    args = parse_args(argv)
    load_dotenv()

    setup_logging(level="DEBUG" if args.verbose else "WARNING")

    try:
        config = build_config(args)
    except FileNotFoundError as e:
        logger.error(f"Config file not found: {e}")
        return EXIT_USAGE
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return EXIT_USAGE

    setup_logging(
        level=config.logging.level,
        format_string=config.logging.format,
        log_file=config.logging.file,
    )

    use_color = config.output.color and args.output is None and sys.stdout.isatty()
    printer = Printer(use_color=use_color)

    if args.list_rules:
        print_rules(printer)
        return EXIT_OK

    if not args.input.is_file():
        logger.error(f"Input file not found or not a regular file: {args.input}")
        return EXIT_USAGE

    try:
        linter = Linter(config)
    except RuleConfigurationError as e:
        logger.error(f"Invalid rule selection: {e}")
        return EXIT_USAGE

    try:
        content = args.input.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        logger.error(f"Input file is not valid UTF-8: {args.input} ({e.reason} at byte {e.start})")
        return EXIT_USAGE
    except OSError as e:
        logger.error(f"Cannot read input file {args.input}: {e}")
        return EXIT_USAGE

    try:
        with LogContext(logger, "Linting document", path=args.input, rules=len(linter.rules)):
            report = linter.lint(content)
        log_json(logger, "Report stats", report.stats.to_dict())
    except Exception as e:
        log_exception(logger, "Lint failed", e)
        return EXIT_USAGE

    if config.output.format is OutputFormat.JSON:
        payload = report.to_dict()
        payload["grade"] = grade(report.score)
        payload["production_ready"] = is_production_ready(report)
        output = json.dumps(payload, indent=config.output.indent, ensure_ascii=config.output.ensure_ascii)
        if args.output:
            args.output.write_text(output + "\n", encoding="utf-8")
            logger.info(f"Report written to: {args.output}")
        else:
            print(output)
    elif args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            print_report(Printer(use_color=False, stream=f), report, str(args.input))
        logger.info(f"Report written to: {args.output}")
    else:
        print_report(printer, report, str(args.input))

    if args.fix:
        write_fixed(args.input, content, report, linter)

    if report.score < config.scoring.min_score:
        logger.warning(f"Score {report.score} is below minimum {config.scoring.min_score}")
        return EXIT_QUALITY_GATE
    if args.strict and report.has_errors:
        logger.warning(f"{report.stats.errors} error(s) remain")
        return EXIT_QUALITY_GATE
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
