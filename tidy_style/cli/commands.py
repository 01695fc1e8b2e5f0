"""
Command-line interface for tidy-style.

This module provides CLI commands for checking source trees against the
style rules and for listing the rules and their opt-out directives.
"""

import sys
import click
import logging
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.panel import Panel
from rich.text import Text

from .. import __version__
from ..core.aggregator import StyleReport, Violation
from ..core.directives import SUPPRESSIBLE_CHECKS
from ..core.scanner import StyleScanner, ScanError
from ..core.style import COLS, RULES

# Summaries go to stdout, diagnostics to stderr
console = Console()
error_console = Console(stderr=True)

# Configure logging
logging.basicConfig(
    level=logging.WARNING,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def main(verbose):
    """tidy-style - Check source trees for style violations."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        console.print("[dim]Verbose mode enabled[/dim]")


@main.command()
@click.argument('paths', nargs=-1, required=True, type=click.Path(exists=True))
@click.option('--max-columns', type=click.IntRange(min=1), default=COLS, show_default=True,
              help='Maximum line length in characters')
@click.option('--extension', '-e', 'extensions', multiple=True,
              help='File suffix to check (repeatable, replaces the defaults)')
@click.option('--exclude', '-x', multiple=True, help='Directory name to skip (repeatable)')
@click.option('--summary/--no-summary', default=True, help='Show a summary after the check')
@click.option('--quiet', '-q', is_flag=True, help='Print nothing, only set the exit status')
def check(paths, max_columns, extensions, exclude, summary, quiet):
    """Check files and directories for style violations."""
    extensions = [e if e.startswith('.') else f'.{e}' for e in extensions]
    scanner = StyleScanner(max_columns=max_columns, extensions=extensions, exclude=exclude)

    if not quiet:
        scanner.report.add_listener(print_violation)

    try:
        report = scanner.scan_paths(paths)
    except ScanError as e:
        error_console.print(f"[red]Error during scan: {escape(str(e))}[/red]")
        sys.exit(2)

    if summary and not quiet:
        display_summary(report)

    if report.bad:
        if not quiet:
            error_console.print("[bold red]some tidy checks failed[/bold red]")
        sys.exit(1)


@main.command()
def rules():
    """List the style rules and their opt-out directives."""
    table = Table(title="Style Rules")
    table.add_column("Rule", style="cyan", no_wrap=True)
    table.add_column("Directive", no_wrap=True)
    table.add_column("Description", style="dim")

    for name, description in RULES.items():
        directive = f"ignore-tidy-{name}" if name in SUPPRESSIBLE_CHECKS else "-"
        table.add_row(name, directive, description)

    console.print(table)


def print_violation(violation: Violation):
    """Print one diagnostic line as soon as it is reported."""
    error_console.print(Text(str(violation)), soft_wrap=True)


def display_summary(report: StyleReport):
    """Display run statistics in a panel."""
    summary = report.generate_summary()

    summary_text = f"""
Total Files: {summary.total_files}
OK Files: {summary.ok_files}
Error Files: {summary.error_files}
Success Rate: {summary.success_rate:.1f}%
Total Errors: {summary.total_errors}
    """.strip()

    border = "red" if report.bad else "green"
    console.print(Panel(summary_text, title="Check Summary", border_style=border))

    if summary.most_common_errors:
        table = Table(title="Violations by Rule")
        table.add_column("Rule", style="cyan", no_wrap=True)
        table.add_column("Count", justify="center")
        for rule, count in summary.most_common_errors:
            table.add_row(rule, str(count))
        console.print(table)


if __name__ == '__main__':
    main()
