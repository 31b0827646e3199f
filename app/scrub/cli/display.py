"""Run result display for the scrub CLI."""

from rich.markup import escape

from scrub.tree.models import ActionResult, RunSummary
from scrub.utils.formatting import (
    console,
    create_removal_table,
    print_info,
    print_success,
    print_warning,
)


def print_run_summary(summary: RunSummary, *, simulate: bool = False, verbose: bool = False) -> None:
    """Display the outcome of a scrub run.

    The removal table is always shown for simulated runs, and for
    live runs only in verbose mode. A summary line follows, and a
    warning for every input directory that kept residue.

    Args:
        summary: Result of scrub_paths.
        simulate: Whether the run was simulated.
        verbose: Whether verbose output was requested.
    """
    if summary.results and (simulate or verbose):
        _print_results_table(summary.results, simulate)

    removed = len(summary.removed)
    failed = len(summary.failed)

    if simulate:
        print_info(f"Simulate: {removed} path(s) would be removed.")
    elif failed:
        print_warning(f"{removed} removed, {failed} failed")
    elif removed:
        print_success(f"Removed {removed} path(s).")
    else:
        print_info("Nothing to remove.")

    for path in summary.residue:
        print_warning(f"Directory is not empty after cleaning: [kept]{escape(path)}[/]")


def _print_results_table(results: list[ActionResult], simulate: bool) -> None:
    """Display removal results as a Rich table."""
    title = "Planned Removals (simulate)" if simulate else "Removals"
    table = create_removal_table(title)

    for r in results:
        if r.simulated:
            status = "[simulated]would remove[/]"
            detail = ""
        elif r.success:
            status = "[removed]removed[/]"
            detail = ""
        else:
            status = "[error]failed[/]"
            detail = r.error.message if r.error else "Unknown error"
        table.add_row(escape(r.path), r.kind.value, status, escape(detail))

    console.print(table)
