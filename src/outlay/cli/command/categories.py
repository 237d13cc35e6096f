from __future__ import annotations

"""
List all categories with usage statistics.
"""

from rich.table import Table

from outlay.services.report_service import ReportService
from outlay.services.session import LedgerSession

from .util import console


def run(*, session: LedgerSession) -> int:
    """List categories in display order with transaction counts and totals.

    Returns:
        Exit code (always 0)
    """
    state = session.state
    if not state.categories:
        console.print("[warning]No categories defined.[/warning]")
        return 0

    usage = {item.category_id: item for item in ReportService(state).totals_by_category()}

    table = Table(title="Categories", show_lines=True)
    table.add_column("Category", style="category", no_wrap=True)
    table.add_column("Description")
    table.add_column("Fixed", justify="center", style="fixed")
    table.add_column("Usage (Count)", justify="right")
    table.add_column("Usage (Total)", justify="right")

    for cat in state.categories:
        item = usage.get(cat.id)
        count = item.count if item else 0
        table.add_row(
            cat.name,
            cat.description or "",
            "yes" if cat.is_fixed_charge else "",
            str(count) if count > 0 else "—",
            f"{item.total:,.2f}" if count > 0 else "—",
        )

    console.print(table)

    known_ids = {cat.id for cat in state.categories}
    orphaned = [item for item in usage.values() if item.category_id not in known_ids]
    total_used = len([cat for cat in state.categories if usage.get(cat.id) and usage[cat.id].count > 0])
    console.print(f"\nTotal categories: {len(state.categories)} | Used by expenses: {total_used}")
    if orphaned:
        count = sum(item.count for item in orphaned)
        console.print(f"[warning]{count} expense(s) reference a category that no longer exists.[/warning]")
    return 0
