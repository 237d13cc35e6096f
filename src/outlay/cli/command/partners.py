from __future__ import annotations

"""
List partners with what each paid against their expected contribution.
"""

from typing import Optional

from rich.table import Table

from outlay.services.report_service import ReportService
from outlay.services.session import LedgerSession

from .util import console, fmt_amount, fmt_balance, fmt_share


def run(
    *,
    session: LedgerSession,
    year: Optional[int] = None,
    month: Optional[int] = None,
) -> int:
    """Show partner contributions.

    Returns:
        Exit code (always 0)
    """
    contributions = ReportService(session.state).partner_contributions(year, month)
    if not contributions:
        console.print("[warning]No partners defined.[/warning]")
        return 0

    table = Table(title="Partner Contributions", show_lines=False)
    table.add_column("Partner", style="partner", no_wrap=True)
    table.add_column("Expenses", justify="right")
    table.add_column("Paid", justify="right")
    table.add_column("Share", justify="right", style="muted")
    table.add_column("Expected", justify="right")
    table.add_column("Balance", justify="right")

    for item in contributions:
        table.add_row(
            item.name,
            str(item.count),
            fmt_amount(item.paid),
            fmt_share(item.share_of_total),
            fmt_amount(item.expected) if item.expected is not None else "—",
            fmt_balance(item.balance),
        )

    console.print(table)
    return 0
