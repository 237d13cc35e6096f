from __future__ import annotations

from decimal import Decimal
from typing import Optional

from rich.table import Table
from rich.text import Text

from outlay.model.ledger import Expense
from outlay.services.session import LedgerSession

from .util import console, fmt_amount


def run(
    *,
    session: LedgerSession,
    year: Optional[int] = None,
    month: Optional[int] = None,
    limit: Optional[int] = None,
) -> int:
    """List expenses as a Rich table, newest first.

    Returns an exit code (0 for success, even when nothing matches).
    """
    state = session.state
    rows: list[Expense] = [
        e
        for e in state.expenses
        if (year is None or e.year == year) and (month is None or e.month == month)
    ]
    if limit is not None:
        rows = rows[:limit]

    if not rows:
        console.print("[warning]No expenses match the given period.[/warning]")
        return 0

    table = Table(title="Expenses", show_lines=False)
    table.add_column("Date", style="date", no_wrap=True)
    table.add_column("Description")
    table.add_column("Category", style="category")
    table.add_column("Paid By", style="partner")
    table.add_column("Amount", justify="right")
    table.add_column("ID8", style="muted", no_wrap=True)

    total = sum((e.amount for e in rows), Decimal("0"))
    for e in rows:
        table.add_row(
            e.date.strftime("%Y-%m-%d"),
            e.description,
            state.get_category_name_by_id(e.category_id),
            state.get_partner_name_by_id(e.paid_by_partner_id),
            fmt_amount(e.amount),
            e.id[:8],
        )

    table.add_row("", "", "", Text("Total", style="label"), fmt_amount(total, "amount.total"), "")
    console.print(table)
    return 0
