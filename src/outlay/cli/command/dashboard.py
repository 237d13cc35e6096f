from __future__ import annotations

"""
Dashboard: counts, overall total, and spending by category and partner.
"""

from typing import Optional

from rich.table import Table

from outlay.services.report_service import ReportService
from outlay.services.session import LedgerSession

from .util import console, fmt_amount, fmt_share


def _period_label(year: Optional[int], month: Optional[int]) -> str:
    if year and month:
        return f"{year}-{month:02d}"
    if year:
        return str(year)
    if month:
        return f"month {month:02d}, all years"
    return "all time"


def run(
    *,
    session: LedgerSession,
    year: Optional[int] = None,
    month: Optional[int] = None,
) -> int:
    """Render the dashboard for an optional year/month period.

    Returns:
        Exit code (always 0)
    """
    reports = ReportService(session.state)
    summary = reports.summary(year, month)
    period = _period_label(year, month)

    console.print(f"[title]Dashboard[/title] [muted]({period})[/muted]")
    console.print(
        f"Expenses: {summary.expense_count} | "
        f"Partners: {summary.partner_count} | "
        f"Categories: {summary.category_count}"
    )
    console.print(f"[label]Total spent:[/label] [amount.total]{summary.total_amount:,.2f}[/amount.total]")
    console.print(
        f"[label]Fixed charges:[/label] [fixed]{reports.fixed_charge_total(year, month):,.2f}[/fixed]\n"
    )

    by_category = Table(title="Spending by Category", show_lines=False)
    by_category.add_column("Category", style="category", no_wrap=True)
    by_category.add_column("Count", justify="right")
    by_category.add_column("Total", justify="right")
    by_category.add_column("Share", justify="right", style="muted")

    for item in reports.totals_by_category(year, month):
        if item.count == 0:
            continue
        share = item.total / summary.total_amount if summary.total_amount else None
        name = f"{item.name} [fixed](fixed)[/fixed]" if item.is_fixed_charge else item.name
        by_category.add_row(name, str(item.count), fmt_amount(item.total), fmt_share(share))

    console.print(by_category)

    by_partner = Table(title="Paid by Partner", show_lines=False)
    by_partner.add_column("Partner", style="partner", no_wrap=True)
    by_partner.add_column("Count", justify="right")
    by_partner.add_column("Paid", justify="right")
    by_partner.add_column("Share", justify="right", style="muted")

    for item in reports.partner_contributions(year, month):
        if item.count == 0:
            continue
        by_partner.add_row(item.name, str(item.count), fmt_amount(item.paid), fmt_share(item.share_of_total))

    console.print(by_partner)
    return 0
