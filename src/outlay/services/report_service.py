from __future__ import annotations

"""
Report Service - aggregations behind the dashboard views

Provides overall summary, per-category totals, partner contributions, and
monthly trend figures computed from the state manager's current snapshot.
"""

from collections import defaultdict
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Tuple

from outlay.model.ledger import Expense
from outlay.model.seed import NOT_AVAILABLE
from outlay.services.state_manager import LedgerStateManager

ZERO = Decimal("0")


@dataclass
class LedgerSummary:
    """Counts and overall total shown on the dashboard."""
    expense_count: int
    partner_count: int
    category_count: int
    total_amount: Decimal


@dataclass
class CategoryTotal:
    """Spending within one category."""
    category_id: str
    name: str
    count: int
    total: Decimal
    is_fixed_charge: bool


@dataclass
class PartnerContribution:
    """Amount paid by one partner against the expected share."""
    partner_id: Optional[str]
    name: str
    count: int
    paid: Decimal
    share_of_total: Optional[Decimal]  # Fraction 0..1 of everything paid
    expected: Optional[Decimal]  # From the partner's contribution_share

    @property
    def balance(self) -> Optional[Decimal]:
        """Paid minus expected; positive means the partner paid more than their share."""
        if self.expected is None:
            return None
        return self.paid - self.expected


@dataclass
class MonthlyTotal:
    """Spending within one calendar month."""
    year: int
    month: int
    count: int
    total: Decimal


class ReportService:
    """Service for dashboard aggregations."""

    def __init__(self, state: LedgerStateManager):
        """
        Initialize the report service.

        Args:
            state: State manager to read snapshots from
        """
        self.state = state

    def _expenses(self, year: Optional[int] = None, month: Optional[int] = None) -> List[Expense]:
        return [
            e
            for e in self.state.expenses
            if (year is None or e.year == year) and (month is None or e.month == month)
        ]

    @staticmethod
    def _total(expenses: Iterable[Expense]) -> Decimal:
        return sum((e.amount for e in expenses), ZERO)

    def summary(self, year: Optional[int] = None, month: Optional[int] = None) -> LedgerSummary:
        expenses = self._expenses(year, month)
        return LedgerSummary(
            expense_count=len(expenses),
            partner_count=len(self.state.partners),
            category_count=len(self.state.categories),
            total_amount=self._total(expenses),
        )

    def totals_by_category(
        self,
        year: Optional[int] = None,
        month: Optional[int] = None,
    ) -> List[CategoryTotal]:
        """
        Aggregate spending per category.

        Every category appears, including unused ones. Expenses whose category
        no longer exists are grouped under "N/A".

        Returns:
            CategoryTotal list sorted by total descending, then name
        """
        spending: Dict[str, Tuple[int, Decimal]] = defaultdict(lambda: (0, ZERO))
        for expense in self._expenses(year, month):
            count, total = spending[expense.category_id]
            spending[expense.category_id] = (count + 1, total + expense.amount)

        items: List[CategoryTotal] = []
        for category in self.state.categories:
            count, total = spending.pop(category.id, (0, ZERO))
            items.append(
                CategoryTotal(
                    category_id=category.id,
                    name=category.name,
                    count=count,
                    total=total,
                    is_fixed_charge=category.is_fixed_charge,
                )
            )

        # Leftovers reference categories that are gone
        for category_id, (count, total) in spending.items():
            items.append(
                CategoryTotal(
                    category_id=category_id,
                    name=NOT_AVAILABLE,
                    count=count,
                    total=total,
                    is_fixed_charge=False,
                )
            )

        items.sort(key=lambda item: (-item.total, item.name))
        return items

    def partner_contributions(
        self,
        year: Optional[int] = None,
        month: Optional[int] = None,
    ) -> List[PartnerContribution]:
        """
        Aggregate what each partner paid.

        Partners are listed in their display order. Expenses without a payer
        are reported last under "N/A" with partner_id None.
        """
        expenses = self._expenses(year, month)
        grand_total = self._total(expenses)

        paid: Dict[Optional[str], Tuple[int, Decimal]] = defaultdict(lambda: (0, ZERO))
        for expense in expenses:
            count, total = paid[expense.paid_by_partner_id]
            paid[expense.paid_by_partner_id] = (count + 1, total + expense.amount)

        def _share(amount: Decimal) -> Optional[Decimal]:
            return amount / grand_total if grand_total else None

        items: List[PartnerContribution] = []
        for partner in self.state.partners:
            count, total = paid.pop(partner.id, (0, ZERO))
            expected = None
            if partner.contribution_share is not None:
                expected = grand_total * partner.contribution_share
            items.append(
                PartnerContribution(
                    partner_id=partner.id,
                    name=partner.name,
                    count=count,
                    paid=total,
                    share_of_total=_share(total),
                    expected=expected,
                )
            )

        for partner_id, (count, total) in paid.items():
            items.append(
                PartnerContribution(
                    partner_id=partner_id,
                    name=self.state.get_partner_name_by_id(partner_id),
                    count=count,
                    paid=total,
                    share_of_total=_share(total),
                    expected=None,
                )
            )
        return items

    def monthly_totals(self, year: Optional[int] = None) -> List[MonthlyTotal]:
        """Totals per (year, month), oldest first."""
        buckets: Dict[Tuple[int, int], Tuple[int, Decimal]] = defaultdict(lambda: (0, ZERO))
        for expense in self._expenses(year):
            key = (expense.year, expense.month)
            count, total = buckets[key]
            buckets[key] = (count + 1, total + expense.amount)

        return [
            MonthlyTotal(year=y, month=m, count=count, total=total)
            for (y, m), (count, total) in sorted(buckets.items())
        ]

    def fixed_charge_total(
        self,
        year: Optional[int] = None,
        month: Optional[int] = None,
    ) -> Decimal:
        """Sum of expenses in categories marked as fixed charges."""
        fixed_ids = {c.id for c in self.state.categories if c.is_fixed_charge}
        return self._total(e for e in self._expenses(year, month) if e.category_id in fixed_ids)


__all__ = [
    "CategoryTotal",
    "LedgerSummary",
    "MonthlyTotal",
    "PartnerContribution",
    "ReportService",
]
