from __future__ import annotations

"""
Ledger entity models for expense tracking.

Scope
- Pure Pydantic v2 models for expenses, partners, and categories
- Drafts carry the caller-supplied part of an entity; generated fields
  (id, month, year, entry_timestamp) are added by the state manager
- No I/O operations (seed files are handled by seed_io.py)

All entity models are frozen. Changing an entity means replacing it with a
copy, so snapshots handed to observers can never be mutated behind their back.
"""

from datetime import date as Date
from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from outlay.dates import month_and_year


class ExpenseDraft(BaseModel):
    """Expense data as supplied by a caller, before ids and derived fields."""

    model_config = ConfigDict(frozen=True)

    date: Date = Field(description="Calendar date the expense was incurred")
    amount: Decimal = Field(description="Amount in currency units")
    description: str = ""
    category_id: str = Field(description="Reference to Category.id")
    paid_by_partner_id: Optional[str] = Field(
        default=None, description="Optional reference to Partner.id"
    )
    notes: Optional[str] = None


class Expense(ExpenseDraft):
    """A stored expense.

    ``month`` and ``year`` always mirror ``date``; ``entry_timestamp`` is the
    instant of the last write (creation or update).
    """

    id: str
    month: int = Field(ge=1, le=12)
    year: int
    entry_timestamp: datetime

    @classmethod
    def from_draft(cls, draft: ExpenseDraft, *, id: str, entry_timestamp: datetime) -> Expense:
        """Build a stored expense from a draft, deriving month and year."""
        month, year = month_and_year(draft.date)
        return cls(
            **draft.model_dump(),
            id=id,
            month=month,
            year=year,
            entry_timestamp=entry_timestamp,
        )

    def restamped(self, entry_timestamp: datetime) -> Expense:
        """Copy with month/year re-derived from date and a new entry timestamp."""
        month, year = month_and_year(self.date)
        return self.model_copy(
            update={"month": month, "year": year, "entry_timestamp": entry_timestamp}
        )

    def to_draft(self) -> ExpenseDraft:
        return ExpenseDraft(
            **self.model_dump(exclude={"id", "month", "year", "entry_timestamp"})
        )


class PartnerDraft(BaseModel):
    """Partner data as supplied by a caller."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, description="Display name")
    contribution_share: Optional[Decimal] = Field(
        default=None,
        ge=0,
        le=1,
        description="Expected fraction of total spending this partner covers",
    )
    notes: Optional[str] = None


class Partner(PartnerDraft):
    """A contributor/payer of expenses."""

    id: str


class CategoryDraft(BaseModel):
    """Category data as supplied by a caller."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, description="Category name")
    description: Optional[str] = Field(default=None, description="Human-readable description")
    is_fixed_charge: bool = Field(
        default=False, description="Recurring or capital charge rather than variable spending"
    )


class Category(CategoryDraft):
    """A classification tag for expenses."""

    id: str


__all__ = [
    "Category",
    "CategoryDraft",
    "Expense",
    "ExpenseDraft",
    "Partner",
    "PartnerDraft",
]
