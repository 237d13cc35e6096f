"""
Built-in seed data and sentinel names.

The seed is what a session starts from when the workspace carries no
config/seed.yml. Ids are fixed strings so the seed is reproducible; entities
created at runtime get UUIDs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal

from outlay.model.ledger import Category, Expense, ExpenseDraft, Partner

UNASSIGNED_PARTNER_NAME = "Unassigned / Company"
MISC_CATEGORY_NAME = "Miscellaneous"

NOT_AVAILABLE = "N/A"
UNKNOWN_PARTNER = "Unknown Partner"

# Seed expenses are stamped with a fixed instant rather than process start time.
SEED_TIMESTAMP = datetime(2024, 1, 1, tzinfo=timezone.utc)


@dataclass
class SeedData:
    """Starting collections for a session."""

    expenses: list[Expense] = field(default_factory=list)
    partners: list[Partner] = field(default_factory=list)
    categories: list[Category] = field(default_factory=list)


INITIAL_PARTNERS: tuple[Partner, ...] = (
    Partner(id="p1", name="Alex Martin", contribution_share=Decimal("0.5")),
    Partner(id="p2", name="Sam Rivera", contribution_share=Decimal("0.5")),
    Partner(id="p3", name=UNASSIGNED_PARTNER_NAME),
)

INITIAL_CATEGORIES: tuple[Category, ...] = (
    Category(id="c1", name="Rent", description="Office and storage rent", is_fixed_charge=True),
    Category(id="c2", name="Utilities", description="Electricity, water, internet"),
    Category(id="c3", name="Supplies", description="Consumables and small equipment"),
    Category(id="c4", name="Travel", description="Transport and lodging"),
    Category(id="c5", name="Equipment", description="Capital purchases", is_fixed_charge=True),
    Category(id="c6", name=MISC_CATEGORY_NAME, description="Anything else"),
)

_INITIAL_EXPENSE_DRAFTS: tuple[tuple[str, ExpenseDraft], ...] = (
    (
        "e1",
        ExpenseDraft(
            date=date(2024, 3, 1),
            amount=Decimal("1200.00"),
            description="March rent",
            category_id="c1",
            paid_by_partner_id="p1",
        ),
    ),
    (
        "e2",
        ExpenseDraft(
            date=date(2024, 3, 8),
            amount=Decimal("86.40"),
            description="Electricity bill",
            category_id="c2",
            paid_by_partner_id="p2",
        ),
    ),
    (
        "e3",
        ExpenseDraft(
            date=date(2024, 3, 12),
            amount=Decimal("42.15"),
            description="Printer paper and toner",
            category_id="c3",
            paid_by_partner_id="p3",
        ),
    ),
    (
        "e4",
        ExpenseDraft(
            date=date(2024, 2, 20),
            amount=Decimal("315.00"),
            description="Train tickets for trade fair",
            category_id="c4",
            paid_by_partner_id="p1",
        ),
    ),
    (
        "e5",
        ExpenseDraft(
            date=date(2024, 2, 2),
            amount=Decimal("899.99"),
            description="Laptop",
            category_id="c5",
            paid_by_partner_id="p2",
        ),
    ),
    (
        "e6",
        ExpenseDraft(
            date=date(2024, 2, 14),
            amount=Decimal("25.00"),
            description="Bank fee",
            category_id="c6",
        ),
    ),
)

INITIAL_EXPENSES: tuple[Expense, ...] = tuple(
    Expense.from_draft(draft, id=expense_id, entry_timestamp=SEED_TIMESTAMP)
    for expense_id, draft in _INITIAL_EXPENSE_DRAFTS
)


def default_seed() -> SeedData:
    """Fresh copy of the built-in seed collections."""
    return SeedData(
        expenses=list(INITIAL_EXPENSES),
        partners=list(INITIAL_PARTNERS),
        categories=list(INITIAL_CATEGORIES),
    )


__all__ = [
    "INITIAL_CATEGORIES",
    "INITIAL_EXPENSES",
    "INITIAL_PARTNERS",
    "MISC_CATEGORY_NAME",
    "NOT_AVAILABLE",
    "SEED_TIMESTAMP",
    "SeedData",
    "UNASSIGNED_PARTNER_NAME",
    "UNKNOWN_PARTNER",
    "default_seed",
]
