"""
Ledger state manager - single source of truth for expenses, partners, and categories.

This is the functional core of outlay. It owns the three collections, derives
month/year/entry_timestamp on every expense write, and keeps references
consistent when partners or categories are deleted by reassigning affected
expenses to the sentinel fallbacks.

NO IMPORTS FROM:
- rich (console, table, prompt)
- typer

Clock and id generation are injected. Collections are exposed as tuples; each
mutation builds a new tuple and swaps it in, then notifies observers with the
new snapshot.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Callable, Iterable, Optional, TypeVar
from uuid import uuid4

from outlay.dates import utc_now
from outlay.model.ledger import (
    Category,
    CategoryDraft,
    Expense,
    ExpenseDraft,
    Partner,
    PartnerDraft,
)
from outlay.model.seed import (
    MISC_CATEGORY_NAME,
    NOT_AVAILABLE,
    UNASSIGNED_PARTNER_NAME,
    UNKNOWN_PARTNER,
    SeedData,
)

logger = logging.getLogger(__name__)


class Collection(StrEnum):
    """The collections owned by the state manager."""

    EXPENSES = "expenses"
    PARTNERS = "partners"
    CATEGORIES = "categories"


@dataclass(frozen=True)
class StateChange:
    """Notification sent to observers after a committed mutation."""

    collection: Collection
    snapshot: tuple


StateObserver = Callable[[StateChange], None]

_Named = TypeVar("_Named", Partner, Category)


def _new_id() -> str:
    return str(uuid4())


def _by_date_desc(expenses: Iterable[Expense]) -> tuple[Expense, ...]:
    # sorted() keeps equal keys in their current order even with reverse=True
    return tuple(sorted(expenses, key=lambda e: e.date, reverse=True))


def _find_by_name(entities: Iterable[_Named], name: str) -> Optional[_Named]:
    wanted = name.casefold()
    for entity in entities:
        if entity.name.casefold() == wanted:
            return entity
    return None


class LedgerStateManager:
    """
    In-memory manager for the expense, partner, and category collections.

    Responsibilities:
    - Create/update/delete for each collection
    - Derive month/year from the expense date and stamp entry_timestamp
    - Keep expenses sorted by date, newest first
    - Reassign orphaned references to "Unassigned / Company" and "Miscellaneous"
    - Resolve ids to display names

    Update and delete on an unknown id are no-ops: they change nothing and
    notify nobody.
    """

    def __init__(
        self,
        expenses: Iterable[Expense] = (),
        partners: Iterable[Partner] = (),
        categories: Iterable[Category] = (),
        *,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = _new_id,
    ):
        """
        Initialize the state manager.

        Args:
            expenses: Starting expenses (sorted by date descending on load)
            partners: Starting partners, in display order
            categories: Starting categories, in display order
            clock: Source of entry timestamps
            id_factory: Source of new entity ids
        """
        self._clock = clock
        self._id_factory = id_factory
        self._observers: list[StateObserver] = []
        self._expenses: tuple[Expense, ...] = _by_date_desc(expenses)
        self._partners: tuple[Partner, ...] = tuple(partners)
        self._categories: tuple[Category, ...] = tuple(categories)
        self._reindex()

    @classmethod
    def from_seed(cls, seed: SeedData, **kwargs) -> LedgerStateManager:
        return cls(seed.expenses, seed.partners, seed.categories, **kwargs)

    # ------------------------------
    # Read surface
    # ------------------------------

    @property
    def expenses(self) -> tuple[Expense, ...]:
        return self._expenses

    @property
    def partners(self) -> tuple[Partner, ...]:
        return self._partners

    @property
    def categories(self) -> tuple[Category, ...]:
        return self._categories

    def find_expense(self, expense_id: str) -> Optional[Expense]:
        for expense in self._expenses:
            if expense.id == expense_id:
                return expense
        return None

    def find_partner(self, partner_id: str) -> Optional[Partner]:
        return self._partners_by_id.get(partner_id)

    def find_category(self, category_id: str) -> Optional[Category]:
        return self._categories_by_id.get(category_id)

    def get_category_name_by_id(self, category_id: str) -> str:
        """Return the category name, or "N/A" when no category has that id."""
        category = self._categories_by_id.get(category_id)
        return category.name if category else NOT_AVAILABLE

    def get_partner_name_by_id(self, partner_id: Optional[str] = None) -> str:
        """
        Resolve a payer reference to a display name.

        Returns:
            "N/A" when no partner is referenced, "Unknown Partner" when the
            reference does not match any partner, the partner name otherwise
        """
        if not partner_id:
            return NOT_AVAILABLE
        partner = self._partners_by_id.get(partner_id)
        return partner.name if partner else UNKNOWN_PARTNER

    # ------------------------------
    # Observers
    # ------------------------------

    def subscribe(self, observer: StateObserver) -> None:
        """Register an observer for committed mutations."""
        if observer not in self._observers:
            self._observers.append(observer)

    def unsubscribe(self, observer: StateObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    # ------------------------------
    # Expenses
    # ------------------------------

    def add_expense(self, draft: ExpenseDraft) -> Expense:
        """
        Store a new expense.

        The expense gets a fresh id, month/year derived from its date, and the
        current instant as entry_timestamp. Among expenses sharing its date it
        is placed first.

        Args:
            draft: Caller-supplied expense data

        Returns:
            The stored expense
        """
        expense = Expense.from_draft(draft, id=self._id_factory(), entry_timestamp=self._clock())
        logger.debug("Adding expense %s dated %s", expense.id, expense.date)
        self._commit(expenses=_by_date_desc((expense, *self._expenses)))
        return expense

    def update_expense(self, expense: Expense) -> Optional[Expense]:
        """
        Replace the expense with the same id.

        Month and year are re-derived from the date and entry_timestamp is set
        to the current instant, so it records the last write.

        Returns:
            The stored expense, or None if no expense has that id
        """
        if self.find_expense(expense.id) is None:
            logger.debug("Ignoring update of unknown expense %s", expense.id)
            return None

        stored = expense.restamped(self._clock())
        logger.debug("Updating expense %s", stored.id)
        self._commit(
            expenses=_by_date_desc(stored if e.id == stored.id else e for e in self._expenses)
        )
        return stored

    def delete_expense(self, expense_id: str) -> bool:
        """Remove an expense. Returns False if no expense has that id."""
        remaining = tuple(e for e in self._expenses if e.id != expense_id)
        if len(remaining) == len(self._expenses):
            logger.debug("Ignoring delete of unknown expense %s", expense_id)
            return False

        logger.debug("Deleting expense %s", expense_id)
        self._commit(expenses=remaining)
        return True

    # ------------------------------
    # Partners
    # ------------------------------

    def add_partner(self, draft: PartnerDraft) -> Partner:
        """Append a new partner with a fresh id."""
        partner = Partner(**draft.model_dump(), id=self._id_factory())
        logger.debug("Adding partner %s (%s)", partner.id, partner.name)
        self._commit(partners=(*self._partners, partner))
        return partner

    def update_partner(self, partner: Partner) -> Optional[Partner]:
        """Replace the partner with the same id, keeping its position."""
        if partner.id not in self._partners_by_id:
            logger.debug("Ignoring update of unknown partner %s", partner.id)
            return None

        self._commit(partners=tuple(partner if p.id == partner.id else p for p in self._partners))
        return partner

    def delete_partner(self, partner_id: str) -> bool:
        """
        Remove a partner and reassign the expenses it paid.

        Expenses paid by the partner are reassigned to "Unassigned / Company"
        as found among the remaining partners, or to no payer if that partner
        does not exist (including when it is the one being deleted).

        Returns:
            True if a partner was removed
        """
        partners = tuple(p for p in self._partners if p.id != partner_id)
        removed = len(partners) < len(self._partners)

        fallback = _find_by_name(partners, UNASSIGNED_PARTNER_NAME)
        fallback_id = fallback.id if fallback else None
        expenses, reassigned = self._reassign(
            lambda e: e.paid_by_partner_id == partner_id,
            {"paid_by_partner_id": fallback_id},
        )

        if not removed and not reassigned:
            logger.debug("Ignoring delete of unknown partner %s", partner_id)
            return False

        logger.debug(
            "Deleting partner %s; %d expense(s) reassigned to %s",
            partner_id,
            reassigned,
            fallback_id,
        )
        self._commit(
            partners=partners if removed else None,
            expenses=expenses if reassigned else None,
        )
        return removed

    # ------------------------------
    # Categories
    # ------------------------------

    def add_category(self, draft: CategoryDraft) -> Category:
        """Append a new category with a fresh id."""
        category = Category(**draft.model_dump(), id=self._id_factory())
        logger.debug("Adding category %s (%s)", category.id, category.name)
        self._commit(categories=(*self._categories, category))
        return category

    def update_category(self, category: Category) -> Optional[Category]:
        """Replace the category with the same id, keeping its position."""
        if category.id not in self._categories_by_id:
            logger.debug("Ignoring update of unknown category %s", category.id)
            return None

        self._commit(
            categories=tuple(category if c.id == category.id else c for c in self._categories)
        )
        return category

    def delete_category(self, category_id: str) -> bool:
        """
        Remove a category and reassign its expenses.

        Expenses in the category move to "Miscellaneous" as found among the
        remaining categories, or to an empty category reference if there is
        none (including when "Miscellaneous" itself is deleted).

        Returns:
            True if a category was removed
        """
        categories = tuple(c for c in self._categories if c.id != category_id)
        removed = len(categories) < len(self._categories)

        misc = _find_by_name(categories, MISC_CATEGORY_NAME)
        fallback_id = misc.id if misc else ""
        expenses, reassigned = self._reassign(
            lambda e: e.category_id == category_id,
            {"category_id": fallback_id},
        )

        if not removed and not reassigned:
            logger.debug("Ignoring delete of unknown category %s", category_id)
            return False

        logger.debug(
            "Deleting category %s; %d expense(s) reassigned to %r",
            category_id,
            reassigned,
            fallback_id,
        )
        self._commit(
            categories=categories if removed else None,
            expenses=expenses if reassigned else None,
        )
        return removed

    # ------------------------------
    # Internals
    # ------------------------------

    def _reassign(
        self, matches: Callable[[Expense], bool], update: dict
    ) -> tuple[tuple[Expense, ...], int]:
        count = 0
        expenses = []
        for expense in self._expenses:
            if matches(expense):
                expense = expense.model_copy(update=update)
                count += 1
            expenses.append(expense)
        return tuple(expenses), count

    def _reindex(self) -> None:
        self._partners_by_id = {p.id: p for p in self._partners}
        self._categories_by_id = {c.id: c for c in self._categories}

    def _commit(
        self,
        *,
        expenses: Optional[tuple[Expense, ...]] = None,
        partners: Optional[tuple[Partner, ...]] = None,
        categories: Optional[tuple[Category, ...]] = None,
    ) -> None:
        """Swap in new collections, then notify observers once per changed collection."""
        changes: list[StateChange] = []
        if partners is not None:
            self._partners = partners
            changes.append(StateChange(Collection.PARTNERS, partners))
        if categories is not None:
            self._categories = categories
            changes.append(StateChange(Collection.CATEGORIES, categories))
        if expenses is not None:
            self._expenses = expenses
            changes.append(StateChange(Collection.EXPENSES, expenses))
        self._reindex()

        for change in changes:
            for observer in list(self._observers):
                observer(change)


__all__ = [
    "Collection",
    "LedgerStateManager",
    "StateChange",
    "StateObserver",
]
