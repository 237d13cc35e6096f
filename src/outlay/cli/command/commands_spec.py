from __future__ import annotations

"""
Tests for the read-only view commands and the theme command.
"""

from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest

from outlay.cli.command import categories, dashboard, expenses, partners, theme
from outlay.model.ledger import CategoryDraft, ExpenseDraft
from outlay.model.seed import SeedData
from outlay.services.session import LedgerSession
from outlay.services.theme_service import Theme
from outlay.workspace import Workspace


@pytest.fixture
def session(tmp_path: Path) -> LedgerSession:
    return LedgerSession.start(Workspace(root=tmp_path))


@pytest.fixture
def empty_session(tmp_path: Path) -> LedgerSession:
    return LedgerSession.start(Workspace(root=tmp_path), seed=SeedData())


class DescribeDashboardCommand:
    def it_should_render_seeded_state(self, session):
        assert dashboard.run(session=session) == 0

    def it_should_render_a_filtered_period(self, session, capsys):
        assert dashboard.run(session=session, year=2024, month=3) == 0

        out = capsys.readouterr().out
        assert "(2024-03)" in out
        assert "Total spent: 1,328.55" in out
        assert "Fixed charges: 1,200.00" in out

    def it_should_label_a_month_without_year(self, session, capsys):
        assert dashboard.run(session=session, month=3) == 0

        out = capsys.readouterr().out
        assert "month 03, all years" in out
        assert "all time" not in out

    def it_should_render_empty_state(self, empty_session):
        assert dashboard.run(session=empty_session) == 0


class DescribeExpensesCommand:
    def it_should_list_expenses(self, session, capsys):
        rc = expenses.run(session=session, limit=3)

        assert rc == 0
        assert "Expenses" in capsys.readouterr().out

    def it_should_report_when_nothing_matches(self, session, capsys):
        rc = expenses.run(session=session, year=1999)

        assert rc == 0
        assert "No expenses" in capsys.readouterr().out


class DescribePartnersCommand:
    def it_should_list_contributions(self, session, capsys):
        assert partners.run(session=session) == 0
        assert "Partner Contributions" in capsys.readouterr().out

    def it_should_handle_no_partners(self, empty_session, capsys):
        assert partners.run(session=empty_session) == 0
        assert "No partners" in capsys.readouterr().out


class DescribeCategoriesCommand:
    def it_should_list_categories(self, session, capsys):
        assert categories.run(session=session) == 0
        assert "Total categories: 6" in capsys.readouterr().out

    def it_should_warn_about_orphaned_expenses(self, session, capsys):
        misc = next(c for c in session.state.categories if c.name == "Miscellaneous")
        session.state.delete_category(misc.id)

        assert categories.run(session=session) == 0
        assert "no longer exists" in capsys.readouterr().out

    def it_should_not_flag_a_live_category_named_like_the_lookup_fallback(self, session, capsys):
        na = session.state.add_category(CategoryDraft(name="N/A"))
        session.state.add_expense(
            ExpenseDraft(date=date(2024, 3, 20), amount=Decimal("10.00"), category_id=na.id)
        )

        assert categories.run(session=session) == 0
        assert "no longer exists" not in capsys.readouterr().out


class DescribeThemeCommand:
    def it_should_show_current_theme(self, session, capsys):
        assert theme.run(session=session) == 0
        assert session.theme.theme.value in capsys.readouterr().out

    def it_should_toggle_and_persist(self, session):
        before = session.theme.theme

        assert theme.run(session=session, toggle=True) == 0

        assert session.theme.theme == before.toggled()
        assert session.workspace.preferences_path.exists()

    def it_should_set_explicit_theme(self, session):
        assert theme.run(session=session, set_theme="DARK") == 0
        assert session.theme.theme == Theme.dark

    def it_should_reject_unknown_theme(self, session):
        assert theme.run(session=session, set_theme="sepia") == 1

    def it_should_reject_toggle_with_set(self, session):
        assert theme.run(session=session, toggle=True, set_theme="dark") == 1
