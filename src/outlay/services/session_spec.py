from __future__ import annotations

"""
Tests for session wiring and the fail-fast configuration check.
"""

from datetime import date
from pathlib import Path

import pytest

from outlay.errors import ConfigurationError, SeedError
from outlay.model.ledger import Category, ExpenseDraft
from outlay.model.seed import SeedData, default_seed
from outlay.services.session import LedgerSession, require_session
from outlay.services.theme_service import Theme
from outlay.workspace import Workspace


@pytest.fixture
def workspace(tmp_path: Path) -> Workspace:
    return Workspace(root=tmp_path)


class DescribeLedgerSessionStart:
    def it_should_load_built_in_seed_without_seed_file(self, workspace):
        session = LedgerSession.start(workspace)

        seed = default_seed()
        assert len(session.state.expenses) == len(seed.expenses)
        assert session.state.partners == tuple(seed.partners)
        assert session.state.categories == tuple(seed.categories)

    def it_should_load_seed_file_from_workspace(self, workspace):
        workspace.seed_path.parent.mkdir(parents=True)
        workspace.seed_path.write_text(
            "categories:\n  - id: only\n    name: Only\n", encoding="utf-8"
        )

        session = LedgerSession.start(workspace)

        assert [c.name for c in session.state.categories] == ["Only"]
        assert session.state.expenses == ()

    def it_should_accept_explicit_seed_and_state_options(self, workspace):
        seed = SeedData(categories=[Category(id="c1", name="Food")])

        session = LedgerSession.start(workspace, seed=seed, id_factory=lambda: "fixed-id")
        expense = session.state.add_expense(ExpenseDraft(date=date(2024, 1, 1), amount=1, category_id="c1"))

        assert expense.id == "fixed-id"

    def it_should_surface_invalid_seed_file(self, workspace):
        workspace.seed_path.parent.mkdir(parents=True)
        workspace.seed_path.write_text("expenses: [{id: e1}]\n", encoding="utf-8")

        with pytest.raises(SeedError):
            LedgerSession.start(workspace)

    def it_should_read_stored_theme(self, workspace):
        workspace.preferences_path.parent.mkdir(parents=True)
        workspace.preferences_path.write_text("theme: dark\n", encoding="utf-8")

        session = LedgerSession.start(workspace)

        assert session.theme.theme == Theme.dark


class DescribeRequireSession:
    def it_should_return_session_itself(self, workspace):
        session = LedgerSession.start(workspace)
        assert require_session(session) is session

    def it_should_return_session_from_context_mapping(self, workspace):
        session = LedgerSession.start(workspace)
        assert require_session({"session": session}) is session

    def it_should_fail_fast_without_session(self):
        with pytest.raises(ConfigurationError, match="within an active session"):
            require_session(None)

    def it_should_fail_fast_when_context_has_no_session(self):
        with pytest.raises(ConfigurationError):
            require_session({"workspace": Workspace(root=Path("/tmp"))})
