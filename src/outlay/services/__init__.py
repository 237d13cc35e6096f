"""
Service layer for outlay.

This module contains the functional core separated from the imperative shell
(CLI). Services hold no UI framework imports.

Principles:
- No UI framework imports (Rich, Typer)
- All dependencies injected through constructors
- Functions return data structures, not void
- Fully testable with simple unit tests
"""

from outlay.services.report_service import (
    CategoryTotal,
    LedgerSummary,
    MonthlyTotal,
    PartnerContribution,
    ReportService,
)
from outlay.services.session import LedgerSession, require_session
from outlay.services.state_manager import (
    Collection,
    LedgerStateManager,
    StateChange,
    StateObserver,
)
from outlay.services.theme_service import (
    PreferenceStore,
    Theme,
    ThemePreferenceService,
)

__all__ = [
    "CategoryTotal",
    "Collection",
    "LedgerSession",
    "LedgerStateManager",
    "LedgerSummary",
    "MonthlyTotal",
    "PartnerContribution",
    "PreferenceStore",
    "ReportService",
    "StateChange",
    "StateObserver",
    "Theme",
    "ThemePreferenceService",
    "require_session",
]
