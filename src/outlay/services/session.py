"""
Session wiring - builds the shared services once and hands them out explicitly.

A LedgerSession is constructed at startup and passed to every consumer
(CLI commands receive it through the Typer context object). Nothing reaches
the state manager through a global.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from outlay.errors import ConfigurationError
from outlay.model.seed import SeedData
from outlay.model.seed_io import load_seed
from outlay.services.state_manager import LedgerStateManager
from outlay.services.theme_service import PreferenceStore, ThemePreferenceService
from outlay.workspace import Workspace

logger = logging.getLogger(__name__)

SESSION_KEY = "session"


@dataclass
class LedgerSession:
    """Services shared by every consumer during one session."""

    workspace: Workspace
    state: LedgerStateManager
    theme: ThemePreferenceService

    @classmethod
    def start(
        cls,
        workspace: Workspace,
        seed: Optional[SeedData] = None,
        **state_kwargs,
    ) -> LedgerSession:
        """
        Load the seed and build the session's services.

        Args:
            workspace: Workspace providing the seed and preference paths
            seed: Explicit seed collections (skips reading config/seed.yml)
            **state_kwargs: Passed to LedgerStateManager (clock, id_factory)

        Returns:
            A started session

        Raises:
            SeedError: If config/seed.yml exists but is invalid
        """
        if seed is None:
            seed = load_seed(workspace.seed_path)
        logger.debug(
            "Starting session in %s with %d expense(s), %d partner(s), %d category(ies)",
            workspace.root,
            len(seed.expenses),
            len(seed.partners),
            len(seed.categories),
        )
        return cls(
            workspace=workspace,
            state=LedgerStateManager.from_seed(seed, **state_kwargs),
            theme=ThemePreferenceService(PreferenceStore(workspace.preferences_path)),
        )


def require_session(obj: Any) -> LedgerSession:
    """
    Return the active session held by a context object.

    Accepts the session itself or a mapping storing it under "session"
    (the shape of a Typer ``ctx.obj``).

    Raises:
        ConfigurationError: If no session was started
    """
    session = obj.get(SESSION_KEY) if isinstance(obj, dict) else obj
    if not isinstance(session, LedgerSession):
        raise ConfigurationError(
            "Ledger state must be used within an active session; "
            "call LedgerSession.start() before handing it to consumers"
        )
    return session


__all__ = ["LedgerSession", "SESSION_KEY", "require_session"]
