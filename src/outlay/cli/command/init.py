"""Initialize a new outlay workspace directory."""

from __future__ import annotations

from outlay.model.seed import default_seed
from outlay.model.seed_io import save_seed
from outlay.workspace import Workspace

from .util import console

_SEED_HEADER = """\
# Seed data
# Loaded once when an outlay session starts. Edit freely; ids link expenses
# to categories and partners.
#
# Keep a partner named "Unassigned / Company" and a category named
# "Miscellaneous": expenses are moved to them when their partner or
# category is deleted.

"""


def run(*, workspace: Workspace) -> int:
    """Initialize a workspace with a config directory and a starter seed file.

    Skips anything that already exists (safe to run on an existing workspace).

    Args:
        workspace: Workspace to initialize

    Returns:
        Exit code (0 = success)
    """
    root = workspace.root
    console.print(f"[title]Initializing workspace:[/title] {root}\n")

    created = []
    skipped = []

    if workspace.config_dir.exists():
        skipped.append(str(workspace.config_dir.relative_to(root)) + "/")
    else:
        workspace.config_dir.mkdir(parents=True, exist_ok=True)
        created.append(str(workspace.config_dir.relative_to(root)) + "/")

    if workspace.seed_path.exists():
        skipped.append(str(workspace.seed_path.relative_to(root)))
    else:
        save_seed(workspace.seed_path, default_seed(), header=_SEED_HEADER)
        created.append(str(workspace.seed_path.relative_to(root)))

    if created:
        console.print("[positive]Created:[/positive]")
        for path in created:
            console.print(f"  {path}")

    if skipped:
        console.print("[muted]Already exists (skipped):[/muted]")
        for path in skipped:
            console.print(f"  [muted]{path}[/muted]")

    if not created:
        console.print("[positive]Workspace already fully initialized.[/positive]")
    else:
        console.print(f"\n[positive]Workspace ready at {root}[/positive]")
    return 0
