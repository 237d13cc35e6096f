from __future__ import annotations

# Command implementations for the outlay CLI.
# Each command module exposes a `run(...)` function that renders a view of the
# session state and returns an exit code. Typer wrappers in outlay.cli.app
# delegate here.

__all__ = [
    "categories",
    "dashboard",
    "expenses",
    "init",
    "partners",
    "theme",
]
