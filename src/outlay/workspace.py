"""
Workspace - centralized data path resolution for outlay.

A Workspace represents the root directory holding the optional seed file and
the persisted preferences. All paths are computed relative to this root.

Resolution priority:
1. Explicit path (--data-dir CLI option)
2. OUTLAY_DATA environment variable
3. Current working directory
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DATA_ENV = "OUTLAY_DATA"


@dataclass
class Workspace:
    """Root directory for all outlay data paths."""

    root: Path

    @classmethod
    def resolve(cls, explicit: Path | None = None) -> Workspace:
        """Resolve workspace root from explicit path, env var, or CWD.

        Args:
            explicit: Explicitly provided path (highest priority)

        Returns:
            Workspace with resolved root
        """
        if explicit is not None:
            return cls(root=Path(explicit))
        env = os.environ.get(DATA_ENV)
        if env:
            return cls(root=Path(env))
        return cls(root=Path.cwd())

    @property
    def config_dir(self) -> Path:
        return self.root / "config"

    @property
    def seed_path(self) -> Path:
        return self.config_dir / "seed.yml"

    @property
    def preferences_path(self) -> Path:
        return self.config_dir / "preferences.yml"


__all__ = ["Workspace"]
