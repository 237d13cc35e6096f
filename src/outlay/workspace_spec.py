from __future__ import annotations

from pathlib import Path

from outlay.workspace import Workspace


class DescribeWorkspace:
    class DescribeResolve:
        def it_should_use_explicit_path_when_provided(self):
            ws = Workspace.resolve(explicit=Path("/tmp/my-books"))
            assert ws.root == Path("/tmp/my-books")

        def it_should_use_outlay_data_env_var_when_set(self, monkeypatch):
            monkeypatch.setenv("OUTLAY_DATA", "/tmp/env-books")
            ws = Workspace.resolve()
            assert ws.root == Path("/tmp/env-books")

        def it_should_prefer_explicit_over_env_var(self, monkeypatch):
            monkeypatch.setenv("OUTLAY_DATA", "/tmp/env-books")
            ws = Workspace.resolve(explicit=Path("/tmp/explicit"))
            assert ws.root == Path("/tmp/explicit")

        def it_should_fall_back_to_cwd_when_no_env_var(self, monkeypatch):
            monkeypatch.delenv("OUTLAY_DATA", raising=False)
            ws = Workspace.resolve()
            assert ws.root == Path.cwd()

    class DescribePaths:
        def it_should_compute_seed_path(self):
            ws = Workspace(root=Path("/data"))
            assert ws.seed_path == Path("/data/config/seed.yml")

        def it_should_compute_preferences_path(self):
            ws = Workspace(root=Path("/data"))
            assert ws.preferences_path == Path("/data/config/preferences.yml")
