from __future__ import annotations

from pathlib import Path

from outlay.cli.command.init import run
from outlay.model.seed import default_seed
from outlay.model.seed_io import load_seed
from outlay.workspace import Workspace


class DescribeInitCommand:
    def it_should_create_config_dir_and_seed_file(self, tmp_path: Path):
        workspace = Workspace(root=tmp_path)

        rc = run(workspace=workspace)

        assert rc == 0
        assert workspace.config_dir.is_dir()
        assert load_seed(workspace.seed_path) == default_seed()

    def it_should_not_overwrite_existing_seed(self, tmp_path: Path):
        workspace = Workspace(root=tmp_path)
        workspace.seed_path.parent.mkdir(parents=True)
        workspace.seed_path.write_text("categories: []\n", encoding="utf-8")

        rc = run(workspace=workspace)

        assert rc == 0
        assert workspace.seed_path.read_text(encoding="utf-8") == "categories: []\n"
