"""Tests for the offline export script."""

import importlib.util
import json
import sys
from pathlib import Path

import pytest

from script_builder.modules.catalog import ActionCatalog

SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "export_project.py"


@pytest.fixture(scope="module")
def cli():
    spec = importlib.util.spec_from_file_location("export_project", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def project_file(tmp_path):
    path = tmp_path / "project.json"
    path.write_text(
        json.dumps(
            {
                "name": "Stardew",
                "beforeScripts": [{"actionName": "Sleep/Wait", "variables": {"seconds": "{delay}"}}],
                "afterScripts": [{"actionName": "Custom", "command": "echo bye", "variables": {}}],
                "variables": {"delay": {"value": "5", "description": ""}},
            }
        ),
        encoding="utf-8",
    )
    return path


class TestExportCli:
    def test_writes_all_files(self, cli, project_file, tmp_path, monkeypatch):
        out = tmp_path / "out"
        monkeypatch.setattr(sys, "argv", ["export_project.py", str(project_file), "--output", str(out)])
        cli.main()
        assert sorted(path.name for path in out.iterdir()) == [
            "Stardew_after.bat",
            "Stardew_before.bat",
            "Stardew_sunshine_config.json",
        ]
        descriptor = json.loads((out / "Stardew_sunshine_config.json").read_text(encoding="utf-8"))
        assert descriptor["prep"]["undo"] == "echo bye"

    def test_load_keeps_instance_variables(self, cli, project_file):
        project = cli.load_project(project_file, ActionCatalog())
        assert project.before_scripts[0].variables == {"seconds": "{delay}"}

    def test_missing_file(self, cli, tmp_path):
        with pytest.raises(SystemExit):
            cli.load_project(tmp_path / "nope.json", ActionCatalog())

    def test_unknown_action(self, cli, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"name": "x", "beforeScripts": [{"actionName": "Nope"}]}), encoding="utf-8")
        with pytest.raises(SystemExit):
            cli.load_project(path, ActionCatalog())
