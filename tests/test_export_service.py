"""Unit tests for preview rendering and on-disk export."""

import json

import pytest

from script_builder.domain.actions import ActionInstance
from script_builder.domain.projects import Project, ProjectVariable, ScriptSlot
from script_builder.modules.export import (
    ExportIOFailure,
    ExportService,
    batch_filename,
    descriptor_filename,
    export_basename,
)


@pytest.fixture
def project():
    return Project(
        name="Forza Horizon 5",
        before_scripts=[
            ActionInstance("Change Resolution (QRes)", '"{TOOLS_PATH}\\qres.exe" /x {width} /y {height}', variables={"width": "2560"}),
        ],
        after_scripts=[],
        variables={"height": ProjectVariable(value="1440")},
    )


@pytest.fixture
def exporter(tmp_path):
    return ExportService(export_dir=tmp_path / "exports", tools_path="C:/Sunshine/Tools")


class TestFilenames:
    def test_unsafe_characters_replaced(self):
        assert export_basename('Halo: MCC / "Remastered"') == "Halo_ MCC _ _Remastered_"

    def test_empty_name_falls_back(self):
        assert export_basename("") == "project"
        assert batch_filename("", ScriptSlot.AFTER) == "project_after.bat"
        assert descriptor_filename("Game") == "Game_sunshine_config.json"


class TestPreview:
    def test_bodies_and_descriptor(self, exporter, project):
        preview = exporter.build_preview(project)
        assert preview.before_script == '"C:\\Sunshine\\Tools\\qres.exe" /x 2560 /y 1440'
        assert preview.after_script == ""
        assert json.loads(preview.json_config) == {
            "name": "Forza Horizon 5",
            "prep": {"do": preview.before_script, "undo": ""},
        }

    def test_preview_does_not_mutate_project(self, exporter, project):
        exporter.build_preview(project)
        assert project.before_scripts[0].command.startswith('"{TOOLS_PATH}')


class TestWriteFiles:
    def test_batch_files_skip_empty_sequences(self, exporter, project):
        result = exporter.write_batch_files(project)
        assert result.files == ["Forza Horizon 5_before.bat"]
        content = (exporter.export_dir / "Forza Horizon 5_before.bat").read_text(encoding="utf-8")
        assert content.startswith("@echo off\n")
        assert "/x 2560 /y 1440" in content
        assert not (exporter.export_dir / "Forza Horizon 5_after.bat").exists()

    def test_nothing_to_export(self, exporter):
        result = exporter.write_batch_files(Project(name="Empty"))
        assert result.files == []
        assert result.message == "No scripts to export"

    def test_json_descriptor(self, exporter, project):
        result = exporter.write_json_descriptor(project)
        path = exporter.export_dir / result.files[0]
        assert json.loads(path.read_text(encoding="utf-8"))["prep"]["undo"] == ""

    def test_export_dir_reused(self, exporter, project):
        exporter.write_json_descriptor(project)
        exporter.write_json_descriptor(project)
        assert len(list(exporter.export_dir.iterdir())) == 1

    def test_unwritable_export_dir(self, tmp_path, project):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        exporter = ExportService(export_dir=blocker / "exports", tools_path=tmp_path)
        with pytest.raises(ExportIOFailure):
            exporter.write_json_descriptor(project)
