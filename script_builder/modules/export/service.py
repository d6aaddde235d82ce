"""Render the current project and persist export artifacts."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path

from script_builder.domain.projects import Project, ScriptSlot
from script_builder.modules.scripts import assembler

from .exceptions import ExportIOFailure
from .renderer import dump_json_descriptor, render_json_descriptor, render_script_file

logger = logging.getLogger(__name__)

_UNSAFE_FILENAME_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x1f]')


def export_basename(project_name: str) -> str:
    cleaned = _UNSAFE_FILENAME_CHARS.sub("_", project_name or "").strip(" .")
    return cleaned or "project"


def batch_filename(project_name: str, slot: ScriptSlot) -> str:
    return f"{export_basename(project_name)}_{ScriptSlot(slot).value}.bat"


def descriptor_filename(project_name: str) -> str:
    return f"{export_basename(project_name)}_sunshine_config.json"


@dataclass(slots=True)
class ExportPreview:
    before_script: str
    after_script: str
    json_config: str


@dataclass(slots=True)
class ExportResult:
    message: str
    files: list[str] = field(default_factory=list)


@dataclass(slots=True)
class ExportService:
    export_dir: Path
    tools_path: Path

    def render_body(self, project: Project, slot: ScriptSlot) -> str:
        return assembler.render(project.scripts(slot), project.variables, self.tools_path)

    def render_batch(self, project: Project, slot: ScriptSlot) -> str:
        return render_script_file(slot, project.name, self.render_body(project, slot))

    def render_descriptor(self, project: Project) -> dict:
        return render_json_descriptor(
            project.name,
            self.render_body(project, ScriptSlot.BEFORE),
            self.render_body(project, ScriptSlot.AFTER),
        )

    def build_preview(self, project: Project) -> ExportPreview:
        before = self.render_body(project, ScriptSlot.BEFORE)
        after = self.render_body(project, ScriptSlot.AFTER)
        descriptor = render_json_descriptor(project.name, before, after)
        return ExportPreview(
            before_script=before,
            after_script=after,
            json_config=dump_json_descriptor(descriptor),
        )

    def ensure_export_dir(self) -> None:
        try:
            self.export_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ExportIOFailure(f"Cannot create export directory {self.export_dir}: {exc}") from exc

    def _write(self, filename: str, content: str) -> Path:
        path = self.export_dir / filename
        try:
            path.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise ExportIOFailure(f"Cannot write {path}: {exc}") from exc
        logger.info("Exported %s", path)
        return path

    def write_batch_files(self, project: Project) -> ExportResult:
        slots = [slot for slot in ScriptSlot if project.scripts(slot)]
        if not slots:
            return ExportResult(message="No scripts to export")

        self.ensure_export_dir()
        written = []
        for slot in slots:
            filename = batch_filename(project.name, slot)
            self._write(filename, self.render_batch(project, slot))
            written.append(filename)
        return ExportResult(message=f"BAT files saved to {self.export_dir}", files=written)

    def write_json_descriptor(self, project: Project) -> ExportResult:
        self.ensure_export_dir()
        filename = descriptor_filename(project.name)
        self._write(filename, dump_json_descriptor(self.render_descriptor(project)) + "\n")
        return ExportResult(message=f"JSON configuration saved to {self.export_dir}", files=[filename])
