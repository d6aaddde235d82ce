#!/usr/bin/env python3
"""
Export a saved project file to Sunshine batch scripts and descriptor without
starting the web service.

Example:
    python scripts/export_project.py my_project.json \
        --output exports \
        --tools-dir C:/SunshineScripts/Tools
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from pydantic import ValidationError

from script_builder.core.config import get_settings
from script_builder.domain.projects import Project
from script_builder.modules.catalog import ActionCatalog, ActionNotFoundError
from script_builder.modules.export import ExportIOFailure, ExportService
from script_builder.schemas import ProjectResponse


def load_project(path: Path, catalog: ActionCatalog) -> Project:
    if not path.exists():
        raise SystemExit(f"project file not found: {path}")
    with path.open("r", encoding="utf-8") as fh:
        try:
            data = json.load(fh)
        except json.JSONDecodeError as exc:
            raise SystemExit(f"invalid JSON in {path}: {exc}") from exc

    try:
        saved = ProjectResponse.model_validate(data)
    except ValidationError as exc:
        raise SystemExit(f"not a project file: {path}\n{exc}") from exc

    def instances(items):
        return [
            catalog.build_instance(item.action_name, item.variables, command=item.command, description=item.description)
            for item in items
        ]

    try:
        return Project(
            name=saved.name,
            before_scripts=instances(saved.before_scripts),
            after_scripts=instances(saved.after_scripts),
            variables={name: variable.to_domain() for name, variable in saved.variables.items()},
        )
    except ActionNotFoundError as exc:
        raise SystemExit(str(exc)) from exc


def main() -> None:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Export a saved project to Sunshine scripts")
    parser.add_argument("project", type=Path, help="Project JSON file (as returned by GET /api/project)")
    parser.add_argument("--output", type=Path, default=settings.export_path, help="Directory to write files into")
    parser.add_argument("--tools-dir", type=Path, default=settings.tools_path, help="Value for {TOOLS_PATH}")
    parser.add_argument("--skip-bat", action="store_true", help="Do not write before/after batch files")
    parser.add_argument("--skip-json", action="store_true", help="Do not write the Sunshine descriptor")
    parser.add_argument("--preview", action="store_true", help="Print the rendered output instead of writing files")
    args = parser.parse_args()

    project = load_project(args.project, ActionCatalog())
    exporter = ExportService(export_dir=args.output, tools_path=args.tools_dir)

    if args.preview:
        preview = exporter.build_preview(project)
        print("[before]")
        print(preview.before_script)
        print("[after]")
        print(preview.after_script)
        print("[json]")
        print(preview.json_config)
        return

    results = []
    try:
        if not args.skip_bat:
            results.append(exporter.write_batch_files(project))
        if not args.skip_json:
            results.append(exporter.write_json_descriptor(project))
    except ExportIOFailure as exc:
        raise SystemExit(f"export failed: {exc}") from exc

    for result in results:
        print(f"[export] {result.message}")
        for filename in result.files:
            print(f"  {filename}")


if __name__ == "__main__":
    main()
