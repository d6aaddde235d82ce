"""Wrap rendered script bodies into exportable artifacts."""

from __future__ import annotations

import json
from typing import Any, Union

from script_builder.domain.projects import ScriptSlot

GENERATOR_NAME = "Sunshine Script Builder"
UNTITLED_PROJECT = "Untitled Project"


def _script_label(script_type: Union[ScriptSlot, str]) -> str:
    if isinstance(script_type, ScriptSlot):
        return script_type.label
    return str(script_type).capitalize()


def render_script_file(script_type: Union[ScriptSlot, str], project_name: str, body: str) -> str:
    label = _script_label(script_type)
    return (
        "@echo off\n"
        f"REM Generated by {GENERATOR_NAME}\n"
        f"REM {label} Script for {project_name or UNTITLED_PROJECT}\n"
        "\n"
        f"{body}\n"
        "\n"
        f"echo {label} script completed.\n"
    )


def render_json_descriptor(project_name: str, before_body: str, after_body: str) -> dict[str, Any]:
    """Build the ``prep`` descriptor read by the Sunshine host.

    Field names are fixed by the host application; empty bodies are emitted as
    empty strings, never omitted.
    """
    return {
        "name": project_name or "",
        "prep": {
            "do": before_body or "",
            "undo": after_body or "",
        },
    }


def dump_json_descriptor(descriptor: dict[str, Any]) -> str:
    return json.dumps(descriptor, indent=2, ensure_ascii=False)
