"""Variable resolution and script assembly."""

from .assembler import append, merge_variables, move_at, remove_at, render, render_instance
from .resolver import TOOLS_PATH_TOKEN, resolve, to_windows_path, variable_text

__all__ = [
    "TOOLS_PATH_TOKEN",
    "append",
    "merge_variables",
    "move_at",
    "remove_at",
    "render",
    "render_instance",
    "resolve",
    "to_windows_path",
    "variable_text",
]
