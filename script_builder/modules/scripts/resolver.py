"""Placeholder substitution for command templates.

Commands carry ``{identifier}`` tokens. ``{TOOLS_PATH}`` is reserved and always
resolves to the Tools directory in Windows path syntax; every other token is
looked up in the supplied variable mapping. Tokens without a matching key are
left in place so partially configured actions still render something
inspectable. Substitution is a single pass: text coming from a value is never
scanned again.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from os import PathLike
from typing import Any, Union

TOOLS_PATH_TOKEN = "{TOOLS_PATH}"

_WSL_MOUNT = re.compile(r"^/mnt/([A-Za-z])(?:/|$)")


def to_windows_path(path: Union[str, PathLike]) -> str:
    """Render ``path`` in backslash-separated, drive-letter form."""
    text = str(path)
    match = _WSL_MOUNT.match(text)
    if match:
        text = f"{match.group(1).upper()}:\\" + text[match.end():]
    return text.replace("/", "\\")


def variable_text(value: Any) -> str:
    """Accept both plain strings and ``{value, description}`` records."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, Mapping):
        inner = value.get("value")
        return "" if inner is None else str(inner)
    if hasattr(value, "value"):
        inner = getattr(value, "value")
        return "" if inner is None else str(inner)
    return str(value)


def resolve(template: str, variables: Mapping[str, Any], tools_path: Union[str, PathLike]) -> str:
    result = template.replace(TOOLS_PATH_TOKEN, to_windows_path(tools_path))
    if not variables:
        return result

    replacements = {
        "{%s}" % key: variable_text(value) for key, value in variables.items() if "{%s}" % key != TOOLS_PATH_TOKEN
    }
    if not replacements:
        return result
    # longest first so a key never shadows a longer key sharing its prefix
    tokens = sorted(replacements, key=len, reverse=True)
    pattern = re.compile("|".join(re.escape(token) for token in tokens))
    return pattern.sub(lambda match: replacements[match.group(0)], result)
