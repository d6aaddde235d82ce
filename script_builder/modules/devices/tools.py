"""Presence checks for the optional helper executables."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .enumerator import AUDIO_INFO, DISPLAY_EXTRACTOR
from .models import HelperTool, ToolStatus, ToolStatusReport

KNOWN_TOOLS = (
    HelperTool(
        name="NirCmd",
        filename="nircmd.exe",
        description="Volume, mute, resolution and monitor power control",
    ),
    HelperTool(
        name="QRes",
        filename="qres.exe",
        description="Command line display resolution changer",
    ),
    HelperTool(
        name="MultiMonitorTool",
        filename="MultiMonitorTool.exe",
        description="Enable, disable and configure individual displays",
    ),
    HelperTool(
        name="Sunshine Info Extractor",
        filename=DISPLAY_EXTRACTOR,
        description="Detailed display enumeration with device IDs and refresh rates",
    ),
    HelperTool(
        name="Audio Info",
        filename=AUDIO_INFO,
        description="Audio output device enumeration",
    ),
)


@dataclass(slots=True)
class ToolInventory:
    tools_path: Path
    tools: tuple[HelperTool, ...] = field(default=KNOWN_TOOLS)

    def _check(self, tool: HelperTool) -> ToolStatus:
        path = self.tools_path / tool.filename
        if not path.is_file():
            return ToolStatus(tool.name, tool.filename, tool.description, available=False)
        return ToolStatus(
            tool.name,
            tool.filename,
            tool.description,
            available=True,
            size=path.stat().st_size,
        )

    def status(self) -> ToolStatusReport:
        return ToolStatusReport(tools=tuple(self._check(tool) for tool in self.tools))
