"""Device enumeration results and variable options."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class VariableOption:
    value: str
    label: str


@dataclass(frozen=True, slots=True)
class DisplayDevice:
    id: int
    device_id: str
    name: str
    device_path: str
    resolution: str
    is_primary: bool
    display_name: str
    refresh_rate: Optional[int] = None

    @property
    def friendly_name(self) -> str:
        rate = f"@{self.refresh_rate}Hz" if self.refresh_rate else ""
        return f"{self.display_name} - {self.resolution}{rate}{'*' if self.is_primary else ''}"

    def to_option(self) -> VariableOption:
        label = f"{self.display_name} ({self.resolution})"
        if self.is_primary:
            label += " *Primary*"
        return VariableOption(value=self.device_id, label=label)


@dataclass(frozen=True, slots=True)
class AudioDevice:
    id: str
    index: str
    name: str
    is_default: bool

    @property
    def friendly_name(self) -> str:
        return f"{self.name} (Default)" if self.is_default else self.name

    def to_option(self) -> VariableOption:
        label = f"{self.name} *Default*" if self.is_default else self.name
        return VariableOption(value=self.id, label=label)


@dataclass(frozen=True, slots=True)
class HelperTool:
    name: str
    filename: str
    description: str


@dataclass(frozen=True, slots=True)
class ToolStatus:
    name: str
    filename: str
    description: str
    available: bool
    size: Optional[int] = None


@dataclass(frozen=True, slots=True)
class ToolStatusReport:
    tools: tuple[ToolStatus, ...]

    @property
    def total(self) -> int:
        return len(self.tools)

    @property
    def available(self) -> int:
        return sum(1 for tool in self.tools if tool.available)

    @property
    def missing(self) -> int:
        return self.total - self.available
