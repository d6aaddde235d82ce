"""Display and audio device enumeration for Windows hosts."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from .exceptions import ExternalToolFailure
from .models import AudioDevice, DisplayDevice
from .parsers import parse_audio_info, parse_audio_lines, parse_display_extractor, parse_display_lines
from .runner import run_helper

logger = logging.getLogger(__name__)

DISPLAY_EXTRACTOR = "sunshine_info_extractor.exe"
AUDIO_INFO = "audio-info.exe"

DISPLAY_QUERY = (
    "Add-Type -AssemblyName System.Windows.Forms; $screens = [System.Windows.Forms.Screen]::AllScreens; "
    "$pnpMonitors = @(); try { $pnpMonitors = Get-PnpDevice -Class Monitor | Where-Object { $_.Status -eq \"OK\" } } catch { }; "
    "$screenIndex = 0; foreach ($screen in $screens) { $screenIndex++; $deviceId = \"fallback-id-\" + $screenIndex; "
    "$friendlyName = \"Display \" + $screenIndex; if ($pnpMonitors.Count -ge $screenIndex) { $pnp = $pnpMonitors[$screenIndex - 1]; "
    "if ($pnp.InstanceId) { $deviceId = $pnp.InstanceId; $friendlyName = $pnp.FriendlyName } }; "
    "Write-Output ($screenIndex.ToString() + \"|\" + $deviceId + \"|\" + $screen.DeviceName + \"|\" + $screen.Bounds.Width + \"x\" + "
    "$screen.Bounds.Height + \"|\" + $screen.Primary + \"|\" + $friendlyName) }"
)

AUDIO_QUERY = (
    "try { Import-Module AudioDeviceCmdlets -ErrorAction Stop; Get-AudioDevice -List | Where-Object { $_.Type -eq \"Playback\" } | "
    "ForEach-Object { Write-Output ($_.Index.ToString() + \"|\" + $_.Name + \"|\" + $_.Default.ToString() + \"|\" + $_.ID) } } "
    "catch { Write-Output \"MODULE_NOT_AVAILABLE\" }"
)

FALLBACK_DISPLAY = DisplayDevice(
    id=1,
    device_id="{default-display-id}",
    name="\\\\.\\DISPLAY1",
    device_path="\\\\.\\DISPLAY1",
    resolution="Unknown",
    is_primary=True,
    display_name="Primary Display",
)

FALLBACK_AUDIO = AudioDevice(
    id="default-audio-device",
    index="0",
    name="Default Audio Device",
    is_default=True,
)


class DeviceEnumerator(Protocol):
    """Source of display and audio devices for option lists."""

    async def displays(self) -> list[DisplayDevice]:
        ...

    async def audio_devices(self) -> list[AudioDevice]:
        ...


@dataclass(slots=True)
class WindowsDeviceEnumerator:
    """Enumerates devices through helper executables or PowerShell.

    Helpers in the Tools directory are preferred when present. Any failure is
    logged and replaced by a single built-in fallback device, so callers always
    receive a non-empty list.
    """

    tools_path: Path
    powershell: str = "powershell.exe"
    timeout: float = 10.0

    def _powershell(self, script: str) -> list[str]:
        return [self.powershell, "-NoProfile", "-NonInteractive", "-Command", script]

    async def displays(self) -> list[DisplayDevice]:
        extractor = self.tools_path / DISPLAY_EXTRACTOR
        try:
            if extractor.is_file():
                output = await run_helper([str(extractor)], self.timeout)
                displays = parse_display_extractor(output)
            else:
                output = await run_helper(self._powershell(DISPLAY_QUERY), self.timeout)
                displays = parse_display_lines(output)
        except ExternalToolFailure as exc:
            logger.warning("Display enumeration failed: %s", exc)
            displays = []
        if not displays:
            logger.info("No displays enumerated, using fallback display")
            return [FALLBACK_DISPLAY]
        return displays

    async def audio_devices(self) -> list[AudioDevice]:
        audio_info = self.tools_path / AUDIO_INFO
        try:
            if audio_info.is_file():
                output = await run_helper([str(audio_info)], self.timeout)
                devices = parse_audio_info(output)
            else:
                output = await run_helper(self._powershell(AUDIO_QUERY), self.timeout)
                devices = parse_audio_lines(output)
        except ExternalToolFailure as exc:
            logger.warning("Audio device enumeration failed: %s", exc)
            devices = []
        if not devices:
            logger.info("No audio devices enumerated, using fallback device")
            return [FALLBACK_AUDIO]
        return devices
