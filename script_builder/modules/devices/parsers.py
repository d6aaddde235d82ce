"""Parsers for the text printed by display and audio helper processes."""

from __future__ import annotations

import json
from typing import Any

from .exceptions import ExternalToolFailure
from .models import AudioDevice, DisplayDevice

AUDIO_MODULE_MISSING = "MODULE_NOT_AVAILABLE"


def parse_display_lines(output: str) -> list[DisplayDevice]:
    """Parse ``index|deviceId|devicePath|WxH|primary|friendlyName`` lines."""
    displays = []
    for line in output.splitlines():
        line = line.strip()
        if "|" not in line or line.startswith("Found"):
            continue
        parts = line.split("|")
        if len(parts) < 6:
            continue
        try:
            index = int(parts[0])
        except ValueError:
            continue
        displays.append(
            DisplayDevice(
                id=index,
                device_id=parts[1],
                name=parts[2],
                device_path=parts[2],
                resolution=parts[3],
                is_primary=parts[4].strip().lower() == "true",
                display_name=parts[5],
            )
        )
    return displays


def parse_display_extractor(output: str) -> list[DisplayDevice]:
    """Parse the JSON array embedded in ``sunshine_info_extractor.exe`` output."""
    start = output.find("[")
    end = output.rfind("]")
    if start == -1 or end < start:
        raise ExternalToolFailure("no JSON array in display extractor output")
    try:
        payload = json.loads(output[start : end + 1])
    except json.JSONDecodeError as exc:
        raise ExternalToolFailure(f"invalid JSON from display extractor: {exc}") from exc
    if not isinstance(payload, list):
        raise ExternalToolFailure("display extractor output is not a list")

    displays = []
    for position, entry in enumerate(payload, start=1):
        try:
            displays.append(_display_from_extractor(position, entry))
        except (AttributeError, KeyError, TypeError, ValueError, ZeroDivisionError) as exc:
            raise ExternalToolFailure(f"malformed display entry {position}: {exc}") from exc
    return displays


def _display_from_extractor(position: int, entry: dict[str, Any]) -> DisplayDevice:
    info = entry["info"]
    resolution = f"{info['resolution']['width']}x{info['resolution']['height']}"
    rate = info.get("refresh_rate", {}).get("value")
    refresh_rate = round(rate["numerator"] / rate["denominator"]) if rate else None
    return DisplayDevice(
        id=position,
        device_id=str(entry["device_id"]),
        name=str(entry["display_name"]),
        device_path=str(entry["display_name"]),
        resolution=resolution,
        is_primary=bool(info.get("primary")),
        display_name=str(entry.get("friendly_name") or entry["display_name"]),
        refresh_rate=refresh_rate,
    )


def parse_audio_lines(output: str) -> list[AudioDevice]:
    """Parse ``index|name|default|id`` lines from the AudioDeviceCmdlets query."""
    if AUDIO_MODULE_MISSING in output:
        return []
    devices = []
    for line in output.splitlines():
        line = line.strip()
        if "|" not in line:
            continue
        parts = line.split("|")
        if len(parts) < 4:
            continue
        devices.append(
            AudioDevice(
                id=parts[3].strip(),
                index=parts[0].strip(),
                name=parts[1].strip(),
                is_default=parts[2].strip().lower() == "true",
            )
        )
    return devices


def parse_audio_info(output: str) -> list[AudioDevice]:
    """Parse ``audio-info.exe`` blocks, keeping Active devices only.

    Each block lists ``Device ID``, ``Device name`` and ends with
    ``Device state``. The first active device is the default one.
    """
    devices: list[AudioDevice] = []
    current: dict[str, str] = {}
    for line in output.splitlines():
        key, sep, value = line.strip().partition(":")
        if not sep:
            continue
        key = key.strip()
        value = value.strip()
        if key == "Device ID":
            current["id"] = value
        elif key == "Device name":
            current["name"] = value
        elif key == "Device state":
            if value == "Active" and current.get("id") and current.get("name"):
                devices.append(
                    AudioDevice(
                        id=current["id"],
                        index=str(len(devices)),
                        name=current["name"],
                        is_default=not devices,
                    )
                )
            current = {}
    return devices
