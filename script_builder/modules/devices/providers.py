"""Selectable values offered for template variables."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable, Mapping
from typing import Optional

from .enumerator import DeviceEnumerator
from .models import VariableOption

OptionProvider = Callable[[], Awaitable[list[VariableOption]]]


def _options(*pairs: tuple[str, str]) -> tuple[VariableOption, ...]:
    return tuple(VariableOption(value=value, label=label) for value, label in pairs)


# ${SUNSHINE_*} values are left for the Sunshine host to substitute at launch.
STATIC_OPTIONS: Mapping[str, tuple[VariableOption, ...]] = {
    "width": _options(
        ("1920", "1920 (Full HD)"),
        ("2560", "2560 (1440p)"),
        ("3840", "3840 (4K)"),
        ("1680", "1680 (1050p)"),
        ("1366", "1366 (768p)"),
        ("${SUNSHINE_CLIENT_WIDTH}", "Use Sunshine Client Width"),
    ),
    "height": _options(
        ("1080", "1080 (Full HD)"),
        ("1440", "1440 (1440p)"),
        ("2160", "2160 (4K)"),
        ("1050", "1050 (1050p)"),
        ("768", "768 (768p)"),
        ("${SUNSHINE_CLIENT_HEIGHT}", "Use Sunshine Client Height"),
    ),
    "service_name": _options(
        ("Spooler", "Print Spooler"),
        ("Themes", "Themes"),
        ("AudioSrv", "Windows Audio"),
        ("AudioEndpointBuilder", "Windows Audio Endpoint Builder"),
        ("NVIDIA Display Driver Service", "NVIDIA Display Driver Service"),
        ("AMD External Events Utility", "AMD External Events Utility"),
    ),
    "process_name": _options(
        ("steam.exe", "Steam Gaming Client"),
        ("EpicGamesLauncher.exe", "Epic Games Launcher"),
        ("uplay.exe", "Ubisoft Connect"),
        ("origin.exe", "EA Origin"),
        ("Battle.net.exe", "Battle.net (Blizzard)"),
        ("discord.exe", "Discord"),
        ("spotify.exe", "Spotify Music"),
        ("chrome.exe", "Google Chrome"),
        ("firefox.exe", "Mozilla Firefox"),
        ("obs64.exe", "OBS Studio"),
        ("MSIAfterburner.exe", "MSI Afterburner"),
    ),
    "volume": _options(
        ("0", "0% (Mute)"),
        ("10", "10%"),
        ("25", "25%"),
        ("50", "50%"),
        ("75", "75%"),
        ("100", "100% (Max)"),
    ),
    "volume_level": _options(
        ("0", "0 (Mute)"),
        ("6553", "6553 (10%)"),
        ("16384", "16384 (25%)"),
        ("32768", "32768 (50%)"),
        ("49152", "49152 (75%)"),
        ("65535", "65535 (100% Max)"),
    ),
    "seconds": _options(
        ("1", "1 second"),
        ("2", "2 seconds"),
        ("3", "3 seconds"),
        ("5", "5 seconds"),
        ("10", "10 seconds"),
        ("30", "30 seconds"),
    ),
    "message": _options(
        ("Launching ${SUNSHINE_APP_NAME}...", "Game Launch Message"),
        ("Gaming setup complete!", "Setup Complete Message"),
        ("Display switched to ${SUNSHINE_CLIENT_WIDTH}x${SUNSHINE_CLIENT_HEIGHT}", "Resolution Change Message"),
        ("Audio device configured for gaming", "Audio Setup Message"),
        ("High performance mode enabled", "Performance Mode Message"),
        ("Sunshine session initialized", "Session Start Message"),
        ("Restoring previous settings...", "Cleanup Message"),
    ),
    "command": _options(
        ('Get-Process | Where-Object {$_.ProcessName -eq "steam"} | Stop-Process', "Stop Steam Process"),
        ('Get-Service "NVIDIA Display Driver Service" | Restart-Service', "Restart NVIDIA Service"),
        (
            "Get-WmiObject -Class Win32_Process -Filter \"name='discord.exe'\" | Invoke-WmiMethod -Name Terminate",
            "Close Discord",
        ),
        ('Start-Process "steam://launch/YOUR_GAME_ID"', "Launch Steam Game by ID"),
        (
            'Set-ItemProperty -Path "HKCU:\\Software\\Microsoft\\Windows\\CurrentVersion\\GameDVR" '
            '-Name "AppCaptureEnabled" -Value 0',
            "Disable Game DVR",
        ),
    ),
}


def static_provider(options: Iterable[VariableOption]) -> OptionProvider:
    frozen = tuple(options)

    async def provide() -> list[VariableOption]:
        return list(frozen)

    return provide


class OptionProviderRegistry:
    """Fixed mapping from variable name to the provider of its options."""

    def __init__(self, providers: Mapping[str, OptionProvider]) -> None:
        self._providers = dict(providers)

    @classmethod
    def with_enumerator(
        cls,
        enumerator: DeviceEnumerator,
        static_options: Optional[Mapping[str, Iterable[VariableOption]]] = None,
    ) -> "OptionProviderRegistry":
        async def display_options() -> list[VariableOption]:
            return [display.to_option() for display in await enumerator.displays()]

        async def audio_options() -> list[VariableOption]:
            return [device.to_option() for device in await enumerator.audio_devices()]

        providers: dict[str, OptionProvider] = {
            name: static_provider(options)
            for name, options in (STATIC_OPTIONS if static_options is None else static_options).items()
        }
        providers["display_device_id"] = display_options
        providers["audio_device_id"] = audio_options
        return cls(providers)

    def names(self) -> list[str]:
        return sorted(self._providers)

    async def options_for(self, variable_name: str) -> list[VariableOption]:
        provider = self._providers.get(variable_name)
        if provider is None:
            return []
        return await provider()
