"""Device enumeration, variable options and helper tool status."""

from .enumerator import FALLBACK_AUDIO, FALLBACK_DISPLAY, DeviceEnumerator, WindowsDeviceEnumerator
from .exceptions import DeviceError, ExternalToolFailure
from .models import AudioDevice, DisplayDevice, HelperTool, ToolStatus, ToolStatusReport, VariableOption
from .providers import STATIC_OPTIONS, OptionProviderRegistry, static_provider
from .runner import run_helper
from .tools import KNOWN_TOOLS, ToolInventory

__all__ = [
    "AudioDevice",
    "DeviceEnumerator",
    "DeviceError",
    "DisplayDevice",
    "ExternalToolFailure",
    "FALLBACK_AUDIO",
    "FALLBACK_DISPLAY",
    "HelperTool",
    "KNOWN_TOOLS",
    "OptionProviderRegistry",
    "STATIC_OPTIONS",
    "ToolInventory",
    "ToolStatus",
    "ToolStatusReport",
    "VariableOption",
    "WindowsDeviceEnumerator",
    "run_helper",
    "static_provider",
]
