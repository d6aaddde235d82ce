"""Device enumeration, variable option and helper tool endpoints."""

from fastapi import APIRouter, Depends

from script_builder.api.deps import get_enumerator, get_option_registry, get_tool_inventory
from script_builder.modules.devices import DeviceEnumerator, OptionProviderRegistry, ToolInventory
from script_builder.schemas import (
    AudioDeviceResponse,
    DisplayDeviceResponse,
    ToolStatusResponse,
    VariableOptionResponse,
)

router = APIRouter()


@router.get("/displays", response_model=list[DisplayDeviceResponse], summary="Enumerate displays")
async def list_displays(enumerator: DeviceEnumerator = Depends(get_enumerator)):
    return [DisplayDeviceResponse.from_domain(display) for display in await enumerator.displays()]


@router.get("/audio-devices", response_model=list[AudioDeviceResponse], summary="Enumerate audio devices")
async def list_audio_devices(enumerator: DeviceEnumerator = Depends(get_enumerator)):
    return [AudioDeviceResponse.from_domain(device) for device in await enumerator.audio_devices()]


@router.get("/variable-options", response_model=list[str], summary="Variables with selectable options")
async def list_option_variables(registry: OptionProviderRegistry = Depends(get_option_registry)):
    return registry.names()


@router.get(
    "/variable-options/{variable_name}",
    response_model=list[VariableOptionResponse],
    summary="Selectable values for a variable",
)
async def variable_options(variable_name: str, registry: OptionProviderRegistry = Depends(get_option_registry)):
    options = await registry.options_for(variable_name)
    return [VariableOptionResponse(value=option.value, label=option.label) for option in options]


@router.get("/tools/status", response_model=ToolStatusResponse, summary="Helper tool availability")
async def tool_status(inventory: ToolInventory = Depends(get_tool_inventory)):
    return ToolStatusResponse.from_domain(inventory.status())
