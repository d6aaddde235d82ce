"""Unit tests for device enumeration and its fallbacks."""

from unittest.mock import AsyncMock, patch

import pytest

from script_builder.modules.devices import (
    FALLBACK_AUDIO,
    FALLBACK_DISPLAY,
    ExternalToolFailure,
    WindowsDeviceEnumerator,
)

RUN_HELPER = "script_builder.modules.devices.enumerator.run_helper"


@pytest.fixture
def enumerator(tmp_path):
    return WindowsDeviceEnumerator(tools_path=tmp_path, powershell="powershell.exe", timeout=2.0)


class TestDisplays:
    @pytest.mark.asyncio
    async def test_powershell_output_parsed(self, enumerator):
        output = "1|id-1|\\\\.\\DISPLAY1|1920x1080|True|Display 1\n"
        with patch(RUN_HELPER, new=AsyncMock(return_value=output)) as mock:
            displays = await enumerator.displays()
        assert [display.device_id for display in displays] == ["id-1"]
        args = mock.await_args.args[0]
        assert args[0] == "powershell.exe"
        assert "-Command" in args

    @pytest.mark.asyncio
    async def test_extractor_preferred_when_present(self, enumerator, tmp_path):
        extractor = tmp_path / "sunshine_info_extractor.exe"
        extractor.write_bytes(b"")
        output = '[{"device_id": "{x}", "display_name": "D1", "info": {"primary": true, ' \
                 '"resolution": {"width": 800, "height": 600}}}]'
        with patch(RUN_HELPER, new=AsyncMock(return_value=output)) as mock:
            displays = await enumerator.displays()
        assert displays[0].device_id == "{x}"
        assert mock.await_args.args[0] == [str(extractor)]

    @pytest.mark.asyncio
    async def test_failure_falls_back(self, enumerator):
        with patch(RUN_HELPER, new=AsyncMock(side_effect=ExternalToolFailure("timed out"))):
            assert await enumerator.displays() == [FALLBACK_DISPLAY]

    @pytest.mark.asyncio
    async def test_empty_result_falls_back(self, enumerator):
        with patch(RUN_HELPER, new=AsyncMock(return_value="")):
            assert await enumerator.displays() == [FALLBACK_DISPLAY]


class TestAudioDevices:
    @pytest.mark.asyncio
    async def test_module_missing_falls_back(self, enumerator):
        with patch(RUN_HELPER, new=AsyncMock(return_value="MODULE_NOT_AVAILABLE")):
            assert await enumerator.audio_devices() == [FALLBACK_AUDIO]

    @pytest.mark.asyncio
    async def test_audio_info_helper(self, enumerator, tmp_path):
        (tmp_path / "audio-info.exe").write_bytes(b"")
        output = "Device ID: {a}\nDevice name: Speakers\nDevice state: Active\n"
        with patch(RUN_HELPER, new=AsyncMock(return_value=output)):
            devices = await enumerator.audio_devices()
        assert [device.id for device in devices] == ["{a}"]

    @pytest.mark.asyncio
    async def test_failure_falls_back(self, enumerator):
        with patch(RUN_HELPER, new=AsyncMock(side_effect=ExternalToolFailure("exit 1"))):
            assert await enumerator.audio_devices() == [FALLBACK_AUDIO]
