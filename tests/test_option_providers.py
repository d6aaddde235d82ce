"""Unit tests for variable option providers."""

import pytest

from script_builder.modules.devices import STATIC_OPTIONS, OptionProviderRegistry, VariableOption

from tests.conftest import FakeEnumerator


@pytest.fixture
def registry():
    return OptionProviderRegistry.with_enumerator(FakeEnumerator())


class TestOptionProviderRegistry:
    def test_names_include_static_and_device_variables(self, registry):
        names = registry.names()
        assert "display_device_id" in names
        assert "audio_device_id" in names
        assert set(STATIC_OPTIONS) <= set(names)

    @pytest.mark.asyncio
    async def test_static_options(self, registry):
        options = await registry.options_for("width")
        assert VariableOption(value="1920", label="1920 (Full HD)") in options
        assert options[-1].value == "${SUNSHINE_CLIENT_WIDTH}"

    @pytest.mark.asyncio
    async def test_display_options_come_from_enumerator(self, registry):
        options = await registry.options_for("display_device_id")
        assert options == [
            VariableOption(value="MONITOR\\GSM5B08\\4&1", label="LG ULTRAGEAR (2560x1440) *Primary*")
        ]

    @pytest.mark.asyncio
    async def test_audio_options_mark_default(self, registry):
        options = await registry.options_for("audio_device_id")
        assert [option.label for option in options] == ["Speakers *Default*", "Headset"]

    @pytest.mark.asyncio
    async def test_unknown_variable_has_no_options(self, registry):
        assert await registry.options_for("favourite_colour") == []

    @pytest.mark.asyncio
    async def test_custom_static_options(self):
        registry = OptionProviderRegistry.with_enumerator(
            FakeEnumerator(),
            static_options={"seconds": [VariableOption("7", "7 seconds")]},
        )
        assert await registry.options_for("seconds") == [VariableOption("7", "7 seconds")]
        assert await registry.options_for("width") == []
