"""Shared fixtures: isolated settings, a canned device enumerator, and an app."""

import pytest
from httpx import ASGITransport

from script_builder.core.config import PathSettings, Settings
from script_builder.main import create_app
from script_builder.modules.devices import AudioDevice, DisplayDevice


class FakeEnumerator:
    def __init__(self, displays=None, audio=None):
        self._displays = displays if displays is not None else [
            DisplayDevice(
                id=1,
                device_id="MONITOR\\GSM5B08\\4&1",
                name="\\\\.\\DISPLAY1",
                device_path="\\\\.\\DISPLAY1",
                resolution="2560x1440",
                is_primary=True,
                display_name="LG ULTRAGEAR",
                refresh_rate=144,
            )
        ]
        self._audio = audio if audio is not None else [
            AudioDevice(id="{0.0.0.00000000}.{abc}", index="0", name="Speakers", is_default=True),
            AudioDevice(id="{0.0.0.00000000}.{def}", index="1", name="Headset", is_default=False),
        ]

    async def displays(self):
        return list(self._displays)

    async def audio_devices(self):
        return list(self._audio)


@pytest.fixture
def settings(tmp_path):
    return Settings(
        environment="test",
        paths=PathSettings(root_dir=tmp_path, tools_dir="Tools", export_dir="exports"),
    )


@pytest.fixture
def enumerator():
    return FakeEnumerator()


@pytest.fixture
def app(settings, enumerator):
    return create_app(settings, enumerator=enumerator)


@pytest.fixture
def transport(app):
    return ASGITransport(app=app)
