"""Application configuration using pydantic settings with structured sections."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DIR = Path(__file__).resolve().parent.parent


class ServerSettings(BaseModel):
    host: str = "127.0.0.1"
    port: int = 3000
    reload: bool = False


class PathSettings(BaseModel):
    root_dir: Path = Field(default=Path("."))
    tools_dir: Path = Field(default=Path("Tools"))
    export_dir: Path = Field(default=Path("exports"))
    static_dir: Path = Field(default=PACKAGE_DIR / "web" / "static")
    template_dir: Path = Field(default=PACKAGE_DIR / "web" / "templates")


class DeviceSettings(BaseModel):
    command_timeout: float = Field(default=10.0, gt=0)
    powershell: str = "powershell.exe"


class LoggingSettings(BaseModel):
    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class Settings(BaseSettings):
    """Top-level application settings with nested sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
    )

    environment: Literal["development", "production", "test"] = "development"
    debug: bool = False
    project_name: str = "Sunshine Script Builder"
    api_prefix: str = "/api"
    default_project_name: str = "Demo Project"

    server: ServerSettings = ServerSettings()
    paths: PathSettings = PathSettings()
    devices: DeviceSettings = DeviceSettings()
    logging: LoggingSettings = LoggingSettings()

    def _resolve_path(self, path: Path) -> Path:
        if path.is_absolute():
            return path
        return (self.paths.root_dir / path).resolve()

    @property
    def host(self) -> str:
        return self.server.host

    @property
    def port(self) -> int:
        return self.server.port

    @property
    def tools_path(self) -> Path:
        return self._resolve_path(self.paths.tools_dir)

    @property
    def export_path(self) -> Path:
        return self._resolve_path(self.paths.export_dir)


@lru_cache()
def get_settings() -> Settings:
    return Settings()
