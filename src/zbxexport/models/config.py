"""Configuration models."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Export settings loaded from environment variables and ``.env``."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Zabbix API
    user: str = Field(default="", alias="ZBX_USER")
    password: str = Field(default="", alias="ZBX_PASSWD")
    url: str = Field(default="", alias="ZBX_URL")
    timeout: float = Field(default=30.0, alias="ZBX_TIMEOUT")
    verify_ssl: bool = Field(default=True, alias="ZBX_VERIFY_SSL")

    # Export
    export_directory: Path = Field(default=Path("."), alias="EXPORT_DIRECTORY")
    populate_interfaces: bool = Field(default=True, alias="ZBX_POPULATE_INTERFACES")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @property
    def hosts_directory(self) -> Path:
        """Directory holding one subdirectory per exported host."""
        return self.export_directory / "hosts"
