"""Application configuration and environment settings"""
from pathlib import Path
from typing import Literal, Optional, Tuple, Type

from pydantic import AliasChoices, Field
from pydantic_settings import (
    BaseSettings,
    JsonConfigSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

# Template shipped with the package, used when TEMPLATE_PATH is not set
DEFAULT_TEMPLATE_PATH = Path(__file__).parent / "template.html"

class Settings(BaseSettings):
    """Application settings loaded from the environment and appsettings.json"""
    # Required at run time, validated by the report generator
    DATABASE_PATH: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("DATABASE_PATH", "DatabasePath"),
        description="Path to the media player history database"
    )

    # Optional settings with defaults
    TEMPLATE_PATH: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("TEMPLATE_PATH", "TemplatePath"),
        description="HTML template with {{placeholder}} tokens"
    )
    OUTPUT_DIR: str = Field(".", description="Directory the report is written to")
    LOG_LEVEL: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = Field(
        "INFO", description="Logging level for the CLI"
    )

    @property
    def template_file(self) -> Path:
        """Resolve the template path, falling back to the bundled template"""
        if self.TEMPLATE_PATH:
            return Path(self.TEMPLATE_PATH)
        return DEFAULT_TEMPLATE_PATH

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8-sig',
        json_file='appsettings.json',
        json_file_encoding='utf-8-sig',
        case_sensitive=True,
        extra='ignore'
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        # appsettings.json sits below the environment so env vars can override it
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            JsonConfigSettingsSource(settings_cls),
            file_secret_settings,
        )

def get_settings() -> Settings:
    """Load settings from the environment, .env and appsettings.json

    Raises:
        ValueError: If appsettings.json is malformed or a value is invalid
    """
    return Settings()

# Constants
MIN_REPORT_YEAR = 2025
MAX_REPORT_YEAR = 9999
