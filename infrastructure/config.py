from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_PROJECT_ROOT = Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        # absolute so the working directory doesn't matter
        env_file=_PROJECT_ROOT / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="EventCodecs", validation_alias="APP_NAME")
    app_env: Literal["development", "staging", "production"] = Field(
        default="development",
        validation_alias="APP_ENV",
    )
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_dir: Path = Field(default=_PROJECT_ROOT / "logs", validation_alias="LOG_DIR")

    # Round-trip sample corpus, laid out as <sample_dir>/<family>/<name>.json
    sample_dir: Path = Field(
        default=_PROJECT_ROOT / "tests" / "fixtures" / "samples",
        validation_alias="SAMPLE_DIR",
    )


# Global settings instance
settings = Settings()
