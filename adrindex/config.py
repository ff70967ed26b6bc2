"""Application configuration loaded from environment variables."""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Global application settings."""

    adr_dir: str = Field(
        default="adr", description="Directory holding the ADR documents."
    )
    adr_extension: str = ".adoc"
    output_path: Optional[str] = Field(
        default=None, description="Write the rendered index here instead of stdout."
    )
    index_title: str = "Architecture Decision Records"

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def adr_dir_path(self) -> Path:
        return Path(self.adr_dir)

    @property
    def output_path_obj(self) -> Optional[Path]:
        if not self.output_path:
            return None
        return Path(self.output_path)


settings = Settings()
