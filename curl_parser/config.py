"""Configuration for the curl parser front ends."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Front-end settings, read from ``CURL_PARSER_*`` variables or ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix="CURL_PARSER_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Web inspector
    host: str = Field(default="0.0.0.0", description="Address the web inspector binds to")
    port: int = Field(default=7700, description="Port the web inspector listens on")
    debug: bool = Field(default=False, description="Run Flask in debug mode")

    # Output
    pretty_json: bool = Field(default=False, description="Indent JSON output")

    # Logging
    log_level: str = Field(default="INFO", description="Log level")


def get_settings() -> Settings:
    return Settings()
