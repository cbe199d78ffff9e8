"""
Application configuration management.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Command line settings loaded from environment variables.

    The formatting functions never read these; they only affect the CLI,
    plugin discovery and logging.
    """

    model_config = SettingsConfigDict(
        env_prefix="ASCII_PARSE_TREE_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = "WARNING"
    log_json: bool = True

    # Engines
    lark_parser: str = "lalr"
    tree_sitter_named_only: bool = True

    # Extra grammar plugins, scanned in addition to the bundled ones
    plugins_dir: Optional[str] = None


# Global settings instance
settings = Settings()
