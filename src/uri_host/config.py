"""
Configuration management for the uri-host library.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class IDNAConfig(BaseSettings):
    """Configuration for IDNA label processing."""

    transitional: bool = Field(
        default=False,
        description=(
            "Use UTS #46 transitional processing (maps deviation characters "
            "such as 'ß' instead of keeping them)"
        ),
    )

    model_config = SettingsConfigDict(env_prefix="URI_HOST_IDNA_")


class PublicSuffixConfig(BaseSettings):
    """Configuration for the default public suffix rule source."""

    source_path: Optional[Path] = Field(
        default=None,
        description=(
            "Path to a public_suffix_list.dat file. "
            "Defaults to the list bundled with publicsuffixlist."
        ),
    )
    only_icann: bool = Field(
        default=True, description="Ignore rules from the PRIVATE DOMAINS section"
    )

    model_config = SettingsConfigDict(env_prefix="URI_HOST_PSL_")


class Config(BaseSettings):
    """Main configuration."""

    # Sub-configs
    idna: IDNAConfig = Field(default_factory=IDNAConfig)
    public_suffix: PublicSuffixConfig = Field(default_factory=PublicSuffixConfig)

    # Global settings
    log_level: str = Field(default="INFO", description="Logging level")

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_nested_delimiter="__"
    )


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def reset_config() -> None:
    """Reset the global configuration (mainly for testing)."""
    global _config
    _config = None
