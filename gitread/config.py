"""Reader configuration — env-driven via pydantic-settings.

Reads from a .env file and GITREAD_* environment variables.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class ReaderConfig(BaseSettings):
    """Reader configuration with environment variable overrides.

    Examples
    --------
    Override via environment::

        export GITREAD_LOG_LEVEL=DEBUG
        export GITREAD_VERIFY_SIZE=true
        export GITREAD_CACHE_OBJECTS=true

    Or via .env file::

        GITREAD_MARKER_DIR=.git
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="GITREAD_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Name of the directory that marks a repository root
    marker_dir: str = ".git"

    log_level: str = "WARNING"

    # Integrity: compare the header's declared size with the body length
    verify_size: bool = False

    # Keep decoded objects per Repository instead of re-reading from disk
    cache_objects: bool = False


# Module-level singleton — import as `from gitread.config import config`
config = ReaderConfig()
