"""Environment-driven configuration for debrepo.

Reads from a .env file and DEBREPO_* environment variables. The core
``Repository`` never reads this module itself; callers (the CLI) pass
the configured root in explicitly.
"""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class RepositoryConfig(BaseSettings):
    """Archive configuration with environment variable overrides.

    Examples
    --------
    Override via environment::

        export DEBREPO_ROOT_PATH=/srv/aptly
        export DEBREPO_LOG_LEVEL=DEBUG

    Or via .env file::

        DEBREPO_ROOT_PATH=/srv/aptly
        DEBREPO_DIR_MODE=493
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="DEBREPO_",
        env_file_encoding="utf-8",
    )

    # Logging
    log_level: str = "INFO"

    # Archive layout
    root_path: Path = Path(".debrepo")
    dir_mode: int = 0o755


# Module-level singleton — import as `from debrepo.config import config`
config = RepositoryConfig()
