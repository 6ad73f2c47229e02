"""Library configuration from environment variables."""

from __future__ import annotations

import logging

from pydantic_settings import BaseSettings

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


class Settings(BaseSettings):
    svgtikz_log_level: str = "warning"

    # lxml parser limits
    svgtikz_huge_tree: bool = False
    svgtikz_resolve_entities: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()


def resolve_log_level(name: str) -> int:
    """Map a level name like "debug" to its logging constant."""
    level = getattr(logging, name.upper(), None)
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(config: Settings | None = None) -> int:
    """Install a root handler at the configured level and return that level."""
    config = config or settings
    level = resolve_log_level(config.svgtikz_log_level)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    return level
