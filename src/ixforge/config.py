"""
Process settings from the environment, after loading an optional ``.env``.

    IXFORGE_HOST       bind address (default 0.0.0.0)
    IXFORGE_PORT       bind port (default 3000)
    IXFORGE_LOG_LEVEL  logging level name (default INFO)
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"


def load_settings(env_file: str | None = None) -> Settings:
    """
    Build Settings from the environment. Variables already set win over
    values from the ``.env`` file.

    Raises:
        ValueError: IXFORGE_PORT is not an integer.
    """
    load_dotenv(env_file or find_dotenv(usecwd=True), override=False)
    defaults = Settings()
    port = os.getenv("IXFORGE_PORT", str(defaults.port))
    try:
        port_number = int(port)
    except ValueError:
        raise ValueError(f"IXFORGE_PORT must be an integer, got {port!r}") from None
    return Settings(
        host=os.getenv("IXFORGE_HOST", defaults.host),
        port=port_number,
        log_level=os.getenv("IXFORGE_LOG_LEVEL", defaults.log_level).upper(),
    )
