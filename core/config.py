# =============================================================================
# core/config.py  -  Runtime configuration
# =============================================================================
#
# All settings come from environment variables (the entry points load a .env
# file first with python-dotenv).  ServerConfig is built ONCE at startup and
# handed to the invoker; nothing reads os.environ after that.
#
#   COCKTAILDB_BASE_URL   API root, without a trailing /search.php
#   COCKTAILDB_TIMEOUT    seconds to wait for CocktailDB (default 10)
#   LOG_LEVEL             stderr log level (default INFO)
# =============================================================================

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_BASE_URL = "https://www.thecocktaildb.com/api/json/v1/1"
DEFAULT_TIMEOUT_SEC = 10.0
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class ServerConfig:
    base_url: str = DEFAULT_BASE_URL
    timeout_sec: float = DEFAULT_TIMEOUT_SEC
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def search_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/search.php"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ServerConfig":
        """Build a config from environment variables.

        Raises ValueError when COCKTAILDB_TIMEOUT is not a positive number.
        """
        env = os.environ if environ is None else environ

        raw_timeout = env.get("COCKTAILDB_TIMEOUT", "").strip()
        timeout = DEFAULT_TIMEOUT_SEC
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                raise ValueError(f"COCKTAILDB_TIMEOUT must be a number, got {raw_timeout!r}") from None
            if timeout <= 0:
                raise ValueError(f"COCKTAILDB_TIMEOUT must be positive, got {raw_timeout!r}")

        return cls(
            base_url=env.get("COCKTAILDB_BASE_URL", "").strip() or DEFAULT_BASE_URL,
            timeout_sec=timeout,
            log_level=(env.get("LOG_LEVEL", "").strip() or DEFAULT_LOG_LEVEL).upper(),
        )
