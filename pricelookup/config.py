# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Application settings read from the environment."""

import os
from dataclasses import dataclass
from functools import lru_cache

# Cache lifetime of a looked up price (in seconds)
DEFAULT_CACHE_TTL_SECONDS = 5 * 60

# Maximum days to step back from the first business date looking for a rate
DEFAULT_MAX_RATE_LOOKBACK_DAYS = 10


@dataclass(frozen=True)
class Settings:
    """Runtime configuration."""

    database_url: str = "sqlite:///./pricelookup.db"
    cache_backend: str = "memory"
    cache_ttl_seconds: int = DEFAULT_CACHE_TTL_SECONDS
    max_rate_lookback_days: int = DEFAULT_MAX_RATE_LOOKBACK_DAYS
    fetch_timeout_seconds: float = 10.0
    user_agent: str = "pricelookup/0.1"
    exchange_timezone: str = "Europe/Budapest"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables, falling back to defaults."""
        defaults = cls()
        return cls(
            database_url=os.environ.get("DATABASE_URL", defaults.database_url),
            cache_backend=os.environ.get("CACHE_BACKEND", defaults.cache_backend).lower(),
            cache_ttl_seconds=int(
                os.environ.get("CACHE_TTL_SECONDS", defaults.cache_ttl_seconds)
            ),
            max_rate_lookback_days=int(
                os.environ.get("MAX_RATE_LOOKBACK_DAYS", defaults.max_rate_lookback_days)
            ),
            fetch_timeout_seconds=float(
                os.environ.get("FETCH_TIMEOUT_SECONDS", defaults.fetch_timeout_seconds)
            ),
            user_agent=os.environ.get("USER_AGENT", defaults.user_agent),
            exchange_timezone=os.environ.get(
                "EXCHANGE_TIMEZONE", defaults.exchange_timezone
            ),
            log_level=os.environ.get("LOG_LEVEL", defaults.log_level).upper(),
        )


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings."""
    return Settings.from_env()
