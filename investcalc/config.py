"""Runtime settings for the calculator API."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

DEFAULT_CORS_ORIGINS: Tuple[str, ...] = (
    "http://localhost:3000",
    "http://localhost:5173",
)


def _int_setting(env: Mapping[str, str], name: str, default: int, minimum: int) -> int:
    raw = env.get(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < minimum:
        raise ValueError(f"{name} must be at least {minimum}, got {value}")
    return value


@dataclass(frozen=True)
class Settings:
    cors_origins: Tuple[str, ...] = DEFAULT_CORS_ORIGINS
    currency_symbol: str = "₹"
    decimal_scale: int = 0
    max_years: int = 100
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Read INVESTCALC_* variables, falling back to the defaults above.

        Raises ValueError naming the variable when a value is unusable.
        """
        env = os.environ if environ is None else environ

        origins = env.get("INVESTCALC_CORS_ORIGINS")
        cors_origins = (
            tuple(origin.strip() for origin in origins.split(",") if origin.strip())
            if origins
            else DEFAULT_CORS_ORIGINS
        )

        log_level = env.get("INVESTCALC_LOG_LEVEL", cls.log_level).strip().upper()
        # getLevelName maps known names to their int level, anything else to a string
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"INVESTCALC_LOG_LEVEL is not a logging level: {log_level!r}")

        return cls(
            cors_origins=cors_origins,
            currency_symbol=env.get("INVESTCALC_CURRENCY_SYMBOL", cls.currency_symbol),
            decimal_scale=_int_setting(env, "INVESTCALC_DECIMAL_SCALE", cls.decimal_scale, 0),
            max_years=_int_setting(env, "INVESTCALC_MAX_YEARS", cls.max_years, 1),
            log_level=log_level,
        )
