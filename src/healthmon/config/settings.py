import logging
import math
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    clock_interval_sec: float = 1.0
    refresh_interval_sec: float = 30.0
    sample_count: int = 24
    sample_interval_sec: float = 3600.0
    roster_size: int = 25
    display_limit: int = 12
    seed: Optional[int] = None
    log_level: str = "INFO"


def _env_number(name: str, default, cast, minimum):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = cast(raw)
    except ValueError:
        raise RuntimeError(f"Invalid {name}={raw!r}. Expected a {cast.__name__}.") from None
    if not math.isfinite(value):
        raise RuntimeError(f"Invalid {name}={raw!r}. Must be a finite number.")
    if value < minimum:
        raise RuntimeError(f"Invalid {name}={raw!r}. Must be >= {minimum}.")
    return value


def load_settings() -> Settings:
    """Read HEALTHMON_* settings from the environment (or a .env file)."""
    load_dotenv()

    seed_raw = os.getenv("HEALTHMON_SEED")
    seed = None
    if seed_raw:
        try:
            seed = int(seed_raw)
        except ValueError:
            raise RuntimeError(f"Invalid HEALTHMON_SEED={seed_raw!r}. Expected an int.") from None

    log_level = os.getenv("HEALTHMON_LOG_LEVEL", "INFO").upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise RuntimeError(f"Invalid HEALTHMON_LOG_LEVEL={log_level!r}.")

    return Settings(
        clock_interval_sec=_env_number("HEALTHMON_CLOCK_INTERVAL_SEC", 1.0, float, 0.1),
        refresh_interval_sec=_env_number("HEALTHMON_REFRESH_INTERVAL_SEC", 30.0, float, 0.1),
        sample_count=_env_number("HEALTHMON_SAMPLE_COUNT", 24, int, 0),
        sample_interval_sec=_env_number("HEALTHMON_SAMPLE_INTERVAL_SEC", 3600.0, float, 1),
        roster_size=_env_number("HEALTHMON_ROSTER_SIZE", 25, int, 0),
        display_limit=_env_number("HEALTHMON_DISPLAY_LIMIT", 12, int, 1),
        seed=seed,
        log_level=log_level,
    )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
