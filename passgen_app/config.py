import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from passgen.errors import ConfigError
from passgen.pool import Pool

DEFAULT_LENGTH = 16
DEFAULT_COUNT = 1
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Settings:
    charset: str = Pool.DEFAULT
    length: int = DEFAULT_LENGTH
    count: int = DEFAULT_COUNT
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} musi być liczbą całkowitą, otrzymano {raw!r}") from None


def _log_level_env(name: str, default: str) -> str:
    level = (os.getenv(name, "").strip() or default).upper()
    if level not in LOG_LEVELS:
        raise ConfigError(f"{name} musi być jednym z {', '.join(LOG_LEVELS)}, otrzymano {level!r}")
    return level


def load_settings() -> Settings:
    """Wczytuje .env (jeśli jest) i zmienne PASSGEN_*."""
    load_dotenv()
    return Settings(
        charset=os.getenv("PASSGEN_CHARSET") or Pool.DEFAULT,
        length=_int_env("PASSGEN_LENGTH", DEFAULT_LENGTH),
        count=_int_env("PASSGEN_COUNT", DEFAULT_COUNT),
        log_level=_log_level_env("PASSGEN_LOG_LEVEL", DEFAULT_LOG_LEVEL),
    )
