import os
from dataclasses import dataclass

from dotenv import load_dotenv

from marvelapi.errors import ConfigError

load_dotenv()

API_BASE = "https://gateway.marvel.com:443/v1/public"
DEFAULT_TIMEOUT = 10.0
DEFAULT_MAX_WORKERS = 4


def positive_number(name: str, value, cast):
    """Coerce with `cast`; anything that is not a number above zero is a ConfigError."""
    if isinstance(value, bool):
        raise ConfigError(f"{name} must be a number, got {value!r}")
    try:
        number = cast(value)
    except (TypeError, ValueError):
        raise ConfigError(f"{name} must be a number, got {value!r}")
    if not number > 0:
        raise ConfigError(f"{name} must be greater than zero, got {value!r}")
    return number


def _env_number(name: str, default, cast):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return positive_number(name, raw, cast)


# one lookup per setting, so a caller can skip the ones it was handed explicitly

def env_public_key() -> str | None:
    return os.getenv("MARVEL_PUBLIC_KEY")


def env_private_key() -> str | None:
    return os.getenv("MARVEL_PRIVATE_KEY")


def env_api_base() -> str:
    return os.getenv("MARVEL_API_BASE") or API_BASE


def env_timeout() -> float:
    return _env_number("MARVEL_TIMEOUT", DEFAULT_TIMEOUT, float)


def env_max_workers() -> int:
    return _env_number("MARVEL_MAX_WORKERS", DEFAULT_MAX_WORKERS, int)


@dataclass(frozen=True)
class Settings:
    public_key: str | None
    private_key: str | None
    api_base: str = API_BASE
    timeout: float = DEFAULT_TIMEOUT
    max_workers: int = DEFAULT_MAX_WORKERS

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            public_key=env_public_key(),
            private_key=env_private_key(),
            api_base=env_api_base(),
            timeout=env_timeout(),
            max_workers=env_max_workers(),
        )
