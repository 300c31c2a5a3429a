from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

DEFAULT_SECRET_KEY = "Change-me-in-env-2024"


@dataclass(frozen=True)
class Settings:
    jwt_secret_key: str = DEFAULT_SECRET_KEY
    jwt_issuer: str = "simplejwt"
    jwt_access_token_ttl_seconds: int = 3600
    jwt_allowed_algorithms: tuple[str, ...] = ()
    api_auth_enabled: bool = True
    api_auth_username: str = "analyst"
    api_auth_password: str = "change-me"


def _read_dotenv(env_path: Path) -> dict[str, str]:
    values: dict[str, str] = {}
    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip().removeprefix("export ").strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = (part.strip() for part in line.split("=", 1))
        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]
        if key:
            values[key] = value
    return values


def _load_dotenv_if_present() -> None:
    """Apply the first .env found (cwd, then project root) without overriding the environment."""
    for env_path in (Path.cwd() / ".env", Path(__file__).resolve().parents[3] / ".env"):
        if env_path.exists():
            for key, value in _read_dotenv(env_path).items():
                os.environ.setdefault(key, value)
            return


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off"}:
        return False
    return default


def _env_csv(name: str) -> tuple[str, ...]:
    raw = os.getenv(name, "")
    return tuple(item.strip() for item in raw.split(",") if item.strip())


def get_settings() -> Settings:
    _load_dotenv_if_present()
    return Settings(
        jwt_secret_key=os.getenv("JWT_SECRET_KEY", DEFAULT_SECRET_KEY),
        jwt_issuer=os.getenv("JWT_ISSUER", "simplejwt"),
        jwt_access_token_ttl_seconds=int(os.getenv("JWT_ACCESS_TOKEN_TTL_SECONDS", "3600")),
        jwt_allowed_algorithms=_env_csv("JWT_ALLOWED_ALGORITHMS"),
        api_auth_enabled=_env_bool("API_AUTH_ENABLED", True),
        api_auth_username=os.getenv("API_AUTH_USERNAME", "analyst"),
        api_auth_password=os.getenv("API_AUTH_PASSWORD", "change-me"),
    )


get_settings = lru_cache(maxsize=1)(get_settings)


def clear_settings_cache() -> None:
    get_settings.cache_clear()  # type: ignore[attr-defined]
