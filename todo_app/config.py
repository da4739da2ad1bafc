# todo_app/config.py

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 6982


def _env_bool(name, default=False):
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name, default):
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def default_config_dir() -> Path:
    raw = os.getenv("TODO_CONFIG_DIR")
    if raw:
        return Path(raw).expanduser()
    xdg = os.getenv("XDG_CONFIG_HOME")
    base = Path(xdg) if xdg else Path.home() / ".config"
    return base / "todo"


@dataclass(frozen=True)
class Config:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = "INFO"
    reject_empty_names: bool = False
    cors_origins: str = "*"
    api_url: str = f"http://127.0.0.1:{DEFAULT_PORT}"

    @staticmethod
    def from_env() -> "Config":
        port = _env_int("TODO_PORT", DEFAULT_PORT)
        return Config(
            host=os.getenv("TODO_HOST", DEFAULT_HOST),
            port=port,
            log_level=os.getenv("TODO_LOG_LEVEL", "INFO").upper(),
            reject_empty_names=_env_bool("TODO_REJECT_EMPTY_NAMES"),
            cors_origins=os.getenv("TODO_CORS_ORIGINS", "*"),
            api_url=os.getenv("TODO_API_URL", f"http://127.0.0.1:{port}"),
        )
