from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Callable, TypeVar

from dotenv import load_dotenv

DEFAULT_API_BASE_URL = "https://jsonplaceholder.typicode.com"
DEFAULT_USERS_PATH = "/users"

TRUTHY = frozenset({"1", "true", "yes", "on"})

N = TypeVar("N", int, float)


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class ClientConfig:
    api_base_url: str
    users_path: str = DEFAULT_USERS_PATH
    timeout_seconds: float = 10.0
    page_size: int = 5
    verify_ssl: bool = True


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in TRUTHY


def _env_number(name: str, default: N, parse: Callable[[str], N], *, minimum: N, inclusive: bool) -> N:
    """Read a numeric setting and check it against its lower bound."""
    raw = os.getenv(name)
    if raw is None:
        value = default
    else:
        try:
            value = parse(raw)
        except ValueError as exc:
            kind = "an integer" if parse is int else "a number"
            raise ConfigError(f"Invalid {name}: expected {kind}, got {raw!r}") from exc
    in_range = value >= minimum if inclusive else value > minimum
    if not in_range:
        bound = ">=" if inclusive else ">"
        raise ConfigError(f"Invalid {name}: expected {bound} {minimum}, got {value}")
    return value


def _users_path(raw: str | None) -> str:
    path = (raw or DEFAULT_USERS_PATH).strip().rstrip("/")
    if not path:
        return DEFAULT_USERS_PATH
    return path if path.startswith("/") else f"/{path}"


def load_config(env_file: str | None = None) -> ClientConfig:
    """Load config from environment with optional .env override."""
    load_dotenv(env_file)

    api_base_url = (os.getenv("USERDESK_API_BASE_URL") or DEFAULT_API_BASE_URL).strip().rstrip("/")
    if not api_base_url:
        raise ConfigError("Invalid USERDESK_API_BASE_URL: must not be empty")

    return ClientConfig(
        api_base_url=api_base_url,
        users_path=_users_path(os.getenv("USERDESK_USERS_PATH")),
        timeout_seconds=_env_number("USERDESK_TIMEOUT_SECONDS", 10.0, float, minimum=0.0, inclusive=False),
        page_size=_env_number("USERDESK_PAGE_SIZE", 5, int, minimum=1, inclusive=True),
        verify_ssl=_env_flag("USERDESK_VERIFY_SSL", True),
    )
