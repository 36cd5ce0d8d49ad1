"""Runtime settings read from ``PRONUNCIATION_*`` environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .utils.logging_config import LOG_LEVEL_ENV

SHARE_ENV = "PRONUNCIATION_SHARE"
SERVER_NAME_ENV = "PRONUNCIATION_SERVER_NAME"
SERVER_PORT_ENV = "PRONUNCIATION_SERVER_PORT"
ADVANCE_DELAY_ENV = "PRONUNCIATION_ADVANCE_DELAY"

DEFAULT_SERVER_NAME = "0.0.0.0"
DEFAULT_SERVER_PORT = 7860
DEFAULT_ADVANCE_DELAY = 2.0

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    log_level: Optional[str] = None
    share: bool = False
    server_name: str = DEFAULT_SERVER_NAME
    server_port: int = DEFAULT_SERVER_PORT
    advance_delay: float = DEFAULT_ADVANCE_DELAY


def _parse_flag(value: Optional[str]) -> bool:
    if not value:
        return False
    return str(value).strip().lower() in _TRUTHY


def _parse_port(value: Optional[str]) -> int:
    if value is None:
        return DEFAULT_SERVER_PORT
    try:
        port = int(str(value).strip())
    except (TypeError, ValueError):
        return DEFAULT_SERVER_PORT
    if not 0 < port < 65536:
        return DEFAULT_SERVER_PORT
    return port


def _parse_delay(value: Optional[str]) -> float:
    if value is None:
        return DEFAULT_ADVANCE_DELAY
    try:
        delay = float(str(value).strip())
    except (TypeError, ValueError):
        return DEFAULT_ADVANCE_DELAY
    if delay < 0:
        return DEFAULT_ADVANCE_DELAY
    return delay


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build :class:`Settings` from ``environ`` (defaults to ``os.environ``).

    Unparseable or out-of-range values fall back to the defaults instead of
    failing start-up.
    """

    env = os.environ if environ is None else environ
    server_name = (env.get(SERVER_NAME_ENV) or "").strip() or DEFAULT_SERVER_NAME
    return Settings(
        log_level=env.get(LOG_LEVEL_ENV) or None,
        share=_parse_flag(env.get(SHARE_ENV)),
        server_name=server_name,
        server_port=_parse_port(env.get(SERVER_PORT_ENV)),
        advance_delay=_parse_delay(env.get(ADVANCE_DELAY_ENV)),
    )


__all__ = [
    "Settings",
    "load_settings",
    "ADVANCE_DELAY_ENV",
    "SERVER_NAME_ENV",
    "SERVER_PORT_ENV",
    "SHARE_ENV",
]
