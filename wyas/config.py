from __future__ import annotations

import logging
import os

from wyas.errors import WyasConfigError

# Defaults
_DEFAULT_LOG_LEVEL = "WARNING"
_DEFAULT_REPL_HOST = "127.0.0.1"
_DEFAULT_REPL_PORT = 8765


def get_log_level() -> int:
    raw = os.environ.get("WYAS_LOG_LEVEL", "").strip().upper() or _DEFAULT_LOG_LEVEL
    level = getattr(logging, raw, None)
    if not isinstance(level, int):
        raise WyasConfigError(f"WYAS_LOG_LEVEL must be a logging level name, got {raw!r}")
    return level


def get_repl_address() -> tuple[str, int]:
    host = os.environ.get("WYAS_REPL_HOST", "").strip() or _DEFAULT_REPL_HOST
    raw_port = os.environ.get("WYAS_REPL_PORT", "").strip()
    if not raw_port:
        return host, _DEFAULT_REPL_PORT
    try:
        port = int(raw_port)
    except ValueError:
        raise WyasConfigError(f"WYAS_REPL_PORT must be an integer, got {raw_port!r}") from None
    return host, port
