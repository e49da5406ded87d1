"""
Runtime configuration, read from the environment.

main.py calls load_dotenv() before importing this module, so values in a
local .env file apply too:
  SESSION_TTL_SECS=30
  REAPER_INTERVAL_SECS=86400
  CORS_ORIGINS=http://localhost:5173
"""

import math
import os


def _env_seconds(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number of seconds, got {raw!r}") from None
    if not math.isfinite(value):
        raise ValueError(f"{name} must be a finite number of seconds, got {raw!r}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {raw!r}")
    return value


# Deliberately short so expiry is easy to watch in a demo.
SESSION_TTL_SECS = _env_seconds("SESSION_TTL_SECS", 30)
REAPER_INTERVAL_SECS = _env_seconds("REAPER_INTERVAL_SECS", 24 * 60 * 60)
if REAPER_INTERVAL_SECS == 0:
    raise ValueError("REAPER_INTERVAL_SECS must be greater than zero")

SESSION_COOKIE_NAME = "session_id"

CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("CORS_ORIGINS", "http://localhost:5173").split(",")
    if origin.strip()
]

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
HOST = os.environ.get("HOST", "127.0.0.1")
PORT = int(os.environ.get("PORT", "3030"))
