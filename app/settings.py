# app/settings.py
# Role: Runtime configuration read from the environment (and an optional .env file).

import os
from typing import List

from dotenv import load_dotenv

load_dotenv()


def _env_list(name: str, default: str) -> List[str]:
    raw = os.getenv(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return int(raw)


# Allowed CORS origins ("*" = any)
CORS_ORIGINS: List[str] = _env_list("CORS_ORIGINS", "*")

# Log level for the "ledger" logger tree (name or number)
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

# Bind address when running main.py directly
HOST: str = os.getenv("HOST", "0.0.0.0")
PORT: int = _env_int("PORT", 8000)

# Default page size for GET /transactions/
DEFAULT_PAGE_LIMIT: int = _env_int("DEFAULT_PAGE_LIMIT", 100)
