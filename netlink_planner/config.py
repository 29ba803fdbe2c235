from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent / ".env")

_BUNDLED_CATALOG = Path(__file__).resolve().parent / "catalog" / "data" / "media.csv"

MAX_RESULT_LIMIT = 5

_DEFAULT_CORS_ORIGINS = "http://localhost:5173,http://localhost:3000"


def _result_limit_from_env() -> int:
    try:
        value = int(os.getenv("NETLINK_RESULT_LIMIT", str(MAX_RESULT_LIMIT)))
    except ValueError:
        return MAX_RESULT_LIMIT
    return max(1, min(MAX_RESULT_LIMIT, value))


def _cors_origins_from_env() -> tuple[str, ...]:
    raw = os.getenv("NETLINK_CORS_ORIGINS", _DEFAULT_CORS_ORIGINS)
    return tuple(o.strip() for o in raw.split(",") if o.strip())


@dataclass(frozen=True)
class AppConfig:
    catalog_path: Path = Path(os.getenv("NETLINK_CATALOG_PATH", str(_BUNDLED_CATALOG)))
    result_limit: int = _result_limit_from_env()
    weighting: str = os.getenv("NETLINK_WEIGHTING", "legacy").strip().lower()
    cors_origins: tuple[str, ...] = field(default_factory=_cors_origins_from_env)
    service_name: str = "NetLink Planner API"
    version: str = "1.0.0"


DEFAULT_APP_CONFIG = AppConfig()
