import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_CORS_ORIGINS = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:5174",
    "http://127.0.0.1:5174",
]


def _split_origins(value: Optional[str]) -> List[str]:
    if not value:
        return list(DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in value.split(",") if origin.strip()]


@dataclass
class Settings:
    log_level: str = "INFO"
    log_dir: Optional[str] = None
    max_workers: int = 8
    cors_origins: List[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            log_level=os.getenv("POKER_STATS_LOG_LEVEL", "INFO").upper(),
            log_dir=os.getenv("POKER_STATS_LOG_DIR") or None,
            max_workers=max(1, int(os.getenv("POKER_STATS_MAX_WORKERS", "8"))),
            cors_origins=_split_origins(os.getenv("POKER_STATS_CORS_ORIGINS")),
        )


settings = Settings.from_env()
