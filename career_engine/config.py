import os
from dataclasses import dataclass
from functools import lru_cache
from typing import List

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    max_upload_bytes: int = 5 * 1024 * 1024
    preview_chars: int = 1200
    cors_origins: tuple = ("*",)


def _origins(raw: str) -> List[str]:
    return [o.strip() for o in raw.split(",") if o.strip()] or ["*"]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings(
        log_level=os.getenv("CAREER_ENGINE_LOG_LEVEL", "INFO").upper(),
        max_upload_bytes=int(os.getenv("CAREER_ENGINE_MAX_UPLOAD_BYTES", str(5 * 1024 * 1024))),
        preview_chars=int(os.getenv("CAREER_ENGINE_PREVIEW_CHARS", "1200")),
        cors_origins=tuple(_origins(os.getenv("CAREER_ENGINE_CORS_ORIGINS", "*"))),
    )
