# backend/utils/settings.py

import os
from typing import List

from pydantic import BaseModel, Field

DEFAULT_MAX_UPLOAD_BYTES = 10_485_760  # 10 MiB


class Settings(BaseModel):
    host: str = "0.0.0.0"
    port: int = 3000
    cors_allowed_origins: List[str] = Field(default_factory=lambda: ["*"])
    max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Read settings from the environment (Render and docker set these).
        Unset variables fall back to the defaults above.
        """
        origins = os.getenv("CORS_ALLOWED_ORIGINS", "*")
        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "3000")),
            cors_allowed_origins=[o.strip() for o in origins.split(",") if o.strip()],
            max_upload_bytes=int(os.getenv("MAX_UPLOAD_BYTES", str(DEFAULT_MAX_UPLOAD_BYTES))),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
