# src/wf_storage_server/config/settings.py
from __future__ import annotations

import os
import tempfile
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Load .env file if present
BASE_DIR = Path(__file__).resolve().parent.parent
load_dotenv(BASE_DIR / ".env")

SERVICE_ID = "workflowstorageservice"
SERVICE_NAME = "Workflow Storage Service"
SERVICE_VERSION = "1.0.0"


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"true", "1", "yes"}


class Settings(BaseModel):
    """
    Resolved service configuration.

    Built once per process from the environment and handed to the components
    that need it; nothing below the API layer reads os.environ directly.
    """

    # --- Core Server Config ---
    host: str = "0.0.0.0"
    port: int = 8094
    debug: bool = False
    log_level: str = "INFO"
    json_logs: bool = False

    # --- Object store ---
    storage_backend: str = Field("s3", description="s3 | memory")
    bucket: str = "px-semantic"
    endpoint_url: Optional[str] = None
    access_key: Optional[str] = None
    secret_key: Optional[str] = None
    region: str = "fsn1"
    uri_scheme: str = "s3"

    # --- Action defaults ---
    default_namespace: str = "default"
    default_format: str = "application/json"
    output_file_pattern: str = "{tmp}/{identifier}-result.dat"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            host=os.getenv("WFS_SERVER_HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8094")),
            debug=_env_bool("WFS_DEBUG", "false"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            json_logs=_env_bool("JSON_LOGGING", "false"),
            storage_backend=os.getenv("WFS_STORAGE_BACKEND", "s3").lower(),
            bucket=os.getenv("HETZNER_S3_BUCKET") or "px-semantic",
            endpoint_url=os.getenv("HETZNER_S3_URL") or None,
            access_key=os.getenv("HETZNER_S3_ACCESS_KEY") or None,
            secret_key=os.getenv("HETZNER_S3_SECRET_KEY") or None,
            region=os.getenv("HETZNER_S3_REGION", "fsn1"),
            output_file_pattern=os.getenv("WFS_OUTPUT_FILE_PATTERN", "{tmp}/{identifier}-result.dat"),
        )

    def default_output_path(self, identifier: str) -> Path:
        # identifier is used verbatim; "../" segments can leave the temp dir.
        return Path(self.output_file_pattern.format(tmp=tempfile.gettempdir(), identifier=identifier))


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()


__all__ = ["Settings", "get_settings", "SERVICE_ID", "SERVICE_NAME", "SERVICE_VERSION"]
