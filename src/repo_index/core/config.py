"""Configuration management for repo-index."""

from typing import Literal, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    log_level: str = "INFO"
    log_json: bool = True
    otel_enabled: bool = False
    otel_service_name: str = "repo-index"

    storage_type: Literal["memory", "fs", "s3"] = "fs"
    base_path: str = "./repository"

    s3_bucket: Optional[str] = None
    s3_key_prefix: str = ""
    s3_region_name: str = "us-east-1"
    s3_endpoint_url: Optional[str] = None
    s3_aws_profile: Optional[str] = None

    host: str = "127.0.0.1"
    port: int = 8080

    model_config = {
        "env_prefix": "REPO_INDEX_",
        "case_sensitive": False,
    }


settings = Settings()
