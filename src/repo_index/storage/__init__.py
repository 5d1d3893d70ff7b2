"""Key-value object storage backends."""

from typing import Optional

from repo_index.core.config import Settings
from repo_index.core.exceptions import ValidationError

from .base import Storage
from .filesystem import FileSystemStorage
from .key import Key
from .memory import InMemoryStorage
from .s3 import S3ClientConfig, S3Storage, create_s3_client


def create_storage(
    config: Settings,
    access_key_id: Optional[str] = None,
    secret_access_key: Optional[str] = None,
    session_token: Optional[str] = None,
) -> Storage:
    """Create the storage backend selected by configuration.

    Args:
        config: Application settings
        access_key_id: AWS access key ID (s3 only)
        secret_access_key: AWS secret access key (s3 only)
        session_token: AWS session token (s3 only)

    Returns:
        Storage backend instance

    Raises:
        ValidationError: If the configuration is incomplete
    """
    if config.storage_type == "memory":
        return InMemoryStorage()

    elif config.storage_type == "fs":
        return FileSystemStorage(config.base_path)

    elif config.storage_type == "s3":
        if not config.s3_bucket:
            raise ValidationError("S3 storage requires a bucket name")
        return S3Storage(
            bucket=config.s3_bucket,
            key_prefix=config.s3_key_prefix,
            config=S3ClientConfig(
                access_key_id=access_key_id,
                secret_access_key=secret_access_key,
                session_token=session_token,
                region_name=config.s3_region_name,
                endpoint_url=config.s3_endpoint_url,
                aws_profile=config.s3_aws_profile,
            ),
        )

    else:
        raise ValidationError(
            f"Invalid storage type: {config.storage_type}. Must be 'memory', "
            f"'fs', or 's3'"
        )


__all__ = [
    "FileSystemStorage",
    "InMemoryStorage",
    "Key",
    "S3ClientConfig",
    "S3Storage",
    "Storage",
    "create_s3_client",
    "create_storage",
]
