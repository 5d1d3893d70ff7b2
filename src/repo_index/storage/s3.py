"""S3 storage backend.

Repository keys map onto object keys inside one bucket, optionally nested
under a fixed key prefix so several repositories can share a bucket::

    bucket "packages", key prefix "pypi"
    Key("abc", "abc-0.1.whl")  <->  s3://packages/pypi/abc/abc-0.1.whl

Listing enumerates the whole prefix through the ``list_objects_v2``
paginator; grouping into index entries happens later, in ``repo_index.listing``.
"""

from typing import Any, Dict, Iterator, Optional

import boto3
from botocore.exceptions import ClientError
from pydantic import BaseModel, ConfigDict, Field

from repo_index.core import get_logger

from .key import DELIMITER, Key

logger = get_logger(__name__)

_MISSING_CODES = ("404", "NoSuchKey")


class S3ClientConfig(BaseModel):
    """Connection settings for the bucket holding repository objects.

    A named profile takes precedence over explicit credentials; with neither,
    boto3 resolves credentials from its default chain. ``endpoint_url``
    points the client at MinIO or another S3-compatible server.
    """

    model_config = ConfigDict(extra="forbid")

    access_key_id: Optional[str] = Field(None, description="AWS access key ID")
    secret_access_key: Optional[str] = Field(None, description="AWS secret access key")
    session_token: Optional[str] = Field(None, description="AWS session token")
    region_name: str = Field("us-east-1", description="AWS region name")
    endpoint_url: Optional[str] = Field(None, description="S3-compatible endpoint URL")
    aws_profile: Optional[str] = Field(None, description="AWS CLI profile name")

    def client_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for ``boto3.client("s3", ...)``."""
        kwargs: Dict[str, Any] = {"region_name": self.region_name}
        if self.endpoint_url:
            kwargs["endpoint_url"] = self.endpoint_url
        if not self.aws_profile and self.access_key_id and self.secret_access_key:
            kwargs["aws_access_key_id"] = self.access_key_id
            kwargs["aws_secret_access_key"] = self.secret_access_key
            if self.session_token:
                kwargs["aws_session_token"] = self.session_token
        return kwargs


def create_s3_client(config: S3ClientConfig):
    """Create a boto3 S3 client for ``config``."""
    if config.aws_profile:
        session = boto3.Session(profile_name=config.aws_profile)
        logger.info("S3 client created with profile", profile=config.aws_profile)
        return session.client("s3", **config.client_kwargs())  # type: ignore

    logger.info(
        "S3 client created",
        region=config.region_name,
        endpoint=config.endpoint_url,
        explicit_credentials=bool(config.access_key_id),
    )
    return boto3.client("s3", **config.client_kwargs())  # type: ignore


class S3Storage:
    """Storage backend keeping objects in an S3 bucket."""

    def __init__(self, bucket: str, config: S3ClientConfig, key_prefix: str = ""):
        """Initialize S3 storage.

        Args:
            bucket: Bucket holding the repository objects
            config: S3 connection settings
            key_prefix: Object key prefix under which repository keys live
        """
        self.bucket = bucket
        self.config = config
        self.root = Key.from_path(key_prefix)
        self.name = f"s3://{bucket}/{self.root.string()}"
        self._client = None

    @property
    def client(self):
        """S3 client, created on first use."""
        if self._client is None:
            self._client = create_s3_client(self.config)
        return self._client

    def _object_key(self, key: Key) -> str:
        return Key(self.root.segments + key.segments).string()

    def save(self, key: Key, content: bytes) -> None:
        self.client.put_object(
            Bucket=self.bucket, Key=self._object_key(key), Body=content
        )
        logger.debug("Object saved", bucket=self.bucket, key=key.string())

    def exists(self, key: Key) -> bool:
        try:
            self.client.head_object(Bucket=self.bucket, Key=self._object_key(key))
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") in _MISSING_CODES:
                return False
            raise
        return True

    def list(self, prefix: Key) -> Iterator[Key]:
        """List every object under ``prefix``.

        The S3 prefix ends with the delimiter, so ``abc`` never matches
        objects under ``abcd/``.
        """
        search = self._object_key(prefix)
        if search:
            search += DELIMITER

        paginator = self.client.get_paginator("list_objects_v2")
        for page in paginator.paginate(Bucket=self.bucket, Prefix=search):
            for obj in page.get("Contents", []):
                # Zero-byte folder markers are not objects
                if obj["Key"].endswith(DELIMITER):
                    continue
                key = Key.from_path(obj["Key"])
                if key.starts_with(self.root):
                    yield Key(key.tail(self.root))
