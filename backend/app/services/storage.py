# backend/app/services/storage.py
"""
S3-compatible object storage client.

Works against AWS S3 as well as MinIO / LocalStack (S3_ENDPOINT_URL).
Objects are stored under `<category>/<uuid>-<filename>` and addressed by URL.
"""

import logging
import re
import uuid
from functools import lru_cache
from typing import Optional
from urllib.parse import quote

import aioboto3
from botocore.exceptions import BotoCoreError, ClientError

from ..config import settings

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


class StorageError(Exception):
    """Object storage operation failed."""


def safe_filename(name: Optional[str]) -> str:
    cleaned = _UNSAFE_CHARS.sub("-", (name or "").strip()).strip("-.")
    return cleaned or "file"


class S3Storage:
    def __init__(
        self,
        bucket: str,
        region: str = "us-east-1",
        endpoint_url: Optional[str] = None,
        access_key_id: Optional[str] = None,
        secret_access_key: Optional[str] = None,
        public_base_url: Optional[str] = None,
        session: Optional[aioboto3.Session] = None,
    ):
        self.bucket = bucket
        self.region = region
        self.endpoint_url = endpoint_url
        self.public_base_url = public_base_url
        self._access_key_id = access_key_id
        self._secret_access_key = secret_access_key
        self._session = session or aioboto3.Session()

    def _client(self):
        # no explicit credentials → default AWS provider chain
        return self._session.client(
            "s3",
            region_name=self.region,
            endpoint_url=self.endpoint_url,
            aws_access_key_id=self._access_key_id,
            aws_secret_access_key=self._secret_access_key,
        )

    def build_key(self, original_name: Optional[str], category: str) -> str:
        return f"{category}/{uuid.uuid4().hex}-{safe_filename(original_name)}"

    def url_for(self, key: str) -> str:
        quoted = quote(key)
        if self.public_base_url:
            return f"{self.public_base_url.rstrip('/')}/{quoted}"
        if self.endpoint_url:
            return f"{self.endpoint_url.rstrip('/')}/{self.bucket}/{quoted}"
        return f"https://{self.bucket}.s3.{self.region}.amazonaws.com/{quoted}"

    async def upload(
        self,
        content: bytes,
        original_name: Optional[str],
        category: str,
        content_type: Optional[str] = None,
    ) -> str:
        """
        Store `content` and return its URL.

        Raises StorageError when S3 rejects the request or is unreachable.
        """
        key = self.build_key(original_name, category)
        params = {"Bucket": self.bucket, "Key": key, "Body": content}
        if content_type:
            params["ContentType"] = content_type

        try:
            async with self._client() as s3:
                await s3.put_object(**params)
        except (BotoCoreError, ClientError) as e:
            logger.error(f"S3 upload failed for {key}: {e}")
            raise StorageError(f"Failed to upload {original_name!r}") from e

        logger.info(f"Uploaded {len(content)} bytes → s3://{self.bucket}/{key}")
        return self.url_for(key)


@lru_cache
def get_storage() -> S3Storage:
    """Process-wide storage client built from settings (FastAPI dependency)."""
    if not settings.s3_bucket:
        raise RuntimeError("S3_BUCKET not set in .env")

    return S3Storage(
        bucket=settings.s3_bucket,
        region=settings.s3_region,
        endpoint_url=settings.s3_endpoint_url,
        access_key_id=settings.s3_access_key_id,
        secret_access_key=settings.s3_secret_access_key,
        public_base_url=settings.s3_public_base_url,
    )


def get_optional_storage() -> Optional[S3Storage]:
    """FastAPI dependency: None when S3 is not configured, so image-less requests still work."""
    if not settings.s3_bucket:
        return None
    return get_storage()
