"""
Raw object-store file operations behind ``/api/articles/s3``.

A missing object is reported as ``NotFoundError``; every other S3 or
transport failure, and a missing bucket configuration, as
``DataSourceUnavailableError``.
"""
import logging
from contextlib import asynccontextmanager

from botocore.exceptions import BotoCoreError, ClientError

from articles_api.exceptions import DataSourceUnavailableError, NotFoundError
from articles_api.storage import S3ClientFactory

logger = logging.getLogger(__name__)

_MISSING_OBJECT_CODES = frozenset({"NoSuchKey", "404", "NotFound"})


class S3FileProvider:
    def __init__(self, client_factory: S3ClientFactory) -> None:
        self._client_factory = client_factory

    @property
    def bucket(self) -> str:
        return self._client_factory.bucket_name

    @asynccontextmanager
    async def _client(self, key: str | None = None):
        if not self._client_factory.configured:
            raise DataSourceUnavailableError("S3 client is not configured properly")
        try:
            async with self._client_factory.client() as s3:
                yield s3
        except ClientError as exc:
            code = exc.response.get("Error", {}).get("Code")
            if key is not None and code in _MISSING_OBJECT_CODES:
                raise NotFoundError(f"Object '{key}' not found") from exc
            logger.error("S3 call failed (key=%r): %s", key, exc)
            raise DataSourceUnavailableError(f"S3 service error: {exc}") from exc
        except BotoCoreError as exc:
            logger.error("S3 transport error (key=%r): %s", key, exc)
            raise DataSourceUnavailableError(f"Error contacting S3: {exc}") from exc

    async def upload(self, key: str, data: bytes, content_type: str | None = None) -> int:
        """Store *data* under *key* and return the number of bytes written."""
        extra = {"ContentType": content_type} if content_type else {}
        async with self._client() as s3:
            await s3.put_object(Bucket=self.bucket, Key=key, Body=data, **extra)
        logger.info("Uploaded %d byte(s) to s3://%s/%s", len(data), self.bucket, key)
        return len(data)

    async def download(self, key: str) -> bytes:
        async with self._client(key) as s3:
            response = await s3.get_object(Bucket=self.bucket, Key=key)
            return await response["Body"].read()

    async def list_objects(self, prefix: str | None = None) -> list[str]:
        keys: list[str] = []
        async with self._client() as s3:
            paginator = s3.get_paginator("list_objects_v2")
            async for page in paginator.paginate(Bucket=self.bucket, Prefix=prefix or ""):
                keys.extend(obj["Key"] for obj in page.get("Contents", []))
        return keys

    async def delete(self, key: str) -> None:
        async with self._client(key) as s3:
            await s3.delete_object(Bucket=self.bucket, Key=key)
        logger.info("Deleted s3://%s/%s", self.bucket, key)
