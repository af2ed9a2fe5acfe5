"""
Upload service forwarding single files to S3.
"""
import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional
from uuid import uuid4

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from starlette.concurrency import run_in_threadpool

from app.core.errors import StorageFailure, ValidationFailure
from app.schemas.responses import UploadResult

logger = logging.getLogger(__name__)


@lru_cache
def get_s3_client(region: str):
    """Get or create the S3 client for a region."""
    return boto3.client("s3", region_name=region)


def make_object_key(filename: Optional[str]) -> str:
    """Random unique key keeping the original file extension."""
    suffix = Path(filename or "").suffix
    return f"{uuid4().hex}{suffix}"


class UploadService:
    """Stores uploaded bytes in a bucket under a generated key."""

    def __init__(self, s3_client, bucket: str, region: str):
        self.s3 = s3_client
        self.bucket = bucket
        self.region = region

    def object_url(self, key: str) -> str:
        return f"https://{self.bucket}.s3.{self.region}.amazonaws.com/{key}"

    async def upload(
        self,
        filename: Optional[str],
        content: bytes,
        content_type: Optional[str] = None,
    ) -> UploadResult:
        """
        Put ``content`` into the bucket.

        The blocking boto3 call runs in the threadpool; the caller gets either
        the stored location or a StorageFailure, never both.

        Raises:
            ValidationFailure: If the file is empty
            StorageFailure: If S3 rejects the upload
        """
        if not content:
            raise ValidationFailure("Uploaded file is empty")

        key = make_object_key(filename)
        params = {"Bucket": self.bucket, "Key": key, "Body": content}
        if content_type:
            params["ContentType"] = content_type

        try:
            response = await run_in_threadpool(self.s3.put_object, **params)
        except (ClientError, BotoCoreError) as e:
            logger.error(f"S3 upload failed for {key}: {e}")
            raise StorageFailure(f"Error occurred while uploading file: {e}") from e

        logger.info(f"Uploaded {filename!r} to s3://{self.bucket}/{key}")
        return UploadResult(
            key=key,
            bucket=self.bucket,
            location=self.object_url(key),
            etag=(response or {}).get("ETag"),
            content_type=content_type,
            size=len(content),
        )
