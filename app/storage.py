import logging
from functools import lru_cache
from urllib.parse import quote

import boto3
from botocore.exceptions import BotoCoreError

from app.config import S3_CONFIG

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_s3_client():
    session = boto3.session.Session()
    return session.client(
        service_name="s3",
        endpoint_url=S3_CONFIG["endpoint_url"] or None,
        aws_access_key_id=S3_CONFIG["aws_access_key_id"],
        aws_secret_access_key=S3_CONFIG["aws_secret_access_key"],
        region_name=S3_CONFIG["region_name"],
    )


def public_url(key: str, bucket: str | None = None) -> str | None:
    """Public (path-style) URL of an object in a public-read bucket."""
    bucket = bucket or S3_CONFIG["bucket_name"]
    base = S3_CONFIG["public_url"]
    if not base:
        try:
            base = get_s3_client().meta.endpoint_url
        except BotoCoreError as e:
            logger.error("Failed to build S3 client: %s", e)
            return None
    return f"{base.rstrip('/')}/{bucket}/{quote(key)}"
