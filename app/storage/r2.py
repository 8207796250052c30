import os
from typing import Dict, Iterator, List, Tuple

import boto3
from botocore.client import Config

R2_BUCKET = os.environ.get("R2_BUCKET", "")
R2_ENDPOINT = os.environ.get("R2_ENDPOINT", "")
R2_REGION = os.environ.get("R2_REGION", "auto")
R2_CDN_BASE = os.environ.get("R2_CDN_BASE", "").rstrip("/")


def r2_client():
    return boto3.client(
        "s3",
        endpoint_url=R2_ENDPOINT or None,
        aws_access_key_id=os.environ.get("R2_ACCESS_KEY_ID"),
        aws_secret_access_key=os.environ.get("R2_SECRET_ACCESS_KEY"),
        region_name=R2_REGION,
        config=Config(signature_version="s3v4"),
    )


def photos_enabled() -> bool:
    return bool(R2_BUCKET)


def object_url(key: str) -> str:
    if R2_CDN_BASE:
        return f"{R2_CDN_BASE}/{key}"
    base = R2_ENDPOINT.rstrip("/")
    return f"{base}/{R2_BUCKET}/{key}"


def presign_put(key: str, content_type: str, expires: int = 900) -> Tuple[str, Dict[str, str]]:
    s3 = r2_client()
    url = s3.generate_presigned_url(
        "put_object",
        Params={"Bucket": R2_BUCKET, "Key": key, "ContentType": content_type},
        ExpiresIn=expires,
    )
    headers = {"Content-Type": content_type}
    return url, headers


def presign_get(key: str, expires: int = 900) -> str:
    if R2_CDN_BASE:
        return object_url(key)
    s3 = r2_client()
    return s3.generate_presigned_url(
        "get_object",
        Params={"Bucket": R2_BUCKET, "Key": key},
        ExpiresIn=expires,
    )


def delete_object(key: str) -> None:
    r2_client().delete_object(Bucket=R2_BUCKET, Key=key)


def list_keys(prefix: str, s3=None) -> Iterator[str]:
    s3 = s3 or r2_client()
    paginator = s3.get_paginator("list_objects_v2")
    for page in paginator.paginate(Bucket=R2_BUCKET, Prefix=prefix):
        for obj in page.get("Contents", []):
            yield obj["Key"]


def delete_prefix(prefix: str, batch_size: int = 100) -> Tuple[int, List[str]]:
    """Remove every object under ``prefix`` in ``delete_objects`` batches.

    Returns ``(deleted_count, failed_keys)``. Listing errors propagate; a
    batch that reports per-key errors does not stop the remaining batches.
    """
    if not prefix:
        raise ValueError("empty_prefix")
    s3 = r2_client()
    keys = list(list_keys(prefix, s3))
    deleted = 0
    failed: List[str] = []
    for start in range(0, len(keys), batch_size):
        batch = keys[start:start + batch_size]
        resp = s3.delete_objects(
            Bucket=R2_BUCKET,
            Delete={"Objects": [{"Key": k} for k in batch], "Quiet": True},
        )
        errors = [e["Key"] for e in resp.get("Errors", [])]
        failed.extend(errors)
        deleted += len(batch) - len(errors)
    return deleted, failed
