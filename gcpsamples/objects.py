"""Object upload, download, copy, move, delete, listing and metadata."""

import logging
from typing import Optional

logger = logging.getLogger(__name__)

def list_objects(client, bucket_name: str) -> list:
    blobs = list(client.list_blobs(bucket_name))
    for blob in blobs:
        print(blob.name)
    return blobs

def list_objects_with_prefix(client, bucket_name: str, prefix: str) -> list:
    blobs = list(client.list_blobs(bucket_name, prefix=prefix))
    for blob in blobs:
        print(blob.name)
    return blobs

def upload_object(client, bucket_name: str, object_name: str, source: str):
    blob = client.bucket(bucket_name).blob(object_name)
    blob.upload_from_filename(source)
    print(f"Uploaded {source} to gs://{bucket_name}/{object_name}")
    return blob

def download_object(client, bucket_name: str, object_name: str, destination: str):
    blob = client.bucket(bucket_name).blob(object_name)
    blob.download_to_filename(destination)
    print(f"Downloaded gs://{bucket_name}/{object_name} to {destination}")
    return blob

def copy_object(client, bucket_name: str, object_name: str, new_bucket_name: str, new_object_name: str):
    source_bucket = client.bucket(bucket_name)
    source_blob = source_bucket.blob(object_name)
    destination_bucket = client.bucket(new_bucket_name)
    new_blob = source_bucket.copy_blob(source_blob, destination_bucket, new_object_name)
    print(f"Copied gs://{bucket_name}/{object_name} to gs://{new_bucket_name}/{new_object_name}")
    return new_blob

def move_object(client, bucket_name: str, object_name: str, new_bucket_name: str, new_object_name: str):
    """Copies the object to its new name, then deletes the original."""
    source_bucket = client.bucket(bucket_name)
    source_blob = source_bucket.blob(object_name)
    destination_bucket = client.bucket(new_bucket_name)
    new_blob = source_bucket.copy_blob(source_blob, destination_bucket, new_object_name)
    logger.info(f"Copied {object_name} to {new_object_name}, deleting the original")
    source_blob.delete()
    print(f"Moved gs://{bucket_name}/{object_name} to gs://{new_bucket_name}/{new_object_name}")
    return new_blob

def make_public(client, bucket_name: str, object_name: str):
    blob = client.bucket(bucket_name).blob(object_name)
    blob.make_public()
    print(f"gs://{bucket_name}/{object_name} is now public at {blob.public_url}")
    return blob

def delete_object(client, bucket_name: str, object_name: str):
    blob = client.bucket(bucket_name).blob(object_name)
    blob.delete()
    print(f"Deleted gs://{bucket_name}/{object_name}")
    return blob

METADATA_FIELDS = (
    "id", "name", "bucket", "generation", "metageneration", "content_type",
    "size", "md5_hash", "crc32c", "etag", "storage_class", "time_created",
    "updated", "content_encoding", "content_disposition", "content_language",
    "cache_control", "kms_key_name", "temporary_hold", "event_based_hold",
    "retention_expiration_time", "media_link", "metadata",
)

def object_metadata(client, bucket_name: str, object_name: str) -> Optional[dict]:
    """Prints the object's metadata fields that are set."""
    blob = client.bucket(bucket_name).get_blob(object_name)
    if blob is None:
        print(f"Object gs://{bucket_name}/{object_name} not found")
        return None

    info = {}
    for field in METADATA_FIELDS:
        value = getattr(blob, field, None)
        if value is not None:
            info[field] = value
            print(f"{field}: {value}")
    return info
