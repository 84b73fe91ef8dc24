"""Bucket creation, deletion and listing."""

import logging

logger = logging.getLogger(__name__)

def list_buckets(client):
    """Prints the names of all buckets in the client's project."""
    buckets = list(client.list_buckets())
    for bucket in buckets:
        print(bucket.name)
    return buckets

def create_bucket(client, bucket_name: str):
    bucket = client.create_bucket(bucket_name)
    logger.info(f"Created bucket {bucket.name} in {bucket.location}")
    print(f"Bucket {bucket.name} created.")
    return bucket

def delete_bucket(client, bucket_name: str):
    """Deletes an empty bucket."""
    bucket = client.bucket(bucket_name)
    bucket.delete()
    print(f"Bucket {bucket_name} deleted.")
    return bucket
