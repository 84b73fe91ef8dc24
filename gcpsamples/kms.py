"""Cloud KMS keys for server-side encryption."""

import logging

logger = logging.getLogger(__name__)

def enable_default_kms_key(client, bucket_name: str, kms_key_name: str):
    """Makes ``kms_key_name`` the default key for new objects in the bucket."""
    bucket = client.get_bucket(bucket_name)
    bucket.default_kms_key_name = kms_key_name
    bucket.patch()
    print(f"Set default KMS key for bucket {bucket.name} to {bucket.default_kms_key_name}.")
    return bucket

def upload_with_kms_key(client, bucket_name: str, object_name: str, source: str, kms_key_name: str):
    logger.info(f"Uploading {source} encrypted with {kms_key_name}")
    bucket = client.bucket(bucket_name)
    blob = bucket.blob(object_name, kms_key_name=kms_key_name)
    blob.upload_from_filename(source)
    print(f"Uploaded {source} to gs://{bucket_name}/{object_name} with encryption key {blob.kms_key_name}.")
    return blob
