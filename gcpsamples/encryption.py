"""
Customer-supplied encryption keys (CSEK).

Keys travel on the command line as base64 strings and are decoded to the raw
32 byte AES-256 key the storage SDK expects.
"""

import base64
import binascii
import logging
import os

from .exceptions import UsageError

logger = logging.getLogger(__name__)

KEY_SIZE_BYTES = 32

def generate_encryption_key() -> str:
    """Prints and returns a new random base64-encoded AES-256 key."""
    key = base64.b64encode(os.urandom(KEY_SIZE_BYTES)).decode("utf-8")
    print(f"Your encryption key: {key}")
    return key

def decode_encryption_key(key: str) -> bytes:
    """
    Decodes a base64 key.

    Raises:
        UsageError: If the key is not valid base64 or not 32 bytes long.
    """
    try:
        raw = base64.b64decode(key, validate=True)
    except (binascii.Error, ValueError) as e:
        raise UsageError(f"Encryption key is not valid base64: {e}") from e
    if len(raw) != KEY_SIZE_BYTES:
        raise UsageError(f"Encryption key must decode to {KEY_SIZE_BYTES} bytes, got {len(raw)}")
    return raw

def upload_encrypted_object(client, bucket_name: str, object_name: str, source: str, base64_key: str):
    bucket = client.bucket(bucket_name)
    blob = bucket.blob(object_name, encryption_key=decode_encryption_key(base64_key))
    blob.upload_from_filename(source)
    print(f"Uploaded encrypted {source} to gs://{bucket_name}/{object_name}")
    return blob

def download_encrypted_object(client, bucket_name: str, object_name: str, destination: str, base64_key: str):
    bucket = client.bucket(bucket_name)
    blob = bucket.blob(object_name, encryption_key=decode_encryption_key(base64_key))
    blob.download_to_filename(destination)
    print(f"Encrypted object gs://{bucket_name}/{object_name} downloaded to {destination}")
    return blob

def rotate_encryption_key(client, bucket_name: str, object_name: str, base64_key: str, new_base64_key: str):
    """Rewrites the object in place under a new key."""
    bucket = client.bucket(bucket_name)
    source_blob = bucket.blob(object_name, encryption_key=decode_encryption_key(base64_key))
    destination_blob = bucket.blob(object_name, encryption_key=decode_encryption_key(new_base64_key))

    token, bytes_rewritten, total_bytes = destination_blob.rewrite(source_blob)
    while token is not None:
        logger.info(f"Rewrote {bytes_rewritten}/{total_bytes} bytes of {object_name}")
        token, bytes_rewritten, total_bytes = destination_blob.rewrite(source_blob, token=token)

    print(f"Key rotation complete for gs://{bucket_name}/{object_name}")
    return destination_blob
