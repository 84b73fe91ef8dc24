"""Requester-pays billing on buckets."""

import logging

logger = logging.getLogger(__name__)

def enable_requester_pays(client, bucket_name: str):
    bucket = client.get_bucket(bucket_name)
    bucket.requester_pays = True
    bucket.patch()
    print(f"Requester Pays has been enabled for {bucket_name}")
    return bucket

def disable_requester_pays(client, bucket_name: str):
    bucket = client.get_bucket(bucket_name)
    bucket.requester_pays = False
    bucket.patch()
    print(f"Requester Pays has been disabled for {bucket_name}")
    return bucket

def get_requester_pays_status(client, bucket_name: str) -> bool:
    bucket = client.get_bucket(bucket_name)
    status = bool(bucket.requester_pays)
    print(f"Requester Pays is {'enabled' if status else 'disabled'} for {bucket_name}")
    return status

def download_file_requester_pays(client, project_id: str, bucket_name: str, object_name: str, destination: str):
    """Downloads an object billing ``project_id`` for the egress."""
    logger.info(f"Billing project {project_id} for download of gs://{bucket_name}/{object_name}")
    bucket = client.bucket(bucket_name, user_project=project_id)
    blob = bucket.blob(object_name)
    blob.download_to_filename(destination)
    print(f"Blob {object_name} downloaded to {destination} using a requester-pays request.")
    return blob
