"""Bucket label management."""

import logging

logger = logging.getLogger(__name__)

def get_bucket_labels(client, bucket_name: str) -> dict:
    bucket = client.get_bucket(bucket_name)
    labels = bucket.labels
    for key, value in labels.items():
        print(f"{key}: {value}")
    return labels

def add_bucket_label(client, bucket_name: str, label_name: str, label_value: str):
    """Sets a single label, leaving the others untouched."""
    bucket = client.get_bucket(bucket_name)
    labels = bucket.labels
    labels[label_name] = label_value
    bucket.labels = labels
    bucket.patch()
    print(f"Added label {label_name} with value {label_value} to {bucket_name}.")
    return bucket

def remove_bucket_label(client, bucket_name: str, label_name: str):
    bucket = client.get_bucket(bucket_name)
    labels = bucket.labels
    if label_name not in labels:
        logger.warning(f"Label {label_name} is not set on {bucket_name}")
    labels.pop(label_name, None)
    # The setter records removed keys so patch() sends them as null
    bucket.labels = labels
    bucket.patch()
    print(f"Removed label {label_name} from {bucket_name}.")
    return bucket
