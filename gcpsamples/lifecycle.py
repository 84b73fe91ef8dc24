"""Object lifecycle management rules on buckets."""

import logging

logger = logging.getLogger(__name__)

def get_lifecycle_rules(client, bucket_name: str) -> list:
    bucket = client.get_bucket(bucket_name)
    rules = list(bucket.lifecycle_rules)
    if not rules:
        print(f"Bucket {bucket_name} has no lifecycle rules.")
    for rule in rules:
        print(rule)
    return rules

def enable_lifecycle_management(client, bucket_name: str, age: int):
    """Adds a rule deleting objects older than ``age`` days."""
    bucket = client.get_bucket(bucket_name)
    logger.info(f"Adding delete rule for objects older than {age} days to {bucket_name}")
    bucket.add_lifecycle_delete_rule(age=age)
    bucket.patch()
    print(f"Lifecycle management is enabled for bucket {bucket_name} and the rules are {list(bucket.lifecycle_rules)}")
    return bucket

def disable_lifecycle_management(client, bucket_name: str):
    bucket = client.get_bucket(bucket_name)
    bucket.lifecycle_rules = []
    bucket.patch()
    print(f"Lifecycle management is disabled for bucket {bucket_name}.")
    return bucket
