"""IAM policy bindings on buckets."""

import logging

logger = logging.getLogger(__name__)

POLICY_VERSION = 3

def view_bucket_iam_members(client, bucket_name: str):
    bucket = client.bucket(bucket_name)
    policy = bucket.get_iam_policy(requested_policy_version=POLICY_VERSION)
    for binding in policy.bindings:
        print(f"Role: {binding['role']}, Members: {', '.join(sorted(binding['members']))}")
    return policy

def add_bucket_iam_member(client, bucket_name: str, role: str, member: str):
    bucket = client.bucket(bucket_name)
    policy = bucket.get_iam_policy(requested_policy_version=POLICY_VERSION)
    policy.bindings.append({"role": role, "members": {member}})
    bucket.set_iam_policy(policy)
    print(f"Added {member} with role {role} to {bucket_name}.")
    return policy

def remove_bucket_iam_member(client, bucket_name: str, role: str, member: str):
    """Removes ``member`` from every binding for ``role``; empty bindings are dropped."""
    bucket = client.bucket(bucket_name)
    policy = bucket.get_iam_policy(requested_policy_version=POLICY_VERSION)

    removed = False
    for binding in policy.bindings:
        if binding["role"] == role and member in binding["members"]:
            binding["members"].discard(member)
            removed = True
    if not removed:
        logger.warning(f"{member} has no {role} binding on {bucket_name}")
    policy.bindings = [b for b in policy.bindings if b["members"]]

    bucket.set_iam_policy(policy)
    print(f"Removed {member} with role {role} from {bucket_name}.")
    return policy
