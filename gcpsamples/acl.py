"""
Access control lists for buckets, bucket default object ACLs and objects.

Entities use the JSON API form: ``user-<email>``, ``group-<email>``,
``domain-<domain>``, ``project-<team>-<id>``, ``allUsers`` and
``allAuthenticatedUsers``. Roles are ``OWNER``, ``READER`` and ``WRITER``.
"""

import logging
from typing import Optional

logger = logging.getLogger(__name__)

def _print_acl(acl) -> list:
    entries = list(acl)
    for entry in entries:
        print(f"{entry['role']}: {entry['entity']}")
    return entries

def _print_entity(acl, entity: str) -> Optional[list]:
    entry = acl.get_entity(entity)
    if entry is None:
        print(f"No ACL entry for {entity}")
        return None
    roles = sorted(entry.get_roles())
    for role in roles:
        print(f"{role}: {entity}")
    return roles

def _grant(acl, entity: str, role: str):
    entry = acl.entity_from_dict({"entity": entity, "role": role})
    acl.save()
    return entry

def _revoke_all(acl, entity: str):
    entry = acl.get_entity(entity)
    if entry is None:
        logger.warning(f"{entity} is not present in the ACL, nothing to delete")
        print(f"No ACL entry for {entity}")
        return None
    for role in list(entry.get_roles()):
        entry.revoke(role)
    acl.save()
    return entry

# Bucket ACL

def get_bucket_acl(client, bucket_name: str) -> list:
    acl = client.bucket(bucket_name).acl
    acl.reload()
    return _print_acl(acl)

def get_bucket_acl_for_entity(client, bucket_name: str, entity: str):
    acl = client.bucket(bucket_name).acl
    acl.reload()
    return _print_entity(acl, entity)

def add_bucket_acl(client, bucket_name: str, entity: str, role: str = "READER"):
    acl = client.bucket(bucket_name).acl
    acl.reload()
    entry = _grant(acl, entity, role)
    print(f"Added {entity} ({role}) to gs://{bucket_name} ACL")
    return entry

def delete_bucket_acl(client, bucket_name: str, entity: str):
    acl = client.bucket(bucket_name).acl
    acl.reload()
    entry = _revoke_all(acl, entity)
    if entry is not None:
        print(f"Deleted {entity} from gs://{bucket_name} ACL")
    return entry

# Bucket default object ACL

def get_bucket_default_acl(client, bucket_name: str) -> list:
    acl = client.bucket(bucket_name).default_object_acl
    acl.reload()
    return _print_acl(acl)

def get_bucket_default_acl_for_entity(client, bucket_name: str, entity: str):
    acl = client.bucket(bucket_name).default_object_acl
    acl.reload()
    return _print_entity(acl, entity)

def add_bucket_default_acl(client, bucket_name: str, entity: str, role: str = "READER"):
    acl = client.bucket(bucket_name).default_object_acl
    acl.reload()
    entry = _grant(acl, entity, role)
    print(f"Added {entity} ({role}) to gs://{bucket_name} default ACL")
    return entry

def delete_bucket_default_acl(client, bucket_name: str, entity: str):
    acl = client.bucket(bucket_name).default_object_acl
    acl.reload()
    entry = _revoke_all(acl, entity)
    if entry is not None:
        print(f"Deleted {entity} from gs://{bucket_name} default ACL")
    return entry

# Object ACL

def get_object_acl(client, bucket_name: str, object_name: str) -> list:
    acl = client.bucket(bucket_name).blob(object_name).acl
    acl.reload()
    return _print_acl(acl)

def get_object_acl_for_entity(client, bucket_name: str, object_name: str, entity: str):
    acl = client.bucket(bucket_name).blob(object_name).acl
    acl.reload()
    return _print_entity(acl, entity)

def add_object_acl(client, bucket_name: str, object_name: str, entity: str, role: str = "READER"):
    acl = client.bucket(bucket_name).blob(object_name).acl
    acl.reload()
    entry = _grant(acl, entity, role)
    print(f"Added {entity} ({role}) to gs://{bucket_name}/{object_name} ACL")
    return entry

def delete_object_acl(client, bucket_name: str, object_name: str, entity: str):
    acl = client.bucket(bucket_name).blob(object_name).acl
    acl.reload()
    entry = _revoke_all(acl, entity)
    if entry is not None:
        print(f"Deleted {entity} from gs://{bucket_name}/{object_name} ACL")
    return entry
