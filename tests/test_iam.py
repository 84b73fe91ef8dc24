"""Tests for bucket IAM membership operations."""

import pytest
from google.api_core.iam import Policy

from gcpsamples import iam

VIEWER = "roles/storage.objectViewer"
ADMIN = "roles/storage.admin"


@pytest.fixture
def policy(bucket):
    policy = Policy(version=3)
    policy.bindings = [
        {"role": VIEWER, "members": {"user:jane@example.com", "user:joe@example.com"}},
        {"role": ADMIN, "members": {"user:jane@example.com"}},
    ]
    bucket.get_iam_policy.return_value = policy
    return policy


def test_view_bucket_iam_members(storage_client, bucket, policy, capsys):
    iam.view_bucket_iam_members(storage_client, "my-bucket")

    bucket.get_iam_policy.assert_called_once_with(requested_policy_version=3)
    out = capsys.readouterr().out
    assert f"Role: {VIEWER}, Members: user:jane@example.com, user:joe@example.com" in out
    assert f"Role: {ADMIN}, Members: user:jane@example.com" in out


def test_add_bucket_iam_member(storage_client, bucket, policy):
    iam.add_bucket_iam_member(storage_client, "my-bucket", "roles/storage.objectCreator", "group:devs@example.com")

    assert {"role": "roles/storage.objectCreator", "members": {"group:devs@example.com"}} in policy.bindings
    bucket.set_iam_policy.assert_called_once_with(policy)


def test_remove_bucket_iam_member_only_touches_role(storage_client, bucket, policy):
    iam.remove_bucket_iam_member(storage_client, "my-bucket", VIEWER, "user:jane@example.com")

    assert policy.bindings == [
        {"role": VIEWER, "members": {"user:joe@example.com"}},
        {"role": ADMIN, "members": {"user:jane@example.com"}},
    ]
    bucket.set_iam_policy.assert_called_once_with(policy)


def test_remove_last_member_drops_binding(storage_client, bucket, policy):
    iam.remove_bucket_iam_member(storage_client, "my-bucket", ADMIN, "user:jane@example.com")

    assert [b["role"] for b in policy.bindings] == [VIEWER]
