"""Tests for bucket lifecycle rule management."""

from gcpsamples import lifecycle


def test_get_lifecycle_rules(storage_client, bucket, capsys):
    rule = {"action": {"type": "Delete"}, "condition": {"age": 30}}
    bucket.lifecycle_rules = iter([rule])

    assert lifecycle.get_lifecycle_rules(storage_client, "my-bucket") == [rule]
    assert "'age': 30" in capsys.readouterr().out


def test_get_lifecycle_rules_when_none(storage_client, bucket, capsys):
    bucket.lifecycle_rules = iter([])

    assert lifecycle.get_lifecycle_rules(storage_client, "my-bucket") == []
    assert "has no lifecycle rules" in capsys.readouterr().out


def test_enable_lifecycle_management(storage_client, bucket):
    bucket.lifecycle_rules = []

    lifecycle.enable_lifecycle_management(storage_client, "my-bucket", 30)

    bucket.add_lifecycle_delete_rule.assert_called_once_with(age=30)
    bucket.patch.assert_called_once_with()


def test_disable_lifecycle_management(storage_client, bucket):
    lifecycle.disable_lifecycle_management(storage_client, "my-bucket")

    assert bucket.lifecycle_rules == []
    bucket.patch.assert_called_once_with()
