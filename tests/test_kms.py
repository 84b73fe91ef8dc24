"""Tests for Cloud KMS backed encryption."""

from gcpsamples import kms

KEY_NAME = "projects/p/locations/global/keyRings/r/cryptoKeys/k"


def test_enable_default_kms_key(storage_client, bucket, capsys):
    kms.enable_default_kms_key(storage_client, "my-bucket", KEY_NAME)

    storage_client.get_bucket.assert_called_once_with("my-bucket")
    assert bucket.default_kms_key_name == KEY_NAME
    bucket.patch.assert_called_once_with()
    assert KEY_NAME in capsys.readouterr().out


def test_upload_with_kms_key(storage_client, bucket):
    blob = bucket.blob.return_value
    blob.kms_key_name = KEY_NAME

    kms.upload_with_kms_key(storage_client, "my-bucket", "a.txt", "/tmp/a.txt", KEY_NAME)

    bucket.blob.assert_called_once_with("a.txt", kms_key_name=KEY_NAME)
    blob.upload_from_filename.assert_called_once_with("/tmp/a.txt")
