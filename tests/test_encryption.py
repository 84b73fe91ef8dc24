"""Tests for customer-supplied encryption key operations."""

import base64
from unittest.mock import MagicMock

import pytest

from gcpsamples import encryption
from gcpsamples.exceptions import UsageError


class TestKeys:
    def test_generate_encryption_key(self, capsys):
        key = encryption.generate_encryption_key()

        assert len(base64.b64decode(key)) == 32
        assert capsys.readouterr().out.strip() == f"Your encryption key: {key}"

    def test_generated_keys_differ(self):
        assert encryption.generate_encryption_key() != encryption.generate_encryption_key()

    def test_decode_encryption_key(self, b64_key):
        assert encryption.decode_encryption_key(b64_key) == b"k" * 32

    def test_decode_rejects_invalid_base64(self):
        with pytest.raises(UsageError, match="not valid base64"):
            encryption.decode_encryption_key("not base64!")

    def test_decode_rejects_wrong_length(self):
        short = base64.b64encode(b"k" * 16).decode("utf-8")
        with pytest.raises(UsageError, match="32 bytes"):
            encryption.decode_encryption_key(short)


class TestObjects:
    def test_upload_encrypted_object(self, storage_client, bucket, b64_key):
        blob = bucket.blob.return_value

        encryption.upload_encrypted_object(storage_client, "my-bucket", "secret.txt", "/tmp/secret.txt", b64_key)

        bucket.blob.assert_called_once_with("secret.txt", encryption_key=b"k" * 32)
        blob.upload_from_filename.assert_called_once_with("/tmp/secret.txt")

    def test_download_encrypted_object(self, storage_client, bucket, b64_key):
        blob = bucket.blob.return_value

        encryption.download_encrypted_object(storage_client, "my-bucket", "secret.txt", "/tmp/out.txt", b64_key)

        bucket.blob.assert_called_once_with("secret.txt", encryption_key=b"k" * 32)
        blob.download_to_filename.assert_called_once_with("/tmp/out.txt")

    def test_rotate_encryption_key_follows_rewrite_token(self, storage_client, bucket, b64_key, other_b64_key):
        source_blob, destination_blob = MagicMock(name="source"), MagicMock(name="destination")
        bucket.blob.side_effect = [source_blob, destination_blob]
        destination_blob.rewrite.side_effect = [("token-1", 10, 20), (None, 20, 20)]

        result = encryption.rotate_encryption_key(
            storage_client, "my-bucket", "secret.txt", b64_key, other_b64_key
        )

        assert result is destination_blob
        assert bucket.blob.call_args_list[0].kwargs == {"encryption_key": b"k" * 32}
        assert bucket.blob.call_args_list[1].kwargs == {"encryption_key": b"n" * 32}
        assert destination_blob.rewrite.call_count == 2
        destination_blob.rewrite.assert_called_with(source_blob, token="token-1")

    def test_rotate_single_rewrite(self, storage_client, bucket, b64_key, other_b64_key, capsys):
        destination_blob = MagicMock(name="destination")
        bucket.blob.side_effect = [MagicMock(name="source"), destination_blob]
        destination_blob.rewrite.return_value = (None, 20, 20)

        encryption.rotate_encryption_key(storage_client, "my-bucket", "secret.txt", b64_key, other_b64_key)

        destination_blob.rewrite.assert_called_once()
        assert "Key rotation complete" in capsys.readouterr().out
