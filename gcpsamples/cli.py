"""Command-Line Interface handler for the Cloud Storage samples."""

import argparse
import logging
import sys
from typing import Callable, Dict, List, Optional

from google.api_core.exceptions import GoogleAPICallError
from google.auth.exceptions import GoogleAuthError

from . import acl, buckets, encryption, iam, kms, labels, lifecycle, objects, requester_pays
from .clients import create_storage_client
from .config_loader import ConfigLoader
from .log_setup import setup_logging
from .exceptions import GcpSamplesError, UsageError

logger = logging.getLogger(__name__) # Get logger for this module

ROLES = ["OWNER", "READER", "WRITER"]

# Handlers receive the parsed arguments and a ``get_client(project=None)``
# callable. Validation must happen before the first get_client() call.
Handler = Callable[[argparse.Namespace, Callable], None]


def _bucket_acl(args, get_client):
    if args.entity:
        if args.create:
            acl.add_bucket_acl(get_client(), args.bucket, args.entity, args.role)
        elif args.delete:
            acl.delete_bucket_acl(get_client(), args.bucket, args.entity)
        else:
            acl.get_bucket_acl_for_entity(get_client(), args.bucket, args.entity)
    else:
        acl.get_bucket_acl(get_client(), args.bucket)


def _bucket_default_acl(args, get_client):
    if args.entity:
        if args.create:
            acl.add_bucket_default_acl(get_client(), args.bucket, args.entity, args.role)
        elif args.delete:
            acl.delete_bucket_default_acl(get_client(), args.bucket, args.entity)
        else:
            acl.get_bucket_default_acl_for_entity(get_client(), args.bucket, args.entity)
    else:
        acl.get_bucket_default_acl(get_client(), args.bucket)


def _bucket_labels(args, get_client):
    if args.label:
        if args.value:
            labels.add_bucket_label(get_client(), args.bucket, args.label, args.value)
        elif args.remove:
            labels.remove_bucket_label(get_client(), args.bucket, args.label)
        else:
            raise UsageError("You must provide --value or --remove when including a label name.")
    else:
        labels.get_bucket_labels(get_client(), args.bucket)


def _bucket_lifecycle(args, get_client):
    if args.enable:
        if args.age is None:
            raise UsageError("--age is required when using --enable")
        lifecycle.enable_lifecycle_management(get_client(), args.bucket, args.age)
    elif args.disable:
        lifecycle.disable_lifecycle_management(get_client(), args.bucket)
    else:
        lifecycle.get_lifecycle_rules(get_client(), args.bucket)


def _buckets(args, get_client):
    if args.bucket:
        if args.create:
            buckets.create_bucket(get_client(), args.bucket)
        elif args.delete:
            buckets.delete_bucket(get_client(), args.bucket)
        else:
            raise UsageError("Supply --create or --delete with bucket name")
    else:
        buckets.list_buckets(get_client())


def _encryption(args, get_client):
    if args.generate_key:
        encryption.generate_encryption_key()
        return

    if not (args.bucket and args.object):
        raise UsageError("Supply a bucket and object OR --generate-key")

    if args.upload_from or args.download_to or args.rotate_key:
        if args.key is None:
            if args.rotate_key:
                raise UsageError("--key is required when using --rotate-key")
            raise UsageError("--key is required when using --upload-from or --download-to")
        encryption.decode_encryption_key(args.key)

    if args.upload_from:
        encryption.upload_encrypted_object(get_client(), args.bucket, args.object, args.upload_from, args.key)
    elif args.download_to:
        encryption.download_encrypted_object(get_client(), args.bucket, args.object, args.download_to, args.key)
    elif args.rotate_key:
        encryption.decode_encryption_key(args.rotate_key)
        encryption.rotate_encryption_key(get_client(), args.bucket, args.object, args.key, args.rotate_key)
    else:
        raise UsageError("Supply --rotate-key, --upload-from or --download-to")


def _iam(args, get_client):
    if args.add_member:
        if not args.role:
            raise UsageError("Must provide role as an option.")
        iam.add_bucket_iam_member(get_client(), args.bucket, args.role, args.add_member)
    elif args.remove_member:
        if not args.role:
            raise UsageError("Must provide role as an option.")
        iam.remove_bucket_iam_member(get_client(), args.bucket, args.role, args.remove_member)
    else:
        iam.view_bucket_iam_members(get_client(), args.bucket)


def _object_acl(args, get_client):
    if args.entity:
        if args.create:
            acl.add_object_acl(get_client(), args.bucket, args.object, args.entity, args.role)
        elif args.delete:
            acl.delete_object_acl(get_client(), args.bucket, args.object, args.entity)
        else:
            acl.get_object_acl_for_entity(get_client(), args.bucket, args.object, args.entity)
    else:
        acl.get_object_acl(get_client(), args.bucket, args.object)


def _objects(args, get_client):
    bucket, name = args.bucket, args.object
    if name:
        if args.upload_from:
            objects.upload_object(get_client(), bucket, name, args.upload_from)
        elif args.download_to:
            objects.download_object(get_client(), bucket, name, args.download_to)
        elif args.move_to:
            objects.move_object(get_client(), bucket, name, bucket, args.move_to)
        elif args.copy_to:
            objects.copy_object(get_client(), bucket, name, bucket, args.copy_to)
        elif args.make_public:
            objects.make_public(get_client(), bucket, name)
        elif args.delete:
            objects.delete_object(get_client(), bucket, name)
        else:
            objects.object_metadata(get_client(), bucket, name)
    elif args.prefix:
        objects.list_objects_with_prefix(get_client(), bucket, args.prefix)
    else:
        objects.list_objects(get_client(), bucket)


def _requester_pays(args, get_client):
    project = args.project
    if args.object:
        if not args.download_to:
            raise UsageError("Supply a download-to path with the object name")
        requester_pays.download_file_requester_pays(
            get_client(project), project, args.bucket, args.object, args.download_to
        )
    elif args.enable:
        requester_pays.enable_requester_pays(get_client(project), args.bucket)
    elif args.disable:
        requester_pays.disable_requester_pays(get_client(project), args.bucket)
    elif args.check_status:
        requester_pays.get_requester_pays_status(get_client(project), args.bucket)
    else:
        raise UsageError("Supply an object and download-to path, --enable, --disable or --check-status")


def _enable_default_kms_key(args, get_client):
    kms.enable_default_kms_key(get_client(args.project), args.bucket, args.kms_key_name)


def _upload_with_kms_key(args, get_client):
    kms.upload_with_kms_key(
        get_client(args.project), args.bucket, args.object, args.upload_from, args.kms_key_name
    )


COMMANDS: Dict[str, Handler] = {
    "bucket-acl": _bucket_acl,
    "bucket-default-acl": _bucket_default_acl,
    "bucket-labels": _bucket_labels,
    "bucket-lifecycle": _bucket_lifecycle,
    "buckets": _buckets,
    "encryption": _encryption,
    "iam": _iam,
    "object-acl": _object_acl,
    "objects": _objects,
    "requester-pays": _requester_pays,
    "enable-default-kms-key": _enable_default_kms_key,
    "upload-with-kms-key": _upload_with_kms_key,
}


class CLIHandler:
    """Parses arguments and dispatches to one storage operation."""

    def __init__(self, client_factory: Optional[Callable] = None):
        self.parser = self._create_parser()
        self.client_factory = client_factory or create_storage_client

    def _add_acl_options(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("--entity", help="Add or filter by a user, e.g. user-jane@example.com or allUsers.")
        parser.add_argument("--role", default="READER", choices=ROLES, help="Role to grant with --create.")
        parser.add_argument("--create", action="store_true", help="Create an ACL entry for the supplied entity.")
        parser.add_argument("--delete", action="store_true", help="Remove the supplied entity from the ACL.")

    def _create_parser(self) -> argparse.ArgumentParser:
        """Creates the argument parser for the CLI."""
        parser = argparse.ArgumentParser(
            prog="gcp-storage",
            description="Manage Cloud Storage buckets, objects, ACLs, IAM and encryption.",
            formatter_class=argparse.ArgumentDefaultsHelpFormatter # Show defaults in help
        )
        parser.add_argument(
            "-c", "--config",
            default=None,
            help="Path to a YAML configuration file."
        )
        parser.add_argument(
            "--project",
            dest="client_project",
            default=None, # Default taken from config, then from the environment
            help="Project for the storage client."
        )
        parser.add_argument(
            "--log-level",
            default="WARNING",
            choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
            help="Set the logging level for console and file output."
        )
        subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
        subparsers.required = True

        p = subparsers.add_parser("bucket-acl", help="Manage the ACL for Cloud Storage buckets.")
        p.add_argument("bucket", help="The Cloud Storage bucket name.")
        self._add_acl_options(p)

        p = subparsers.add_parser("bucket-default-acl", help="Manage the default ACL for Cloud Storage buckets.")
        p.add_argument("bucket", help="The Cloud Storage bucket name.")
        self._add_acl_options(p)

        p = subparsers.add_parser("bucket-labels", help="Manage Cloud Storage bucket labels.")
        p.add_argument("bucket", help="The Cloud Storage bucket name.")
        p.add_argument("label", nargs="?", help="The Cloud Storage label.")
        p.add_argument("--value", help="Set the value of the label.")
        p.add_argument("--remove", action="store_true", help="Remove the bucket's label.")

        p = subparsers.add_parser("bucket-lifecycle", help="Manage object lifecycle rules on a bucket.")
        p.add_argument("bucket", help="The Cloud Storage bucket name.")
        p.add_argument("--enable", action="store_true", help="Add a rule deleting objects older than --age days.")
        p.add_argument("--age", type=int, help="Age in days used with --enable.")
        p.add_argument("--disable", action="store_true", help="Remove all lifecycle rules.")

        p = subparsers.add_parser("buckets", help="Manage Cloud Storage buckets.")
        p.add_argument("bucket", nargs="?", help="The Cloud Storage bucket name.")
        p.add_argument("--create", action="store_true", help="Create the bucket.")
        p.add_argument("--delete", action="store_true", help="Delete the bucket.")

        p = subparsers.add_parser("encryption", help="Upload and download Cloud Storage objects with encryption.")
        p.add_argument("bucket", nargs="?", help="The Cloud Storage bucket name.")
        p.add_argument("object", nargs="?", help="The Cloud Storage object name.")
        p.add_argument("--upload-from", help="Path to the file to upload.")
        p.add_argument("--download-to", help="Path to store the downloaded file.")
        p.add_argument("--key", help="Your base64 encryption key.")
        p.add_argument("--rotate-key", help="A new base64 encryption key.")
        p.add_argument("--generate-key", action="store_true", help="Generate an encryption key.")

        p = subparsers.add_parser("iam", help="Manage IAM for Storage.")
        p.add_argument("bucket", help="The bucket that you want to change IAM for.")
        p.add_argument("--role", help="The role to add or remove members for, e.g. roles/storage.objectViewer.")
        p.add_argument("--add-member", help="The member to add with the role, e.g. user:jane@example.com.")
        p.add_argument("--remove-member", help="The member to remove from the role.")

        p = subparsers.add_parser("object-acl", help="Manage the ACL for Cloud Storage objects.")
        p.add_argument("bucket", help="The Cloud Storage bucket name.")
        p.add_argument("object", help="The Cloud Storage object name.")
        self._add_acl_options(p)

        p = subparsers.add_parser("objects", help="Manage Cloud Storage objects.")
        p.add_argument("bucket", help="The Cloud Storage bucket name.")
        p.add_argument("object", nargs="?", help="The Cloud Storage object name.")
        p.add_argument("--upload-from", help="Path to the file to upload.")
        p.add_argument("--download-to", help="Path to store the downloaded file.")
        p.add_argument("--move-to", help="New name for the object.")
        p.add_argument("--copy-to", help="Copy path for the object.")
        p.add_argument("--make-public", action="store_true", help="Make the supplied object public.")
        p.add_argument("--delete", action="store_true", help="Delete the object.")
        p.add_argument("--prefix", help="List objects matching a prefix.")

        p = subparsers.add_parser("requester-pays", help="Manage Cloud Storage requester pays buckets.")
        p.add_argument("project", help="Your billable Google Cloud project ID.")
        p.add_argument("bucket", help="The Cloud Storage requester pays bucket name.")
        p.add_argument("object", nargs="?", help="The Cloud Storage requester pays object name.")
        p.add_argument("download_to", metavar="download-to", nargs="?", help="Path to store the downloaded file.")
        p.add_argument("--enable", action="store_true", help="Enable requester pays on the bucket.")
        p.add_argument("--disable", action="store_true", help="Disable requester pays on the bucket.")
        p.add_argument("--check-status", action="store_true", help="Check requester pays status on the bucket.")

        p = subparsers.add_parser("enable-default-kms-key", help="Enable default KMS encryption for a bucket.")
        p.add_argument("project", help="Your billable Google Cloud project ID.")
        p.add_argument("bucket", help="The Cloud Storage bucket name.")
        p.add_argument("kms_key_name", metavar="kms-key-name", help="KMS key ID to use as the default KMS key.")

        p = subparsers.add_parser("upload-with-kms-key", help="Upload a file using KMS encryption.")
        p.add_argument("project", help="Your billable Google Cloud project ID.")
        p.add_argument("bucket", help="The Cloud Storage bucket name.")
        p.add_argument("object", help="The Cloud Storage object name.")
        p.add_argument("upload_from", metavar="upload-from", help="Path to the file to upload.")
        p.add_argument("kms_key_name", metavar="kms-key-name", help="KMS key ID used to encrypt objects server side.")

        return parser

    def run(self, argv: Optional[List[str]] = None) -> None:
        """Parses arguments, sets up logging, loads config, and runs one command."""
        args = self.parser.parse_args(argv)

        log_level = getattr(logging, args.log_level.upper(), logging.WARNING)
        setup_logging(log_level=log_level)

        try:
            config = ConfigLoader().load_with_defaults(args.config)
        except (GcpSamplesError, FileNotFoundError) as e:
            logger.critical(f"Failed to load configuration from {args.config}: {e}")
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

        if config.get('log_dir'):
            setup_logging(log_level=log_level, log_dir=config['log_dir'], log_file=config['log_file'])

        default_project = config.get('project')
        if args.client_project:
            logger.info(f"Overriding project from config with CLI argument: {args.client_project}")
            default_project = args.client_project

        def get_client(project: Optional[str] = None):
            return self.client_factory(project or default_project)

        handler = COMMANDS[args.command]
        logger.debug(f"Dispatching {args.command} to {handler.__name__}")
        try:
            handler(args, get_client)
        except (GcpSamplesError, FileNotFoundError) as e:
            logger.error(f"{args.command} failed: {e}")
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        except GoogleAPICallError as e:
            logger.error(f"Storage API call failed for {args.command}: {e}")
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        except GoogleAuthError as e:
            logger.error(f"Could not authenticate the storage client: {e}")
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        except KeyboardInterrupt:
            logger.warning("Process interrupted by user (Ctrl+C). Exiting.")
            sys.exit(1)
        except Exception as e:
            logger.critical(f"An unexpected critical error occurred at the top level: {e}", exc_info=True)
            sys.exit(2)
        sys.exit(0)


def main() -> None:
    CLIHandler().run()
