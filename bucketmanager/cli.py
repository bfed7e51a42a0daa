"""
Manages buckets of Google Cloud Storage.

Usage:
    manage-buckets <service account email> <private key PEM file> create <project> <bucket>
    manage-buckets <service account email> <private key PEM file> delete <bucket>
    manage-buckets <service account email> <private key PEM file> list <project>

The private key file must not be password protected; it is only used locally
to sign token requests. Bucket names must be unique across the entire Google
Cloud Storage namespace.
"""

import argparse
import enum
import logging as py_logging
import sys
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from bucketmanager.config import LOG_FILE, LOG_LEVEL, PROVIDER
from bucketmanager.credentials import ServiceAccountCredential, load_credential
from bucketmanager.errors import BucketManagerError, OperationError, UsageError
from bucketmanager.manager import BucketManager
from bucketmanager.storage.auth import authenticate
from bucketmanager.storage.bucket_client import BucketClient
from bucketmanager.utils.log_util import configure_logging, remove_logging

LOGGER = py_logging.getLogger("bucketmanager.cli")
LOGGER.addHandler(py_logging.NullHandler())

Authenticator = Callable[[str, ServiceAccountCredential], BucketClient]


class Command(enum.Enum):
    """
    An operation the command line tool can perform.
    """

    CREATE = "create"
    DELETE = "delete"
    LIST = "list"


# names of the parameters each command takes after the command itself
_COMMAND_PARAMETERS: Dict[Command, Tuple[str, ...]] = {
    Command.CREATE: ("projectName", "bucketName"),
    Command.DELETE: ("bucketName",),
    Command.LIST: ("projectName",),
}

_NUMBER_WORDS = {1: "one", 2: "two"}


@dataclass(frozen=True)
class BucketRequest:
    """
    A validated command line invocation.
    """

    email_address: str
    private_key_path: str
    command: Command
    project_name: Optional[str] = None
    bucket_name: Optional[str] = None


class _ArgumentParser(argparse.ArgumentParser):
    """
    Argument parser that raises UsageError instead of exiting with status 2.
    """

    def error(self, message):
        raise UsageError(f"{self.format_usage().rstrip()}\n{self.prog}: error: {message}")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="manage-buckets",
        description="Create, delete or list Google Cloud Storage buckets",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s somecrypticname@developer.gserviceaccount.com key.pem create myproject mybucket
  %(prog)s somecrypticname@developer.gserviceaccount.com key.pem delete mybucket
  %(prog)s somecrypticname@developer.gserviceaccount.com key.pem list myproject
        """,
    )
    parser.add_argument("email_address", help="Service account email address")
    parser.add_argument(
        "private_key_path", help="Path to the service account private key PEM file"
    )
    parser.add_argument(
        "command", help="Command to perform: create, delete or list"
    )
    parser.add_argument(
        "parameters",
        nargs="*",
        help="create: projectName bucketName; delete: bucketName; list: projectName",
    )
    return parser


def _describe_parameters(names: Tuple[str, ...]) -> str:
    noun = "parameter" if len(names) == 1 else "parameters"
    return f"{_NUMBER_WORDS[len(names)]} additional {noun} ({', '.join(names)})"


def parse_args(argv: List[str]) -> BucketRequest:
    """
    Validate the positional arguments for one of the commands.

    :raises UsageError: on missing or extra arguments, or an unknown command.
    """
    args = build_parser().parse_args(argv)

    try:
        command = Command(args.command)
    except ValueError:
        raise UsageError(f"Unknown command: {args.command}") from None

    expected = _COMMAND_PARAMETERS[command]
    if len(args.parameters) < len(expected):
        raise UsageError(
            f"Command '{command.value}' requires {_describe_parameters(expected)}."
        )
    if len(args.parameters) > len(expected):
        raise UsageError(
            f"Command '{command.value}' require only {_describe_parameters(expected)}."
        )

    values = dict(zip(expected, args.parameters))
    return BucketRequest(
        email_address=args.email_address,
        private_key_path=args.private_key_path,
        command=command,
        project_name=values.get("projectName"),
        bucket_name=values.get("bucketName"),
    )


def create_bucket(manager: BucketManager, request: BucketRequest) -> None:
    bucket = manager.create_bucket(request.project_name, request.bucket_name)
    print(
        f"Bucket {bucket.name} successfully created in project {request.project_name} ."
    )


def delete_bucket(manager: BucketManager, request: BucketRequest) -> None:
    manager.delete_bucket(request.bucket_name)
    print(f"Bucket {request.bucket_name} successfully deleted.")


def list_buckets(manager: BucketManager, request: BucketRequest) -> None:
    print(f"List of buckets for project {request.project_name}:")
    for bucket in manager.list_buckets(request.project_name):
        print(f"* {bucket.name}")


_DISPATCH: Dict[Command, Callable[[BucketManager, BucketRequest], None]] = {
    Command.CREATE: create_bucket,
    Command.DELETE: delete_bucket,
    Command.LIST: list_buckets,
}


def _report(error: BucketManagerError) -> None:
    LOGGER.error(str(error), exc_info=error)
    print(error, file=sys.stderr)


def main(argv: Optional[List[str]] = None, authenticator: Optional[Authenticator] = None) -> int:
    """
    Run one command and return the process exit status.

    :param argv: arguments without the program name; defaults to sys.argv[1:]
    :param authenticator: builds the bucket client from a provider and credential;
        defaults to `authenticate`
    """
    if argv is None:
        argv = sys.argv[1:]
    if authenticator is None:
        authenticator = authenticate

    try:
        log_handler = configure_logging(LOG_FILE, LOG_LEVEL)
    except BucketManagerError as e:
        _report(e)
        return 1

    try:
        return _run(argv, authenticator)
    finally:
        remove_logging(log_handler)


def _run(argv: List[str], authenticator: Authenticator) -> int:
    try:
        request = parse_args(argv)
        credential = load_credential(request.email_address, request.private_key_path)
        client = authenticator(PROVIDER, credential)
    except BucketManagerError as e:
        _report(e)
        return 1

    status = 0
    try:
        with BucketManager(client) as manager:
            try:
                _DISPATCH[request.command](manager, request)
            except OperationError as e:
                _report(e)
                status = 1
    except BucketManagerError as e:
        # release failure
        _report(e)
        status = 1

    return status


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
