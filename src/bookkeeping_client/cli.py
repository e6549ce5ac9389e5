"""
Command-line interface for bookkeeping_client.

Checks and canonicalises User payloads (as returned by or sent to the
Bookkeeping API) stored in JSON or YAML files.
"""

import argparse
import sys
import uuid
from typing import List, Optional

from pydantic import ValidationError

from bookkeeping_client.core.codec import encode_users, load_users
from bookkeeping_client.core.exceptions import BookkeepingClientException
from bookkeeping_client.core.logger import (
    configure_root_logger,
    get_logger,
    push_batch_id,
    reset_batch_id,
)
from bookkeeping_client.models.codec_config import CodecConfig

logger = get_logger(__name__)


def validate_file(path: str, config: Optional[CodecConfig] = None) -> int:
    """
    Validate a payload file without producing output.

    Args:
        path: Path to a JSON/YAML file with one user or an array of users
        config: Codec options (``forbid_unknown_keys`` is the one that matters here)

    Returns:
        Number of valid users in the file

    Raises:
        FileNotFoundError: If the file doesn't exist
        OSError: If the path is a directory or can't be read
        PayloadDecodeError: If the payload is malformed or a user is invalid

    Example:
        >>> validate_file("/path/to/users.json")
        3
    """
    logger.info(f"Validating payload: {path}")
    users = load_users(path, config)
    logger.info(f"Payload is valid ({len(users)} user(s))")
    return len(users)


def normalize_file(path: str, config: Optional[CodecConfig] = None) -> str:
    """Decode a payload file and return its canonical JSON array encoding."""
    users = load_users(path, config)
    logger.info(f"Normalized {len(users)} user(s) from {path}")
    return encode_users(users, config)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bookkeeping-users",
        description="Validate and normalize Bookkeeping User payloads",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help="Command to execute"
    )

    validate_parser = subparsers.add_parser(
        "validate",
        help="Check that a payload file holds valid users"
    )
    validate_parser.add_argument(
        "file",
        help="Path to payload file (JSON or YAML)"
    )

    normalize_parser = subparsers.add_parser(
        "normalize",
        help="Print the canonical JSON encoding of a payload file"
    )
    normalize_parser.add_argument(
        "file",
        help="Path to payload file (JSON or YAML)"
    )
    normalize_parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="Indent the JSON output by this many spaces"
    )
    normalize_parser.add_argument(
        "--sort-keys",
        action="store_true",
        help="Sort keys in the JSON output"
    )

    for sub in (validate_parser, normalize_parser):
        sub.add_argument(
            "--strict",
            action="store_true",
            help="Reject user objects with keys other than externalId, id and name"
        )
        sub.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Enable verbose logging"
        )

    return parser


def cli(argv: Optional[List[str]] = None) -> int:
    """
    Entry point for the ``bookkeeping-users`` command.

    Usage:
        bookkeeping-users validate users.json
        bookkeeping-users normalize users.yaml --indent 2 --sort-keys

    Returns the process exit code (0 on success, 1 on failure).
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    configure_root_logger("DEBUG" if args.verbose else "INFO")
    token = push_batch_id(uuid.uuid4().hex[:12])
    try:
        if args.command == "validate":
            config = CodecConfig(forbid_unknown_keys=args.strict)
            validate_file(args.file, config)
            return 0

        config = CodecConfig(
            indent=args.indent,
            sort_keys=args.sort_keys,
            forbid_unknown_keys=args.strict,
        )
        print(normalize_file(args.file, config))
        return 0

    except (BookkeepingClientException, ValidationError, OSError, ImportError) as e:
        logger.error(f"{args.command.capitalize()} failed: {e}")
        return 1
    finally:
        reset_batch_id(token)


def main() -> None:
    sys.exit(cli())


if __name__ == "__main__":
    main()
