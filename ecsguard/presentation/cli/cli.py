"""
CLI Module

Architectural Intent:
- Command-line interface for ecsguard
- Validates create-server-group descriptions stored as JSON files
- Delegates to application use cases via composition root
- Supports --verbose/--debug flags for log level control

Exit codes: 0 valid, 1 findings reported, 2 input could not be read or parsed.
"""

import argparse
import json
import logging
import sys
import traceback
from typing import Optional, Sequence

from ecsguard.application.description_mapper import DescriptionParseError
from ecsguard.application.dtos.validation_dtos import (
    ValidateServerGroupRequest,
    ValidateServerGroupResponse,
)
from ecsguard.infrastructure.config import load_config
from ecsguard.infrastructure.logging import configure_logging_from_config

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_BAD_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ecsguard",
        description="ecsguard: validate ECS create server group descriptions",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose output"
    )
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output with tracebacks"
    )
    parser.add_argument(
        "--config", "-c", default=None, help="Path to ecsguard.json config"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    validate_parser = subparsers.add_parser(
        "validate", help="Validate a create server group description"
    )
    validate_parser.add_argument(
        "description_file", help="Path to a JSON description, or - for stdin"
    )
    validate_parser.add_argument(
        "--json", action="store_true", help="Print the result as JSON"
    )
    return parser


def _read_payload(path: str):
    if path == "-":
        return json.load(sys.stdin)
    with open(path) as f:
        return json.load(f)


def _print_response(response: ValidateServerGroupResponse, as_json: bool) -> None:
    if as_json:
        print(json.dumps(response.to_dict(), indent=2))
        return
    if response.valid:
        print(f"[+] {response.source}: description is valid.")
        return
    print(f"[-] {response.source}: {len(response.errors)} finding(s)")
    for error in response.errors:
        print(f"    {error}")


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    config = load_config(args.config)

    level_override = None
    if args.debug:
        level_override = logging.DEBUG
    elif args.verbose:
        level_override = logging.INFO
    configure_logging_from_config(config, level_override)

    if args.command != "validate":
        parser.print_help()
        return

    from ecsguard.composition_root import create_container

    container = create_container(config)
    source = "<stdin>" if args.description_file == "-" else args.description_file

    try:
        payload = _read_payload(args.description_file)
        response = container.validate_server_group.execute(
            ValidateServerGroupRequest(payload=payload, source=source)
        )
    except FileNotFoundError as e:
        print(f"[-] Description file not found: {e.filename}")
        sys.exit(EXIT_BAD_INPUT)
    except OSError as e:
        print(f"[-] Cannot read {source}: {e.strerror or e}")
        if args.debug:
            traceback.print_exc()
        sys.exit(EXIT_BAD_INPUT)
    except json.JSONDecodeError as e:
        print(f"[-] {source} is not valid JSON: {e}")
        sys.exit(EXIT_BAD_INPUT)
    except (DescriptionParseError, ValueError) as e:
        print(f"[-] Cannot read description from {source}: {e}")
        if args.debug:
            traceback.print_exc()
        sys.exit(EXIT_BAD_INPUT)

    _print_response(response, args.json)
    if not response.valid:
        sys.exit(EXIT_INVALID)


if __name__ == "__main__":
    main()
