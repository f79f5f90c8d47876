"""CLI entrypoints for inspecting header presets and policies."""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence
from pathlib import Path

import structlog

from secure_headers.config import configure_structlog, get_settings, merge_overrides
from secure_headers.naming import normalize_header_name
from secure_headers.presets import PRESETS, get_preset
from secure_headers.transform import HeaderPolicy, build_transformer, partition_headers
from secure_headers.types import HeaderDirective

logger = structlog.get_logger(__name__)


def _parse_pair(raw: str) -> tuple[str, str]:
    """Parse a NAME=VALUE command-line argument."""
    name, separator, value = raw.partition("=")
    if not separator or not name.strip():
        raise argparse.ArgumentTypeError(f"expected NAME=VALUE, got {raw!r}")
    return name.strip(), value.strip()


def _resolve_config(
    preset: str | None, overrides: Sequence[tuple[str, str]]
) -> dict[str, HeaderDirective]:
    """Build header configuration from a preset (or settings) plus overrides."""
    base = get_settings().headers.resolve() if preset is None else get_preset(preset)
    return merge_overrides(base, overrides)


def _policy_payload(policy: HeaderPolicy) -> dict[str, object]:
    return {"add": dict(policy.add), "remove": sorted(policy.remove)}


def _load_response_headers(path: Path | None, pairs: Sequence[tuple[str, str]]) -> dict[str, str]:
    """Load response headers from an optional JSON file and NAME=VALUE pairs."""
    headers: dict[str, str] = {}
    if path is not None:
        with path.open("r", encoding="utf-8") as handle:
            payload = json.load(handle)
        if not isinstance(payload, dict):
            raise ValueError("response headers file must contain a JSON object")
        headers.update(
            {normalize_header_name(name): str(value) for name, value in payload.items()}
        )
    headers.update({normalize_header_name(name): value for name, value in pairs})
    return headers


def _run_apply(args: argparse.Namespace) -> int:
    """Apply the resolved policy to sample response headers."""
    policy = partition_headers(_resolve_config(args.preset, args.header))
    try:
        response_headers = _load_response_headers(args.input, args.response_header)
    except (OSError, ValueError) as exc:
        logger.error("response_headers_unreadable", path=str(args.input), error=str(exc))
        return 1
    transform = build_transformer(policy.add, policy.remove)
    print(json.dumps(dict(transform(response_headers)), indent=2, sort_keys=True))
    return 0


def _build_parser() -> argparse.ArgumentParser:
    """Build command-line parser for supported commands."""
    parser = argparse.ArgumentParser(prog="python -m secure_headers.cli")
    subcommands = parser.add_subparsers(dest="command", required=True)

    subcommands.add_parser("presets", help="List built-in preset names.")

    policy_options = argparse.ArgumentParser(add_help=False)
    policy_options.add_argument(
        "--preset",
        choices=sorted(PRESETS),
        default=None,
        help="Base preset. Defaults to SECURE_HEADERS_HEADERS__PRESET settings.",
    )
    policy_options.add_argument(
        "--header",
        type=_parse_pair,
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Override a header; VALUE 'remove' strips it.",
    )

    subcommands.add_parser(
        "show", parents=[policy_options], help="Print the resolved add/remove policy."
    )

    apply_parser = subcommands.add_parser(
        "apply", parents=[policy_options], help="Apply the policy to sample response headers."
    )
    apply_parser.add_argument(
        "--response-header",
        type=_parse_pair,
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Header set by the application before the policy runs.",
    )
    apply_parser.add_argument(
        "--input",
        type=Path,
        default=None,
        help="JSON object file with response headers.",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run CLI command."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_structlog(get_settings(), stream=sys.stderr)

    if args.command == "presets":
        print(json.dumps(list(PRESETS)))
        return 0
    if args.command == "show":
        policy = partition_headers(_resolve_config(args.preset, args.header))
        print(json.dumps(_policy_payload(policy), indent=2, sort_keys=True))
        return 0
    if args.command == "apply":
        return _run_apply(args)
    parser.error("Unsupported command")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
