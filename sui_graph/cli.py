"""Command-line interface for querying objects through the resolution layer."""
from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Any

from .chains.sui import SuiClient
from .config import load_config
from .errors import GraphError, NotFound
from .interfaces.data_provider import DataProvider
from .logging_setup import configure_logging
from .models import ObjectFilter, SuiAddress
from .nodes import Owner
from .providers import RpcDataProvider
from .services import FieldError, resolve_fields, to_json_value

OBJECT_SELECTIONS: dict[str, dict[str, Any] | None] = {
    "location": None,
    "version": None,
    "digest": None,
    "storage_rebate": None,
    "kind": None,
    "owner": None,
    "bcs": None,
    "previous_transaction_block": None,
}


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse CLI parser."""
    parser = argparse.ArgumentParser(
        prog="sui-graph",
        description="Resolve Sui objects, owners and balances",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to config.yaml (default: config.yaml in project root)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )

    sub = parser.add_subparsers(dest="command")

    object_parser = sub.add_parser("object", help="Fetch a single object")
    object_parser.add_argument("id", help="Object address")
    object_parser.add_argument(
        "--version", type=int, default=None, help="Historical version to fetch"
    )

    owned_parser = sub.add_parser("owned", help="List objects owned by an address")
    owned_parser.add_argument("owner", help="Owner address")
    owned_parser.add_argument("--first", type=int, default=None)
    owned_parser.add_argument("--after", default=None)
    owned_parser.add_argument("--last", type=int, default=None)
    owned_parser.add_argument("--before", default=None)
    owned_parser.add_argument("--package", default=None, help="Package address")
    owned_parser.add_argument("--module", default=None, help="Module within --package")
    owned_parser.add_argument("--type", dest="ty", default=None, help="Move type tag")

    balance_parser = sub.add_parser("balance", help="Coin balance of an address")
    balance_parser.add_argument("owner", help="Owner address")
    balance_parser.add_argument("--coin-type", default=None)

    tx_parser = sub.add_parser("tx", help="Fetch a transaction block by digest")
    tx_parser.add_argument("digest")

    return parser


def build_filter(args: argparse.Namespace) -> ObjectFilter | None:
    """Object filter from ``owned`` flags, or ``None`` when none were given."""
    query_filter = ObjectFilter(
        package=SuiAddress.from_str(args.package) if args.package else None,
        module=args.module,
        ty=args.ty,
    )
    return None if query_filter.is_empty() else query_filter


async def execute(args: argparse.Namespace, provider: DataProvider) -> dict[str, Any]:
    """Run the selected command against ``provider`` and return the JSON output."""
    if args.command == "object":
        address = SuiAddress.from_str(args.id)
        obj = await provider.fetch_obj(address, args.version)
        if obj is None:
            raise NotFound(f"Object {address} not found")
        return to_json_value(await resolve_fields(obj, OBJECT_SELECTIONS, provider))

    if args.command == "owned":
        owner = Owner(SuiAddress.from_str(args.owner))
        selections = {
            "location": None,
            "object_connection": {
                "first": args.first,
                "after": args.after,
                "last": args.last,
                "before": args.before,
                "filter": build_filter(args),
            },
        }
        return to_json_value(await resolve_fields(owner, selections, provider))

    if args.command == "balance":
        owner = Owner(SuiAddress.from_str(args.owner))
        selections = {"location": None, "balance": {"type_": args.coin_type}}
        return to_json_value(await resolve_fields(owner, selections, provider))

    if args.command == "tx":
        tx = await provider.fetch_tx(args.digest)
        if tx is None:
            raise NotFound(f"Transaction {args.digest} not found")
        return {"data": to_json_value(tx), "errors": []}

    raise ValueError(f"Unknown command: {args.command}")


async def _run(args: argparse.Namespace) -> int:
    """Execute the selected command, print JSON, return the exit code."""
    configure_logging(args.log_level)
    config = load_config(args.config)
    provider = RpcDataProvider(SuiClient(config.provider), config.pagination)

    try:
        output = await execute(args, provider)
    except GraphError as e:
        error = FieldError(args.command, e.code, str(e))
        output = {"data": None, "errors": [to_json_value(error)]}

    print(json.dumps(output, indent=2))
    return 1 if output["errors"] else 0


def main() -> None:
    """Entry point."""
    parser = build_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    sys.exit(asyncio.run(_run(args)))
