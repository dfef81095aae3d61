"""Command line front end for the VTHO gas calculator."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from gas_core.constants import DEFAULT_CONSTANTS, ProtocolConstants, load_constants
from gas_core.engine import calculate_fee
from gas_core.errors import InvalidParameter, UnknownProfile
from gas_core.models import PRIORITY_TIERS, TransactionShape
from gas_core.profiles import apply_profile, list_profiles, lookup_profile

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="vtho-gas")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    calculate_parser = subparsers.add_parser("calculate")
    calculate_parser.add_argument("--clauses", type=int, default=1)
    calculate_parser.add_argument("--zero-bytes", type=int, default=0)
    calculate_parser.add_argument("--non-zero-bytes", type=int, default=0)
    calculate_parser.add_argument("--vm-gas", type=_parse_number, default=0)
    calculate_parser.add_argument("--gas-price-coef", type=int, default=0)
    calculate_parser.add_argument("--contract-creation", action="store_true")
    calculate_parser.add_argument("--profile")
    _add_constants_arg(calculate_parser)
    calculate_parser.set_defaults(func=_calculate)

    profiles_parser = subparsers.add_parser("profiles")
    profiles_sub = profiles_parser.add_subparsers(dest="profiles_command", required=True)
    profiles_list = profiles_sub.add_parser("list")
    profiles_list.set_defaults(func=_profiles_list)
    profiles_show = profiles_sub.add_parser("show")
    profiles_show.add_argument("name")
    profiles_show.set_defaults(func=_profiles_show)

    tiers_parser = subparsers.add_parser("tiers")
    tiers_parser.set_defaults(func=_tiers)

    constants_parser = subparsers.add_parser("constants")
    _add_constants_arg(constants_parser)
    constants_parser.set_defaults(func=_constants)

    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        return args.func(args)
    except (InvalidParameter, UnknownProfile, ValueError, OSError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2


def _calculate(args: argparse.Namespace) -> int:
    shape = TransactionShape(
        clause_count=args.clauses,
        zero_bytes=args.zero_bytes,
        non_zero_bytes=args.non_zero_bytes,
        vm_gas=args.vm_gas,
        gas_price_coef=args.gas_price_coef,
        is_contract_creation=args.contract_creation,
    )
    if args.profile:
        shape = apply_profile(shape, args.profile)
    report = calculate_fee(shape, constants=_resolve_constants(args.constants))
    _print_json(report.to_dict())
    return 0


def _profiles_list(args: argparse.Namespace) -> int:
    _print_json([profile.to_dict() for profile in list_profiles()])
    return 0


def _profiles_show(args: argparse.Namespace) -> int:
    _print_json(lookup_profile(args.name).to_dict())
    return 0


def _tiers(args: argparse.Namespace) -> int:
    _print_json([tier.to_dict() for tier in PRIORITY_TIERS])
    return 0


def _constants(args: argparse.Namespace) -> int:
    _print_json(_resolve_constants(args.constants).to_dict())
    return 0


def _add_constants_arg(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--constants", help="JSON file of constant overrides, or '-' for stdin")


def _resolve_constants(source: Optional[str]) -> ProtocolConstants:
    if source is None:
        return DEFAULT_CONSTANTS
    if source == "-":
        raw = sys.stdin.read()
    else:
        raw = Path(source).read_text()
    payload = json.loads(raw)
    if not isinstance(payload, dict):
        raise InvalidParameter("Constants file must contain a JSON object.")
    logger.info("Loaded constant overrides from %s: %s", source, sorted(payload))
    return load_constants(payload)


def _parse_number(value: str) -> float | int:
    try:
        return int(value)
    except ValueError:
        return float(value)


def _print_json(payload: object) -> None:
    print(json.dumps(payload, indent=2))


if __name__ == "__main__":
    raise SystemExit(main())
