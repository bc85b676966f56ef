"""Operator CLI for deriving voucher deposit calls."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from voucher_engine.action import ConfigurationError, VoucherLookupError, VoucherRequestAction
from voucher_engine.batch import BatchBuilder
from voucher_engine.config import ConfigLoadError, load_config
from voucher_engine.fees import amount_with_fee
from voucher_engine.models import AddressResolutionError, VoucherRequest, call_to_dict

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="voucher-calls")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    fee_parser = subparsers.add_parser("fee")
    fee_parser.add_argument("--amount", required=True, type=int)
    fee_parser.add_argument("--fee-percent", required=True, type=float)
    fee_parser.set_defaults(func=_fee)

    validate_parser = subparsers.add_parser("validate")
    validate_parser.add_argument("--request", required=True)
    validate_parser.set_defaults(func=_validate)

    calls_parser = subparsers.add_parser("calls")
    calls_parser.add_argument("--request", required=True)
    calls_parser.add_argument("--config", required=True)
    calls_parser.add_argument("--chain-id", required=True, type=int)
    calls_parser.add_argument("--fee-percent", type=float)
    calls_parser.set_defaults(func=_calls)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        return args.func(args)
    except (
        ValueError,
        ConfigurationError,
        ConfigLoadError,
        VoucherLookupError,
        AddressResolutionError,
    ) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2


def _fee(args: argparse.Namespace) -> int:
    total = amount_with_fee(args.amount, args.fee_percent)
    print(
        json.dumps(
            {
                "amount": args.amount,
                "fee_percent": args.fee_percent,
                "amount_with_fee": total,
            },
            indent=2,
        )
    )
    return 0


def _validate(args: argparse.Namespace) -> int:
    request = _load_request(args.request)
    result = VoucherRequestAction.try_create(request)
    if not result.ok:
        raise result.error
    print(
        json.dumps(
            {
                "request_id": request.request_id,
                "valid": True,
                "native_amount": result.action.native_amount,
            },
            indent=2,
        )
    )
    return 0


def _calls(args: argparse.Namespace) -> int:
    request = _load_request(args.request)
    config = load_config(Path(args.config))
    if args.fee_percent is not None:
        config = config.with_fee_percent(args.fee_percent)

    batch = BatchBuilder(chain_id=args.chain_id, config=config)
    batch.add_voucher_request(request)
    calls = asyncio.run(batch.encode_calls())
    logger.info("Encoded %d calls for voucher %s.", len(calls), request.request_id)

    print(
        json.dumps(
            {
                "chain_id": args.chain_id,
                "calls": [call_to_dict(call, args.chain_id) for call in calls],
            },
            indent=2,
        )
    )
    return 0


def _load_request(request_source: str) -> VoucherRequest:
    if request_source == "-":
        payload = json.loads(sys.stdin.read())
    else:
        payload = json.loads(Path(request_source).read_text())
    try:
        return VoucherRequest.from_dict(payload)
    except KeyError as exc:
        raise ValueError(f"Voucher request is missing field {exc}.") from exc


if __name__ == "__main__":
    raise SystemExit(main())
