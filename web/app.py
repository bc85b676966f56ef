"""Local-first FastAPI shell for voucher call derivation."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from voucher_engine.action import ConfigurationError, VoucherLookupError, VoucherRequestAction
from voucher_engine.batch import BatchBuilder
from voucher_engine.config import ConfigLoadError, config_from_dict
from voucher_engine.fees import amount_with_fee
from voucher_engine.models import AddressResolutionError, VoucherRequest, call_to_dict

logger = logging.getLogger(__name__)

app = FastAPI(title="Voucher Calls", description="Local-first voucher deposit call builder")


class FeeRequest(BaseModel):
    amount: int
    fee_percent: float


class ValidateRequest(BaseModel):
    request: Dict[str, Any]


class CallsRequest(BaseModel):
    chain_id: int
    config: Dict[str, Any]
    request: Dict[str, Any]
    fee_percent: Optional[float] = None


@app.middleware("http")
async def _local_only(request: Request, call_next):
    client = request.client
    if client is not None:
        host = client.host
        if host not in {"127.0.0.1", "::1", "testclient"}:
            return JSONResponse({"error": "Remote access disabled."}, status_code=403)
    return await call_next(request)


async def _handle_errors(request: Request, exc: Exception):
    return JSONResponse({"error": str(exc)}, status_code=400)


async def _handle_lookup_errors(request: Request, exc: Exception):
    return JSONResponse({"error": str(exc)}, status_code=404)


for _exc_class in (
    AddressResolutionError,
    ConfigLoadError,
    ConfigurationError,
    ValueError,
    KeyError,
):
    app.add_exception_handler(_exc_class, _handle_errors)
app.add_exception_handler(VoucherLookupError, _handle_lookup_errors)


@app.post("/api/fee")
async def fee(payload: FeeRequest):
    return {
        "amount": payload.amount,
        "fee_percent": payload.fee_percent,
        "amount_with_fee": amount_with_fee(payload.amount, payload.fee_percent),
    }


@app.post("/api/validate")
async def validate(payload: ValidateRequest):
    request = VoucherRequest.from_dict(payload.request)
    result = VoucherRequestAction.try_create(request)
    if not result.ok:
        return {"request_id": request.request_id, "valid": False, "error": str(result.error)}
    return {
        "request_id": request.request_id,
        "valid": True,
        "native_amount": result.action.native_amount,
    }


@app.post("/api/calls")
async def encode_calls(payload: CallsRequest):
    config = config_from_dict(payload.config)
    if payload.fee_percent is not None:
        config = config.with_fee_percent(payload.fee_percent)
    request = VoucherRequest.from_dict(payload.request)

    batch = BatchBuilder(chain_id=payload.chain_id, config=config)
    batch.add_voucher_request(request)
    calls = await batch.encode_calls()
    logger.info("Encoded %d calls for voucher %s.", len(calls), request.request_id)

    return {
        "chain_id": payload.chain_id,
        "calls": [call_to_dict(call, payload.chain_id) for call in calls],
    }
