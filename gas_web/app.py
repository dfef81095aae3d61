"""Local-first FastAPI shell for the VTHO gas calculator."""

from __future__ import annotations

import logging
from typing import Optional, Union

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from gas_core.constants import DEFAULT_CONSTANTS
from gas_core.engine import calculate_fee
from gas_core.errors import InvalidParameter, UnknownProfile
from gas_core.models import PRIORITY_TIERS, TransactionShape
from gas_core.profiles import apply_profile, list_profiles, lookup_profile

logger = logging.getLogger(__name__)

app = FastAPI(title="VTHO Gas Calculator", description="Local-first fee calculator")


class FeeRequest(BaseModel):
    clause_count: int = 1
    zero_bytes: int = 0
    non_zero_bytes: int = 0
    vm_gas: Union[int, float] = 0
    gas_price_coef: int = 0
    is_contract_creation: bool = False
    profile: Optional[str] = None


@app.middleware("http")
async def _local_only(request: Request, call_next):
    client = request.client
    if client is not None:
        host = client.host
        if host not in {"127.0.0.1", "::1", "testclient"}:
            return JSONResponse({"error": "Remote access disabled."}, status_code=403)
    return await call_next(request)


async def _invalid_parameter(request: Request, exc: Exception):
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse({"error": str(exc)}, status_code=400)


async def _unknown_profile(request: Request, exc: Exception):
    return JSONResponse({"error": str(exc)}, status_code=404)


app.add_exception_handler(InvalidParameter, _invalid_parameter)
app.add_exception_handler(UnknownProfile, _unknown_profile)


@app.post("/api/fee")
async def calculate(payload: FeeRequest):
    shape = TransactionShape(
        clause_count=payload.clause_count,
        zero_bytes=payload.zero_bytes,
        non_zero_bytes=payload.non_zero_bytes,
        vm_gas=payload.vm_gas,
        gas_price_coef=payload.gas_price_coef,
        is_contract_creation=payload.is_contract_creation,
    )
    if payload.profile:
        try:
            shape = apply_profile(shape, payload.profile)
        except UnknownProfile as exc:
            raise InvalidParameter(str(exc)) from exc
    return calculate_fee(shape).to_dict()


@app.get("/api/profiles")
async def profiles():
    return [profile.to_dict() for profile in list_profiles()]


@app.get("/api/profiles/{name}")
async def profile(name: str):
    return lookup_profile(name).to_dict()


@app.get("/api/tiers")
async def tiers():
    return [tier.to_dict() for tier in PRIORITY_TIERS]


@app.get("/api/constants")
async def constants():
    return DEFAULT_CONSTANTS.to_dict()
