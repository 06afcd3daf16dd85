"""
RPC HTTP binding

GET  {RPC_PREFIX}/{procedure}?input=<json>   queries
POST {RPC_PREFIX}/{procedure}                 mutations, JSON body is the input

Successful calls return {"status": "success", "data": ...} with camelCase
keys. Errors are raised as RPCError and rendered by the handler
registered in unidbox.main.

Author: TM3
Date: 2026-01-30
"""
import json
import logging
from collections.abc import Iterator
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, Request, Response
from fastapi.encoders import jsonable_encoder
from sqlalchemy.orm import Session

from unidbox.core.auth import get_session_user
from unidbox.core.config import settings
from unidbox.core.database import get_db
from unidbox.core.exceptions import InvalidInput, MethodNotSupported
from unidbox.rpc.procedure import ProcedureKind, RPCContext
from unidbox.rpc.routers import app_router

logger = logging.getLogger(__name__)

router = APIRouter(prefix=settings.RPC_PREFIX, tags=["RPC"])


def get_rpc_context(request: Request, response: Response, db: Session = Depends(get_db)) -> RPCContext:
    """Build the per-request procedure context"""
    return RPCContext(
        db=db,
        user=get_session_user(request),
        request=request,
        response=response,
    )


def decode_query_input(raw: Optional[str]) -> Any:
    """Parse the ?input= parameter; absent means no input"""
    if raw is None or raw == "":
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise InvalidInput("Malformed input JSON", details=[{"loc": ["input"], "msg": str(e), "type": "json_invalid"}])


def success(result: Any) -> Dict[str, Any]:
    if isinstance(result, Iterator):
        result = list(result)
    return {"status": "success", "data": jsonable_encoder(result, by_alias=True)}


@router.get("/{path}")
def call_query(
    path: str,
    input: Optional[str] = Query(None, description="JSON encoded procedure input"),
    ctx: RPCContext = Depends(get_rpc_context),
):
    """Run a query procedure"""
    procedure = app_router.get(path)
    if procedure.kind != ProcedureKind.QUERY:
        raise MethodNotSupported(f"Procedure {path} is a mutation; use POST")
    return success(procedure.invoke(ctx, decode_query_input(input)))


@router.post("/{path}")
def call_mutation(
    path: str,
    body: Any = Body(None),
    ctx: RPCContext = Depends(get_rpc_context),
):
    """Run a mutation procedure"""
    procedure = app_router.get(path)
    if procedure.kind != ProcedureKind.MUTATION:
        raise MethodNotSupported(f"Procedure {path} is a query; use GET")
    return success(procedure.invoke(ctx, body))
