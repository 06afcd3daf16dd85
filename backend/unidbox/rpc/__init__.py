"""
RPC layer - procedures, the application router and its HTTP binding
"""
from unidbox.rpc.procedure import AccessLevel, ProcedureKind, RPCContext, create_caller
from unidbox.rpc.routers import app_router

__all__ = [
    'AccessLevel',
    'ProcedureKind',
    'RPCContext',
    'create_caller',
    'app_router',
]
