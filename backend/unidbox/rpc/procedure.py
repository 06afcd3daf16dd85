"""
RPC procedures, routers and the in-process caller

A procedure is a named query or mutation with an input schema and an
access level. Every call goes through Procedure.invoke:

    access gate -> input validation (Procedure.parse) -> handler

Validation failures raise InvalidInput before the handler runs. Any
non-RPC exception raised by the handler is logged and re-raised as
CollaboratorFailure. Lazy results (iterators) get the same treatment
while they are consumed.

Author: TM3
Date: 2026-01-30
"""
import logging
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from fastapi import Request, Response
from pydantic import TypeAdapter, ValidationError
from sqlalchemy.orm import Session

from unidbox.core.auth import SessionUser
from unidbox.core.exceptions import (
    CollaboratorFailure,
    Forbidden,
    InvalidInput,
    ProcedureNotFound,
    RPCError,
    Unauthorized,
)

logger = logging.getLogger(__name__)


class ProcedureKind(str, Enum):
    QUERY = "query"
    MUTATION = "mutation"


class AccessLevel(str, Enum):
    PUBLIC = "public"
    AUTHENTICATED = "authenticated"
    ADMIN = "admin"


@dataclass
class RPCContext:
    """
    Per-call context handed to every procedure handler

    request/response are only set when the call comes through HTTP.
    """

    db: Optional[Session] = None
    user: Optional[SessionUser] = None
    request: Optional[Request] = None
    response: Optional[Response] = None
    chat_service_factory: Optional[Callable[[], Any]] = None
    ranker: Optional[Any] = None

    def chat_service(self):
        """The chat collaborator; the shared ChatService unless a factory is given"""
        if self.chat_service_factory is not None:
            return self.chat_service_factory()
        from unidbox.services.chat_service import get_chat_service
        return get_chat_service()


Handler = Callable[[RPCContext, Any], Any]


def format_validation_errors(error: ValidationError) -> List[Dict[str, Any]]:
    """pydantic errors reduced to loc/msg/type entries"""
    return [
        {"loc": list(err["loc"]), "msg": err["msg"], "type": err["type"]}
        for err in error.errors()
    ]


class Procedure:
    """A single RPC endpoint"""

    def __init__(
        self,
        path: str,
        kind: ProcedureKind,
        handler: Handler,
        input_schema: Any = None,
        access: AccessLevel = AccessLevel.PUBLIC,
    ):
        self.path = path
        self.kind = kind
        self.handler = handler
        self.access = access
        self.input_adapter: Optional[TypeAdapter] = (
            TypeAdapter(input_schema) if input_schema is not None else None
        )

    def __repr__(self) -> str:
        return f"<Procedure {self.path} ({self.kind.value}, {self.access.value})>"

    def check_access(self, ctx: RPCContext) -> None:
        """
        Raises:
            Unauthorized: no session user on a non-public procedure
            Forbidden: admin procedure called by a non-admin
        """
        if self.access == AccessLevel.PUBLIC:
            return
        if ctx.user is None:
            raise Unauthorized("Please login (10001)")
        if self.access == AccessLevel.ADMIN and not ctx.user.has_role("admin"):
            raise Forbidden("You do not have required permission (10002)")

    def parse(self, raw_input: Any) -> Any:
        """
        Validate raw input against the procedure's schema

        Procedures without a schema ignore their input.

        Raises:
            InvalidInput: with pydantic error details
        """
        if self.input_adapter is None:
            return None
        try:
            return self.input_adapter.validate_python(raw_input)
        except ValidationError as e:
            logger.warning(f"Invalid input for {self.path}: {e.error_count()} error(s)")
            raise InvalidInput(f"Invalid input for {self.path}", details=format_validation_errors(e))

    def _failure(self, error: Exception) -> CollaboratorFailure:
        logger.error(f"Procedure {self.path} failed: {error}", exc_info=error)
        return CollaboratorFailure()

    def _guard(self, results: Iterator) -> Iterator:
        try:
            yield from results
        except RPCError:
            raise
        except Exception as e:
            raise self._failure(e) from e

    def invoke(self, ctx: RPCContext, raw_input: Any = None) -> Any:
        self.check_access(ctx)
        value = self.parse(raw_input)
        try:
            result = self.handler(ctx, value)
        except RPCError:
            raise
        except Exception as e:
            raise self._failure(e) from e
        if isinstance(result, Iterator):
            return self._guard(result)
        return result


class Router:
    """
    Group of procedures sharing a name prefix

    Usage:
        products = Router()

        @products.query("getById", input=ProductId)
        def get_by_id(ctx, product_id):
            ...
    """

    def __init__(self):
        self.procedures: Dict[str, Procedure] = {}

    def _register(self, name: str, kind: ProcedureKind, input: Any, access: AccessLevel):
        def decorator(handler: Handler) -> Handler:
            self.procedures[name] = Procedure(name, kind, handler, input, access)
            return handler
        return decorator

    def query(self, name: str, input: Any = None, access: AccessLevel = AccessLevel.PUBLIC):
        return self._register(name, ProcedureKind.QUERY, input, access)

    def mutation(self, name: str, input: Any = None, access: AccessLevel = AccessLevel.PUBLIC):
        return self._register(name, ProcedureKind.MUTATION, input, access)


class AppRouter:
    """Flat registry of every procedure, keyed by 'group.name'"""

    def __init__(self, routers: Dict[str, Router]):
        self.procedures: Dict[str, Procedure] = {}
        for group, router in routers.items():
            for name, procedure in router.procedures.items():
                procedure.path = f"{group}.{name}"
                self.procedures[procedure.path] = procedure

    def get(self, path: str) -> Procedure:
        procedure = self.procedures.get(path)
        if procedure is None:
            raise ProcedureNotFound(f"No procedure found on path \"{path}\"")
        return procedure


class Caller:
    """Calls procedures in-process with a fixed context"""

    def __init__(self, router: AppRouter, ctx: RPCContext):
        self.router = router
        self.ctx = ctx

    def call(self, path: str, raw_input: Any = None) -> Any:
        return self.router.get(path).invoke(self.ctx, raw_input)


def create_caller(router: AppRouter, ctx: RPCContext) -> Caller:
    return Caller(router, ctx)
