"""
RPC error taxonomy

Every error a procedure can report to a caller is an RPCError. Anything
else raised by a collaborator is wrapped in CollaboratorFailure before it
leaves the RPC layer.
"""
from typing import Any, Dict, List, Optional

from fastapi import status


class RPCError(Exception):
    """
    Base exception for procedure errors.

    All errors surfaced to RPC callers inherit from this class.
    """

    code: str = "INTERNAL_SERVER_ERROR"
    http_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, details: Optional[List[Dict[str, Any]]] = None):
        self.message = message
        self.details = details or []
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to the error envelope returned by the HTTP binding"""
        return {
            "status": "error",
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details,
            },
        }


class InvalidInput(RPCError):
    """Input failed the procedure's shape check. No collaborator was called."""

    code = "BAD_REQUEST"
    http_status = status.HTTP_400_BAD_REQUEST


class Unauthorized(RPCError):
    code = "UNAUTHORIZED"
    http_status = status.HTTP_401_UNAUTHORIZED


class Forbidden(RPCError):
    code = "FORBIDDEN"
    http_status = status.HTTP_403_FORBIDDEN


class ProcedureNotFound(RPCError):
    code = "NOT_FOUND"
    http_status = status.HTTP_404_NOT_FOUND


class MethodNotSupported(RPCError):
    code = "METHOD_NOT_SUPPORTED"
    http_status = status.HTTP_405_METHOD_NOT_ALLOWED


class CollaboratorFailure(RPCError):
    """
    A collaborator (database, chat backend, ...) failed.

    The message is opaque. The original exception is chained
    and logged by the procedure that caught it.
    """

    code = "INTERNAL_SERVER_ERROR"
    http_status = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str = "Internal server error", details: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message, details)
