"""
Error taxonomy shared by all three services.

Leaf sources raise one of the ``ServiceError`` subclasses below; the
catalog aggregator propagates them unchanged (or records them, in the
lenient failure modes) and the API layer converts them into an
``HTTPException`` whose ``detail`` names the error kind, the resource
and the offending identifier.
"""

from typing import Any, Dict, Optional

from fastapi import HTTPException, status


class ServiceError(Exception):
    """Base class for errors that map onto an HTTP error response."""

    kind = "service_error"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, *, resource: str, identifier: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.resource = resource
        self.identifier = identifier

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.kind,
            "resource": self.resource,
            "identifier": None if self.identifier is None else str(self.identifier),
            "message": self.message,
        }

    def to_http_exception(self) -> HTTPException:
        return HTTPException(status_code=self.status_code, detail=self.to_dict())


class NotFound(ServiceError):
    """The requested user or item does not exist."""

    kind = "not_found"
    status_code = status.HTTP_404_NOT_FOUND


class UpstreamUnavailable(ServiceError):
    """A downstream service could not be reached."""

    kind = "upstream_unavailable"
    status_code = status.HTTP_502_BAD_GATEWAY


class UpstreamBadResponse(ServiceError):
    """A downstream service answered with an error status or an undecodable body."""

    kind = "upstream_bad_response"
    status_code = status.HTTP_502_BAD_GATEWAY

    def __init__(
        self,
        message: str,
        *,
        resource: str,
        identifier: Any = None,
        upstream_status: Optional[int] = None,
    ) -> None:
        super().__init__(message, resource=resource, identifier=identifier)
        self.upstream_status = upstream_status


class UpstreamTimeout(ServiceError):
    """A downstream call exceeded its deadline."""

    kind = "timeout"
    status_code = status.HTTP_504_GATEWAY_TIMEOUT
