# src/api/outcomes.py
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union


class FailureKind(Enum):
    MISSING_INPUT = "missing_input"
    NETWORK_ERROR = "network_error"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    RATE_LIMITED = "rate_limited"
    UPSTREAM_ERROR = "upstream_error"


# Fixed inbound status per kind. UPSTREAM_ERROR is None: it passes the
# upstream status through (see Failure.http_status).
_HTTP_STATUS: Dict[FailureKind, Optional[int]] = {
    FailureKind.MISSING_INPUT: 400,
    FailureKind.NETWORK_ERROR: 500,
    FailureKind.FORBIDDEN: 403,
    FailureKind.NOT_FOUND: 404,
    FailureKind.RATE_LIMITED: 429,
    FailureKind.UPSTREAM_ERROR: None,
}


@dataclass(frozen=True)
class Success:
    payload: Any


@dataclass(frozen=True)
class Failure:
    kind: FailureKind
    message: str
    details: Any = None
    status: Optional[int] = None

    @property
    def http_status(self) -> int:
        """Status code to answer the inbound request with."""
        fixed = _HTTP_STATUS[self.kind]
        if fixed is not None:
            return fixed
        # A 2xx with an unreadable body is still an upstream failure
        if self.status is None or self.status < 400:
            return 502
        return self.status

    def to_body(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


UpstreamResult = Union[Success, Failure]
