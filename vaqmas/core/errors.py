"""Error types shared by services and routes."""
from typing import Any, Dict, Optional

# Callable error codes and the HTTP status the callable protocol maps them to
CALLABLE_STATUS = {
    "invalid-argument": 400,
    "unauthenticated": 401,
    "permission-denied": 403,
    "not-found": 404,
    "internal": 500,
}


class CallableError(Exception):
    """Typed failure of a callable function, mirrored on the wire as
    ``{"error": {"status": "PERMISSION_DENIED", "message": ...}}``."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        if code not in CALLABLE_STATUS:
            raise ValueError(f"Unknown callable error code: {code}")
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details

    @property
    def http_status(self) -> int:
        return CALLABLE_STATUS[self.code]

    def to_wire(self) -> Dict[str, Any]:
        error: Dict[str, Any] = {
            "status": self.code.replace("-", "_").upper(),
            "message": self.message,
        }
        if self.details is not None:
            error["details"] = self.details
        return {"error": error}


class NotFoundError(Exception):
    def __init__(self, collection: str, doc_id: str):
        super().__init__(f"{collection}/{doc_id} not found")
        self.collection = collection
        self.doc_id = doc_id
