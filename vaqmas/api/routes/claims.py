"""Callable functions, served with the Firebase callable wire format.

Request:  {"data": {...}}
Success:  {"result": {...}}
Failure:  {"error": {"status": "PERMISSION_DENIED", "message": "..."}}
"""
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from vaqmas.api.deps import get_context, get_optional_caller
from vaqmas.core.errors import CallableError
from vaqmas.core.logger import get_logger
from vaqmas.services.claims_service import set_admin_claim

logger = get_logger("callable")

router = APIRouter(prefix="/functions", tags=["functions"])


@router.post("/setAdminClaim")
def set_admin_claim_callable(
    body: Optional[Any] = Body(None),
    caller: Optional[dict] = Depends(get_optional_caller),
    context=Depends(get_context),
):
    data = body.get("data") if isinstance(body, dict) else None
    try:
        result = set_admin_claim(context.auth, context.db, caller, data)
    except CallableError as exc:
        return JSONResponse(status_code=exc.http_status, content=exc.to_wire())
    except Exception:
        logger.exception("setAdminClaim failed")
        error = CallableError("internal", "INTERNAL")
        return JSONResponse(status_code=error.http_status, content=error.to_wire())

    return {"result": result.model_dump()}
