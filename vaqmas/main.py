from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from google.api_core.exceptions import GoogleAPIError

from vaqmas.api.routes.router import api_router
from vaqmas.core.context import AppContext, build_context
from vaqmas.core.errors import NotFoundError
from vaqmas.core.logger import get_logger

logger = get_logger("main")


def create_app(context: Optional[AppContext] = None) -> FastAPI:
    app = FastAPI(title="VAQMAS Clinic Backend")
    app.state.context = context

    @app.on_event("startup")
    def startup():
        """Initialize Firebase and the shared application context."""
        if app.state.context is None:
            app.state.context = build_context()

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(GoogleAPIError)
    async def backend_error_handler(request: Request, exc: GoogleAPIError):
        # Surfaced to the admin as an inline error; they retry by resubmitting
        logger.error("Firebase call failed on %s %s: %s", request.method, request.url.path, exc)
        if app.state.context is not None:
            app.state.context.notifications.error("Error de comunicación con el servidor")
        return JSONResponse(status_code=502, content={"detail": str(exc)})

    @app.get("/")
    async def root():
        return {"message": "VAQMAS Clinic Backend is running"}

    @app.get("/health")
    async def health_check():
        return {"status": "ok"}

    app.include_router(api_router)
    return app


app = create_app()
