"""FastAPI application - trip planner API."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from backend.app.api.routes.activities import router as activities_router
from backend.app.api.routes.health import router as health_router
from backend.app.api.routes.links import router as links_router
from backend.app.api.routes.metrics import router as metrics_router
from backend.app.api.routes.participants import router as participants_router
from backend.app.api.routes.trips import router as trips_router
from backend.app.errors import ClientError, NotFoundError
from backend.app.utils.metrics import metrics

logger = logging.getLogger(__name__)

app = FastAPI(title="plann.er API", version="0.1.0")

# Register routes
app.include_router(health_router, tags=["health"])
app.include_router(metrics_router, tags=["metrics"])
app.include_router(trips_router)
app.include_router(activities_router)
app.include_router(links_router)
app.include_router(participants_router)


@app.exception_handler(ClientError)
async def client_error_handler(request: Request, exc: ClientError) -> JSONResponse:
    """Render client errors as 400 (404 for missing resources)."""
    metrics.inc_client_error(exc.code.value)
    logger.info(f"[{request.method} {request.url.path}] rejected: {exc.code.value}")

    status_code = (
        status.HTTP_404_NOT_FOUND
        if isinstance(exc, NotFoundError)
        else status.HTTP_400_BAD_REQUEST
    )
    return JSONResponse(status_code=status_code, content=exc.to_dict())


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {"message": "plann.er API", "version": "0.1.0"}
