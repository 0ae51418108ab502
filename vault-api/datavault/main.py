from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from datavault.api import api_router
from datavault.config import settings
from datavault.database import close_db, init_db
from datavault.errors import DataVaultError
from datavault.services.link_preview import LinkPreviewService
from datavault.utils.logging import configure_logging

logger = structlog.get_logger(logger_name=__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    # Startup
    configure_logging(settings.log_level, json_output=settings.log_json)
    await init_db()
    client = LinkPreviewService.create_client(settings)
    app.state.link_preview_service = LinkPreviewService(client, settings)
    logger.info("startup_complete", app=settings.app_name)
    yield
    # Shutdown
    await client.aclose()
    await close_db()


app = FastAPI(title=settings.app_name, lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(api_router)


@app.exception_handler(DataVaultError)
async def datavault_error_handler(request: Request, exc: DataVaultError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.get("/health", tags=["system"])
async def healthcheck() -> dict[str, str]:
    return {"status": "ok", "app": settings.app_name}
