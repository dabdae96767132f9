"""Main FastAPI application."""

import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from backend.config import settings
from backend.api.routes import schema
from schema2script.config import get_config
from schema2script.utils.logging import get_logger, setup_logging

_logging_config = get_config("logging")
setup_logging(
    level=settings.log_level or _logging_config.get("level", "INFO"),
    format_type=_logging_config.get("format_type", "detailed"),
    log_to_file=bool(_logging_config.get("log_to_file", False)),
    log_file=_logging_config.get("log_file"),
)
# Request logging below replaces uvicorn's access log
get_logger("uvicorn.access").setLevel("WARNING")

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup/shutdown events."""
    logger.info(f"Schema store: {settings.schema_store_path} | script output: {settings.script_output_path}")
    yield
    logger.info("Shutting down schema editing backend")


app = FastAPI(
    title=settings.api_title,
    version=settings.api_version,
    lifespan=lifespan
)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} ({process_time:.3f}s)"
        )
        return response


app.add_middleware(RequestLoggingMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(schema.router)


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    # Single worker: the editing session lives in this process
    uvicorn.run(app, host=settings.host, port=settings.port, workers=1, log_config=None, access_log=False)
