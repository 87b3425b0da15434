"""FastAPI application entry point."""

from contextlib import asynccontextmanager

import uvicorn
from ddtrace import patch_all
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from echoscribe.dependencies import get_config, init_database
from echoscribe.logging import setup_logging
from echoscribe.routes import health_router, notes_router

patch_all()

logger = setup_logging()

_config = get_config()


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_database()
    logger.info("Server is ready", extra={"port": _config.server.port})
    yield


app = FastAPI(title="EchoScribe Notes API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[_config.server.cors_origin],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(notes_router)
app.include_router(health_router)
app.mount(
    _config.storage.url_prefix,
    StaticFiles(directory=_config.storage.upload_dir),
    name="uploads",
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(
        "Request validation failed",
        extra={
            "path": request.url.path,
            "fields": [".".join(str(part) for part in err["loc"]) for err in exc.errors()],
        },
    )
    return JSONResponse(status_code=422, content={"error": "Invalid request."})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(
        "Unhandled error",
        extra={"path": request.url.path, "method": request.method},
    )
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def run():
    """Starts the HTTP server."""
    uvicorn.run(app, host=_config.server.host, port=_config.server.port, log_config=None)


if __name__ == "__main__":
    run()
