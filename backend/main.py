# backend/main.py

import argparse
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from middleware.payload_size_limit import PayloadSizeLimitMiddleware
from middleware.request_timing import RequestTimingMiddleware
from routers import upload_router, users_router
from utils.data_store import DataStore
from utils.logging_config import configure_logging
from utils.settings import Settings

logger = logging.getLogger(__name__)


# ---------------------------------------------------------
# ERROR HANDLERS
# ---------------------------------------------------------

async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.info("invalid request path=%s errors=%s", request.url.path, exc.errors())
    return JSONResponse(status_code=422, content={"message": "Invalid request"})


async def unhandled_error_handler(request: Request, exc: Exception):
    # Never expose internal errors to the client
    logger.exception("unhandled error path=%s", request.url.path)
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


# ---------------------------------------------------------
# APP INIT
# ---------------------------------------------------------

def create_app(settings: Optional[Settings] = None, store: Optional[DataStore] = None) -> FastAPI:
    """
    Build the API. Each app owns its own DataStore so tests can spin up
    isolated instances.
    """
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    app = FastAPI(title="CSV Search API", version="0.1.0")
    app.state.settings = settings
    app.state.store = store if store is not None else DataStore()

    app.add_middleware(PayloadSizeLimitMiddleware, max_size=settings.max_upload_bytes)
    app.add_middleware(RequestTimingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(upload_router)
    app.include_router(users_router)

    @app.get("/")
    def root():
        return {"message": "CSV search API running."}

    logger.info(
        "app created max_upload_bytes=%d cors_allowed_origins=%s",
        settings.max_upload_bytes,
        ",".join(settings.cors_allowed_origins),
    )
    return app


app = create_app()


def main(argv=None):
    import uvicorn

    defaults = Settings.from_env()
    parser = argparse.ArgumentParser(description="Serve the CSV search API.")
    parser.add_argument("--port", type=int, default=defaults.port, help="HTTP port")
    parser.add_argument("--host", default=defaults.host, help="Interface to bind")
    args = parser.parse_args(argv)

    logger.info("listening host=%s port=%d", args.host, args.port)
    uvicorn.run(app, host=args.host, port=args.port, log_level=defaults.log_level.lower())


if __name__ == "__main__":
    main()
