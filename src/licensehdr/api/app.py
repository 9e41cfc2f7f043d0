"""FastAPI application serving licensehdr change discovery over HTTP."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..logging_utils import configure_logging
from ..settings import get_api_address
from . import __version__
from .routes import router as api_router

configure_logging()

logger = logging.getLogger(__name__)

app = FastAPI(
    title="licensehdr API",
    description="Changed files and copyright year ranges of a git working tree",
    version=__version__,
)

app.include_router(api_router)


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    """Answer with an INTERNAL_ERROR envelope, as the CLI does."""
    logger.exception("Unexpected error", extra={"path": request.url.path})
    return JSONResponse(
        status_code=500,
        content={
            "ok": False,
            "error": {
                "code": "INTERNAL_ERROR",
                "message": f"Internal error: {exc}",
                "details": {"type": type(exc).__name__},
            },
        },
    )


def serve() -> None:
    """Run the API with uvicorn on ``LICENSEHDR_API_HOST``/``LICENSEHDR_API_PORT``."""
    import uvicorn

    host, port = get_api_address()
    logger.info("Starting licensehdr API", extra={"host": host, "port": port})
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    serve()
