"""
Placeholder HTTP server for the GitHub API service
"""

import logging
import time

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from . import __version__
from .utils.logger import init_logging

log = logging.getLogger(__name__)

HOST = "127.0.0.1"
PORT = 3000


async def root() -> str:
    return "hello world"


def create_app() -> FastAPI:
    """Build the application with its single route and request tracing"""
    app = FastAPI(title="GitHub API Service", version=__version__)

    @app.middleware("http")
    async def trace_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000
        log.info(
            "%s %s %s %.2fms",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response

    app.add_api_route("/", root, methods=["GET"], response_class=PlainTextResponse)
    return app


app = create_app()


def run():
    """Serve on 127.0.0.1:3000 until the process is stopped"""
    init_logging()
    log.debug("Listening on %s:%s", HOST, PORT)
    # uvicorn exits the process with status 1 when the socket cannot be bound
    uvicorn.run(app, host=HOST, port=PORT, log_config=None)
