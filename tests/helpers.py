# tests/helpers.py
from typing import Optional

from aiohttp import web


def json_handler(body: str, status: int = 200, seen: Optional[list] = None):
    """aiohttp handler answering every request with a fixed JSON body."""

    async def _handler(request):
        if seen is not None:
            seen.append(request)
        return web.Response(text=body, status=status, content_type="application/json")

    return _handler


def base_url(server) -> str:
    return str(server.make_url(""))
