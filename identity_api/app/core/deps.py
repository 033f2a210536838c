"""
FastAPI dependencies shared by the v1 routers.

``get_store`` resolves the application's ``Store`` from ``app.state``
so routers never import a module-level instance.  ``get_origin``
captures the caller's network address and user agent for audit and
activity records.  ``list_limit`` parses the ``?limit=`` query
parameter leniently: anything that is not an integer falls back to
the configured default.
"""

from dataclasses import dataclass
from typing import Optional

from fastapi import Query, Request

from .config import settings
from .store import Store


@dataclass(frozen=True)
class RequestOrigin:
    """Where a request came from."""

    ip_address: str = ""
    user_agent: str = ""


def get_store(request: Request) -> Store:
    return request.app.state.store


def get_origin(request: Request) -> RequestOrigin:
    client_ip = request.client.host if request.client else ""
    return RequestOrigin(
        ip_address=client_ip,
        user_agent=request.headers.get("user-agent", ""),
    )


def parse_limit(raw: Optional[str], default: int) -> int:
    if raw is None:
        return default
    try:
        return max(int(raw), 0)
    except ValueError:
        return default


def list_limit(
    limit: Optional[str] = Query(None, description="Maximum number of entries to return"),
) -> int:
    return parse_limit(limit, settings.default_list_limit)
