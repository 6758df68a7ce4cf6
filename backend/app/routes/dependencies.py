"""
Shared route dependencies: page parsing, path ids and app.state lookups.

Each list route picks its pagination family by calling page_params():

    lenient_page = page_params(strict=False)   # users, menus, orders, shippings
    strict_page  = page_params(strict=True)    # payments, restaurants
"""

from typing import Callable, Optional

from fastapi import Path, Query, Request

from app.config import Settings
from app.services.auth_service import AuthService
from app.services.resource_service import PageRequest, parse_id


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service


def page_params(strict: bool) -> Callable[..., PageRequest]:
    # limit/page arrive as raw strings; PageRequest.from_query does the parsing
    def dependency(
        request: Request,
        limit: Optional[str] = Query(default=None, description="Page size (enables pagination)"),
        page: Optional[str] = Query(default=None, description="1-based page number"),
    ) -> PageRequest:
        return PageRequest.from_query(
            limit,
            page,
            strict=strict,
            max_page_size=get_settings(request).max_page_size,
        )

    return dependency


lenient_page = page_params(strict=False)
strict_page = page_params(strict=True)


def path_id(item_id: str = Path(description="Positive integer primary key")) -> int:
    return parse_id(item_id)
