"""Shared cross-cutting helpers (request context, logging)."""

from app.shared.context import get_request_id, reset_request_id, set_request_id
from app.shared.logging import RequestIdFilter, setup_logging

__all__ = [
    "RequestIdFilter",
    "get_request_id",
    "reset_request_id",
    "set_request_id",
    "setup_logging",
]
