"""Audit logging for destructive actions."""

import logging

from fastapi import Request

logger = logging.getLogger("audit")


def audit_logged(action: str):
    """Dependency factory that logs destructive actions.

    Usage::

        @router.delete("/sections/{section_id}", dependencies=[Depends(audit_logged("delete_section"))])
    """

    async def _log(request: Request) -> None:
        client_ip = request.client.host if request.client else "unknown"
        request_id = getattr(request.state, "request_id", "n/a")
        logger.info(
            "AUDIT action=%s ip=%s request_id=%s path=%s",
            action,
            client_ip,
            request_id,
            request.url.path,
        )

    return _log
