"""Coarse role gate for administrative endpoints.

The upstream gateway authenticates the caller and forwards its role claim in
the ``X-User-Role`` header. Domain code never looks at roles; only routers
depend on this.
"""

from fastapi import Header

from shared.errors import Forbidden

ADMIN_ROLE = "admin"


def require_admin(x_user_role: str = Header(default="")) -> str:
    if x_user_role != ADMIN_ROLE:
        raise Forbidden("Admin role required")
    return x_user_role
