from __future__ import annotations

import logging
from typing import Any, Callable

from fastapi import Depends, Header, Request

from app.core.errors import Forbidden, Unauthenticated
from app.core.security import TokenService

log = logging.getLogger("uvicorn")


def get_token_service(request: Request) -> TokenService:
    return request.app.state.tokens


def _extract_bearer(authorization: str | None) -> str | None:
    # "Bearer <token>" → "<token>"
    if not authorization:
        return None
    scheme, _, credential = authorization.partition(" ")
    if scheme.lower() != "bearer" or not credential.strip():
        return None
    return credential.strip()


async def get_current_user(
    request: Request,
    authorization: str | None = Header(None),
    tokens: TokenService = Depends(get_token_service),
) -> dict[str, Any]:
    """
    Guardia de rutas privadas: 401 si no hay token, 403 si el token no sirve.
    Deja la identidad en request.state.user para los handlers.
    """
    token = _extract_bearer(authorization)
    if not token:
        raise Unauthenticated()

    check = tokens.verify(token)
    if not check.ok:
        log.info(f"🔒 token rechazado ({check.error.value}) en {request.url.path}")
        raise Forbidden()

    request.state.user = check.claims
    return check.claims


def require_role(role: str) -> Callable:
    """
    Chequeo opcional de rol. Hoy ningún token lleva `role`, así que cualquier
    ruta protegida con esto responde 403.
    """

    async def _checker(request: Request, user: dict[str, Any] = Depends(get_current_user)):
        identity = getattr(request.state, "user", None) or user
        if not identity:
            raise Unauthenticated("authentication required")
        if identity.get("role") != role:
            raise Forbidden("insufficient permissions")
        return identity

    return _checker
