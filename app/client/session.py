# app/client/session.py
from __future__ import annotations

import json
import logging
import os
from typing import Any

import httpx

log = logging.getLogger("uvicorn")


class NotAuthenticated(Exception):
    """No hay sesión: el equivalente a redirigir a /login."""


class ApiError(Exception):
    def __init__(self, status: int, message: str, details: list | None = None):
        self.status = status
        self.message = message
        self.details = details or []
        super().__init__(f"{status}: {message}")


class SessionStore:
    """
    Guarda {token, user} en un JSON en disco (lo que en el navegador sería localStorage).
    """

    def __init__(self, path: str):
        self.path = path

    def load(self) -> dict[str, Any] | None:
        if not os.path.exists(self.path):
            return None
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            log.warning(f"⚠️ sesión guardada ilegible ({self.path}): {e!r}")
            return None
        if not isinstance(data, dict) or not data.get("token"):
            return None
        return data

    def save(self, token: str, user: dict[str, Any]) -> None:
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump({"token": token, "user": user}, f, ensure_ascii=False)

    def clear(self) -> None:
        if os.path.exists(self.path):
            os.remove(self.path)


class BrandsClient:
    """
    Cliente del API de marcas que mantiene la sesión actual (token + usuario).

    Todas las operaciones de marcas pasan por `require_auth()`: sin sesión
    lanzan NotAuthenticated sin tocar la red. Si el servidor responde 401/403
    la sesión se descarta.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        http: httpx.Client | None = None,
        store: SessionStore | None = None,
        timeout: float = 10.0,
    ):
        self.http = http or httpx.Client(base_url=base_url, timeout=timeout)
        self.store = store
        self.token: str | None = None
        self.user: dict[str, Any] | None = None

        # restaura la sesión guardada al arrancar
        if self.store:
            saved = self.store.load()
            if saved:
                self.token = saved["token"]
                self.user = saved.get("user")

    # ------------------------------------------------------------------
    # sesión
    # ------------------------------------------------------------------
    @property
    def is_authenticated(self) -> bool:
        return bool(self.token and self.user)

    def require_auth(self) -> None:
        if not self.is_authenticated:
            raise NotAuthenticated("login required")

    def login(self, username: str, password: str) -> dict[str, Any]:
        data = self._request("POST", "/api/auth/login", json={"username": username, "password": password})
        self._set_session(data["token"], data["user"])
        return data["user"]

    def register(self, username: str, email: str, password: str) -> dict[str, Any]:
        data = self._request(
            "POST",
            "/api/auth/register",
            json={"username": username, "email": email, "password": password},
        )
        self._set_session(data["token"], data["user"])
        return data["user"]

    def logout(self) -> None:
        self.token = None
        self.user = None
        if self.store:
            self.store.clear()

    def _set_session(self, token: str, user: dict[str, Any]) -> None:
        self.token = token
        self.user = user
        if self.store:
            self.store.save(token, user)

    # ------------------------------------------------------------------
    # marcas
    # ------------------------------------------------------------------
    def list_brands(self, page: int = 1, limit: int = 10, search: str = "") -> dict[str, Any]:
        params: dict[str, Any] = {"page": page, "limit": limit}
        if search:
            params["search"] = search
        return self._authed("GET", "/api/brands", params=params)

    def get_brand(self, brand_id: int) -> dict[str, Any]:
        return self._authed("GET", f"/api/brands/{brand_id}")

    def create_brand(self, fields: dict[str, Any]) -> dict[str, Any]:
        return self._authed("POST", "/api/brands", json=fields)

    def update_brand(self, brand_id: int, fields: dict[str, Any]) -> dict[str, Any]:
        return self._authed("PUT", f"/api/brands/{brand_id}", json=fields)

    def delete_brand(self, brand_id: int) -> dict[str, Any]:
        return self._authed("DELETE", f"/api/brands/{brand_id}")

    # ------------------------------------------------------------------
    # http
    # ------------------------------------------------------------------
    def _authed(self, method: str, path: str, **kwargs) -> Any:
        self.require_auth()
        headers = {"Authorization": f"Bearer {self.token}"}
        try:
            return self._request(method, path, headers=headers, **kwargs)
        except ApiError as e:
            if e.status in (401, 403):
                # token vencido o inválido → fuera
                log.info(f"🔒 sesión descartada ({e.status})")
                self.logout()
            raise

    def _request(self, method: str, path: str, **kwargs) -> Any:
        res = self.http.request(method, path, **kwargs)
        try:
            body = res.json()
        except ValueError:
            body = None
        if res.is_error:
            message = body.get("error") if isinstance(body, dict) else None
            details = body.get("details") if isinstance(body, dict) else None
            raise ApiError(res.status_code, message or res.reason_phrase, details)
        return body

    def close(self) -> None:
        self.http.close()
