from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any

from jose import jwt, JWTError, ExpiredSignatureError
from passlib.context import CryptContext

ALGORITHM = "HS256"

# Usa SOLO argon2 para nuevos hashes (evita líos de bcrypt en Windows)
pwd_context = CryptContext(
    schemes=["argon2"],
    default="argon2",
    deprecated="auto",
)

def hash_password(password: str) -> str:
    return pwd_context.hash(password)

def verify_password(password: str, hashed: str) -> bool:
    # passlib compara en tiempo constante
    return pwd_context.verify(password, hashed)


class TokenError(str, enum.Enum):
    MALFORMED = "malformed"
    INVALID_SIGNATURE = "invalid_signature"
    EXPIRED = "expired"


@dataclass(frozen=True)
class TokenCheck:
    """
    Resultado de verificar un token: o trae `claims` o trae `error`, nunca ambos.
    """
    claims: dict[str, Any] | None = None
    error: TokenError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class TokenService:
    """
    Emite y verifica los JWT de sesión (HS256, sin estado en el servidor).
    """

    def __init__(self, secret_key: str, expire_minutes: int = 1440):
        self.secret_key = secret_key
        self.lifetime = timedelta(minutes=expire_minutes)

    def issue(self, identity: dict[str, Any], now: datetime | None = None) -> str:
        issued = now or datetime.now(timezone.utc)
        payload = {
            "id": identity["id"],
            "sub": str(identity["id"]),
            "username": identity["username"],
            "email": identity["email"],
            "iat": int(issued.timestamp()),
            "exp": int((issued + self.lifetime).timestamp()),
        }
        return jwt.encode(payload, self.secret_key, algorithm=ALGORITHM)

    def verify(self, token: str, now: datetime | None = None) -> TokenCheck:
        # 1) ¿se puede decodificar?
        try:
            unverified = jwt.get_unverified_claims(token)
        except JWTError:
            return TokenCheck(error=TokenError.MALFORMED)
        if not isinstance(unverified, dict):
            return TokenCheck(error=TokenError.MALFORMED)

        # 2) firma (la expiración la revisamos aparte para poder inyectar `now`)
        try:
            claims = jwt.decode(
                token,
                self.secret_key,
                algorithms=[ALGORITHM],
                options={"verify_exp": False},
            )
        except ExpiredSignatureError:
            return TokenCheck(error=TokenError.EXPIRED)
        except JWTError:
            return TokenCheck(error=TokenError.INVALID_SIGNATURE)

        # 3) expiración
        exp = claims.get("exp")
        if not isinstance(exp, (int, float)):
            return TokenCheck(error=TokenError.MALFORMED)
        current = now or datetime.now(timezone.utc)
        if current.timestamp() > exp:
            return TokenCheck(error=TokenError.EXPIRED)

        return TokenCheck(claims=claims)
