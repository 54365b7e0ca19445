# app/users/service.py
from __future__ import annotations
import logging
from sqlalchemy.ext.asyncio import AsyncSession
from app.users.repository import get_by_login, username_or_email_taken, create_user
from app.users.models import User
from app.users.schemas import UserCreate
from app.core.security import TokenService, hash_password, verify_password
from app.core.errors import Conflict, InvalidCredentials

log = logging.getLogger("uvicorn")


def identity_of(user: User) -> dict:
    return {"id": user.id, "username": user.username, "email": user.email}


async def register_user(db: AsyncSession, tokens: TokenService, data: UserCreate) -> tuple[User, str]:
    if await username_or_email_taken(db, data.username, data.email):
        raise Conflict()

    hashed = hash_password(data.password)
    user = await create_user(db, data.username, data.email, hashed)
    log.info(f"👤 usuario registrado: {user.username} (id={user.id})")

    # El commit lo hace el router
    return user, tokens.issue(identity_of(user))


async def authenticate_user(db: AsyncSession, username_or_email: str, password: str) -> User | None:
    user = await get_by_login(db, username_or_email)
    if not user:
        return None
    if not verify_password(password, user.hashed_password):
        return None
    return user


async def login_user(db: AsyncSession, tokens: TokenService, username_or_email: str, password: str) -> tuple[User, str]:
    user = await authenticate_user(db, username_or_email, password)
    if not user:
        # mismo mensaje exista o no la cuenta
        raise InvalidCredentials()
    return user, tokens.issue(identity_of(user))
