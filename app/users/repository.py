# app/users/repository.py
from sqlalchemy import select, or_
from sqlalchemy.ext.asyncio import AsyncSession
from app.users.models import User

async def get_by_id(db: AsyncSession, user_id: int) -> User | None:
    res = await db.execute(select(User).where(User.id == user_id))
    return res.scalar_one_or_none()

async def get_by_login(db: AsyncSession, login: str) -> User | None:
    """
    El campo "username" del login puede ser el username o el email.
    """
    res = await db.execute(
        select(User).where(or_(User.username == login, User.email == login)).limit(1)
    )
    return res.scalar_one_or_none()

async def username_or_email_taken(db: AsyncSession, username: str, email: str) -> bool:
    res = await db.execute(
        select(User.id).where(or_(User.username == username, User.email == email)).limit(1)
    )
    return res.scalar_one_or_none() is not None

async def create_user(db: AsyncSession, username: str, email: str, hashed_password: str) -> User:
    user = User(username=username, email=email, hashed_password=hashed_password)
    db.add(user)
    await db.flush()
    await db.refresh(user)
    return user
