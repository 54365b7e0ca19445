# app/users/router.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_session
from app.core.deps import get_current_user, get_token_service
from app.core.errors import Conflict, NotFound
from app.core.security import TokenService
from app.users.schemas import UserCreate, LoginRequest, UserOut, AuthResponse
from app.users import service as svc
from app.users.repository import get_by_id
from sqlalchemy.exc import IntegrityError

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    payload: UserCreate,
    db: AsyncSession = Depends(get_session),
    tokens: TokenService = Depends(get_token_service),
):
    try:
        user, token = await svc.register_user(db, tokens, payload)
        await db.commit()
    except IntegrityError:
        # carrera entre dos registros con el mismo username/email
        await db.rollback()
        raise Conflict()
    return {"message": "user registered", "token": token, "user": user}


@router.post("/login", response_model=AuthResponse)
async def login(
    payload: LoginRequest,
    db: AsyncSession = Depends(get_session),
    tokens: TokenService = Depends(get_token_service),
):
    """
    JSON con:
    - username (puedes usar también el email)
    - password
    """
    user, token = await svc.login_user(db, tokens, payload.username, payload.password)
    return {"message": "login successful", "token": token, "user": user}


@router.get("/me", response_model=UserOut)
async def me(
    db: AsyncSession = Depends(get_session),
    identity: dict = Depends(get_current_user),
):
    user = await get_by_id(db, int(identity["id"]))
    if not user:
        raise NotFound("user not found")
    return user
