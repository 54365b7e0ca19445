# app/brands/router.py
from typing import Any

from fastapi import APIRouter, Body, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_session
from app.core.deps import get_current_user
from app.brands.schemas import BrandIn, BrandOut, BrandPage
from app.brands import service as svc

# todas las rutas de marcas requieren token
router = APIRouter(
    prefix="/api/brands",
    tags=["brands"],
    dependencies=[Depends(get_current_user)],
)


@router.get("", response_model=BrandPage)
async def list_brands(
    page: str | None = Query(None),
    limit: str | None = Query(None),
    search: str | None = Query(None),
    db: AsyncSession = Depends(get_session),
):
    # page/limit llegan como texto: lo no numérico cae al default
    return await svc.list_brands(db, page=page, limit=limit, search=search)


@router.get("/{brand_id}", response_model=BrandOut)
async def get_brand(brand_id: int, db: AsyncSession = Depends(get_session)):
    return await svc.get_brand(db, brand_id)


@router.post("", response_model=BrandOut, status_code=status.HTTP_201_CREATED)
async def create_brand(payload: BrandIn, db: AsyncSession = Depends(get_session)):
    brand = await svc.create_brand(db, payload)
    await db.commit()
    return brand


@router.put("/{brand_id}", response_model=BrandOut)
async def update_brand(
    brand_id: int,
    payload: dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_session),
):
    # se valida dentro del servicio, DESPUÉS de comprobar que existe (404 antes que 400)
    brand = await svc.update_brand(db, brand_id, payload)
    await db.commit()
    return brand


@router.delete("/{brand_id}")
async def delete_brand(brand_id: int, db: AsyncSession = Depends(get_session)):
    await svc.delete_brand(db, brand_id)
    await db.commit()
    return {"message": "brand deleted"}
