# app/brands/service.py
from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from app.brands import repository as repo
from app.brands.models import Brand
from app.brands.schemas import BrandIn
from app.core.errors import NotFound, ValidationFailed, field_errors

log = logging.getLogger("uvicorn")

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


def coerce_positive_int(value: Any, default: int) -> int:
    """
    "abc", None, "0" o "-3" → default. Nunca falla.
    """
    try:
        n = int(str(value).strip())
    except (TypeError, ValueError):
        return default
    return n if n >= 1 else default


async def list_brands(
    db: AsyncSession,
    page: Any = None,
    limit: Any = None,
    search: str | None = None,
) -> dict:
    page = coerce_positive_int(page, DEFAULT_PAGE)
    limit = coerce_positive_int(limit, DEFAULT_LIMIT)
    search = search or None

    # mismo filtro para el conteo y para la página
    total = await repo.count_brands(db, search)
    total_pages = -(-total // limit)  # ceil entero, sin pasar por float
    offset = (page - 1) * limit
    items = []
    # fuera de rango: lista vacía sin consultar (page/limit gigantes no caben en un INTEGER)
    if offset < total:
        items = await repo.list_brands(db, limit=min(limit, total), offset=offset, search=search)

    return {
        "brands": items,
        "total": total,
        "page": page,
        "totalPages": total_pages,
        "hasNext": page < total_pages,
        "hasPrev": page > 1,
    }


async def get_brand(db: AsyncSession, brand_id: int) -> Brand:
    brand = await repo.get_brand(db, brand_id)
    if not brand:
        raise NotFound("brand not found")
    return brand


async def create_brand(db: AsyncSession, data: BrandIn) -> Brand:
    brand = await repo.create_brand(db, data.model_dump())
    log.info(f"🏷️ marca creada: {brand.name} (id={brand.id})")
    return brand


async def update_brand(db: AsyncSession, brand_id: int, payload: Any) -> Brand:
    # 1) existe?  2) payload válido?
    brand = await get_brand(db, brand_id)
    try:
        data = BrandIn.model_validate(payload)
    except ValidationError as e:
        raise ValidationFailed(details=field_errors(e.errors()))
    return await repo.replace_brand(db, brand, data.model_dump())


async def delete_brand(db: AsyncSession, brand_id: int) -> None:
    if not await repo.delete_brand(db, brand_id):
        raise NotFound("brand not found")
    log.info(f"🗑️ marca eliminada: id={brand_id}")
