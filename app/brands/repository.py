# app/brands/repository.py
from sqlalchemy import select, desc, func, delete, or_
from sqlalchemy.ext.asyncio import AsyncSession
from app.brands.models import Brand

MUTABLE_FIELDS = (
    "name",
    "description",
    "logo_url",
    "website",
    "founded_year",
    "country",
    "industry",
)


def _search_filter(search: str):
    # LIKE sin comodines del usuario (autoescape), sin distinguir mayúsculas
    return or_(
        Brand.name.icontains(search, autoescape=True),
        Brand.description.icontains(search, autoescape=True),
    )


async def count_brands(db: AsyncSession, search: str | None = None) -> int:
    q = select(func.count()).select_from(Brand)
    if search:
        q = q.where(_search_filter(search))
    res = await db.execute(q)
    return int(res.scalar_one() or 0)


async def list_brands(
    db: AsyncSession,
    limit: int = 10,
    offset: int = 0,
    search: str | None = None,
) -> list[Brand]:
    """
    Marcas más nuevas primero; `id` desempata las creadas en el mismo segundo.
    """
    q = select(Brand)
    if search:
        q = q.where(_search_filter(search))
    q = (
        q.order_by(desc(Brand.created_at), desc(Brand.id))
        .limit(limit)
        .offset(offset)
    )
    res = await db.execute(q)
    return list(res.scalars())


async def get_brand(db: AsyncSession, brand_id: int) -> Brand | None:
    res = await db.execute(select(Brand).where(Brand.id == brand_id))
    return res.scalar_one_or_none()


async def create_brand(db: AsyncSession, fields: dict) -> Brand:
    brand = Brand(**{k: fields.get(k) for k in MUTABLE_FIELDS})
    db.add(brand)
    await db.flush()
    await db.refresh(brand)
    return brand


async def replace_brand(db: AsyncSession, brand: Brand, fields: dict) -> Brand:
    # reemplazo completo, no merge parcial
    for k in MUTABLE_FIELDS:
        setattr(brand, k, fields.get(k))
    brand.updated_at = func.now()
    await db.flush()
    await db.refresh(brand)
    return brand


async def delete_brand(db: AsyncSession, brand_id: int) -> bool:
    res = await db.execute(delete(Brand).where(Brand.id == brand_id))
    await db.flush()
    return (res.rowcount or 0) > 0
