import logging
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from app.db.base import Base
from app.core.security import hash_password

# 👇 importa todos los modelos que deben existir en la DB
from app.users.models import User
from app.brands.models import Brand

log = logging.getLogger("uvicorn")

SEED_USER = {"username": "admin", "email": "admin@example.com", "password": "admin123"}

SEED_BRANDS = [
    {
        "name": "Apple",
        "description": "Fabricante estadounidense de ordenadores personales, tabletas y teléfonos",
        "logo_url": "https://upload.wikimedia.org/wikipedia/commons/f/fa/Apple_logo_black.svg",
        "website": "https://www.apple.com",
        "founded_year": 1976,
        "country": "USA",
        "industry": "Technology",
    },
    {
        "name": "Nike",
        "description": "Compañía estadounidense de ropa y calzado deportivo",
        "logo_url": "https://upload.wikimedia.org/wikipedia/commons/a/a6/Logo_NIKE.svg",
        "website": "https://www.nike.com",
        "founded_year": 1964,
        "country": "USA",
        "industry": "Sportswear",
    },
    {
        "name": "Coca-Cola",
        "description": "Compañía estadounidense de bebidas sin alcohol",
        "logo_url": "https://upload.wikimedia.org/wikipedia/commons/c/ce/Coca-Cola_logo.svg",
        "website": "https://www.coca-cola.com",
        "founded_year": 1886,
        "country": "USA",
        "industry": "Beverages",
    },
]


async def init_models(engine: AsyncEngine):
    """
    Crea/verifica todas las tablas declaradas en Base.metadata
    """
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        log.info("✅ DB init: tablas creadas/verificadas.")
    except Exception as e:
        log.error(f"❌ DB init falló: {e!r}")
        raise


async def seed_data(sessionmaker: async_sessionmaker[AsyncSession]):
    """
    Solo si las tablas están vacías: usuario admin + 3 marcas de ejemplo.
    """
    async with sessionmaker() as db:
        users = (await db.execute(select(func.count()).select_from(User))).scalar_one()
        if not users:
            db.add(
                User(
                    username=SEED_USER["username"],
                    email=SEED_USER["email"],
                    hashed_password=hash_password(SEED_USER["password"]),
                )
            )
            log.info(f"👤 seed: usuario {SEED_USER['username']} creado")

        brands = (await db.execute(select(func.count()).select_from(Brand))).scalar_one()
        if not brands:
            db.add_all([Brand(**b) for b in SEED_BRANDS])
            log.info(f"🏷️ seed: {len(SEED_BRANDS)} marcas de ejemplo")

        await db.commit()
