"""
Paquete `app`: API de catálogo de marcas (FastAPI + SQLAlchemy async).

En Windows forzamos el Proactor al importar el paquete, así uvicorn con
--reload, alembic y los tests usan el mismo event loop.
"""

import sys
import asyncio

if sys.platform.startswith("win"):
    try:
        asyncio.set_event_loop_policy(asyncio.WindowsProactorEventLoopPolicy())
    except AttributeError:
        # policy no disponible en este Python
        pass
