# run_dev.py
import os
import sys
import asyncio


# Proactor también aquí (por si corres este script directo en Windows)
if sys.platform.startswith("win"):
    try:
        asyncio.set_event_loop_policy(asyncio.WindowsProactorEventLoopPolicy())
    except AttributeError:
        pass


# Carga .env si existe (SECRET_KEY, DATABASE_URL, ...)
if os.path.exists(".env"):
    from dotenv import load_dotenv
    load_dotenv(".env")


def _reload_flag() -> bool:
    reload_env = os.getenv("RELOAD")
    if reload_env is not None:
        # si lo ponen a mano en el entorno, respetamos eso
        return reload_env.strip() in ("1", "true", "True", "yes", "on")
    # valor por defecto: en Windows -> False, en otros -> True
    return not sys.platform.startswith("win")


def main():
    import uvicorn

    spec = os.getenv("APP_MODULE", "app.main:app")
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    reload_flag = _reload_flag()

    print(f"🔗 API local: http://127.0.0.1:{port}")
    print(f"📖 Docs:      http://127.0.0.1:{port}/docs")
    print(f"🌀 reload={'ON' if reload_flag else 'OFF'}")

    uvicorn.run(
        spec,
        host=host,
        port=port,
        reload=reload_flag,
        reload_dirs=["app"],
        reload_excludes=[".venv", ".git", "__pycache__"],
        timeout_keep_alive=30,
        log_level=os.getenv("LOG_LEVEL", "info"),
        lifespan="on",
    )


if __name__ == "__main__":
    main()
