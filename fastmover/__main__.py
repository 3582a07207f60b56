"""
Point d'entrée principal du service.

Usage:
    python -m fastmover

Lance uvicorn directement avec les réglages de fastmover.config:
- PORT: port d'écoute (par défaut 3000)
- UVICORN_RELOAD: active le reload auto en dev ("1"/"true"/"yes")
- LOG_LEVEL: niveau de logs uvicorn (ex: "info", "debug")
"""
import uvicorn

from fastmover.config import LOG_LEVEL, PORT, UVICORN_RELOAD

if __name__ == "__main__":
    uvicorn.run(
        "fastmover.asgi:app",
        host="0.0.0.0",
        port=PORT,
        reload=UVICORN_RELOAD,
        log_level=LOG_LEVEL,
    )
