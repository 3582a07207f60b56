"""
ASGI entrypoint: expose `app` pour les process managers / déploiements.

- En production, un process manager (ex: gunicorn avec workers uvicorn) importe `fastmover.asgi:app`.
- Toute la configuration FastAPI est centralisée dans fastmover.app_setup.factory.
"""

from fastmover.app import app
