"""
Lifespan FastAPI: initialisation/arrêt des ressources partagées.
- Ouvre le client Supabase une seule fois et le dépose sur app.state.supabase.
- Vérifie la connexion (ping); un échec est journalisé sans empêcher le démarrage.
- Ferme le client à l'arrêt du process.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from fastmover.errors import UpstreamError
from fastmover.health.service import ping
from fastmover.infra.supabase_client import close_supabase_client, create_supabase_client

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger = logging.getLogger("uvicorn.error")
    client = create_supabase_client()
    app.state.supabase = client
    try:
        ping(client)
        logger.info("Supabase reachable, parcels and payments tables ready")
    except UpstreamError as e:
        logger.warning(f"Supabase ping failed at startup: {e.message}")

    try:
        yield
    finally:
        app.state.supabase = None
        close_supabase_client(client)
        logger.info("Supabase client closed")
